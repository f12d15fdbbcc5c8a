import os
from typing import Tuple, overload

from dotenv import load_dotenv

_loaded = False

_TRUTHY = ("1", "true", "yes", "on")


def _ensure_loaded() -> None:
    global _loaded
    if not _loaded:
        load_dotenv(override=False)
        _loaded = True


@overload
def optional_env(key: str) -> str | None: ...
@overload
def optional_env(*keys: str) -> Tuple[str | None, ...]: ...


def optional_env(*keys: str) -> str | None | Tuple[str | None, ...]:  # type: ignore
    _ensure_loaded()

    values: list[str | None] = []
    for key in keys:
        val = os.getenv(key)
        values.append(val.strip() if val is not None and val.strip() else None)

    return tuple(values) if len(values) > 1 else values[0]


def env_flag(key: str, default: bool = False) -> bool:
    val = optional_env(key)
    if val is None:
        return default
    return val.lower() in _TRUTHY
