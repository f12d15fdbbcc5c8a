"""Validation primitives shared by chart entities.

Each validator either returns the normalized value or raises one of the
errors from ``errors.py``; none of them mutate anything.
"""

import logging
import re
from enum import Enum
from typing import Any, Iterable, Optional, Type, TypeVar

from .errors import InvalidColorValueError, InvalidEnumValueError, TypeMismatchError
from .types import DEFAULT_MARKER, MarkerSymbol

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

_HEX_COLOR = re.compile(r"[0-9A-Fa-f]{6}")


def validate_boolean(name: str, value: Any) -> bool:
    # bool only; 0/1 and truthy strings are rejected
    if not isinstance(value, bool):
        logger.debug(f"Rejected {name}={value!r}: not a bool")
        raise TypeMismatchError(name, (bool,), value)
    return value


def validate_enum(name: str, enum_cls: Type[E], value: Any) -> E:
    """Return the member of ``enum_cls`` matching ``value`` (member or its string value)."""
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls(value)
        except ValueError:
            pass
    logger.debug(f"Rejected {name}={value!r}: not in {enum_cls.__name__}")
    raise InvalidEnumValueError(name, list(enum_cls), value)


def validate_type(name: str, types: Iterable[type], value: Any, error: Type[TypeMismatchError] = TypeMismatchError) -> Any:
    allowed = tuple(types)
    if not isinstance(value, allowed):
        logger.debug(f"Rejected {name}: {type(value).__name__} is not one of {[t.__name__ for t in allowed]}")
        raise error(name, allowed, value)
    return value


def validate_non_negative_int(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeMismatchError(name, (int,), value)
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")
    return value


def validate_marker_symbol(value: Any) -> Optional[Any]:
    """Normalize a marker symbol; ``None`` and ``"default"`` both mean the application default."""
    if value is None or value == DEFAULT_MARKER:
        return None
    try:
        return validate_enum("LineSeries.marker_symbol", MarkerSymbol, value)
    except InvalidEnumValueError as e:
        raise InvalidEnumValueError(e.name, [DEFAULT_MARKER, *e.allowed], value) from None


def validate_color(name: str, value: Any, strict: bool = False) -> Optional[str]:
    if value is None:
        return None
    validate_type(name, (str,), value)
    if not strict:
        return value
    if not _HEX_COLOR.fullmatch(value):
        logger.debug(f"Rejected {name}={value!r}: not RRGGBB")
        raise InvalidColorValueError(name, value)
    return value


def validate_choice(name: str, allowed: Iterable[str], value: Any) -> str:
    choices = tuple(allowed)
    if value not in choices:
        raise InvalidEnumValueError(name, choices, value)
    return value
