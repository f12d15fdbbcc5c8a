"""Unified SSOT loader for the closed value sets used in chart markup.

Provides:
- Cached YAML loading for SSOT files.
- Dynamic enum factory (string enums) based on canonical values.
- Per-value descriptions for diagnostics.

Enumerations that end up in markup (dash styles, marker symbols, groupings)
are declared once under SSOT/ and built here; nothing else should hard-code
those lists.
"""

from __future__ import annotations

import logging
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Tuple, cast

import yaml

logger = logging.getLogger(__name__)

BASE_SSOT = Path(__file__).resolve().parent / "SSOT"


class SSOTLoadError(FileNotFoundError):
    pass


@lru_cache(maxsize=16)
def _load_yaml(filename: str) -> List[Dict[str, Any]]:
    path = BASE_SSOT / filename
    if not path.exists():
        raise SSOTLoadError(f"Missing SSOT file: {path}. Base directory contents: {[p.name for p in BASE_SSOT.glob('*.yml')] if BASE_SSOT.exists() else 'N/A'}")
    with path.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if not isinstance(raw, list):
        raise ValueError(f"Unexpected YAML structure in {path}; expected list")
    data_list = cast(List[Any], raw)
    items: List[Dict[str, Any]] = [d for d in data_list if isinstance(d, dict)]
    logger.debug(f"Loaded {len(items)} SSOT entries from {filename}")
    return items


@lru_cache(maxsize=16)
def get_canonical_values(filename: str) -> Tuple[str, ...]:
    items = _load_yaml(filename)
    values: List[str] = []
    for item in items:
        val = item.get("canonical")
        if isinstance(val, str) and val.strip():
            values.append(val.strip())
    if not values:
        raise ValueError(f"No canonical values found in {filename}")
    if len(set(values)) != len(values):
        raise ValueError(f"Duplicate canonical values in {filename}: {values}")
    return tuple(values)


def create_enum(name: str, filename: str) -> Any:
    values = get_canonical_values(filename)
    # Functional API; str subclassing keeps members comparable to plain strings.
    return Enum(name, [(v, v) for v in values], type=str)


def get_descriptions(filename: str) -> Dict[str, str]:
    """Return ``canonical -> description`` for entries that carry one."""
    out: Dict[str, str] = {}
    for item in _load_yaml(filename):
        canonical = item.get("canonical")
        description = item.get("description")
        if isinstance(canonical, str) and isinstance(description, str):
            out[canonical.strip()] = description.strip()
    return out
