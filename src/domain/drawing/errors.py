"""Errors raised while configuring chart series.

All of them are raised eagerly by setters and constructors; serialization
never raises them.
"""

from typing import Any, Iterable, Tuple


class ChartValidationError(Exception):
    """Base class for rejected chart configuration values."""

    def __init__(self, name: str, value: Any, message: str) -> None:
        super().__init__(message)
        self.name = name
        self.value = value


class TypeMismatchError(ChartValidationError, TypeError):
    def __init__(self, name: str, expected: Iterable[type], value: Any) -> None:
        self.expected: Tuple[type, ...] = tuple(expected)
        names = ", ".join(t.__name__ for t in self.expected)
        super().__init__(name, value, f"{name} must be of type {names}, got {type(value).__name__}: {value!r}")


class InvalidDataSourceTypeError(TypeMismatchError):
    pass


class InvalidEnumValueError(ChartValidationError, ValueError):
    def __init__(self, name: str, allowed: Iterable[Any], value: Any) -> None:
        self.allowed: Tuple[str, ...] = tuple(getattr(a, "value", a) for a in allowed)
        super().__init__(name, value, f"Invalid {name}: {value!r}. Must be one of {list(self.allowed)}")


class InvalidColorValueError(ChartValidationError, ValueError):
    def __init__(self, name: str, value: Any) -> None:
        super().__init__(name, value, f"Invalid {name}: {value!r}. Expected 6 hex digits (RRGGBB)")
