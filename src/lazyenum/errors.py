"""
Error types and argument validation.
"""

from typing import Any


class LazyEnumError(Exception):
    """Base class for all lazyenum errors."""


class InvalidArgumentError(LazyEnumError, ValueError):
    """An operator was constructed with an argument it cannot work with."""


class EmptySequenceError(LazyEnumError, LookupError):
    """A required result was requested from a sequence that has none."""


def _check_int(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"{name} must be an integer, got {type(value).__name__}"
        )


def check_positive(name: str, value: Any) -> int:
    """Validate that value is an int >= 1 and return it."""
    _check_int(name, value)
    if value < 1:
        raise InvalidArgumentError(f"{name} must be positive, got {value}")
    return value


def check_non_negative(name: str, value: Any) -> int:
    """Validate that value is an int >= 0 and return it."""
    _check_int(name, value)
    if value < 0:
        raise InvalidArgumentError(f"{name} must be non-negative, got {value}")
    return value


def check_callable(name: str, value: Any) -> Any:
    if not callable(value):
        raise InvalidArgumentError(f"{name} must be callable")
    return value
