"""
Default arguments shared by operators and aggregators.
"""

import operator
from typing import Any, TypeVar

T = TypeVar('T')


class _Missing:
    """Marker for an omitted argument, distinct from None."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()

# sorter(acc, item): True keeps acc for min-style folds, lets item replace acc
# for max-style folds.
default_sorter = operator.le


def identity(value: T) -> T:
    return value


def strict_equals(a: Any, b: Any) -> bool:
    """
    Equality without cross-type coercion.

    1, 1.0 and True compare equal under ``==``; here they do not.
    """
    if a is b:
        return True
    return type(a) is type(b) and a == b
