"""
Reduce and the aggregators built on it.

Every function here drains its input completely. Empty input is reported
as absence (None, or the caller's default), never as an exception.

Comparators follow one convention: ``sorter(acc, item)`` is asked about the
value held so far and the next element. For min-style folds a truthy answer
keeps ``acc``; for max-style folds it lets ``item`` replace ``acc``. With the
default ``<=`` the minimum is the first of equal elements and the maximum is
the last.
"""

import operator
from typing import Any, Callable, Iterable, Optional, Tuple, TypeVar

from lazyenum.defaults import MISSING, default_sorter, identity
from lazyenum.errors import check_callable

T = TypeVar('T')
U = TypeVar('U')


def _fold(iterable: Iterable[T], func: Callable[[Any, T], Any], initial: Any = MISSING) -> Any:
    """Fold returning MISSING when there is nothing to fold."""
    acc = initial
    iterator = iter(iterable)
    if acc is MISSING:
        for acc in iterator:
            break
        else:
            return MISSING
    for item in iterator:
        acc = func(acc, item)
    return acc


def reduce(iterable: Iterable[T], func: Callable[[Any, T], Any], initial: Any = MISSING) -> Any:
    """
    Invoke func for each element with the accumulator.

    Args:
        iterable: Elements to fold
        func: Called as func(acc, item), returns the new accumulator
        initial: Starting accumulator; when omitted the first element is
            used and func is applied from the second element on

    Returns:
        The final accumulator, ``initial`` for empty input, or None for
        empty input without ``initial``
    """
    check_callable("func", func)
    result = _fold(iterable, func, initial)
    return None if result is MISSING else result


def min(iterable: Iterable[T], sorter: Callable[[T, T], Any] = default_sorter,
        default: Any = None) -> Any:
    """Minimal element, the first of equals under the default sorter."""
    result = _fold(iterable, lambda acc, item: acc if sorter(acc, item) else item)
    return default if result is MISSING else result


def max(iterable: Iterable[T], sorter: Callable[[T, T], Any] = default_sorter,
        default: Any = None) -> Any:
    """Maximal element, the last of equals under the default sorter."""
    result = _fold(iterable, lambda acc, item: item if sorter(acc, item) else acc)
    return default if result is MISSING else result


def _keyed(iterable: Iterable[T], func: Callable[[T], U]) -> Iterable[Tuple[U, T]]:
    # func runs once per element
    for item in iterable:
        yield func(item), item


def min_by(iterable: Iterable[T], func: Callable[[T], Any],
           sorter: Callable[[Any, Any], Any] = default_sorter, default: Any = None) -> Any:
    """Minimal element as calculated by func."""
    check_callable("func", func)
    result = _fold(
        _keyed(iterable, func),
        lambda acc, pair: acc if sorter(acc[0], pair[0]) else pair,
    )
    return default if result is MISSING else result[1]


def max_by(iterable: Iterable[T], func: Callable[[T], Any],
           sorter: Callable[[Any, Any], Any] = default_sorter, default: Any = None) -> Any:
    """Maximal element as calculated by func."""
    check_callable("func", func)
    result = _fold(
        _keyed(iterable, func),
        lambda acc, pair: pair if sorter(acc[0], pair[0]) else acc,
    )
    return default if result is MISSING else result[1]


def min_max(iterable: Iterable[T], sorter: Callable[[T, T], Any] = default_sorter,
            default: Any = None) -> Any:
    """
    (min, max) in a single pass.

    Both bounds are seeded from the first element; ties resolve exactly as
    in ``min`` and ``max``, so the first equal minimum and the last equal
    maximum are reported. A fold that asks ``sorter(item, acc)`` instead
    would report the last equal minimum and the first equal maximum.
    """
    return min_max_by(iterable, identity, sorter, default)


def min_max_by(iterable: Iterable[T], func: Callable[[T], Any],
               sorter: Callable[[Any, Any], Any] = default_sorter,
               default: Any = None) -> Any:
    """(min, max) as calculated by func, in a single pass."""
    check_callable("func", func)
    iterator = _keyed(iterable, func)
    for first in iterator:
        break
    else:
        return default

    low = high = first
    for pair in iterator:
        if not sorter(low[0], pair[0]):
            low = pair
        if sorter(high[0], pair[0]):
            high = pair
    return low[1], high[1]


def sum(iterable: Iterable[Any]) -> Any:
    """Sum of all elements, 0 when empty."""
    return _fold(iterable, operator.add, 0)


def product(iterable: Iterable[Any]) -> Any:
    """Product of all elements, 1 when empty."""
    return _fold(iterable, operator.mul, 1)


def count(iterable: Iterable[T], predicate: Optional[Callable[[T], Any]] = None) -> int:
    """Number of elements, or of elements for which predicate is truthy."""
    total = 0
    if predicate is None:
        for _ in iterable:
            total += 1
    else:
        for item in iterable:
            if predicate(item):
                total += 1
    return total
