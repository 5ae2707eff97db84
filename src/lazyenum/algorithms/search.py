"""
Consumers that stop pulling as soon as their answer is known.
"""

from typing import Any, Callable, Iterable, Optional, TypeVar

from lazyenum.config import config
from lazyenum.defaults import identity, strict_equals
from lazyenum.errors import EmptySequenceError, check_callable, check_non_negative

T = TypeVar('T')


def all(iterable: Iterable[T], predicate: Optional[Callable[[T], Any]] = None) -> bool:
    """True if predicate is truthy for every element; stops at the first failure."""
    predicate = predicate or identity
    for item in iterable:
        if not predicate(item):
            return False
    return True


def any(iterable: Iterable[T], predicate: Optional[Callable[[T], Any]] = None) -> bool:
    """True if predicate is truthy for some element; stops at the first success."""
    predicate = predicate or identity
    for item in iterable:
        if predicate(item):
            return True
    return False


def at(iterable: Iterable[T], index: int, default: Any = None) -> Any:
    """Element at zero-based index, or default; pulls at most index + 1 elements."""
    check_non_negative("index", index)
    for position, item in enumerate(iterable):
        if position == index:
            return item
    return default


def fetch(iterable: Iterable[T], index: int) -> T:
    """
    Element at zero-based index.

    Raises:
        EmptySequenceError: the sequence ends before index
    """
    check_non_negative("index", index)
    position = -1
    for position, item in enumerate(iterable):
        if position == index:
            return item
    raise EmptySequenceError(
        f"index {index} out of range for a sequence of {position + 1} elements"
    )


def find(iterable: Iterable[T], predicate: Callable[[T], Any], default: Any = None) -> Any:
    """First element for which predicate is truthy, or default."""
    check_callable("predicate", predicate)
    for item in iterable:
        if predicate(item):
            return item
    return default


def find_index(iterable: Iterable[T], predicate: Callable[[T], Any]) -> Optional[int]:
    """Zero-based index of the first match, or None."""
    check_callable("predicate", predicate)
    for position, item in enumerate(iterable):
        if predicate(item):
            return position
    return None


def find_value(iterable: Iterable[T], func: Callable[[T], Any], default: Any = None) -> Any:
    """First truthy func(element), or default."""
    check_callable("func", func)
    for item in iterable:
        value = func(item)
        if value:
            return value
    return default


def member(iterable: Iterable[T], element: Any) -> bool:
    """True if element occurs; 1, 1.0 and True do not match each other."""
    for item in iterable:
        if strict_equals(item, element):
            return True
    return False


def empty(iterable: Iterable[T]) -> bool:
    """True if iterable yields nothing; pulls at most one element."""
    for _ in iterable:
        return False
    return True


def each(iterable: Iterable[T], func: Callable[[T], Any]) -> None:
    """Invoke func for each element."""
    check_callable("func", func)
    for item in iterable:
        func(item)


def random(iterable: Iterable[T]) -> Optional[T]:
    """
    Uniformly chosen element, or None when empty.

    Uses reservoir sampling, so the whole input is drained but only one
    element is held at a time. The random source honours
    ``config.random_seed``.
    """
    rng = config.make_random()
    chosen = None
    for seen, item in enumerate(iterable, start=1):
        if rng.randrange(seen) == 0:
            chosen = item
    return chosen
