"""
Stream operators for transformation.

An operator validates its arguments when it is constructed and builds a
fresh state machine every time it is applied to an iterator.
"""

import logging
import math
from abc import ABC, abstractmethod
from typing import Any, Callable, Hashable, Iterable, Iterator, List, Optional, TypeVar

from lazyenum.config import config
from lazyenum.defaults import identity
from lazyenum.errors import check_callable, check_non_negative, check_positive
from lazyenum.streams.iterators import (
    ChunkByIterator,
    ChunkEveryIterator,
    ConcatIterator,
    DedupIterator,
    DropIterator,
    DropWhileIterator,
    FilterIterator,
    FlatMapIterator,
    IntersperseIterator,
    MapEveryIterator,
    MapIntersperseIterator,
    MapIterator,
    RejectIterator,
    TakeIterator,
    TakeWhileIterator,
    UniqIterator,
)

T = TypeVar('T')
U = TypeVar('U')

logger = logging.getLogger(__name__)


class SequenceOperator(ABC):
    """Base class for sequence operators."""

    @abstractmethod
    def apply(self, iterator: Iterator[T]) -> Iterator[Any]:
        """Apply operator to iterator."""
        pass


class MapOperator(SequenceOperator):
    """Map each element to a new value."""

    def __init__(self, func: Callable[[T], U]):
        self.func = check_callable("func", func)

    def apply(self, iterator: Iterator[T]) -> Iterator[U]:
        return MapIterator(iterator, self.func)


class FilterOperator(SequenceOperator):
    """Keep elements for which predicate is truthy."""

    def __init__(self, predicate: Callable[[T], Any]):
        self.predicate = check_callable("predicate", predicate)

    def apply(self, iterator: Iterator[T]) -> Iterator[T]:
        return FilterIterator(iterator, self.predicate)


class RejectOperator(FilterOperator):
    """Drop elements for which predicate is truthy."""

    def apply(self, iterator: Iterator[T]) -> Iterator[T]:
        return RejectIterator(iterator, self.predicate)


class FlatMapOperator(SequenceOperator):
    """Map each element to an iterable and flatten the results."""

    def __init__(self, func: Callable[[T], Iterable[U]]):
        self.func = check_callable("func", func)

    def apply(self, iterator: Iterator[T]) -> Iterator[U]:
        return FlatMapIterator(iterator, self.func)


class ConcatOperator(SequenceOperator):
    """Flatten one level of nesting."""

    def apply(self, iterator: Iterator[Iterable[T]]) -> Iterator[T]:
        return ConcatIterator(iterator)


class TakeOperator(SequenceOperator):
    """Take first n elements."""

    def __init__(self, n: int):
        self.n = check_non_negative("n", n)

    def apply(self, iterator: Iterator[T]) -> Iterator[T]:
        return TakeIterator(iterator, self.n)


class DropOperator(SequenceOperator):
    """Skip first n elements."""

    def __init__(self, n: int):
        self.n = check_non_negative("n", n)

    def apply(self, iterator: Iterator[T]) -> Iterator[T]:
        return DropIterator(iterator, self.n)


class TakeWhileOperator(SequenceOperator):
    """Take elements while predicate is true."""

    def __init__(self, predicate: Callable[[T], Any]):
        self.predicate = check_callable("predicate", predicate)

    def apply(self, iterator: Iterator[T]) -> Iterator[T]:
        return TakeWhileIterator(iterator, self.predicate)


class DropWhileOperator(SequenceOperator):
    """Drop elements while predicate is true."""

    def __init__(self, predicate: Callable[[T], Any]):
        self.predicate = check_callable("predicate", predicate)

    def apply(self, iterator: Iterator[T]) -> Iterator[T]:
        return DropWhileIterator(iterator, self.predicate)


class DedupOperator(SequenceOperator):
    """Collapse consecutive duplicates."""

    def __init__(self, key_func: Optional[Callable[[T], Any]] = None):
        self.key_func = key_func or identity

    def apply(self, iterator: Iterator[T]) -> Iterator[T]:
        return DedupIterator(iterator, self.key_func)


class UniqOperator(SequenceOperator):
    """Remove duplicate elements."""

    def __init__(self, key_func: Optional[Callable[[T], Hashable]] = None):
        self.key_func = key_func or identity

    def apply(self, iterator: Iterator[T]) -> Iterator[T]:
        return UniqIterator(iterator, self.key_func)


class MapEveryOperator(SequenceOperator):
    """Apply func to every n-th element."""

    def __init__(self, n: int, func: Callable[[T], Any]):
        self.n = check_positive("n", n)
        self.func = check_callable("func", func)

    def apply(self, iterator: Iterator[T]) -> Iterator[Any]:
        return MapEveryIterator(iterator, self.n, self.func)


class IntersperseOperator(SequenceOperator):
    """Place separator between elements."""

    def __init__(self, separator: Any):
        self.separator = separator

    def apply(self, iterator: Iterator[T]) -> Iterator[Any]:
        return IntersperseIterator(iterator, self.separator)


class MapIntersperseOperator(SequenceOperator):
    """Map and intersperse in one pass."""

    def __init__(self, func: Callable[[T], Any], separator: Any):
        self.func = check_callable("func", func)
        self.separator = separator

    def apply(self, iterator: Iterator[T]) -> Iterator[Any]:
        return MapIntersperseIterator(iterator, self.func, self.separator)


class ChunkByOperator(SequenceOperator):
    """Split into runs of elements sharing the same key."""

    def __init__(self, key_func: Callable[[T], Any]):
        self.key_func = check_callable("key_func", key_func)

    def apply(self, iterator: Iterator[T]) -> Iterator[List[T]]:
        return ChunkByIterator(iterator, self.key_func)


class ChunkEveryOperator(SequenceOperator):
    """Group elements into windows of count, starting every step elements."""

    def __init__(self, count: int, step: Optional[int] = None):
        self.count = check_positive("count", count)
        self.step = check_positive("step", count if step is None else step)

        # Worst case buffered elements across all open windows
        buffered = math.ceil(self.count / self.step) * self.count
        if buffered > config.window_warning_threshold:
            logger.warning(
                f"chunk_every(count={self.count}, step={self.step}) may buffer "
                f"{buffered:,} elements (threshold {config.window_warning_threshold:,})"
            )

    @property
    def max_open_windows(self) -> int:
        return math.ceil(self.count / self.step)

    def apply(self, iterator: Iterator[T]) -> Iterator[List[T]]:
        return ChunkEveryIterator(iterator, self.count, self.step)


class DropEveryOperator(SequenceOperator):
    """Drop the 1st, (n+1)-th, (2n+1)-th, ... elements."""

    def __init__(self, n: int):
        self.n = check_positive("n", n)

    def apply(self, iterator: Iterator[T]) -> Iterator[T]:
        chunks = ChunkEveryIterator(iterator, self.n, self.n)
        return ConcatIterator(MapIterator(chunks, _without_first))


def _without_first(chunk: List[T]) -> List[T]:
    return chunk[1:]
