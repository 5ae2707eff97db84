"""
State machines behind the lazy operators.

Each class wraps exactly one upstream iterator and pulls from it only as
often as one downstream element requires.
"""

from collections import deque
from typing import Any, Callable, Deque, Hashable, Iterable, Iterator, List, Optional, Set, TypeVar

from lazyenum.defaults import MISSING, strict_equals
from lazyenum.streams.protocol import PullIterator, SourceExhausted

T = TypeVar('T')
U = TypeVar('U')


# Stateless transforms

class MapIterator(PullIterator[U]):
    def __init__(self, source: Iterable[T], func: Callable[[T], U]):
        super().__init__(source)
        self._func = func

    def _pull(self) -> U:
        return self._func(self._next_source())


class FilterIterator(PullIterator[T]):
    def __init__(self, source: Iterable[T], predicate: Callable[[T], Any]):
        super().__init__(source)
        self._predicate = predicate

    def _pull(self) -> T:
        while True:
            item = self._next_source()
            if self._predicate(item):
                return item


class RejectIterator(FilterIterator[T]):
    def _pull(self) -> T:
        while True:
            item = self._next_source()
            if not self._predicate(item):
                return item


class ConcatIterator(PullIterator[T]):
    """Drain each inner iterable fully, in outer order."""

    def __init__(self, source: Iterable[Iterable[T]]):
        super().__init__(source)
        self._inner: Optional[Iterator[T]] = None

    def _next_inner(self) -> Iterator[T]:
        return iter(self._next_source())

    def _pull(self) -> T:
        while True:
            if self._inner is None:
                self._inner = self._next_inner()
            try:
                return next(self._inner)
            except StopIteration:
                self._inner = None


class FlatMapIterator(ConcatIterator[U]):
    def __init__(self, source: Iterable[T], func: Callable[[T], Iterable[U]]):
        super().__init__(source)
        self._func = func

    def _next_inner(self) -> Iterator[U]:
        return iter(self._func(self._next_source()))


# Position counters

class TakeIterator(PullIterator[T]):
    """Emit the first n elements, then stop pulling upstream."""

    def __init__(self, source: Iterable[T], n: int):
        super().__init__(source)
        self._remaining = n

    def _pull(self) -> T:
        if self._remaining <= 0:
            raise SourceExhausted
        item = self._next_source()
        self._remaining -= 1
        return item


class DropIterator(PullIterator[T]):
    def __init__(self, source: Iterable[T], n: int):
        super().__init__(source)
        self._to_drop = n

    def _pull(self) -> T:
        while self._to_drop > 0:
            self._next_source()
            self._to_drop -= 1
        return self._next_source()


class TakeWhileIterator(PullIterator[T]):
    def __init__(self, source: Iterable[T], predicate: Callable[[T], Any]):
        super().__init__(source)
        self._predicate = predicate

    def _pull(self) -> T:
        item = self._next_source()
        if not self._predicate(item):
            raise SourceExhausted
        return item


class DropWhileIterator(PullIterator[T]):
    def __init__(self, source: Iterable[T], predicate: Callable[[T], Any]):
        super().__init__(source)
        self._predicate = predicate
        self._dropping = True

    def _pull(self) -> T:
        item = self._next_source()
        while self._dropping and self._predicate(item):
            item = self._next_source()
        self._dropping = False
        return item


class MapEveryIterator(PullIterator[T]):
    """Apply func to the n-th, 2n-th, ... element (1-indexed)."""

    def __init__(self, source: Iterable[T], n: int, func: Callable[[T], Any]):
        super().__init__(source)
        self._n = n
        self._func = func
        self._position = 0

    def _pull(self) -> Any:
        item = self._next_source()
        self._position += 1
        if self._position == self._n:
            self._position = 0
            return self._func(item)
        return item


# Single lookback

class DedupIterator(PullIterator[T]):
    """Collapse runs of elements whose keys are strictly equal."""

    def __init__(self, source: Iterable[T], key_func: Callable[[T], Any]):
        super().__init__(source)
        self._key_func = key_func
        self._last_key: Any = MISSING

    def _pull(self) -> T:
        while True:
            item = self._next_source()
            key = self._key_func(item)
            if self._last_key is MISSING or not strict_equals(key, self._last_key):
                self._last_key = key
                return item


class UniqIterator(PullIterator[T]):
    def __init__(self, source: Iterable[T], key_func: Callable[[T], Hashable]):
        super().__init__(source)
        self._key_func = key_func
        self._seen: Set[Hashable] = set()

    def _pull(self) -> T:
        while True:
            item = self._next_source()
            key = self._key_func(item)
            if key not in self._seen:
                self._seen.add(key)
                return item


class IntersperseIterator(PullIterator[Any]):
    """
    Emit separator between consecutive elements.

    The separator is only produced once the element that follows it has
    been pulled, so a trailing separator is never emitted.
    """

    def __init__(self, source: Iterable[T], separator: Any):
        super().__init__(source)
        self._separator = separator
        self._started = False
        self._pending: Any = MISSING

    def _transform(self, item: T) -> Any:
        return item

    def _pull(self) -> Any:
        if self._pending is not MISSING:
            item, self._pending = self._pending, MISSING
            return item
        item = self._transform(self._next_source())
        if not self._started:
            self._started = True
            return item
        self._pending = item
        return self._separator


class MapIntersperseIterator(IntersperseIterator):
    def __init__(self, source: Iterable[T], func: Callable[[T], Any], separator: Any):
        super().__init__(source, separator)
        self._func = func

    def _transform(self, item: T) -> Any:
        return self._func(item)


class ChunkByIterator(PullIterator[List[T]]):
    """Group consecutive elements with strictly equal keys."""

    def __init__(self, source: Iterable[T], key_func: Callable[[T], Any]):
        super().__init__(source)
        self._key_func = key_func
        self._group: List[T] = []
        self._key: Any = MISSING
        self._drained = False

    def _pull(self) -> List[T]:
        if self._drained:
            raise SourceExhausted
        while True:
            try:
                item = self._next_source()
            except SourceExhausted:
                self._drained = True
                if not self._group:
                    raise
                group, self._group = self._group, []
                return group

            key = self._key_func(item)
            if self._group and not strict_equals(key, self._key):
                group, self._group = self._group, [item]
                self._key = key
                return group
            self._key = key
            self._group.append(item)


# Windowing

class ChunkEveryIterator(PullIterator[List[T]]):
    """
    Overlapping or tiled windows of ``count`` elements opened every ``step``.

    Open windows are kept oldest-opened first. Every element is appended to
    every open window; the oldest window is emitted as soon as it holds
    ``count`` elements. Windows still open when the source runs out are
    emitted as partial chunks, oldest first.
    """

    def __init__(self, source: Iterable[T], count: int, step: int):
        super().__init__(source)
        self._count = count
        self._step = step
        self._position = 0
        self._windows: Deque[List[T]] = deque()
        self._drained = False

    @property
    def open_windows(self) -> int:
        return len(self._windows)

    def _pull(self) -> List[T]:
        while not self._drained:
            try:
                item = self._next_source()
            except SourceExhausted:
                self._drained = True
                break

            if self._position % self._step == 0:
                self._windows.append([])
            self._position += 1

            for window in self._windows:
                window.append(item)

            # Windows are opened on distinct positions, so at most one
            # reaches count per element, and it is always the oldest.
            if self._windows and len(self._windows[0]) == self._count:
                return self._windows.popleft()

        if self._windows:
            return self._windows.popleft()
        raise SourceExhausted
