"""
Lazy, composable streams.
"""

from typing import (
    Any, Callable, Dict, Hashable, Iterable, Iterator, List, Optional,
    Tuple, TypeVar, Union
)

from lazyenum.defaults import MISSING, default_sorter
from lazyenum.errors import InvalidArgumentError
from lazyenum.streams.operators import (
    SequenceOperator, MapOperator, FilterOperator, RejectOperator, FlatMapOperator,
    ConcatOperator, TakeOperator, DropOperator, TakeWhileOperator, DropWhileOperator,
    DedupOperator, UniqOperator, MapEveryOperator, IntersperseOperator,
    MapIntersperseOperator, ChunkByOperator, ChunkEveryOperator, DropEveryOperator,
)

T = TypeVar('T')
U = TypeVar('U')


class Stream(Iterable[T]):
    """
    A lazy stream over an ordered, possibly infinite source.

    Operators are recorded, not run: nothing is pulled from the source until
    the stream is iterated. Each iteration builds a fresh operator chain, so a
    stream over a restartable source (a list, or a callable returning a new
    iterator) can be iterated more than once, while a stream over a
    generator is single-pass.
    """

    def __init__(self, source: Union[Iterable[T], Callable[[], Iterator[T]]]):
        """
        Initialize stream.

        Args:
            source: Data source (iterable, iterator, or callable returning iterator)
        """
        if hasattr(source, '__iter__'):
            self._source = lambda: iter(source)
        elif callable(source):
            self._source = source
        else:
            raise InvalidArgumentError("Source must be iterable or callable")

        self._operators: List[SequenceOperator] = []

    def __iter__(self) -> Iterator[T]:
        """Create iterator with all operators applied."""
        iterator = self._source()

        # Apply operators in sequence
        for op in self._operators:
            iterator = op.apply(iterator)

        return iterator

    def __repr__(self) -> str:
        ops = ", ".join(type(op).__name__ for op in self._operators)
        return f"Stream([{ops}])"

    def pipe(self, operator: SequenceOperator) -> 'Stream[Any]':
        """Return a new stream with operator appended."""
        new_stream = Stream(self._source)
        new_stream._operators = self._operators.copy()
        new_stream._operators.append(operator)
        return new_stream

    # Stateless transforms

    def map(self, func: Callable[[T], U]) -> 'Stream[U]':
        """Apply function to each element."""
        return self.pipe(MapOperator(func))

    def filter(self, predicate: Callable[[T], Any]) -> 'Stream[T]':
        """Keep only elements matching predicate."""
        return self.pipe(FilterOperator(predicate))

    def reject(self, predicate: Callable[[T], Any]) -> 'Stream[T]':
        """Drop elements matching predicate."""
        return self.pipe(RejectOperator(predicate))

    def flat_map(self, func: Callable[[T], Iterable[U]]) -> 'Stream[U]':
        """Map each element to multiple elements."""
        return self.pipe(FlatMapOperator(func))

    def concat(self) -> 'Stream[Any]':
        """Flatten a stream of iterables."""
        return self.pipe(ConcatOperator())

    # Stateful operators

    def take(self, n: int) -> 'Stream[T]':
        """Take first n elements."""
        return self.pipe(TakeOperator(n))

    def drop(self, n: int) -> 'Stream[T]':
        """Skip first n elements."""
        return self.pipe(DropOperator(n))

    def take_while(self, predicate: Callable[[T], Any]) -> 'Stream[T]':
        return self.pipe(TakeWhileOperator(predicate))

    def drop_while(self, predicate: Callable[[T], Any]) -> 'Stream[T]':
        return self.pipe(DropWhileOperator(predicate))

    def dedup(self, key_func: Optional[Callable[[T], Any]] = None) -> 'Stream[T]':
        """Collapse consecutive duplicates."""
        return self.pipe(DedupOperator(key_func))

    def uniq(self, key_func: Optional[Callable[[T], Hashable]] = None) -> 'Stream[T]':
        """Remove duplicate elements."""
        return self.pipe(UniqOperator(key_func))

    def map_every(self, n: int, func: Callable[[T], Any]) -> 'Stream[Any]':
        return self.pipe(MapEveryOperator(n, func))

    def intersperse(self, separator: Any) -> 'Stream[Any]':
        return self.pipe(IntersperseOperator(separator))

    def map_intersperse(self, func: Callable[[T], Any], separator: Any) -> 'Stream[Any]':
        return self.pipe(MapIntersperseOperator(func, separator))

    def chunk_by(self, key_func: Callable[[T], Any]) -> 'Stream[List[T]]':
        """Group consecutive elements sharing a key."""
        return self.pipe(ChunkByOperator(key_func))

    def chunk_every(self, count: int, step: Optional[int] = None) -> 'Stream[List[T]]':
        """Group elements into chunks of count, a new one every step."""
        return self.pipe(ChunkEveryOperator(count, step))

    def drop_every(self, n: int) -> 'Stream[T]':
        return self.pipe(DropEveryOperator(n))

    # Terminal operators

    def to_list(self) -> List[T]:
        """Collect all elements into a list."""
        return list(self)

    collect = to_list

    def reduce(self, func: Callable[[Any, T], Any], initial: Any = MISSING) -> Any:
        """Reduce stream to single value."""
        from lazyenum.algorithms import reducers
        return reducers.reduce(self, func, initial)

    def count(self, predicate: Optional[Callable[[T], Any]] = None) -> int:
        """Count elements."""
        from lazyenum.algorithms import reducers
        return reducers.count(self, predicate)

    def sum(self) -> Any:
        from lazyenum.algorithms import reducers
        return reducers.sum(self)

    def product(self) -> Any:
        from lazyenum.algorithms import reducers
        return reducers.product(self)

    def min(self, sorter: Callable[[T, T], Any] = default_sorter, default: Any = None) -> Any:
        from lazyenum.algorithms import reducers
        return reducers.min(self, sorter, default)

    def max(self, sorter: Callable[[T, T], Any] = default_sorter, default: Any = None) -> Any:
        from lazyenum.algorithms import reducers
        return reducers.max(self, sorter, default)

    def min_by(self, func: Callable[[T], Any],
               sorter: Callable[[Any, Any], Any] = default_sorter, default: Any = None) -> Any:
        from lazyenum.algorithms import reducers
        return reducers.min_by(self, func, sorter, default)

    def max_by(self, func: Callable[[T], Any],
               sorter: Callable[[Any, Any], Any] = default_sorter, default: Any = None) -> Any:
        from lazyenum.algorithms import reducers
        return reducers.max_by(self, func, sorter, default)

    def min_max(self, sorter: Callable[[T, T], Any] = default_sorter,
                default: Any = None) -> Optional[Tuple[T, T]]:
        from lazyenum.algorithms import reducers
        return reducers.min_max(self, sorter, default)

    def min_max_by(self, func: Callable[[T], Any],
                   sorter: Callable[[Any, Any], Any] = default_sorter,
                   default: Any = None) -> Optional[Tuple[T, T]]:
        from lazyenum.algorithms import reducers
        return reducers.min_max_by(self, func, sorter, default)

    def frequencies(self, key_func: Optional[Callable[[T], Hashable]] = None) -> Dict[Any, int]:
        from lazyenum.algorithms import grouping
        return grouping.frequencies(self, key_func)

    def group_by(self, key_func: Callable[[T], Hashable],
                 value_func: Optional[Callable[[T], Any]] = None) -> Dict[Any, List[Any]]:
        """Group elements by key."""
        from lazyenum.algorithms import grouping
        return grouping.group_by(self, key_func, value_func)

    def sort(self, sorter: Optional[Callable[[T, T], Any]] = None,
             key: Optional[Callable[[T], Any]] = None, reverse: bool = False) -> List[T]:
        """Sort elements."""
        from lazyenum.algorithms import external_sort
        return external_sort.sort(self, sorter, key=key, reverse=reverse)

    def all(self, predicate: Optional[Callable[[T], Any]] = None) -> bool:
        from lazyenum.algorithms import search
        return search.all(self, predicate)

    def any(self, predicate: Optional[Callable[[T], Any]] = None) -> bool:
        from lazyenum.algorithms import search
        return search.any(self, predicate)

    def at(self, index: int, default: Any = None) -> Any:
        from lazyenum.algorithms import search
        return search.at(self, index, default)

    def fetch(self, index: int) -> T:
        from lazyenum.algorithms import search
        return search.fetch(self, index)

    def find(self, predicate: Callable[[T], Any], default: Any = None) -> Any:
        from lazyenum.algorithms import search
        return search.find(self, predicate, default)

    def find_index(self, predicate: Callable[[T], Any]) -> Optional[int]:
        from lazyenum.algorithms import search
        return search.find_index(self, predicate)

    def find_value(self, func: Callable[[T], Any], default: Any = None) -> Any:
        from lazyenum.algorithms import search
        return search.find_value(self, func, default)

    def member(self, element: Any) -> bool:
        from lazyenum.algorithms import search
        return search.member(self, element)

    def empty(self) -> bool:
        from lazyenum.algorithms import search
        return search.empty(self)

    def random(self) -> Optional[T]:
        from lazyenum.algorithms import search
        return search.random(self)

    def each(self, func: Callable[[T], Any]) -> None:
        """Apply function to each element."""
        from lazyenum.algorithms import search
        search.each(self, func)

    # Factory methods

    @classmethod
    def from_iterable(cls, iterable: Iterable[T]) -> 'Stream[T]':
        """Create stream from iterable."""
        return cls(iterable)

    @classmethod
    def range(cls, *args) -> 'Stream[int]':
        """Create stream of integers."""
        return cls(lambda: iter(range(*args)))

    @classmethod
    def infinite(cls, func: Callable[[], T]) -> 'Stream[T]':
        """Create infinite stream."""
        def generator():
            while True:
                yield func()
        return cls(generator)

    @classmethod
    def iterate(cls, start: T, func: Callable[[T], T]) -> 'Stream[T]':
        """Create infinite stream of start, func(start), func(func(start)), ..."""
        def generator():
            value = start
            while True:
                yield value
                value = func(value)
        return cls(generator)
