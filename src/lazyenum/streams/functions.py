"""
Functional lazy API.

Every function takes any iterable as its first argument and returns a
``Stream``; nothing is pulled until the result is iterated. Arguments are
validated immediately.
"""

from typing import Any, Callable, Hashable, Iterable, List, Optional, TypeVar

from lazyenum.streams.stream import Stream

T = TypeVar('T')
U = TypeVar('U')

__all__ = [
    "stream",
    "map",
    "filter",
    "reject",
    "flat_map",
    "concat",
    "take",
    "drop",
    "take_while",
    "drop_while",
    "dedup",
    "uniq",
    "map_every",
    "intersperse",
    "map_intersperse",
    "chunk_by",
    "chunk_every",
    "drop_every",
]


def stream(iterable: Iterable[T]) -> Stream[T]:
    """Wrap iterable in a Stream, reusing it if it already is one."""
    if isinstance(iterable, Stream):
        return iterable
    return Stream(iterable)


def map(iterable: Iterable[T], func: Callable[[T], U]) -> Stream[U]:
    return stream(iterable).map(func)


def filter(iterable: Iterable[T], predicate: Callable[[T], Any]) -> Stream[T]:
    return stream(iterable).filter(predicate)


def reject(iterable: Iterable[T], predicate: Callable[[T], Any]) -> Stream[T]:
    return stream(iterable).reject(predicate)


def flat_map(iterable: Iterable[T], func: Callable[[T], Iterable[U]]) -> Stream[U]:
    """Map each element to an iterable and emit its elements in order."""
    return stream(iterable).flat_map(func)


def concat(iterables: Iterable[Iterable[T]]) -> Stream[T]:
    """Drain each inner iterable fully, in outer order."""
    return stream(iterables).concat()


def take(iterable: Iterable[T], n: int) -> Stream[T]:
    """First n elements; stops pulling upstream once they are emitted."""
    return stream(iterable).take(n)


def drop(iterable: Iterable[T], n: int) -> Stream[T]:
    return stream(iterable).drop(n)


def take_while(iterable: Iterable[T], predicate: Callable[[T], Any]) -> Stream[T]:
    return stream(iterable).take_while(predicate)


def drop_while(iterable: Iterable[T], predicate: Callable[[T], Any]) -> Stream[T]:
    """
    Drop the leading run of elements for which predicate holds.

    Once an element fails the predicate, every following element passes
    through, including those the predicate would accept.
    """
    return stream(iterable).drop_while(predicate)


def dedup(iterable: Iterable[T], key_func: Optional[Callable[[T], Any]] = None) -> Stream[T]:
    """
    Collapse consecutive elements with equal keys to the first of the run.

    Keys are compared strictly: 1, 1.0 and True are different keys.
    """
    return stream(iterable).dedup(key_func)


def uniq(iterable: Iterable[T], key_func: Optional[Callable[[T], Hashable]] = None) -> Stream[T]:
    return stream(iterable).uniq(key_func)


def map_every(iterable: Iterable[T], n: int, func: Callable[[T], Any]) -> Stream[Any]:
    """Apply func to the n-th, 2n-th, ... element; others pass through."""
    return stream(iterable).map_every(n, func)


def intersperse(iterable: Iterable[T], separator: Any) -> Stream[Any]:
    return stream(iterable).intersperse(separator)


def map_intersperse(iterable: Iterable[T], func: Callable[[T], Any], separator: Any) -> Stream[Any]:
    return stream(iterable).map_intersperse(func, separator)


def chunk_by(iterable: Iterable[T], key_func: Callable[[T], Any]) -> Stream[List[T]]:
    """Split into lists of consecutive elements sharing the same key."""
    return stream(iterable).chunk_by(key_func)


def chunk_every(iterable: Iterable[T], count: int, step: Optional[int] = None) -> Stream[List[T]]:
    """
    Chunks of count elements, each new chunk starting step elements after
    the previous one.

    Args:
        iterable: Source elements
        count: Chunk size, positive
        step: Distance between chunk starts, positive; defaults to count

    Returns:
        Stream of lists. Chunks left incomplete when the source ends are
        emitted as they are, oldest first.
    """
    return stream(iterable).chunk_every(count, step)


def drop_every(iterable: Iterable[T], n: int) -> Stream[T]:
    """Drop the 1st, (n+1)-th, (2n+1)-th, ... elements."""
    return stream(iterable).drop_every(n)
