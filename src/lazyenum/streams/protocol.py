"""
The pull protocol shared by every lazy operator.

A consumer calls ``next()``; the operator answers with one element or raises
``StopIteration`` to report exhaustion. Operators keep their state in
instance fields so a chain can be suspended between any two pulls and
resumed exactly where it stopped.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterable, Iterator, TypeVar

T = TypeVar('T')

_DRAINED: Iterator[Any] = iter(())


class SourceExhausted(Exception):
    """Raised inside ``_pull`` when the operator has nothing left to emit."""


class PullIterator(Iterator[T], ABC):
    """
    Base class for operator state machines.

    Subclasses implement ``_pull``, take upstream elements with
    ``_next_source()`` and raise ``SourceExhausted`` to finish early. A
    ``StopIteration`` escaping from a caller's function is turned into
    ``RuntimeError``, as in a generator, instead of ending the stream.
    Once exhaustion has been reported, every further ``next()`` reports it
    again without touching the upstream iterator, which is released.
    """

    def __init__(self, source: Iterable[Any]):
        self._source: Iterator[Any] = iter(source)
        self._exhausted = False

    def __iter__(self) -> 'PullIterator[T]':
        return self

    def __next__(self) -> T:
        if self._exhausted:
            raise StopIteration
        try:
            return self._pull()
        except SourceExhausted:
            self._exhausted = True
            self._source = _DRAINED
            raise StopIteration from None
        except StopIteration as e:
            raise RuntimeError(
                f"{type(self).__name__} callback raised StopIteration"
            ) from e

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def _next_source(self) -> Any:
        try:
            return next(self._source)
        except StopIteration:
            raise SourceExhausted from None

    @abstractmethod
    def _pull(self) -> T:
        """Produce the next element or raise SourceExhausted."""
        pass
