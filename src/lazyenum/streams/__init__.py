"""Lazy streams and their operators."""

from lazyenum.streams.protocol import PullIterator, SourceExhausted
from lazyenum.streams.stream import Stream
from lazyenum.streams.operators import (
    SequenceOperator,
    MapOperator,
    FilterOperator,
    RejectOperator,
    FlatMapOperator,
    ConcatOperator,
    TakeOperator,
    DropOperator,
    TakeWhileOperator,
    DropWhileOperator,
    DedupOperator,
    UniqOperator,
    MapEveryOperator,
    IntersperseOperator,
    MapIntersperseOperator,
    ChunkByOperator,
    ChunkEveryOperator,
    DropEveryOperator,
)
from lazyenum.streams import functions

__all__ = [
    "PullIterator",
    "SourceExhausted",
    "Stream",
    "SequenceOperator",
    "MapOperator",
    "FilterOperator",
    "RejectOperator",
    "FlatMapOperator",
    "ConcatOperator",
    "TakeOperator",
    "DropOperator",
    "TakeWhileOperator",
    "DropWhileOperator",
    "DedupOperator",
    "UniqOperator",
    "MapEveryOperator",
    "IntersperseOperator",
    "MapIntersperseOperator",
    "ChunkByOperator",
    "ChunkEveryOperator",
    "DropEveryOperator",
    "functions",
]
