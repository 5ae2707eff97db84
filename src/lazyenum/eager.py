"""
Eager API.

Same operator names and semantics as ``lazyenum.streams.functions``, but
each call runs immediately and returns a list. Every eager operator is the
matching lazy operator drained into a list, so the two cannot disagree.
Aggregators are shared with the lazy API unchanged.
"""

import functools
from typing import Any, Callable, List

from lazyenum.algorithms.external_sort import sort
from lazyenum.algorithms.grouping import frequencies, group_by
from lazyenum.algorithms.reducers import (
    count, max, max_by, min, min_by, min_max, min_max_by, product, reduce, sum,
)
from lazyenum.algorithms.search import (
    all, any, at, each, empty, fetch, find, find_index, find_value, member, random,
)
from lazyenum.streams import functions as lazy


def _drained(lazy_func: Callable[..., Any]) -> Callable[..., List[Any]]:
    @functools.wraps(lazy_func)
    def wrapper(*args, **kwargs) -> List[Any]:
        return list(lazy_func(*args, **kwargs))
    return wrapper


map = _drained(lazy.map)
filter = _drained(lazy.filter)
reject = _drained(lazy.reject)
flat_map = _drained(lazy.flat_map)
concat = _drained(lazy.concat)
take = _drained(lazy.take)
drop = _drained(lazy.drop)
take_while = _drained(lazy.take_while)
drop_while = _drained(lazy.drop_while)
dedup = _drained(lazy.dedup)
uniq = _drained(lazy.uniq)
map_every = _drained(lazy.map_every)
intersperse = _drained(lazy.intersperse)
map_intersperse = _drained(lazy.map_intersperse)
chunk_by = _drained(lazy.chunk_by)
chunk_every = _drained(lazy.chunk_every)
drop_every = _drained(lazy.drop_every)

__all__ = [
    "map", "filter", "reject", "flat_map", "concat", "take", "drop",
    "take_while", "drop_while", "dedup", "uniq", "map_every", "intersperse",
    "map_intersperse", "chunk_by", "chunk_every", "drop_every",
    "reduce", "min", "max", "min_by", "max_by", "min_max", "min_max_by",
    "sum", "product", "count", "frequencies", "group_by", "sort",
    "all", "any", "at", "fetch", "find", "find_index", "find_value",
    "member", "empty", "each", "random",
]
