"""Aggregators that terminate a stream."""

from lazyenum.algorithms.external_sort import sort
from lazyenum.algorithms.grouping import frequencies, group_by
from lazyenum.algorithms import reducers, search

__all__ = [
    "sort",
    "frequencies",
    "group_by",
    "reducers",
    "search",
]
