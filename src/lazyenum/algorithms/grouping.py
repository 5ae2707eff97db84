"""
Group-by and frequency counting.
"""

from collections import defaultdict
from typing import Any, Callable, Dict, Hashable, Iterable, List, Optional, TypeVar

from lazyenum.defaults import identity
from lazyenum.errors import check_callable

T = TypeVar('T')
K = TypeVar('K', bound=Hashable)
V = TypeVar('V')


def frequencies(
    data: Iterable[T],
    key_func: Optional[Callable[[T], K]] = None
) -> Dict[K, int]:
    """
    Count occurrences of each key.

    Args:
        data: Iterable of items to count
        key_func: Function to extract the counted key; the item itself by default

    Returns:
        Dictionary mapping keys to occurrence counts
    """
    key_func = key_func or identity
    result: Dict[K, int] = defaultdict(int)
    for item in data:
        result[key_func(item)] += 1
    return dict(result)


def group_by(
    data: Iterable[T],
    key_func: Callable[[T], K],
    value_func: Optional[Callable[[T], V]] = None
) -> Dict[K, List[V]]:
    """
    Group data by key.

    Args:
        data: Iterable of items to group
        key_func: Function to extract group key
        value_func: Function to extract the stored value; the item itself by default

    Returns:
        Dictionary mapping keys to lists of values, each list in encounter order
    """
    check_callable("key_func", key_func)
    value_func = value_func or identity
    result: Dict[K, List[Any]] = defaultdict(list)
    for item in data:
        result[key_func(item)].append(value_func(item))
    return dict(result)
