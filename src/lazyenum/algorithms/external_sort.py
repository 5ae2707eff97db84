"""
Sorting with bounded in-memory runs.

Input that fits in one run is sorted in memory. Longer input is cut into
sorted runs that are spilled to temporary files and k-way merged, so the
sorting itself holds one run plus one element per spilled run besides the
result list. Items that cannot be pickled are sorted in memory instead.
"""

import functools
import heapq
import logging
import os
import pickle
import tempfile
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, List, Optional, TypeVar

from lazyenum.config import config
from lazyenum.errors import InvalidArgumentError, check_positive

T = TypeVar('T')

logger = logging.getLogger(__name__)

# What pickle raises for local classes, lambdas, locks and the like
_UNPICKLABLE = (pickle.PicklingError, AttributeError, TypeError)


@dataclass
class SortRun:
    """A sorted run on disk."""
    filename: str
    count: int


def sort(
    data: Iterable[T],
    sorter: Optional[Callable[[T, T], Any]] = None,
    key: Optional[Callable[[T], Any]] = None,
    reverse: bool = False,
    run_size: Optional[int] = None,
    storage_path: Optional[str] = None
) -> List[T]:
    """
    Return a sorted list of data. The sort is stable.

    Args:
        data: Iterable of items to sort
        sorter: Comparator returning a negative number, zero or a positive
            number when its first argument sorts before, with, or after the
            second; natural ascending order when omitted
        key: Function to extract sort key, an alternative to sorter
        reverse: Sort in descending order
        run_size: Items sorted in memory per run; from config when omitted
        storage_path: Directory for spilled runs

    Returns:
        Sorted list
    """
    if sorter is not None and key is not None:
        raise InvalidArgumentError("pass either sorter or key, not both")
    if sorter is not None:
        key = functools.cmp_to_key(sorter)

    if run_size is None:
        run_size = config.calculate_run_size()
    check_positive("run_size", run_size)
    storage_path = storage_path or config.external_storage_path

    iterator = iter(data)
    first_run = _next_run(iterator, run_size)
    if len(first_run) < run_size:
        first_run.sort(key=key, reverse=reverse)
        return first_run

    runs: List[SortRun] = []
    try:
        run = first_run
        while run:
            run.sort(key=key, reverse=reverse)
            try:
                runs.append(_spill(run, storage_path))
            except _UNPICKLABLE as e:
                logger.warning(f"cannot spill run to disk ({e}); sorting in memory")
                return _sort_remaining(runs, run, iterator, key, reverse)
            run = _next_run(iterator, run_size)

        logger.debug(
            f"merging {len(runs)} runs of up to {run_size:,} items "
            f"({sum(r.count for r in runs):,} total)"
        )
        return _merge_runs(runs, key, reverse)
    finally:
        # Cleanup
        for run_info in runs:
            if os.path.exists(run_info.filename):
                os.unlink(run_info.filename)


def _next_run(iterator: Iterator[T], run_size: int) -> List[T]:
    run = []
    for item in iterator:
        run.append(item)
        if len(run) >= run_size:
            break
    return run


def _sort_remaining(
    runs: List[SortRun],
    run: List[T],
    iterator: Iterator[T],
    key: Optional[Callable[[T], Any]],
    reverse: bool
) -> List[T]:
    """
    Finish a sort in memory: spilled runs, the current run, then the rest.

    Each run is already stably sorted and runs keep input order, so a stable
    sort over their concatenation keeps equal items in input order.
    """
    items = [item for run_info in runs for item in _read_run(run_info)]
    items.extend(run)
    items.extend(iterator)
    items.sort(key=key, reverse=reverse)
    return items


def _spill(run: List[T], storage_path: str) -> SortRun:
    """Write a sorted run to disk, one pickle record per item."""
    os.makedirs(storage_path, exist_ok=True)
    fd, filename = tempfile.mkstemp(suffix='.run', dir=storage_path)
    try:
        with os.fdopen(fd, 'wb') as f:
            for item in run:
                pickle.dump(item, f, protocol=pickle.HIGHEST_PROTOCOL)
    except BaseException:
        os.unlink(filename)
        raise

    logger.debug(f"spilled run of {len(run):,} items to {filename}")
    return SortRun(filename=filename, count=len(run))


def _read_run(run: SortRun) -> Iterator[Any]:
    with open(run.filename, 'rb') as f:
        for _ in range(run.count):
            yield pickle.load(f)


def _merge_runs(
    runs: List[SortRun],
    key: Optional[Callable[[T], Any]],
    reverse: bool
) -> List[T]:
    """Merge sorted runs using a k-way merge; ties favour earlier runs."""
    readers = [_read_run(run) for run in runs]
    try:
        return list(heapq.merge(*readers, key=key, reverse=reverse))
    finally:
        for reader in readers:
            reader.close()
