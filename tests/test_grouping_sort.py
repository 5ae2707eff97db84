#!/usr/bin/env python3
"""
Tests for grouping and sorting, including sorts that spill runs to disk.
"""

import os
import random
import shutil
import tempfile
import threading
import unittest

from lazyenum import InvalidArgumentError, frequencies, group_by, sort
from lazyenum.config import EnumConfig


class TestGrouping(unittest.TestCase):

    def test_frequencies(self):
        self.assertEqual(frequencies([1, 1, 2, 3, 3, 3]), {1: 2, 2: 1, 3: 3})
        self.assertEqual(frequencies(["a", "bb", "c"], len), {1: 2, 2: 1})
        self.assertEqual(frequencies([]), {})

    def test_group_by(self):
        self.assertEqual(
            group_by([1, 2, 3, 4, 5, 6], lambda x: x % 2),
            {0: [2, 4, 6], 1: [1, 3, 5]},
        )

    def test_group_by_with_value_func(self):
        words = ["apple", "avocado", "banana", "blueberry", "cherry"]
        self.assertEqual(
            group_by(words, lambda w: w[0], len),
            {"a": [5, 7], "b": [6, 9], "c": [6]},
        )

    def test_group_by_keeps_first_encounter_key_order(self):
        grouped = group_by([3, 1, 2, 6, 4], lambda x: x % 3)
        self.assertEqual(list(grouped), [0, 1, 2])
        self.assertEqual(grouped[0], [3, 6])

    def test_group_by_requires_key_func(self):
        with self.assertRaises(InvalidArgumentError):
            group_by([1], None)


class TestInMemorySort(unittest.TestCase):

    def test_natural_ascending(self):
        self.assertEqual(sort([3, 1, 2]), [1, 2, 3])
        self.assertEqual(sort([10, 9, 100]), [9, 10, 100])
        self.assertEqual(sort([]), [])

    def test_comparator(self):
        self.assertEqual(sort([3, 1, 2], lambda a, b: b - a), [3, 2, 1])

    def test_key_and_reverse(self):
        self.assertEqual(sort(["ccc", "a", "bb"], key=len), ["a", "bb", "ccc"])
        self.assertEqual(sort([1, 3, 2], reverse=True), [3, 2, 1])

    def test_comparator_sort_is_stable(self):
        data = [("a", 1), ("b", 0), ("c", 1), ("d", 0)]
        self.assertEqual(
            sort(data, lambda x, y: x[1] - y[1]),
            [("b", 0), ("d", 0), ("a", 1), ("c", 1)],
        )

    def test_sorter_and_key_conflict(self):
        with self.assertRaises(InvalidArgumentError):
            sort([1], lambda a, b: a - b, key=abs)

    def test_invalid_run_size(self):
        with self.assertRaises(InvalidArgumentError):
            sort([1], run_size=0)


class TestExternalSort(unittest.TestCase):
    """Sorts longer than one run spill to disk and merge back."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        config = EnumConfig.get_instance()
        self.saved = (config.external_storage_path, config.fixed_run_size)
        EnumConfig.set_defaults(
            external_storage_path=self.temp_dir,
            fixed_run_size=7,
        )
        self.rng = random.Random(7)

    def tearDown(self):
        path, run_size = self.saved
        EnumConfig.set_defaults(external_storage_path=path, fixed_run_size=run_size)
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_spilled_sort_matches_builtin(self):
        data = [self.rng.randint(0, 50) for _ in range(100)]
        with self.assertLogs("lazyenum.algorithms.external_sort", level="DEBUG") as logs:
            result = sort(iter(data))
        self.assertEqual(result, sorted(data))
        self.assertTrue(any("merging 15 runs" in line for line in logs.output))

    def test_run_files_removed(self):
        sort([self.rng.random() for _ in range(50)])
        self.assertEqual(os.listdir(self.temp_dir), [])

    def test_spilled_sort_is_stable(self):
        data = [(self.rng.randint(0, 3), i) for i in range(60)]

        def first(pair):
            return pair[0]

        self.assertEqual(sort(data, key=first), sorted(data, key=first))
        self.assertEqual(
            sort(data, key=first, reverse=True),
            sorted(data, key=first, reverse=True),
        )
        self.assertEqual(
            sort(data, lambda a, b: a[0] - b[0]),
            sorted(data, key=first),
        )

    def test_exact_multiple_of_run_size(self):
        data = list(range(14, 0, -1))
        self.assertEqual(sort(data), list(range(1, 15)))

    def test_explicit_run_size_and_path(self):
        other = tempfile.mkdtemp()
        try:
            data = [self.rng.random() for _ in range(30)]
            self.assertEqual(sort(data, run_size=4, storage_path=other), sorted(data))
            self.assertEqual(os.listdir(other), [])
        finally:
            shutil.rmtree(other, ignore_errors=True)

    def test_unpicklable_items_sort_in_memory(self):
        class Item:
            def __init__(self, v):
                self.v = v
                self.lock = threading.Lock()

        items = [Item(v) for v in [3, 1, 2, 5, 4]]
        with self.assertLogs("lazyenum.algorithms.external_sort", level="WARNING"):
            result = sort(items, key=lambda i: i.v, run_size=2)
        self.assertEqual([i.v for i in result], [1, 2, 3, 4, 5])
        self.assertEqual(os.listdir(self.temp_dir), [])

    def test_failed_spill_after_earlier_runs(self):
        """Runs already on disk are read back and no run file is left over."""
        data = [(self.rng.randint(0, 3), i, None) for i in range(20)]
        data[11] = (data[11][0], 11, lambda: None)

        def first(triple):
            return triple[0]

        with self.assertLogs("lazyenum.algorithms.external_sort", level="WARNING"):
            result = sort(data, key=first, run_size=3)
        self.assertEqual(result, sorted(data, key=first))
        self.assertEqual(os.listdir(self.temp_dir), [])


if __name__ == "__main__":
    unittest.main()
