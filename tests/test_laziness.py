#!/usr/bin/env python3
"""
Tests that operators pull only what each output element needs.
"""

import itertools
import unittest

from lazyenum import Stream
from lazyenum.algorithms import search
from lazyenum.streams import functions as lazy


class CountingSource:
    """Infinite (or bounded) source that records every pull."""

    def __init__(self, limit=None):
        self.limit = limit
        self.pulled = []

    def __iter__(self):
        for value in itertools.count(1):
            if self.limit is not None and value > self.limit:
                return
            self.pulled.append(value)
            yield value


class TestLaziness(unittest.TestCase):
    """Test deferred execution and minimal pulling."""

    def test_building_a_chain_pulls_nothing(self):
        source = CountingSource()
        calls = []
        (Stream(source)
            .map(lambda x: calls.append(x) or x)
            .chunk_every(3, 1)
            .intersperse(None)
            .dedup())
        self.assertEqual(source.pulled, [])
        self.assertEqual(calls, [])

    def test_take_stops_pulling(self):
        source = CountingSource()
        result = lazy.take(source, 3).to_list()
        self.assertEqual(result, [1, 2, 3])
        self.assertEqual(source.pulled, [1, 2, 3])

    def test_take_zero_pulls_nothing(self):
        source = CountingSource()
        self.assertEqual(lazy.take(source, 0).to_list(), [])
        self.assertEqual(source.pulled, [])

    def test_side_effects_once_per_element_in_order(self):
        seen = []

        def record(x):
            seen.append(x)
            return x * 2

        result = Stream(CountingSource()).map(record).take(2).to_list()
        self.assertEqual(result, [2, 4])
        self.assertEqual(seen, [1, 2])

    def test_chain_pulls_one_element_per_output(self):
        source = CountingSource()
        iterator = iter(Stream(source).map(lambda x: x + 1).filter(lambda x: x % 2 == 0))
        self.assertEqual(next(iterator), 2)
        self.assertEqual(source.pulled, [1])
        self.assertEqual(next(iterator), 4)
        self.assertEqual(source.pulled, [1, 2, 3])

    def test_chunk_every_pulls_only_to_fill_window(self):
        source = CountingSource()
        iterator = iter(lazy.chunk_every(source, 2, 1))
        self.assertEqual(next(iterator), [1, 2])
        self.assertEqual(source.pulled, [1, 2])
        self.assertEqual(next(iterator), [2, 3])
        self.assertEqual(source.pulled, [1, 2, 3])

    def test_intersperse_pulls_ahead_only_for_separator(self):
        source = CountingSource()
        iterator = iter(lazy.intersperse(source, 0))
        self.assertEqual(next(iterator), 1)
        self.assertEqual(source.pulled, [1])
        self.assertEqual(next(iterator), 0)
        self.assertEqual(source.pulled, [1, 2])
        self.assertEqual(next(iterator), 2)
        self.assertEqual(source.pulled, [1, 2])

    def test_chunk_by_looks_ahead_one(self):
        source = CountingSource()
        iterator = iter(lazy.chunk_by(source, lambda x: x // 3))
        self.assertEqual(next(iterator), [1, 2])
        self.assertEqual(source.pulled, [1, 2, 3])

    def test_short_circuit_consumers(self):
        source = CountingSource()
        self.assertTrue(search.any(source, lambda x: x > 4))
        self.assertEqual(source.pulled, [1, 2, 3, 4, 5])

        source = CountingSource()
        self.assertFalse(search.all(source, lambda x: x < 3))
        self.assertEqual(source.pulled, [1, 2, 3])

        source = CountingSource()
        self.assertEqual(search.find(source, lambda x: x % 7 == 0), 7)
        self.assertEqual(len(source.pulled), 7)

        source = CountingSource()
        self.assertEqual(search.find_index(source, lambda x: x == 3), 2)
        self.assertEqual(source.pulled, [1, 2, 3])

        source = CountingSource()
        self.assertTrue(search.member(source, 4))
        self.assertEqual(source.pulled, [1, 2, 3, 4])

        source = CountingSource()
        self.assertEqual(search.at(source, 3), 4)
        self.assertEqual(source.pulled, [1, 2, 3, 4])

        source = CountingSource()
        self.assertFalse(search.empty(source))
        self.assertEqual(source.pulled, [1])

    def test_infinite_source_with_finite_consumer(self):
        evens = Stream.iterate(0, lambda x: x + 1).filter(lambda x: x % 2 == 0)
        self.assertEqual(evens.drop_every(2).take(3).to_list(), [2, 6, 10])
        self.assertEqual(evens.map_every(2, lambda x: -x).take(4).to_list(), [0, -2, 4, -6])

    def test_flat_map_of_infinite_inner_is_lazy(self):
        stream = lazy.flat_map([1, 2], lambda x: itertools.repeat(x))
        self.assertEqual(stream.take(3).to_list(), [1, 1, 1])


if __name__ == "__main__":
    unittest.main()
