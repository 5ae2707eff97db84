#!/usr/bin/env python3
"""
Tests that the eager API mirrors the lazy one.
"""

import unittest

from lazyenum import eager, InvalidArgumentError
from lazyenum.algorithms import reducers, search
from lazyenum.streams import functions as lazy


class TestEagerParity(unittest.TestCase):

    def test_same_results_as_drained_lazy_chain(self):
        data = [4, 4, 1, 3, 3, 3, 8, 2, 2, 9]
        cases = [
            ("map", (lambda x: x * 2,)),
            ("filter", (lambda x: x > 2,)),
            ("reject", (lambda x: x > 2,)),
            ("flat_map", (lambda x: [x, -x],)),
            ("take", (4,)),
            ("drop", (4,)),
            ("take_while", (lambda x: x > 2,)),
            ("drop_while", (lambda x: x > 2,)),
            ("dedup", ()),
            ("uniq", ()),
            ("map_every", (2, str)),
            ("intersperse", (0,)),
            ("map_intersperse", (str, ",")),
            ("chunk_by", (lambda x: x % 2,)),
            ("chunk_every", (3, 2)),
            ("drop_every", (3,)),
        ]
        for name, args in cases:
            with self.subTest(operator=name):
                expected = list(getattr(lazy, name)(data, *args))
                result = getattr(eager, name)(data, *args)
                self.assertIsInstance(result, list)
                self.assertEqual(result, expected)

    def test_concat(self):
        self.assertEqual(eager.concat([[1], (2, 3), iter([4])]), [1, 2, 3, 4])

    def test_evaluates_immediately(self):
        calls = []
        eager.map([1, 2], calls.append)
        self.assertEqual(calls, [1, 2])

    def test_validation_matches(self):
        with self.assertRaises(InvalidArgumentError):
            eager.chunk_every([1, 2], 0)

    def test_wrappers_keep_names(self):
        self.assertEqual(eager.chunk_every.__name__, "chunk_every")
        self.assertEqual(eager.chunk_every.__doc__, lazy.chunk_every.__doc__)

    def test_aggregators_are_shared(self):
        self.assertIs(eager.reduce, reducers.reduce)
        self.assertIs(eager.min_max, reducers.min_max)
        self.assertIs(eager.find_value, search.find_value)


if __name__ == "__main__":
    unittest.main()
