from __future__ import annotations

import math
import unittest

import numpy as np

from pyinterp1d.errors import InvalidDataError
from pyinterp1d.pair import SamplePair


class TestSamplePair(unittest.TestCase):
    def test_from_float_rejects_nan_and_inf(self) -> None:
        for bad in (math.nan, math.inf, -math.inf, np.float32("nan")):
            with self.assertRaises(InvalidDataError):
                SamplePair.from_float(bad, 1.0)

    def test_from_float_keeps_fields(self) -> None:
        pair = SamplePair.from_float(2.5, 7.0)
        self.assertEqual(pair.as_tuple(), (2.5, 7.0))

    def test_from_int_accepts_integer_types(self) -> None:
        pair = SamplePair.from_int(np.uint32(3), 1.5)
        self.assertEqual(pair.coordinate, 3)
        self.assertEqual(pair.value, 1.5)

    def test_from_int_rejects_non_integers(self) -> None:
        for bad in (math.nan, 1.5, np.float64(2.0), True):
            with self.assertRaises(TypeError):
                SamplePair.from_int(bad, 1.0)

    def test_equality_ignores_value(self) -> None:
        self.assertEqual(SamplePair(1.0, 2.0), SamplePair(1.0, 3.0))
        self.assertNotEqual(SamplePair(1.0, 2.0), SamplePair(2.0, 2.0))
        self.assertEqual(len({SamplePair(1, 2.0), SamplePair(1, 3.0)}), 1)

    def test_ordering_uses_coordinate(self) -> None:
        pairs = [SamplePair(3, 0.0), SamplePair(1, 9.0), SamplePair(2, 5.0)]
        self.assertEqual([p.coordinate for p in sorted(pairs)], [1, 2, 3])
        self.assertLess(SamplePair(1, 100.0), SamplePair(2, 0.0))
        self.assertGreaterEqual(SamplePair(2, 0.0), SamplePair(2, 100.0))

    def test_pairs_are_immutable(self) -> None:
        pair = SamplePair(1.0, 2.0)
        with self.assertRaises(AttributeError):
            pair.value = 3.0  # type: ignore[misc]


if __name__ == "__main__":
    unittest.main()
