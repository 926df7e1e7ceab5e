from __future__ import annotations

from decimal import Decimal
import math
import unittest

import numpy as np

from pyinterp1d.backends.factory import build_backend
from pyinterp1d.config import InterpConfig
from pyinterp1d.errors import InvalidDataError, OutOfRangeLeftError, OutOfRangeRightError
from pyinterp1d.interpolator import LinearInterpolator


def _random_table(seed: int = 0, n: int = 64) -> LinearInterpolator:
    rng = np.random.default_rng(seed)
    return LinearInterpolator.from_unsorted(rng.random(n) * 10.0, rng.normal(size=n))


class TestNumpyBackend(unittest.TestCase):
    def test_matches_scalar_path(self) -> None:
        interp = _random_table()
        rng = np.random.default_rng(1)
        q = np.concatenate([rng.random(500) * 12.0 - 1.0, np.asarray(interp.coordinates)])
        bulk = build_backend("numpy", interp)
        expected = np.array([interp.interpolate(x) for x in q])
        np.testing.assert_allclose(bulk.interpolate(q), expected, rtol=1.0e-12, atol=1.0e-14)

        inside = q[(q >= interp.min) & (q <= interp.max)]
        expected = np.array([interp.interpolate_checked(x) for x in inside])
        np.testing.assert_allclose(bulk.interpolate_checked(inside), expected, rtol=1.0e-12, atol=1.0e-14)

    def test_exact_matches_are_returned_verbatim(self) -> None:
        interp = _random_table(seed=5)
        out = build_backend("numpy", interp).interpolate_checked(list(interp.coordinates))
        np.testing.assert_array_equal(out, np.asarray(interp.values))

    def test_checked_raises_first_failure(self) -> None:
        interp = LinearInterpolator.from_sorted([1.0, 3.0, 5.0], [5.0, 3.0, 4.0])
        bulk = build_backend("numpy", interp)
        with self.assertRaises(OutOfRangeLeftError) as ctx:
            bulk.interpolate_checked([2.0, 0.0, 7.0])
        self.assertEqual(ctx.exception.point, 0.0)
        self.assertEqual(ctx.exception.min, 1.0)
        with self.assertRaises(OutOfRangeRightError) as ctx_r:
            bulk.interpolate_checked([2.0, 7.0, 0.0])
        self.assertEqual(ctx_r.exception.max, 5.0)
        np.testing.assert_array_equal(bulk.interpolate([0.0, 2.0, 4.0, 7.0]), [5.0, 4.0, 3.5, 4.0])

    def test_integer_coordinates(self) -> None:
        interp = LinearInterpolator.from_sorted_int([1, 3, 5], [5.0, 3.0, 4.0])
        out = interp.interpolate_many([0, 2, 4, 6], backend="numpy")
        np.testing.assert_array_equal(out, [5.0, 4.0, 3.5, 4.0])

    def test_complex_values(self) -> None:
        interp = LinearInterpolator.from_sorted([1.0, 2.0, 3.0], [5 + 4j, 3 + 3j, 4 + 5j])
        out = interp.interpolate_checked_many([1.5, 2.5], backend="numpy")
        np.testing.assert_allclose(out, [4.0 + 3.5j, 3.5 + 4.0j])

    def test_single_sample(self) -> None:
        interp = LinearInterpolator.from_sorted([1.0], [7.0])
        bulk = build_backend("numpy", interp)
        np.testing.assert_array_equal(bulk.interpolate([0.0, 1.0, 2.0]), [7.0, 7.0, 7.0])
        with self.assertRaises(OutOfRangeLeftError):
            bulk.interpolate_checked([1.0, 0.0])

    def test_tie_break(self) -> None:
        x = [0.0, 1.0, 1.0, 2.0]
        y = [0.0, 10.0, 20.0, 30.0]
        first = LinearInterpolator.from_sorted(x, y, InterpConfig(tie_break="first"))
        last = LinearInterpolator.from_sorted(x, y, InterpConfig(tie_break="last"))
        np.testing.assert_array_equal(first.interpolate_many([1.0, 1.5], backend="numpy"), [10.0, 25.0])
        np.testing.assert_array_equal(last.interpolate_many([1.0, 1.5], backend="numpy"), [20.0, 25.0])

    def test_nan_query(self) -> None:
        bulk = build_backend("numpy", _random_table())
        with self.assertRaises(InvalidDataError):
            bulk.interpolate([0.5, math.nan])

    def test_empty_query(self) -> None:
        out = build_backend("numpy", _random_table()).interpolate_checked([])
        self.assertEqual(out.shape, (0,))


class TestFactory(unittest.TestCase):
    def test_unknown_backend(self) -> None:
        with self.assertRaises(ValueError):
            build_backend("fortran", _random_table())

    def test_numpy_rejects_non_numeric_values(self) -> None:
        interp = LinearInterpolator.from_sorted_int([0, 4], [Decimal("1"), Decimal("3")])
        with self.assertRaises(ValueError):
            build_backend("numpy", interp)

    def test_auto_falls_back_to_python(self) -> None:
        interp = LinearInterpolator.from_sorted_int([0, 4], [Decimal("1"), Decimal("3")])
        bulk = build_backend("auto", interp)
        self.assertEqual(bulk.name, "python")
        self.assertEqual(list(bulk.interpolate([1, 9])), [Decimal("1.5"), Decimal("3")])

    def test_auto_falls_back_for_int64_span_overflow(self) -> None:
        info = np.iinfo(np.int64)
        interp = LinearInterpolator.from_sorted_int(np.array([info.min, info.max], dtype=np.int64), [0.0, 1.0])
        with self.assertRaises(ValueError):
            build_backend("numpy", interp)
        bulk = build_backend("auto", interp)
        self.assertEqual(bulk.name, "python")
        np.testing.assert_allclose(bulk.interpolate([np.int64(0)]), [0.5])

    def test_auto_picks_array_backend_for_numeric_tables(self) -> None:
        bulk = build_backend("auto", _random_table())
        self.assertIn(bulk.name, ("numba", "jax", "numpy"))

    def test_python_backend_uses_config_workers(self) -> None:
        interp = LinearInterpolator.from_sorted([1.0, 3.0, 5.0], [5.0, 3.0, 4.0], InterpConfig(workers=3, chunk_size=2))
        bulk = build_backend("python", interp)
        self.assertEqual((bulk.workers, bulk.chunk_size), (3, 2))
        np.testing.assert_array_equal(bulk.interpolate([0.0, 2.0, 4.0, 6.0, 3.0]), [5.0, 4.0, 3.5, 4.0, 3.0])
        with self.assertRaises(OutOfRangeRightError):
            bulk.interpolate_checked([2.0, 4.0, 6.0, 0.0])


if __name__ == "__main__":
    unittest.main()
