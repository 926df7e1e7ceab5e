"""Default NumPy backend for bulk interpolation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterable

import numpy as np

from .base import LEFT, RIGHT, query_array, raise_for_status, table_arrays

if TYPE_CHECKING:
    from ..interpolator import LinearInterpolator


def interp_kernel(
    xs: np.ndarray, ys: np.ndarray, q: np.ndarray, tie_last: bool
) -> tuple[np.ndarray, np.ndarray]:
    """Vectorized lookup returning clamped values and per-point status codes."""
    n = xs.shape[0]
    idx = np.searchsorted(xs, q, side="right" if tie_last else "left")
    if tie_last:
        cand = np.clip(idx - 1, 0, n - 1)
        exact = (idx > 0) & (xs[cand] == q)
    else:
        cand = np.clip(idx, 0, n - 1)
        exact = (idx < n) & (xs[cand] == q)
    left = (idx == 0) & ~exact
    right = (idx == n) & ~exact

    i = np.clip(idx, 1, n - 1)
    x0 = xs[i - 1]
    y0 = ys[i - 1]
    span = (xs[i] - x0).astype(ys.dtype)
    offset = (q - x0).astype(ys.dtype)
    # lanes outside the interior may divide by zero; they are overwritten below
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        out = y0 + (ys[i] - y0) / span * offset

    out = np.where(exact, ys[cand], out)
    out = np.where(left, ys[0], out)
    out = np.where(right, ys[-1], out)
    status = np.where(left, LEFT, np.where(right, RIGHT, 0))
    return out, status


@dataclass
class NumpyBulkBackend:
    interpolator: "LinearInterpolator"
    name: str = "numpy"
    _xs: np.ndarray = field(init=False, repr=False)
    _ys: np.ndarray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._xs, self._ys = table_arrays(self.interpolator)
        self._tie_last = self.interpolator.config.tie_break == "last"

    def _run(self, xs: Iterable[Any]) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        q = query_array(xs)
        if q.size == 0:
            return q, np.empty(0, dtype=self._ys.dtype), np.empty(0, dtype=np.int64)
        out, status = interp_kernel(self._xs, self._ys, q, self._tie_last)
        return q, out, status

    def interpolate(self, xs: Iterable[Any]) -> np.ndarray:
        return self._run(xs)[1]

    def interpolate_checked(self, xs: Iterable[Any]) -> np.ndarray:
        q, out, status = self._run(xs)
        raise_for_status(self.interpolator, q, status)
        return out


def build_numpy_backend(interpolator: "LinearInterpolator"):
    return NumpyBulkBackend(interpolator)
