"""Numba-accelerated bulk interpolation backend."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterable

import numpy as np

from .base import LEFT, RIGHT, query_array, raise_for_status, table_arrays

if TYPE_CHECKING:
    from ..interpolator import LinearInterpolator

try:
    from numba import njit
except Exception as exc:  # pragma: no cover - optional dependency
    njit = None
    _NUMBA_IMPORT_ERROR = exc
else:
    _NUMBA_IMPORT_ERROR = None


if njit is not None:

    @njit(cache=True)
    def _interp_numba(
        xs: np.ndarray,
        ys: np.ndarray,
        q: np.ndarray,
        tie_last: bool,
        out: np.ndarray,
        status: np.ndarray,
    ) -> None:
        n = xs.shape[0]
        for k in range(q.shape[0]):
            x = q[k]
            lo = 0
            hi = n
            if tie_last:
                while lo < hi:
                    mid = (lo + hi) // 2
                    if x < xs[mid]:
                        hi = mid
                    else:
                        lo = mid + 1
                if lo > 0 and xs[lo - 1] == x:
                    out[k] = ys[lo - 1]
                    status[k] = 0
                    continue
            else:
                while lo < hi:
                    mid = (lo + hi) // 2
                    if xs[mid] < x:
                        lo = mid + 1
                    else:
                        hi = mid
                if lo < n and xs[lo] == x:
                    out[k] = ys[lo]
                    status[k] = 0
                    continue
            if lo == 0:
                out[k] = ys[0]
                status[k] = LEFT
            elif lo == n:
                out[k] = ys[n - 1]
                status[k] = RIGHT
            else:
                span = float(xs[lo] - xs[lo - 1])
                offset = float(x - xs[lo - 1])
                out[k] = ys[lo - 1] + (ys[lo] - ys[lo - 1]) / span * offset
                status[k] = 0

    # Prime JIT cache once to avoid a latency spike on the first bulk call.
    _interp_numba(
        np.array([0.0, 1.0], dtype=np.float64),
        np.array([0.0, 1.0], dtype=np.float64),
        np.array([0.5], dtype=np.float64),
        False,
        np.empty(1, dtype=np.float64),
        np.empty(1, dtype=np.int64),
    )


@dataclass
class NumbaBulkBackend:
    """Bulk interpolation through a numba-jitted search and blend loop."""

    interpolator: "LinearInterpolator"
    name: str = "numba"
    _xs: np.ndarray = field(init=False, repr=False)
    _ys: np.ndarray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        xs, ys = table_arrays(self.interpolator)
        self._xs = np.ascontiguousarray(xs)
        self._ys = np.ascontiguousarray(ys)
        self._tie_last = self.interpolator.config.tie_break == "last"

    def _run(self, xs: Iterable[Any]) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        q = np.ascontiguousarray(query_array(xs))
        out = np.empty(q.shape[0], dtype=self._ys.dtype)
        status = np.zeros(q.shape[0], dtype=np.int64)
        if q.size:
            _interp_numba(self._xs, self._ys, q, self._tie_last, out, status)
        return q, out, status

    def interpolate(self, xs: Iterable[Any]) -> np.ndarray:
        return self._run(xs)[1]

    def interpolate_checked(self, xs: Iterable[Any]) -> np.ndarray:
        q, out, status = self._run(xs)
        raise_for_status(self.interpolator, q, status)
        return out


def build_numba_backend(interpolator: "LinearInterpolator"):
    if njit is None:
        raise RuntimeError(
            f"Numba backend unavailable: {_NUMBA_IMPORT_ERROR}"
        ) from _NUMBA_IMPORT_ERROR
    return NumbaBulkBackend(interpolator)
