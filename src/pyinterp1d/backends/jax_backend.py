"""JAX-backed bulk interpolation backend."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import partial
from typing import TYPE_CHECKING, Any, Iterable

import numpy as np

from .base import LEFT, RIGHT, query_array, raise_for_status, table_arrays

if TYPE_CHECKING:
    from ..interpolator import LinearInterpolator

try:
    import jax
    from jax import config as jax_config
    import jax.numpy as jnp
except Exception as exc:  # pragma: no cover - optional dependency
    jax = None
    jax_config = None
    jnp = None
    _JAX_IMPORT_ERROR = exc
else:
    _JAX_IMPORT_ERROR = None
    # Match the float64 results of the scalar and NumPy paths.
    jax_config.update("jax_enable_x64", True)


if jax is not None:

    @partial(jax.jit, static_argnames=("tie_last",))
    def _interp_jax(
        xs: jnp.ndarray, ys: jnp.ndarray, q: jnp.ndarray, tie_last: bool
    ) -> tuple[jnp.ndarray, jnp.ndarray]:
        n = xs.shape[0]
        idx = jnp.searchsorted(xs, q, side="right" if tie_last else "left")
        if tie_last:
            cand = jnp.clip(idx - 1, 0, n - 1)
            exact = (idx > 0) & (xs[cand] == q)
        else:
            cand = jnp.clip(idx, 0, n - 1)
            exact = (idx < n) & (xs[cand] == q)
        left = (idx == 0) & ~exact
        right = (idx == n) & ~exact

        i = jnp.clip(idx, 1, n - 1)
        x0 = xs[i - 1]
        y0 = ys[i - 1]
        span = (xs[i] - x0).astype(ys.dtype)
        offset = (q - x0).astype(ys.dtype)
        out = y0 + (ys[i] - y0) / span * offset

        out = jnp.where(exact, ys[cand], out)
        out = jnp.where(left, ys[0], out)
        out = jnp.where(right, ys[-1], out)
        status = jnp.where(left, LEFT, jnp.where(right, RIGHT, 0))
        return out, status


@dataclass
class JaxBulkBackend:
    interpolator: "LinearInterpolator"
    name: str = "jax"
    _xs: np.ndarray = field(init=False, repr=False)
    _ys: Any = field(init=False, repr=False)

    def __post_init__(self) -> None:
        xs, ys = table_arrays(self.interpolator)
        self._xs = xs
        self._ys = jnp.asarray(ys)
        self._tie_last = self.interpolator.config.tie_break == "last"

    def _run(self, xs: Iterable[Any]) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        q = query_array(xs)
        if q.size == 0:
            return q, np.empty(0, dtype=np.asarray(self._ys).dtype), np.empty(0, dtype=np.int64)
        # searchsorted wants coordinates and queries in one dtype
        dtype = np.result_type(self._xs.dtype, q.dtype)
        xs_j = jnp.asarray(self._xs.astype(dtype, copy=False))
        out, status = _interp_jax(xs_j, self._ys, jnp.asarray(q.astype(dtype, copy=False)), self._tie_last)
        return q, np.asarray(out), np.asarray(status)

    def interpolate(self, xs: Iterable[Any]) -> np.ndarray:
        return self._run(xs)[1]

    def interpolate_checked(self, xs: Iterable[Any]) -> np.ndarray:
        q, out, status = self._run(xs)
        raise_for_status(self.interpolator, q, status)
        return out


def build_jax_backend(interpolator: "LinearInterpolator"):
    if jnp is None:
        raise RuntimeError(f"JAX backend unavailable: {_JAX_IMPORT_ERROR}") from _JAX_IMPORT_ERROR
    return JaxBulkBackend(interpolator)
