"""Reference backend running the scalar query path point by point."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterable

import numpy as np

from ..bulk import map_queries

if TYPE_CHECKING:
    from ..interpolator import LinearInterpolator


@dataclass
class PythonBulkBackend:
    """Works for any coordinate/value types the interpolator accepts."""

    interpolator: "LinearInterpolator"
    workers: int = 1
    chunk_size: int = 1024
    name: str = "python"

    def _map(self, query, xs: Iterable[Any]) -> np.ndarray:
        results = map_queries(query, xs, workers=self.workers, chunk_size=self.chunk_size)
        return np.asarray(results)

    def interpolate(self, xs: Iterable[Any]) -> np.ndarray:
        return self._map(self.interpolator.interpolate, xs)

    def interpolate_checked(self, xs: Iterable[Any]) -> np.ndarray:
        return self._map(self.interpolator.interpolate_checked, xs)


def build_python_backend(interpolator: "LinearInterpolator", workers: int = 1, chunk_size: int = 1024):
    return PythonBulkBackend(interpolator, workers=workers, chunk_size=chunk_size)
