"""Backend protocol and shared helpers for array kernels."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable, Protocol

import numpy as np

from ..errors import InvalidDataError, OutOfRangeLeftError, OutOfRangeRightError

if TYPE_CHECKING:
    from ..interpolator import LinearInterpolator

# per-point status codes written by the array kernels
OK = 0
LEFT = 1
RIGHT = 2


class BulkBackend(Protocol):
    name: str

    def interpolate(self, xs: Iterable[Any]) -> np.ndarray:
        ...

    def interpolate_checked(self, xs: Iterable[Any]) -> np.ndarray:
        ...


def table_arrays(interpolator: "LinearInterpolator") -> tuple[np.ndarray, np.ndarray]:
    """Return ``(coordinates, values)`` as numeric arrays for the array kernels.

    Raises ``ValueError`` when the table holds anything other than real
    coordinates and scalar real or complex values.
    """
    xs = np.asarray(interpolator.coordinates)
    if xs.dtype.kind not in "iuf":
        raise ValueError(f"array backends need real numeric coordinates, got dtype {xs.dtype}")
    if xs.dtype.kind in "iu" and int(xs[-1]) - int(xs[0]) > np.iinfo(np.int64).max:
        raise ValueError("coordinate span does not fit in int64")
    ys = np.asarray(interpolator.values)
    if ys.ndim != 1:
        raise ValueError("array backends need scalar sample values")
    if ys.dtype.kind in "biu":
        ys = ys.astype(np.float64)
    elif ys.dtype.kind not in "fc":
        raise ValueError(f"array backends need numeric sample values, got dtype {ys.dtype}")
    return xs, ys


def supports_arrays(interpolator: "LinearInterpolator") -> bool:
    try:
        table_arrays(interpolator)
    except ValueError:
        return False
    return True


def query_array(xs: Iterable[Any]) -> np.ndarray:
    q = np.asarray(list(xs) if not isinstance(xs, np.ndarray) else xs)
    if q.ndim != 1:
        q = q.reshape(-1)
    if q.dtype.kind == "f" and np.isnan(q).any():
        raise InvalidDataError("cannot interpolate at nan")
    return q


def raise_for_status(interpolator: "LinearInterpolator", q: np.ndarray, status: np.ndarray) -> None:
    """Raise the out-of-range error of the first failing point in query order."""
    bad = np.flatnonzero(status)
    if bad.size == 0:
        return
    pos = int(bad[0])
    point = q[pos].item()
    if status[pos] == LEFT:
        raise OutOfRangeLeftError(point, interpolator.min)
    raise OutOfRangeRightError(point, interpolator.max)
