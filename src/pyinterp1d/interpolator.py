"""Piecewise-linear interpolation over an immutable, coordinate-sorted table."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from dataclasses import dataclass, field
import enum
import logging
import math
import numbers
from operator import attrgetter
from typing import Any, Iterable, Sequence

import numpy as np

from .backends.factory import build_backend
from .config import DEFAULT_CONFIG, InterpConfig
from .errors import (
    InvalidDataError,
    LengthMismatchError,
    OutOfRangeLeftError,
    OutOfRangeRightError,
)
from .pair import SamplePair
from .protocols import is_float_coordinate, is_int_coordinate, to_value_domain

logger = logging.getLogger(__name__)


class Region(enum.Enum):
    EXACT = "exact"
    LEFT = "left"
    INSIDE = "inside"
    RIGHT = "right"


def _pair_inputs(
    x: Iterable[Any], y: Iterable[Any], config: InterpConfig
) -> tuple[list[Any], list[Any]]:
    xs = list(x)
    ys = list(y)
    if len(xs) != len(ys):
        if config.strict_lengths:
            raise LengthMismatchError(len(xs), len(ys))
        n = min(len(xs), len(ys))
        logger.debug("truncating inputs of length %d/%d to %d", len(xs), len(ys), n)
        xs, ys = xs[:n], ys[:n]
    if not xs:
        raise InvalidDataError("cannot build an interpolator from empty input")
    return xs, ys


def _is_nan(x: Any) -> bool:
    return isinstance(x, (float, np.floating)) and math.isnan(x)


def _difference(a: Any, b: Any) -> Any:
    # numpy integer subtraction wraps on overflow, Python ints do not
    if isinstance(a, numbers.Integral) and isinstance(b, numbers.Integral):
        return int(a) - int(b)
    return a - b


def _binary_search(coords: Sequence[Any], x: Any) -> tuple[bool, int]:
    """Plain bisection that stops at the first equal coordinate it meets."""
    lo, hi = 0, len(coords)
    while lo < hi:
        mid = (lo + hi) // 2
        c = coords[mid]
        if c == x:
            return True, mid
        if c < x:
            lo = mid + 1
        else:
            hi = mid
    return False, lo


@dataclass(frozen=True, eq=False)
class LinearInterpolator:
    """Immutable sample table answering linear-interpolation queries.

    ``samples`` is sorted ascending by coordinate. ``count``, ``min`` and
    ``max`` are cached once here and never recomputed. Float coordinates are
    checked for NaN/Inf by the float constructors and the ``*_int``
    constructors accept integer coordinates only. ``from_sorted`` and
    ``from_sorted_int`` trust the caller's order, and an unsorted table built
    through a "sorted" entry point gives undefined query results. Tables
    compare by identity.
    """

    samples: tuple[SamplePair, ...]
    config: InterpConfig = field(default=DEFAULT_CONFIG, repr=False)
    count: int = field(init=False)
    min: Any = field(init=False)
    max: Any = field(init=False)

    def __post_init__(self) -> None:
        samples = tuple(self.samples)
        if not samples:
            raise InvalidDataError("cannot build an interpolator from empty input")
        object.__setattr__(self, "samples", samples)
        object.__setattr__(self, "count", len(samples))
        object.__setattr__(self, "min", samples[0].coordinate)
        object.__setattr__(self, "max", samples[-1].coordinate)
        object.__setattr__(self, "_coordinates", tuple(p.coordinate for p in samples))
        object.__setattr__(self, "_backends", {})
        logger.debug(
            "built interpolator with %d samples over [%s, %s]", self.count, self.min, self.max
        )

    @classmethod
    def from_unsorted(cls, x: Iterable[Any], y: Iterable[Any], config: InterpConfig | None = None) -> "LinearInterpolator":
        """Build from float coordinates in any order; raises ``InvalidDataError`` on NaN/Inf."""
        cfg = config or DEFAULT_CONFIG
        xs, ys = _pair_inputs(x, y, cfg)
        pairs = [SamplePair.from_float(xi, yi) for xi, yi in zip(xs, ys)]
        pairs.sort(key=attrgetter("coordinate"))
        return cls(tuple(pairs), cfg)

    @classmethod
    def from_sorted(cls, x: Iterable[Any], y: Iterable[Any], config: InterpConfig | None = None) -> "LinearInterpolator":
        """Build from float coordinates the caller guarantees are ascending."""
        cfg = config or DEFAULT_CONFIG
        xs, ys = _pair_inputs(x, y, cfg)
        return cls(tuple(SamplePair.from_float(xi, yi) for xi, yi in zip(xs, ys)), cfg)

    @classmethod
    def from_unsorted_int(cls, x: Iterable[Any], y: Iterable[Any], config: InterpConfig | None = None) -> "LinearInterpolator":
        cfg = config or DEFAULT_CONFIG
        xs, ys = _pair_inputs(x, y, cfg)
        pairs = [SamplePair.from_int(xi, yi) for xi, yi in zip(xs, ys)]
        pairs.sort(key=attrgetter("coordinate"))
        return cls(tuple(pairs), cfg)

    @classmethod
    def from_sorted_int(cls, x: Iterable[Any], y: Iterable[Any], config: InterpConfig | None = None) -> "LinearInterpolator":
        cfg = config or DEFAULT_CONFIG
        xs, ys = _pair_inputs(x, y, cfg)
        return cls(tuple(SamplePair.from_int(xi, yi) for xi, yi in zip(xs, ys)), cfg)

    @classmethod
    def from_samples(
        cls,
        x: Iterable[Any],
        y: Iterable[Any],
        *,
        assume_sorted: bool = False,
        config: InterpConfig | None = None,
    ) -> "LinearInterpolator":
        """Pick the float or integer constructor from the coordinates given."""
        xs = list(x)
        if xs and all(is_int_coordinate(v) for v in xs):
            build = cls.from_sorted_int if assume_sorted else cls.from_unsorted_int
        elif all(is_float_coordinate(v) or is_int_coordinate(v) for v in xs):
            build = cls.from_sorted if assume_sorted else cls.from_unsorted
        else:
            raise TypeError("coordinates must be integer or floating-point numbers")
        return build(xs, y, config)

    @property
    def domain(self) -> tuple[Any, Any]:
        return self.min, self.max

    @property
    def coordinates(self) -> tuple[Any, ...]:
        return self._coordinates  # type: ignore[attr-defined]

    @property
    def values(self) -> tuple[Any, ...]:
        return tuple(p.value for p in self.samples)

    def __len__(self) -> int:
        return self.count

    def __contains__(self, x: object) -> bool:
        if _is_nan(x):
            return False
        found, _ = self._search(x)
        return found

    def _search(self, x: Any) -> tuple[bool, int]:
        coords = self.coordinates
        tie_break = self.config.tie_break
        if tie_break == "any":
            return _binary_search(coords, x)
        if tie_break == "last":
            hi = bisect_right(coords, x)
            if hi and coords[hi - 1] == x:
                return True, hi - 1
            return False, hi
        lo = bisect_left(coords, x)
        if lo < self.count and coords[lo] == x:
            return True, lo
        return False, lo

    def locate(self, x: Any) -> tuple[Region, int]:
        """Classify ``x`` and return the matching or insertion index."""
        if _is_nan(x):
            raise InvalidDataError(f"cannot interpolate at {x}")
        found, index = self._search(x)
        if found:
            return Region.EXACT, index
        if index == 0:
            return Region.LEFT, index
        if index == self.count:
            return Region.RIGHT, index
        return Region.INSIDE, index

    def _blend(self, index: int, x: Any) -> Any:
        left = self.samples[index - 1]
        right = self.samples[index]
        span = to_value_domain(_difference(right.coordinate, left.coordinate), left.value)
        offset = to_value_domain(_difference(x, left.coordinate), left.value)
        return left.value + (right.value - left.value) / span * offset

    def interpolate_checked(self, x: Any) -> Any:
        """Interpolate at ``x``, raising if it lies outside ``[min, max]``."""
        region, index = self.locate(x)
        if region is Region.EXACT:
            return self.samples[index].value
        if region is Region.LEFT:
            raise OutOfRangeLeftError(x, self.min)
        if region is Region.RIGHT:
            raise OutOfRangeRightError(x, self.max)
        return self._blend(index, x)

    def interpolate(self, x: Any) -> Any:
        """Interpolate at ``x``, returning the edge value outside the domain."""
        region, index = self.locate(x)
        if region is Region.EXACT:
            return self.samples[index].value
        if region is Region.LEFT:
            return self.samples[0].value
        if region is Region.RIGHT:
            return self.samples[-1].value
        return self._blend(index, x)

    def bulk_backend(self, name: str | None = None):
        """Return the bulk backend ``name``, built once per table."""
        key = name or self.config.backend
        cache = self._backends  # type: ignore[attr-defined]
        bulk = cache.get(key)
        if bulk is None:
            bulk = cache.setdefault(key, build_backend(key, self))
        return bulk

    def interpolate_many(self, xs: Iterable[Any], backend: str | None = None) -> np.ndarray:
        return self.bulk_backend(backend).interpolate(xs)

    def interpolate_checked_many(self, xs: Iterable[Any], backend: str | None = None) -> np.ndarray:
        return self.bulk_backend(backend).interpolate_checked(xs)
