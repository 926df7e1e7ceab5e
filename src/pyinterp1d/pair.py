"""Coordinate/value sample records."""

from __future__ import annotations

from dataclasses import dataclass
import functools
import math
from typing import Any

from .errors import InvalidDataError
from .protocols import is_int_coordinate


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class SamplePair:
    """One ``(coordinate, value)`` observation.

    Equality, hashing and ordering look at ``coordinate`` only, so two pairs
    sharing a coordinate compare equal whatever their values are.
    """

    coordinate: Any
    value: Any

    @classmethod
    def from_float(cls, coordinate: Any, value: Any) -> "SamplePair":
        if not math.isfinite(coordinate):
            raise InvalidDataError()
        return cls(coordinate, value)

    @classmethod
    def from_int(cls, coordinate: Any, value: Any) -> "SamplePair":
        if not is_int_coordinate(coordinate):
            raise TypeError(f"integer coordinate expected, got {coordinate!r}")
        return cls(coordinate, value)

    def as_tuple(self) -> tuple[Any, Any]:
        return self.coordinate, self.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SamplePair):
            return NotImplemented
        return self.coordinate == other.coordinate

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SamplePair):
            return NotImplemented
        return self.coordinate < other.coordinate

    def __hash__(self) -> int:
        return hash(self.coordinate)
