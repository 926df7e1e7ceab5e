"""Exception hierarchy for table construction and queries."""

from __future__ import annotations

from typing import Any


class InterpError(Exception):
    """Base class for all interpolation errors."""


class InvalidDataError(InterpError, ValueError):
    """A coordinate was NaN or infinite, or the input was empty."""

    def __init__(self, message: str = "Data contains a nan or inf") -> None:
        super().__init__(message)


class LengthMismatchError(InterpError, ValueError):
    def __init__(self, n_coordinates: int, n_values: int) -> None:
        self.n_coordinates = n_coordinates
        self.n_values = n_values
        super().__init__(
            f"coordinates and values must have the same length "
            f"(got {n_coordinates} and {n_values})"
        )


class OutOfRangeError(InterpError, ValueError):
    """A bounds-checked query fell outside ``[min, max]``."""

    side = ""
    _bound_name = "bound"

    def __init__(self, point: Any, bound: Any) -> None:
        self.point = point
        self.bound = bound
        super().__init__(
            f"Interpolation requested out of range. Point is to the {self.side} "
            f"of all data. point: {point}; {self._bound_name}: {bound}"
        )


class OutOfRangeLeftError(OutOfRangeError):
    side = "left"
    _bound_name = "min"

    @property
    def min(self) -> Any:
        return self.bound


class OutOfRangeRightError(OutOfRangeError):
    side = "right"
    _bound_name = "max"

    @property
    def max(self) -> Any:
        return self.bound


class ValueConversionError(InterpError, TypeError):
    """A coordinate difference could not be represented in the value domain."""

    def __init__(self, diff: Any, target: type) -> None:
        self.diff = diff
        self.target = target
        super().__init__(f"cannot convert coordinate difference {diff!r} to {target.__name__}")
