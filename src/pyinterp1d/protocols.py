"""Numeric capabilities required of coordinates and values."""

from __future__ import annotations

import cmath
import numbers
from typing import Any, Protocol, TypeVar

import numpy as np

from .errors import ValueConversionError

_Self = TypeVar("_Self")


class OrderableNumeric(Protocol):
    """Coordinate type: totally ordered, subtractable and printable."""

    def __lt__(self, other: Any) -> bool:
        ...

    def __eq__(self, other: object) -> bool:
        ...

    def __sub__(self, other: Any) -> Any:
        ...

    def __str__(self) -> str:
        ...


class Interpolable(Protocol):
    """Value type: closed under addition, subtraction and scaling."""

    def __add__(self: _Self, other: Any) -> _Self:
        ...

    def __sub__(self: _Self, other: Any) -> _Self:
        ...

    def __mul__(self: _Self, other: Any) -> _Self:
        ...

    def __truediv__(self: _Self, other: Any) -> _Self:
        ...


def is_float_coordinate(x: Any) -> bool:
    return isinstance(x, (float, np.floating))


def is_int_coordinate(x: Any) -> bool:
    if isinstance(x, (bool, np.bool_)):
        return False
    return isinstance(x, (numbers.Rational, np.integer))


def value_domain(like: Any) -> type:
    """Return the scalar type coordinate differences are converted into."""
    if isinstance(like, np.ndarray):
        return like.dtype.type
    # integers are not closed under division
    if isinstance(like, (numbers.Integral, np.integer)):
        return float
    if isinstance(like, (numbers.Number, np.number)):
        return type(like)
    # vector-like values are scaled by plain floats
    return float


def to_value_domain(diff: Any, like: Any) -> Any:
    target = value_domain(like)
    try:
        with np.errstate(over="ignore"):
            converted = target(diff)
    except (TypeError, ValueError, OverflowError, ArithmeticError) as exc:
        raise ValueConversionError(diff, target) from exc
    if isinstance(converted, (numbers.Complex, np.number)) and not cmath.isfinite(complex(converted)):
        raise ValueConversionError(diff, target)
    return converted
