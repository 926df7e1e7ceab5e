"""Piecewise-linear interpolation over one-dimensional sample tables."""

from .backends.factory import build_backend
from .bulk import map_queries
from .config import InterpConfig
from .errors import (
    InterpError,
    InvalidDataError,
    LengthMismatchError,
    OutOfRangeError,
    OutOfRangeLeftError,
    OutOfRangeRightError,
    ValueConversionError,
)
from .interpolator import LinearInterpolator, Region
from .pair import SamplePair
from .protocols import Interpolable, OrderableNumeric

__all__ = [
    "build_backend",
    "map_queries",
    "InterpConfig",
    "InterpError",
    "InvalidDataError",
    "LengthMismatchError",
    "OutOfRangeError",
    "OutOfRangeLeftError",
    "OutOfRangeRightError",
    "ValueConversionError",
    "LinearInterpolator",
    "Region",
    "SamplePair",
    "Interpolable",
    "OrderableNumeric",
]
