"""Configuration for interpolation tables and bulk evaluation."""

from __future__ import annotations

from dataclasses import dataclass

BACKENDS = ("python", "numpy", "numba", "jax", "auto")
TIE_BREAKS = ("first", "last", "any")


@dataclass(frozen=True)
class InterpConfig:
    """Container for user-controlled construction and query parameters."""

    strict_lengths: bool = True
    tie_break: str = "first"
    backend: str = "auto"
    workers: int = 1
    chunk_size: int = 1024

    def __post_init__(self) -> None:
        if self.tie_break not in TIE_BREAKS:
            raise ValueError("tie_break must be one of: first, last, any")
        if self.backend not in BACKENDS:
            raise ValueError("backend must be one of: python, numpy, numba, jax, auto")
        if self.workers < 1:
            raise ValueError("workers must be >= 1")
        if self.chunk_size < 1:
            raise ValueError("chunk_size must be >= 1")


DEFAULT_CONFIG = InterpConfig()
