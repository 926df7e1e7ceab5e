"""Backend factory for bulk interpolation kernels."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .base import supports_arrays
from .jax_backend import build_jax_backend
from .numba_backend import build_numba_backend
from .numpy_backend import build_numpy_backend
from .python_backend import build_python_backend

if TYPE_CHECKING:
    from ..interpolator import LinearInterpolator

logger = logging.getLogger(__name__)


def build_backend(name: str, interpolator: "LinearInterpolator"):
    cfg = interpolator.config
    if name == "python":
        return build_python_backend(interpolator, workers=cfg.workers, chunk_size=cfg.chunk_size)
    if name == "numpy":
        return build_numpy_backend(interpolator)
    if name == "numba":
        return build_numba_backend(interpolator)
    if name == "jax":
        return build_jax_backend(interpolator)
    if name == "auto":
        if not supports_arrays(interpolator):
            return build_python_backend(interpolator, workers=cfg.workers, chunk_size=cfg.chunk_size)
        for build in (build_numba_backend, build_jax_backend):
            try:
                return build(interpolator)
            except RuntimeError as exc:
                logger.debug("skipping backend: %s", exc)
        return build_numpy_backend(interpolator)
    raise ValueError(f"Unknown backend: {name}")
