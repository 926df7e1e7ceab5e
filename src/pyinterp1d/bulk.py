"""Map a scalar query over many coordinates, optionally on a thread pool."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
import logging
from typing import Any, Callable, Iterable, Sequence

logger = logging.getLogger(__name__)


def _run_chunk(query: Callable[[Any], Any], points: Sequence[Any]) -> list[Any]:
    return [query(x) for x in points]


def map_queries(
    query: Callable[[Any], Any],
    xs: Iterable[Any],
    *,
    workers: int = 1,
    chunk_size: int = 1024,
) -> list[Any]:
    """Evaluate ``query`` at every point of ``xs`` and return results in order.

    Queries are read-only against an immutable table, so chunks run on a
    ``ThreadPoolExecutor`` without locking. If any query raises, the error
    from the earliest failing point is re-raised.
    """
    if workers < 1:
        raise ValueError("workers must be >= 1")
    if chunk_size < 1:
        raise ValueError("chunk_size must be >= 1")
    points = list(xs)
    if workers == 1 or len(points) <= chunk_size:
        return _run_chunk(query, points)

    chunks = [points[i : i + chunk_size] for i in range(0, len(points), chunk_size)]
    logger.debug("evaluating %d points in %d chunks on %d threads", len(points), len(chunks), workers)
    out: list[Any] = []
    with ThreadPoolExecutor(max_workers=workers) as pool:
        for part in pool.map(_run_chunk, [query] * len(chunks), chunks):
            out.extend(part)
    return out
