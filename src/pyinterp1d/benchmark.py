"""Time table construction and queries over random tables."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
import json
from time import perf_counter

import numpy as np

from .backends.factory import build_backend
from .config import BACKENDS, InterpConfig
from .interpolator import LinearInterpolator


@dataclass
class BenchmarkResult:
    size: int
    n_queries: int
    backend: str
    build_seconds: float
    checked_seconds: float
    clamped_seconds: float
    out_of_range: int


def run_benchmark(
    *,
    size: int,
    n_queries: int = 100_000,
    backend: str = "auto",
    workers: int = 1,
    dtype: str = "float64",
    seed: int = 0,
) -> BenchmarkResult:
    if size < 1:
        raise ValueError("size must be >= 1")
    if n_queries < 0:
        raise ValueError("n_queries must be >= 0")
    rng = np.random.default_rng(seed)
    x = rng.random(size).astype(dtype)
    y = rng.random(size).astype(dtype)
    q = rng.random(n_queries).astype(dtype)

    t0 = perf_counter()
    interp = LinearInterpolator.from_unsorted(x, y, InterpConfig(backend=backend, workers=workers))
    t1 = perf_counter()
    bulk = build_backend(backend, interp)

    # the checked path stops at the first failure, so only time in-domain points
    inside = q[(q >= interp.min) & (q <= interp.max)]
    t2 = perf_counter()
    bulk.interpolate_checked(inside)
    t3 = perf_counter()
    bulk.interpolate(q)
    t4 = perf_counter()

    return BenchmarkResult(
        size=size,
        n_queries=n_queries,
        backend=getattr(bulk, "name", backend),
        build_seconds=t1 - t0,
        checked_seconds=t3 - t2,
        clamped_seconds=t4 - t3,
        out_of_range=int(q.size - inside.size),
    )


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Benchmark linear interpolation tables.")
    ap.add_argument("--sizes", type=int, nargs="+", default=[1_000, 10_000, 100_000, 1_000_000])
    ap.add_argument("--queries", type=int, default=100_000)
    ap.add_argument("--backend", choices=BACKENDS, default="auto")
    ap.add_argument("--workers", type=int, default=1, help="Threads for the python backend")
    ap.add_argument("--dtype", choices=["float32", "float64"], default="float64")
    ap.add_argument("--seed", type=int, default=0)
    args = ap.parse_args(argv)

    results = [
        run_benchmark(
            size=size,
            n_queries=args.queries,
            backend=args.backend,
            workers=args.workers,
            dtype=args.dtype,
            seed=args.seed,
        ).__dict__
        for size in args.sizes
    ]
    print(json.dumps(results, indent=2, sort_keys=True))


if __name__ == "__main__":
    main()
