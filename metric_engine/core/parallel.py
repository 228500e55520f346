from __future__ import annotations

"""Fork-join helpers for per-instance metric passes.

Work is split into contiguous chunks and run on joblib's threading backend.
The kernels are numpy-vectorised and release the GIL, so threads are enough;
process pools would copy the label/weight arrays for nothing.

Partial results are combined with an associative reduction, so results only
depend on the chunking up to floating-point reassociation.
"""

from typing import Callable, List, Optional, Tuple

import numpy as np
from joblib import Parallel, delayed, effective_n_jobs


def resolve_workers(n_jobs: Optional[int], n: int, min_parallel_size: int) -> int:
    """Number of workers to use for ``n`` items (1 means run inline)."""
    if n < max(int(min_parallel_size), 2):
        return 1
    workers = int(effective_n_jobs(n_jobs))
    return max(1, min(workers, n))


def chunk_bounds(n: int, n_chunks: int) -> List[Tuple[int, int]]:
    """Split ``range(n)`` into ``n_chunks`` contiguous, near-equal ``(start, stop)`` pairs."""
    n_chunks = max(1, min(int(n_chunks), n)) if n > 0 else 1
    edges = np.linspace(0, n, n_chunks + 1).astype(np.int64)
    return [(int(a), int(b)) for a, b in zip(edges[:-1], edges[1:])]


def parallel_sum(
    partial: Callable[[int, int], float],
    n: int,
    *,
    n_jobs: Optional[int] = None,
    min_parallel_size: int = 1,
) -> float:
    """Sum ``partial(start, stop)`` over a chunking of ``range(n)``."""
    workers = resolve_workers(n_jobs, n, min_parallel_size)
    if workers == 1:
        return float(partial(0, n))

    partials = Parallel(n_jobs=workers, prefer="threads")(
        delayed(partial)(a, b) for a, b in chunk_bounds(n, workers)
    )
    return float(np.sum(np.asarray(partials, dtype=np.float64)))


def _sort_run(keys: np.ndarray, start: int, stop: int) -> np.ndarray:
    return start + np.argsort(keys[start:stop], kind="stable")


def _merge_runs(keys: np.ndarray, left: np.ndarray, right: np.ndarray) -> np.ndarray:
    # Each element's output slot is its rank in its own run plus the number
    # of elements of the other run that precede it. Ties go left first.
    kl = keys[left]
    kr = keys[right]
    out = np.empty(left.shape[0] + right.shape[0], dtype=left.dtype)
    out[np.arange(left.shape[0]) + np.searchsorted(kr, kl, side="left")] = left
    out[np.arange(right.shape[0]) + np.searchsorted(kl, kr, side="right")] = right
    return out


def parallel_argsort(
    keys: np.ndarray,
    *,
    descending: bool = False,
    n_jobs: Optional[int] = None,
    min_parallel_size: int = 1,
) -> np.ndarray:
    """Index permutation sorting ``keys``.

    Chunks are sorted concurrently, then merged pairwise in rounds (each round
    also runs concurrently). NaNs end up last in either direction.
    """
    keys = np.asarray(keys, dtype=np.float64)
    if descending:
        keys = -keys
    n = keys.shape[0]

    workers = resolve_workers(n_jobs, n, min_parallel_size)
    if workers == 1:
        return np.argsort(keys, kind="stable")

    with Parallel(n_jobs=workers, prefer="threads") as pool:
        runs = pool(delayed(_sort_run)(keys, a, b) for a, b in chunk_bounds(n, workers))
        while len(runs) > 1:
            merged = pool(
                delayed(_merge_runs)(keys, runs[i], runs[i + 1])
                for i in range(0, len(runs) - 1, 2)
            )
            if len(runs) % 2:
                merged.append(runs[-1])
            runs = merged
    return runs[0]
