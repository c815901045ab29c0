"""Strip matrix multiplication: rows of A against rows of B taken as columns."""

from __future__ import annotations

import os
import random
from concurrent.futures import ThreadPoolExecutor
from operator import mul
from typing import Sequence


def _check(a: Sequence[int], b: Sequence[int], n: int) -> None:
    if n < 0:
        raise ValueError("n must not be negative")
    if len(a) < n * n or len(b) < n * n:
        raise ValueError("both matrices must hold n * n elements")


def random_matrix(n: int) -> list[int]:
    """Row-major ``n`` x ``n`` matrix of random integers in [0, 100)."""
    if n < 0:
        raise ValueError("n must not be negative")
    rng = random.Random()
    return [rng.randrange(100) for _ in range(n * n)]


def sequential_matmul(a: Sequence[int], b: Sequence[int], n: int) -> list[int]:
    """``C[i][j] = sum_k A[i][k] * B[j][k]`` for row-major ``n`` x ``n`` matrices.

    Row ``j`` of ``b`` is used as column ``j`` of the right-hand operand.
    """
    _check(a, b, n)
    rows = [a[i * n : (i + 1) * n] for i in range(n)]
    cols = [b[j * n : (j + 1) * n] for j in range(n)]
    return [sum(map(mul, row, col)) for row in rows for col in cols]


def parallel_matmul(
    a: Sequence[int], b: Sequence[int], n: int, workers: int | None = None
) -> list[int]:
    """Same product as :func:`sequential_matmul`, computed by a ring of workers.

    Each worker owns ``n // workers`` rows of ``a`` and of ``b``; the strips
    of ``b`` are passed round the ring so every worker meets each of them.
    Rows and columns past ``workers * (n // workers)`` are left as zero.
    """
    _check(a, b, n)
    if workers is None:
        workers = os.cpu_count() or 1
    if workers < 1:
        raise ValueError("workers must be at least 1")
    delta = n // workers
    strip = n * delta

    def compute_strip(rank: int) -> list[int]:
        rows = [a[rank * strip + dy * n : rank * strip + (dy + 1) * n] for dy in range(delta)]
        out = [0] * strip
        for step in range(workers):
            owner = (rank - step) % workers
            cols = [
                b[owner * strip + dx * n : owner * strip + (dx + 1) * n]
                for dx in range(delta)
            ]
            for dy, row in enumerate(rows):
                for dx, col in enumerate(cols):
                    out[owner * delta + dx + dy * n] = sum(map(mul, row, col))
        return out

    with ThreadPoolExecutor(max_workers=workers) as pool:
        strips = list(pool.map(compute_strip, range(workers)))
    result = [value for part in strips for value in part]
    result.extend([0] * (n * n - len(result)))
    return result