"""Vector sums, neighbour differences and minimum search split across workers."""

from __future__ import annotations

import os
import random
from concurrent.futures import ThreadPoolExecutor
from itertools import accumulate, pairwise
from typing import Callable, Sequence, TypeVar

_T = TypeVar("_T")


def _resolve_workers(workers: int | None) -> int:
    if workers is None:
        return os.cpu_count() or 1
    if workers < 1:
        raise ValueError("workers must be at least 1")
    return workers


def _map_chunks(
    func: Callable[[Sequence[int]], _T], chunks: list[Sequence[int]], workers: int
) -> list[_T]:
    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(func, chunks))


def _scatter(
    values: Sequence[int], counts: list[int], displs: list[int]
) -> list[Sequence[int]]:
    return [values[start : start + count] for start, count in zip(displs, counts)]


def sum_seq(values: Sequence[int]) -> int:
    """Sum of all elements."""
    return sum(values)


def sum_par(values: Sequence[int], workers: int | None = None) -> int:
    """Sum of all elements, with the vector scattered over ``workers``.

    The first ``len % workers`` workers get one element more than the rest.
    """
    workers = _resolve_workers(workers)
    chunk, remainder = divmod(len(values), workers)
    counts = [chunk + (1 if rank < remainder else 0) for rank in range(workers)]
    displs = [0, *accumulate(counts[:-1])]
    return sum(_map_chunks(sum_seq, _scatter(values, counts, displs), workers))


def random_number(low: int, high: int) -> int:
    """Random integer in the closed range [low, high]."""
    if high < low:
        raise ValueError("high must not be less than low")
    return random.randint(low, high)


def create_random_array(size: int, low: int, up: int) -> list[int]:
    """``size`` uniformly distributed integers in [low, up]."""
    if size < 0:
        raise ValueError("size must not be negative")
    if up < low:
        raise ValueError("up must not be less than low")
    rng = random.Random()
    return [rng.randint(low, up) for _ in range(size)]


def seq_find_most_different(values: Sequence[int]) -> int:
    """Largest absolute difference of neighbouring elements, or -1 for fewer than two."""
    return max((abs(left - right) for left, right in pairwise(values)), default=-1)


def par_find_most_different(values: Sequence[int], workers: int | None = None) -> int:
    """Same result as :func:`seq_find_most_different`, over overlapping chunks.

    Every worker but the last gets one element of overlap with its neighbour,
    so no neighbouring pair is lost at a chunk border.
    """
    size = len(values)
    if size < 2:
        return -1
    workers = _resolve_workers(workers)
    chunk, tail = divmod(size, workers)
    counts = [chunk + 1] * (workers - 1)
    displs = [rank * chunk for rank in range(workers - 1)]
    counts.append(chunk if tail == 0 else size - (workers - 1) * chunk)
    displs.append((workers - 1) * chunk)
    partials = _map_chunks(
        seq_find_most_different, _scatter(values, counts, displs), workers
    )
    return max(partials)


def get_min_element(
    values: Sequence[int], size: int, workers: int | None = None
) -> int:
    """Smallest of the first ``size`` elements.

    The first worker takes ``size // workers`` elements plus the remainder,
    the others ``size // workers`` each. When there are fewer elements than
    workers the minimum is taken directly.
    """
    workers = _resolve_workers(workers)
    if size < 1:
        raise ValueError("size must be at least 1")
    if size > len(values):
        raise ValueError("size exceeds the length of the vector")
    values = values[:size]
    part, remain = divmod(size, workers)
    if part == 0:
        return min(values)
    counts = [part + remain] + [part] * (workers - 1)
    displs = [0, *accumulate(counts[:-1])]
    return min(_map_chunks(min, _scatter(values, counts, displs), workers))


def get_random_vector(
    size: int, min_elem: int = -1000, max_elem: int = 1000
) -> list[int]:
    """``size`` uniformly distributed integers in [min_elem, max_elem]."""
    return create_random_array(size, min_elem, max_elem)