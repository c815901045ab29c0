"""Reductions of integer vectors: sequential, chunked, threaded and distributed."""

from __future__ import annotations

import math
import operator
import os
import random
from concurrent.futures import ThreadPoolExecutor
from functools import reduce
from typing import Callable, Iterable, Sequence

_FOLDS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
}


def _check_ops(ops: str, allowed: Iterable[str]) -> None:
    allowed = tuple(allowed)
    if ops not in allowed:
        raise ValueError(f"unsupported operation {ops!r}; expected one of {allowed}")


def _resolve_workers(workers: int | None) -> int:
    if workers is None:
        return os.cpu_count() or 1
    if workers < 1:
        raise ValueError("workers must be at least 1")
    return workers


def _even_chunks(values: Sequence[int], workers: int) -> list[Sequence[int]]:
    """Split into ``workers`` contiguous chunks whose sizes differ by at most one."""
    base, extra = divmod(len(values), workers)
    chunks = []
    start = 0
    for index in range(workers):
        size = base + (1 if index < extra else 0)
        chunks.append(values[start : start + size])
        start += size
    return chunks


def _fixed_chunks(values: Sequence[int], workers: int) -> list[Sequence[int]]:
    """Split into ``workers`` chunks of ``len // workers`` elements; the tail is dropped."""
    delta = len(values) // workers
    return [values[index * delta : (index + 1) * delta] for index in range(workers)]


def random_vector(size: int) -> list[int]:
    """Return ``size`` random integers in the range [0, 100)."""
    if size < 0:
        raise ValueError("size must not be negative")
    rng = random.Random()
    return [rng.randrange(100) for _ in range(size)]


def sequential_operations(values: Sequence[int], ops: str, initial: int = 0) -> int:
    """Fold ``values`` into ``initial`` with ``+``, ``-`` or ``*``, or take their ``max``.

    For ``max`` the initial value is ignored and the vector must not be empty.
    """
    _check_ops(ops, ("+", "-", "*", "max"))
    if ops == "max":
        if not values:
            raise ValueError("max of an empty vector is undefined")
        return max(values)
    return reduce(_FOLDS[ops], values, initial)


def _partial(chunk: Sequence[int], ops: str) -> int:
    if ops in ("+", "-"):
        return sum(chunk)
    if ops == "*":
        return math.prod(chunk)
    return max(chunk)


def parallel_operations(
    values: Sequence[int], ops: str, initial: int = 0, workers: int | None = None
) -> int:
    """Same result as :func:`sequential_operations`, computed over chunks in threads."""
    _check_ops(ops, ("+", "-", "*", "max"))
    workers = _resolve_workers(workers)
    if ops == "max" and not values:
        raise ValueError("max of an empty vector is undefined")
    chunks = [chunk for chunk in _even_chunks(values, workers) if chunk]
    with ThreadPoolExecutor(max_workers=workers) as pool:
        partials = list(pool.map(lambda chunk: _partial(chunk, ops), chunks))
    if ops == "+":
        return initial + sum(partials)
    if ops == "-":
        return initial - sum(partials)
    if ops == "*":
        return initial * math.prod(partials)
    return max(partials)


def threaded_operations(
    values: Sequence[int], ops: str, workers: int | None = None
) -> int:
    """Sum (``+``) or negated sum (``-``) computed by ``workers`` threads.

    Each thread handles ``len(values) // workers`` elements, so elements past
    ``workers * (len(values) // workers)`` are not included.
    """
    _check_ops(ops, ("+", "-"))
    workers = _resolve_workers(workers)
    chunks = _fixed_chunks(values, workers)
    with ThreadPoolExecutor(max_workers=workers) as pool:
        partials = pool.map(lambda chunk: sequential_operations(chunk, ops, 0), chunks)
        return sum(partials)


def distributed_operations(
    values: Sequence[int], ops: str, workers: int | None = None
) -> int:
    """Scatter equal blocks to ``workers`` ranks and reduce their local results.

    ``+`` and ``-`` are reduced by addition, ``max`` by maximum. Each rank
    holds ``len(values) // workers`` elements; the remainder is not included.
    """
    _check_ops(ops, ("+", "-", "max"))
    workers = _resolve_workers(workers)
    chunks = _fixed_chunks(values, workers)
    if ops == "max" and not chunks[0]:
        raise ValueError("each rank needs at least one element for max")
    with ThreadPoolExecutor(max_workers=workers) as pool:
        locals_ = list(pool.map(lambda chunk: sequential_operations(chunk, ops, 0), chunks))
    if ops == "max":
        return max(locals_)
    return sum(locals_)