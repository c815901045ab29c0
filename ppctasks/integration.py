"""Trapezoidal integration split across workers, with sample integrands."""

from __future__ import annotations

import math
from concurrent.futures import ThreadPoolExecutor
from typing import Callable

Func = Callable[[float], float]


def sin_f(x: float) -> float:
    return math.sin(x)


def sin2_f(x: float) -> float:
    return math.sin(x) / (1 - math.sin(x) ** 2)


def hardfn_f(x: float) -> float:
    return 3 * x / math.sqrt((x + 1) ** 3)


def hardfn2_f(x: float) -> float:
    return (x**2 + 2 * x - 3) / x**4


def sin_cos_f(x: float) -> float:
    return math.sin(x) * math.cos(x) ** 2


def trapezium(a: float, b: float, f: Func) -> float:
    """Area of the trapezium under ``f`` between ``a`` and ``b``."""
    return (f(a) + f(b)) * abs(b - a) / 2


def get_area(a: float, f: Func, steps_count: int, step: float) -> float:
    """Sum of ``steps_count`` trapeziums of width ``step`` starting at ``a``."""
    return sum(
        trapezium(a + i * step, a + (i + 1) * step, f) for i in range(steps_count)
    )


def parallel_integral(
    a: float, b: float, n: int, f: Func, workers: int = 1
) -> float:
    """Integrate ``f`` over ``[a, b]`` with ``n`` trapeziums shared among ``workers``.

    Each worker takes ``n // workers`` steps; the last also takes the remainder.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    if workers < 1:
        raise ValueError("workers must be at least 1")
    step = abs(b - a) / n
    steps_count = n // workers

    def part(rank: int) -> float:
        start = a + steps_count * step * rank
        count = steps_count
        if rank == workers - 1:
            count += n - steps_count * workers
        return get_area(start, f, count, step)

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return sum(pool.map(part, range(workers)))