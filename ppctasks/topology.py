"""Message passing along a linear chain of processes."""

from __future__ import annotations

import queue
from concurrent.futures import ThreadPoolExecutor
from itertools import pairwise
from typing import Any


def get_next(current: int, router: bool) -> int:
    """Next rank in the direction of travel (upwards when ``router`` is true)."""
    return current + 1 if router else current - 1


def get_prev(current: int, router: bool) -> int:
    """Previous rank in the direction of travel."""
    return current - 1 if router else current + 1


def in_route(current: int, src: int, dest: int, router: bool) -> bool:
    """Whether ``current`` lies between ``src`` and ``dest`` for that direction."""
    if router:
        return src <= current <= dest
    return dest <= current <= src


def route(src: int, dest: int, size: int) -> list[int]:
    """Ranks the message visits from ``src`` to ``dest`` inclusive.

    Empty when either end is outside the chain or when ``src == dest``.
    """
    if size < 1:
        raise ValueError("size must be at least 1")
    if src < 0 or dest < 0:
        raise ValueError("ranks must not be negative")
    if not (src < size and dest < size) or src == dest:
        return []
    router = dest > src
    step = 1 if router else -1
    return [rank for rank in range(src, dest + step, step) if in_route(rank, src, dest, router)]


def send_data_linear(data: Any, src: int, dest: int, size: int) -> dict[int, Any]:
    """Pass ``data`` from ``src`` to ``dest`` through every rank between them.

    Each rank on the way runs concurrently, receiving from its predecessor
    and forwarding to its successor. Returns what each rank after ``src``
    received; empty when no transfer takes place.
    """
    path = route(src, dest, size)
    if not path:
        return {}
    router = dest > src
    links: dict[tuple[int, int], queue.Queue[Any]] = {
        hop: queue.Queue(maxsize=1) for hop in pairwise(path)
    }
    received: dict[int, Any] = {}

    def process(rank: int) -> None:
        if rank == src:
            payload = data
        else:
            payload = links[(get_prev(rank, router), rank)].get()
            received[rank] = payload
        if rank != dest:
            links[(rank, get_next(rank, router))].put(payload)

    with ThreadPoolExecutor(max_workers=len(path)) as pool:
        list(pool.map(process, path))
    return {rank: received[rank] for rank in path[1:]}