"""Day 18: finding a way through falling memory bytes."""

from __future__ import annotations

import re
from bisect import bisect_left
from collections import deque
from collections.abc import Iterable

_BYTE = re.compile(r"(\d+),(\d+)")

SIZE = 71
FALLEN = 1024

_STEPS = ((0, -1), (1, 0), (0, 1), (-1, 0))


def parse_bytes(text: str) -> list[tuple[int, int]]:
    """Return the ``(x, y)`` positions of the falling bytes, in order."""
    return [(int(m[1]), int(m[2])) for m in _BYTE.finditer(text)]


def shortest_path(corrupted: Iterable[tuple[int, int]], size: int) -> int | None:
    """Fewest steps from the top-left to the bottom-right corner, or ``None``."""
    blocked = set(corrupted)
    goal = (size - 1, size - 1)
    distance = {(0, 0): 0}
    queue = deque([(0, 0)])
    while queue:
        x, y = queue.popleft()
        if (x, y) == goal:
            return distance[(x, y)]
        for dx, dy in _STEPS:
            nxt = (x + dx, y + dy)
            if (
                0 <= nxt[0] < size
                and 0 <= nxt[1] < size
                and nxt not in blocked
                and nxt not in distance
            ):
                distance[nxt] = distance[(x, y)] + 1
                queue.append(nxt)
    return None


def part1(text: str, size: int = SIZE, count: int = FALLEN) -> int:
    """Shortest path length after the first ``count`` bytes have fallen."""
    steps = shortest_path(parse_bytes(text)[:count], size)
    if steps is None:
        raise ValueError("the exit cannot be reached")
    return steps


def part2(text: str, size: int = SIZE) -> str:
    """Coordinates ``x,y`` of the first byte that cuts off the exit."""
    falling = parse_bytes(text)
    counts = range(1, len(falling))
    index = bisect_left(
        counts, True, key=lambda n: shortest_path(falling[:n], size) is None
    )
    if index == len(counts):
        raise ValueError("the exit is never cut off")
    x, y = falling[counts[index] - 1]
    return f"{x},{y}"