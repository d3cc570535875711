"""Day 16: the reindeer maze."""

from __future__ import annotations

import heapq
import math
import re
from collections import deque

_ROW = re.compile(r"#.*#")

# Up, right, down, left, as (dx, dy).
_DIRECTIONS = ((0, -1), (1, 0), (0, 1), (-1, 0))
_STEP_COST = 1
_TURN_COST = 1000

State = tuple[int, int, int, int]


def parse_maze(text: str) -> list[str]:
    """Return the maze rows of the input."""
    return _ROW.findall(text)


def _find(grid: list[str], char: str) -> tuple[int, int]:
    for y, row in enumerate(grid):
        x = row.find(char)
        if x >= 0:
            return x, y
    raise ValueError(f"the maze has no {char!r} tile")


def part1(text: str) -> int:
    """Lowest score from S (facing east) to E."""
    grid = parse_maze(text)
    start = _find(grid, "S")
    best = {start: 0}
    heading = {start: (1, 0)}
    visited: set[tuple[int, int]] = set()
    heap = [(0, *start)]
    while heap:
        steps, x, y = heapq.heappop(heap)
        pos = (x, y)
        if pos in visited:
            continue
        visited.add(pos)
        if grid[y][x] == "E":
            return steps
        for direction in _DIRECTIONS:
            nxt = (x + direction[0], y + direction[1])
            if grid[nxt[1]][nxt[0]] == "#":
                continue
            cost = _STEP_COST if direction == heading[pos] else _STEP_COST + _TURN_COST
            new_steps = steps + cost
            if new_steps < best.get(nxt, math.inf):
                best[nxt] = new_steps
                heading[nxt] = direction
                heapq.heappush(heap, (new_steps, *nxt))
    raise ValueError("the end tile cannot be reached")


def part2(text: str) -> int:
    """Number of tiles lying on at least one best path from S to E."""
    grid = parse_maze(text)
    sx, sy = _find(grid, "S")
    heap: list[tuple[int, int, int, int, int]] = [(0, sx, sy, 0, 1)]
    lowest: dict[State, int] = {}
    backtrace: dict[State, list[State]] = {}
    best_steps: int | None = None
    end_states: set[State] = set()

    while heap:
        steps, x, y, dx, dy = heapq.heappop(heap)
        state = (x, y, dx, dy)
        if lowest.get(state, math.inf) < steps:
            continue
        if grid[y][x] == "E":
            if best_steps is not None and steps > best_steps:
                break
            best_steps = steps
            end_states.add(state)
        for new_steps, nx, ny, ndx, ndy in (
            (steps + _STEP_COST, x + dx, y + dy, dx, dy),
            (steps + _TURN_COST, x, y, dy, -dx),
            (steps + _TURN_COST, x, y, -dy, dx),
        ):
            if grid[ny][nx] == "#":
                continue
            key = (nx, ny, ndx, ndy)
            low = lowest.get(key, math.inf)
            if new_steps > low:
                continue
            if new_steps < low:
                backtrace[key] = []
                lowest[key] = new_steps
            backtrace[key].append(state)
            heapq.heappush(heap, (new_steps, nx, ny, ndx, ndy))

    seen = set(end_states)
    pending = deque(end_states)
    while pending:
        key = pending.popleft()
        for previous in backtrace.get(key, ()):
            if previous not in seen:
                seen.add(previous)
                pending.append(previous)

    return len({(x, y) for x, y, _, _ in seen})