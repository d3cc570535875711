"""Day 20: cheating through walls on a race track."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

from aoc2024.common import parse_lines

Cell = tuple[int, int]

_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))
_MAX_CHEAT = 20
_MIN_CHEAT = 2
_THRESHOLD = 100


def _find(grid: Sequence[str], char: str) -> Cell:
    for row, line in enumerate(grid):
        col = line.find(char)
        if col >= 0:
            return row, col
    raise ValueError(f"the track has no {char!r} tile")


def _distances_from(grid: Sequence[str], start: Cell) -> dict[Cell, int]:
    distance = {start: 0}
    queue = deque([start])
    while queue:
        r, c = queue.popleft()
        for dr, dc in _STEPS:
            nr, nc = r + dr, c + dc
            if (
                0 <= nr < len(grid)
                and 0 <= nc < len(grid[nr])
                and grid[nr][nc] != "#"
                and (nr, nc) not in distance
            ):
                distance[(nr, nc)] = distance[(r, c)] + 1
                queue.append((nr, nc))
    return distance


def track_distances(grid: Sequence[str]) -> dict[Cell, int]:
    """Picoseconds from S to every reachable track cell, keyed by ``(row, col)``."""
    return _distances_from(grid, _find(grid, "S"))


def part1(text: str, threshold: int = _THRESHOLD) -> int:
    """Number of single walls whose removal saves at least ``threshold`` picoseconds."""
    grid = parse_lines(text)
    from_start = track_distances(grid)
    end = _find(grid, "E")
    if end not in from_start:
        raise ValueError("the end cannot be reached")
    from_end = _distances_from(grid, end)
    total = from_start[end]

    count = 0
    for r in range(1, len(grid) - 1):
        for c in range(1, len(grid[r]) - 1):
            if grid[r][c] != "#":
                continue
            around = [(r + dr, c + dc) for dr, dc in _STEPS]
            best = min(
                (
                    from_start[a] + 2 + from_end[b]
                    for a in around
                    if a in from_start
                    for b in around
                    if b in from_end
                ),
                default=total,
            )
            saved = total - min(best, total)
            if saved > 0 and saved >= threshold:
                count += 1
    return count


def part2(text: str, threshold: int = _THRESHOLD) -> int:
    """Number of cheats of up to 20 picoseconds saving at least ``threshold``."""
    grid = parse_lines(text)
    distance = track_distances(grid)
    count = 0
    for (r, c), here in distance.items():
        for radius in range(_MIN_CHEAT, _MAX_CHEAT + 1):
            for dr in range(radius + 1):
                dc = radius - dr
                targets = {(r + dr, c + dc), (r + dr, c - dc), (r - dr, c + dc), (r - dr, c - dc)}
                for target in targets:
                    there = distance.get(target)
                    if there is not None and here > there and here - there >= threshold + radius:
                        count += 1
    return count