"""Day 6: following the patrolling guard."""

from __future__ import annotations

from aoc2024.common import directions_2d, is_valid_pos

_OPEN = ".^"


def _start(text: str) -> int:
    start = text.find("^")
    if start < 0:
        raise ValueError("the map has no guard")
    return start


def _patrol(text: str, start: int, blocked: int | None = None) -> tuple[set[int], bool]:
    """Walk the guard; return the visited positions and whether she loops."""
    steps = directions_2d(text.find("\n") + 1)
    pos, heading = start, 0
    seen: set[tuple[int, int]] = set()
    while (pos, heading) not in seen:
        seen.add((pos, heading))
        ahead = pos + steps[heading]
        if not is_valid_pos(text, ahead):
            return {p for p, _ in seen}, False
        if ahead != blocked and text[ahead] in _OPEN:
            pos = ahead
        else:
            heading = (heading + 1) % len(steps)
    return {p for p, _ in seen}, True


def part1(text: str) -> int:
    """Number of distinct positions the guard visits before leaving."""
    visited, _ = _patrol(text, _start(text))
    return len(visited)


def part2(text: str) -> int:
    """Number of single obstruction spots that trap the guard in a loop."""
    start = _start(text)
    visited, _ = _patrol(text, start)
    candidates = (pos for pos in visited if pos != start and text[pos] == ".")
    return sum(_patrol(text, start, blocked=pos)[1] for pos in candidates)