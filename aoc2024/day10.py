"""Day 10: scoring and rating hiking trails on a topographic map."""

from __future__ import annotations

from collections.abc import Iterator

from aoc2024.common import directions_2d, is_valid_pos, to_int

_SUMMIT = 9


def _uphill(text: str, pos: int, steps: list[int]) -> Iterator[int]:
    height = to_int(text[pos])
    for step in steps:
        nxt = pos + step
        if is_valid_pos(text, nxt) and to_int(text[nxt]) == height + 1:
            yield nxt


def _trailheads(text: str) -> Iterator[int]:
    return (pos for pos, char in enumerate(text) if char == "0")


def part1(text: str) -> int:
    """Sum over trailheads of the number of distinct summits they reach."""
    steps = directions_2d(text.find("\n") + 1)
    memo: dict[int, frozenset[int]] = {}

    def summits(pos: int) -> frozenset[int]:
        if pos in memo:
            return memo[pos]
        if to_int(text[pos]) == _SUMMIT:
            return frozenset({pos})
        result = frozenset().union(*(summits(n) for n in _uphill(text, pos, steps)))
        memo[pos] = result
        return result

    return sum(len(summits(head)) for head in _trailheads(text))


def part2(text: str) -> int:
    """Sum over trailheads of the number of distinct trails to any summit."""
    steps = directions_2d(text.find("\n") + 1)
    memo: dict[int, int] = {}

    def trails(pos: int) -> int:
        if pos in memo:
            return memo[pos]
        if to_int(text[pos]) == _SUMMIT:
            return 1
        result = sum(trails(n) for n in _uphill(text, pos, steps))
        memo[pos] = result
        return result

    return sum(trails(head) for head in _trailheads(text))