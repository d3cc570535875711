"""Day 11: counting stones that change with every blink."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from aoc2024.common import parse_uint_data

_MULTIPLIER = 2024
_SHORT_BLINKS = 25
_LONG_BLINKS = 75


def _blink(stone: int) -> tuple[int, ...]:
    if stone == 0:
        return (1,)
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return int(digits[:half]), int(digits[half:])
    return (stone * _MULTIPLIER,)


def count_stones(stones: Iterable[int], blinks: int) -> int:
    """Number of stones after ``blinks`` blinks, starting from ``stones``."""
    if blinks < 0:
        raise ValueError("the number of blinks cannot be negative")
    counts = Counter(stones)
    for _ in range(blinks):
        following: Counter[int] = Counter()
        for stone, amount in counts.items():
            for new in _blink(stone):
                following[new] += amount
        counts = following
    return sum(counts.values())


def _initial_stones(text: str) -> list[int]:
    rows = parse_uint_data(text)
    if not rows:
        raise ValueError("the input holds no stones")
    return rows[0]


def part1(text: str) -> int:
    """Number of stones after 25 blinks."""
    return count_stones(_initial_stones(text), _SHORT_BLINKS)


def part2(text: str) -> int:
    """Number of stones after 75 blinks."""
    return count_stones(_initial_stones(text), _LONG_BLINKS)