"""Day 1: comparing two location-id lists."""

from __future__ import annotations

import re
from collections import Counter

from aoc2024.common import parse_lines

_PAIR = re.compile(r"(\d+)\s+(\d+)")


def parse_lists(text: str) -> tuple[list[int], list[int]]:
    """Return the left and right columns of the input."""
    left: list[int] = []
    right: list[int] = []
    for line in parse_lines(text):
        match = _PAIR.search(line)
        if match:
            left.append(int(match[1]))
            right.append(int(match[2]))
    return left, right


def part1(text: str) -> int:
    """Total distance between the sorted lists."""
    left, right = parse_lists(text)
    return sum(abs(b - a) for a, b in zip(sorted(left), sorted(right)))


def part2(text: str) -> int:
    """Similarity score: each left value times its count in the right list."""
    left, right = parse_lists(text)
    counts = Counter(right)
    return sum(value * counts[value] for value in left)