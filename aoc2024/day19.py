"""Day 19: arranging towels into striped designs."""

from __future__ import annotations

import re
from collections.abc import Sequence
from functools import lru_cache

from aoc2024.common import parse_lines

_WORD = re.compile(r"\w+")


def parse_towels(text: str) -> tuple[list[str], list[str]]:
    """Return the available towel patterns and the wanted designs."""
    lines = parse_lines(text)
    if not lines:
        return [], []
    towels = _WORD.findall(lines[0])
    designs = [match[0] for line in lines[1:] if (match := _WORD.search(line))]
    return towels, designs


def _way_counter(towels: Sequence[str]):
    @lru_cache(maxsize=None)
    def ways(design: str) -> int:
        if not design:
            return 1
        return sum(
            ways(design[len(towel):]) for towel in towels if design.startswith(towel)
        )

    return ways


def part1(text: str) -> int:
    """Number of designs that can be made from the towels."""
    towels, designs = parse_towels(text)
    ways = _way_counter(tuple(towels))
    return sum(1 for design in designs if ways(design))


def part2(text: str) -> int:
    """Total number of different arrangements over all designs."""
    towels, designs = parse_towels(text)
    ways = _way_counter(tuple(towels))
    return sum(ways(design) for design in designs)