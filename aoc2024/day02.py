"""Day 2: judging the safety of reactor reports."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise

from aoc2024.common import parse_uint_data


def parse_reports(text: str) -> list[list[int]]:
    """Return one list of levels per input line."""
    return parse_uint_data(text)


def is_safe(report: Sequence[int]) -> bool:
    """Strictly monotonic with every step between 1 and 3."""
    steps = [b - a for a, b in pairwise(report)]
    return all(1 <= s <= 3 for s in steps) or all(-3 <= s <= -1 for s in steps)


def _is_safe_with_dampener(report: Sequence[int]) -> bool:
    if is_safe(report):
        return True
    return any(
        is_safe([*report[:skip], *report[skip + 1:]]) for skip in range(len(report))
    )


def part1(text: str) -> int:
    """Number of safe reports."""
    return sum(is_safe(report) for report in parse_reports(text))


def part2(text: str) -> int:
    """Number of reports that are safe after removing at most one level."""
    return sum(_is_safe_with_dampener(report) for report in parse_reports(text))