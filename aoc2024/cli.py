"""Command line entry point that solves one puzzle part for an input file."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from types import ModuleType

from aoc2024 import (
    day01, day02, day03, day04, day05, day06, day07, day08, day09, day10,
    day11, day12, day13, day14, day15, day16, day17, day18, day19, day20,
)
from aoc2024.common import read_file

_DAYS: dict[int, ModuleType] = {
    1: day01, 2: day02, 3: day03, 4: day04, 5: day05,
    6: day06, 7: day07, 8: day08, 9: day09, 10: day10,
    11: day11, 12: day12, 13: day13, 14: day14, 15: day15,
    16: day16, 17: day17, 18: day18, 19: day19, 20: day20,
}

_DEFAULT_INPUT = "Input.txt"


def solve(day: int, part: int, text: str) -> int | str:
    """Answer of ``part`` (1 or 2) of ``day`` for the puzzle input ``text``."""
    module = _DAYS.get(day)
    if module is None:
        raise ValueError(f"no solution for day {day}")
    if part == 1:
        return module.part1(text)
    if part == 2:
        return module.part2(text)
    raise ValueError(f"part must be 1 or 2, not {part}")


def main(argv: Sequence[str] | None = None) -> int:
    """Solve one puzzle part and print the result."""
    parser = argparse.ArgumentParser(description="Solve a puzzle part for an input file.")
    parser.add_argument("day", type=int, help="puzzle day")
    parser.add_argument("part", type=int, help="puzzle part, 1 or 2")
    parser.add_argument("input", nargs="?", default=_DEFAULT_INPUT, help="input file")
    args = parser.parse_args(argv)

    try:
        text = read_file(args.input)
    except OSError:
        print(f"Cannot open file: {args.input}", file=sys.stderr)
        return 1
    try:
        result = solve(args.day, args.part, text)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"Result: {result}")
    return 0