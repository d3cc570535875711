"""Day 3: summing multiplications in corrupted memory."""

from __future__ import annotations

import re

from aoc2024.common import remove_line_breaks

_MUL = re.compile(r"mul\((\d{1,3}),(\d{1,3})\)")
_DISABLED = re.compile(r"(.*?)(don't\(\).*?do\(\))")
_TRAILING_DISABLED = re.compile(r"(.*?)don't\(\)")


def part1(text: str) -> int:
    """Sum of all well-formed ``mul(a,b)`` products."""
    return sum(int(a) * int(b) for a, b in _MUL.findall(text))


def part2(text: str) -> int:
    """Sum of products outside ``don't()`` ... ``do()`` sections."""
    rest = remove_line_breaks(text)
    kept: list[str] = []
    while match := _DISABLED.search(rest):
        kept.append(match[1])
        rest = rest[match.end():]
    trailing = _TRAILING_DISABLED.search(rest)
    if trailing:
        rest = trailing[1]
    kept.append(rest)
    return part1("".join(kept))