"""Day 12: fencing garden plot regions."""

from __future__ import annotations

from collections.abc import Callable

from aoc2024.common import directions_2d, is_valid_pos


def _line_width(text: str) -> int:
    newline = text.find("\n")
    return newline + 1 if newline >= 0 else len(text) + 1


def find_regions(text: str) -> list[frozenset[int]]:
    """Group the plots into regions of equal, orthogonally connected letters.

    Each region is the set of flat indexes of its plots; regions come in the
    order of their first plot in ``text``.
    """
    steps = directions_2d(_line_width(text))
    seen: set[int] = set()
    regions: list[frozenset[int]] = []
    for start, plant in enumerate(text):
        if plant == "\n" or start in seen:
            continue
        seen.add(start)
        region = {start}
        stack = [start]
        while stack:
            pos = stack.pop()
            for step in steps:
                nxt = pos + step
                if nxt not in seen and is_valid_pos(text, nxt) and text[nxt] == plant:
                    seen.add(nxt)
                    region.add(nxt)
                    stack.append(nxt)
        regions.append(frozenset(region))
    return regions


def _perimeter(region: frozenset[int], width: int) -> int:
    steps = directions_2d(width)
    return sum(1 for pos in region for step in steps if pos + step not in region)


def _sides(region: frozenset[int], width: int) -> int:
    up, right, down, left = directions_2d(width)
    # A fence edge continues the side started by its neighbour along that side.
    along = {up: -1, down: -1, left: -width, right: -width}
    count = 0
    for pos in region:
        for step, back in along.items():
            if pos + step in region:
                continue
            previous = pos + back
            if previous in region and previous + step not in region:
                continue
            count += 1
    return count


def _total_price(text: str, measure: Callable[[frozenset[int], int], int]) -> int:
    width = _line_width(text)
    return sum(len(region) * measure(region, width) for region in find_regions(text))


def part1(text: str) -> int:
    """Total fence price: area times perimeter for every region."""
    return _total_price(text, _perimeter)


def part2(text: str) -> int:
    """Total fence price with bulk discount: area times number of sides."""
    return _total_price(text, _sides)