"""Day 8: antinodes of resonating antennas."""

from __future__ import annotations

from collections import defaultdict
from itertools import permutations
from math import gcd

from aoc2024.common import get_xy, is_collinear, is_valid_pos


def _antennas(text: str) -> dict[str, list[int]]:
    groups: dict[str, list[int]] = defaultdict(list)
    for pos, char in enumerate(text):
        if char not in ".\n":
            groups[char].append(pos)
    return groups


def _on_line(node: int, first: int, second: int, line_size: int) -> bool:
    return is_collinear(
        *get_xy(node, line_size), *get_xy(first, line_size), *get_xy(second, line_size)
    )


def part1(text: str) -> int:
    """Antinodes lying twice as far from one antenna as from its partner."""
    line_size = text.find("\n") + 1
    nodes: set[int] = set()
    for positions in _antennas(text).values():
        for first, second in permutations(positions, 2):
            node = 2 * second - first
            if is_valid_pos(text, node) and _on_line(node, first, second, line_size):
                nodes.add(node)
    return len(nodes)


def part2(text: str) -> int:
    """Grid positions in line with any two antennas of the same frequency."""
    line_size = text.find("\n") + 1
    width = line_size - 1

    def inside(x: int, y: int) -> bool:
        return 0 <= x < width and y >= 0 and is_valid_pos(text, y * line_size + x)

    nodes: set[int] = set()
    for positions in _antennas(text).values():
        for first, second in permutations(positions, 2):
            x1, y1 = get_xy(first, line_size)
            x2, y2 = get_xy(second, line_size)
            divisor = gcd(x2 - x1, y2 - y1)
            step_x, step_y = (x2 - x1) // divisor, (y2 - y1) // divisor
            x, y = x1, y1
            while inside(x, y):
                nodes.add(y * line_size + x)
                x, y = x + step_x, y + step_y
    return len(nodes)