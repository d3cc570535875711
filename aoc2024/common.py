"""Shared helpers for reading and parsing puzzle input."""

from __future__ import annotations

import re
from pathlib import Path

_NUMBER = re.compile(r"\d+")


def read_file(path: str | Path) -> str:
    """Return the whole content of the file at ``path``."""
    return Path(path).read_text()


def parse_lines(text: str) -> list[str]:
    """Split ``text`` into lines; a trailing newline does not add an empty line."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def parse_uint_data(text: str) -> list[list[int]]:
    """Return, for every line, the unsigned integers found on it."""
    return [[int(number) for number in _NUMBER.findall(line)] for line in parse_lines(text)]


def directions_2d(width: int) -> list[int]:
    """Flat-index offsets for up, right, down and left in a grid of ``width``."""
    return [-width, 1, width, -1]


def directions(width: int) -> list[int]:
    """Flat-index offsets for all eight neighbours, clockwise from up."""
    return [-width, -width + 1, 1, width + 1, width, width - 1, -1, -width - 1]


def is_valid_pos(text: str, pos: int) -> bool:
    """Whether ``pos`` lies inside ``text`` and is not a line break."""
    return 0 <= pos < len(text) and text[pos] != "\n"


def is_collinear(x1: int, y1: int, x2: int, y2: int, x3: int, y3: int) -> bool:
    """Whether the three points lie on one straight line."""
    return x1 * (y2 - y3) + x2 * (y3 - y1) + x3 * (y1 - y2) == 0


def get_xy(pos: int, line_size: int) -> tuple[int, int]:
    """Convert a flat index into ``(x, y)`` for lines of ``line_size`` characters."""
    return pos % line_size, pos // line_size


def remove_line_breaks(text: str) -> str:
    """Return ``text`` with every newline removed."""
    return re.sub(r"\n+", "", text)


def to_int(char: str) -> int:
    """Numeric value of a single digit character."""
    return ord(char) - ord("0")