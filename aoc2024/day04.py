"""Day 4: word search for XMAS."""

from __future__ import annotations

from aoc2024.common import directions

_TAIL = "MAS"


def _line_width(text: str) -> int:
    return text.find("\n") + 1


def _char_at(text: str, pos: int) -> str | None:
    return text[pos] if 0 <= pos < len(text) else None


def _words_from(text: str, start: int, dirs: list[int]) -> int:
    return sum(
        all(_char_at(text, start + step * d) == c for step, c in enumerate(_TAIL, 1))
        for d in dirs
    )


def part1(text: str) -> int:
    """Occurrences of XMAS in any of the eight directions."""
    dirs = directions(_line_width(text))
    return sum(_words_from(text, i, dirs) for i, c in enumerate(text) if c == "X")


def _is_mas_diagonal(text: str, first: int, second: int) -> bool:
    a, b = _char_at(text, first), _char_at(text, second)
    return {a, b} == {"M", "S"}


def part2(text: str) -> int:
    """Occurrences of two crossing MAS diagonals centred on an A."""
    width = _line_width(text)
    return sum(
        1
        for i, c in enumerate(text)
        if c == "A"
        and _is_mas_diagonal(text, i - width + 1, i + width - 1)
        and _is_mas_diagonal(text, i + width + 1, i - width - 1)
    )