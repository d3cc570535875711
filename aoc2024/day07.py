"""Day 7: calibrating bridge-repair equations."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Sequence

from aoc2024.common import parse_uint_data


def _concat(left: int, right: int) -> int:
    return int(f"{left}{right}")


_OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "*": operator.mul,
    "|": _concat,
}


def is_valid_equation(values: Sequence[int], operators: Iterable[str]) -> bool:
    """Whether ``values[1:]`` combine left to right into ``values[0]``.

    ``operators`` holds the allowed symbols: ``+``, ``*`` and ``|`` (concatenation).
    """
    if len(values) < 2:
        raise ValueError("an equation needs a target and at least one number")
    try:
        funcs = {_OPERATORS[symbol] for symbol in operators}
    except KeyError as exc:
        raise ValueError(f"unknown operator {exc.args[0]!r}") from None

    target, first, *rest = values
    reachable = {first}
    for value in rest:
        reachable = {
            result
            for partial in reachable
            for func in funcs
            if (result := func(partial, value)) <= target
        }
        if not reachable:
            return False
    return target in reachable


def _calibration(text: str, operators: str) -> int:
    return sum(
        row[0] for row in parse_uint_data(text) if row and is_valid_equation(row, operators)
    )


def part1(text: str) -> int:
    """Total of the targets reachable with addition and multiplication."""
    return _calibration(text, "+*")


def part2(text: str) -> int:
    """Total of the targets reachable when concatenation is allowed too."""
    return _calibration(text, "+*|")