"""Day 13: winning prizes from claw machines."""

from __future__ import annotations

import re
from dataclasses import dataclass

_MACHINE = re.compile(
    r"Button A: X\+(\d+), Y\+(\d+)\n"
    r"Button B: X\+(\d+), Y\+(\d+)\n"
    r"Prize: X=(\d+), Y=(\d+)\n"
)

_PRIZE_OFFSET = 10000000000000
_MAX_A_PRESSES = 100
_COST_A = 3
_COST_B = 1


@dataclass(frozen=True)
class ClawMachine:
    """Button movements and prize location of one machine."""

    a_x: int
    a_y: int
    b_x: int
    b_y: int
    p_x: int
    p_y: int


def parse_machines(text: str, offset: int = 0) -> list[ClawMachine]:
    """Return every machine described in ``text``, prize shifted by ``offset``."""
    return [
        ClawMachine(
            int(m[1]), int(m[2]), int(m[3]), int(m[4]),
            int(m[5]) + offset, int(m[6]) + offset,
        )
        for m in _MACHINE.finditer(text)
    ]


def _search_price(machine: ClawMachine) -> int:
    price = 0
    for a in range(1, _MAX_A_PRESSES + 1):
        rest_x = machine.p_x - machine.a_x * a
        rest_y = machine.p_y - machine.a_y * a
        if rest_x < 0 or rest_y < 0:
            continue
        b_x, rem_x = divmod(rest_x, machine.b_x)
        b_y, rem_y = divmod(rest_y, machine.b_y)
        if rem_x == 0 and rem_y == 0 and b_x == b_y:
            price = max(price, a * _COST_A + b_x * _COST_B)
    return price


def _solve_price(machine: ClawMachine) -> int:
    det = machine.a_x * machine.b_y - machine.a_y * machine.b_x
    if det == 0:
        return 0
    presses_a, rem_a = divmod(machine.p_x * machine.b_y - machine.p_y * machine.b_x, det)
    if rem_a or presses_a < 0:
        return 0
    presses_b, rem_b = divmod(machine.p_x - machine.a_x * presses_a, machine.b_x)
    if rem_b or presses_b < 0:
        return 0
    return presses_a * _COST_A + presses_b * _COST_B


def part1(text: str) -> int:
    """Tokens needed to win every winnable prize, pressing A at most 100 times."""
    return sum(_search_price(machine) for machine in parse_machines(text))


def part2(text: str) -> int:
    """Tokens needed once every prize lies 10000000000000 further out."""
    return sum(_solve_price(machine) for machine in parse_machines(text, _PRIZE_OFFSET))