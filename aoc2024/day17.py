"""Day 17: the three-bit computer."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

_REGISTER = {name: re.compile(rf"Register {name}:\s(\d+)") for name in "ABC"}
_PROGRAM = re.compile(r"Program:\s(.*)")
_NUMBER = re.compile(r"\d+")


@dataclass(frozen=True)
class Registers:
    """Contents of the registers A, B and C."""

    a: int = 0
    b: int = 0
    c: int = 0


def parse_registers(text: str) -> Registers:
    """Return the initial registers; a register that is not given holds 0."""
    values = {}
    for name, pattern in _REGISTER.items():
        match = pattern.search(text)
        values[name.lower()] = int(match[1]) if match else 0
    return Registers(**values)


def parse_program(text: str) -> list[int]:
    """Return the numbers that follow ``Program:``."""
    match = _PROGRAM.search(text)
    if not match:
        return []
    return [int(number) for number in _NUMBER.findall(match[1])]


def _combo(operand: int, a: int, b: int) -> int:
    if operand < 4:
        return operand
    if operand == 4:
        return a
    if operand in (5, 6):
        # Operand 6 reads register B as well.
        return b
    return operand


def run_program(program: Sequence[int], registers: Registers) -> tuple[list[int], Registers]:
    """Run ``program`` until it halts; return its output and the final registers."""
    a, b, c = registers.a, registers.b, registers.c
    output: list[int] = []
    pc = 0
    while pc < len(program):
        if pc + 1 >= len(program):
            raise ValueError(f"instruction at {pc} has no operand")
        opcode, operand = program[pc], program[pc + 1]
        match opcode:
            case 0:
                a = a >> _combo(operand, a, b)
            case 1:
                b ^= operand
            case 2:
                b = _combo(operand, a, b) % 8
            case 3:
                if a != 0:
                    pc = operand
                    continue
            case 4:
                b ^= c
            case 5:
                output.append(_combo(operand, a, b) % 8)
            case 6:
                b = a >> _combo(operand, a, b)
            case 7:
                c = a >> _combo(operand, a, b)
        pc += 2
    return output, Registers(a, b, c)


def find_register_a(program: Sequence[int]) -> int:
    """Smallest value for register A that makes ``program`` print itself.

    The value is built three bits at a time, matching the program from its
    last number backwards.
    """
    program = list(program)

    def search(value: int, remaining: int) -> int | None:
        if remaining == 0:
            return value
        target = program[remaining - 1:]
        for digit in range(8):
            candidate = value << 3 | digit
            output, _ = run_program(program, Registers(candidate))
            if output == target:
                found = search(candidate, remaining - 1)
                if found is not None:
                    return found
        return None

    result = search(0, len(program))
    if result is None:
        raise ValueError("no value of register A makes the program print itself")
    return result


def part1(text: str) -> str:
    """Output of the program, comma separated."""
    output, _ = run_program(parse_program(text), parse_registers(text))
    return ",".join(str(value) for value in output)


def part2(text: str) -> int:
    """Lowest register A value for which the program outputs a copy of itself."""
    return find_register_a(parse_program(text))