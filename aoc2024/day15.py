"""Day 15: a robot pushing boxes around a warehouse."""

from __future__ import annotations

import re
from collections import deque
from collections.abc import Sequence

_ROW = re.compile(r"#.*#")
_INSTRUCTION = re.compile(r"[<v>^]")

_STEPS: dict[str, tuple[int, int]] = {
    "^": (0, -1),
    ">": (1, 0),
    "v": (0, 1),
    "<": (-1, 0),
}

_WIDE: dict[str, str] = {"#": "##", ".": "..", "O": "[]", "@": "@."}

Grid = list[list[str]]


def parse_warehouse(text: str) -> list[str]:
    """Return the map rows: every stretch of a line from its first to its last ``#``."""
    return _ROW.findall(text)


def parse_instructions(text: str) -> str:
    """Return all movement arrows of the input joined into one string."""
    return "".join(_INSTRUCTION.findall(text))


def widen(rows: Sequence[str]) -> list[str]:
    """Double the map horizontally: boxes become ``[]``, the robot ``@.``."""
    return ["".join(_WIDE.get(char, "") for char in row) for row in rows]


def gps_sum(rows: Sequence[str]) -> int:
    """Sum of ``100 * y + x`` over every box (``O`` or the left edge ``[``)."""
    return sum(
        100 * y + x
        for y, row in enumerate(rows)
        for x, char in enumerate(row)
        if char in "O["
    )


def _find_robot(grid: Grid) -> tuple[int, int]:
    for y, row in enumerate(grid):
        if "@" in row:
            return row.index("@"), y
    raise ValueError("the warehouse has no robot")


def _cell(grid: Grid, x: int, y: int) -> str:
    if 0 <= y < len(grid) and 0 <= x < len(grid[y]):
        return grid[y][x]
    return "#"


def _move(grid: Grid, robot: tuple[int, int], dx: int, dy: int) -> tuple[int, int]:
    """Push in one direction if nothing blocks; return the robot's new position."""
    moving = [robot]
    seen = {robot}
    frontier = deque([robot])
    while frontier:
        x, y = frontier.popleft()
        nx, ny = x + dx, y + dy
        char = _cell(grid, nx, ny)
        if char == "#":
            return robot
        if char == ".":
            continue
        cells = [(nx, ny)]
        if dy and char == "[":
            cells.append((nx + 1, ny))
        elif dy and char == "]":
            cells.append((nx - 1, ny))
        for cell in cells:
            if cell not in seen:
                seen.add(cell)
                moving.append(cell)
                frontier.append(cell)

    contents = {(x, y): grid[y][x] for x, y in moving}
    for x, y in moving:
        grid[y][x] = "."
    for (x, y), char in contents.items():
        grid[y + dy][x + dx] = char
    return robot[0] + dx, robot[1] + dy


def _simulate(rows: Sequence[str], instructions: str) -> list[str]:
    grid = [list(row) for row in rows]
    robot = _find_robot(grid)
    for arrow in instructions:
        dx, dy = _STEPS[arrow]
        robot = _move(grid, robot, dx, dy)
    return ["".join(row) for row in grid]


def part1(text: str) -> int:
    """GPS sum of all boxes after the robot has finished moving."""
    rows = _simulate(parse_warehouse(text), parse_instructions(text))
    return gps_sum(rows)


def part2(text: str) -> int:
    """GPS sum of all boxes in the widened warehouse after the robot has moved."""
    rows = _simulate(widen(parse_warehouse(text)), parse_instructions(text))
    return gps_sum(rows)