"""Day 14: robots patrolling a wrapping bathroom floor."""

from __future__ import annotations

import math
import re
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass

_ROBOT = re.compile(r"p=(\d+),(\d+) v=(-?\d+),(-?\d+)")

WIDTH = 101
HEIGHT = 103
_SECONDS = 100


@dataclass
class Robot:
    """Position and velocity of one robot."""

    pos_x: int
    pos_y: int
    v_x: int
    v_y: int

    def step(self, width: int, height: int) -> None:
        """Advance one second, wrapping around the edges."""
        self.pos_x = (self.pos_x + self.v_x) % width
        self.pos_y = (self.pos_y + self.v_y) % height


def parse_robots(text: str) -> list[Robot]:
    """Return every robot described in ``text``."""
    return [
        Robot(int(m[1]), int(m[2]), int(m[3]), int(m[4])) for m in _ROBOT.finditer(text)
    ]


def render_grid(robots: Iterable[Robot], width: int, height: int) -> list[str]:
    """Draw the floor: ``.`` for empty tiles, otherwise the number of robots."""
    counts = Counter((robot.pos_x, robot.pos_y) for robot in robots)
    return [
        "".join(
            chr(ord("0") + counts[(x, y)]) if (x, y) in counts else "."
            for x in range(width)
        )
        for y in range(height)
    ]


def _quadrant(x: int, y: int, width: int, height: int) -> int | None:
    half_w, half_h = width // 2, height // 2
    if width % 2 and x == half_w:
        return None
    if height % 2 and y == half_h:
        return None
    return (0 if y < half_h else 2) + (0 if x < half_w else 1)


def safety_factor(robots: Iterable[Robot], width: int, height: int) -> int:
    """Product of the robot counts of the occupied quadrants."""
    quadrants = Counter(
        q
        for robot in robots
        if (q := _quadrant(robot.pos_x, robot.pos_y, width, height)) is not None
    )
    return math.prod(quadrants.values())


def part1(text: str, width: int = WIDTH, height: int = HEIGHT) -> int:
    """Safety factor after 100 seconds."""
    robots = parse_robots(text)
    for _ in range(_SECONDS):
        for robot in robots:
            robot.step(width, height)
    return safety_factor(robots, width, height)


def part2(text: str, width: int = WIDTH, height: int = HEIGHT) -> int:
    """First second at which no two robots share a tile."""
    robots = parse_robots(text)
    for seconds in range(1, width * height + 1):
        for robot in robots:
            robot.step(width, height)
        if len({(robot.pos_x, robot.pos_y) for robot in robots}) == len(robots):
            return seconds
    raise ValueError("the robots never all stand on separate tiles")