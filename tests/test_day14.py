import pytest

from aoc2024.day14 import (
    Robot,
    parse_robots,
    part1,
    part2,
    render_grid,
    safety_factor,
)

EXAMPLE = """\
p=0,4 v=3,-3
p=6,3 v=-1,-3
p=10,3 v=-1,2
p=2,0 v=2,-1
p=0,0 v=1,3
p=3,0 v=-2,-2
p=7,6 v=-1,-3
p=3,0 v=-1,-2
p=9,3 v=2,3
p=7,3 v=-1,2
p=2,4 v=2,-3
p=9,5 v=-3,-3
"""


def test_parse_robots():
    robots = parse_robots(EXAMPLE)
    assert len(robots) == 12
    assert robots[0] == Robot(0, 4, 3, -3)
    assert robots[-1] == Robot(9, 5, -3, -3)


def test_step_wraps_around_edges():
    width, height = 11, 7
    robot = Robot(0, 0, -1, -1)
    robot.step(width, height)
    assert (robot.pos_x, robot.pos_y) == (width - 1, height - 1)


def test_full_cycle_returns_to_start():
    width, height = 11, 7
    robot = Robot(2, 4, 2, -3)
    for _ in range(width * height):
        robot.step(width, height)
    assert (robot.pos_x, robot.pos_y) == (2, 4)


def test_part1_example():
    assert part1(EXAMPLE, 11, 7) == 12


def test_render_grid_counts_robots():
    robots = [Robot(1, 0, 0, 0), Robot(1, 0, 0, 0), Robot(0, 1, 0, 0)]
    assert render_grid(robots, 3, 2) == [".2.", "1.."]


def test_render_grid_shape():
    grid = render_grid(parse_robots(EXAMPLE), 11, 7)
    assert len(grid) == 7
    assert all(len(row) == 11 for row in grid)


def test_safety_factor_ignores_middle_lines():
    assert safety_factor([Robot(5, 3, 0, 0), Robot(5, 0, 0, 0)], 11, 7) == 1


def test_safety_factor_multiplies_quadrants():
    robots = [Robot(0, 0, 0, 0), Robot(1, 1, 0, 0), Robot(10, 6, 0, 0),
              Robot(9, 6, 0, 0), Robot(8, 5, 0, 0)]
    assert safety_factor(robots, 11, 7) == 2 * 3


def test_part2_first_separation():
    text = "p=0,0 v=1,0\np=0,0 v=0,1\n"
    assert part2(text, 11, 7) == 1


def test_part2_never_separated():
    text = "p=0,0 v=1,1\np=0,0 v=1,1\n"
    with pytest.raises(ValueError):
        part2(text, 11, 7)


def test_part2_result_has_distinct_positions():
    seconds = part2(EXAMPLE, 11, 7)
    robots = parse_robots(EXAMPLE)
    for _ in range(seconds):
        for robot in robots:
            robot.step(11, 7)
    assert len({(r.pos_x, r.pos_y) for r in robots}) == len(robots)