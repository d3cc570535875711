import pytest

from aoc2024.day16 import parse_maze, part1, part2

LOOP = (
    "#######\n"
    "#.....#\n"
    "#S###E#\n"
    "#.....#\n"
    "#######\n"
)

TOP_ONLY = (
    "#######\n"
    "#.....#\n"
    "#S###E#\n"
    "#######\n"
    "#######\n"
)

BOTTOM_ONLY = (
    "#######\n"
    "#######\n"
    "#S###E#\n"
    "#.....#\n"
    "#######\n"
)

VERTICAL = "###\n#E#\n#.#\n#S#\n###\n"


def test_parse_maze_returns_rows():
    rows = parse_maze(LOOP + "\n")
    assert rows == LOOP.splitlines()


def test_part1_turn_costs_thousand_extra():
    assert part1(VERTICAL) == 1001 + 1


def test_part1_equal_routes_have_equal_cost():
    assert part1(LOOP) == part1(TOP_ONLY) == part1(BOTTOM_ONLY)


def test_part2_vertical_corridor():
    assert part2(VERTICAL) == 3


def test_part2_loop_prefers_route_ahead_of_start():
    assert part2(LOOP) == 7


def test_part2_bottom_route_only_matches_loop():
    assert part2(BOTTOM_ONLY) == part2(LOOP)


def test_part1_missing_start_raises():
    with pytest.raises(ValueError):
        part1("#####\n#..E#\n#####\n")


def test_part2_missing_start_raises():
    with pytest.raises(ValueError):
        part2("#####\n#..E#\n#####\n")


def test_part1_unreachable_end_raises():
    with pytest.raises(ValueError):
        part1("#######\n#S.#.E#\n#######\n")


def test_part2_unreachable_end_counts_nothing():
    assert part2("#######\n#S.#.E#\n#######\n") == 0