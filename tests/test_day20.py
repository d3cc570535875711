import pytest

from aoc2024.common import parse_lines
from aoc2024.day20 import part1, part2, track_distances

EXAMPLE = """###############
#...#...#.....#
#.#.#.#.#.###.#
#S#...#.#.#...#
#######.#.#.###
#######.#.#...#
#######.#.###.#
###..E#...#...#
###.#######.###
#...###...#...#
#.#####.#.###.#
#.#...#.#.#...#
#.#.#.#.#.#.###
#...#...#...###
###############
"""

SMALL = """#####
#S#E#
#.#.#
#...#
#####
"""


def _locate(grid, char):
    for row, line in enumerate(grid):
        if char in line:
            return row, line.index(char)
    raise AssertionError(char)


def test_track_starts_at_zero():
    grid = parse_lines(EXAMPLE)
    assert track_distances(grid)[_locate(grid, "S")] == 0


def test_track_covers_every_open_cell():
    grid = parse_lines(EXAMPLE)
    open_cells = sum(line.count(".") + line.count("S") + line.count("E") for line in grid)
    assert len(track_distances(grid)) == open_cells


def test_single_track_ends_at_e():
    grid = parse_lines(EXAMPLE)
    distance = track_distances(grid)
    assert distance[_locate(grid, "E")] == max(distance.values()) == len(distance) - 1


def test_track_steps_are_neighbours():
    distance = track_distances(parse_lines(EXAMPLE))
    by_time = {d: cell for cell, d in distance.items()}
    for d in range(1, len(by_time)):
        (r1, c1), (r2, c2) = by_time[d - 1], by_time[d]
        assert abs(r1 - r2) + abs(c1 - c2) == 1


def test_missing_start_rejected():
    with pytest.raises(ValueError):
        track_distances(["###", "#E#", "###"])


def test_part1_example():
    assert part1(EXAMPLE, 64) == 1


def test_part1_small_wall_between_start_and_end():
    assert part1(SMALL, 4) == 1


def test_part1_threshold_monotonic():
    counts = [part1(EXAMPLE, t) for t in (1, 2, 10, 20, 40, 64, 65)]
    assert counts == sorted(counts, reverse=True)
    assert part1(EXAMPLE, 65) < part1(EXAMPLE, 1)


def test_part2_example():
    assert part2(EXAMPLE, 76) == 3


def test_part2_threshold_monotonic():
    counts = [part2(EXAMPLE, t) for t in (50, 60, 70, 76, 77)]
    assert counts == sorted(counts, reverse=True)


def test_no_cheat_saves_more_than_the_track():
    longest = max(track_distances(parse_lines(EXAMPLE)).values())
    assert part1(EXAMPLE, longest) == 0
    assert part2(EXAMPLE, longest) == 0