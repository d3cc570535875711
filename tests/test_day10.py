from aoc2024.day10 import part1, part2

EXAMPLE = (
    "89010123\n"
    "78121874\n"
    "87430965\n"
    "96549874\n"
    "45678903\n"
    "32019012\n"
    "01329801\n"
    "10456732\n"
)


def test_part1_example():
    assert part1(EXAMPLE) == 36


def test_part2_example():
    assert part2(EXAMPLE) == 81


def test_single_straight_trail():
    line = "0123456789\n"
    assert part1(line) == part2(line) == 1


def test_rating_at_least_score():
    assert part2(EXAMPLE) >= part1(EXAMPLE)


def test_dead_end_trail_scores_same_in_both_parts():
    text = "0123\n....\n"
    assert part1(text) == part2(text)


def test_trailing_newline_does_not_matter():
    assert part1(EXAMPLE.rstrip("\n")) == part1(EXAMPLE)
    assert part2(EXAMPLE.rstrip("\n")) == part2(EXAMPLE)