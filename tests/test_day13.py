import pytest

from aoc2024.day13 import ClawMachine, parse_machines, part1, part2

MACHINE_1 = "Button A: X+94, Y+34\nButton B: X+22, Y+67\nPrize: X=8400, Y=5400\n"
MACHINE_2 = "Button A: X+26, Y+66\nButton B: X+67, Y+21\nPrize: X=12748, Y=12176\n"
MACHINE_3 = "Button A: X+17, Y+86\nButton B: X+84, Y+37\nPrize: X=7870, Y=6450\n"
MACHINE_4 = "Button A: X+69, Y+23\nButton B: X+27, Y+71\nPrize: X=18641, Y=10279\n"
EXAMPLE = "\n".join([MACHINE_1, MACHINE_2, MACHINE_3, MACHINE_4])

OFFSET = 10000000000000


def _machine(a, b, presses_a, presses_b, offset=0):
    px = a[0] * presses_a + b[0] * presses_b - offset
    py = a[1] * presses_a + b[1] * presses_b - offset
    return (
        f"Button A: X+{a[0]}, Y+{a[1]}\n"
        f"Button B: X+{b[0]}, Y+{b[1]}\n"
        f"Prize: X={px}, Y={py}\n"
    )


def test_parse_single_machine():
    assert parse_machines(MACHINE_1) == [ClawMachine(94, 34, 22, 67, 8400, 5400)]


def test_parse_applies_offset():
    (machine,) = parse_machines(MACHINE_1, OFFSET)
    assert (machine.p_x, machine.p_y) == (8400 + OFFSET, 5400 + OFFSET)
    assert (machine.a_x, machine.b_y) == (94, 67)


def test_parse_example_count():
    assert len(parse_machines(EXAMPLE)) == 4


def test_parse_needs_trailing_newline():
    assert parse_machines(MACHINE_1.rstrip("\n")) == []


def test_part1_example():
    assert part1(EXAMPLE) == 480


def test_part1_unwinnable_machine():
    assert part1(MACHINE_2) == 0


@pytest.mark.parametrize("presses_a, presses_b", [(5, 7), (100, 3), (1, 250)])
def test_part1_constructed_machine(presses_a, presses_b):
    text = _machine((2, 1), (1, 3), presses_a, presses_b)
    assert part1(text) == 3 * presses_a + presses_b


def test_part1_ignores_more_than_hundred_a_presses():
    text = _machine((2, 1), (1, 3), 101, 3)
    assert part1(text) == part1(_machine((2, 1), (1, 3), 101, 3) + "\n")
    assert part1(text) < 3 * 101 + 3


def test_part2_machine_without_prize():
    assert part2(MACHINE_1) == 0


def test_part2_constructed_machine():
    k = OFFSET
    text = _machine((3, 1), (1, 2), k, k, offset=OFFSET)
    assert part2(text) == 3 * k + k


def test_part2_counts_winnable_example_machines_only():
    assert part2(EXAMPLE) == part2(MACHINE_2) + part2(MACHINE_4)
    assert part2(MACHINE_2) > 0
    assert part2(MACHINE_4) > 0