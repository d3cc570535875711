"""Day 5: checking and fixing print-queue page orders."""

from __future__ import annotations

import re
from functools import cmp_to_key
from itertools import pairwise

from aoc2024.common import parse_uint_data

_RULE = re.compile(r"(\d+)\|(\d+)")


def parse_manual(text: str) -> tuple[list[tuple[int, int]], list[list[int]]]:
    """Return the ordering rules and the non-empty updates that follow them."""
    rules: list[tuple[int, int]] = []
    rest_start = 0
    for match in _RULE.finditer(text):
        rules.append((int(match[1]), int(match[2])))
        rest_start = match.end()
    updates = [u for u in parse_uint_data(text[rest_start:]) if u]
    return rules, updates


def _in_order(update: list[int], rules: set[tuple[int, int]]) -> bool:
    return all(pair in rules for pair in pairwise(update))


def part1(text: str) -> int:
    """Sum of middle pages of updates that are already ordered."""
    rules, updates = parse_manual(text)
    rule_set = set(rules)
    return sum(u[len(u) // 2] for u in updates if _in_order(u, rule_set))


def part2(text: str) -> int:
    """Sum of middle pages of misordered updates after reordering them."""
    rules, updates = parse_manual(text)
    rule_set = set(rules)

    def compare(a: int, b: int) -> int:
        if (a, b) in rule_set:
            return -1
        if (b, a) in rule_set:
            return 1
        return 0

    total = 0
    for update in updates:
        if not _in_order(update, rule_set):
            fixed = sorted(update, key=cmp_to_key(compare))
            total += fixed[len(fixed) // 2]
    return total