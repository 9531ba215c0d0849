"""Toboggan trajectory: count trees hit on a repeating map."""

import math

SLOPES = ((1, 1), (3, 1), (5, 1), (7, 1), (1, 2))


def _count_trees(rows: list[str], right: int, down: int) -> int:
    return sum(
        row[(step * right) % len(row)] == "#"
        for step, row in enumerate(rows[::down])
    )


def part1(text: str) -> int:
    """Trees hit going right 3, down 1."""
    return _count_trees(text.splitlines(), 3, 1)


def part2(text: str) -> int:
    """Product of the trees hit on each of the five slopes."""
    rows = text.splitlines()
    return math.prod(_count_trees(rows, right, down) for right, down in SLOPES)