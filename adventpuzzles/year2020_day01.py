"""Report repair: find entries that sum to 2020."""

from collections.abc import Iterable

TARGET = 2020


def part1(values: Iterable[int]) -> int:
    """Return the product of the two entries that sum to 2020."""
    values = list(values)
    index = set(values)
    for value in values:
        complement = TARGET - value
        if complement in index:
            return value * complement
    raise ValueError("solution not found")


def part2(values: Iterable[int]) -> int:
    """Return the product of the three entries that sum to 2020."""
    values = list(values)
    index = set(values)
    for position, first in enumerate(values):
        for second in values[position:]:
            if first + second > TARGET:
                continue
            complement = TARGET - (first + second)
            if complement in index:
                return complement * first * second
    raise ValueError("solution not found")