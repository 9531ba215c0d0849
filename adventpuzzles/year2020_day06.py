"""Custom customs: count answers per group."""

from collections.abc import Iterator
from itertools import groupby


def _groups(text: str) -> Iterator[list[set[str]]]:
    for has_answers, lines in groupby(text.splitlines(), key=bool):
        if has_answers:
            yield [set(line) for line in lines]


def part1(text: str) -> int:
    """Sum over groups of questions anyone answered."""
    return sum(len(set().union(*group)) for group in _groups(text))


def part2(text: str) -> int:
    """Sum over groups of questions everyone answered."""
    return sum(len(set.intersection(*group)) for group in _groups(text))