"""Sonar sweep: count depth increases."""

from collections.abc import Iterable, Iterator
from itertools import pairwise
from typing import TypeVar

T = TypeVar("T")


def _numbers(text: str) -> list[int]:
    return [int(line) for line in text.splitlines()]


def pairs(iterable: Iterable[T]) -> Iterator[tuple[T, T]]:
    """Yield each item together with the one after it."""
    iterator = iter(iterable)
    missing = object()
    previous = next(iterator, missing)
    if previous is missing:
        return
    for current in iterator:
        yield previous, current  # type: ignore[misc]
        previous = current


def part1(text: str) -> int:
    """Count measurements larger than the one before."""
    return sum(after > before for before, after in pairwise(_numbers(text)))


def part1_iter(text: str) -> int:
    """Same as part1, using the pairs generator."""
    return sum(after > before for before, after in pairs(_numbers(text)))


def part1_zip(text: str) -> int:
    """Same as part1, zipping the list with itself shifted by one."""
    numbers = _numbers(text)
    return sum(after > before for before, after in zip(numbers, numbers[1:]))


def part2(text: str) -> int:
    """Count three-measurement window sums larger than the one before."""
    numbers = _numbers(text)
    windows = [sum(window) for window in zip(numbers, numbers[1:], numbers[2:])]
    return sum(after > before for before, after in pairwise(windows))