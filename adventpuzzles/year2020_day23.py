"""Crab cups: shuffle a circle of labelled cups."""

from collections.abc import Iterable, Iterator
from itertools import chain, islice, pairwise

PART1_MOVES = 100
PART2_CUPS = 1_000_000
PART2_LAST_MOVE = 10_000_000


class CircularList:
    """A circle of integer labels stored as a successor table."""

    def __init__(self, labels: Iterable[int], first: int) -> None:
        labels = list(labels)
        self._links = [0] * (max(labels, default=first) + 1)
        last = 0
        for current, following in pairwise(labels):
            self._links[current] = following
            last = following
        self._links[last] = first

    def next(self, label: int) -> int:
        """The label that follows the given one."""
        return self._links[label]

    def pop3_after(self, label: int) -> tuple[int, int, int]:
        """Remove and return the three labels following the given one."""
        one = self._links[label]
        two = self._links[one]
        three = self._links[two]
        self._links[label] = self._links[three]
        return one, two, three

    def push3_after(self, label: int, elements: tuple[int, int, int]) -> None:
        """Put three previously popped labels back after the given one."""
        following = self._links[label]
        self._links[label] = elements[0]
        self._links[elements[2]] = following


def _labels(text: str) -> list[int]:
    text = text.strip()
    if not (text.isascii() and text.isdigit()):
        raise ValueError(f"invalid cup labels: {text!r}")
    return [int(char) for char in text]


class CupGame:
    """The small game; each step yields the picked-up cups and the destination."""

    def __init__(self, labels: str) -> None:
        self.cups = _labels(labels)
        if len(self.cups) < 4:
            raise ValueError("at least four cups are needed")
        self._highest = max(self.cups)

    def __iter__(self) -> Iterator[tuple[tuple[int, ...], int]]:
        return self

    def __next__(self) -> tuple[tuple[int, ...], int]:
        picked = tuple(self.cups[1:4])
        del self.cups[1:4]

        destination = self.cups[0] - 1 or self._highest
        while destination not in self.cups:
            destination = destination - 1 or self._highest

        index = self.cups.index(destination) + 1
        self.cups[index:index] = picked
        self.cups = self.cups[1:] + self.cups[:1]
        return picked, destination

    def result(self) -> int:
        """The labels after cup 1, read clockwise, as one number."""
        position = self.cups.index(1)
        digits = self.cups[position + 1:] + self.cups[:position]
        return int("".join(map(str, digits)) or "0")


def part1(text: str) -> int:
    """Labels after cup 1 once 100 moves are made."""
    game = CupGame(text)
    for _ in islice(game, PART1_MOVES):
        pass
    return game.result()


def part2(text: str) -> int:
    """Product of the two cups after cup 1 in the million-cup game."""
    cups = _labels(text)
    first = cups[0]
    circle = CircularList(chain(cups, range(len(cups) + 1, PART2_CUPS + 1)), first)
    # The successor table is used directly: this loop runs ten million times.
    links = circle._links
    current = first
    for _ in range(1, PART2_LAST_MOVE):
        one = links[current]
        two = links[one]
        three = links[two]
        links[current] = links[three]

        target = current - 1 or PART2_CUPS
        while target == one or target == two or target == three:
            target = target - 1 or PART2_CUPS

        links[three] = links[target]
        links[target] = one
        current = links[current]

    after_one = circle.next(1)
    return after_one * circle.next(after_one)