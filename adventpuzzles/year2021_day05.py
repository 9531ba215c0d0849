"""Hydrothermal venture: count overlapping vent lines."""

import re
from collections import Counter
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

_SEGMENT = re.compile(r"([0-9]+),([0-9]+) -> ([0-9]+),([0-9]+)")


@dataclass(frozen=True, order=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class Segment:
    p1: Point
    p2: Point

    def is_straight(self) -> bool:
        """Horizontal or vertical."""
        return self.p1.x == self.p2.x or self.p1.y == self.p2.y

    def walk(self) -> Iterator[Point]:
        """Yield every point from p1 to p2, both included."""
        width = abs(self.p2.x - self.p1.x)
        height = abs(self.p2.y - self.p1.y)
        if width and height and width != height:
            raise ValueError("only straight and 45 degree segments can be walked")
        dx = (self.p2.x > self.p1.x) - (self.p2.x < self.p1.x)
        dy = (self.p2.y > self.p1.y) - (self.p2.y < self.p1.y)
        for i in range(max(width, height) + 1):
            yield Point(self.p1.x + dx * i, self.p1.y + dy * i)


def parse_segment(line: str) -> Segment:
    """Parse a line such as ``0,9 -> 5,9``."""
    match = _SEGMENT.fullmatch(line)
    if match is None:
        raise ValueError(f"invalid segment: {line!r}")
    x1, y1, x2, y2 = map(int, match.groups())
    return Segment(Point(x1, y1), Point(x2, y2))


def count_intersections(segments: Iterable[Segment]) -> int:
    """Number of points covered by at least two segments."""
    counts = Counter(point for segment in segments for point in segment.walk())
    return sum(count > 1 for count in counts.values())


def _segments(text: str) -> list[Segment]:
    return [parse_segment(line) for line in text.splitlines()]


def part1(text: str) -> int:
    """Overlaps among horizontal and vertical lines."""
    return count_intersections(s for s in _segments(text) if s.is_straight())


def part2(text: str) -> int:
    """Overlaps among all lines."""
    return count_intersections(_segments(text))