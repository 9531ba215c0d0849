"""Handy haversacks: bag containment rules."""

import re
from collections import defaultdict, deque
from functools import cache

START = "shiny gold"

_LINE = re.compile(
    r"(\w+\s\w+) bags contain "
    r"((?:(?:\d+) (?:\w+\s\w+) bags?(?:[,.]\s?))+|no other bags.)"
)
_BAGS = re.compile(r"(\d+) (\w+\s\w+) bags?")


def parse_line(line: str) -> tuple[str, list[tuple[int, str]]]:
    """Parse a rule into the bag colour and its (count, colour) contents."""
    match = _LINE.fullmatch(line)
    if match is None:
        raise ValueError(f"invalid rule: {line!r}")
    name, contents = match.groups()
    children = [(int(count), colour) for count, colour in _BAGS.findall(contents)]
    return name, children


def part1(text: str) -> int:
    """Count the colours that can eventually hold a shiny gold bag."""
    parents: defaultdict[str, list[str]] = defaultdict(list)
    for name, children in map(parse_line, text.splitlines()):
        for _, child in children:
            parents[child].append(name)

    visited = {START}
    queue = deque([START])
    while queue:
        colour = queue.popleft()
        for parent in parents.get(colour, ()):
            if parent not in visited:
                visited.add(parent)
                queue.append(parent)
    return len(visited) - 1


def part2(text: str) -> int:
    """Count the bags held inside one shiny gold bag."""
    contents = dict(map(parse_line, text.splitlines()))

    @cache
    def total(colour: str) -> int:
        return 1 + sum(count * total(child) for count, child in contents.get(colour, ()))

    return total(START) - 1