"""Ticket translation: validate tickets and identify fields."""

import math
import re
from dataclasses import dataclass

_RULE = re.compile(r"(.+): ([0-9]+)-([0-9]+) or ([0-9]+)-([0-9]+)")
_UNSIGNED = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class Rule:
    """A named field valid within either of two inclusive ranges."""

    name: str
    ranges: tuple[tuple[int, int], tuple[int, int]]

    def contains(self, number: int) -> bool:
        return any(low <= number <= high for low, high in self.ranges)


def parse_rule(line: str) -> Rule:
    """Parse a rule such as ``class: 1-3 or 5-7``."""
    match = _RULE.fullmatch(line)
    if match is None:
        raise ValueError(f"invalid rule: {line!r}")
    name, a, b, c, d = match.groups()
    return Rule(name, ((int(a), int(b)), (int(c), int(d))))


def _sections(text: str) -> tuple[list[Rule], str, str]:
    parts = text.split("\n\n")
    if len(parts) < 3:
        raise ValueError("expected rules, own ticket and nearby tickets")
    rules = [parse_rule(line) for line in parts[0].splitlines()]
    return rules, parts[1], parts[2]


def _parse_number(entry: str) -> int | None:
    return int(entry) if _UNSIGNED.fullmatch(entry) else None


def part1(text: str) -> int:
    """Sum of nearby ticket values that no rule accepts."""
    rules, _, nearby = _sections(text)
    values = (
        _parse_number(entry)
        for line in nearby.splitlines()[1:]
        for entry in line.split(",")
    )
    return sum(
        value
        for value in values
        if value is not None and not any(rule.contains(value) for rule in rules)
    )


def part2(text: str) -> int:
    """Product of own ticket values in fields whose name starts with ``departure``."""
    rules, own, nearby = _sections(text)
    own_lines = own.splitlines()
    if len(own_lines) < 2:
        raise ValueError("own ticket is missing")
    own_values = [int(entry) for entry in own_lines[1].split(",")]

    tickets = [
        [int(entry) for entry in line.split(",")]
        for line in nearby.splitlines()[1:]
    ]
    valid_tickets = [
        ticket
        for ticket in tickets
        if all(any(rule.contains(value) for rule in rules) for value in ticket)
    ]

    guesses = [set(rules) for _ in own_values]
    for ticket in valid_tickets:
        for column, value in enumerate(ticket):
            guesses[column] = {rule for rule in guesses[column] if rule.contains(value)}

    start = next((column for column in guesses if len(column) == 1), None)
    if start is None:
        raise ValueError("no field can be identified")
    sure = set(start)

    while len(sure) < len(guesses):
        before = (len(sure), sum(map(len, guesses)))
        for column in guesses:
            if len(column) > 1:
                column -= sure
            if len(column) == 1:
                sure |= column
        if (len(sure), sum(map(len, guesses))) == before:
            raise ValueError("fields cannot be resolved")

    names = []
    for column in guesses:
        if not column:
            raise ValueError("a field matches no rule")
        names.append(next(iter(column)).name)

    return math.prod(
        value
        for name, value in zip(names, own_values)
        if name.startswith("departure")
    )