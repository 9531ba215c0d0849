"""Dive: steer a submarine."""

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    FORWARD = "forward"


@dataclass(frozen=True)
class Command:
    direction: Direction
    amount: int


def parse_command(line: str) -> Command:
    """Parse a line such as ``forward 5``."""
    direction, separator, amount = line.partition(" ")
    if not separator:
        raise ValueError("cannot parse move")
    if not (amount.isascii() and amount.isdigit()):
        raise ValueError("cannot parse amount as an unsigned integer")
    try:
        parsed = Direction(direction)
    except ValueError:
        raise ValueError("invalid move") from None
    return Command(parsed, int(amount))


@dataclass
class Position:
    horiz: int = 0
    depth: int = 0

    def apply(self, command: Command) -> None:
        """Up and down change the depth, forward the horizontal position."""
        if command.direction is Direction.UP:
            if command.amount > self.depth:
                raise ValueError("depth cannot become negative")
            self.depth -= command.amount
        elif command.direction is Direction.DOWN:
            self.depth += command.amount
        else:
            self.horiz += command.amount


@dataclass
class PositionWithAim:
    aim: int = 0
    horiz: int = 0
    depth: int = 0

    def apply(self, command: Command) -> None:
        """Up and down change the aim; forward moves along it."""
        if command.direction is Direction.UP:
            if command.amount > self.aim:
                raise ValueError("aim cannot become negative")
            self.aim -= command.amount
        elif command.direction is Direction.DOWN:
            self.aim += command.amount
        else:
            self.horiz += command.amount
            self.depth += self.aim * command.amount


def part1(text: str) -> int:
    """Horizontal position times depth."""
    position = Position()
    for line in text.splitlines():
        position.apply(parse_command(line))
    return position.horiz * position.depth


def part2(text: str) -> int:
    """Horizontal position times depth, steering by aim."""
    position = PositionWithAim()
    for line in text.splitlines():
        position.apply(parse_command(line))
    return position.horiz * position.depth