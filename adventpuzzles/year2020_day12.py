"""Rain risk: steer a ship directly or by a waypoint."""

from dataclasses import dataclass
from enum import Enum


class Action(Enum):
    NORTH = "N"
    SOUTH = "S"
    EAST = "E"
    WEST = "W"
    RIGHT = "R"
    LEFT = "L"
    FORWARD = "F"


@dataclass(frozen=True)
class Instruction:
    action: Action
    value: int


def parse_instruction(line: str) -> Instruction:
    """Parse a line such as ``F10``."""
    if not line:
        raise ValueError("invalid input: empty line")
    try:
        action = Action(line[0])
    except ValueError:
        raise ValueError(f"invalid input: {line!r}") from None
    digits = line[1:]
    if not (digits.isascii() and digits.isdigit()):
        raise ValueError(f"invalid input: {line!r}")
    return Instruction(action, int(digits))


# Heading in degrees -> (dx, dy) for a forward move.
_HEADINGS = {0: (0, 1), 90: (-1, 0), 180: (0, -1), 270: (1, 0)}


@dataclass
class Waypoint:
    x: int = 10
    y: int = 1

    def rotate(self, degrees: int) -> None:
        """Rotate clockwise about the ship by 90, 180 or 270 degrees."""
        if degrees == 90:
            self.x, self.y = self.y, -self.x
        elif degrees == 180:
            self.x, self.y = -self.x, -self.y
        elif degrees == 270:
            self.x, self.y = -self.y, self.x
        else:
            raise ValueError(f"unsupported rotation: {degrees}")

    def transform(self, instruction: Instruction) -> None:
        """Move or rotate the waypoint; forward moves are not for the waypoint."""
        action, value = instruction.action, instruction.value
        if action is Action.NORTH:
            self.y += value
        elif action is Action.SOUTH:
            self.y -= value
        elif action is Action.EAST:
            self.x += value
        elif action is Action.WEST:
            self.x -= value
        elif action is Action.RIGHT:
            self.rotate(value)
        elif action is Action.LEFT:
            self.rotate((360 - value) % 360)
        else:
            raise ValueError("a waypoint cannot move forward")


@dataclass
class Ship:
    direction: int = 0
    x: int = 0
    y: int = 0

    def go(self, instruction: Instruction) -> None:
        """Apply one instruction to the ship itself."""
        action, value = instruction.action, instruction.value
        if action is Action.NORTH:
            self.y += value
        elif action is Action.SOUTH:
            self.y -= value
        elif action is Action.EAST:
            self.x += value
        elif action is Action.WEST:
            self.x -= value
        elif action is Action.RIGHT:
            self.direction = (self.direction + value) % 360
        elif action is Action.LEFT:
            self.direction = (self.direction - value) % 360
        else:
            try:
                dx, dy = _HEADINGS[self.direction]
            except KeyError:
                raise ValueError(f"unsupported heading: {self.direction}") from None
            self.x += dx * value
            self.y += dy * value

    def apply_waypoint(self, multiplier: int, waypoint: Waypoint) -> None:
        """Move towards the waypoint the given number of times."""
        self.x += waypoint.x * multiplier
        self.y += waypoint.y * multiplier

    def manhattan_distance(self) -> int:
        return abs(self.x) + abs(self.y)


def part1(text: str) -> int:
    """Distance travelled when the instructions steer the ship."""
    ship = Ship()
    for line in text.splitlines():
        ship.go(parse_instruction(line))
    return ship.manhattan_distance()


def part2(text: str) -> int:
    """Distance travelled when the instructions steer a waypoint."""
    ship = Ship()
    waypoint = Waypoint()
    for line in text.splitlines():
        instruction = parse_instruction(line)
        if instruction.action is Action.FORWARD:
            ship.apply_waypoint(instruction.value, waypoint)
        else:
            waypoint.transform(instruction)
    return ship.manhattan_distance()