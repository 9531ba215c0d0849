import pytest

from adventpuzzles.year2020_day12 import (
    Action,
    Instruction,
    Ship,
    Waypoint,
    parse_instruction,
    part1,
    part2,
)

EXAMPLE = "F10\nN3\nF7\nR90\nF11"


def test_parse_instruction():
    assert parse_instruction("F10") == Instruction(Action.FORWARD, 10)
    assert parse_instruction("L270") == Instruction(Action.LEFT, 270)


@pytest.mark.parametrize("line", ["X5", "F", "Nx", ""])
def test_parse_instruction_invalid(line):
    with pytest.raises(ValueError):
        parse_instruction(line)


def test_waypoint_full_turn_returns_to_start():
    waypoint = Waypoint()
    for _ in range(4):
        waypoint.rotate(90)
    assert waypoint == Waypoint()


def test_waypoint_half_turn_is_two_quarter_turns():
    once = Waypoint(3, -7)
    once.rotate(180)
    twice = Waypoint(3, -7)
    twice.rotate(90)
    twice.rotate(90)
    assert once == twice


def test_waypoint_rejects_odd_rotation():
    with pytest.raises(ValueError):
        Waypoint().rotate(45)


def test_waypoint_left_is_reverse_right():
    left = Waypoint()
    left.transform(Instruction(Action.LEFT, 90))
    right = Waypoint()
    right.transform(Instruction(Action.RIGHT, 270))
    assert left == right


def test_waypoint_cannot_go_forward():
    with pytest.raises(ValueError):
        Waypoint().transform(Instruction(Action.FORWARD, 1))


def test_ship_turn_and_back():
    ship = Ship()
    ship.go(Instruction(Action.RIGHT, 90))
    ship.go(Instruction(Action.LEFT, 90))
    assert ship.direction == Ship().direction


def test_ship_forward_on_odd_heading_raises():
    ship = Ship()
    ship.go(Instruction(Action.RIGHT, 45))
    with pytest.raises(ValueError):
        ship.go(Instruction(Action.FORWARD, 1))


def test_manhattan_distance_is_symmetric():
    assert Ship(x=-3, y=4).manhattan_distance() == Ship(x=3, y=-4).manhattan_distance()


def test_part1_back_and_forth_is_zero():
    assert part1("N5\nS5") == 0


def test_part1_turning_does_not_change_distance():
    assert part1("R90\nF5") == 5
    assert part1("R90\nF5") == part1("F5")


def test_part2_example():
    assert part2(EXAMPLE) == 286