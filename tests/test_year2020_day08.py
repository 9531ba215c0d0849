import pytest

from adventpuzzles.year2020_day08 import (
    Instruction,
    Operation,
    execute,
    parse_instruction,
    part1,
    part2,
)

EXAMPLE = """nop +0
acc +1
jmp +4
acc +3
jmp -3
acc -99
acc +1
jmp -4
acc +6"""


def test_parse_instruction():
    assert parse_instruction("jmp -4") == Instruction(Operation.JMP, -4)
    assert parse_instruction("acc +3") == Instruction(Operation.ACC, 3)


def test_parse_instruction_unknown_operation():
    with pytest.raises(ValueError):
        parse_instruction("mul +2")


def test_parse_instruction_missing_value():
    with pytest.raises(ValueError):
        parse_instruction("nop")


def test_swapped():
    assert Instruction(Operation.NOP, 3).swapped() == Instruction(Operation.JMP, 3)
    assert Instruction(Operation.JMP, -2).swapped() == Instruction(Operation.NOP, -2)
    assert Instruction(Operation.ACC, 7).swapped() == Instruction(Operation.ACC, 7)


def test_execute_runs_off_the_end():
    assert execute([Instruction(Operation.ACC, 3)]) == (3, True)


def test_execute_jump_before_start_terminates():
    assert execute([Instruction(Operation.JMP, -1)]) == (0, True)


def test_execute_detects_loop():
    _, terminated = execute([Instruction(Operation.JMP, 0)])
    assert terminated is False


def test_part1_example():
    assert part1(EXAMPLE) == 5


def test_part2_example():
    assert part2(EXAMPLE) == 8


def test_part2_without_candidates_raises():
    with pytest.raises(ValueError):
        part2("acc +1")