"""Handheld halting: run a tiny accumulator program."""

from collections.abc import Sequence
from dataclasses import dataclass, replace
from enum import Enum


class Operation(Enum):
    NOP = "nop"
    JMP = "jmp"
    ACC = "acc"


@dataclass(frozen=True)
class Instruction:
    operation: Operation
    argument: int

    def swapped(self) -> "Instruction":
        """Turn nop into jmp and jmp into nop; acc stays as it is."""
        if self.operation is Operation.NOP:
            return replace(self, operation=Operation.JMP)
        if self.operation is Operation.JMP:
            return replace(self, operation=Operation.NOP)
        return self


def parse_instruction(line: str) -> Instruction:
    """Parse a line such as ``jmp -4``."""
    parts = line.split(" ")
    if len(parts) < 2:
        raise ValueError(f"value not found in {line!r}")
    try:
        operation = Operation(parts[0])
    except ValueError:
        raise ValueError(f"unknown instruction: {parts[0]}") from None
    return Instruction(operation, int(parts[1]))


def execute(code: Sequence[Instruction]) -> tuple[int, bool]:
    """Run until an instruction repeats or the pointer leaves the program.

    Returns the accumulator and whether the program ran off its end.
    """
    accumulator = 0
    pointer = 0
    visited: set[int] = set()
    while pointer not in visited and 0 <= pointer < len(code):
        visited.add(pointer)
        instruction = code[pointer]
        if instruction.operation is Operation.ACC:
            accumulator += instruction.argument
            pointer += 1
        elif instruction.operation is Operation.JMP:
            pointer += instruction.argument
        else:
            pointer += 1
    return accumulator, not 0 <= pointer < len(code)


def _parse(text: str) -> list[Instruction]:
    return [parse_instruction(line) for line in text.splitlines()]


def part1(text: str) -> int:
    """Accumulator value just before any instruction runs twice."""
    accumulator, _ = execute(_parse(text))
    return accumulator


def part2(text: str) -> int:
    """Accumulator after fixing the one nop or jmp that makes the program end."""
    code = _parse(text)
    for position, instruction in enumerate(code):
        if instruction.operation is Operation.ACC:
            continue
        variant = [*code[:position], instruction.swapped(), *code[position + 1:]]
        accumulator, terminated = execute(variant)
        if terminated:
            return accumulator
    raise ValueError("could not find the instruction to swap")