"""Docking data: bitmask-driven memory writes."""

from collections.abc import Iterator
from dataclasses import dataclass

MASK_WIDTH = 36


@dataclass(frozen=True)
class Mask:
    """A 36-bit mask split into its set bits, kept bits and floating bits."""

    or_mask: int
    and_mask: int
    floating_bits: tuple[int, ...]

    def apply(self, value: int) -> int:
        """Overwrite value with the mask's 0 and 1 bits."""
        return value & self.and_mask | self.or_mask

    def addresses(self, address: int) -> Iterator[int]:
        """Yield every address the decoder writes to for the given address."""
        base = address | self.or_mask
        for combination in range(2 ** len(self.floating_bits)):
            final = base
            for from_bit, to_bit in enumerate(self.floating_bits):
                if combination & (1 << from_bit):
                    final |= 1 << to_bit
                else:
                    final &= ~(1 << to_bit)
            yield final


def parse_mask(mask: str) -> Mask:
    """Parse a mask string such as ``XXXX1XXX0X``, most significant bit first."""
    and_mask = 0
    or_mask = 0
    floating: list[int] = []
    for position, char in enumerate(mask):
        and_mask <<= 1
        or_mask <<= 1
        if char == "1":
            or_mask |= 1
        if char != "0":
            and_mask |= 1
        if char == "X":
            floating.append(MASK_WIDTH - 1 - position)
    return Mask(or_mask, and_mask, tuple(floating))


def _program(text: str) -> Iterator[Mask | tuple[int, int]]:
    for line in text.splitlines():
        if line.startswith("mask"):
            yield parse_mask(line[7:])
        elif line.startswith("mem"):
            address, separator, value = line[4:].partition("] = ")
            if not separator:
                raise ValueError(f"invalid line found: {line}")
            yield int(address), int(value)
        else:
            raise ValueError(f"invalid line found: {line}")


def part1(text: str) -> int:
    """Sum of memory after writing masked values."""
    memory: dict[int, int] = {}
    mask = parse_mask("X" * MASK_WIDTH)
    for item in _program(text):
        if isinstance(item, Mask):
            mask = item
        else:
            address, value = item
            memory[address] = mask.apply(value)
    return sum(memory.values())


def part2(text: str) -> int:
    """Sum of memory after writing values to every decoded address."""
    memory: dict[int, int] = {}
    mask = parse_mask("X" * MASK_WIDTH)
    for item in _program(text):
        if isinstance(item, Mask):
            mask = item
        else:
            address, value = item
            for decoded in mask.addresses(address):
                memory[decoded] = value
    return sum(memory.values())