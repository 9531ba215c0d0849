"""Adapter array: chain joltage adapters."""

import math
from functools import cache


def _numbers(text: str) -> list[int]:
    numbers = []
    for line in text.splitlines():
        try:
            value = int(line)
        except ValueError:
            raise ValueError(f"cannot convert line {line!r} to an unsigned integer") from None
        if value < 0:
            raise ValueError(f"cannot convert line {line!r} to an unsigned integer")
        numbers.append(value)
    return numbers


@cache
def tribonacci(n: int) -> int:
    """Tribonacci numbers starting 1, 1, 2."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n < 2:
        return 1
    if n == 2:
        return 2
    return tribonacci(n - 1) + tribonacci(n - 2) + tribonacci(n - 3)


def part1_sort(text: str) -> int:
    """Ones times threes among the jolt differences, found by sorting."""
    ones = 0
    threes = 1  # the device adds a final jump of three
    last = 0
    for number in sorted(_numbers(text)):
        difference = number - last
        if difference == 1:
            ones += 1
        elif difference == 3:
            threes += 1
        last = number
    return ones * threes


def part1(text: str) -> int:
    """Ones times threes among the jolt differences, found by walking a set."""
    numbers = set(_numbers(text))
    ones = 0
    threes = 1  # the device adds a final jump of three
    current = 0
    while True:
        if current + 1 in numbers:
            current += 1
            ones += 1
        elif current + 3 in numbers:
            current += 3
            threes += 1
        else:
            return ones * threes


def part2(text: str) -> int:
    """Count the arrangements of adapters that reach the device."""
    chunks = []
    previous = 0
    in_chunk = 0
    for number in sorted(_numbers(text)):
        if number - previous > 2:
            chunks.append(tribonacci(in_chunk))
            in_chunk = 0
        else:
            in_chunk += 1
        previous = number
    chunks.append(tribonacci(in_chunk))
    return math.prod(chunks)