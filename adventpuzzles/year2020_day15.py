"""Rambunctious recitation: the memory game."""

PART1_TURNS = 2020
PART2_TURNS = 30_000_000


def game(text: str, turns: int) -> int:
    """Return the number spoken on the given turn."""
    start = [int(entry) for entry in text.split(",")]
    if any(number < 0 or number >= turns for number in start):
        raise ValueError("starting numbers must lie between 0 and the number of turns")

    last_seen = [0] * turns
    for turn, number in enumerate(start[:-1], 1):
        last_seen[number] = turn

    current = start[-1]
    for turn in range(len(start), turns):
        seen = last_seen[current]
        last_seen[current] = turn
        current = turn - seen if seen else 0
    return current


def part1(text: str) -> int:
    """The 2020th number spoken."""
    return game(text, PART1_TURNS)


def part2(text: str) -> int:
    """The 30,000,000th number spoken."""
    return game(text, PART2_TURNS)