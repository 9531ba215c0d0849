"""Lobby layout: flip tiles on a hexagonal floor."""

from collections import Counter
from collections.abc import Iterable, Iterator

DAYS = 100

Tile = tuple[int, int]

DELTAS: tuple[Tile, ...] = ((2, 0), (-2, 0), (1, 1), (-1, -1), (-1, 1), (1, -1))

_SIMPLE: dict[str, Tile] = {"e": (2, 0), "w": (-2, 0)}
_COMPOUND: dict[tuple[str, str], Tile] = {
    ("n", "e"): (1, -1),
    ("n", "w"): (-1, -1),
    ("s", "e"): (1, 1),
    ("s", "w"): (-1, 1),
}


def parse_moves(line: str) -> Iterator[Tile]:
    """Yield the step of each direction in the line.

    Reading stops at the first character that does not start a direction.
    """
    chars = iter(line)
    for char in chars:
        if char in _SIMPLE:
            yield _SIMPLE[char]
        elif char in ("n", "s"):
            delta = _COMPOUND.get((char, next(chars, "")))
            if delta is None:
                return
            yield delta
        else:
            return


def tile_position(line: str) -> Tile:
    """The tile reached by following the line's directions from the origin."""
    x = y = 0
    for dx, dy in parse_moves(line):
        x += dx
        y += dy
    return x, y


def neighbours(tile: Tile) -> list[Tile]:
    """The six tiles around the given one."""
    x, y = tile
    return [(x + dx, y + dy) for dx, dy in DELTAS]


def initial_black_tiles(text: str) -> set[Tile]:
    """Flip the tile named by each line; return the tiles left black."""
    black: set[Tile] = set()
    for line in text.splitlines():
        black ^= {tile_position(line)}
    return black


def step(black: Iterable[Tile]) -> set[Tile]:
    """Apply one day of the flipping rules."""
    black = set(black)
    counts = Counter(neighbour for tile in black for neighbour in neighbours(tile))
    return {
        tile
        for tile, count in counts.items()
        if count == 2 or (count == 1 and tile in black)
    }


def part1(text: str) -> int:
    """Number of black tiles after the initial flips."""
    return len(initial_black_tiles(text))


def part2(text: str) -> int:
    """Number of black tiles after a hundred days."""
    black = initial_black_tiles(text)
    for _ in range(DAYS):
        black = step(black)
    return len(black)