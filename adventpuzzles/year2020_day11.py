"""Seating system: a cellular automaton over ferry seats."""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

OFFSETS = tuple(
    (dy, dx) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dy, dx) != (0, 0)
)


class Cell(Enum):
    FLOOR = "."
    EMPTY = "L"
    OCCUPIED = "#"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Board:
    rows: tuple[tuple[Cell, ...], ...]

    def _cell(self, x: int, y: int) -> Cell | None:
        if x < 0 or y < 0 or y >= len(self.rows) or x >= len(self.rows[y]):
            return None
        return self.rows[y][x]

    def adjacent_occupied(self, x: int, y: int) -> int:
        """Occupied seats among the eight surrounding cells."""
        return sum(self._cell(x + dx, y + dy) is Cell.OCCUPIED for dy, dx in OFFSETS)

    def visible_occupied(self, x: int, y: int) -> int:
        """Occupied seats seen first in each of the eight directions."""
        found = 0
        for dy, dx in OFFSETS:
            distance = 1
            while True:
                cell = self._cell(x + dx * distance, y + dy * distance)
                distance += 1
                if cell is Cell.FLOOR:
                    continue
                if cell is Cell.OCCUPIED:
                    found += 1
                break
        return found

    def step(self, neighbours_limit: int, use_ray_cast: bool) -> tuple["Board", bool]:
        """Apply one round of the rules; return the new board and whether it changed."""
        count = self.visible_occupied if use_ray_cast else self.adjacent_occupied
        changed = False
        rows = []
        for y, row in enumerate(self.rows):
            new_row = []
            for x, cell in enumerate(row):
                new_cell = cell
                if cell is Cell.EMPTY and count(x, y) == 0:
                    new_cell = Cell.OCCUPIED
                elif cell is Cell.OCCUPIED and count(x, y) >= neighbours_limit:
                    new_cell = Cell.EMPTY
                changed = changed or new_cell is not cell
                new_row.append(new_cell)
            rows.append(tuple(new_row))
        return Board(tuple(rows)), changed

    def occupied(self) -> int:
        """Number of occupied seats."""
        return sum(cell is Cell.OCCUPIED for row in self.rows for cell in row)

    def __str__(self) -> str:
        return "\n".join("".join(cell.value for cell in row) for row in self.rows)


def parse_board(text: str) -> Board:
    """Build a board from lines of ``.``, ``L`` and ``#``."""
    try:
        return Board(tuple(tuple(Cell(char) for char in line) for line in text.splitlines()))
    except ValueError as error:
        raise ValueError(f"invalid board: {error}") from None


def evolutions(board: Board, neighbours_limit: int, use_ray_cast: bool) -> Iterator[Board]:
    """Yield each board that differs from its predecessor, until the seating settles."""
    while True:
        board, changed = board.step(neighbours_limit, use_ray_cast)
        if not changed:
            return
        yield board


def _settled_occupied(text: str, neighbours_limit: int, use_ray_cast: bool) -> int:
    last = None
    for last in evolutions(parse_board(text), neighbours_limit, use_ray_cast):
        pass
    if last is None:
        raise ValueError("the seating never changes")
    return last.occupied()


def part1(text: str) -> int:
    """Occupied seats once the adjacency rules settle."""
    return _settled_occupied(text, 4, False)


def part2(text: str) -> int:
    """Occupied seats once the line-of-sight rules settle."""
    return _settled_occupied(text, 5, True)