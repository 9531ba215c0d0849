"""Square image tiles that can be rotated, flipped and fitted together."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

TOP = 0
RTOP = 1
BOTTOM = 2
RBOTTOM = 3
LEFT = 4
RLEFT = 5
RIGHT = 6
RRIGHT = 7

# (row, column) of each '#' in the sea monster:
#                   #
# #    ##    ##    ###
#  #  #  #  #  #
DRAGON = (
    (0, 18),
    (1, 0),
    (1, 5),
    (1, 6),
    (1, 11),
    (1, 12),
    (1, 17),
    (1, 18),
    (1, 19),
    (2, 1),
    (2, 4),
    (2, 7),
    (2, 10),
    (2, 13),
    (2, 16),
)
DRAGON_WIDTH = 20
DRAGON_HEIGHT = 3


@dataclass(frozen=True)
class Tile:
    """A square grid of characters with its eight border readings."""

    id: int
    cells: tuple[str, ...]
    borders: tuple[str, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        cells = tuple("".join(row) for row in self.cells)
        if not cells or any(len(row) != len(cells) for row in cells):
            raise ValueError("a tile must be a non-empty square")
        object.__setattr__(self, "cells", cells)
        top = cells[0]
        bottom = cells[-1]
        left = "".join(row[0] for row in cells)
        right = "".join(row[-1] for row in cells)
        object.__setattr__(
            self,
            "borders",
            (top, top[::-1], bottom, bottom[::-1], left, left[::-1], right, right[::-1]),
        )

    @property
    def size(self) -> int:
        return len(self.cells)

    def __str__(self) -> str:
        return "".join(f"{row}\n" for row in self.cells)

    def is_neighbour_of(self, other: "Tile") -> bool:
        """Whether any border of this tile appears among the other's borders."""
        return any(border in other.borders for border in self.borders)

    def rotate(self) -> "Tile":
        """Rotate 90 degrees clockwise."""
        return Tile(self.id, tuple("".join(column[::-1]) for column in zip(*self.cells)))

    def flip_horiz(self) -> "Tile":
        """Mirror left to right."""
        return Tile(self.id, tuple(row[::-1] for row in self.cells))

    def flip_vert(self) -> "Tile":
        """Mirror top to bottom."""
        return Tile(self.id, self.cells[::-1])

    def orientations(self) -> list["Tile"]:
        """The eight rotations and reflections of this tile."""
        result = []
        for start in (self, self.flip_horiz()):
            current = start
            for _ in range(4):
                result.append(current)
                current = current.rotate()
        return result

    def count_dragons(self) -> int:
        """Number of places where the whole sea monster appears."""
        size = self.size
        if size < DRAGON_WIDTH or size < DRAGON_HEIGHT:
            return 0
        return sum(
            all(self.cells[row + dr][col + dc] == "#" for dr, dc in DRAGON)
            for row in range(size - DRAGON_HEIGHT + 1)
            for col in range(size - DRAGON_WIDTH + 1)
        )

    def count_sharps(self) -> int:
        """Number of '#' cells."""
        return sum(row.count("#") for row in self.cells)


_Transform = Callable[[Tile], Tile]

_BOTTOM_FITS: dict[int, _Transform] = {
    TOP: lambda tile: tile,
    BOTTOM: Tile.flip_vert,
    RTOP: Tile.flip_horiz,
    RBOTTOM: lambda tile: tile.flip_horiz().flip_vert(),
    LEFT: lambda tile: tile.rotate().flip_horiz(),
    RIGHT: lambda tile: tile.rotate().rotate().rotate(),
    RLEFT: Tile.rotate,
    RRIGHT: lambda tile: tile.rotate().flip_vert(),
}

_RIGHT_FITS: dict[int, _Transform] = {
    LEFT: lambda tile: tile,
    RLEFT: Tile.flip_vert,
    RIGHT: Tile.flip_horiz,
    RRIGHT: lambda tile: tile.flip_horiz().flip_vert(),
    TOP: lambda tile: tile.rotate().flip_horiz(),
    RTOP: lambda tile: tile.rotate().rotate().rotate(),
    BOTTOM: Tile.rotate,
    RBOTTOM: lambda tile: tile.rotate().flip_vert(),
}


def _fit(border: str, tile: Tile, fits: dict[int, _Transform]) -> Tile | None:
    try:
        position = tile.borders.index(border)
    except ValueError:
        return None
    return fits[position](tile)


def fit_tile_bottom(top: Tile, bottom: Tile) -> Tile | None:
    """Orient bottom so its top edge matches top's bottom edge, or None."""
    return _fit(top.borders[BOTTOM], bottom, _BOTTOM_FITS)


def fit_tile_right(left: Tile, right: Tile) -> Tile | None:
    """Orient right so its left edge matches left's right edge, or None."""
    return _fit(left.borders[RIGHT], right, _RIGHT_FITS)


def _blocks(text: str) -> Iterable[str]:
    for block in text.split("\n\n"):
        if not block:
            return
        yield block


def parse_tiles(text: str) -> dict[int, Tile]:
    """Parse blank-line separated tiles, each headed by ``Tile NNNN:``."""
    tiles: dict[int, Tile] = {}
    for block in _blocks(text):
        header, *rows = block.splitlines()
        tile_id = int(header[5:9])
        tiles[tile_id] = Tile(tile_id, tuple(rows))
    return tiles