import pytest

from adventpuzzles.year2020_day24 import (
    initial_black_tiles,
    neighbours,
    parse_moves,
    part1,
    part2,
    step,
    tile_position,
)


def test_parse_moves_reads_compound_directions():
    assert list(parse_moves("nesw")) == [(1, -1), (-1, 1)]


def test_parse_moves_stops_at_unknown_character():
    assert list(parse_moves("ex")) == [(2, 0)]


def test_parse_moves_stops_at_incomplete_direction():
    assert list(parse_moves("n")) == []


def test_round_trip_returns_to_origin():
    assert tile_position("nwwswee") == (0, 0)


def test_detour_reaches_same_tile():
    assert tile_position("esew") == tile_position("se")


@pytest.mark.parametrize("tile", [(0, 0), (3, -5), (-2, 4)])
def test_neighbours_are_symmetric(tile):
    around = neighbours(tile)
    assert len(set(around)) == 6
    assert all(tile in neighbours(other) for other in around)


def test_flipping_twice_leaves_white():
    assert initial_black_tiles("e\ne") == set()


def test_flipping_two_tiles():
    assert initial_black_tiles("e\nw") == {(2, 0), (-2, 0)}


def test_lonely_tile_turns_white():
    assert step({(0, 0)}) == set()


def test_pair_grows():
    assert step({(0, 0), (2, 0)}) == {(0, 0), (2, 0), (1, 1), (1, -1)}


def test_part1_counts_black_tiles():
    assert part1("esew\nnwwswee\nesew") == 1


def test_part2_single_tile_dies():
    assert part2("e") == 0