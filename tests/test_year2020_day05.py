import pytest

from adventpuzzles.year2020_day05 import part1, part2, seat_id

CODES = ["FBFBBFFRLR", "BFFFBBFRRR", "FFFBBBFRRR", "BBFFBBFRLL"]


def _code_for(number):
    bits = format(number, "010b")
    rows = bits[:7].replace("0", "F").replace("1", "B")
    cols = bits[7:].replace("0", "L").replace("1", "R")
    return rows + cols


def test_seat_id_examples():
    assert seat_id("FBFBBFFRLR") == 357
    assert seat_id("BBFFBBFRLL") == 820


@pytest.mark.parametrize("number", [0, 5, 357, 1023])
def test_seat_id_round_trip(number):
    assert seat_id(_code_for(number)) == number


def test_seat_id_rejects_unknown_characters():
    with pytest.raises(ValueError):
        seat_id("FBFBXFFRLR")


def test_part1_is_highest():
    assert part1("\n".join(CODES)) == max(seat_id(code) for code in CODES)


def test_part1_empty_raises():
    with pytest.raises(ValueError):
        part1("")


def test_part2_finds_gap():
    ids = set(range(100, 200)) - {150}
    text = "\n".join(_code_for(number) for number in sorted(ids))
    assert part2(text) == 150


def test_part2_without_gap_raises():
    text = "\n".join(_code_for(number) for number in range(10, 20))
    with pytest.raises(ValueError):
        part2(text)