import pytest

from adventpuzzles.year2020_day15 import game, part1, part2

EXAMPLES_AFTER_2020_TURNS = {
    "1,3,2": 1,
    "2,1,3": 10,
    "1,2,3": 27,
    "2,3,1": 78,
    "3,2,1": 438,
    "3,1,2": 1836,
}


@pytest.mark.parametrize("text", sorted(EXAMPLES_AFTER_2020_TURNS))
def test_examples_2020(text):
    expected = EXAMPLES_AFTER_2020_TURNS[text]
    assert game(text, 2020) == expected
    assert part1(text) == expected


def test_example_30_000_000():
    assert part2("3,2,1") == 18


def test_invalid_input_raises():
    with pytest.raises(ValueError):
        game("", 10)


def test_start_number_too_large_raises():
    with pytest.raises(ValueError):
        game("1,50", 10)