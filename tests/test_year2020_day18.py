import pytest

from adventpuzzles.year2020_day18 import (
    evaluate,
    evaluate_with_priority,
    part1,
    part2,
)


def test_eval():
    assert evaluate("2 + 3 * 9") == (2 + 3) * 9
    assert evaluate("2 + 3 * 9 + 4") == (2 + 3) * 9 + 4
    assert evaluate("2 + (3 * 9) + 4") == 2 + 3 * 9 + 4
    assert evaluate("2 + (3 * (9 + 2)) + 4") == 2 + 3 * (9 + 2) + 4


def test_math_with_priority():
    assert evaluate_with_priority("2+3*9") == 45
    assert evaluate_with_priority("9*2+3") == 45


def test_priority_with_parentheses():
    assert evaluate_with_priority("1 + (2 * 3) + (4 * (5 + 6))") == 51
    assert evaluate_with_priority("2 * 3 + (4 * 5)") == 46


def test_left_to_right_examples():
    assert evaluate("1 + (2 * 3) + (4 * (5 + 6))") == 51
    assert evaluate("2 * 3 + (4 * 5)") == 26


def test_parts_sum_lines():
    text = "2 * 3 + (4 * 5)\n1 + (2 * 3) + (4 * (5 + 6))"
    assert part1(text) == 26 + 51
    assert part2(text) == 46 + 51


def test_priority_invalid_expression():
    with pytest.raises(ValueError):
        evaluate_with_priority("2 + ")


def test_priority_unbalanced_parenthesis():
    with pytest.raises(ValueError):
        evaluate_with_priority("2 + 3)")