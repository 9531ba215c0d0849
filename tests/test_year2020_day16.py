import pytest

from adventpuzzles.year2020_day16 import Rule, parse_rule, part1, part2

PART1_EXAMPLE = """class: 1-3 or 5-7
row: 6-11 or 33-44
seat: 13-40 or 45-50

your ticket:
7,1,14

nearby tickets:
7,3,47
40,4,50
55,2,20
38,6,12
"""

PART2_TEMPLATE = """{first}: 0-1 or 4-19
row: 0-5 or 8-19
seat: 0-13 or 16-19

your ticket:
11,12,13

nearby tickets:
3,9,18
15,1,5
5,14,9
"""

PART2_DEPARTURE_ROW = """class: 0-1 or 4-19
departure row: 0-5 or 8-19
seat: 0-13 or 16-19

your ticket:
11,12,13

nearby tickets:
3,9,18
15,1,5
5,14,9
"""


def test_parse_rule():
    assert parse_rule("class: 1-3 or 5-7") == Rule("class", ((1, 3), (5, 7)))


def test_parse_rule_with_spaces_in_name():
    rule = parse_rule("departure location: 25-80 or 90-961")
    assert rule.name == "departure location"
    assert rule.ranges == ((25, 80), (90, 961))


def test_parse_rule_invalid():
    with pytest.raises(ValueError):
        parse_rule("class 1-3 or 5-7")


@pytest.mark.parametrize(
    ("number", "expected"),
    [(1, True), (3, True), (4, False), (5, True), (7, True), (8, False), (0, False)],
)
def test_contains_bounds(number, expected):
    assert parse_rule("class: 1-3 or 5-7").contains(number) is expected


def test_part1_example():
    assert part1(PART1_EXAMPLE) == 71


def test_part2_picks_departure_field():
    assert part2(PART2_DEPARTURE_ROW) == 11


def test_part2_without_departure_fields_is_empty_product():
    assert part2(PART2_TEMPLATE.format(first="class")) == 1


def test_missing_sections_raise():
    with pytest.raises(ValueError):
        part1("class: 1-3 or 5-7")