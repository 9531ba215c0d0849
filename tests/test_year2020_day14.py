import pytest

from adventpuzzles.year2020_day14 import parse_mask, part1, part2

PART1_EXAMPLE = """mask = XXXXXXXXXXXXXXXXXXXXXXXXXXXXX1XXXX0X
mem[8] = 11
mem[7] = 101
mem[8] = 0"""

PART2_EXAMPLE = """mask = 000000000000000000000000000000X1001X
mem[42] = 100
mask = 00000000000000000000000000000000X0XX
mem[26] = 1"""


def test_apply_example_mask():
    mask = parse_mask("XXXXXXXXXXXXXXXXXXXXXXXXXXXXX1XXXX0X")
    assert mask.apply(11) == 73


@pytest.mark.parametrize("value", [0, 11, 101, 123456789])
def test_all_floating_mask_is_identity(value):
    assert parse_mask("X" * 36).apply(value) == value


def test_zero_mask_without_floating_keeps_address():
    mask = parse_mask("0" * 36)
    assert list(mask.addresses(42)) == [42]


def test_addresses_cover_all_floating_combinations():
    mask = parse_mask("0" * 34 + "XX")
    addresses = list(mask.addresses(42))
    assert len(addresses) == 2 ** len(mask.floating_bits)
    assert len(set(addresses)) == len(addresses)
    assert 42 in addresses


def test_part1_example():
    assert part1(PART1_EXAMPLE) == 165


def test_part2_example():
    assert part2(PART2_EXAMPLE) == 208


def test_invalid_line_raises():
    with pytest.raises(ValueError):
        part1("bogus = 3")


def test_malformed_mem_raises():
    with pytest.raises(ValueError):
        part2("mem[3 = 4")