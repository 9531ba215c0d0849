from adventpuzzles.year2020_day06 import part1, part2

EXAMPLE = "abc\n\na\nb\nc\n\nab\nac\n\na\na\na\na\n\nb"


def test_part1_example():
    assert part1(EXAMPLE) == 11


def test_part2_example():
    assert part2(EXAMPLE) == 6


def test_trailing_blank_lines_change_nothing():
    assert part1(EXAMPLE + "\n\n\n") == part1(EXAMPLE)
    assert part2(EXAMPLE + "\n\n\n") == part2(EXAMPLE)


def test_identical_answers_agree():
    text = "xyz\nzyx\nyxz"
    assert part1(text) == part2(text) == len("xyz")


def test_everyone_never_exceeds_anyone():
    assert part2(EXAMPLE) <= part1(EXAMPLE)