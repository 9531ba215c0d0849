# adventpuzzles

Solutions to a series of daily programming puzzles. Each puzzle has its own
module. A module takes the puzzle input, usually as text, and returns the
answer.

## Installing

```
pip install .
```

Install with the `test` extra to get the test tools:

```
pip install ".[test]"
```

## Using

Most puzzle modules have a `part1` and a `part2` function. Pass in the
contents of your puzzle input:

```python
from pathlib import Path

from adventpuzzles import year2020_day05, year2021_day01

text = Path("input.txt").read_text()
print(year2020_day05.part1(text))
print(year2020_day05.part2(text))

print(year2021_day01.part1("199\n200\n208\n210\n200\n207\n240\n269\n260\n263"))  # 7
```

Some modules need their input in a different form, or offer more:

- `year2020_day01.part1` and `part2` take an iterable of integers.
- `year2020_day04.part1` and `part2` take an iterable of lines.
- `year2020_day15.game(text, turns)` plays the memory game for any number of
  turns; `part1` and `part2` use 2020 and 30,000,000.
- `year2020_day25` has only `part1`.
- `year2021_day01` also has `part1_iter` and `part1_zip`, which give the same
  answer as `part1` in other ways, and a `pairs` generator.
- `year2020_day10` also has `part1_sort` and a `tribonacci` function.

Most modules also expose the pieces they are built from, such as parsers and
small data types. For example, `year2020_tile` provides the `Tile` class
(rotation, flipping, the eight `orientations`, sea-monster counting),
`fit_tile_right`, `fit_tile_bottom` and `parse_tiles`; `year2020_day23`
provides `CircularList` and `CupGame`; `year2020_day22` provides
`recursive_combat`.

Modules in the package:

- 2020: `year2020_day01`, `year2020_day03`, `year2020_day04`,
  `year2020_day05`, `year2020_day06`, `year2020_day07`, `year2020_day08`,
  `year2020_day10`, `year2020_day11`, `year2020_day12`, `year2020_day14`,
  `year2020_day15`, `year2020_day16`, `year2020_day18`, `year2020_day19`,
  `year2020_day21`, `year2020_day22`, `year2020_day23`, `year2020_day24`,
  `year2020_day25`, and `year2020_tile`
- 2021: `year2021_day01`, `year2021_day02`, `year2021_day04`,
  `year2021_day05`

When an input is malformed or has no solution, the functions raise an
exception (usually `ValueError`). They do not return a sentinel value.

Some answers take a long time in pure Python, notably `year2020_day15.part2`
and `year2020_day23.part2`.

## What the package does not do

- It has no command-line program. Call the functions from Python.
- It does not read input files or fetch puzzle inputs; you pass the text in.
- It does not solve every day of either year: only the modules listed above
  are included.

## Running the tests

```
pytest
```