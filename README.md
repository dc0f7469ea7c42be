# aocsolver

Solvers for daily programming puzzles from the 2015, 2017, 2018, 2019 and
2020 calendars. Each day is a module named `y<year>_day<nn>`. Each module
exposes plain functions that take the puzzle input as Python data and return
the answer. The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Available days

- 2015: days 9, 13, 14, 15, 16, 17, 18, 19, 20, 21, 22, 23, 24, 25
- 2017: days 1, 2, 3, 4, 5, 6, 7, 8, 9, 11, 12, 13, 15, 16, 17, 18, 19, 20,
  21, 22, 23, 24, 25
- 2018: days 10, 11, 12
- 2019: days 14, 16
- 2020: days 1, 2, 3, 4, 5, 6

Most modules have `solve_part1` and `solve_part2`. The exceptions are:

- `y2015_day25` and `y2017_day25` have only `solve_part1`.
- `y2019_day16` has only `solve_part1`, which gives the first eight digits
  after a hundred phases of `fft`.
- `y2017_day06`, `y2017_day08`, `y2017_day09` and `y2017_day11` have one
  `solve` function that returns both answers as a tuple.
- `y2017_day24.solve` returns a `BridgeStats` with `strength`, `length` and
  `strength_for_longest`.
- `y2017_day19.follow_route` returns the letters seen and the step count.
- `y2017_day21.generate_art(lines, iterations)` returns the number of lit
  pixels after that many enhancements. The puzzle asks for 5 and 18.
- `y2018_day10.message_frames(lines, limit=12000)` yields
  `(seconds, picture)` for every second before `limit` at which the points
  fit in a 100 by 100 box. You read the message from the picture yourself.

## Usage

You read the puzzle input yourself, split it the way the puzzle needs, and
pass it in:

```python
from pathlib import Path

from aocsolver import y2015_day09, y2017_day06, y2020_day04

lines = Path("input.txt").read_text().splitlines()
print(y2015_day09.solve_part1(lines))
print(y2015_day09.solve_part2(lines))

cycles, loop_size = y2017_day06.solve(["0 2 7 0"])

passports = Path("passports.txt").read_text().strip().split("\n\n")
print(y2020_day04.solve_part2(passports))
```

### Inputs that are not a list of lines

- `y2015_day14.solve_part1(reindeer)` and `solve_part2(reindeer)` take
  `Reindeer` objects. Build them with `parse_input(lines)` and run them with
  `race(reindeer, 2503)` first.
- `y2015_day17.solve_part1(containers, target=150)` takes the container
  sizes as integers. `solve_part2` takes the same arguments.
- `y2015_day19.solve_part1(blocks)` and `solve_part2(blocks)` take the input
  split on the blank line: the replacement rules first, then the molecule.
  `solve_part2` raises `ValueError` when its greedy reduction gets stuck.
- `y2017_day02.solve_part1(rows)` takes rows of integers, which
  `parse_input(lines)` builds.
- `y2017_day03.solve_part1(value)` and `solve_part2(value)` take one integer.
- `y2017_day05.solve_part1(offsets)` takes the jump offsets as integers.
- `y2017_day07.solve_part2(lines, base)` needs the bottom program's name,
  which `solve_part1(lines)` returns.
- `y2017_day09.solve(stream)` takes the stream as a single string.
- `y2020_day01.solve_part1(numbers)` takes integers from
  `parse_numbers(lines)`.
- `y2020_day02.solve_part1(entries)` takes `PasswordEntry` objects from
  `parse_line`.
- `y2020_day04` and `y2020_day06` take groups split on blank lines.

### Adjustable run lengths

Some puzzles run for a long time. These functions let you choose how much
work to do:

- `y2017_day15.solve_part1(lines, pairs=40_000_000)` and
  `solve_part2(lines, pairs=5_000_000)`
- `y2017_day16.solve_part1(lines, programs="abcdefghijklmnop")` and
  `solve_part2(lines, programs, dances=1_000_000_000)`
- `y2017_day22.solve_part1(lines, bursts=10_000)` and
  `solve_part2(lines, bursts=10_000_000)`

### Lower-level helpers

The helpers are public too, so you can inspect intermediate results.
Examples:

- the distance matrix from `y2015_day09.build_matrix`
- the `GameState` search in `y2015_day22.find_best_game`
- the message-passing `Program` in `y2017_day18`
- `y2017_day20.Particle`
- `y2019_day14.ore_for_fuel`

## What this package does not do

- There is no command-line program. Everything is called from Python.
- It does not download puzzle inputs and does not read input files for you.
- It covers only the days listed above.