# aocsolver

Solvers for days 1 to 8 of a yearly programming puzzle calendar. Each day has
two parts. A day's solver reads the puzzle input and prints one answer for
each part.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command-line use

Each day has its own command:

```
aocsolver-day01
aocsolver-day02
aocsolver-day03
aocsolver-day04
aocsolver-day05
aocsolver-day06
aocsolver-day07
aocsolver-day08
```

Each command takes one optional argument, the path of the puzzle input. When
it is left out, the command reads `input.txt` in the current directory. It
prints the result of both parts, for example:

```
$ aocsolver-day01 my-input.txt
Part A: 142
Part B: 142
```

## Library use

Every day module exposes `solve_part_a(lines)` and `solve_part_b(lines)`.
Each takes the puzzle input as an iterable of lines (without line endings)
and returns an integer:

```python
from aocsolver import day01

lines = ["1abc2", "pqr3stu8vwx", "a1b2c3d4e5f", "treb7uchet"]
print(day01.solve_part_a(lines))  # 142
```

Malformed input raises `ValueError`.

The modules are:

| Module             | Puzzle                                  |
|--------------------|-----------------------------------------|
| `aocsolver.day01`  | Calibration values, digits and words    |
| `aocsolver.day02`  | Cube game limits and minimum cube sets  |
| `aocsolver.day03`  | Engine schematic part numbers and gears |
| `aocsolver.day04`  | Scratchcard points and card copies      |
| `aocsolver.day05`  | Seed to location almanac                |
| `aocsolver.day06`  | Boat race button holding times          |
| `aocsolver.day07`  | Camel card hand ranking                 |
| `aocsolver.day08`  | Left/right network walking              |

Besides the two solvers, the modules expose their building blocks, such as
`day02.parse_game`, `day04.parse_scratchcard`, `day05.parse_almanac`,
`day06.button_hold_range`, `day07.parse_hand` with `day07.total_winnings`,
and `day08.parse_network`.

Shared helpers live in `aocsolver.common`:

- `read_lines(path)` reads a file into a list of lines without terminators.
- `parse_ints(text, separator)` parses a separated list of integers,
  skipping empty fields.
- `trim_spaces_and_split(text, separator)` strips and splits a string.
- `find_numbers(line)` returns `(start, end, value)` for each run of digits.
- `sum_lines(line_function)` builds a solver that sums a per-line function.
- `run_challenge(*solvers, path="input.txt")` runs each solver on the file,
  prints `Part A: ...`, `Part B: ...` and returns the results as a list.