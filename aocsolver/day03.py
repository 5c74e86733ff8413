"""Day 3: part numbers and gears in an engine schematic."""

from __future__ import annotations

import argparse
import string
from collections.abc import Iterable, Iterator

from aocsolver.common import DEFAULT_INPUT, find_numbers, run_challenge

Window = tuple[str, str, str]


def windows(lines: Iterable[str]) -> Iterator[Window]:
    """Yield ``(previous, current, next)`` for the lines of a schematic.

    Missing neighbours are empty strings. A line following an empty line
    becomes current without being yielded as a neighbour first.
    """
    source = iter(lines)
    prev_line = line = ""
    while True:
        next_line = next(source, None)
        exhausted = next_line is None
        if exhausted:
            if line == "":
                return
            next_line = ""
        if line == "":
            line = next_line
            continue
        yield prev_line, line, next_line
        prev_line, line = line, next_line


def has_adjacent_symbol(start: int, end: int, line: str) -> bool:
    """True if *line* holds a symbol other than a digit or '.' in ``[start-1, end]``."""
    low = max(start - 1, 0)
    high = min(end + 1, len(line))
    return any(ch not in string.digits and ch != "." for ch in line[low:high])


def adjacent_numbers(index: int, line: str) -> list[int]:
    """The numbers in *line* that touch position *index*."""
    return [
        value
        for start, end, value in find_numbers(line)
        if start - 1 <= index < end + 1
    ]


def part_a_window(prev_line: str, line: str, next_line: str) -> int:
    """Sum of the numbers in *line*, once for each of the three lines that has a symbol next to it."""
    return sum(
        value
        for start, end, value in find_numbers(line)
        for check_line in (prev_line, line, next_line)
        if has_adjacent_symbol(start, end, check_line)
    )


def part_b_window(prev_line: str, line: str, next_line: str) -> int:
    """Sum of the gear ratios of the '*' in *line* touching exactly two numbers."""
    result = 0
    for index, ch in enumerate(line):
        if ch != "*":
            continue
        numbers = [
            value
            for check_line in (prev_line, line, next_line)
            for value in adjacent_numbers(index, check_line)
        ]
        if len(numbers) == 2:
            result += numbers[0] * numbers[1]
    return result


def solve_part_a(lines: Iterable[str]) -> int:
    """Sum of all part numbers in the schematic."""
    return sum(part_a_window(*window) for window in windows(lines))


def solve_part_b(lines: Iterable[str]) -> int:
    """Sum of all gear ratios in the schematic."""
    return sum(part_b_window(*window) for window in windows(lines))


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Solve day 3.")
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT)
    args = parser.parse_args(argv)
    run_challenge(solve_part_a, solve_part_b, path=args.input)