"""Day 1: calibration values from the first and last digit of each line."""

from __future__ import annotations

import argparse
import re
from collections.abc import Iterable

from aocsolver.common import DEFAULT_INPUT, run_challenge, sum_lines

_DIGIT = re.compile(r"[0-9]")
_WORDS = ("one", "two", "three", "four", "five", "six", "seven", "eight", "nine")
_WORD_VALUES = {word: value for value, word in enumerate(_WORDS, start=1)}
_EXTENDED_DIGIT = re.compile("|".join(_WORDS) + "|[0-9]")
# Spelled digits reversed, so the last digit of a line is found by scanning
# the reversed line and overlaps such as "twone" resolve to the later word.
_REVERSED_EXTENDED_DIGIT = re.compile("|".join(word[::-1] for word in _WORDS) + "|[0-9]")


def word_to_digit(word: str) -> int:
    """Convert a spelled-out digit or a numeral to its value."""
    if word in _WORD_VALUES:
        return _WORD_VALUES[word]
    return int(word)


def part_a_line(line: str) -> int:
    """Combine the first and last numeric digit of *line* into a two-digit number."""
    digits = _DIGIT.findall(line)
    if not digits:
        raise ValueError(f"no digit in line: {line!r}")
    return int(digits[0]) * 10 + int(digits[-1])


def part_b_line(line: str) -> int:
    """Like part A, but spelled-out digits count as digits too."""
    first = _EXTENDED_DIGIT.search(line)
    last = _REVERSED_EXTENDED_DIGIT.search(line[::-1])
    if first is None or last is None:
        raise ValueError(f"no digit in line: {line!r}")
    return word_to_digit(first.group()) * 10 + word_to_digit(last.group()[::-1])


def solve_part_a(lines: Iterable[str]) -> int:
    """Sum of the part A calibration values."""
    return sum_lines(part_a_line)(lines)


def solve_part_b(lines: Iterable[str]) -> int:
    """Sum of the part B calibration values."""
    return sum_lines(part_b_line)(lines)


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Solve day 1.")
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT)
    args = parser.parse_args(argv)
    run_challenge(solve_part_a, solve_part_b, path=args.input)