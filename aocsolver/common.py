"""Shared helpers: input reading, number parsing and the two-part runner."""

from __future__ import annotations

import re
import string
from collections.abc import Callable, Iterable

DEFAULT_INPUT = "input.txt"

_NUMBER_PATTERN = re.compile(r"[0-9]+")


def trim_spaces_and_split(text: str, separator: str) -> list[str]:
    """Strip surrounding whitespace from *text* and split it on *separator*."""
    return text.strip().split(separator)


def parse_ints(text: str, separator: str = " ") -> list[int]:
    """Parse the integers in *text* separated by *separator*, skipping empty fields.

    Raises ValueError when a field is not an integer.
    """
    return [
        int(field.strip())
        for field in trim_spaces_and_split(text, separator)
        if field != ""
    ]


def find_numbers(line: str) -> list[tuple[int, int, int]]:
    """Return ``(start, end, value)`` for every run of decimal digits in *line*."""
    return [
        (match.start(), match.end(), int(match.group()))
        for match in _NUMBER_PATTERN.finditer(line)
    ]


def read_lines(path) -> list[str]:
    """Read the file at *path* and return its lines without line terminators."""
    with open(path, encoding="utf-8", newline="\n") as handle:
        return [raw.removesuffix("\n").removesuffix("\r") for raw in handle]


def sum_lines(line_function: Callable[[str], int]) -> Callable[[Iterable[str]], int]:
    """Build a solver that adds up *line_function* applied to every line."""

    def solve(lines: Iterable[str]) -> int:
        return sum(line_function(line) for line in lines)

    return solve


def run_challenge(*args: Callable[[list[str]], int], path=DEFAULT_INPUT) -> list[int]:
    """Run each solver on the lines of *path*, printing ``Part X: result``.

    Returns the results in the order the solvers were given.
    """
    results = []
    for label, solver in zip(string.ascii_uppercase, args):
        result = solver(read_lines(path))
        print(f"Part {label}: {result}")
        results.append(result)
    return results