"""Day 6: boat races won by holding the button the right time."""

from __future__ import annotations

import argparse
import math
from collections.abc import Iterable

from aocsolver.common import DEFAULT_INPUT, parse_ints, run_challenge, trim_spaces_and_split


def button_hold_range(distance: int, total_time: int) -> tuple[int, int]:
    """Shortest and longest hold that beats *distance* within *total_time*.

    Solves ``x**2 - x*total_time + distance < 0``. Raises ValueError when
    the record cannot be reached at all.
    """
    root = math.sqrt(float(total_time) * float(total_time) - 4 * float(distance))
    shortest = math.floor(0.5 * (total_time - root) + 1)
    longest = math.ceil(0.5 * (total_time + root) - 1)
    return int(shortest), int(longest)


def _strip_labels(line: str) -> str:
    return line.replace("Time:", "").replace("Distance:", "")


def parse_races(lines: Iterable[str]) -> list[tuple[int, int]]:
    """Pair each race time with its record distance."""
    times: list[int] = []
    distances: list[int] = []
    for line in lines:
        values = parse_ints(_strip_labels(line), " ")
        if not times:
            times = values
        else:
            distances = values
    if len(times) != len(distances):
        raise ValueError("times and distances differ in number")
    return list(zip(times, distances))


def parse_single_race(lines: Iterable[str]) -> tuple[int, int]:
    """Read the time and distance with the spaces between their digits removed."""
    time = distance = None
    for line in lines:
        number = int("".join(field.strip() for field in trim_spaces_and_split(_strip_labels(line), " ")))
        if time is None:
            time = number
        else:
            distance = number
    if time is None or distance is None:
        raise ValueError("a time and a distance are needed")
    return time, distance


def solve_part_a(lines: Iterable[str]) -> int:
    """Product over the races of the number of winning hold times."""
    result = 1
    for time, distance in parse_races(lines):
        shortest, longest = button_hold_range(distance, time)
        result *= longest - shortest + 1
    return result


def solve_part_b(lines: Iterable[str]) -> int:
    """Number of winning hold times for the one long race."""
    time, distance = parse_single_race(lines)
    shortest, longest = button_hold_range(distance, time)
    return longest - shortest + 1


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Solve day 6.")
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT)
    args = parser.parse_args(argv)
    run_challenge(solve_part_a, solve_part_b, path=args.input)