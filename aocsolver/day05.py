"""Day 5: following seeds through the almanac's conversion maps."""

from __future__ import annotations

import argparse
import itertools
from collections.abc import Iterable

from aocsolver.common import DEFAULT_INPUT, parse_ints, run_challenge

STEPS = (
    "seed-to-soil",
    "soil-to-fertilizer",
    "fertilizer-to-water",
    "water-to-light",
    "light-to-temperature",
    "temperature-to-humidity",
    "humidity-to-location",
)

Conversion = tuple[int, int, int]
Steps = dict[str, list[Conversion]]


def _parse_seeds(line: str) -> list[int]:
    parts = line.split(":")
    if len(parts) < 2:
        raise ValueError(f"not a seeds line: {line!r}")
    return parse_ints(parts[1], " ")


def parse_almanac(lines: Iterable[str]) -> tuple[list[int], Steps]:
    """Return the seeds and, per step name, its ``(destination, source, length)`` ranges."""
    steps: Steps = {name: [] for name in STEPS}
    seeds: list[int] = []
    current: str | None = None
    for line in lines:
        if line == "":
            continue
        header = line.replace(" map:", "")
        if header in steps:
            current = header
            continue
        if not seeds:
            seeds = _parse_seeds(header)
            continue
        values = parse_ints(header, " ")
        if len(values) < 3:
            raise ValueError(f"conversion needs three numbers: {line!r}")
        if current is not None:
            steps[current].append((values[0], values[1], values[2]))
    return seeds, steps


def location_from_seed(seed: int, steps: Steps) -> int:
    """Follow *seed* through every step in order."""
    value = seed
    for name in STEPS:
        for destination, source, length in steps.get(name, ()):
            delta = value - source
            if 0 <= delta < length:
                value = destination + delta
                break
    return value


def seed_from_location(location: int, steps: Steps) -> int:
    """Follow *location* back through every step in reverse order."""
    value = location
    for name in reversed(STEPS):
        for destination, source, length in steps.get(name, ()):
            delta = value - destination
            if 0 <= delta < length:
                value = source + delta
                break
    return value


def solve_part_a(lines: Iterable[str]) -> int:
    """Lowest location of the listed seeds, or -1 when there are none."""
    seeds, steps = parse_almanac(lines)
    return min((location_from_seed(seed, steps) for seed in seeds), default=-1)


def solve_part_b(lines: Iterable[str]) -> int:
    """Lowest location whose seed falls in one of the ``start length`` seed ranges."""
    seeds, steps = parse_almanac(lines)
    if len(seeds) % 2:
        raise ValueError("seed ranges need a start and a length")
    ranges = [range(start, start + length) for start, length in zip(seeds[::2], seeds[1::2])]
    if not any(ranges):
        raise ValueError("no seeds in any range")
    for location in itertools.count():
        seed = seed_from_location(location, steps)
        if any(seed in seed_range for seed_range in ranges):
            return location
    raise AssertionError("unreachable")


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Solve day 5.")
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT)
    args = parser.parse_args(argv)
    run_challenge(solve_part_a, solve_part_b, path=args.input)