"""Day 4: scratchcards and the copies they win."""

from __future__ import annotations

import argparse
import re
from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass

from aocsolver.common import DEFAULT_INPUT, parse_ints, run_challenge, sum_lines, trim_spaces_and_split

_CARD_PATTERN = re.compile(r"Card *([0-9]+):.*")


@dataclass(frozen=True)
class Scratchcard:
    """A card number, the numbers on the card and the winning numbers."""

    number: int
    numbers: tuple[int, ...]
    winning_numbers: tuple[int, ...]

    def winning_count(self) -> int:
        """How many of the card's numbers are among the winning numbers."""
        winning = set(self.winning_numbers)
        return sum(1 for number in self.numbers if number in winning)


def parse_scratchcard(line: str) -> Scratchcard:
    """Parse a ``Card N: a b c | x y z`` record. Raises ValueError when malformed."""
    match = _CARD_PATTERN.search(line)
    if match is None:
        raise ValueError(f"not a scratchcard: {line!r}")
    halves = trim_spaces_and_split(line.split(":")[1], "|")
    if len(halves) < 2:
        raise ValueError(f"missing '|' in scratchcard: {line!r}")
    return Scratchcard(
        number=int(match.group(1)),
        numbers=tuple(parse_ints(halves[0], " ")),
        winning_numbers=tuple(parse_ints(halves[1], " ")),
    )


def part_a_line(line: str) -> int:
    """Points of a card: 1 for the first match, doubled for each further one."""
    count = parse_scratchcard(line).winning_count()
    return 2 ** (count - 1) if count > 0 else 0


def solve_part_a(lines: Iterable[str]) -> int:
    """Total points of all cards."""
    return sum_lines(part_a_line)(lines)


def solve_part_b(lines: Iterable[str]) -> int:
    """Total number of cards held once every won copy has been scored."""
    copies: defaultdict[int, int] = defaultdict(int)
    total = 0
    for index, line in enumerate(lines):
        copies[index] += 1
        count = parse_scratchcard(line).winning_count()
        for following in range(index + 1, index + count + 1):
            copies[following] += copies[index]
        total += copies[index]
    return total


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Solve day 4.")
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT)
    args = parser.parse_args(argv)
    run_challenge(solve_part_a, solve_part_b, path=args.input)