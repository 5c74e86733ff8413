"""Day 2: games of cubes drawn from a bag."""

from __future__ import annotations

import argparse
import math
import re
from collections.abc import Iterable
from dataclasses import dataclass

from aocsolver.common import DEFAULT_INPUT, run_challenge, sum_lines, trim_spaces_and_split

_GAME_PATTERN = re.compile(r"Game ([0-9]+):.*")
_BAG = {"red": 12, "green": 13, "blue": 14}
_COLORS = ("red", "green", "blue")


@dataclass(frozen=True)
class BallExtraction:
    """A number of cubes of one colour shown in a single draw."""

    color: str
    number: int


@dataclass(frozen=True)
class Game:
    """A game number and every draw made during the game."""

    number: int
    balls: tuple[BallExtraction, ...]


def parse_game(line: str) -> Game:
    """Parse a ``Game N: ...`` record. Raises ValueError on a malformed line."""
    match = _GAME_PATTERN.search(line)
    if match is None:
        raise ValueError(f"not a game record: {line!r}")
    record = line.split(":")[1]

    balls = []
    for extraction in trim_spaces_and_split(record, ";"):
        for drawn in trim_spaces_and_split(extraction, ","):
            fields = trim_spaces_and_split(drawn, " ")
            if len(fields) < 2:
                raise ValueError(f"malformed draw {drawn!r} in {line!r}")
            balls.append(BallExtraction(color=fields[1], number=int(fields[0])))
    return Game(number=int(match.group(1)), balls=tuple(balls))


def part_a_line(line: str) -> int:
    """The game number if every draw fits in the bag, otherwise 0."""
    game = parse_game(line)
    if any(_BAG.get(ball.color, 0) < ball.number for ball in game.balls):
        return 0
    return game.number


def part_b_line(line: str) -> int:
    """Product of the fewest red, green and blue cubes the game needs."""
    game = parse_game(line)
    fewest = dict.fromkeys(_COLORS, 0)
    for ball in game.balls:
        if fewest.get(ball.color, 0) < ball.number:
            fewest[ball.color] = ball.number
    return math.prod(fewest[color] for color in _COLORS)


def solve_part_a(lines: Iterable[str]) -> int:
    """Sum of the numbers of the possible games."""
    return sum_lines(part_a_line)(lines)


def solve_part_b(lines: Iterable[str]) -> int:
    """Sum of the powers of the minimal cube sets."""
    return sum_lines(part_b_line)(lines)


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Solve day 2.")
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT)
    args = parser.parse_args(argv)
    run_challenge(solve_part_a, solve_part_b, path=args.input)