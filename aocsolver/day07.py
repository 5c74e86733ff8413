"""Day 7: ranking Camel Cards hands and totalling their winnings."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from aocsolver.common import DEFAULT_INPUT, run_challenge

PART_A_ORDER = "23456789TJQKA"
# In part B the jack is a joker: the weakest card, yet wild when ranking hands.
PART_B_ORDER = "J23456789TQKA"

HAND_SIZE = 5


@dataclass(frozen=True)
class Hand:
    """The card powers of a hand, the rank of its type and its bet."""

    cards: tuple[int, ...]
    strength: int
    bet: int

    def sort_key(self) -> tuple[int, tuple[int, ...]]:
        """Key ordering hands from weakest to strongest."""
        return self.strength, self.cards


def hand_strength(counts: Iterable[int], jokers: int = 0) -> int:
    """Rank of a hand type from its per-card counts plus wild *jokers*.

    1 is high card, 2 one pair, 3 two pair, 4 three of a kind,
    5 full house, 6 four of a kind and 7 five of a kind.
    """
    ordered = sorted(counts, reverse=True) + [0, 0]
    top, second = ordered[0] + jokers, ordered[1]
    match top:
        case 1:
            return 1
        case 2:
            return 3 if second == 2 else 2
        case 3:
            return 5 if second == 2 else 4
        case 4:
            return 6
        case 5:
            return 7
        case _:
            return 0


def parse_hand(line: str, card_order: Sequence[str] = PART_A_ORDER, jokers: bool = False) -> Hand:
    """Parse ``CARDS BET`` using *card_order* from weakest to strongest.

    With *jokers*, the weakest card in *card_order* is wild when the hand
    type is ranked. Raises ValueError on a malformed line or unknown card.
    """
    fields = line.split(" ")
    if len(fields) < 2 or len(fields[0]) < HAND_SIZE:
        raise ValueError(f"not a hand: {line!r}")
    power = {card: index for index, card in enumerate(card_order)}
    try:
        cards = tuple(power[card] for card in fields[0][:HAND_SIZE])
    except KeyError as error:
        raise ValueError(f"unknown card {error.args[0]!r} in {line!r}") from None

    counts = [0] * len(card_order)
    for card in cards:
        counts[card] += 1
    if jokers:
        strength = hand_strength(counts[1:], counts[0])
    else:
        strength = hand_strength(counts)
    return Hand(cards=cards, strength=strength, bet=int(fields[1]))


def total_winnings(hands: Iterable[Hand]) -> int:
    """Sum of each hand's bet times its rank, the weakest hand ranking 1."""
    ranked = sorted(hands, key=Hand.sort_key)
    return sum(rank * hand.bet for rank, hand in enumerate(ranked, start=1))


def solve_part_a(lines: Iterable[str]) -> int:
    """Total winnings with jacks as ordinary cards."""
    return total_winnings(parse_hand(line, PART_A_ORDER) for line in lines)


def solve_part_b(lines: Iterable[str]) -> int:
    """Total winnings with jacks as jokers."""
    return total_winnings(parse_hand(line, PART_B_ORDER, jokers=True) for line in lines)


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Solve day 7.")
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT)
    args = parser.parse_args(argv)
    run_challenge(solve_part_a, solve_part_b, path=args.input)