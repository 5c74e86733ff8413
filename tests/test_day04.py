import pytest

from aocsolver.day04 import (
    Scratchcard,
    parse_scratchcard,
    part_a_line,
    solve_part_a,
    solve_part_b,
)

EXAMPLE = [
    "Card 1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53",
    "Card 2: 13 32 20 16 61 | 61 30 68 82 17 32 24 19",
    "Card 3:  1 21 53 59 44 | 69 82 63 72 16 21 14  1",
    "Card 4: 41 92 73 84 69 | 59 84 76 51 58  5 54 83",
    "Card 5: 87 83 26 28 32 | 88 30 70 12 93 22 82 36",
    "Card 6: 31 18 13 56 72 | 74 77 10 23 35 67 36 11",
]


def test_parse_scratchcard_fields():
    card = parse_scratchcard("Card 1: 41 48 83 | 83  6 31")
    assert card == Scratchcard(number=1, numbers=(41, 48, 83), winning_numbers=(83, 6, 31))


def test_parse_scratchcard_padded_number():
    card = parse_scratchcard("Card   17: 4 | 5")
    assert card.number == 17
    assert card.numbers == (4,)
    assert card.winning_numbers == (5,)


def test_winning_count_counts_every_listed_match():
    card = parse_scratchcard("Card 2: 5 5 5 | 5")
    assert card.winning_count() == len(card.numbers)


def test_winning_count_all_numbers_win():
    card = parse_scratchcard("Card 3: 1 2 3 4 | 4 3 2 1")
    assert card.winning_count() == len(card.numbers)


def test_part_a_line_without_matches_is_zero():
    assert part_a_line("Card 1: 1 2 3 | 4 5 6") == 0


def test_part_a_line_doubles_per_extra_match():
    one_more = [
        ("Card 1: 1 2 9 | 1 2", "Card 1: 1 2 3 | 1 2 3"),
        ("Card 1: 1 8 9 | 1", "Card 1: 1 2 9 | 1 2"),
        ("Card 1: 1 2 3 4 | 1 2 3", "Card 1: 1 2 3 4 | 1 2 3 4"),
    ]
    for fewer, more in one_more:
        assert part_a_line(more) == 2 * part_a_line(fewer)


def test_solve_part_a_example():
    assert solve_part_a(EXAMPLE) == 13


def test_solve_part_a_is_sum_of_lines():
    assert solve_part_a(EXAMPLE) == sum(part_a_line(line) for line in EXAMPLE)


def test_solve_part_b_example():
    assert solve_part_b(EXAMPLE) == 30


def test_solve_part_b_without_wins_counts_each_card_once():
    lines = ["Card 1: 1 2 | 3 4", "Card 2: 5 | 6", "Card 3: 7 | 8"]
    assert solve_part_b(lines) == len(lines)


def test_solve_part_b_at_least_one_per_card():
    assert solve_part_b(EXAMPLE) >= len(EXAMPLE)


def test_solve_part_b_wins_past_the_last_card_are_ignored():
    lines = ["Card 1: 1 2 3 | 1 2 3"]
    assert solve_part_b(lines) == len(lines)


def test_solve_part_b_empty():
    assert solve_part_b([]) == solve_part_a([])


def test_parse_rejects_non_card():
    with pytest.raises(ValueError):
        parse_scratchcard("Game 1: 1 2 | 3")


def test_parse_rejects_missing_separator():
    with pytest.raises(ValueError):
        parse_scratchcard("Card 1: 1 2 3")


def test_parse_rejects_bad_number():
    with pytest.raises(ValueError):
        parse_scratchcard("Card 1: 1 x | 3")