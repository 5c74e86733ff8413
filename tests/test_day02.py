import pytest

from aocsolver.day02 import (
    BallExtraction,
    Game,
    main,
    parse_game,
    part_a_line,
    part_b_line,
    solve_part_a,
    solve_part_b,
)

EXAMPLE = [
    "Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green",
    "Game 2: 1 blue, 2 green; 3 green, 4 blue, 1 red; 1 green, 1 blue",
    "Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red, 13 green; 5 green, 1 red",
    "Game 4: 1 green, 3 red, 6 blue; 3 green, 6 red; 3 green, 15 blue, 14 red",
    "Game 5: 6 red, 1 blue, 3 green; 2 blue, 1 red, 2 green",
]


def test_parse_game_collects_all_draws_in_order():
    game = parse_game("Game 7: 3 blue, 4 red; 1 red")
    assert game == Game(
        number=7,
        balls=(
            BallExtraction("blue", 3),
            BallExtraction("red", 4),
            BallExtraction("red", 1),
        ),
    )


def test_parse_game_rejects_other_records():
    with pytest.raises(ValueError):
        parse_game("Round 1: 3 blue")


def test_parse_game_rejects_draw_without_count():
    with pytest.raises(ValueError):
        parse_game("Game 1: blue")


def test_parse_game_rejects_non_numeric_count():
    with pytest.raises(ValueError):
        parse_game("Game 1: many blue")


def test_part_a_possible_game_gives_its_number():
    assert part_a_line("Game 42: 12 red, 13 green; 14 blue") == 42


def test_part_a_too_many_cubes_gives_zero():
    assert part_a_line("Game 42: 13 red") == 0


def test_part_a_unknown_colour_gives_zero():
    assert part_a_line("Game 9: 1 purple") == 0


def test_part_b_missing_colour_gives_zero():
    assert part_b_line("Game 1: 3 red; 5 green") == 0


def test_part_b_uses_largest_draw_per_colour():
    line = "Game 1: 2 red, 3 green, 4 blue; 1 red, 1 green, 1 blue"
    assert part_b_line(line) == part_b_line("Game 1: 2 red, 3 green, 4 blue")


def test_solve_part_a_example():
    assert solve_part_a(EXAMPLE) == 8


def test_solve_part_b_example():
    assert solve_part_b(EXAMPLE) == 2286


def test_main_prints_both_parts(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(EXAMPLE) + "\n", encoding="utf-8")
    main([str(path)])
    assert capsys.readouterr().out == "Part A: 8\nPart B: 2286\n"