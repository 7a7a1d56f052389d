from eulerkit.poker import parse_game
from eulerkit.poker_report import format_game, main, report

PAIR_GAME = "5H 5C 6S 7S KD 2C 3S 8S 8D TD"
DRAW_GAME = "2H 3D 5S 9C KD 2C 3H 5D 9S KH"


def test_format_game_layout():
    first, second = parse_game(PAIR_GAME)
    lines = format_game(1, first, second).split("\n")
    assert lines[0] == "Game 1"
    assert lines[1] == "Player1:  5(H)  5(C)  6(S)  7(S) 13(D)  -> One Pair"
    assert lines[2].startswith("Player2: ")
    assert lines[2].endswith(" -> One Pair")
    assert lines[3] == "Player2 wins"
    assert lines[4:] == ["", ""]


def test_format_game_draw():
    first, second = parse_game(DRAW_GAME)
    lines = format_game(2, first, second).split("\n")
    assert lines[0] == "Game 2"
    assert lines[1].endswith("-> High Card")
    assert lines[3] == "Draw"


def test_swapping_players_swaps_winner():
    first, second = parse_game(PAIR_GAME)
    lines = format_game(1, second, first).split("\n")
    assert lines[3] == "Player1 wins"


def test_report_summary_counts():
    swapped = " ".join(PAIR_GAME.split()[5:] + PAIR_GAME.split()[:5])
    text = report([PAIR_GAME, "", swapped, DRAW_GAME])
    assert text.count("Game ") == 3
    assert "Game 3" in text
    assert text.endswith(
        "Player1 won 1 times\nPlayer2 won 1 times\n1 draws\n"
    )


def test_report_empty():
    assert report([]) == "Player1 won 0 times\nPlayer2 won 0 times\n0 draws\n"


def test_main_reads_file(tmp_path, capsys):
    path = tmp_path / "games.txt"
    path.write_text(PAIR_GAME + "\n" + DRAW_GAME + "\n", encoding="ascii")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert out == report([PAIR_GAME, DRAW_GAME])


def test_main_missing_file(tmp_path, capsys):
    path = tmp_path / "absent.txt"
    assert main([str(path)]) == 1
    assert f"Cannot open {path}" in capsys.readouterr().err