import pytest

from eulerkit.problem099 import largest_exponential_line, main, parse_pairs


def test_parse_pairs():
    text = "519432,525806\n632382,518061\n\n"
    assert parse_pairs(text) == [(519432, 525806), (632382, 518061)]


def test_small_example():
    assert largest_exponential_line([(2, 11), (3, 7)]) == 2


def test_order_does_not_change_winner():
    pairs = [(2, 11), (3, 7), (5, 3)]
    winner = pairs[largest_exponential_line(pairs) - 1]
    reordered = list(reversed(pairs))
    assert reordered[largest_exponential_line(reordered) - 1] == winner


def test_first_wins_tie():
    assert largest_exponential_line([(4, 3), (4, 3)]) == 1


def test_empty_raises():
    with pytest.raises(ValueError):
        largest_exponential_line([])


def test_malformed_line():
    with pytest.raises(ValueError):
        parse_pairs("12,34,56\n")
    with pytest.raises(ValueError):
        parse_pairs("12;34\n")


def test_main_reads_file(tmp_path, capsys):
    path = tmp_path / "base_exp.txt"
    path.write_text("2,11\n3,7\n", encoding="ascii")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.strip() == str(
        largest_exponential_line([(2, 11), (3, 7)])
    )


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "Cannot open" in capsys.readouterr().err