import pytest

from eulerkit.problem055 import count_lychrel, is_lychrel, main


def test_count_below_ten_thousand():
    assert count_lychrel() == 249


def test_quick_palindrome_is_not_lychrel():
    assert is_lychrel(47) is False


def test_known_lychrel_candidate():
    assert is_lychrel(196) is True


def test_single_iteration_never_adds():
    assert is_lychrel(47, iterations=1) is True


def test_count_is_monotonic_in_limit():
    counts = [count_lychrel(limit) for limit in (100, 500, 1000, 2000)]
    assert counts == sorted(counts)


def test_count_is_monotonic_in_iterations():
    assert count_lychrel(1000, 10) >= count_lychrel(1000, 50)


def test_count_matches_predicate():
    lychrels = [n for n in range(1, 1000) if is_lychrel(n)]
    assert len(lychrels) == count_lychrel(1000)
    assert 196 in lychrels


def test_rejects_negative():
    with pytest.raises(ValueError):
        is_lychrel(-5)


def test_rejects_zero_iterations():
    with pytest.raises(ValueError):
        is_lychrel(10, iterations=0)


def test_main_prints_count(capsys):
    assert main(["--limit", "1000"]) == 0
    assert capsys.readouterr().out.strip() == str(count_lychrel(1000))