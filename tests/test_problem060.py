import pytest

from eulerkit.primes import is_prime
from eulerkit.problem060 import concat, main, prime_pair_set_sum


def test_concat_examples():
    assert concat(12, 345) == 12345
    assert concat(1000, 0) == 10000


def test_concat_string_equivalence():
    for a, b in [(3, 7), (673, 109), (13, 5197), (5701, 6733)]:
        assert concat(a, b) == int(f"{a}{b}")


def test_concat_rejects_negative():
    with pytest.raises(ValueError):
        concat(-1, 3)


def test_known_five_set_pairs_are_prime():
    members = [13, 5197, 5701, 6733, 8389]
    for a in members:
        for b in members:
            if a != b:
                assert is_prime(concat(a, b))


def test_smallest_pair():
    assert prime_pair_set_sum(2, 100) == 10


def test_smallest_four_set():
    assert prime_pair_set_sum(4, 1000) == 792


def test_full_answer():
    assert prime_pair_set_sum() == 26033


def test_no_set_found():
    assert prime_pair_set_sum(3, 8) is None


def test_size_must_be_at_least_two():
    with pytest.raises(ValueError):
        prime_pair_set_sum(1, 100)


def test_main_reports_missing_answer(capsys):
    assert main(["--size", "3", "--limit", "8"]) == 0
    assert capsys.readouterr().out.strip() == "Answer not found"