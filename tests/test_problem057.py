from math import gcd

import pytest

from eulerkit.problem057 import count_heavy_numerators, main, sqrt2_convergents


def test_first_expansion():
    assert next(sqrt2_convergents(1)) == (3, 2)


def test_yields_requested_count():
    assert len(list(sqrt2_convergents(25))) == 25
    assert list(sqrt2_convergents(0)) == []


def test_pell_identity_alternates():
    for index, (num, den) in enumerate(sqrt2_convergents(60)):
        assert num * num - 2 * den * den == (1 if index % 2 == 0 else -1)


def test_fractions_in_lowest_terms_and_growing():
    pairs = list(sqrt2_convergents(40))
    assert all(gcd(num, den) == 1 for num, den in pairs)
    dens = [den for _, den in pairs]
    assert dens == sorted(dens)
    assert len(set(dens)) == len(dens)


def test_first_heavy_expansion_is_eighth():
    assert count_heavy_numerators(7) == 0
    assert count_heavy_numerators(8) == 1


def test_count_is_monotonic():
    counts = [count_heavy_numerators(n) for n in range(0, 60, 5)]
    assert counts == sorted(counts)


def test_default_answer():
    assert count_heavy_numerators() == 153


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        list(sqrt2_convergents(-1))


def test_main_prints_count(capsys):
    assert main(["--iterations", "1000"]) == 0
    assert capsys.readouterr().out.strip() == "153"