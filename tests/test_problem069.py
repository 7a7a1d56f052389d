import pytest

from eulerkit.primes import is_prime
from eulerkit.problem069 import main, max_totient_ratio, totients


def _largest_primorial(limit):
    product = 1
    for p in (q for q in range(2, limit + 1) if is_prime(q)):
        if product * p > limit:
            break
        product *= p
    return product


def test_length():
    assert len(totients(50)) == 51


def test_primes():
    phi = totients(300)
    for p in range(2, 301):
        if is_prime(p):
            assert phi[p] == p - 1


def test_divisor_sum_identity():
    phi = totients(200)
    for n in range(1, 201):
        assert sum(phi[d] for d in range(1, n + 1) if n % d == 0) == n


def test_negative_limit():
    with pytest.raises(ValueError):
        totients(-1)


def test_example_limit():
    assert max_totient_ratio(10) == 6


@pytest.mark.parametrize("limit", [10, 100, 1000, 10000])
def test_primorial(limit):
    assert max_totient_ratio(limit) == _largest_primorial(limit)


def test_too_small():
    with pytest.raises(ValueError):
        max_totient_ratio(1)


def test_main(capsys):
    assert main(["--limit", "100"]) == 0
    assert capsys.readouterr().out.strip() == str(max_totient_ratio(100))