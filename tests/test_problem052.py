import pytest

from eulerkit.problem052 import main, same_digits, smallest_permuted_multiple


def test_same_digits():
    assert same_digits(12, 21) is True
    assert same_digits(12, 13) is False
    assert same_digits(10, 1) is False
    assert same_digits(1123, 3211) is True


def test_six_multiples():
    assert smallest_permuted_multiple(6) == 142857


def test_trivial_single_multiple():
    assert smallest_permuted_multiple(1) == 1


def test_two_multiples_invariant():
    x = smallest_permuted_multiple(2)
    assert same_digits(x, 2 * x)
    assert x <= smallest_permuted_multiple(6)


def test_result_property_for_default():
    x = smallest_permuted_multiple()
    assert all(same_digits(x, k * x) for k in range(2, 7))


@pytest.mark.parametrize("n", [0, -2])
def test_invalid_n(n):
    with pytest.raises(ValueError):
        smallest_permuted_multiple(n)


def test_main(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "142857\n"