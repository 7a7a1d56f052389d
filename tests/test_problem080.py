import pytest

from eulerkit.problem080 import digital_sum_total, main, sqrt_digits


def test_sqrt_two_digits():
    assert sqrt_digits(2, 10) == (1, [4, 1, 4, 2, 1, 3, 5, 6, 2, 3])


@pytest.mark.parametrize("n", [2, 3, 5, 10, 99, 12345])
@pytest.mark.parametrize("digits", [0, 1, 7, 30])
def test_digits_bracket_the_root(n, digits):
    integer_part, decimals = sqrt_digits(n, digits)
    assert len(decimals) == digits
    assert all(0 <= d <= 9 for d in decimals)
    value = integer_part * 10**digits + int("".join(map(str, decimals)) or "0")
    assert value**2 <= n * 10 ** (2 * digits) < (value + 1) ** 2


@pytest.mark.parametrize("root", [1, 4, 9, 31])
def test_perfect_square_has_zero_decimals(root):
    assert sqrt_digits(root * root, 12) == (root, [0] * 12)


def test_squares_do_not_contribute():
    assert digital_sum_total(4, 20) == digital_sum_total(3, 20)
    assert digital_sum_total(1, 20) == 0


def test_known_total():
    assert digital_sum_total(100, 99) == 40886


def test_invalid_arguments():
    with pytest.raises(ValueError):
        sqrt_digits(-1, 5)
    with pytest.raises(ValueError):
        sqrt_digits(2, -1)


def test_main_prints_total(capsys):
    assert main(["--limit", "3", "--digits", "5"]) == 0
    assert capsys.readouterr().out.strip() == str(digital_sum_total(3, 5))