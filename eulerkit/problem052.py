"""Permuted multiples: the smallest x whose multiples share its digits."""

import argparse
from itertools import count
from typing import Optional, Sequence

__all__ = ["same_digits", "smallest_permuted_multiple", "main"]


def same_digits(a: int, b: int) -> bool:
    """Return True if ``a`` and ``b`` are made of the same decimal digits."""
    return sorted(str(a)) == sorted(str(b))


def smallest_permuted_multiple(n: int = 6) -> int:
    """Return the smallest x such that 2x, ..., nx all contain x's digits."""
    if n < 1:
        raise ValueError("n must be at least 1")
    for num_digits in count(1):
        # Every multiple must keep the digit count, so n * x < 10 ** num_digits.
        low = 10 ** (num_digits - 1)
        high = low * 10 // n
        for x in range(low, high + 1):
            if all(same_digits(x, k * x) for k in range(2, n + 1)):
                return x
    raise AssertionError("unreachable")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--multiples", type=int, default=6)
    args = parser.parse_args(argv)
    print(smallest_permuted_multiple(args.multiples))
    return 0