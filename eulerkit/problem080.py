"""Square root digital expansion: digit sums of irrational square roots."""

import argparse
from math import isqrt
from typing import List, Optional, Sequence, Tuple

__all__ = ["sqrt_digits", "digital_sum_total", "main"]


def sqrt_digits(n: int, digits: int) -> Tuple[int, List[int]]:
    """Return the integer part of sqrt(``n``) and its first ``digits`` decimal digits.

    The decimal digits are truncated, not rounded; a perfect square gives zeros.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    if digits < 0:
        raise ValueError("digits must not be negative")
    scale = 10**digits
    root = isqrt(n * scale * scale)
    integer_part, fraction = divmod(root, scale)
    decimals = [int(c) for c in str(fraction).zfill(digits)] if digits else []
    return integer_part, decimals


def digital_sum_total(limit: int = 100, digits: int = 99) -> int:
    """Sum, over the non-square n from 1 to ``limit``, the integer part of sqrt(n)
    and its first ``digits`` decimal digits."""
    total = 0
    for n in range(1, limit + 1):
        if isqrt(n) ** 2 == n:
            continue
        integer_part, decimals = sqrt_digits(n, digits)
        total += integer_part + sum(decimals)
    return total


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--limit", type=int, default=100)
    parser.add_argument("--digits", type=int, default=99)
    args = parser.parse_args(argv)
    print(digital_sum_total(args.limit, args.digits))
    return 0