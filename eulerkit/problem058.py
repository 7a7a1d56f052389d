"""Spiral primes: side length at which diagonal primes fall below a ratio."""

import argparse
from typing import Optional, Sequence

from eulerkit.primes import is_prime

__all__ = ["spiral_side_length", "main"]


def spiral_side_length(percent: float = 10) -> int:
    """Return the first side length whose diagonal prime share is below ``percent``."""
    if percent <= 0:
        raise ValueError("percent must be positive")
    n = 2
    primes = 0
    diagonals = 5
    while True:
        # The bottom-right corner (2n - 1)^2 is never prime.
        corners = (
            4 * n * n - 10 * n + 7,
            4 * n * n - 8 * n + 5,
            4 * n * n - 6 * n + 3,
        )
        primes += sum(is_prime(c) for c in corners)
        if 100 * primes < percent * diagonals:
            return 2 * n - 1
        n += 1
        diagonals += 4


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--percent", type=float, default=10)
    args = parser.parse_args(argv)
    print(spiral_side_length(args.percent))
    return 0