"""Counting summations: ways to write n as a sum of at least two positive integers."""

import argparse
from typing import Optional, Sequence

__all__ = ["count_summations", "main"]


def count_summations(n: int = 100) -> int:
    """Return the number of ways to write ``n`` as a sum of two or more positive integers."""
    if n < 1:
        raise ValueError("n must be at least 1")
    ways = [1] + [0] * n
    # Parts below n exclude only the single-part sum n itself.
    for part in range(1, n):
        for total in range(part, n + 1):
            ways[total] += ways[total - part]
    return ways[n]


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--n", type=int, default=100)
    args = parser.parse_args(argv)
    print(count_summations(args.n))
    return 0