"""Combinatoric selections: how many binomial coefficients exceed a threshold."""

import argparse
from typing import Optional, Sequence

__all__ = ["count_large_combinations", "main"]


def count_large_combinations(n: int = 100, threshold: int = 1_000_000) -> int:
    """Count C(m, r), 1 <= m <= n and 0 < r < m, that are greater than ``threshold``."""
    if n < 0:
        raise ValueError("n must not be negative")
    cap = threshold + 1  # values are clamped so rows stay small
    row = [1]
    total = 0
    for _ in range(n):
        interior = [min(a + b, cap) for a, b in zip(row, row[1:])]
        total += sum(value > threshold for value in interior)
        row = [1, *interior, 1]
    return total


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--n", type=int, default=100)
    parser.add_argument("--threshold", type=int, default=1_000_000)
    args = parser.parse_args(argv)
    print(count_large_combinations(args.n, args.threshold))
    return 0