"""Counting fractions in a range: reduced fractions strictly between 1/3 and 1/2."""

import argparse
from functools import lru_cache
from typing import Optional, Sequence

__all__ = ["count_fractions_between", "main"]


def _unreduced(n: int) -> int:
    # For each q, the numerators p with q/3 < p < q/2.
    return sum(max(0, (q - 1) // 2 - q // 3) for q in range(1, n + 1))


@lru_cache(maxsize=None)
def _reduced(n: int) -> int:
    # Every fraction a/b in lowest terms is counted once for each multiple
    # ka/kb with kb <= n, so the reduced count follows by inclusion.
    return _unreduced(n) - sum(_reduced(n // k) for k in range(2, n + 1))


def count_fractions_between(max_denominator: int = 12_000) -> int:
    """Count reduced p/q with 1/3 < p/q < 1/2 and q <= ``max_denominator``."""
    if max_denominator < 0:
        raise ValueError("max_denominator must not be negative")
    return _reduced(max_denominator)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--max-denominator", type=int, default=12_000)
    args = parser.parse_args(argv)
    print(count_fractions_between(args.max_denominator))
    return 0