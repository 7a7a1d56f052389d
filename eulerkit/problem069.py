"""Totient maximum: the n up to a limit with the largest n / phi(n)."""

import argparse
from typing import List, Optional, Sequence

__all__ = ["totients", "max_totient_ratio", "main"]


def totients(limit: int) -> List[int]:
    """Return Euler's phi for 0 to ``limit`` inclusive, with phi(0) given as 0."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    phi = list(range(limit + 1))
    for p in range(2, limit + 1):
        if phi[p] == p:  # untouched so far, hence prime
            for multiple in range(p, limit + 1, p):
                phi[multiple] -= phi[multiple] // p
    return phi


def max_totient_ratio(limit: int = 1_000_000) -> int:
    """Return the smallest n in [2, ``limit``] maximising n / phi(n)."""
    if limit < 2:
        raise ValueError("limit must be at least 2")
    phi = totients(limit)
    best_n, best_phi = 2, 1
    for n, value in enumerate(phi[3:], start=3):
        if n * best_phi > best_n * value:
            best_n, best_phi = n, value
    return best_n


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--limit", type=int, default=1_000_000)
    args = parser.parse_args(argv)
    print(max_totient_ratio(args.limit))
    return 0