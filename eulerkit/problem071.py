"""Ordered fractions: the fraction immediately left of a target in a Farey sequence."""

import argparse
from math import gcd
from typing import Optional, Sequence

__all__ = ["left_neighbour_numerator", "main"]


def left_neighbour_numerator(
    numerator: int = 3, denominator: int = 7, max_denominator: int = 1_000_000
) -> int:
    """Return the reduced numerator of the largest p/q below the target with q <= the maximum."""
    if not 0 < numerator < denominator:
        raise ValueError("the target must be a proper positive fraction")
    best_p, best_q = 0, 1
    for q in range(1, max_denominator + 1):
        # The largest p with p / q strictly below numerator / denominator.
        p = (numerator * q - 1) // denominator
        if p * best_q > best_p * q:
            best_p, best_q = p, q
    if best_p == 0:
        raise ValueError("no positive fraction lies below the target")
    return best_p // gcd(best_p, best_q)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--numerator", type=int, default=3)
    parser.add_argument("--denominator", type=int, default=7)
    parser.add_argument("--max-denominator", type=int, default=1_000_000)
    args = parser.parse_args(argv)
    print(
        left_neighbour_numerator(
            args.numerator, args.denominator, args.max_denominator
        )
    )
    return 0