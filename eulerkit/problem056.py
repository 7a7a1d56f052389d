"""Powerful digit sum: the largest digit sum of a**b for a, b below a limit."""

import argparse
from typing import Optional, Sequence

__all__ = ["max_power_digit_sum", "main"]


def _digit_sum(n: int) -> int:
    return sum(map(int, str(n)))


def max_power_digit_sum(limit: int = 100) -> int:
    """Return the largest digit sum of a**b with a, b < ``limit``."""
    best = 1  # 1**b is 1 for every b
    for a in range(2, limit):
        power = 1
        for _ in range(1, limit):
            power *= a
            best = max(best, _digit_sum(power))
    return best


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--limit", type=int, default=100)
    args = parser.parse_args(argv)
    print(max_power_digit_sum(args.limit))
    return 0