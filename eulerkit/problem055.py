"""Lychrel numbers: numbers that never reach a palindrome by reverse-and-add."""

import argparse
from typing import Optional, Sequence

__all__ = ["is_lychrel", "count_lychrel", "main"]


def _is_palindrome(n: int) -> bool:
    text = str(n)
    return text == text[::-1]


def is_lychrel(n: int, iterations: int = 50) -> bool:
    """Return True if fewer than ``iterations`` reverse-and-add steps never give a palindrome."""
    if n < 0:
        raise ValueError("n must not be negative")
    if iterations < 1:
        raise ValueError("iterations must be at least 1")
    value = n
    for _ in range(iterations - 1):
        value += int(str(value)[::-1])
        if _is_palindrome(value):
            return False
    return True


def count_lychrel(limit: int = 10_000, iterations: int = 50) -> int:
    """Count the Lychrel numbers below ``limit``."""
    return sum(is_lychrel(n, iterations) for n in range(1, limit))


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--limit", type=int, default=10_000)
    parser.add_argument("--iterations", type=int, default=50)
    args = parser.parse_args(argv)
    print(count_lychrel(args.limit, args.iterations))
    return 0