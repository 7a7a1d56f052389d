"""Digit factorial chains: starting numbers whose chains have a given length."""

import argparse
from math import factorial
from typing import Dict, List, Optional, Sequence

__all__ = ["digit_factorial_sum", "count_chains", "main"]

_FACTORIALS = [factorial(d) for d in range(10)]


def digit_factorial_sum(n: int) -> int:
    """Return the sum of the factorials of the decimal digits of ``n``."""
    if n < 0:
        raise ValueError("n must not be negative")
    return sum(_FACTORIALS[int(c)] for c in str(n))


def _chain_length(n: int, cache: Dict[int, int]) -> int:
    """Number of distinct terms in the chain from ``n``, filling ``cache`` on the way."""
    path: List[int] = []
    position: Dict[int, int] = {}
    term = n
    while term not in cache and term not in position:
        position[term] = len(path)
        path.append(term)
        term = digit_factorial_sum(term)
    if term in cache:
        start, base = len(path), cache[term]
    else:
        start = position[term]
        base = len(path) - start
        for member in path[start:]:
            cache[member] = base
    for offset, member in enumerate(reversed(path[:start]), 1):
        cache[member] = base + offset
    return cache[n]


def count_chains(limit: int = 1_000_000, length: int = 60) -> int:
    """Count the starting numbers below ``limit`` whose chains have ``length`` distinct terms."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    cache: Dict[int, int] = {}
    return sum(_chain_length(n, cache) == length for n in range(1, limit))


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--limit", type=int, default=1_000_000)
    parser.add_argument("--length", type=int, default=60)
    args = parser.parse_args(argv)
    print(count_chains(args.limit, args.length))
    return 0