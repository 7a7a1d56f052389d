"""Square root convergents: expansions of sqrt(2) with a longer numerator."""

import argparse
from typing import Iterator, Optional, Sequence, Tuple

__all__ = ["sqrt2_convergents", "count_heavy_numerators", "main"]


def sqrt2_convergents(count: int) -> Iterator[Tuple[int, int]]:
    """Yield the first ``count`` expansions of sqrt(2) as (numerator, denominator).

    With p = q = 1 at the start, each step sets p, q = p + q, 2p + q, and the
    expansion is q / p in lowest terms.
    """
    if count < 0:
        raise ValueError("count must not be negative")
    p = q = 1
    for _ in range(count):
        p, q = p + q, 2 * p + q
        yield q, p


def count_heavy_numerators(iterations: int = 1000) -> int:
    """Count the first ``iterations`` expansions whose numerator has more digits."""
    return sum(
        len(str(numerator)) > len(str(denominator))
        for numerator, denominator in sqrt2_convergents(iterations)
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--iterations", type=int, default=1000)
    args = parser.parse_args(argv)
    print(count_heavy_numerators(args.iterations))
    return 0