"""Largest exponential: the line whose base**exponent is greatest."""

import argparse
import sys
from math import log10
from typing import List, Optional, Sequence, Tuple

__all__ = ["parse_pairs", "largest_exponential_line", "main"]

DEFAULT_PATH = "../text/problem099.txt"


def parse_pairs(text: str) -> List[Tuple[int, int]]:
    """Parse lines of ``base,exponent`` into pairs, skipping blank lines."""
    pairs = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        fields = line.split(",")
        if len(fields) != 2 or not all(f.strip().isdigit() for f in fields):
            raise ValueError(f"malformed line: {line!r}")
        base, exponent = (int(f) for f in fields)
        pairs.append((base, exponent))
    return pairs


def largest_exponential_line(pairs: Sequence[Tuple[int, int]]) -> int:
    """Return the 1-based position of the greatest base**exponent; the first wins ties.

    Values are compared through exponent * log10(base), so bases must be positive.
    """
    if not pairs:
        raise ValueError("no pairs given")
    if any(base <= 0 for base, _ in pairs):
        raise ValueError("bases must be positive")
    weights = [exponent * log10(base) for base, exponent in pairs]
    return max(range(len(weights)), key=lambda i: (weights[i], -i)) + 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path", nargs="?", default=DEFAULT_PATH)
    args = parser.parse_args(argv)
    try:
        with open(args.path, encoding="ascii") as source:
            text = source.read()
    except OSError:
        print(f"Cannot open {args.path}", file=sys.stderr)
        return 1
    print(largest_exponential_line(parse_pairs(text)))
    return 0