"""Maximum path sum: the largest top-to-bottom total through a number triangle."""

import argparse
import sys
from typing import List, Optional, Sequence

__all__ = ["parse_triangle", "max_path_sum", "main"]

DEFAULT_PATH = "../text/problem067.txt"


def parse_triangle(text: str) -> List[List[int]]:
    """Split whitespace-separated numbers into rows of 1, 2, 3, ... entries."""
    numbers = [int(token) for token in text.split()]
    rows: List[List[int]] = []
    position = 0
    while position < len(numbers):
        rows.append(numbers[position : position + len(rows) + 1])
        position += len(rows)
    if rows and len(rows[-1]) != len(rows):
        raise ValueError("the numbers do not form a complete triangle")
    return rows


def max_path_sum(rows: Sequence[Sequence[int]]) -> int:
    """Return the largest sum along a path moving to adjacent numbers below."""
    if not rows:
        raise ValueError("the triangle is empty")
    best: List[int] = []
    for depth, row in enumerate(rows):
        if len(row) != depth + 1:
            raise ValueError(f"row {depth} must hold {depth + 1} numbers")
        if not best:
            best = list(row)
            continue
        middle = [
            value + max(left, right)
            for value, left, right in zip(row[1:-1], best, best[1:])
        ]
        best = [row[0] + best[0], *middle, row[-1] + best[-1]]
    return max(best)


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
    print(max_path_sum(parse_triangle(text)))
    return 0