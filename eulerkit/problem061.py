"""Cyclical figurate numbers: a cycle of six four-digit polygonal numbers."""

import argparse
from collections import defaultdict
from itertools import count
from typing import Dict, List, Optional, Sequence

__all__ = ["polygonal", "four_digit_polygonals", "cyclic_set_sum", "main"]

_SIDES = (3, 4, 5, 6, 7, 8)
_BEGIN = 1000
_END = 10000


def polygonal(sides: int, n: int) -> int:
    """Return the ``n``-th polygonal number with ``sides`` sides (3 to 8)."""
    if sides not in _SIDES:
        raise ValueError("sides must be between 3 and 8")
    return n * ((sides - 2) * n - (sides - 4)) // 2


def four_digit_polygonals(sides: int) -> List[int]:
    """Return the four-digit polygonal numbers whose last two digits can lead a number."""
    numbers = []
    for n in count(1):
        value = polygonal(sides, n)
        if value >= _END:
            return numbers
        if value >= _BEGIN and value % 100 >= 10:
            numbers.append(value)
    raise AssertionError("unreachable")


def cyclic_set_sum() -> int:
    """Return the sum of the cycle with one number of each polygonal type."""
    by_prefix: Dict[int, Dict[int, List[int]]] = {}
    for sides in _SIDES:
        table: Dict[int, List[int]] = defaultdict(list)
        for value in four_digit_polygonals(sides):
            table[value // 100].append(value)
        by_prefix[sides] = table

    def search(chain: List[int], remaining: frozenset) -> Optional[List[int]]:
        tail = chain[-1] % 100
        if not remaining:
            return chain if tail == chain[0] // 100 else None
        for sides in sorted(remaining):
            for value in by_prefix[sides].get(tail, ()):
                if value in chain:
                    continue
                found = search(chain + [value], remaining - {sides})
                if found is not None:
                    return found
        return None

    others = frozenset(_SIDES[1:])
    for start in four_digit_polygonals(_SIDES[0]):
        cycle = search([start], others)
        if cycle is not None:
            return sum(cycle)
    raise LookupError("no cyclic set exists")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.parse_args(argv)
    print(cyclic_set_sum())
    return 0