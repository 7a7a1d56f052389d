"""Cube digit pairs: pairs of dice that can show every two-digit square below 100."""

import argparse
from itertools import combinations, combinations_with_replacement
from typing import AbstractSet, Optional, Sequence

__all__ = ["is_formable", "count_arrangements", "main"]

_SQUARES = tuple(i * i for i in range(1, 10))
_SIX_NINE = frozenset({6, 9})


def _faces(die: AbstractSet[int]) -> frozenset:
    # A six turned upside down shows a nine, and the other way round.
    return frozenset(die) | _SIX_NINE if die & _SIX_NINE else frozenset(die)


def is_formable(dice1: AbstractSet[int], dice2: AbstractSet[int], number: int) -> bool:
    """Return True if the two dice, side by side in either order, show ``number``."""
    if not 0 <= number <= 99:
        raise ValueError("number must have at most two digits")
    first, second = divmod(number, 10)
    faces1, faces2 = _faces(dice1), _faces(dice2)
    return (first in faces1 and second in faces2) or (
        second in faces1 and first in faces2
    )


def count_arrangements() -> int:
    """Count unordered pairs of six-faced dice that can show all squares 01 to 81."""
    dice = [frozenset(faces) for faces in combinations(range(10), 6)]
    return sum(
        all(is_formable(a, b, square) for square in _SQUARES)
        for a, b in combinations_with_replacement(dice, 2)
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.parse_args(argv)
    print(count_arrangements())
    return 0