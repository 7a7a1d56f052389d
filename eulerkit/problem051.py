"""Prime digit replacements: the smallest prime in a large family of primes."""

import argparse
from itertools import combinations, count
from typing import Optional, Sequence

from eulerkit.primes import is_prime

__all__ = ["smallest_prime_family_member", "main"]

_LAST_DIGITS = (1, 3, 7, 9)


def _family_minimum(head: list, last: int, max_misses: int) -> Optional[int]:
    """Smallest prime of the family, or None if too many members are composite."""
    # A replaced leading digit may not be zero, which counts as a miss.
    misses = 1 if head[0] is None else 0
    smallest = None
    for digit in range(misses, 10):
        text = "".join(str(digit) if c is None else c for c in head) + str(last)
        value = int(text)
        if is_prime(value):
            if smallest is None:
                smallest = value
        else:
            misses += 1
            if misses > max_misses:
                return None
    return smallest


def _search(num_digits: int, num_stars: int, max_misses: int) -> Optional[int]:
    num_fixed = num_digits - 1 - num_stars
    best = None
    for stars in combinations(range(num_digits - 1), num_stars):
        star_set = set(stars)
        for last in _LAST_DIGITS:
            for fixed in range(10**num_fixed):
                # With a multiple of three replaced digits, every member shares
                # the residue of the fixed digits modulo three.
                if (fixed + last) % 3 == 0:
                    continue
                fixed_digits = iter(str(fixed).zfill(num_fixed))
                head = [
                    None if i in star_set else next(fixed_digits)
                    for i in range(num_digits - 1)
                ]
                if head[0] == "0":
                    continue
                candidate = _family_minimum(head, last, max_misses)
                if candidate is not None and (best is None or candidate < best):
                    best = candidate
    return best


def smallest_prime_family_member(hit_threshold: int = 8) -> int:
    """Return the smallest prime whose replacement family has ``hit_threshold`` primes.

    The search only considers a multiple of three replaced digits, which is
    sound for thresholds of 8 to 10.
    """
    if not 8 <= hit_threshold <= 10:
        raise ValueError("hit_threshold must be between 8 and 10")
    max_misses = 10 - hit_threshold
    for num_digits in count(4):
        best = None
        for num_stars in range(3, num_digits, 3):
            candidate = _search(num_digits, num_stars, max_misses)
            if candidate is not None and (best is None or candidate < best):
                best = candidate
        if best is not None:
            return best
    raise AssertionError("unreachable")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--threshold", type=int, default=8)
    args = parser.parse_args(argv)
    print(smallest_prime_family_member(args.threshold))
    return 0