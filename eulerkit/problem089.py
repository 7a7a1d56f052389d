"""Roman numerals: characters saved by writing numerals in minimal form."""

import argparse
import sys
from typing import Iterable, Optional, Sequence

__all__ = ["roman_to_int", "int_to_roman", "characters_saved", "main"]

DEFAULT_PATH = "../text/problem089.txt"

_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}

# (one, five, ten) symbols for units, tens and hundreds.
_PLACES = (("C", "D", "M"), ("X", "L", "C"), ("I", "V", "X"))


def roman_to_int(text: str) -> int:
    """Return the value of a Roman numeral, which need not be in minimal form."""
    try:
        values = [_VALUES[c] for c in text]
    except KeyError as exc:
        raise ValueError(f"not a Roman numeral character: {exc.args[0]!r}") from None
    total = 0
    current, run = 1000, 0
    symbols = iter(values)
    for value in symbols:
        if value == current:
            run += 1
        elif value < current:
            total += current * run
            current, run = value, 1
        else:
            # A larger symbol subtracts the run of smaller ones before it.
            total += value - current * run
            following = next(symbols, None)
            if following is None:
                return total
            current, run = following, 1
    return total + current * run


def _place(count: int, one: str, five: str, ten: str) -> str:
    if count == 9:
        return one + ten
    if count >= 5:
        return five + one * (count - 5)
    if count == 4:
        return one + five
    return one * count


def int_to_roman(n: int) -> str:
    """Return the minimal Roman numeral for ``n``; thousands are written as repeated M."""
    if n < 0:
        raise ValueError("n must not be negative")
    thousands, rest = divmod(n, 1000)
    parts = ["M" * thousands]
    for divisor, symbols in zip((100, 10, 1), _PLACES):
        count, rest = divmod(rest, divisor)
        parts.append(_place(count, *symbols))
    return "".join(parts)


def characters_saved(lines: Iterable[str]) -> int:
    """Return how many characters minimal forms save over the numerals, one per line."""
    numerals = (line.strip() for line in lines)
    return sum(
        len(numeral) - len(int_to_roman(roman_to_int(numeral)))
        for numeral in numerals
        if numeral
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path", nargs="?", default=DEFAULT_PATH)
    args = parser.parse_args(argv)
    try:
        with open(args.path, encoding="ascii") as source:
            print(characters_saved(source))
    except OSError:
        print(f"Cannot open {args.path}", file=sys.stderr)
        return 1
    return 0