"""Large non-Mersenne prime: the last digits of coefficient * 2**exponent + 1."""

import argparse
from typing import Optional, Sequence

__all__ = ["last_digits", "main"]


def last_digits(
    coefficient: int = 28433, exponent: int = 7830457, digits: int = 10
) -> str:
    """Return the last ``digits`` digits of coefficient * 2**exponent + 1, zero-padded."""
    if digits < 1:
        raise ValueError("digits must be at least 1")
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    modulus = 10**digits
    value = (coefficient * pow(2, exponent, modulus) + 1) % modulus
    return str(value).zfill(digits)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--coefficient", type=int, default=28433)
    parser.add_argument("--exponent", type=int, default=7830457)
    parser.add_argument("--digits", type=int, default=10)
    args = parser.parse_args(argv)
    print(last_digits(args.coefficient, args.exponent, args.digits))
    return 0