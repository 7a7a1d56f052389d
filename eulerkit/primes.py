"""Primality testing and the sieve of Eratosthenes."""

from math import isqrt

__all__ = ["is_prime", "prime_sieve"]

_WITNESSES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41)
# Miller-Rabin with the witnesses above gives an exact answer below this bound.
_DETERMINISTIC_BOUND = 3_317_044_064_679_887_385_961_981


def _passes_round(n: int, witness: int, odd_part: int, twos: int) -> bool:
    x = pow(witness, odd_part, n)
    if x in (1, n - 1):
        return True
    for _ in range(twos - 1):
        x = x * x % n
        if x == n - 1:
            return True
    return False


def is_prime(n: int) -> bool:
    """Return True if ``n`` is a prime number."""
    if n < 2:
        return False
    for p in _WITNESSES:
        if n % p == 0:
            return n == p
    if n < _DETERMINISTIC_BOUND:
        odd_part, twos = n - 1, 0
        while odd_part % 2 == 0:
            odd_part //= 2
            twos += 1
        return all(_passes_round(n, a, odd_part, twos) for a in _WITNESSES)
    return all(n % d for d in range(43, isqrt(n) + 1, 2))


def prime_sieve(limit: int) -> bytearray:
    """Return a table of length ``limit`` whose entry ``i`` is 1 when ``i`` is prime."""
    if limit <= 0:
        return bytearray()
    sieve = bytearray([1]) * limit
    sieve[0] = 0
    if limit > 1:
        sieve[1] = 0
    for i in range(2, isqrt(limit - 1) + 1):
        if sieve[i]:
            start = i * i
            sieve[start::i] = bytes(len(range(start, limit, i)))
    return sieve