"""Prime pair sets: primes whose pairwise concatenations are all prime."""

import argparse
from functools import lru_cache
from typing import Iterator, List, Optional, Sequence, Set

from eulerkit.primes import is_prime, prime_sieve

__all__ = ["concat", "prime_pair_set_sum", "main"]

_SIEVE_SIZE = 1_000_000


@lru_cache(maxsize=1)
def _sieve() -> bytearray:
    return prime_sieve(_SIEVE_SIZE)


def _is_prime(n: int) -> bool:
    if 0 <= n < _SIEVE_SIZE:
        return bool(_sieve()[n])
    return is_prime(n)


def concat(a: int, b: int) -> int:
    """Return the number written as ``a`` followed by ``b``: concat(12, 345) == 12345."""
    if a < 0 or b < 0:
        raise ValueError("operands must not be negative")
    scale = 10
    while scale <= b:
        scale *= 10
    return a * scale + b


def _candidate_primes(limit: int) -> List[int]:
    # 2 and 5 cannot end a longer prime, and mixing primes of residue 1 and 2
    # modulo 3 gives concatenations divisible by 3; only 3 and 6k + 1 remain.
    primes = [3] if limit > 3 else []
    primes.extend(p for p in range(7, limit, 6) if _is_prime(p))
    return primes


def _cliques(neighbours: List[Set[int]], size: int) -> Iterator[List[int]]:
    def extend(clique: List[int], candidates: Set[int]) -> Iterator[List[int]]:
        if len(clique) == size:
            yield clique
            return
        for j in sorted(candidates):
            yield from extend(clique + [j], candidates & neighbours[j])

    for i, following in enumerate(neighbours):
        yield from extend([i], following)


def prime_pair_set_sum(size: int = 5, limit: int = 10_000) -> Optional[int]:
    """Return the smallest sum of ``size`` primes below ``limit`` that pair into primes.

    Returns None if no such set exists among the candidate primes.
    """
    if size < 2:
        raise ValueError("size must be at least 2")
    primes = _candidate_primes(limit)
    neighbours = [
        {
            j
            for j in range(i + 1, len(primes))
            if _is_prime(concat(p, primes[j])) and _is_prime(concat(primes[j], p))
        }
        for i, p in enumerate(primes)
    ]
    sums = (sum(primes[i] for i in clique) for clique in _cliques(neighbours, size))
    return min(sums, default=None)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--size", type=int, default=5)
    parser.add_argument("--limit", type=int, default=10_000)
    args = parser.parse_args(argv)
    result = prime_pair_set_sum(args.size, args.limit)
    print("Answer not found" if result is None else result)
    return 0