"""Magic 5-gon ring: the largest 16-digit string of a magic ring."""

import argparse
from itertools import permutations
from typing import Optional, Sequence

__all__ = ["max_magic_ring_string", "main"]

_SIDES = 5


def max_magic_ring_string() -> str:
    """Return the largest 16-digit string formed by a magic 5-gon ring of 1 to 10.

    For 16 digits 10 must sit on the outer ring, and by symmetry it can be
    fixed at the first outer node.
    """
    best = ""
    for nodes in permutations(range(1, 2 * _SIDES)):
        outer = (10, *nodes[: _SIDES - 1])
        inner = nodes[_SIDES - 1 :]
        lines = [
            (outer[i], inner[i], inner[(i + 1) % _SIDES]) for i in range(_SIDES)
        ]
        if len({sum(line) for line in lines}) != 1:
            continue
        start = min(range(_SIDES), key=lambda i: outer[i])
        ordered = lines[start:] + lines[:start]
        text = "".join(str(value) for line in ordered for value in line)
        if len(text) > len(best) or (len(text) == len(best) and text > best):
            best = text
    return best


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.parse_args(argv)
    print(max_magic_ring_string())
    return 0