"""XOR decryption: recover a repeating-key XOR cipher of ASCII codes."""

import argparse
import string
import sys
from itertools import cycle, product
from typing import Iterator, List, Optional, Sequence, Tuple

__all__ = ["parse_cipher", "decrypt", "candidate_passwords", "main"]

DEFAULT_PATH = "../text/problem059.txt"
DEFAULT_LENGTH = 3

_MARKERS = (b"the ", b"The ")


def parse_cipher(text: str) -> List[int]:
    """Parse comma-separated character codes into a list of integers."""
    codes = []
    for field in text.split(","):
        field = field.strip()
        if not field.isdigit():
            raise ValueError(f"malformed character code: {field!r}")
        code = int(field)
        if code > 255:
            raise ValueError(f"character code out of range: {code}")
        codes.append(code)
    return codes


def decrypt(cipher: Sequence[int], password: str) -> bytes:
    """XOR each code with the password's characters, repeating the password."""
    if not password:
        raise ValueError("password must not be empty")
    return bytes(code ^ ord(char) for code, char in zip(cipher, cycle(password)))


def candidate_passwords(
    cipher: Sequence[int], length: int = DEFAULT_LENGTH
) -> Iterator[Tuple[str, bytes]]:
    """Yield (password, text) for lowercase passwords whose text contains "the ".

    Passwords are tried with the first letter varying fastest; a text counts
    when it contains "the " or "The ".
    """
    if length < 1:
        raise ValueError("length must be at least 1")
    for letters in product(string.ascii_lowercase, repeat=length):
        password = "".join(reversed(letters))
        text = decrypt(cipher, password)
        if any(marker in text for marker in _MARKERS):
            yield password, text


def _best_candidate(cipher: Sequence[int], length: int) -> Optional[Tuple[str, bytes]]:
    best = None
    best_score = -1
    for password, text in candidate_passwords(cipher, length):
        score = text.lower().count(b"the ")
        if score > best_score:
            best, best_score = (password, text), score
    return best


def _search_report(cipher: Sequence[int], length: int) -> str:
    blocks = []
    for number, (password, text) in enumerate(candidate_passwords(cipher, length), 1):
        blocks.append(
            f'[{number}] The decrypted text for the candidate password "{password}":\n\n'
            f"{text.decode('latin-1')}\n\n"
        )
    return "".join(blocks)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path", nargs="?", default=DEFAULT_PATH)
    parser.add_argument("--password", default=None)
    parser.add_argument("--length", type=int, default=DEFAULT_LENGTH)
    parser.add_argument(
        "--search", action="store_true", help="list every candidate password"
    )
    args = parser.parse_args(argv)
    try:
        with open(args.path, encoding="ascii") as source:
            cipher = parse_cipher(source.read())
    except OSError:
        print(f"Cannot open {args.path}", file=sys.stderr)
        return 1

    if args.search:
        sys.stdout.write(_search_report(cipher, args.length))
        return 0

    if args.password is not None:
        text = decrypt(cipher, args.password)
    else:
        found = _best_candidate(cipher, args.length)
        if found is None:
            print("No candidate password found", file=sys.stderr)
            return 1
        text = found[1]
    print(sum(text))
    return 0