"""Poker hands: rank five-card hands and count the games the first player wins."""

import argparse
import sys
from collections import Counter
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterable, Optional, Sequence, Tuple

__all__ = [
    "Suit",
    "HandRank",
    "Card",
    "parse_card",
    "parse_game",
    "classify",
    "tiebreak_values",
    "compare_hands",
    "count_first_wins",
    "main",
]

HAND_SIZE = 5
DEFAULT_PATH = "../text/problem054.txt"


class Suit(Enum):
    SPADE = "S"
    CLUB = "C"
    DIAMOND = "D"
    HEART = "H"


class HandRank(IntEnum):
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9


_NUMBERS = {str(d): d for d in range(2, 10)}
_NUMBERS.update({"T": 10, "J": 11, "Q": 12, "K": 13, "A": 1})
_CHARS = {number: char for char, number in _NUMBERS.items()}

# Ranks whose cards all carry different numbers: ordered by value alone.
_DISTINCT_RANKS = frozenset(
    {HandRank.HIGH_CARD, HandRank.STRAIGHT, HandRank.FLUSH, HandRank.STRAIGHT_FLUSH}
)


@dataclass(frozen=True)
class Card:
    """A playing card; ``number`` runs from 1 (ace) to 13 (king)."""

    number: int
    suit: Suit

    def __post_init__(self) -> None:
        if not 1 <= self.number <= 13:
            raise ValueError(f"card number out of range: {self.number}")

    def __str__(self) -> str:
        return f"{_CHARS[self.number]}{self.suit.value}"


Hand = Tuple[Card, ...]


def parse_card(text: str) -> Card:
    """Parse a card written as value and suit, such as ``"TH"`` or ``"5C"``."""
    if len(text) != 2:
        raise ValueError(f"malformed card: {text!r}")
    value, suit = text
    if value not in _NUMBERS:
        raise ValueError(f"unknown card value: {value!r}")
    try:
        return Card(_NUMBERS[value], Suit(suit))
    except ValueError:
        raise ValueError(f"unknown suit: {suit!r}") from None


def _sorted_hand(cards: Iterable[Card]) -> Hand:
    hand = tuple(sorted(cards, key=lambda card: card.number))
    if len(hand) != HAND_SIZE:
        raise ValueError(f"a hand holds {HAND_SIZE} cards, got {len(hand)}")
    return hand


def parse_game(line: str) -> Tuple[Hand, Hand]:
    """Parse a line of ten cards into the two players' hands, each sorted by number."""
    cards = [parse_card(token) for token in line.split()]
    if len(cards) != 2 * HAND_SIZE:
        raise ValueError(f"a game holds {2 * HAND_SIZE} cards, got {len(cards)}")
    return _sorted_hand(cards[:HAND_SIZE]), _sorted_hand(cards[HAND_SIZE:])


def classify(cards: Iterable[Card]) -> HandRank:
    """Return the rank of a five-card hand."""
    hand = _sorted_hand(cards)
    numbers = [card.number for card in hand]
    flush = len({card.suit for card in hand}) == 1
    ace_high = numbers[0] == 1 and numbers[1] == 10
    straight = all(b - a == 1 for a, b in zip(numbers[1:], numbers[2:])) and (
        numbers[1] - numbers[0] == 1 or ace_high
    )

    if flush and straight:
        return HandRank.ROYAL_FLUSH if ace_high else HandRank.STRAIGHT_FLUSH

    shape = sorted(Counter(numbers).values(), reverse=True)
    if shape[0] >= 4:
        return HandRank.FOUR_OF_A_KIND
    if shape == [3, 2]:
        return HandRank.FULL_HOUSE
    if flush:
        return HandRank.FLUSH
    if straight:
        return HandRank.STRAIGHT
    if shape[0] == 3:
        return HandRank.THREE_OF_A_KIND
    if shape[:2] == [2, 2]:
        return HandRank.TWO_PAIR
    if shape[0] == 2:
        return HandRank.ONE_PAIR
    return HandRank.HIGH_CARD


def tiebreak_values(cards: Iterable[Card], rank: HandRank) -> Tuple[int, ...]:
    """Return the values that order two hands of the same rank, aces counting 14.

    Grouped cards come first (larger groups, then higher values), followed by
    the kickers from high to low.
    """
    if rank is HandRank.ROYAL_FLUSH:
        return (14, 13, 12, 11, 10)
    values = [14 if card.number == 1 else card.number for card in _sorted_hand(cards)]
    if rank in _DISTINCT_RANKS:
        return tuple(sorted(values, reverse=True))
    counts = Counter(values)
    ordered = sorted(counts, key=lambda value: (counts[value], value), reverse=True)
    return tuple(value for value in ordered for _ in range(counts[value]))


def compare_hands(first: Iterable[Card], second: Iterable[Card]) -> int:
    """Return 1 if ``first`` beats ``second``, -1 if it loses and 0 on a draw."""
    first, second = _sorted_hand(first), _sorted_hand(second)
    rank1, rank2 = classify(first), classify(second)
    if rank1 != rank2:
        return 1 if rank1 > rank2 else -1
    values1 = tiebreak_values(first, rank1)
    values2 = tiebreak_values(second, rank2)
    return (values1 > values2) - (values1 < values2)


def count_first_wins(lines: Iterable[str]) -> int:
    """Count the games, one per non-blank line, that the first player wins."""
    return sum(
        compare_hands(*parse_game(line)) > 0 for line in lines if line.strip()
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path", nargs="?", default=DEFAULT_PATH)
    args = parser.parse_args(argv)
    try:
        with open(args.path, encoding="ascii") as games:
            print(count_first_wins(games))
    except OSError:
        print(f"Cannot open {args.path}", file=sys.stderr)
        return 1
    return 0