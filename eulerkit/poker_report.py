"""Poker hands: a game-by-game report of who wins and with what hand."""

import argparse
import sys
from typing import Iterable, Optional, Sequence

from eulerkit.poker import Card, HandRank, classify, compare_hands, parse_game

__all__ = ["format_game", "report", "main"]

DEFAULT_PATH = "../text/problem054.txt"

_HAND_NAMES = {
    HandRank.HIGH_CARD: "High Card",
    HandRank.ONE_PAIR: "One Pair",
    HandRank.TWO_PAIR: "Two Pair",
    HandRank.THREE_OF_A_KIND: "Three Of A Kind",
    HandRank.STRAIGHT: "Straight",
    HandRank.FLUSH: "Flush",
    HandRank.FULL_HOUSE: "Full House",
    HandRank.FOUR_OF_A_KIND: "Four Of A Kind",
    HandRank.STRAIGHT_FLUSH: "Straight Flush",
    HandRank.ROYAL_FLUSH: "Royal Flush",
}


def _sorted(cards: Iterable[Card]) -> tuple:
    return tuple(sorted(cards, key=lambda card: card.number))


def _player_line(label: str, hand: tuple) -> str:
    cards = "".join(f"{card.number:2d}({card.suit.value}) " for card in hand)
    return f"{label}: {cards} -> {_HAND_NAMES[classify(hand)]}"


def _outcome(result: int) -> str:
    if result > 0:
        return "Player1 wins"
    if result < 0:
        return "Player2 wins"
    return "Draw"


def format_game(number: int, first: Iterable[Card], second: Iterable[Card]) -> str:
    """Return the report block for one game: both hands, their ranks and the outcome."""
    first, second = _sorted(first), _sorted(second)
    lines = [
        f"Game {number}",
        _player_line("Player1", first),
        _player_line("Player2", second),
        _outcome(compare_hands(first, second)),
    ]
    return "\n".join(lines) + "\n\n"


def report(lines: Iterable[str]) -> str:
    """Return the full report for the games given one per non-blank line."""
    blocks = []
    wins1 = wins2 = games = 0
    for line in lines:
        if not line.strip():
            continue
        games += 1
        first, second = parse_game(line)
        result = compare_hands(first, second)
        wins1 += result > 0
        wins2 += result < 0
        blocks.append(format_game(games, first, second))
    blocks.append(
        f"Player1 won {wins1} times\n"
        f"Player2 won {wins2} times\n"
        f"{games - wins1 - wins2} draws\n"
    )
    return "".join(blocks)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path", nargs="?", default=DEFAULT_PATH)
    args = parser.parse_args(argv)
    try:
        with open(args.path, encoding="ascii") as games:
            text = report(games)
    except OSError:
        print(f"Cannot open {args.path}", file=sys.stderr)
        return 1
    sys.stdout.write(text)
    return 0