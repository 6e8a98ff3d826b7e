"""Scratchcards: winning numbers, points and copies won."""

from __future__ import annotations

import re
from dataclasses import dataclass

_NUMBER = re.compile(r"\d+")


@dataclass(frozen=True)
class Card:
    """A card: its number, the winning numbers and the numbers held."""

    number: int
    winning: tuple[int, ...]
    have: tuple[int, ...]

    def matches(self) -> int:
        """Count of (winning, held) pairs that are equal."""
        return sum(self.have.count(w) for w in self.winning)

    def points(self) -> int:
        """One point for the first match, doubled for each further match."""
        found = self.matches()
        return 0 if found == 0 else 2 ** (found - 1)


def _numbers(segment: str) -> tuple[int, ...]:
    return tuple(int(n) for n in _NUMBER.findall(segment))


def parse_cards(text: str) -> list[Card]:
    """Parse every line containing a ':' as a card."""
    cards = []
    for line in text.splitlines():
        header, colon, body = line.partition(":")
        if not colon:
            continue
        winning, _, have = body.partition("|")
        label = _NUMBER.search(header)
        number = int(label.group()) if label else len(cards) + 1
        cards.append(Card(number, _numbers(winning), _numbers(have)))
    return cards


def card_points(text: str) -> int:
    """Total points of all cards."""
    return sum(card.points() for card in parse_cards(text))


def total_cards(text: str) -> int:
    """Total cards held once each card's matches win copies of the cards after it."""
    cards = parse_cards(text)
    copies = [1] * len(cards)
    for index, card in enumerate(cards):
        end = min(len(cards), index + 1 + card.matches())
        for later in range(index + 1, end):
            copies[later] += copies[index]
    return sum(copies)