"""Camel Cards: ranking poker-like hands and totalling the winnings."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import IntEnum

_ORDER = "23456789TJQKA"
_STRENGTH = {card: value for value, card in enumerate(_ORDER)}
_JOKER_STRENGTH = {**_STRENGTH, "J": -1}


class HandType(IntEnum):
    """Hand types from weakest to strongest."""

    HIGH_CARD = 1
    ONE_PAIR = 2
    TWO_PAIR = 3
    THREE_OF_KIND = 4
    FULL_HOUSE = 5
    FOUR_OF_KIND = 6
    FIVE_OF_KIND = 7


@dataclass(frozen=True)
class Hand:
    """A hand of cards and the bid placed on it."""

    cards: str
    bid: int


def _classify(groups: list[int]) -> HandType:
    top = groups[0]
    second = groups[1] if len(groups) > 1 else 0
    if top >= 5:
        return HandType.FIVE_OF_KIND
    if top == 4:
        return HandType.FOUR_OF_KIND
    if top == 3:
        return HandType.FULL_HOUSE if second == 2 else HandType.THREE_OF_KIND
    if top == 2:
        return HandType.TWO_PAIR if second == 2 else HandType.ONE_PAIR
    return HandType.HIGH_CARD


def hand_type(cards: str, jokers: bool = False) -> HandType:
    """Type of a hand; with ``jokers`` each J joins the largest group of cards."""
    counts = Counter(card for card in cards if card in _STRENGTH)
    wild = counts.pop("J", 0) if jokers else 0
    groups = sorted(counts.values(), reverse=True) or [0]
    groups[0] += wild
    return _classify(groups)


def sort_key(hand: Hand, jokers: bool = False) -> tuple[HandType, tuple[int, ...]]:
    """Key ordering hands by type, then card by card from the left."""
    strength = _JOKER_STRENGTH if jokers else _STRENGTH
    try:
        values = tuple(strength[card] for card in hand.cards)
    except KeyError as error:
        raise ValueError(f"unknown card {error.args[0]!r} in {hand.cards!r}") from None
    return hand_type(hand.cards, jokers), values


def parse_hands(text: str) -> list[Hand]:
    """Parse ``cards bid`` lines up to the first blank line."""
    hands = []
    for line in text.splitlines():
        if not line.strip():
            break
        parts = line.split()
        if len(parts) < 2:
            raise ValueError(f"hand line needs cards and a bid: {line!r}")
        hands.append(Hand(parts[0], int(parts[1])))
    return hands


def total_winnings(text: str, jokers: bool = False) -> int:
    """Sum of each bid times its hand's rank, weakest hand ranked 1."""
    ranked = sorted(parse_hands(text), key=lambda hand: sort_key(hand, jokers))
    return sum(rank * hand.bid for rank, hand in enumerate(ranked, start=1))