"""Cube game records: which games fit a bag's contents and the fewest cubes each needs."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from math import prod

COLORS = ("red", "green", "blue")
DEFAULT_LIMITS = {"red": 12, "green": 13, "blue": 14}

_GAME_NUMBER = re.compile(r"\d+")
_PULL = re.compile(r"(\d+)[^A-Za-z]*?([A-Za-z]+)")


def _color_of(word: str) -> str:
    for color in COLORS:
        if word.startswith(color):
            return color
    raise ValueError(f"unknown cube color: {word!r}")


@dataclass(frozen=True)
class Game:
    """One recorded game: its number and every (count, color) pull shown."""

    id: int
    pulls: tuple[tuple[int, str], ...]

    def is_possible(self, limits: Mapping[str, int] | None = None) -> bool:
        """True if no pull shows more cubes of a color than the limits allow."""
        limits = DEFAULT_LIMITS if limits is None else limits
        return all(count <= limits.get(color, 0) for count, color in self.pulls)

    def minimum_cubes(self) -> dict[str, int]:
        """The fewest cubes of each color that make this game possible."""
        needed = dict.fromkeys(COLORS, 0)
        for count, color in self.pulls:
            needed[color] = max(needed[color], count)
        return needed

    def power(self) -> int:
        """Product of the minimum red, green and blue counts."""
        return prod(self.minimum_cubes().values())


def _parse_game(line: str) -> Game:
    number = _GAME_NUMBER.search(line)
    if number is None:
        raise ValueError(f"game line has no game number: {line!r}")
    rest = line[number.end():]
    pulls = tuple(
        (int(count), _color_of(word)) for count, word in _PULL.findall(rest)
    )
    return Game(int(number.group()), pulls)


def parse_games(text: str) -> list[Game]:
    """Parse every non-blank line of ``text`` as a game record."""
    return [_parse_game(line) for line in text.splitlines() if line.strip()]


def sum_possible_games(text: str) -> int:
    """Sum of the numbers of all games possible with 12 red, 13 green and 14 blue cubes."""
    return sum(game.id for game in parse_games(text) if game.is_possible())


def sum_of_powers(text: str) -> int:
    """Sum of the powers of every game."""
    return sum(game.power() for game in parse_games(text))