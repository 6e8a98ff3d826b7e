"""Engine schematics: part numbers next to symbols and gear ratios."""

from __future__ import annotations

import string
from dataclasses import dataclass

_DIGITS = frozenset(string.digits)
_SYMBOLS = frozenset(string.punctuation) - {"."}


@dataclass(frozen=True)
class Schematic:
    """A grid of digits, dots and symbols."""

    rows: tuple[str, ...]

    @classmethod
    def from_text(cls, text: str) -> Schematic:
        return cls(tuple(text.splitlines()))

    def _char(self, row: int, col: int) -> str:
        if 0 <= row < len(self.rows) and 0 <= col < len(self.rows[row]):
            return self.rows[row][col]
        return ""

    def _is_digit(self, row: int, col: int) -> bool:
        return self._char(row, col) in _DIGITS and self._char(row, col) != ""

    def _number_at(self, row: int, col: int) -> int | None:
        if not self._is_digit(row, col):
            return None
        while col > 0 and self._is_digit(row, col - 1):
            col -= 1
        digits = []
        while self._is_digit(row, col):
            digits.append(self._char(row, col))
            col += 1
        return int("".join(digits))

    def symbols(self) -> list[tuple[int, int]]:
        """Positions (row, col) of every symbol, row by row."""
        return [
            (r, c)
            for r, line in enumerate(self.rows)
            for c, ch in enumerate(line)
            if ch in _SYMBOLS
        ]

    def adjacent_numbers(self, row: int, col: int) -> list[int]:
        """Numbers touching the cell at (row, col), each counted once per side."""
        candidates = [(row, col - 1), (row, col + 1)]
        for neighbour in (row + 1, row - 1):
            if self._is_digit(neighbour, col):
                candidates.append((neighbour, col))
            else:
                candidates.extend([(neighbour, col + 1), (neighbour, col - 1)])
        return [
            number
            for pos in candidates
            if (number := self._number_at(*pos)) is not None
        ]


def part_number_sum(text: str) -> int:
    """Sum of every number next to a symbol, once for each symbol it touches."""
    schematic = Schematic.from_text(text)
    return sum(
        sum(schematic.adjacent_numbers(r, c)) for r, c in schematic.symbols()
    )


def gear_ratio_sum(text: str) -> int:
    """Sum of the products for every symbol touching exactly two numbers."""
    schematic = Schematic.from_text(text)
    total = 0
    for r, c in schematic.symbols():
        numbers = schematic.adjacent_numbers(r, c)
        if len(numbers) == 2:
            total += numbers[0] * numbers[1]
    return total