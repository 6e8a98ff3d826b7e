"""Topographic maps: trails climbing one step at a time from height 0 to 9."""

from __future__ import annotations

from dataclasses import dataclass, field

_MOVES = ((-1, 0), (1, 0), (0, -1), (0, 1))
_PEAK = 9

Cell = tuple[int, int]


@dataclass(frozen=True)
class TopoMap:
    """Heights by row and column; cells that are not digits are impassable."""

    heights: tuple[tuple[int | None, ...], ...]
    _peaks: dict[Cell, frozenset[Cell]] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )
    _ratings: dict[Cell, int] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def _height(self, row: int, col: int) -> int | None:
        if 0 <= row < len(self.heights) and 0 <= col < len(self.heights[row]):
            return self.heights[row][col]
        return None

    def _uphill(self, row: int, col: int) -> list[Cell]:
        height = self._height(row, col)
        if height is None:
            return []
        return [
            (row + dr, col + dc)
            for dr, dc in _MOVES
            if self._height(row + dr, col + dc) == height + 1
        ]

    def trailheads(self) -> list[Cell]:
        """Every cell of height 0, row by row."""
        return [
            (row, col)
            for row, line in enumerate(self.heights)
            for col, height in enumerate(line)
            if height == 0
        ]

    def reachable_peaks(self, row: int, col: int) -> frozenset[Cell]:
        """Height-9 cells reachable from (row, col) by climbing one step at a time."""
        key = (row, col)
        if key not in self._peaks:
            if self._height(row, col) == _PEAK:
                found = frozenset({key})
            else:
                found = frozenset().union(
                    *(self.reachable_peaks(*cell) for cell in self._uphill(row, col))
                )
            self._peaks[key] = found
        return self._peaks[key]

    def rating(self, row: int, col: int) -> int:
        """Number of distinct climbing trails from (row, col) to any height-9 cell."""
        key = (row, col)
        if key not in self._ratings:
            if self._height(row, col) == _PEAK:
                total = 1
            else:
                total = sum(self.rating(*cell) for cell in self._uphill(row, col))
            self._ratings[key] = total
        return self._ratings[key]


def parse_map(text: str) -> TopoMap:
    """Parse rows of digits up to the first blank line."""
    rows = []
    for line in text.splitlines():
        if not line.strip():
            break
        rows.append(tuple(int(char) if char.isdigit() else None for char in line))
    return TopoMap(tuple(rows))


def trailhead_scores(text: str) -> int:
    """Sum over trailheads of how many peaks each can reach."""
    topo = parse_map(text)
    return sum(len(topo.reachable_peaks(*head)) for head in topo.trailheads())


def trailhead_ratings(text: str) -> int:
    """Sum over trailheads of how many distinct trails start there."""
    topo = parse_map(text)
    return sum(topo.rating(*head) for head in topo.trailheads())