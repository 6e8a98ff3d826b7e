"""Garden regions: fence prices by perimeter and by number of straight sides."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

Cell = tuple[int, int]


class Side(Enum):
    """A side of a garden plot, valued by the step to the neighbour across it."""

    TOP = (-1, 0)
    BOTTOM = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    def neighbour(self, cell: Cell) -> Cell:
        """The cell across this side of ``cell``."""
        dr, dc = self.value
        return cell[0] + dr, cell[1] + dc


# Adjacent side pairs, going clockwise; each pair meets at one corner of a plot.
_CORNERS = (
    (Side.TOP, Side.RIGHT),
    (Side.RIGHT, Side.BOTTOM),
    (Side.BOTTOM, Side.LEFT),
    (Side.LEFT, Side.TOP),
)


@dataclass(frozen=True)
class Region:
    """A connected group of plots growing the same plant."""

    plant: str
    cells: frozenset[Cell]

    @property
    def area(self) -> int:
        """Number of plots in the region."""
        return len(self.cells)

    def fences(self) -> list[tuple[Cell, Side]]:
        """Every plot side that borders something outside the region."""
        return [
            (cell, side)
            for cell in sorted(self.cells)
            for side in Side
            if side.neighbour(cell) not in self.cells
        ]

    def perimeter(self) -> int:
        """Number of unit fence segments around the region."""
        return len(self.fences())

    def sides(self) -> int:
        """Number of straight fence sides, counted as the corners of the outline."""
        corners = 0
        for cell in self.cells:
            for first, second in _CORNERS:
                a = first.neighbour(cell) in self.cells
                b = second.neighbour(cell) in self.cells
                if not a and not b:
                    corners += 1
                elif a and b:
                    diagonal = second.neighbour(first.neighbour(cell))
                    if diagonal not in self.cells:
                        corners += 1
        return corners

    def price(self) -> int:
        """Area times perimeter."""
        return self.area * self.perimeter()

    def bulk_price(self) -> int:
        """Area times number of sides."""
        return self.area * self.sides()


def parse_garden_map(text: str) -> tuple[str, ...]:
    """Read rows of plant letters up to the first blank line."""
    rows: list[str] = []
    for line in text.splitlines():
        if not line.strip():
            break
        rows.append(line)
    if any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("garden map rows must all have the same length")
    return tuple(rows)


def find_regions(grid: Sequence[str]) -> list[Region]:
    """Split the grid into regions, in the order their first plot is met row by row."""
    seen: set[Cell] = set()
    regions: list[Region] = []
    for row, line in enumerate(grid):
        for col, plant in enumerate(line):
            if (row, col) in seen:
                continue
            cells = {(row, col)}
            stack = [(row, col)]
            while stack:
                cell = stack.pop()
                for side in Side:
                    r, c = side.neighbour(cell)
                    if (
                        (r, c) not in cells
                        and 0 <= r < len(grid)
                        and 0 <= c < len(grid[r])
                        and grid[r][c] == plant
                    ):
                        cells.add((r, c))
                        stack.append((r, c))
            seen |= cells
            regions.append(Region(plant, frozenset(cells)))
    return regions


def fence_price(text: str) -> int:
    """Total fence price of every region, priced by perimeter."""
    return sum(region.price() for region in find_regions(parse_garden_map(text)))


def bulk_fence_price(text: str) -> int:
    """Total fence price of every region, priced by number of sides."""
    return sum(region.bulk_price() for region in find_regions(parse_garden_map(text)))