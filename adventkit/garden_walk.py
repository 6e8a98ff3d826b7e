"""Garden plots reachable in an exact number of steps."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

DEFAULT_STEPS = 64


@dataclass(frozen=True)
class Garden:
    """The open plots of a garden map and the starting position."""

    open_cells: frozenset[tuple[int, int]]
    start: tuple[int, int]

    def distances(self, max_steps: int) -> dict[tuple[int, int], int]:
        """Shortest step counts, up to ``max_steps``, from the start to each plot."""
        if max_steps < 0:
            raise ValueError("max_steps must not be negative")
        found = {self.start: 0}
        queue = deque([self.start])
        while queue:
            row, col = queue.popleft()
            distance = found[(row, col)]
            if distance == max_steps:
                continue
            for cell in (
                (row + 1, col),
                (row - 1, col),
                (row, col + 1),
                (row, col - 1),
            ):
                if cell in self.open_cells and cell not in found:
                    found[cell] = distance + 1
                    queue.append(cell)
        return found


def parse_garden(text: str) -> Garden:
    """Parse a map of '.', '#' and one 'S' up to the first blank line."""
    open_cells: set[tuple[int, int]] = set()
    start: tuple[int, int] | None = None
    for row, line in enumerate(text.splitlines()):
        if not line.strip():
            break
        for col, char in enumerate(line):
            if char == ".":
                open_cells.add((row, col))
            elif char == "S":
                start = (row, col)
                open_cells.add((row, col))
            elif char != "#":
                raise ValueError(f"unexpected map character {char!r}")
    if start is None:
        raise ValueError("garden map has no starting position")
    return Garden(frozenset(open_cells), start)


def reachable_plots(text: str, steps: int = DEFAULT_STEPS) -> int:
    """Plots on which a walk of exactly ``steps`` steps can end."""
    distances = parse_garden(text).distances(steps)
    return sum(1 for distance in distances.values() if distance % 2 == steps % 2)