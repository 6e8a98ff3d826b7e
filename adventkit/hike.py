"""Hiking trails: the longest walk across a map that never steps on a tile twice."""

from __future__ import annotations

from dataclasses import dataclass

# Moves in the order they are tried: north, south, east, west.
_MOVES = ((-1, 0), (1, 0), (0, 1), (0, -1))
# Each slope may only be entered while moving in the direction it points.
_SLOPES = {">": (0, 1), "<": (0, -1), "^": (-1, 0), "v": (1, 0)}

Cell = tuple[int, int]


@dataclass(frozen=True)
class Trailmap:
    """A trail map with its start on the top row and its end on the bottom row."""

    rows: tuple[str, ...]
    start: Cell
    end: Cell

    def _open(self, cell: Cell) -> bool:
        row, col = cell
        return (
            0 <= row < len(self.rows)
            and 0 <= col < len(self.rows[row])
            and self.rows[row][col] != "#"
        )

    def _can_enter(self, cell: Cell, move: Cell) -> bool:
        if not self._open(cell):
            return False
        slope = _SLOPES.get(self.rows[cell[0]][cell[1]])
        return slope is None or slope == move

    def _open_neighbours(self, cell: Cell) -> list[Cell]:
        row, col = cell
        return [
            (row + dr, col + dc)
            for dr, dc in _MOVES
            if self._open((row + dr, col + dc))
        ]

    def _graph(self) -> dict[Cell, list[tuple[Cell, int]]]:
        """Junctions joined by the corridors between them, with their lengths."""
        nodes = {self.start, self.end}
        for row, line in enumerate(self.rows):
            for col, char in enumerate(line):
                if char != "#" and len(self._open_neighbours((row, col))) >= 3:
                    nodes.add((row, col))

        graph: dict[Cell, list[tuple[Cell, int]]] = {node: [] for node in nodes}
        for node in nodes:
            for move in _MOVES:
                first = (node[0] + move[0], node[1] + move[1])
                if not self._can_enter(first, move):
                    continue
                previous, current, length = node, first, 1
                while current not in nodes:
                    onward = [
                        ((current[0] + dr, current[1] + dc), (dr, dc))
                        for dr, dc in _MOVES
                        if (current[0] + dr, current[1] + dc) != previous
                        and self._open((current[0] + dr, current[1] + dc))
                    ]
                    if not onward:
                        break
                    cell, step = onward[0]
                    if not self._can_enter(cell, step):
                        break
                    previous, current, length = current, cell, length + 1
                else:
                    graph[node].append((current, length))
        return graph

    def longest_path(self) -> int:
        """Steps on the longest walk from start to end; 0 if the end cannot be reached."""
        graph = self._graph()
        best = 0
        visited = {self.start}

        def explore(node: Cell, length: int) -> None:
            nonlocal best
            if node == self.end:
                best = max(best, length)
                return
            for target, step in graph[node]:
                if target not in visited:
                    visited.add(target)
                    explore(target, length + step)
                    visited.discard(target)

        explore(self.start, 0)
        return best


def parse_trailmap(text: str, slippery: bool = True) -> Trailmap:
    """Parse a map up to the first blank line; without ``slippery`` slopes become paths."""
    rows: list[str] = []
    for line in text.splitlines():
        if not line.strip():
            break
        if not slippery:
            line = "".join("#" if char == "#" else "." for char in line)
        rows.append(line)
    if not rows:
        raise ValueError("trail map is empty")
    start_cols = [col for col, char in enumerate(rows[0]) if char == "."]
    end_cols = [col for col, char in enumerate(rows[-1]) if char == "."]
    if not start_cols:
        raise ValueError("trail map has no start on its top row")
    if not end_cols:
        raise ValueError("trail map has no end on its bottom row")
    return Trailmap(tuple(rows), (0, start_cols[-1]), (len(rows) - 1, end_cols[-1]))


def longest_hike(text: str, slippery: bool = True) -> int:
    """Length of the longest hike across the map."""
    return parse_trailmap(text, slippery).longest_path()