"""Falling sand bricks: settling a stack and working out what may be removed."""

from __future__ import annotations

import re
from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace
from itertools import product

_NUMBER = re.compile(r"-?\d+")


@dataclass(frozen=True)
class Brick:
    """A box of cubes between two corners, inclusive; z counts up from the ground."""

    x1: int
    y1: int
    z1: int
    x2: int
    y2: int
    z2: int

    def __post_init__(self) -> None:
        for low, high in (("x1", "x2"), ("y1", "y2"), ("z1", "z2")):
            a, b = getattr(self, low), getattr(self, high)
            if a > b:
                object.__setattr__(self, low, b)
                object.__setattr__(self, high, a)
        if self.z1 < 1:
            raise ValueError(f"brick lies at or below the ground: {self!r}")

    @property
    def bottom(self) -> int:
        """Height of the lowest cube."""
        return self.z1

    @property
    def top(self) -> int:
        """Height of the highest cube."""
        return self.z2

    def footprint(self) -> Iterator[tuple[int, int]]:
        """The (x, y) columns the brick occupies."""
        return product(range(self.x1, self.x2 + 1), range(self.y1, self.y2 + 1))

    def cubes(self) -> list[tuple[int, int, int]]:
        """Every (x, y, z) cell of the brick."""
        return [
            (x, y, z)
            for z in range(self.z1, self.z2 + 1)
            for x, y in self.footprint()
        ]

    def dropped_to(self, bottom: int) -> Brick:
        """The same brick moved so its lowest cube sits at ``bottom``."""
        return replace(self, z1=bottom, z2=bottom + (self.z2 - self.z1))


class BrickStack:
    """A set of bricks that fall until they rest on the ground or on each other."""

    def __init__(self, bricks: Iterable[Brick]) -> None:
        self.bricks: list[Brick] = list(bricks)
        self._above: list[set[int]] | None = None
        self._below: list[set[int]] | None = None
        self._positions: dict[Brick, int] = {}

    def settle(self) -> list[Brick]:
        """Let every brick fall, lowest first; returns the settled bricks."""
        order = sorted(self.bricks, key=lambda brick: brick.bottom)
        columns: dict[tuple[int, int], tuple[int, int]] = {}
        settled: list[Brick] = []
        above: list[set[int]] = []
        below: list[set[int]] = []
        for index, brick in enumerate(order):
            cells = list(brick.footprint())
            floor = max(
                (columns[cell][0] for cell in cells if cell in columns), default=0
            )
            dropped = brick.dropped_to(floor + 1)
            supporters = {
                columns[cell][1]
                for cell in cells
                if cell in columns and columns[cell][0] == floor
            }
            settled.append(dropped)
            below.append(supporters)
            above.append(set())
            for supporter in supporters:
                above[supporter].add(index)
            for cell in cells:
                columns[cell] = (dropped.top, index)
        self.bricks = settled
        self._above = above
        self._below = below
        self._positions = {brick: index for index, brick in enumerate(settled)}
        return list(settled)

    def _index(self, brick: Brick) -> int:
        if self._above is None:
            self.settle()
        try:
            return self._positions[brick]
        except KeyError:
            raise ValueError(f"brick is not part of the settled stack: {brick!r}") from None

    def can_remove(self, brick: Brick) -> bool:
        """True if removing ``brick`` lets no other brick fall."""
        index = self._index(brick)
        assert self._above is not None and self._below is not None
        return all(len(self._below[other]) > 1 for other in self._above[index])

    def chain_reaction(self, brick: Brick) -> int:
        """How many other bricks fall when ``brick`` is removed."""
        index = self._index(brick)
        assert self._above is not None and self._below is not None
        fallen = {index}
        queue = deque([index])
        while queue:
            current = queue.popleft()
            for other in sorted(self._above[current]):
                if other not in fallen and self._below[other] <= fallen:
                    fallen.add(other)
                    queue.append(other)
        return len(fallen) - 1


def parse_bricks(text: str) -> list[Brick]:
    """Parse ``x,y,z~x,y,z`` lines up to the first blank line."""
    bricks = []
    for line in text.splitlines():
        if not line.strip():
            break
        numbers = [int(n) for n in _NUMBER.findall(line)]
        if len(numbers) != 6:
            raise ValueError(f"brick line needs six numbers: {line!r}")
        bricks.append(Brick(*numbers))
    return bricks


def _settled_stack(text: str) -> BrickStack:
    stack = BrickStack(parse_bricks(text))
    stack.settle()
    return stack


def safe_to_disintegrate(text: str) -> int:
    """Number of bricks that could each be removed without anything falling."""
    stack = _settled_stack(text)
    return sum(stack.can_remove(brick) for brick in stack.bricks)


def chain_reaction_total(text: str) -> int:
    """Sum over every brick of how many others fall when it alone is removed."""
    stack = _settled_stack(text)
    return sum(stack.chain_reaction(brick) for brick in stack.bricks)