"""Hailstone paths in the x/y plane and where they cross within a test area."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from itertools import combinations

_NUMBER = re.compile(r"-?\d+(?:\.\d+)?")

DEFAULT_LOW = 200000000000000.0
DEFAULT_HIGH = 400000000000000.0
_SLOPE_TOLERANCE = 0.0000000001
_OFFSET_TOLERANCE = 0.001


@dataclass(frozen=True)
class Hailstone:
    """A hailstone's starting x/y position and x/y velocity."""

    x: float
    y: float
    vx: float
    vy: float

    def slope(self) -> float:
        """Slope of the path, dy/dx."""
        if self.vx == 0:
            raise ValueError("a hailstone with no x velocity has no slope")
        return self.vy / self.vx

    def offset(self) -> float:
        """Where the path's line meets x = 0."""
        return self.y - self.slope() * self.x

    def is_future(self, x: float, y: float) -> bool:
        """True unless the point lies behind the hailstone's direction of travel."""
        if x > self.x and self.vx < 0:
            return False
        if x < self.x and self.vx > 0:
            return False
        if y > self.y and self.vy < 0:
            return False
        if y < self.y and self.vy > 0:
            return False
        return True


def parse_hailstones(text: str) -> list[Hailstone]:
    """Parse ``px, py, pz @ vx, vy, vz`` lines up to the first blank line."""
    stones = []
    for line in text.splitlines():
        if not line.strip():
            break
        numbers = [float(n) for n in _NUMBER.findall(line)]
        if len(numbers) < 5:
            raise ValueError(f"hailstone line needs position and velocity: {line!r}")
        stones.append(Hailstone(numbers[0], numbers[1], numbers[3], numbers[4]))
    return stones


def crossing_count(
    hailstones: Sequence[Hailstone],
    low: float = DEFAULT_LOW,
    high: float = DEFAULT_HIGH,
) -> int:
    """Pairs whose future paths cross inside the square ``low .. high``.

    Pairs on the same line are counted whatever the area.
    """
    count = 0
    for first, second in combinations(hailstones, 2):
        slope_a, slope_b = first.slope(), second.slope()
        offset_a, offset_b = first.offset(), second.offset()
        if abs(slope_a - slope_b) < _SLOPE_TOLERANCE:
            if abs(offset_a - offset_b) < _OFFSET_TOLERANCE:
                count += 1
            continue
        x = (offset_a - offset_b) / (slope_b - slope_a)
        y = slope_a * x + offset_a
        if (
            low <= x <= high
            and low <= y <= high
            and first.is_future(x, y)
            and second.is_future(x, y)
        ):
            count += 1
    return count


def count_crossings(
    text: str, low: float = DEFAULT_LOW, high: float = DEFAULT_HIGH
) -> int:
    """Parse hailstones and count their crossings inside the test area."""
    return crossing_count(parse_hailstones(text), low, high)