"""Toy boat races: how many button hold times beat each record."""

from __future__ import annotations

import math
from dataclasses import dataclass
from math import prod


@dataclass(frozen=True)
class Race:
    """A race's total time and the distance record to beat."""

    time: int
    record: int


def _data_lines(text: str) -> list[list[str]]:
    lines = []
    for line in text.splitlines():
        if not line.strip():
            break
        lines.append(line.split()[1:])
    return lines


def parse_races(text: str) -> list[Race]:
    """Pair the times on the first line with the records on the second."""
    lines = _data_lines(text)
    if len(lines) < 2:
        raise ValueError("race sheet needs a time line and a distance line")
    return [Race(int(t), int(r)) for t, r in zip(lines[0], lines[1])]


def parse_single_race(text: str) -> Race:
    """Read each line's numbers run together as a single race."""
    lines = _data_lines(text)
    if len(lines) < 2 or not lines[0] or not lines[1]:
        raise ValueError("race sheet needs a time line and a distance line")
    return Race(int("".join(lines[0])), int("".join(lines[1])))


def ways_to_win(time: int, record: int) -> int:
    """Count hold times ``h`` in ``0 .. time - 1`` with ``h * (time - h) > record``."""
    if time <= 0:
        return 0
    discriminant = time * time - 4 * record
    if discriminant < 0:
        return 0
    low = max(0, (time - math.isqrt(discriminant)) // 2)
    half = time // 2
    while low <= half and low * (time - low) <= record:
        low += 1
    if low > half:
        return 0
    high = min(time - low, time - 1)
    return max(0, high - low + 1)


def ways_to_win_quadratic(time: int, record: int) -> int:
    """Count winning hold times from the roots of the distance quadratic."""
    discriminant = time * time - 4.0 * record
    if discriminant < 0:
        raise ValueError("the record cannot be beaten in this time")
    root = math.sqrt(discriminant)
    upper = (-time - root) / -2.0
    lower = (-time + root) / -2.0
    return int(math.ceil(upper) - (math.floor(lower) + 1))


def _ways(race: Race, quadratic: bool) -> int:
    if quadratic:
        return ways_to_win_quadratic(race.time, race.record)
    return ways_to_win(race.time, race.record)


def margin_product(text: str, quadratic: bool = False) -> int:
    """Product of the ways to win every race on the sheet."""
    return prod(_ways(race, quadratic) for race in parse_races(text))


def single_race_ways(text: str, quadratic: bool = False) -> int:
    """Ways to win the one long race the sheet describes."""
    return _ways(parse_single_race(text), quadratic)