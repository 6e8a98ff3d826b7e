"""Plutonian pebbles: how many stones a row becomes after repeated blinks."""

from __future__ import annotations

from functools import lru_cache

DEFAULT_BLINKS = 25
_MULTIPLIER = 2024


def digit_count(value: int) -> int:
    """Number of base-10 digits in a non-negative integer."""
    if value < 0:
        raise ValueError("stone numbers are never negative")
    count, power = 1, 10
    while value >= power:
        power *= 10
        count += 1
    return count


@lru_cache(maxsize=None)
def count_stones(stone: int, blinks: int) -> int:
    """Stones that one stone engraved with ``stone`` becomes after ``blinks`` blinks."""
    if blinks < 0:
        raise ValueError("blinks must not be negative")
    if blinks == 0:
        return 1
    if stone == 0:
        return count_stones(1, blinks - 1)
    digits = digit_count(stone)
    if digits % 2:
        return count_stones(stone * _MULTIPLIER, blinks - 1)
    left, right = divmod(stone, 10 ** (digits // 2))
    return count_stones(left, blinks - 1) + count_stones(right, blinks - 1)


def parse_stones(text: str) -> list[int]:
    """Read the stone numbers from every line up to the first blank line."""
    stones: list[int] = []
    for line in text.splitlines():
        if not line.strip():
            break
        for token in line.split():
            value = int(token)
            if value < 0:
                raise ValueError(f"stone numbers are never negative: {token!r}")
            stones.append(value)
    return stones


def stones_after(text: str, blinks: int = DEFAULT_BLINKS) -> int:
    """Total stones in the row after ``blinks`` blinks."""
    return sum(count_stones(stone, blinks) for stone in parse_stones(text))