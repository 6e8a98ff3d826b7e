"""Sensor histories extrapolated forwards and backwards by repeated differences."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import pairwise


def _layers(values: Sequence[int]) -> list[list[int]]:
    if not values:
        raise ValueError("cannot extrapolate an empty sequence")
    layers = [list(values)]
    while True:
        diff = [b - a for a, b in pairwise(layers[-1])]
        if not any(diff):
            return layers
        layers.append(diff)


def extrapolate_next(values: Sequence[int]) -> int:
    """The value that would follow the sequence."""
    return sum(layer[-1] for layer in _layers(values))


def extrapolate_previous(values: Sequence[int]) -> int:
    """The value that would come before the sequence."""
    previous = 0
    for layer in reversed(_layers(values)):
        previous = layer[0] - previous
    return previous


def _histories(text: str) -> Iterator[list[int]]:
    for line in text.splitlines():
        if not line.strip():
            return
        yield [int(token) for token in line.split()]


def sum_next(text: str) -> int:
    """Sum of the next values of every history up to the first blank line."""
    return sum(extrapolate_next(history) for history in _histories(text))


def sum_previous(text: str) -> int:
    """Sum of the previous values of every history up to the first blank line."""
    return sum(extrapolate_previous(history) for history in _histories(text))