"""Seed almanacs: chains of range tables that map seeds to locations."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

_NUMBER = re.compile(r"\d+")


@dataclass(frozen=True)
class MappingRange:
    """Maps ``source .. source + length - 1`` onto ``destination ..``."""

    destination: int
    source: int
    length: int

    @property
    def source_end(self) -> int:
        """One past the last source value covered."""
        return self.source + self.length

    def contains(self, value: int) -> bool:
        """True if ``value`` lies in the source range."""
        return self.source <= value < self.source_end

    def map(self, value: int) -> int:
        """Translate a source value covered by this range."""
        return self.destination + (value - self.source)


@dataclass(frozen=True)
class Table:
    """One named conversion table; the first range that covers a value wins."""

    name: str
    ranges: tuple[MappingRange, ...] = ()

    def lookup(self, value: int) -> int:
        """Convert ``value``; values outside every range map to themselves."""
        for mapping in self.ranges:
            if mapping.contains(value):
                return mapping.map(value)
        return value

    def lookup_intervals(
        self, intervals: Iterable[tuple[int, int]]
    ) -> list[tuple[int, int]]:
        """Convert half-open intervals ``(start, end)`` into their images."""
        result: list[tuple[int, int]] = []
        pending = [(s, e) for s, e in intervals if s < e]
        for mapping in self.ranges:
            remaining: list[tuple[int, int]] = []
            for start, end in pending:
                low = max(start, mapping.source)
                high = min(end, mapping.source_end)
                if low >= high:
                    remaining.append((start, end))
                    continue
                result.append((mapping.map(low), mapping.map(high - 1) + 1))
                if start < low:
                    remaining.append((start, low))
                if high < end:
                    remaining.append((high, end))
            pending = remaining
        result.extend(pending)
        return result


@dataclass(frozen=True)
class Almanac:
    """The listed seeds and the tables applied to them in order."""

    seeds: tuple[int, ...]
    tables: tuple[Table, ...] = field(default_factory=tuple)

    def location(self, value: int) -> int:
        """Run ``value`` through every table in turn."""
        for table in self.tables:
            value = table.lookup(value)
        return value

    def seed_ranges(self) -> Iterator[tuple[int, int]]:
        """The seeds read as (start, length) pairs; an odd last number is ignored."""
        return zip(self.seeds[::2], self.seeds[1::2])

    def location_intervals(
        self, intervals: Iterable[tuple[int, int]]
    ) -> list[tuple[int, int]]:
        """Half-open location intervals reached from half-open seed intervals."""
        current = list(intervals)
        for table in self.tables:
            current = table.lookup_intervals(current)
        return current


def parse_almanac(text: str) -> Almanac:
    """Parse the seed line followed by ``name map:`` blocks of three-number lines."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("almanac is empty")
    seeds = tuple(int(n) for n in _NUMBER.findall(lines[0]))

    tables: list[Table] = []
    name: str | None = None
    ranges: list[MappingRange] = []
    for line in lines[1:]:
        if ":" in line:
            if name is not None:
                tables.append(Table(name, tuple(ranges)))
            name = line.split(":", 1)[0].strip()
            ranges = []
            continue
        numbers = [int(n) for n in _NUMBER.findall(line)]
        if not numbers:
            continue
        if name is None:
            raise ValueError(f"range line before any table header: {line!r}")
        if len(numbers) != 3:
            raise ValueError(f"range line needs three numbers: {line!r}")
        ranges.append(MappingRange(*numbers))
    if name is not None:
        tables.append(Table(name, tuple(ranges)))
    return Almanac(seeds, tuple(tables))


def lowest_location(text: str) -> int:
    """Lowest location of any listed seed."""
    almanac = parse_almanac(text)
    if not almanac.seeds:
        raise ValueError("almanac lists no seeds")
    return min(almanac.location(seed) for seed in almanac.seeds)


def lowest_location_of_ranges(text: str) -> int:
    """Lowest location of any seed when the seeds are read as (start, length) pairs."""
    almanac = parse_almanac(text)
    intervals = [
        (start, start + length)
        for start, length in almanac.seed_ranges()
        if length > 0
    ]
    if not intervals:
        raise ValueError("almanac lists no seed ranges")
    return min(start for start, _ in almanac.location_intervals(intervals))