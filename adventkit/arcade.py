"""Claw machines: the cheapest button presses that land the claw on the prize."""

from __future__ import annotations

import re
from dataclasses import dataclass
from fractions import Fraction

PART_TWO_OFFSET = 10_000_000_000_000
A_COST = 3
B_COST = 1

_NUMBER = re.compile(r"-?\d+")


@dataclass(frozen=True)
class Machine:
    """Button A and B moves and the prize position."""

    ax: int
    ay: int
    bx: int
    by: int
    px: int
    py: int

    def presses(self) -> tuple[Fraction, Fraction] | None:
        """Presses of A and B that reach the prize, or None if the buttons are parallel."""
        det = self.ax * self.by - self.ay * self.bx
        if det == 0:
            return None
        a = Fraction(self.px * self.by - self.py * self.bx, det)
        b = Fraction(self.ax * self.py - self.ay * self.px, det)
        return a, b

    def cost(self) -> int:
        """Tokens needed to win, or 0 unless both buttons take a positive whole count."""
        counts = self.presses()
        if counts is None:
            return 0
        a, b = counts
        if a <= 0 or b <= 0 or a.denominator != 1 or b.denominator != 1:
            return 0
        return A_COST * int(a) + B_COST * int(b)


def parse_machines(text: str, offset: int = 0) -> list[Machine]:
    """Parse blocks of button A, button B and prize lines; ``offset`` moves the prize."""
    lines = [line for line in text.splitlines() if line.strip()]
    if len(lines) % 3:
        raise ValueError("machine descriptions come in groups of three lines")
    machines = []
    for button_a, button_b, prize in zip(*[iter(lines)] * 3):
        values = []
        for line in (button_a, button_b, prize):
            numbers = [int(n) for n in _NUMBER.findall(line)]
            if len(numbers) != 2:
                raise ValueError(f"line needs an X and a Y value: {line!r}")
            values.extend(numbers)
        ax, ay, bx, by, px, py = values
        machines.append(Machine(ax, ay, bx, by, px + offset, py + offset))
    return machines


def fewest_tokens(text: str, offset: int = 0) -> int:
    """Tokens needed to win every prize that can be won."""
    return sum(machine.cost() for machine in parse_machines(text, offset))