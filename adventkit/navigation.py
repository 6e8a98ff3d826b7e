"""Desert map networks: following left/right instructions between nodes."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from itertools import cycle
from math import lcm

_NODE_WORD = re.compile(r"[^\s=(),]+")


@dataclass(frozen=True)
class Network:
    """Turn instructions and each node's (left, right) neighbours."""

    directions: str
    nodes: Mapping[str, tuple[str, str]]

    def _step(self, node: str, turn: str) -> str:
        try:
            left, right = self.nodes[node]
        except KeyError:
            raise ValueError(f"unknown node {node!r}") from None
        return right if turn == "R" else left

    def walk(self, start: str) -> Iterator[str]:
        """Yield each node reached, one per instruction, repeating the instructions."""
        if not self.directions:
            raise ValueError("network has no directions")
        node = start
        for turn in cycle(self.directions):
            node = self._step(node, turn)
            yield node

    def steps_until(self, start: str, is_goal: Callable[[str], bool]) -> int:
        """Steps taken from ``start`` (at least one) until a goal node is reached."""
        seen: set[tuple[str, int]] = set()
        period = len(self.directions)
        for steps, node in enumerate(self.walk(start), start=1):
            if is_goal(node):
                return steps
            state = (node, steps % period)
            if state in seen:
                raise ValueError(f"no goal node can be reached from {start!r}")
            seen.add(state)
        raise AssertionError("walk ended unexpectedly")


def parse_network(text: str) -> Network:
    """Parse the instruction line, skip the next line, then read node lines."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("network description is empty")
    directions = lines[0].strip()
    nodes: dict[str, tuple[str, str]] = {}
    for line in lines[2:]:
        if not line.strip():
            break
        words = _NODE_WORD.findall(line)
        if len(words) < 3:
            raise ValueError(f"node line needs a name and two neighbours: {line!r}")
        nodes[words[0]] = (words[1], words[2])
    return Network(directions, nodes)


def steps_to_zzz(text: str) -> int:
    """Steps needed to go from AAA to ZZZ."""
    network = parse_network(text)
    if "AAA" not in network.nodes:
        raise ValueError("network has no node AAA")
    return network.steps_until("AAA", lambda node: node == "ZZZ")


def ghost_steps(text: str) -> int:
    """Steps until every node ending in A is simultaneously on a node ending in Z."""
    network = parse_network(text)
    starts = [name for name in network.nodes if name[2:3] == "A"]
    if not starts:
        raise ValueError("network has no starting nodes")
    lengths = [
        network.steps_until(start, lambda node: node[2:3] == "Z") for start in starts
    ]
    return lcm(*lengths)