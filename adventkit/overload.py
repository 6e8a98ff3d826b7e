"""Component wiring: find the three busiest wires and split the machine in two."""

from __future__ import annotations

import re
from collections import deque
from collections.abc import Collection, Iterable

_SEPARATORS = re.compile(r"[:\s]+")


class Wiring:
    """Named components and the wires between them, each wire numbered in order."""

    def __init__(self, nodes: Iterable[str], edges: Iterable[tuple[str, str]]) -> None:
        self.nodes: tuple[str, ...] = tuple(nodes)
        self.edges: tuple[tuple[str, str], ...] = tuple(edges)
        self._adjacency: dict[str, list[tuple[str, int]]] = {
            node: [] for node in self.nodes
        }
        for index, (first, second) in enumerate(self.edges):
            if first not in self._adjacency or second not in self._adjacency:
                raise ValueError(f"wire joins an unknown component: {first}-{second}")
            self._adjacency[first].append((second, index))
            self._adjacency[second].append((first, index))

    def edge_traffic(self) -> list[int]:
        """For each wire, how many component pairs' shortest routes run along it."""
        traffic = [0] * len(self.edges)
        position = {node: index for index, node in enumerate(self.nodes)}
        for index, source in enumerate(self.nodes):
            parent: dict[str, tuple[str, int] | None] = {source: None}
            order = [source]
            queue = deque([source])
            while queue:
                node = queue.popleft()
                for neighbour, wire in self._adjacency[node]:
                    if neighbour not in parent:
                        parent[neighbour] = (node, wire)
                        order.append(neighbour)
                        queue.append(neighbour)
            below: dict[str, int] = {}
            for node in reversed(order):
                count = below.get(node, 0) + (1 if position[node] > index else 0)
                link = parent[node]
                if link is not None:
                    upper, wire = link
                    traffic[wire] += count
                    below[upper] = below.get(upper, 0) + count
        return traffic

    def component_size(self, start: str, removed: Collection[int] = ()) -> int:
        """Components reachable from ``start`` without using the removed wires."""
        if start not in self._adjacency:
            raise ValueError(f"unknown component {start!r}")
        cut = set(removed)
        seen = {start}
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for neighbour, wire in self._adjacency[node]:
                if wire not in cut and neighbour not in seen:
                    seen.add(neighbour)
                    queue.append(neighbour)
        return len(seen)


def parse_wiring(text: str) -> Wiring:
    """Parse ``name: other other ...`` lines up to the first blank line."""
    nodes: list[str] = []
    listed: list[tuple[str, list[str]]] = []
    for line in text.splitlines():
        if not line.strip():
            break
        tokens = [token for token in _SEPARATORS.split(line) if token]
        name, targets = tokens[0], tokens[1:]
        if name not in nodes:
            nodes.append(name)
        listed.append((name, targets))

    known = set(nodes)
    edges: list[tuple[str, str]] = []
    for name, targets in listed:
        for target in targets:
            if target not in known:
                known.add(target)
                nodes.append(target)
            edges.append((name, target))
    return Wiring(nodes, edges)


def cut_product(text: str) -> int:
    """Cut the three busiest wires and multiply the sizes of the two sides."""
    wiring = parse_wiring(text)
    if len(wiring.edges) < 3:
        raise ValueError("wiring needs at least three wires to cut")
    traffic = wiring.edge_traffic()
    busiest = sorted(range(len(traffic)), key=lambda wire: -traffic[wire])[:3]
    size = wiring.component_size(wiring.nodes[0], busiest)
    return size * (len(wiring.nodes) - size)