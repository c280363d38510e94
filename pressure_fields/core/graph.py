"""Graph of pressure nodes.

The graph is an ordered list of :class:`Node` objects.  A node's index is
its only identity, and every edge is recorded on both endpoints.
"""

from __future__ import annotations

from typing import Iterator

import numpy as np

from .node import Node


class Graph:
    """An undirected spatial graph with per-node pressure."""

    def __init__(self) -> None:
        self.nodes: list[Node] = []

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def __getitem__(self, index: int) -> Node:
        return self.nodes[index]

    def add_node(
        self,
        position: tuple[float, float] | np.ndarray,
        pressure: float = 0.0,
    ) -> int:
        """Append a node and return its index."""
        self.nodes.append(Node(pressure=pressure, position=position))
        return len(self.nodes) - 1

    def connect(self, i: int, j: int) -> None:
        """Record an edge between *i* and *j* on both endpoints.

        Duplicate edges are kept.  A self pair lists the node twice.
        """
        self.nodes[i].connections.append(j)
        self.nodes[j].connections.append(i)

    def clone(self) -> Graph:
        """Deep copy of positions, pressures and connection lists."""
        g = Graph()
        g.nodes = [node.clone() for node in self.nodes]
        return g

    # ── Read helpers ─────────────────────────────────────────────────

    def positions(self) -> np.ndarray:
        if not self.nodes:
            return np.zeros((0, 2), dtype=float)
        return np.array([node.position for node in self.nodes])

    def pressures(self) -> np.ndarray:
        return np.array([node.pressure for node in self.nodes], dtype=float)

    def total_pressure(self) -> float:
        return float(sum(node.pressure for node in self.nodes))

    def edges(self) -> list[tuple[int, int]]:
        """Unique unordered edges as ``(i, j)`` pairs with ``i <= j``."""
        seen: set[tuple[int, int]] = set()
        edges: list[tuple[int, int]] = []
        for i, node in enumerate(self.nodes):
            for j in node.connections:
                pair = (min(i, j), max(i, j))
                if pair not in seen:
                    seen.add(pair)
                    edges.append(pair)
        return edges

    def is_symmetric(self) -> bool:
        """True if every connection is listed on both of its endpoints.

        Multiplicity is compared as well, so a duplicated edge must be
        duplicated on both sides.
        """
        for i, node in enumerate(self.nodes):
            for j in set(node.connections):
                if j == i:
                    continue
                if node.connections.count(j) != self.nodes[j].connections.count(i):
                    return False
            if node.connections.count(i) % 2:
                return False
        return True

    def same_topology(self, other: Graph) -> bool:
        """True if *other* has the same node count, positions and edges."""
        if len(self) != len(other):
            return False
        for a, b in zip(self.nodes, other.nodes):
            if not np.array_equal(a.position, b.position):
                return False
            if a.connections != b.connections:
                return False
        return True
