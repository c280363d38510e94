"""Node model for the pressure diffusion graph."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np


@dataclass
class Node:
    """A single simulation site.

    A node has a scalar pressure, a fixed 2D position and a list of
    neighbour indices.  Connections are stored symmetrically by
    :meth:`Graph.connect`, so a node never owns half an edge.
    """

    pressure: float
    position: np.ndarray  # shape (2,)
    connections: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.position = np.asarray(self.position, dtype=float)

    @property
    def x(self) -> float:
        return float(self.position[0])

    @property
    def y(self) -> float:
        return float(self.position[1])

    def clone(self) -> Node:
        return Node(
            pressure=self.pressure,
            position=self.position.copy(),
            connections=list(self.connections),
        )
