"""Diffusion engine: double-buffered pressure propagation over a graph."""

from __future__ import annotations

import logging

import numpy as np

from ..core.graph import Graph

logger = logging.getLogger(__name__)

PRESSURE_SCALE = 0.01


def next_pressure(own: float, delta: float, scale: float = PRESSURE_SCALE) -> float:
    """Explicit update for one node, clamped below at zero.

    There is no upper clamp: a node fed by several high-pressure
    neighbours may rise above 1.0.
    """
    return max(0.0, own + delta * scale)


def diffusion_step(source: Graph, target: Graph, scale: float = PRESSURE_SCALE) -> None:
    """Read every pressure from *source*, write every update into *target*.

    The two graphs must share topology.  Nothing is written to *source*,
    so the result does not depend on the order nodes are visited in.
    """
    for n, node in enumerate(source.nodes):
        own = node.pressure
        delta = 0.0
        for m in node.connections:
            delta += source.nodes[m].pressure - own
        target.nodes[n].pressure = next_pressure(own, delta, scale)


class DiffusionEngine:
    """Synchronous diffusion engine over two fixed graph buffers.

    Each :meth:`advance` reads from :attr:`current`, writes into
    :attr:`next` and then flips which slot is current.  The engine has no
    loop, timer or stopping condition of its own; a driver calls
    :meth:`advance` and reads :attr:`current` for as long as it likes.
    """

    def __init__(self, graph: Graph, pressure_scale: float = PRESSURE_SCALE) -> None:
        self.pressure_scale = pressure_scale
        self._buffers = (graph.clone(), graph.clone())
        self._active = 0

    @property
    def current(self) -> Graph:
        """The graph holding the latest pressures.  Treat as read-only."""
        return self._buffers[self._active]

    @property
    def next(self) -> Graph:
        return self._buffers[1 - self._active]

    def advance(self) -> None:
        """Advance every node by one diffusion step and swap buffers."""
        diffusion_step(self.current, self.next, self.pressure_scale)
        self._active = 1 - self._active
        logger.debug("Advanced: total pressure %.6f", self.current.total_pressure())

    def pressures(self) -> np.ndarray:
        """Copy of the current pressures, indexed by node."""
        return self.current.pressures()
