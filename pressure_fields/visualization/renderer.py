"""Matplotlib rendering of the pressure graph.

Drawing happens in surface coordinates: origin at the top-left corner,
y growing downward, one data unit per pixel.
"""

from __future__ import annotations

import colorsys
import logging
from typing import Any

import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation
from matplotlib.patches import Circle

from ..simulation.engine import DiffusionEngine

logger = logging.getLogger(__name__)

NODE_RADIUS = 10.0
NODE_RGB = colorsys.hls_to_rgb(181 / 360, 0.47, 1.0)
LABEL_OFFSET = 15.0
EDGE_MARGIN = 20.0


def label_position(
    x: float, y: float, width: float, height: float,
) -> tuple[float, float]:
    """Place a node label below the node, keeping it on the surface.

    The label moves above the node near the bottom edge and to the left
    near the right edge.
    """
    tx, ty = x, y + LABEL_OFFSET
    if height - y < EDGE_MARGIN:
        ty = y - LABEL_OFFSET
    if width - x < EDGE_MARGIN:
        tx = x - EDGE_MARGIN
    return tx, ty


class PressureRenderer:
    """Draws the engine's current graph: edges, nodes and pressure labels."""

    def __init__(self, engine: DiffusionEngine, width: float, height: float) -> None:
        self.engine = engine
        self.width = width
        self.height = height

    def draw(self, ax: Any = None, *, title: str | None = None) -> Any:
        """Clear *ax* and draw the current buffer onto it."""
        if ax is None:
            _fig, ax = plt.subplots(1, 1, figsize=(self.width / 100, self.height / 100))

        ax.clear()
        ax.set_facecolor("white")
        ax.set_xlim(0, self.width)
        ax.set_ylim(self.height, 0)
        ax.set_aspect("equal")
        ax.set_xticks([])
        ax.set_yticks([])

        graph = self.engine.current
        for i, j in graph.edges():
            a, b = graph.nodes[i], graph.nodes[j]
            ax.plot([a.x, b.x], [a.y, b.y], color="black", linewidth=1.0, zorder=1)

        for node in graph:
            alpha = min(max(node.pressure, 0.0), 1.0)
            ax.add_patch(Circle(
                (node.x, node.y), NODE_RADIUS,
                facecolor=(*NODE_RGB, alpha), edgecolor="black", zorder=2,
            ))
            tx, ty = label_position(node.x, node.y, self.width, self.height)
            ax.text(tx, ty, f"Pressure: {node.pressure:.4f}",
                    family="monospace", fontsize=7, color="black", zorder=3)

        if title is not None:
            ax.set_title(title)
        return ax

    def animate(
        self,
        interval_ms: int = 500,
        frames: int | None = None,
        *,
        title: str = "Pressure Diffusion",
    ) -> FuncAnimation:
        """Animate the simulation, one diffusion step per frame.

        Each frame draws the current buffer and then advances the engine.
        With ``frames=None`` the animation runs until the window closes.
        """
        fig, ax = plt.subplots(1, 1, figsize=(self.width / 100, self.height / 100))

        def update(frame: int) -> Any:
            self.draw(ax, title=f"{title} — Step {frame}")
            self.engine.advance()
            return (ax,)

        logger.debug("Starting animation at %d ms per frame", interval_ms)
        anim = FuncAnimation(fig, update, frames=frames, interval=interval_ms,
                             blit=False, cache_frame_data=False)
        return anim
