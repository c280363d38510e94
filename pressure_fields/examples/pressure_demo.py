"""Pressure diffusion demo.

Generates a random graph with the default configuration (10 nodes,
connection density 0.2, two sources) and animates diffusion at one step
every 500 ms until the window is closed.
"""

from __future__ import annotations

import logging

import matplotlib.pyplot as plt

from ..config import SimulationConfig, create_engine
from ..logging_config import setup_logging
from ..visualization.renderer import PressureRenderer

logger = logging.getLogger(__name__)


def main(config: SimulationConfig | None = None) -> None:
    setup_logging(level=logging.INFO)
    config = config or SimulationConfig()

    engine = create_engine(config)
    logger.info("Initial total pressure: %.3f", engine.current.total_pressure())

    renderer = PressureRenderer(engine, config.width, config.height)
    anim = renderer.animate(interval_ms=config.frame_interval_ms)  # noqa: F841
    plt.show()


if __name__ == "__main__":
    main()
