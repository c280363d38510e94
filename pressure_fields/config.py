"""
Simulation Configuration
========================
Parameters for generating a graph and driving the diffusion engine.

The defaults reproduce the reference setup: ten well-separated nodes on an
800x600 surface, a 20% chance of connecting any pair, two sources and one
frame every 500 ms.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .core.errors import ConfigurationError
from .core.graph import Graph
from .simulation.builder import generate
from .simulation.engine import DiffusionEngine, PRESSURE_SCALE


@dataclass
class SimulationConfig:
    """Configuration for one simulation run."""

    max_nodes: int = 10
    connection_density: float = 0.2
    source_count: int = 2
    width: float = 800.0  # Drawing surface, pixels
    height: float = 600.0
    pressure_scale: float = PRESSURE_SCALE
    frame_interval_ms: int = 500
    allow_self_loops: bool = False
    # None samples until success; an int turns hopeless parameters into
    # a ConfigurationError after that many draws.
    max_attempts: int | None = None
    seed: int | None = None

    def validate(self) -> None:
        if self.max_nodes < 0:
            raise ConfigurationError(f"max_nodes must be >= 0, got {self.max_nodes}")
        if self.source_count < 0:
            raise ConfigurationError(f"source_count must be >= 0, got {self.source_count}")
        if self.source_count > self.max_nodes:
            raise ConfigurationError(
                f"source_count ({self.source_count}) exceeds max_nodes ({self.max_nodes})"
            )
        if not 0.0 <= self.connection_density <= 1.0:
            raise ConfigurationError(
                f"connection_density must lie in [0, 1], got {self.connection_density}"
            )
        if self.width <= 0 or self.height <= 0:
            raise ConfigurationError(
                f"region must be positive, got {self.width}x{self.height}"
            )
        if self.pressure_scale <= 0:
            raise ConfigurationError(
                f"pressure_scale must be positive, got {self.pressure_scale}"
            )
        if self.frame_interval_ms <= 0:
            raise ConfigurationError(
                f"frame_interval_ms must be positive, got {self.frame_interval_ms}"
            )
        if self.max_attempts is not None and self.max_attempts <= 0:
            raise ConfigurationError(
                f"max_attempts must be positive or None, got {self.max_attempts}"
            )

    def rng(self) -> np.random.Generator:
        return np.random.default_rng(self.seed)


def generate_graph(config: SimulationConfig, rng: np.random.Generator | None = None) -> Graph:
    """Validate *config* and generate its graph."""
    config.validate()
    return generate(
        config.max_nodes,
        config.connection_density,
        config.source_count,
        config.width,
        config.height,
        rng or config.rng(),
        allow_self_loops=config.allow_self_loops,
        max_attempts=config.max_attempts,
    )


def create_engine(config: SimulationConfig, rng: np.random.Generator | None = None) -> DiffusionEngine:
    """Generate a graph from *config* and wrap it in a diffusion engine."""
    return DiffusionEngine(generate_graph(config, rng), config.pressure_scale)
