"""
Pytest configuration and shared fixtures.
"""

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from pressure_fields.core.graph import Graph


@pytest.fixture
def rng():
    """Reproducible random number generator."""
    return np.random.default_rng(seed=42)


@pytest.fixture
def pair_graph():
    """Two connected nodes, node 0 at full pressure."""
    g = Graph()
    g.add_node((0, 0), pressure=1.0)
    g.add_node((10, 0), pressure=0.0)
    g.connect(0, 1)
    return g
