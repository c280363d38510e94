"""Tests for simulation configuration."""

from __future__ import annotations

import pytest

from pressure_fields.config import SimulationConfig, create_engine, generate_graph
from pressure_fields.core.errors import ConfigurationError


class TestSimulationConfig:
    def test_defaults(self):
        cfg = SimulationConfig()
        assert cfg.max_nodes == 10
        assert cfg.connection_density == 0.2
        assert cfg.source_count == 2
        assert cfg.pressure_scale == 0.01
        assert cfg.frame_interval_ms == 500
        cfg.validate()

    @pytest.mark.parametrize("overrides", [
        {"source_count": 11},
        {"max_nodes": -1},
        {"source_count": -1},
        {"connection_density": -0.1},
        {"connection_density": 1.1},
        {"width": 0},
        {"height": -5},
        {"pressure_scale": 0.0},
        {"frame_interval_ms": 0},
        {"max_attempts": 0},
    ])
    def test_validate_rejects(self, overrides):
        with pytest.raises(ConfigurationError):
            SimulationConfig(**overrides).validate()

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            SimulationConfig(source_count=20).validate()

    def test_seeded_generation(self):
        cfg = SimulationConfig(seed=11)
        a = generate_graph(cfg)
        b = generate_graph(cfg)
        assert a.same_topology(b)
        assert a.total_pressure() == 2.0

    def test_create_engine(self):
        cfg = SimulationConfig(seed=5, pressure_scale=0.02)
        engine = create_engine(cfg)
        assert engine.pressure_scale == 0.02
        assert len(engine.current) == cfg.max_nodes

    def test_bounded_generation_fails(self):
        cfg = SimulationConfig(max_nodes=50, source_count=1, width=5, height=5,
                               max_attempts=500, seed=1)
        with pytest.raises(ConfigurationError):
            generate_graph(cfg)
