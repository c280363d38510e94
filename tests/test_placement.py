"""Tests for spatial placement."""

from __future__ import annotations

from itertools import combinations

import numpy as np
import pytest

from pressure_fields.core.errors import ConfigurationError
from pressure_fields.simulation.placement import (
    manhattan_distance, place_nodes, separation_threshold,
)


class TestPlacement:
    def test_zero_nodes(self, rng):
        assert place_nodes(0, 100, 100, rng) == []

    def test_count_and_bounds(self, rng):
        positions = place_nodes(10, 800, 600, rng)
        assert len(positions) == 10
        for p in positions:
            assert 0 <= p[0] < 800
            assert 0 <= p[1] < 600

    def test_positions_are_whole_pixels(self, rng):
        for p in place_nodes(8, 320, 240, rng):
            assert np.array_equal(p, np.floor(p))

    def test_separation_invariant(self, rng):
        width, height, n = 800, 600, 20
        threshold = separation_threshold(n, width, height)
        positions = place_nodes(n, width, height, rng)
        for p, q in combinations(positions, 2):
            assert manhattan_distance(p, q) > threshold

    def test_threshold(self):
        assert separation_threshold(10, 800, 600) == 140.0

    def test_manhattan_distance(self):
        assert manhattan_distance(np.array([0, 0]), np.array([3, -4])) == 7.0

    def test_seeded_placement_reproducible(self):
        a = place_nodes(5, 400, 400, np.random.default_rng(7))
        b = place_nodes(5, 400, 400, np.random.default_rng(7))
        for p, q in zip(a, b):
            assert np.array_equal(p, q)

    def test_bounded_attempts_raise(self, rng):
        # Two nodes in a 2x2 region need a distance above 2, impossible.
        with pytest.raises(ConfigurationError):
            place_nodes(2, 2, 2, rng, max_attempts=200)
