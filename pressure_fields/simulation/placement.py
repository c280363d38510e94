"""Spatial placement of graph nodes.

Positions are drawn uniformly inside a ``width x height`` region and
rejected until every pair is further apart (Manhattan distance) than
``(width + height) / max_nodes``.
"""

from __future__ import annotations

import logging
import math

import numpy as np

from ..core.errors import ConfigurationError

logger = logging.getLogger(__name__)


def manhattan_distance(a: np.ndarray, b: np.ndarray) -> float:
    return float(np.abs(np.asarray(a, dtype=float) - np.asarray(b, dtype=float)).sum())


def separation_threshold(max_nodes: int, width: float, height: float) -> float:
    """Minimum Manhattan distance two accepted positions must exceed."""
    return (width + height) / max_nodes


def place_nodes(
    max_nodes: int,
    width: float,
    height: float,
    rng: np.random.Generator | None = None,
    max_attempts: int | None = None,
) -> list[np.ndarray]:
    """Draw *max_nodes* well-separated pixel positions.

    Candidates are ``(floor(u * width), floor(u * height))``.  A candidate
    is kept only if its minimum distance to the positions accepted so far
    is strictly greater than :func:`separation_threshold`.

    With ``max_attempts=None`` sampling never gives up, so a threshold
    that cannot be satisfied in the region loops forever; callers should
    keep *max_nodes* small relative to the area.  With an integer budget
    a :class:`ConfigurationError` is raised once that many candidates
    have been drawn.
    """
    if max_nodes <= 0:
        return []

    rng = rng or np.random.default_rng()
    threshold = separation_threshold(max_nodes, width, height)
    bounds = np.array([width, height], dtype=float)
    accepted: list[np.ndarray] = []
    attempts = 0

    while len(accepted) < max_nodes:
        if max_attempts is not None and attempts >= max_attempts:
            raise ConfigurationError(
                f"placed {len(accepted)} of {max_nodes} nodes after "
                f"{attempts} attempts; separation {threshold:.2f} is too "
                f"large for a {width}x{height} region"
            )
        attempts += 1
        candidate = np.floor(rng.random(2) * bounds)

        if accepted:
            min_dist = float(np.abs(np.asarray(accepted) - candidate).sum(axis=1).min())
        else:
            min_dist = math.inf

        if min_dist > threshold:
            accepted.append(candidate)

    logger.debug(
        "Placed %d nodes in %d attempts (threshold %.2f)",
        max_nodes, attempts, threshold,
    )
    return accepted
