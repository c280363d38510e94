"""Graph construction: random connections and pressure sources."""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from ..core.errors import ConfigurationError
from ..core.graph import Graph
from .placement import place_nodes

logger = logging.getLogger(__name__)

SOURCE_PRESSURE = 1.0


def connect_randomly(
    graph: Graph,
    connection_density: float,
    rng: np.random.Generator,
    allow_self_loops: bool = False,
) -> int:
    """Connect each unordered pair with probability *connection_density*.

    Pairs are visited as ``(i, j)`` with ``i <= j``; the self pair is
    skipped unless *allow_self_loops* is set.  A self loop adds nothing to
    a node's pressure update.  Returns the number of edges added.
    """
    n = len(graph)
    added = 0
    for i in range(n):
        start = i if allow_self_loops else i + 1
        for j in range(start, n):
            if rng.random() < connection_density:
                graph.connect(i, j)
                added += 1
    return added


def mark_sources(
    graph: Graph,
    source_count: int,
    rng: np.random.Generator,
    max_attempts: int | None = None,
) -> list[int]:
    """Set *source_count* distinct zero-pressure nodes to ``SOURCE_PRESSURE``.

    Each source is drawn uniformly and redrawn while it lands on a node
    that already has pressure.  Asking for more sources than there are
    zero-pressure nodes never terminates unless *max_attempts* bounds the
    draws per source.
    """
    n = len(graph)
    sources: list[int] = []
    for _ in range(source_count):
        if n == 0:
            raise ConfigurationError("cannot place a source in an empty graph")
        candidate = int(rng.integers(n))
        draws = 1
        while graph.nodes[candidate].pressure != 0.0:
            if max_attempts is not None and draws >= max_attempts:
                raise ConfigurationError(
                    f"no free node for source {len(sources) + 1} of "
                    f"{source_count} after {draws} draws"
                )
            candidate = int(rng.integers(n))
            draws += 1
        graph.nodes[candidate].pressure = SOURCE_PRESSURE
        sources.append(candidate)
    return sources


def build(
    positions: Sequence[np.ndarray | tuple[float, float]],
    connection_density: float,
    source_count: int,
    rng: np.random.Generator | None = None,
    *,
    allow_self_loops: bool = False,
    max_attempts: int | None = None,
) -> Graph:
    """Create a graph from *positions*, connect it and tag the sources."""
    rng = rng or np.random.default_rng()
    graph = Graph()
    for pos in positions:
        graph.add_node(pos)
    edges = connect_randomly(graph, connection_density, rng, allow_self_loops)
    sources = mark_sources(graph, source_count, rng, max_attempts)
    logger.debug("Built graph: %d nodes, %d edges, sources %s",
                 len(graph), edges, sources)
    return graph


def generate(
    max_nodes: int,
    connection_density: float,
    source_count: int,
    width: float,
    height: float,
    rng: np.random.Generator | None = None,
    *,
    allow_self_loops: bool = False,
    max_attempts: int | None = None,
) -> Graph:
    """Place *max_nodes* nodes in the region and build a source-tagged graph.

    Parameters that could never produce a graph (more sources than nodes,
    negative counts, an empty region, a density outside ``[0, 1]``) raise
    :class:`ConfigurationError` before any sampling happens.
    """
    if max_nodes < 0 or source_count < 0:
        raise ConfigurationError("max_nodes and source_count must be non-negative")
    if source_count > max_nodes:
        raise ConfigurationError(
            f"source_count ({source_count}) exceeds max_nodes ({max_nodes})"
        )
    if not 0.0 <= connection_density <= 1.0:
        raise ConfigurationError(
            f"connection_density must lie in [0, 1], got {connection_density}"
        )
    if width <= 0 or height <= 0:
        raise ConfigurationError(f"region must be positive, got {width}x{height}")

    rng = rng or np.random.default_rng()
    positions = place_nodes(max_nodes, width, height, rng, max_attempts)
    graph = build(
        positions, connection_density, source_count, rng,
        allow_self_loops=allow_self_loops, max_attempts=max_attempts,
    )
    logger.info(
        "Generated graph with %d nodes, %d edges and %d sources",
        len(graph), len(graph.edges()), source_count,
    )
    return graph
