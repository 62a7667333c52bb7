"""TraversalIndex -- adjacency lists derived from a GraphStore snapshot.

Public API:
    TraversalIndex: Read-only outgoing / incoming edge lists per vertex.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .types import Direction, Edge

logger = logging.getLogger(__name__)


class TraversalIndex:
    """Outgoing and incoming edge lists keyed by vertex id.

    Built once from a snapshot's vertices and edges and never mutated;
    every algorithm walks the graph through this index.

    Args:
        vertex_ids: All vertex ids of the snapshot, in store order.
        edges: All edges of the snapshot; endpoints must be in *vertex_ids*.
    """

    def __init__(self, vertex_ids: Iterable[str], edges: Iterable[Edge]) -> None:
        out: dict[str, list[Edge]] = {}
        inc: dict[str, list[Edge]] = {}
        for vid in vertex_ids:
            out[vid] = []
            inc[vid] = []
        count = 0
        for edge in edges:
            out[edge.src].append(edge)
            inc[edge.dst].append(edge)
            count += 1

        self._out: dict[str, tuple[Edge, ...]] = {k: tuple(v) for k, v in out.items()}
        self._in: dict[str, tuple[Edge, ...]] = {k: tuple(v) for k, v in inc.items()}
        self._undirected: dict[str, frozenset[str]] = {}
        logger.debug("TraversalIndex built: %d vertices, %d edges", len(self._out), count)

    @property
    def vertex_ids(self) -> tuple[str, ...]:
        return tuple(self._out)

    def out_edges(self, vertex_id: str) -> tuple[Edge, ...]:
        """Edges whose ``src`` is *vertex_id*."""
        return self._out.get(vertex_id, ())

    def in_edges(self, vertex_id: str) -> tuple[Edge, ...]:
        """Edges whose ``dst`` is *vertex_id*."""
        return self._in.get(vertex_id, ())

    def out_degree(self, vertex_id: str) -> int:
        return len(self.out_edges(vertex_id))

    def in_degree(self, vertex_id: str) -> int:
        return len(self.in_edges(vertex_id))

    def neighbors(
        self,
        vertex_id: str,
        direction: Direction = Direction.BOTH,
    ) -> list[tuple[Edge, str]]:
        """Return ``(edge, neighbor_id)`` pairs adjacent to *vertex_id*.

        Every edge occurrence is reported, so parallel edges and edges
        in both directions each contribute one pair.
        """
        pairs: list[tuple[Edge, str]] = []
        if direction in (Direction.OUTGOING, Direction.BOTH):
            pairs.extend((e, e.dst) for e in self.out_edges(vertex_id))
        if direction in (Direction.INCOMING, Direction.BOTH):
            pairs.extend((e, e.src) for e in self.in_edges(vertex_id))
        return pairs

    def undirected_neighbors(self, vertex_id: str) -> frozenset[str]:
        """Distinct neighbour ids ignoring direction, self-loops excluded."""
        cached = self._undirected.get(vertex_id)
        if cached is None:
            ids = {other for _, other in self.neighbors(vertex_id)}
            ids.discard(vertex_id)
            cached = frozenset(ids)
            self._undirected[vertex_id] = cached
        return cached


__all__ = ["TraversalIndex"]
