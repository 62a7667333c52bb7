"""Breadth-first search between vertex sets.

Public API:
    BFSConfig: Source / target predicates, edge filter and hop limit.
    bfs(store, config) -> tuple[PathBinding, ...]
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..exceptions import ValidationError
from ..graph import Edge, GraphStore, PathBinding, Vertex

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BFSConfig:
    """Configuration for :func:`bfs`.

    Attributes:
        from_predicate: Selects the source vertices.
        to_predicate: Selects the target vertices.
        edge_filter: Optional predicate every traversed edge must satisfy.
        max_path_length: Maximum number of hops; ``None`` for unbounded.
    """

    from_predicate: Callable[[Vertex], bool]
    to_predicate: Callable[[Vertex], bool]
    edge_filter: Callable[[Edge], bool] | None = None
    max_path_length: int | None = None

    def __post_init__(self) -> None:
        if self.max_path_length is not None and self.max_path_length < 1:
            raise ValidationError(
                f"max_path_length must be >= 1, got {self.max_path_length}"
            )


def bfs(store: GraphStore, config: BFSConfig) -> tuple[PathBinding, ...]:
    """Find the shortest paths from any source to any target.

    The search expands all sources together, one level at a time, along
    outgoing edges.  A vertex first reached at an earlier level is never
    re-entered.  The search stops at the first level that reaches a
    target, and every path of that length ending at a target is returned.

    Paths are bound as ``from, e0, v1, e1, ..., to``.  A source that is
    itself a target yields a zero-hop path binding only ``from``.

    Returns:
        The shortest paths, or an empty tuple if no target is reachable
        within ``max_path_length`` hops.
    """
    index = store.index
    sources = [v for v in store.vertices if config.from_predicate(v)]
    if not sources:
        logger.debug("BFS: no vertex satisfies the source predicate")
        return ()

    direct = [s for s in sources if config.to_predicate(s)]
    if direct:
        return tuple(PathBinding([("from", s)]) for s in direct)

    visited: set[str] = {s.vertex_id for s in sources}
    frontier: list[str] = [s.vertex_id for s in sources]
    # Edges reaching each vertex from the previous level, per level.
    levels: list[dict[str, list[Edge]]] = []

    while frontier:
        if config.max_path_length is not None and len(levels) >= config.max_path_length:
            break

        reached: dict[str, list[Edge]] = {}
        for vid in frontier:
            for edge in index.out_edges(vid):
                if edge.dst in visited:
                    continue
                if config.edge_filter is not None and not config.edge_filter(edge):
                    continue
                reached.setdefault(edge.dst, []).append(edge)
        levels.append(reached)

        hits = [vid for vid in reached if config.to_predicate(store.get_vertex(vid))]
        if hits:
            paths = [p for vid in hits for p in _paths_to(store, levels, vid)]
            logger.debug("BFS: %d path(s) of length %d", len(paths), len(levels))
            return tuple(_bind(p) for p in paths)

        visited.update(reached)
        frontier = list(reached)

    logger.debug("BFS: no path found after %d hop(s)", len(levels))
    return ()


def _paths_to(
    store: GraphStore,
    levels: list[dict[str, list[Edge]]],
    vertex_id: str,
) -> list[tuple[Vertex | Edge, ...]]:
    """Rebuild every path ending at *vertex_id* on the last level."""
    paths: list[tuple[Vertex | Edge, ...]] = [(store.get_vertex(vertex_id),)]
    for reached in reversed(levels):
        paths = [
            (store.get_vertex(edge.src), edge) + path
            for path in paths
            for edge in reached[path[0].vertex_id]
        ]
    return paths


def _bind(path: tuple[Vertex | Edge, ...]) -> PathBinding:
    hops = len(path) // 2
    pairs: list[tuple[str, Vertex | Edge]] = [("from", path[0])]
    for i in range(hops):
        pairs.append((f"e{i}", path[2 * i + 1]))
        name = "to" if i == hops - 1 else f"v{i + 1}"
        pairs.append((name, path[2 * i + 2]))
    return PathBinding(pairs)


__all__ = ["BFSConfig", "bfs"]
