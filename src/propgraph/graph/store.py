"""GraphStore -- immutable in-memory property graph snapshot.

Public API:
    GraphStore: Validated vertices + edges with filtered views.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import replace
from typing import Any

from ..exceptions import ValidationError
from .index import TraversalIndex
from .types import Edge, Vertex

logger = logging.getLogger(__name__)

VertexLike = Vertex | Mapping[str, Any]
EdgeLike = Edge | Mapping[str, Any]


class GraphStore:
    """An ordered, read-only collection of vertices and directed edges.

    Every edge endpoint references a vertex of the same store and vertex
    ids are unique.  Filtering never mutates a store; it returns a new
    snapshot that shares no mutable state with its parent.

    Args:
        vertices: Vertex instances; ids must be unique.
        edges: Edge instances whose endpoints are among *vertices*.

    Raises:
        ValidationError: On a duplicate vertex id, a duplicate edge id, or
            an edge whose ``src`` / ``dst`` is not a known vertex.
    """

    def __init__(self, vertices: Iterable[Vertex], edges: Iterable[Edge] = ()) -> None:
        vs = tuple(vertices)
        by_id: dict[str, Vertex] = {}
        for v in vs:
            if v.vertex_id in by_id:
                raise ValidationError(f"Duplicate vertex id: {v.vertex_id}")
            by_id[v.vertex_id] = v

        es = _number_edges(edges)
        for e in es:
            if e.src not in by_id:
                raise ValidationError(f"Edge {e.edge_id} references unknown src: {e.src}")
            if e.dst not in by_id:
                raise ValidationError(f"Edge {e.edge_id} references unknown dst: {e.dst}")

        self._vertices = vs
        self._edges = es
        self._by_id = by_id
        self._index: TraversalIndex | None = None

    # ── construction ──────────────────────────────────────────

    @classmethod
    def create(
        cls,
        vertices: Iterable[VertexLike],
        edges: Iterable[EdgeLike] = (),
    ) -> GraphStore:
        """Build a validated snapshot from objects or plain records.

        Vertices may be :class:`Vertex` instances or mappings with an
        ``id`` key (remaining keys become properties).  Edges may be
        :class:`Edge` instances or mappings with ``src`` and ``dst`` keys.

        Raises:
            ValidationError: On a malformed record, a duplicate vertex id or
                an edge whose ``src`` / ``dst`` is not a known vertex.
        """
        store = cls(
            [_coerce_vertex(v) for v in vertices],
            [_coerce_edge(e) for e in edges],
        )
        logger.debug("GraphStore created: %d vertices, %d edges", len(store), store.num_edges)
        return store

    @classmethod
    def subgraph(
        cls,
        vertices: Iterable[VertexLike],
        edges: Iterable[EdgeLike],
    ) -> GraphStore:
        """Build a new store from already-filtered vertex and edge sets.

        Edges whose endpoints are not among *vertices* are dropped.

        Raises:
            ValidationError: On a duplicate vertex id.
        """
        vs = [_coerce_vertex(v) for v in vertices]
        ids = {v.vertex_id for v in vs}
        kept: list[Edge] = []
        dropped = 0
        for e in (_coerce_edge(e) for e in edges):
            if e.src in ids and e.dst in ids:
                kept.append(e)
            else:
                dropped += 1
        if dropped:
            logger.debug("Dropped %d dangling edge(s) from subgraph", dropped)
        return cls(vs, kept)

    def filter_vertices(self, predicate: Callable[[Vertex], bool]) -> GraphStore:
        """Keep vertices satisfying *predicate* and the edges between them."""
        return self.subgraph([v for v in self._vertices if predicate(v)], self._edges)

    def filter_edges(self, predicate: Callable[[Edge], bool]) -> GraphStore:
        """Keep every vertex and only the edges satisfying *predicate*."""
        return GraphStore(self._vertices, [e for e in self._edges if predicate(e)])

    def drop_isolated_vertices(self) -> GraphStore:
        """Remove vertices that have no incident edge."""
        connected = {e.src for e in self._edges} | {e.dst for e in self._edges}
        return GraphStore(
            tuple(v for v in self._vertices if v.vertex_id in connected),
            self._edges,
        )

    # ── accessors ─────────────────────────────────────────────

    @property
    def vertices(self) -> tuple[Vertex, ...]:
        return self._vertices

    @property
    def edges(self) -> tuple[Edge, ...]:
        return self._edges

    @property
    def num_edges(self) -> int:
        return len(self._edges)

    @property
    def index(self) -> TraversalIndex:
        """Adjacency index for this snapshot, built on first use."""
        if self._index is None:
            self._index = TraversalIndex(self._by_id, self._edges)
        return self._index

    def get_vertex(self, vertex_id: str) -> Vertex | None:
        """Fetch a vertex by ID, or None if not found."""
        return self._by_id.get(vertex_id)

    def __contains__(self, vertex_id: object) -> bool:
        return vertex_id in self._by_id

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._vertices)

    def __repr__(self) -> str:
        return f"GraphStore(vertices={len(self._vertices)}, edges={len(self._edges)})"


# ── helpers ─────────────────────────────────────────────────────────


def _coerce_vertex(value: VertexLike) -> Vertex:
    if isinstance(value, Vertex):
        return value
    if "id" not in value:
        raise ValidationError(f"Vertex record has no 'id': {dict(value)!r}")
    props = {k: v for k, v in value.items() if k != "id"}
    return Vertex(vertex_id=value["id"], properties=props)


def _coerce_edge(value: EdgeLike) -> Edge:
    if isinstance(value, Edge):
        return value
    if "src" not in value or "dst" not in value:
        raise ValidationError(f"Edge record needs 'src' and 'dst': {dict(value)!r}")
    props = {k: v for k, v in value.items() if k not in ("src", "dst", "edge_id")}
    return Edge(
        src=value["src"],
        dst=value["dst"],
        properties=props,
        edge_id=str(value.get("edge_id", "")),
    )


def _number_edges(edges: Iterable[Edge]) -> tuple[Edge, ...]:
    """Give positional ids to edges created without one.

    Raises:
        ValidationError: If two edges carry the same explicit id.
    """
    given = list(edges)
    taken: set[str] = set()
    for edge in given:
        if edge.edge_id:
            if edge.edge_id in taken:
                raise ValidationError(f"Duplicate edge id: {edge.edge_id}")
            taken.add(edge.edge_id)

    numbered: list[Edge] = []
    for position, edge in enumerate(given):
        if not edge.edge_id:
            eid = f"e{position}"
            while eid in taken:
                eid += "_"
            taken.add(eid)
            edge = replace(edge, edge_id=eid)
        numbered.append(edge)
    return tuple(numbered)


__all__ = ["GraphStore"]
