"""In-memory property graph: data types, snapshot store and adjacency index.

Public API:
    Direction: Edge traversal direction.
    Vertex: Immutable vertex.
    Edge: Immutable directed edge.
    PathBinding: Pattern-variable bindings produced by motifs and BFS.
    GraphStore: Validated, immutable graph snapshot.
    TraversalIndex: Outgoing / incoming adjacency lists.
"""

from __future__ import annotations

from .index import TraversalIndex
from .store import GraphStore
from .types import Direction, Edge, PathBinding, Vertex

__all__ = [
    "Direction",
    "Vertex",
    "Edge",
    "PathBinding",
    "GraphStore",
    "TraversalIndex",
]
