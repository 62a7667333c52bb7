"""Per-vertex triangle counts.

Public API:
    triangle_count(store) -> Mapping[str, int]
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from ..graph import GraphStore


def triangle_count(store: GraphStore) -> Mapping[str, int]:
    """Count the triangles each vertex takes part in.

    Edges are treated as undirected; parallel edges, reverse edges and
    self-loops are collapsed first.  A vertex's count is the number of
    pairs of its neighbours that are themselves adjacent.
    """
    index = store.index
    counts: dict[str, int] = {}
    for v in store.vertices:
        nbrs = index.undirected_neighbors(v.vertex_id)
        # Each adjacent pair {u, w} is seen once from u and once from w.
        linked = sum(len(index.undirected_neighbors(u) & nbrs) for u in nbrs)
        counts[v.vertex_id] = linked // 2
    return MappingProxyType(counts)


__all__ = ["triangle_count"]
