"""Degree tables.

Vertices with a zero count are left out of each table, so an isolated
vertex appears in none of them.

Public API:
    in_degrees(store) -> Mapping[str, int]
    out_degrees(store) -> Mapping[str, int]
    degrees(store) -> Mapping[str, int]
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Mapping
from types import MappingProxyType

from ..graph import GraphStore


def _table(counts: Counter[str], store: GraphStore) -> Mapping[str, int]:
    return MappingProxyType(
        {v.vertex_id: counts[v.vertex_id] for v in store.vertices if counts[v.vertex_id]}
    )


def in_degrees(store: GraphStore) -> Mapping[str, int]:
    """Number of edges pointing at each vertex."""
    return _table(Counter(e.dst for e in store.edges), store)


def out_degrees(store: GraphStore) -> Mapping[str, int]:
    """Number of edges leaving each vertex."""
    return _table(Counter(e.src for e in store.edges), store)


def degrees(store: GraphStore) -> Mapping[str, int]:
    """In-degree plus out-degree; a self-loop counts twice."""
    counts: Counter[str] = Counter()
    for e in store.edges:
        counts[e.src] += 1
        counts[e.dst] += 1
    return _table(counts, store)


__all__ = ["in_degrees", "out_degrees", "degrees"]
