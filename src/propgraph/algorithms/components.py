"""Weakly connected components.

Public API:
    connected_components(store) -> Mapping[str, str]
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

from ..graph import GraphStore

logger = logging.getLogger(__name__)


def connected_components(store: GraphStore) -> Mapping[str, str]:
    """Map each vertex id to its component id.

    Edge direction is ignored.  A component is named after the smallest
    vertex id it contains, so the result does not depend on the order of
    the input vertices or edges.  Isolated vertices are their own
    component.
    """
    parent: dict[str, str] = {v.vertex_id: v.vertex_id for v in store.vertices}

    def root(vid: str) -> str:
        while parent[vid] != vid:
            parent[vid] = parent[parent[vid]]
            vid = parent[vid]
        return vid

    for edge in store.edges:
        a, b = root(edge.src), root(edge.dst)
        if a != b:
            # Keep the smaller id as the root so it names the component.
            if b < a:
                a, b = b, a
            parent[b] = a

    result = {vid: root(vid) for vid in parent}
    logger.debug("Connected components: %d", len(set(result.values())))
    return MappingProxyType(result)


__all__ = ["connected_components"]
