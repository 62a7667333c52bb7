"""Hop distances from every vertex to a set of landmarks.

Public API:
    ShortestPathsConfig: Landmark vertex ids.
    shortest_paths(store, config) -> Mapping[str, Mapping[str, int]]
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from ..exceptions import ValidationError
from ..graph import GraphStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True, init=False)
class ShortestPathsConfig:
    """Configuration for :func:`shortest_paths`.

    Attributes:
        landmarks: Vertex ids to measure distances to; duplicates are
            collapsed, order is kept.
    """

    landmarks: tuple[str, ...]

    def __init__(self, landmarks: Iterable[str]) -> None:
        unique = tuple(dict.fromkeys(str(lm) for lm in landmarks))
        if not unique:
            raise ValidationError("At least one landmark is required")
        object.__setattr__(self, "landmarks", unique)


def shortest_paths(
    store: GraphStore,
    config: ShortestPathsConfig,
) -> Mapping[str, Mapping[str, int]]:
    """Map each vertex id to its hop distance to every reachable landmark.

    Distances follow edge direction: the distance from ``v`` to landmark
    ``l`` is the length of the shortest directed path ``v -> ... -> l``.
    It is computed with one backward BFS per landmark over incoming
    edges.  A landmark that ``v`` cannot reach is absent from ``v``'s
    mapping; every vertex appears in the result, possibly with an empty
    mapping.

    Raises:
        ValidationError: If a landmark is not a vertex of *store*.
    """
    missing = [lm for lm in config.landmarks if lm not in store]
    if missing:
        raise ValidationError(f"Unknown landmark id(s): {missing}")

    index = store.index
    distances: dict[str, dict[str, int]] = {v.vertex_id: {} for v in store.vertices}

    for landmark in config.landmarks:
        distances[landmark][landmark] = 0
        queue: deque[str] = deque([landmark])
        while queue:
            current = queue.popleft()
            hops = distances[current][landmark] + 1
            for edge in index.in_edges(current):
                if landmark not in distances[edge.src]:
                    distances[edge.src][landmark] = hops
                    queue.append(edge.src)

    logger.debug("Shortest paths computed for %d landmark(s)", len(config.landmarks))
    return MappingProxyType(
        {vid: MappingProxyType(d) for vid, d in distances.items()}
    )


__all__ = ["ShortestPathsConfig", "shortest_paths"]
