"""Graph algorithms over GraphStore snapshots.

Each algorithm is a pure function of (store, config) returning a fresh,
read-only result; none of them mutates its input.

Public API:
    in_degrees, out_degrees, degrees: Degree tables.
    find, triplets, parse_motif, Motif: Chain motif matching.
    bfs, BFSConfig: Shortest paths between vertex sets.
    connected_components: Weakly connected components.
    label_propagation, LabelPropagationConfig: Community detection.
    page_rank, PageRankConfig, PageRankResult: PageRank.
    shortest_paths, ShortestPathsConfig: Landmark hop distances.
    triangle_count: Per-vertex triangle counts.
"""

from __future__ import annotations

from .bfs import BFSConfig, bfs
from .components import connected_components
from .degrees import degrees, in_degrees, out_degrees
from .label_propagation import LabelPropagationConfig, label_propagation
from .motif import Motif, find, parse_motif, triplets
from .pagerank import PageRankConfig, PageRankResult, page_rank
from .shortest_paths import ShortestPathsConfig, shortest_paths
from .triangles import triangle_count

__all__ = [
    "in_degrees",
    "out_degrees",
    "degrees",
    "Motif",
    "parse_motif",
    "find",
    "triplets",
    "BFSConfig",
    "bfs",
    "connected_components",
    "LabelPropagationConfig",
    "label_propagation",
    "PageRankConfig",
    "PageRankResult",
    "page_rank",
    "ShortestPathsConfig",
    "shortest_paths",
    "triangle_count",
]
