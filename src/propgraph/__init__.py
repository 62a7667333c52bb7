"""propgraph: In-memory property graph queries and graph algorithms."""

__version__ = "0.1.0"

from .algorithms import (
    BFSConfig,
    LabelPropagationConfig,
    Motif,
    PageRankConfig,
    PageRankResult,
    ShortestPathsConfig,
    bfs,
    connected_components,
    degrees,
    find,
    in_degrees,
    label_propagation,
    out_degrees,
    page_rank,
    parse_motif,
    shortest_paths,
    triangle_count,
    triplets,
)
from .exceptions import (
    ConvergenceError,
    GraphError,
    InvalidMotifError,
    ValidationError,
)
from .graph import Direction, Edge, GraphStore, PathBinding, TraversalIndex, Vertex
from .kuzu_io import load_from_kuzu, save_to_kuzu

__all__ = [
    # Graph model
    "Direction",
    "Vertex",
    "Edge",
    "PathBinding",
    "GraphStore",
    "TraversalIndex",
    # Degrees
    "in_degrees",
    "out_degrees",
    "degrees",
    # Motifs
    "Motif",
    "parse_motif",
    "find",
    "triplets",
    # Traversal and analytics
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
    # Kuzu snapshot exchange
    "save_to_kuzu",
    "load_from_kuzu",
    # Exceptions
    "GraphError",
    "ValidationError",
    "InvalidMotifError",
    "ConvergenceError",
]
