"""Graph data structures shared by the store and the algorithms.

Public API:
    Direction: Edge traversal direction enum.
    Vertex: Immutable vertex identified by its id.
    Edge: Immutable directed edge between two vertex ids.
    PathBinding: Ordered, read-only mapping of pattern variables to entities.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Union


class Direction(Enum):
    """Direction for edge traversal queries."""

    OUTGOING = "outgoing"
    INCOMING = "incoming"
    BOTH = "both"


def _freeze(properties: Mapping[str, Any] | None) -> Mapping[str, Any]:
    return MappingProxyType(dict(properties or {}))


@dataclass(frozen=True)
class Vertex:
    """An immutable vertex in the graph.

    Two vertices with the same ``vertex_id`` are the same entity, so
    equality and hashing ignore the properties.

    Attributes:
        vertex_id: Unique identifier for the vertex.
        properties: Read-only attribute mapping (e.g. ``name``, ``age``).
    """

    vertex_id: str
    properties: Mapping[str, Any] = field(default_factory=dict, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "vertex_id", str(self.vertex_id))
        object.__setattr__(self, "properties", _freeze(self.properties))

    def __getitem__(self, key: str) -> Any:
        return self.properties[key]

    def get(self, key: str, default: Any = None) -> Any:
        return self.properties.get(key, default)


@dataclass(frozen=True)
class Edge:
    """An immutable directed edge.

    Attributes:
        src: Vertex ID of the source (tail) vertex.
        dst: Vertex ID of the destination (head) vertex.
        properties: Read-only attribute mapping (e.g. ``relationship``).
        edge_id: Identifier distinguishing parallel edges; assigned by
            the store when left empty.
    """

    src: str
    dst: str
    properties: Mapping[str, Any] = field(default_factory=dict, compare=False)
    edge_id: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "src", str(self.src))
        object.__setattr__(self, "dst", str(self.dst))
        object.__setattr__(self, "properties", _freeze(self.properties))

    def __getitem__(self, key: str) -> Any:
        return self.properties[key]

    def get(self, key: str, default: Any = None) -> Any:
        return self.properties.get(key, default)


Entity = Union[Vertex, Edge]


class PathBinding(Mapping[str, Entity]):
    """Assignment of pattern variables to vertices and edges.

    Produced by motif finding and BFS.  Iteration follows pattern order,
    e.g. ``a, e, b`` for ``(a)-[e]->(b)``.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Mapping[str, Entity] | list[tuple[str, Entity]]) -> None:
        self._items: dict[str, Entity] = dict(items)

    def __getitem__(self, key: str) -> Entity:
        return self._items[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PathBinding):
            return list(self._items.items()) == list(other._items.items())
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(self._items.items()))

    def __repr__(self) -> str:
        inner = ", ".join(f"{k}={_describe(v)}" for k, v in self._items.items())
        return f"PathBinding({inner})"

    @property
    def variables(self) -> tuple[str, ...]:
        return tuple(self._items)

    def vertices(self) -> list[Vertex]:
        """Bound vertices in pattern order."""
        return [v for v in self._items.values() if isinstance(v, Vertex)]

    def edges(self) -> list[Edge]:
        """Bound edges in pattern order."""
        return [e for e in self._items.values() if isinstance(e, Edge)]


def _describe(entity: Entity) -> str:
    if isinstance(entity, Vertex):
        return f"({entity.vertex_id})"
    return f"[{entity.src}->{entity.dst}]"


__all__ = ["Direction", "Vertex", "Edge", "Entity", "PathBinding"]
