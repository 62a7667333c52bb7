"""Motif finding over chain patterns such as ``(a)-[e]->(b)-[e2]->(c)``.

A motif is an ordered chain of vertex and edge variables.  Named elements
are bound in the result; anonymous ones (``()`` and ``[]``) only
constrain the shape.  Reusing a vertex name forces both positions onto
the same vertex, which is how cycles are expressed::

    find(store, "(a)-[e1]->(b)-[e2]->(a)")

Bindings are grown hop by hop through the traversal index, so the cost
per hop is proportional to the out-edges of the current frontier rather
than a cross product of all edges.

Public API:
    Motif: Parsed chain pattern.
    parse_motif(pattern) -> Motif
    find(store, pattern, *filters) -> tuple[PathBinding, ...]
    triplets(store) -> tuple[PathBinding, ...]
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass

from ..exceptions import InvalidMotifError
from ..graph import GraphStore, PathBinding
from ..graph.types import Entity

logger = logging.getLogger(__name__)

BindingFilter = Callable[[PathBinding], bool]

_VERTEX_RE = re.compile(r"\s*\(\s*(\w*)\s*\)")
_EDGE_RE = re.compile(r"\s*-\s*\[\s*(\w*)\s*\]\s*->")


@dataclass(frozen=True)
class Motif:
    """A parsed chain pattern.

    Attributes:
        vertex_names: One name per vertex position; ``None`` if anonymous.
        edge_names: One name per hop; ``None`` if anonymous.
    """

    vertex_names: tuple[str | None, ...]
    edge_names: tuple[str | None, ...]

    @property
    def hops(self) -> int:
        return len(self.edge_names)


def parse_motif(pattern: str) -> Motif:
    """Parse a chain pattern string.

    A blank pattern is the zero-length motif: it has no positions and
    matches nothing.

    Raises:
        InvalidMotifError: On malformed syntax, a repeated edge name, or a
            name used for both a vertex and an edge.
    """
    if not pattern.strip():
        return Motif((), ())

    pos = 0
    vertex_names: list[str | None] = []
    edge_names: list[str | None] = []

    match = _VERTEX_RE.match(pattern, pos)
    if match is None:
        raise InvalidMotifError(f"Motif must start with a vertex, e.g. '(a)': {pattern!r}")
    vertex_names.append(match.group(1) or None)
    pos = match.end()

    while pattern[pos:].strip():
        edge = _EDGE_RE.match(pattern, pos)
        if edge is None:
            raise InvalidMotifError(f"Expected '-[name]->' at offset {pos}: {pattern!r}")
        vertex = _VERTEX_RE.match(pattern, edge.end())
        if vertex is None:
            raise InvalidMotifError(
                f"Expected a vertex after offset {edge.end()}: {pattern!r}"
            )
        edge_names.append(edge.group(1) or None)
        vertex_names.append(vertex.group(1) or None)
        pos = vertex.end()

    named_edges = [n for n in edge_names if n]
    if len(named_edges) != len(set(named_edges)):
        raise InvalidMotifError(f"Edge names must be unique: {pattern!r}")
    clash = set(named_edges) & {n for n in vertex_names if n}
    if clash:
        raise InvalidMotifError(
            f"Names used for both vertex and edge: {sorted(clash)} in {pattern!r}"
        )

    return Motif(tuple(vertex_names), tuple(edge_names))


def find(
    store: GraphStore,
    pattern: str | Motif,
    *filters: BindingFilter,
) -> tuple[PathBinding, ...]:
    """Enumerate every binding of *pattern* in *store*.

    Args:
        store: Graph snapshot to search.
        pattern: Chain pattern string or an already parsed :class:`Motif`.
        *filters: Predicates over each complete binding (e.g.
            ``lambda m: m["b"]["age"] > 40``); all must hold.

    Returns:
        Matching bindings, ordered by the first vertex's position in the
        store and then by edge order.  The zero-length motif yields an
        empty tuple.
    """
    motif = parse_motif(pattern) if isinstance(pattern, str) else pattern
    if not motif.vertex_names:
        return ()
    index = store.index

    # Partial state: (bound pairs, vertex ids by name, current vertex id).
    first = motif.vertex_names[0]
    partials: list[tuple[tuple[tuple[str, Entity], ...], dict[str, str], str]] = []
    for v in store.vertices:
        pairs: tuple[tuple[str, Entity], ...] = ((first, v),) if first else ()
        seen = {first: v.vertex_id} if first else {}
        partials.append((pairs, seen, v.vertex_id))

    for hop in range(motif.hops):
        edge_name = motif.edge_names[hop]
        next_name = motif.vertex_names[hop + 1]
        extended = []
        for pairs, seen, current in partials:
            for edge in index.out_edges(current):
                if next_name and next_name in seen and seen[next_name] != edge.dst:
                    continue
                new_pairs = pairs
                if edge_name:
                    new_pairs = new_pairs + ((edge_name, edge),)
                new_seen = seen
                if next_name and next_name not in seen:
                    new_pairs = new_pairs + ((next_name, store.get_vertex(edge.dst)),)
                    new_seen = {**seen, next_name: edge.dst}
                extended.append((new_pairs, new_seen, edge.dst))
        partials = extended
        if not partials:
            break

    results = []
    for pairs, _, _ in partials:
        binding = PathBinding(list(pairs))
        if all(f(binding) for f in filters):
            results.append(binding)

    logger.debug("Motif %r: %d binding(s)", pattern, len(results))
    return tuple(results)


def triplets(store: GraphStore) -> tuple[PathBinding, ...]:
    """Every edge with its endpoints, bound as ``src``, ``edge``, ``dst``."""
    return find(store, Motif(("src", "dst"), ("edge",)))


__all__ = ["Motif", "parse_motif", "find", "triplets"]
