"""Save and load GraphStore snapshots through an embedded Kuzu database.

One node table holds the vertices and one rel table the edges.  Each
row keeps its id, its position in the snapshot (``seq``) and its
properties as a JSON string, so a round trip preserves order, parallel
edges and property types that JSON can represent.

Public API:
    save_to_kuzu(store, db_path, vertex_table, edge_table) -> None
    load_from_kuzu(db_path, vertex_table, edge_table) -> GraphStore
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any

import kuzu

from .exceptions import ValidationError
from .graph import Edge, GraphStore, Vertex

logger = logging.getLogger(__name__)

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def save_to_kuzu(
    store: GraphStore,
    db_path: Path | str,
    vertex_table: str = "Vertex",
    edge_table: str = "Edge",
) -> None:
    """Write *store* into the Kuzu database at *db_path*.

    Tables are created if needed and must be empty.  Rows are written in
    one transaction, so a failed save leaves the tables empty.

    Raises:
        ValidationError: If a table name is not a plain identifier, the
            vertex table already holds data, or a property value cannot
            be encoded as JSON.
    """
    _check_identifier(vertex_table)
    _check_identifier(edge_table)
    vertex_rows = [
        {"vid": v.vertex_id, "seq": seq, "props": _encode(v.properties)}
        for seq, v in enumerate(store.vertices)
    ]
    edge_rows = [
        {
            "src": e.src,
            "dst": e.dst,
            "eid": e.edge_id,
            "seq": seq,
            "props": _encode(e.properties),
        }
        for seq, e in enumerate(store.edges)
    ]

    db = kuzu.Database(str(db_path))
    conn = kuzu.Connection(db)
    try:
        conn.execute(
            f"CREATE NODE TABLE IF NOT EXISTS {vertex_table}"
            f"(vertex_id STRING, seq INT64, properties STRING, PRIMARY KEY(vertex_id))"
        )
        conn.execute(
            f"CREATE REL TABLE IF NOT EXISTS {edge_table}"
            f"(FROM {vertex_table} TO {vertex_table}, "
            f"edge_id STRING, seq INT64, properties STRING)"
        )

        result = conn.execute(f"MATCH (v:{vertex_table}) RETURN count(v)")
        if result.has_next() and result.get_next()[0]:
            raise ValidationError(f"Kuzu table {vertex_table} already contains a graph")

        conn.execute("BEGIN TRANSACTION")
        try:
            for row in vertex_rows:
                conn.execute(
                    f"CREATE (:{vertex_table} {{vertex_id: $vid, seq: $seq, properties: $props}})",
                    row,
                )

            for row in edge_rows:
                conn.execute(
                    f"MATCH (a:{vertex_table}), (b:{vertex_table}) "
                    f"WHERE a.vertex_id = $src AND b.vertex_id = $dst "
                    f"CREATE (a)-[:{edge_table} {{edge_id: $eid, seq: $seq, properties: $props}}]->(b)",
                    row,
                )
        except Exception:
            try:
                conn.execute("ROLLBACK")
            except RuntimeError as e:
                # Kuzu may already have aborted the transaction.
                logger.debug("Rollback skipped: %s", e)
            raise
        conn.execute("COMMIT")
    finally:
        conn.close()
        db.close()

    logger.debug(
        "Saved %d vertices and %d edges to %s", len(store), store.num_edges, db_path
    )


def load_from_kuzu(
    db_path: Path | str,
    vertex_table: str = "Vertex",
    edge_table: str = "Edge",
) -> GraphStore:
    """Read a snapshot written by :func:`save_to_kuzu`.

    Raises:
        ValidationError: If a table name is not a plain identifier or the
            stored graph is not valid.
        RuntimeError: If Kuzu cannot find the tables.
    """
    _check_identifier(vertex_table)
    _check_identifier(edge_table)

    db = kuzu.Database(str(db_path))
    conn = kuzu.Connection(db)
    try:
        vertices: list[Vertex] = []
        result = conn.execute(
            f"MATCH (v:{vertex_table}) RETURN v.vertex_id, v.properties, v.seq ORDER BY v.seq"
        )
        while result.has_next():
            vid, props, _ = result.get_next()
            vertices.append(Vertex(vertex_id=vid, properties=_decode(props)))

        edges: list[Edge] = []
        result = conn.execute(
            f"MATCH (a:{vertex_table})-[r:{edge_table}]->(b:{vertex_table}) "
            f"RETURN a.vertex_id, b.vertex_id, r.edge_id, r.properties, r.seq ORDER BY r.seq"
        )
        while result.has_next():
            src, dst, eid, props, _ = result.get_next()
            edges.append(Edge(src=src, dst=dst, properties=_decode(props), edge_id=eid))
    finally:
        conn.close()
        db.close()

    logger.debug("Loaded %d vertices and %d edges from %s", len(vertices), len(edges), db_path)
    return GraphStore.create(vertices, edges)


# ── helpers ─────────────────────────────────────────────────────────


def _check_identifier(name: str) -> None:
    if not _IDENTIFIER_RE.match(name):
        raise ValidationError(f"Invalid Kuzu table name: {name!r}")


def _encode(properties: Any) -> str:
    try:
        return json.dumps(dict(properties))
    except TypeError as e:
        raise ValidationError(f"Property values must be JSON-serialisable: {e}") from e


def _decode(raw: str | None) -> dict[str, Any]:
    return json.loads(raw) if raw else {}


__all__ = ["save_to_kuzu", "load_from_kuzu"]
