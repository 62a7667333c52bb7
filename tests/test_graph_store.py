"""Tests for the graph layer (types, GraphStore, TraversalIndex).

Test categories:
- TestGraphDataTypes: Vertex, Edge, PathBinding behaviour
- TestGraphStoreCreate: validation of vertices and edges
- TestGraphStoreViews: vertex / edge filters, subgraph, isolated vertices
- TestTraversalIndex: adjacency lookups and degrees
"""

from __future__ import annotations

import pytest

from propgraph import Direction, Edge, GraphStore, PathBinding, ValidationError, Vertex


# ── TestGraphDataTypes ────────────────────────────────────────


class TestGraphDataTypes:
    """Verify the immutable data structures behave correctly."""

    def test_vertex_identity_is_id(self):
        a = Vertex("1", {"name": "x"})
        b = Vertex("1", {"name": "y"})
        assert a == b
        assert len({a, b}) == 1

    def test_vertex_frozen(self):
        v = Vertex("1", {"age": 3})
        with pytest.raises(AttributeError):
            v.vertex_id = "2"  # type: ignore[misc]
        with pytest.raises(TypeError):
            v.properties["age"] = 4  # type: ignore[index]

    def test_vertex_item_access(self):
        v = Vertex("1", {"age": 3})
        assert v["age"] == 3
        assert v.get("missing") is None
        assert v.get("missing", 0) == 0

    def test_vertex_copies_properties(self):
        props = {"age": 3}
        v = Vertex("1", props)
        props["age"] = 99
        assert v["age"] == 3

    def test_edge_defaults(self):
        e = Edge("a", "b")
        assert e.src == "a"
        assert e.dst == "b"
        assert e.edge_id == ""
        assert dict(e.properties) == {}

    def test_ids_are_strings(self):
        assert Vertex(101).vertex_id == "101"  # type: ignore[arg-type]
        assert Edge(1, 2).src == "1"  # type: ignore[arg-type]

    def test_path_binding_order_and_equality(self):
        a, b = Vertex("a"), Vertex("b")
        e = Edge("a", "b", edge_id="e0")
        binding = PathBinding([("a", a), ("e", e), ("b", b)])
        assert binding.variables == ("a", "e", "b")
        assert binding.vertices() == [a, b]
        assert binding.edges() == [e]
        assert binding == PathBinding([("a", a), ("e", e), ("b", b)])
        assert hash(binding) == hash(PathBinding([("a", a), ("e", e), ("b", b)]))


# ── TestGraphStoreCreate ──────────────────────────────────────


class TestGraphStoreCreate:
    """GraphStore.create validation."""

    def test_create_from_records(self, social_graph):
        assert len(social_graph) == 4
        assert social_graph.num_edges == 5
        trina = social_graph.get_vertex("101")
        assert trina is not None
        assert trina["name"] == "Trina"
        assert trina["age"] == 27
        assert "id" not in trina.properties

    def test_create_from_objects(self):
        store = GraphStore.create(
            [Vertex("a"), Vertex("b")],
            [Edge("a", "b", {"w": 1})],
        )
        assert [v.vertex_id for v in store.vertices] == ["a", "b"]
        assert store.edges[0]["w"] == 1

    def test_edge_ids_assigned_in_order(self, social_graph):
        assert [e.edge_id for e in social_graph.edges] == ["e0", "e1", "e2", "e3", "e4"]

    def test_explicit_edge_ids_kept(self):
        store = GraphStore.create(
            [Vertex("a"), Vertex("b")],
            [Edge("a", "b", edge_id="e1"), Edge("b", "a")],
        )
        ids = [e.edge_id for e in store.edges]
        assert ids[0] == "e1"
        assert len(set(ids)) == 2

    def test_parallel_edges_allowed(self):
        store = GraphStore.create(
            [Vertex("a"), Vertex("b")],
            [Edge("a", "b"), Edge("a", "b")],
        )
        assert store.num_edges == 2
        assert store.edges[0] != store.edges[1]

    def test_duplicate_vertex_id_rejected(self):
        with pytest.raises(ValidationError, match="Duplicate vertex id"):
            GraphStore.create([Vertex("a"), Vertex("a")], [])

    def test_duplicate_edge_id_rejected(self):
        with pytest.raises(ValidationError, match="Duplicate edge id"):
            GraphStore.create(
                [Vertex("a"), Vertex("b")],
                [Edge("a", "b", edge_id="x"), Edge("b", "a", edge_id="x")],
            )

    def test_unknown_src_rejected(self):
        with pytest.raises(ValidationError, match="unknown src"):
            GraphStore.create([Vertex("a")], [Edge("ghost", "a")])

    def test_unknown_dst_rejected(self):
        with pytest.raises(ValidationError, match="unknown dst"):
            GraphStore.create([Vertex("a")], [Edge("a", "ghost")])

    def test_vertex_record_without_id_rejected(self):
        with pytest.raises(ValidationError):
            GraphStore.create([{"name": "nobody"}], [])

    def test_edge_record_without_dst_rejected(self):
        with pytest.raises(ValidationError):
            GraphStore.create([{"id": "a"}], [{"src": "a"}])

    def test_empty_store(self):
        store = GraphStore.create([], [])
        assert len(store) == 0
        assert store.num_edges == 0
        assert store.index.vertex_ids == ()

    def test_contains_and_iter(self, social_graph):
        assert "101" in social_graph
        assert "999" not in social_graph
        assert [v.vertex_id for v in social_graph] == ["101", "201", "301", "401"]

    def test_constructor_rejects_dangling_edge(self):
        with pytest.raises(ValidationError, match="unknown dst"):
            GraphStore((Vertex("a"),), (Edge("a", "ghost"),))

    def test_constructor_rejects_duplicate_vertex(self):
        with pytest.raises(ValidationError, match="Duplicate vertex id"):
            GraphStore([Vertex("a"), Vertex("a")])

    def test_constructor_copies_caller_sequences(self):
        vertices = [Vertex("a"), Vertex("b")]
        edges = [Edge("a", "b")]
        store = GraphStore(vertices, edges)
        vertices.append(Vertex("c"))
        edges.append(Edge("b", "a"))
        assert len(store) == 2
        assert store.num_edges == 1
        assert isinstance(store.vertices, tuple)
        assert store.edges[0].edge_id == "e0"


# ── TestGraphStoreViews ───────────────────────────────────────


class TestGraphStoreViews:
    """Derived snapshots never change their parent."""

    def test_filter_edges(self, social_graph):
        friends = social_graph.filter_edges(lambda e: e["relationship"] == "Friends")
        assert friends.num_edges == 1
        assert len(friends) == 4
        assert social_graph.num_edges == 5

    def test_filter_vertices_drops_dangling_edges(self, social_graph):
        older = social_graph.filter_vertices(lambda v: v["age"] > 30)
        assert sorted(v.vertex_id for v in older.vertices) == ["201", "301"]
        assert [(e.src, e.dst) for e in older.edges] == [("301", "201")]
        assert len(social_graph) == 4

    def test_filter_vertices_keeps_edge_ids(self, social_graph):
        older = social_graph.filter_vertices(lambda v: v["age"] > 30)
        assert older.edges[0].edge_id == "e3"

    def test_subgraph_from_filtered_sets(self, social_graph):
        v2 = [v for v in social_graph.vertices if v["age"] > 30]
        e2 = [e for e in social_graph.edges if e["relationship"] == "Reports"]
        g2 = social_graph.subgraph(v2, e2)
        assert len(g2) == 2
        assert [(e.src, e.dst) for e in g2.edges] == [("301", "201")]

    def test_subgraph_from_class(self, social_graph):
        g2 = GraphStore.subgraph(
            social_graph.vertices,
            [e for e in social_graph.edges if e["relationship"] == "Friends"],
        )
        assert len(g2) == 4
        assert [(e.src, e.dst) for e in g2.edges] == [("101", "401")]

    def test_subgraph_has_own_index(self, social_graph):
        g2 = social_graph.filter_edges(lambda e: e["relationship"] == "Reports")
        assert social_graph.index.out_degree("101") == 2
        assert g2.index.out_degree("101") == 0

    def test_drop_isolated_vertices(self, two_islands):
        trimmed = two_islands.drop_isolated_vertices()
        assert "z" not in trimmed
        assert len(trimmed) == 5
        assert trimmed.num_edges == 3


# ── TestTraversalIndex ────────────────────────────────────────


class TestTraversalIndex:
    """Adjacency lookups through the lazily built index."""

    def test_index_is_cached(self, social_graph):
        assert social_graph.index is social_graph.index

    def test_out_and_in_edges(self, social_graph):
        index = social_graph.index
        assert [e.dst for e in index.out_edges("101")] == ["301", "401"]
        assert sorted(e.src for e in index.in_edges("201")) == ["301", "401"]
        assert index.out_edges("unknown") == ()

    def test_degrees(self, social_graph):
        index = social_graph.index
        assert index.out_degree("101") == 2
        assert index.in_degree("201") == 2
        assert index.in_degree("301") == 1

    def test_neighbors_by_direction(self, social_graph):
        index = social_graph.index
        outgoing = [n for _, n in index.neighbors("101", Direction.OUTGOING)]
        incoming = [n for _, n in index.neighbors("101", Direction.INCOMING)]
        both = [n for _, n in index.neighbors("101", Direction.BOTH)]
        assert outgoing == ["301", "401"]
        assert incoming == ["201"]
        assert sorted(both) == ["201", "301", "401"]

    def test_undirected_neighbors_collapse_duplicates(self):
        store = GraphStore.create(
            [Vertex("a"), Vertex("b")],
            [Edge("a", "b"), Edge("b", "a"), Edge("a", "b"), Edge("a", "a")],
        )
        assert store.index.undirected_neighbors("a") == frozenset({"b"})
        assert len(store.index.neighbors("a")) == 5
