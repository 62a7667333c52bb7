"""Tests for degree tables."""

from __future__ import annotations

from propgraph import GraphStore, Vertex, degrees, in_degrees, out_degrees


class TestDegrees:
    def test_in_degrees(self, social_graph):
        assert dict(in_degrees(social_graph)) == {"101": 1, "201": 2, "301": 1, "401": 1}

    def test_out_degrees(self, social_graph):
        assert dict(out_degrees(social_graph)) == {"101": 2, "201": 1, "301": 1, "401": 1}

    def test_degrees(self, social_graph):
        assert dict(degrees(social_graph)) == {"101": 3, "201": 3, "301": 2, "401": 2}

    def test_zero_degree_vertices_absent(self, two_islands):
        assert "z" not in in_degrees(two_islands)
        assert "z" not in degrees(two_islands)
        # Sources only have out-edges.
        assert "b" not in in_degrees(two_islands)
        assert out_degrees(two_islands)["b"] == 1

    def test_self_loop_counts_twice(self):
        store = GraphStore.create([Vertex("a")], [{"src": "a", "dst": "a"}])
        assert degrees(store)["a"] == 2

    def test_friends_edge_count(self, social_graph):
        friends = [e for e in social_graph.edges if e["relationship"] == "Friends"]
        assert len(friends) == 1

    def test_youngest_age(self, social_graph):
        assert min(v["age"] for v in social_graph.vertices) == 23
