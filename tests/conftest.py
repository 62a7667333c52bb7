"""Pytest configuration and fixtures for propgraph tests."""

import pytest

from propgraph import GraphStore


@pytest.fixture
def social_graph():
    """The four-person office graph used throughout the tests.

    Graph structure:
        101 Trina (27) --Colleague--> 301 Ajay (32)
        101 Trina (27) --Friends----> 401 Sima (23)
        401 Sima  (23) --Reports----> 201 Raman (45)
        301 Ajay  (32) --Reports----> 201 Raman (45)
        201 Raman (45) --Reports----> 101 Trina (27)
    """
    vertices = [
        {"id": "101", "name": "Trina", "age": 27},
        {"id": "201", "name": "Raman", "age": 45},
        {"id": "301", "name": "Ajay", "age": 32},
        {"id": "401", "name": "Sima", "age": 23},
    ]
    edges = [
        {"src": "101", "dst": "301", "relationship": "Colleague"},
        {"src": "101", "dst": "401", "relationship": "Friends"},
        {"src": "401", "dst": "201", "relationship": "Reports"},
        {"src": "301", "dst": "201", "relationship": "Reports"},
        {"src": "201", "dst": "101", "relationship": "Reports"},
    ]
    return GraphStore.create(vertices, edges)


@pytest.fixture
def two_islands():
    """Two disconnected groups plus an isolated vertex.

    Graph structure:
        b --> a      d --> c --> e      z
    """
    return GraphStore.create(
        [{"id": vid} for vid in ["b", "a", "d", "c", "e", "z"]],
        [
            {"src": "b", "dst": "a"},
            {"src": "d", "dst": "c"},
            {"src": "c", "dst": "e"},
        ],
    )
