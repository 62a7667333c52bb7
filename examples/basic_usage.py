"""Basic usage example for propgraph: a small office graph, queried end to end."""

import logging
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


from propgraph import (
    BFSConfig,
    GraphStore,
    LabelPropagationConfig,
    PageRankConfig,
    ShortestPathsConfig,
    bfs,
    connected_components,
    find,
    in_degrees,
    label_propagation,
    page_rank,
    shortest_paths,
    triangle_count,
)


def show(title, rows):
    print(f"\n{title}")
    for row in rows:
        print(f"   {row}")


def main():
    logging.basicConfig(level=logging.WARNING)
    print("=" * 60)
    print("propgraph - Basic Usage Example")
    print("=" * 60)

    # 1. Build the graph
    g = GraphStore.create(
        [
            {"id": "101", "name": "Trina", "age": 27},
            {"id": "201", "name": "Raman", "age": 45},
            {"id": "301", "name": "Ajay", "age": 32},
            {"id": "401", "name": "Sima", "age": 23},
        ],
        [
            {"src": "101", "dst": "301", "relationship": "Colleague"},
            {"src": "101", "dst": "401", "relationship": "Friends"},
            {"src": "401", "dst": "201", "relationship": "Reports"},
            {"src": "301", "dst": "201", "relationship": "Reports"},
            {"src": "201", "dst": "101", "relationship": "Reports"},
        ],
    )
    show("1. Vertices", [(v.vertex_id, dict(v.properties)) for v in g.vertices])
    show("   Edges", [(e.src, e.dst, e["relationship"]) for e in g.edges])

    # 2. Simple queries
    show("2. In-degrees", in_degrees(g).items())
    print(f"   Youngest age: {min(v['age'] for v in g.vertices)}")
    friends = sum(1 for e in g.edges if e["relationship"] == "Friends")
    print(f"   Friends relationships: {friends}")

    # 3. Motifs
    motifs = find(g, "(a)-[e]->(b)", lambda m: m["b"]["age"] > 40)
    show("3. Motif (a)-[e]->(b) with b.age > 40", motifs)

    # 4. Subgraphs
    g2 = g.subgraph(
        [v for v in g.vertices if v["age"] > 30],
        [e for e in g.edges if e["relationship"] == "Reports"],
    )
    show("4. Subgraph vertices", [v.vertex_id for v in g2.vertices])
    show("   Subgraph edges", [(e.src, e.dst) for e in g2.edges])

    reports_up = find(
        g,
        "(a)-[e]->(b)",
        lambda m: m["e"]["relationship"] == "Reports",
        lambda m: m["a"]["age"] < m["b"]["age"],
    )
    g3 = GraphStore.create(g.vertices, [m["e"] for m in reports_up])
    show("   Triplet-filtered edges", [(e.src, e.dst) for e in g3.edges])

    # 5. Breadth-first search
    show(
        "5. BFS Trina -> age > 27",
        bfs(g, BFSConfig(lambda v: v["name"] == "Trina", lambda v: v["age"] > 27)),
    )
    show(
        "   BFS Trina -> age > 30, no Colleague edges, max 3 hops",
        bfs(
            g,
            BFSConfig(
                from_predicate=lambda v: v["name"] == "Trina",
                to_predicate=lambda v: v["age"] > 30,
                edge_filter=lambda e: e["relationship"] != "Colleague",
                max_path_length=3,
            ),
        ),
    )

    # 6. Analytics
    components = connected_components(g)
    show("6. Connected components", sorted(components.items(), key=lambda kv: kv[1]))
    show("   Label propagation", label_propagation(g, LabelPropagationConfig(max_iter=5)).items())

    ranks = page_rank(g, PageRankConfig(reset_probability=0.15, tol=0.01))
    show("   PageRank", [(vid, round(r, 4)) for vid, r in ranks.ranks.items()])
    show("   Edge weights", [(e.src, e.dst, w) for e, w in ranks.edge_weights.items()])

    distances = shortest_paths(g, ShortestPathsConfig(["101", "401"]))
    show("   Shortest paths", [(vid, dict(d)) for vid, d in distances.items()])
    show("   Triangle count", triangle_count(g).items())

    print("\n" + "=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
