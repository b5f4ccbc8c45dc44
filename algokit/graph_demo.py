"""Command that runs every graph algorithm on a small sample graph."""

from __future__ import annotations

from collections.abc import Sequence

from . import algorithms
from .graph import Graph


def build_sample_graph() -> Graph:
    """Return the six-vertex weighted graph used by the demonstration."""
    g = Graph(6)
    for src, dest, weight in [
        (0, 1, 4),
        (0, 2, 3),
        (1, 2, 1),
        (1, 3, 2),
        (2, 3, 4),
        (3, 4, 2),
        (4, 5, 6),
    ]:
        g.add_edge(src, dest, weight)
    return g


def main(argv: Sequence[str] | None = None) -> int:
    """Print the sample graph and the trees each algorithm derives from it."""
    g = build_sample_graph()

    print("Original Graph:")
    g.print_graph()

    sections = [
        ("BFS Tree (from vertex 0):", lambda: algorithms.bfs(g, 0)),
        ("DFS Tree (from vertex 0):", lambda: algorithms.dfs(g, 0)),
        ("Dijkstra Shortest-Path Tree (from vertex 0):", lambda: algorithms.dijkstra(g, 0)),
        ("Minimum Spanning Tree (Prim):", lambda: algorithms.prim(g)),
        ("Minimum Spanning Tree (Kruskal):", lambda: algorithms.kruskal(g)),
    ]
    for title, build in sections:
        print(f"\n{title}")
        build().print_graph()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())