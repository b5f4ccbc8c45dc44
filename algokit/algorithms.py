"""Graph traversals, shortest-path trees and minimum spanning trees."""

from __future__ import annotations

import math

from .graph import Graph
from .structures import BoundedQueue, UnionFind


def _check_vertex(graph: Graph, vertex: int) -> None:
    if not 0 <= vertex < graph.num_vertices:
        raise ValueError("Invalid vertex index")


def bfs(graph: Graph, start: int) -> Graph:
    """Return the breadth-first search tree rooted at ``start`` as a directed graph."""
    _check_vertex(graph, start)
    tree = Graph(graph.num_vertices)
    queue = BoundedQueue(graph.num_vertices)
    visited = [False] * graph.num_vertices

    queue.enqueue(start)
    visited[start] = True
    while not queue.is_empty():
        current = queue.dequeue()
        for neighbor in graph.neighbors(current):
            if not visited[neighbor.id]:
                visited[neighbor.id] = True
                queue.enqueue(neighbor.id)
                tree.add_directed_edge(current, neighbor.id)
    return tree


def dfs(graph: Graph, start: int) -> Graph:
    """Return the depth-first search forest, starting at ``start`` and then
    covering every component left unvisited, as a directed graph."""
    _check_vertex(graph, start)
    tree = Graph(graph.num_vertices)
    visited = [False] * graph.num_vertices

    def visit(root: int) -> None:
        visited[root] = True
        stack = [(root, iter(graph.neighbors(root)))]
        while stack:
            current, pending = stack[-1]
            for neighbor in pending:
                if not visited[neighbor.id]:
                    tree.add_directed_edge(current, neighbor.id)
                    visited[neighbor.id] = True
                    stack.append((neighbor.id, iter(graph.neighbors(neighbor.id))))
                    break
            else:
                stack.pop()

    visit(start)
    for vertex in range(graph.num_vertices):
        if not visited[vertex]:
            visit(vertex)
    return tree


def dijkstra(graph: Graph, start: int) -> Graph:
    """Return the shortest-path tree from ``start`` as a directed graph."""
    _check_vertex(graph, start)
    n = graph.num_vertices
    dist: list[float] = [math.inf] * n
    parent: list[int | None] = [None] * n
    visited = [False] * n
    dist[start] = 0

    for _ in range(n):
        candidates = [v for v in range(n) if not visited[v] and dist[v] < math.inf]
        if not candidates:
            break
        u = min(candidates, key=dist.__getitem__)
        visited[u] = True
        for neighbor in graph.neighbors(u):
            v = neighbor.id
            if not visited[v] and dist[u] + neighbor.weight < dist[v]:
                dist[v] = dist[u] + neighbor.weight
                parent[v] = u

    tree = Graph(n)
    for v, u in enumerate(parent):
        if u is not None:
            tree.add_directed_edge(u, v, int(dist[v] - dist[u]))
    return tree


def prim(graph: Graph) -> Graph:
    """Return a minimum spanning tree grown from vertex 0 (Prim's algorithm)."""
    n = graph.num_vertices
    mst = Graph(n)
    if n == 0:
        return mst
    key: list[float] = [math.inf] * n
    parent: list[int | None] = [None] * n
    visited = [False] * n
    key[0] = 0

    for _ in range(n):
        candidates = [v for v in range(n) if not visited[v] and key[v] < math.inf]
        if not candidates:
            break
        u = min(candidates, key=key.__getitem__)
        visited[u] = True
        for neighbor in graph.neighbors(u):
            v = neighbor.id
            if not visited[v] and neighbor.weight < key[v]:
                key[v] = neighbor.weight
                parent[v] = u

    for v in range(1, n):
        u = parent[v]
        if u is not None:
            mst.add_edge(u, v, int(key[v]))
    return mst


def kruskal(graph: Graph) -> Graph:
    """Return a minimum spanning forest built with Kruskal's algorithm."""
    n = graph.num_vertices
    mst = Graph(n)
    edges = [
        (u, neighbor.id, neighbor.weight)
        for u in range(n)
        for neighbor in graph.neighbors(u)
        if u < neighbor.id
    ]
    edges.sort(key=lambda edge: edge[2])

    sets = UnionFind(n)
    for u, v, weight in edges:
        if not sets.connected(u, v):
            sets.unite(u, v)
            mst.add_edge(u, v, weight)
    return mst