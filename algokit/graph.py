"""Weighted graph stored as adjacency lists."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Neighbor:
    """An adjacent vertex and the weight of the edge leading to it."""

    id: int
    weight: int


class Graph:
    """A graph with a fixed number of vertices and weighted edges."""

    def __init__(self, num_vertices: int) -> None:
        if num_vertices < 0:
            raise ValueError("Number of vertices must not be negative")
        self._adjacency: list[list[Neighbor]] = [[] for _ in range(num_vertices)]

    @property
    def num_vertices(self) -> int:
        """The number of vertices in the graph."""
        return len(self._adjacency)

    def _valid(self, vertex: int) -> bool:
        return 0 <= vertex < len(self._adjacency)

    def has_edge(self, src: int, dest: int) -> bool:
        """Return True if there is an edge from src to dest."""
        if not (self._valid(src) and self._valid(dest)):
            return False
        return any(n.id == dest for n in self._adjacency[src])

    def neighbors(self, vertex: int) -> tuple[Neighbor, ...]:
        """Return the neighbours of a vertex in insertion order."""
        if not self._valid(vertex):
            raise ValueError("Invalid vertex index")
        return tuple(self._adjacency[vertex])

    def add_edge(self, src: int, dest: int, weight: int = 1) -> bool:
        """Add an undirected edge; return False if it already exists."""
        if not (self._valid(src) and self._valid(dest)):
            raise IndexError("Invalid vertex index in add_edge")
        if self.has_edge(src, dest):
            return False
        self._adjacency[src].append(Neighbor(dest, weight))
        self._adjacency[dest].append(Neighbor(src, weight))
        return True

    def add_directed_edge(self, src: int, dest: int, weight: int = 1) -> bool:
        """Add a directed edge; return False if it already exists."""
        if not (self._valid(src) and self._valid(dest)):
            raise IndexError("Invalid vertex index in add_directed_edge")
        if self.has_edge(src, dest):
            return False
        self._adjacency[src].append(Neighbor(dest, weight))
        return True

    def _remove_neighbor(self, vertex: int, neighbor_id: int) -> bool:
        neighbors = self._adjacency[vertex]
        for position, neighbor in enumerate(neighbors):
            if neighbor.id == neighbor_id:
                # The last entry takes the removed one's place.
                last = neighbors.pop()
                if position < len(neighbors):
                    neighbors[position] = last
                return True
        return False

    def remove_edge(self, src: int, dest: int) -> None:
        """Remove the undirected edge between src and dest."""
        if not (self._valid(src) and self._valid(dest)):
            raise IndexError("Invalid vertex index in remove_edge")
        removed_src = self._remove_neighbor(src, dest)
        removed_dest = self._remove_neighbor(dest, src)
        if not (removed_src and removed_dest):
            raise ValueError("Problem removing edge")

    def __str__(self) -> str:
        lines = []
        for vertex, neighbors in enumerate(self._adjacency):
            links = "".join(f"->{n.id}(w={n.weight})" for n in neighbors)
            lines.append(f"Vertex {vertex}: {links}")
        return "\n".join(lines)

    def print_graph(self) -> None:
        """Print every vertex with its neighbours."""
        if self._adjacency:
            print(self)