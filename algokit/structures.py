"""Small helper data structures: a bounded FIFO queue and a disjoint-set forest."""

from __future__ import annotations

from collections import deque
from typing import Deque

DEFAULT_CAPACITY = 100


class BoundedQueue:
    """A FIFO queue of integers that holds at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("Capacity must not be negative")
        self._capacity = capacity
        self._items: Deque[int] = deque()

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def enqueue(self, value: int) -> None:
        """Append a value at the back of the queue."""
        if len(self._items) >= self._capacity:
            raise OverflowError("Queue is full")
        self._items.append(value)

    def dequeue(self) -> int:
        """Remove and return the value at the front of the queue."""
        if not self._items:
            raise IndexError("Queue is empty")
        return self._items.popleft()


class UnionFind:
    """Disjoint sets with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        self._parent = list(range(size))
        self._rank = [0] * size

    def find(self, x: int) -> int:
        """Return the representative of the set holding x."""
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def unite(self, x: int, y: int) -> None:
        """Merge the sets holding x and y."""
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return
        if self._rank[root_x] < self._rank[root_y]:
            self._parent[root_x] = root_y
        elif self._rank[root_x] > self._rank[root_y]:
            self._parent[root_y] = root_x
        else:
            self._parent[root_y] = root_x
            self._rank[root_x] += 1

    def connected(self, x: int, y: int) -> bool:
        """Return True if x and y are in the same set."""
        return self.find(x) == self.find(y)