"""Minimum spanning trees: Prim from one start node, Kruskal over a whole forest."""

from __future__ import annotations

import heapq
from collections.abc import Iterable

Edge = tuple[int, int, int]


class DisjointSet:
    """Union-find over the elements 0..n with path compression and union by size."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must not be negative")
        self._parent = list(range(n + 1))
        self._size = [1] * (n + 1)

    def _check(self, a: int) -> None:
        if not 0 <= a < len(self._parent):
            raise ValueError(f"element {a} is outside 0..{len(self._parent) - 1}")

    def find(self, a: int) -> int:
        """Representative of the set holding ``a``."""
        self._check(a)
        root = a
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[a] != root:
            self._parent[a], a = root, self._parent[a]
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets of ``a`` and ``b``; False if they were already one set."""
        x, y = self.find(a), self.find(b)
        if x == y:
            return False
        if self._size[x] < self._size[y]:
            x, y = y, x
        self._parent[y] = x
        self._size[x] += self._size[y]
        return True


def _check_node(n: int, node: int) -> None:
    if not 1 <= node <= n:
        raise ValueError(f"node {node} is outside 1..{n}")


def prim(n: int, edges: Iterable[Edge], start: int) -> int:
    """Weight of a minimum spanning tree of the component that holds ``start``."""
    _check_node(n, start)
    adj: dict[int, list[tuple[int, int]]] = {node: [] for node in range(1, n + 1)}
    for u, v, w in edges:
        _check_node(n, u)
        _check_node(n, v)
        adj[u].append((w, v))
        adj[v].append((w, u))

    used: set[int] = set()
    cost = 0
    heap = [(0, start)]
    while heap:
        w, u = heapq.heappop(heap)
        if u in used:
            continue
        used.add(u)
        cost += w
        for item in adj[u]:
            if item[1] not in used:
                heapq.heappush(heap, item)
    return cost


def kruskal(n: int, edges: Iterable[Edge]) -> int:
    """Weight of a minimum spanning forest of the undirected graph on nodes 1..n."""
    edge_list = list(edges)
    for u, v, _ in edge_list:
        _check_node(n, u)
        _check_node(n, v)
    dsu = DisjointSet(n)
    return sum(w for u, v, w in sorted(edge_list, key=lambda e: e[2]) if dsu.union(u, v))