"""Maximum flow on directed graphs with nodes 1..n: Dinic and Edmonds-Karp."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterable
from dataclasses import dataclass

Edge = tuple[int, int, int]

_INF = 10**18


def _check_node(n: int, node: int) -> None:
    if not 1 <= node <= n:
        raise ValueError(f"node {node} is outside 1..{n}")


def _check_capacity(capacity: int) -> None:
    if capacity < 0:
        raise ValueError(f"capacity {capacity} is negative")


@dataclass
class _FlowEdge:
    to: int
    capacity: int
    flow: int = 0

    @property
    def residual(self) -> int:
        return self.capacity - self.flow


class Dinic:
    """Flow network solved with Dinic's blocking flows, O(V^2 E)."""

    def __init__(self, n: int, source: int, sink: int) -> None:
        _check_node(n, source)
        _check_node(n, sink)
        if source == sink:
            raise ValueError("source and sink must differ")
        self.n = n
        self.source = source
        self.sink = sink
        # Edge 2k is a forward edge, edge 2k + 1 its residual twin.
        self._edges: list[_FlowEdge] = []
        self._adj: list[list[int]] = [[] for _ in range(n + 1)]

    def add_edge(self, v: int, u: int, capacity: int) -> None:
        """Add a directed edge ``v -> u``."""
        _check_node(self.n, v)
        _check_node(self.n, u)
        _check_capacity(capacity)
        self._adj[v].append(len(self._edges))
        self._edges.append(_FlowEdge(u, capacity))
        self._adj[u].append(len(self._edges))
        self._edges.append(_FlowEdge(v, 0))

    def _levels(self) -> list[int] | None:
        level = [-1] * (self.n + 1)
        level[self.source] = 0
        queue = deque([self.source])
        while queue:
            v = queue.popleft()
            for eid in self._adj[v]:
                edge = self._edges[eid]
                if edge.residual < 1 or level[edge.to] != -1:
                    continue
                level[edge.to] = level[v] + 1
                queue.append(edge.to)
        return level if level[self.sink] != -1 else None

    def _augment(self, level: list[int], ptr: list[int]) -> int:
        path: list[int] = []
        v = self.source
        while v != self.sink:
            adj = self._adj[v]
            while ptr[v] < len(adj):
                edge = self._edges[adj[ptr[v]]]
                if level[edge.to] == level[v] + 1 and edge.residual >= 1:
                    break
                ptr[v] += 1
            else:
                if not path:
                    return 0
                eid = path.pop()
                v = self._edges[eid ^ 1].to
                ptr[v] += 1
                continue
            eid = adj[ptr[v]]
            path.append(eid)
            v = self._edges[eid].to

        pushed = min(self._edges[eid].residual for eid in path)
        for eid in path:
            self._edges[eid].flow += pushed
            self._edges[eid ^ 1].flow -= pushed
        return pushed

    def max_flow(self) -> int:
        """Push as much flow as the residual network allows; return the amount."""
        total = 0
        while (level := self._levels()) is not None:
            ptr = [0] * (self.n + 1)
            while pushed := self._augment(level, ptr):
                total += pushed
        return total


def _augmenting_path(
    adj: dict[int, list[int]],
    capacity: dict[tuple[int, int], int],
    source: int,
    sink: int,
) -> tuple[dict[int, int | None], int] | None:
    parent: dict[int, int | None] = {source: None}
    queue = deque([(source, _INF)])
    while queue:
        cur, bottleneck = queue.popleft()
        for nxt in adj[cur]:
            if nxt not in parent and capacity[cur, nxt]:
                parent[nxt] = cur
                new_flow = min(bottleneck, capacity[cur, nxt])
                if nxt == sink:
                    return parent, new_flow
                queue.append((nxt, new_flow))
    return None


def edmonds_karp(n: int, edges: Iterable[Edge], source: int, sink: int) -> int:
    """Maximum flow from ``source`` to ``sink`` using BFS augmenting paths."""
    _check_node(n, source)
    _check_node(n, sink)
    capacity: dict[tuple[int, int], int] = defaultdict(int)
    adj: dict[int, list[int]] = {node: [] for node in range(1, n + 1)}
    for a, b, c in edges:
        _check_node(n, a)
        _check_node(n, b)
        _check_capacity(c)
        adj[a].append(b)
        adj[b].append(a)
        capacity[a, b] += c

    flow = 0
    while (found := _augmenting_path(adj, capacity, source, sink)) is not None:
        parent, pushed = found
        flow += pushed
        cur = sink
        while cur != source:
            prev = parent[cur]
            capacity[prev, cur] -= pushed
            capacity[cur, prev] += pushed
            cur = prev
    return flow