"""Shortest paths on weighted graphs whose nodes are numbered 1..n.

Distances to nodes that cannot be reached are reported as ``None``.
"""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable

Edge = tuple[int, int, int]
Distances = dict[int, "int | None"]

# Sentinel used by the negative-cycle search; it relaxes edges even from
# nodes that have not been reached, so every negative cycle is found.
_INF = 10**18


def _check_node(n: int, node: int) -> None:
    if not 1 <= node <= n:
        raise ValueError(f"node {node} is outside 1..{n}")


def _checked_edges(n: int, edges: Iterable[Edge]) -> list[Edge]:
    checked = []
    for u, v, w in edges:
        _check_node(n, u)
        _check_node(n, v)
        checked.append((u, v, w))
    return checked


def _adjacency(
    n: int, edges: Iterable[Edge], *, directed: bool
) -> dict[int, list[tuple[int, int]]]:
    adj: dict[int, list[tuple[int, int]]] = {node: [] for node in range(1, n + 1)}
    for u, v, w in _checked_edges(n, edges):
        adj[u].append((v, w))
        if not directed:
            adj[v].append((u, w))
    return adj


def _reject_negative(edges: list[Edge]) -> None:
    for u, v, w in edges:
        if w < 0:
            raise ValueError(f"edge {u}-{v} has negative weight {w}")


def zero_one_bfs(n: int, edges: Iterable[Edge], source: int) -> Distances:
    """Distances from ``source`` in an undirected graph with weights 0 or x.

    Zero-weight edges go to the front of the deque, others to the back.
    """
    _check_node(n, source)
    edge_list = _checked_edges(n, edges)
    _reject_negative(edge_list)
    adj = _adjacency(n, edge_list, directed=False)

    dist = {source: 0}
    done: set[int] = set()
    queue = deque([source])
    while queue:
        u = queue.popleft()
        if u in done:
            continue
        done.add(u)
        for v, w in adj[u]:
            if v in done:
                continue
            candidate = dist[u] + w
            if v not in dist or candidate < dist[v]:
                dist[v] = candidate
                if w:
                    queue.append(v)
                else:
                    queue.appendleft(v)
    return {node: dist.get(node) for node in range(1, n + 1)}


def dijkstra(n: int, edges: Iterable[Edge], source: int) -> Distances:
    """Distances from ``source`` along directed edges ``(u, v, w)``, ``w >= 0``."""
    _check_node(n, source)
    edge_list = _checked_edges(n, edges)
    _reject_negative(edge_list)
    adj = _adjacency(n, edge_list, directed=True)

    dist = {source: 0}
    done: set[int] = set()
    heap = [(0, source)]
    while heap:
        _, u = heapq.heappop(heap)
        if u in done:
            continue
        done.add(u)
        for v, w in adj[u]:
            if v in done:
                continue
            candidate = dist[u] + w
            if v not in dist or candidate < dist[v]:
                dist[v] = candidate
                heapq.heappush(heap, (candidate, v))
    return {node: dist.get(node) for node in range(1, n + 1)}


def floyd_warshall(n: int, edges: Iterable[Edge]) -> dict[int, Distances]:
    """All-pairs distances for undirected edges; parallel edges keep the lightest."""
    nodes = range(1, n + 1)
    dist: dict[int, Distances] = {
        i: {j: (0 if i == j else None) for j in nodes} for i in nodes
    }
    for u, v, w in _checked_edges(n, edges):
        for a, b in ((u, v), (v, u)):
            current = dist[a][b]
            if current is None or w < current:
                dist[a][b] = w

    for k in nodes:
        row_k = dist[k]
        for i in nodes:
            row_i = dist[i]
            d_ik = row_i[k]
            if d_ik is None:
                continue
            for j in nodes:
                d_kj = row_k[j]
                if d_kj is None:
                    continue
                candidate = d_ik + d_kj
                current = row_i[j]
                if current is None or candidate < current:
                    row_i[j] = candidate
    return dist


def bellman_ford(n: int, edges: Iterable[Edge], source: int) -> Distances:
    """Distances from ``source`` along directed edges, negative weights allowed.

    Runs ``n - 1`` rounds of relaxation; negative cycles are not reported here.
    """
    _check_node(n, source)
    edge_list = _checked_edges(n, edges)
    dist: Distances = dict.fromkeys(range(1, n + 1))
    dist[source] = 0
    for _ in range(n - 1):
        for a, b, w in edge_list:
            d_a = dist[a]
            if d_a is None:
                continue
            candidate = d_a + w
            d_b = dist[b]
            if d_b is None or candidate < d_b:
                dist[b] = candidate
    return dist


def find_negative_cycle(n: int, edges: Iterable[Edge], source: int) -> list[int]:
    """Return a negative cycle as ``[x, ..., x]`` in edge order, or ``[]``.

    Any negative cycle in the graph may be returned, reachable from
    ``source`` or not.
    """
    _check_node(n, source)
    edge_list = _checked_edges(n, edges)
    dist = dict.fromkeys(range(1, n + 1), _INF)
    dist[source] = 0
    parent: dict[int, int | None] = dict.fromkeys(range(1, n + 1))

    last: int | None = None
    for _ in range(n):
        last = None
        for a, b, w in edge_list:
            if dist[a] + w < dist[b]:
                dist[b] = dist[a] + w
                parent[b] = a
                last = b

    if last is None:
        return []

    for _ in range(n):
        last = parent[last]

    cycle = [last]
    node = parent[last]
    while node != last:
        cycle.append(node)
        node = parent[node]
    cycle.append(last)
    cycle.reverse()
    return cycle