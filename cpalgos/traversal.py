"""Breadth-first and depth-first traversals on graphs with nodes 1..n."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

Edge = tuple[int, int]


def _check_node(n: int, node: int) -> None:
    if not 1 <= node <= n:
        raise ValueError(f"node {node} is outside 1..{n}")


def _adjacency(n: int, edges: Iterable[Edge], *, directed: bool) -> dict[int, list[int]]:
    adj: dict[int, list[int]] = {node: [] for node in range(1, n + 1)}
    for u, v in edges:
        _check_node(n, u)
        _check_node(n, v)
        adj[u].append(v)
        if not directed:
            adj[v].append(u)
    return adj


def bfs_order(n: int, edges: Iterable[Edge], source: int) -> list[int]:
    """Nodes of an undirected graph in the order a BFS from ``source`` visits them."""
    _check_node(n, source)
    adj = _adjacency(n, edges, directed=False)
    seen = {source}
    queue = deque([source])
    order = []
    while queue:
        u = queue.popleft()
        order.append(u)
        for v in adj[u]:
            if v not in seen:
                seen.add(v)
                queue.append(v)
    return order


def shortest_path(
    n: int, edges: Iterable[Edge], start: int, goal: int
) -> list[int] | None:
    """Fewest-edge path from ``start`` to ``goal`` in an undirected graph, or None."""
    _check_node(n, start)
    _check_node(n, goal)
    adj = _adjacency(n, edges, directed=False)
    previous = {start: start}
    queue = deque([start])
    while queue:
        u = queue.popleft()
        for v in adj[u]:
            if v not in previous:
                previous[v] = u
                queue.append(v)
    if goal not in previous:
        return None
    path = [goal]
    while path[-1] != start:
        path.append(previous[path[-1]])
    path.reverse()
    return path


def topological_sort(n: int, edges: Iterable[Edge]) -> list[int]:
    """Reverse DFS post-order of a directed graph, starting DFS from 1..n in turn.

    For a graph with cycles the result is still a permutation but not a valid order.
    """
    adj = _adjacency(n, edges, directed=True)
    visited: set[int] = set()
    order: list[int] = []
    for root in range(1, n + 1):
        if root in visited:
            continue
        visited.add(root)
        work = [(root, iter(adj[root]))]
        while work:
            u, neighbours = work[-1]
            for v in neighbours:
                if v not in visited:
                    visited.add(v)
                    work.append((v, iter(adj[v])))
                    break
            else:
                work.pop()
                order.append(u)
    order.reverse()
    return order


def has_directed_cycle(n: int, edges: Iterable[Edge]) -> bool:
    """Whether a directed graph contains a cycle (self-loops count)."""
    adj = _adjacency(n, edges, directed=True)
    on_path: set[int] = set()
    finished: set[int] = set()
    for root in range(1, n + 1):
        if root in on_path or root in finished:
            continue
        on_path.add(root)
        work = [(root, iter(adj[root]))]
        while work:
            u, neighbours = work[-1]
            for v in neighbours:
                if v in on_path:
                    return True
                if v not in finished:
                    on_path.add(v)
                    work.append((v, iter(adj[v])))
                    break
            else:
                work.pop()
                on_path.discard(u)
                finished.add(u)
    return False


def find_undirected_cycle(n: int, edges: Iterable[Edge], start: int) -> list[int]:
    """First cycle a DFS from ``start`` meets, as ``[x, ..., x]``, or ``[]``.

    The edge back to the DFS parent is never followed, so a pair of parallel
    edges is not taken for a cycle.
    """
    _check_node(n, start)
    adj = _adjacency(n, edges, directed=False)
    visited = {start}
    path = [start]
    work: list[tuple[int, int | None, Iterable[int]]] = [(start, None, iter(adj[start]))]
    while work:
        u, parent, neighbours = work[-1]
        for v in neighbours:
            if v == parent:
                continue
            if v in visited:
                position = path.index(v)
                return [v, *reversed(path[position + 1:]), v]
            visited.add(v)
            path.append(v)
            work.append((v, u, iter(adj[v])))
            break
        else:
            work.pop()
            path.pop()
    return []