"""Connectivity of graphs with nodes 1..n: cut vertices, bridges, SCCs, 2-colouring."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterable
from itertools import count

from .traversal import topological_sort

Edge = tuple[int, int]


def _check_node(n: int, node: int) -> None:
    if not 1 <= node <= n:
        raise ValueError(f"node {node} is outside 1..{n}")


def _undirected(n: int, edges: Iterable[Edge]) -> dict[int, list[int]]:
    adj: dict[int, list[int]] = {node: [] for node in range(1, n + 1)}
    for u, v in edges:
        _check_node(n, u)
        _check_node(n, v)
        adj[u].append(v)
        adj[v].append(u)
    return adj


def _lowlink(
    n: int, adj: dict[int, list[int]]
) -> tuple[list[Edge], dict[int, int], dict[int, int], set[int]]:
    """DFS over every component; return tree edges in finish order, tin, low, roots.

    Every edge leading back to the DFS parent is skipped, parallel ones included.
    """
    tin: dict[int, int] = {}
    low: dict[int, int] = {}
    tree_edges: list[Edge] = []
    roots: set[int] = set()
    timer = count()
    for root in range(1, n + 1):
        if root in tin:
            continue
        roots.add(root)
        tin[root] = low[root] = next(timer)
        stack = [(root, None, iter(adj[root]))]
        while stack:
            u, parent, neighbours = stack[-1]
            for v in neighbours:
                if v == parent:
                    continue
                if v in tin:
                    low[u] = min(low[u], tin[v])
                else:
                    tin[v] = low[v] = next(timer)
                    stack.append((v, u, iter(adj[v])))
                    break
            else:
                stack.pop()
                if parent is not None:
                    low[parent] = min(low[parent], low[u])
                    tree_edges.append((parent, u))
    return tree_edges, tin, low, roots


def articulation_points(n: int, edges: Iterable[Edge]) -> list[int]:
    """Cut vertices of an undirected graph, in increasing order."""
    tree_edges, tin, low, roots = _lowlink(n, _undirected(n, edges))
    points: set[int] = set()
    root_children: Counter[int] = Counter()
    for parent, child in tree_edges:
        if parent in roots:
            root_children[parent] += 1
        elif tin[parent] <= low[child]:
            points.add(parent)
    points.update(root for root in roots if root_children[root] > 1)
    return sorted(points)


def bridges(n: int, edges: Iterable[Edge]) -> list[Edge]:
    """Bridges of an undirected graph as sorted ``(smaller, larger)`` pairs.

    Edges back to the DFS parent are never followed, so a pair of parallel
    edges between the same two nodes is still reported as a bridge.
    """
    tree_edges, tin, low, _ = _lowlink(n, _undirected(n, edges))
    return sorted(
        (min(parent, child), max(parent, child))
        for parent, child in tree_edges
        if tin[parent] < low[child]
    )


def count_strongly_connected_components(n: int, edges: Iterable[Edge]) -> int:
    """Number of strongly connected components of a directed graph (Kosaraju)."""
    edge_list = list(edges)
    order = topological_sort(n, edge_list)
    reverse: dict[int, list[int]] = {node: [] for node in range(1, n + 1)}
    for u, v in edge_list:
        reverse[v].append(u)

    seen: set[int] = set()
    components = 0
    for node in order:
        if node in seen:
            continue
        components += 1
        seen.add(node)
        stack = [node]
        while stack:
            u = stack.pop()
            for v in reverse[u]:
                if v not in seen:
                    seen.add(v)
                    stack.append(v)
    return components


def bipartite_coloring(n: int, edges: Iterable[Edge]) -> list[int] | None:
    """Colours 1 or 2 for nodes 1..n so that every edge joins two colours, or None.

    Each component's lowest-numbered node gets colour 1.
    """
    adj = _undirected(n, edges)
    color: dict[int, int] = {}
    for start in range(1, n + 1):
        if start in color:
            continue
        color[start] = 0
        queue = deque([start])
        while queue:
            u = queue.popleft()
            for v in adj[u]:
                if v not in color:
                    color[v] = color[u] ^ 1
                    queue.append(v)
                elif color[v] == color[u]:
                    return None
    return [color[node] + 1 for node in range(1, n + 1)]