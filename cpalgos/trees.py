"""Algorithms on trees with nodes 1..n given as n - 1 undirected edges."""

from __future__ import annotations

from collections.abc import Iterable

Edge = tuple[int, int]


def _check_node(n: int, node: int) -> None:
    if not 1 <= node <= n:
        raise ValueError(f"node {node} is outside 1..{n}")


def _postorder(
    adj: dict[int, list[int]], root: int
) -> tuple[dict[int, int | None], list[int]]:
    parent: dict[int, int | None] = {root: None}
    order: list[int] = []
    stack = [(root, iter(adj[root]))]
    while stack:
        u, neighbours = stack[-1]
        for v in neighbours:
            if v in parent:
                continue
            parent[v] = u
            stack.append((v, iter(adj[v])))
            break
        else:
            stack.pop()
            order.append(u)
    return parent, order


def _tree(
    n: int, edges: Iterable[Edge], root: int = 1
) -> tuple[dict[int, list[int]], dict[int, int | None], list[int]]:
    """Adjacency, parents and DFS post-order of a validated tree."""
    if n < 1:
        raise ValueError("a tree needs at least one node")
    _check_node(n, root)
    edge_list = list(edges)
    if len(edge_list) != n - 1:
        raise ValueError(f"a tree on {n} nodes has {n - 1} edges, got {len(edge_list)}")
    adj: dict[int, list[int]] = {node: [] for node in range(1, n + 1)}
    for u, v in edge_list:
        _check_node(n, u)
        _check_node(n, v)
        adj[u].append(v)
        adj[v].append(u)
    parent, order = _postorder(adj, root)
    if len(order) != n:
        raise ValueError("edges do not connect all nodes")
    return adj, parent, order


def _children(adj: dict[int, list[int]], parent: dict[int, int | None], u: int) -> list[int]:
    return [v for v in adj[u] if parent[v] == u]


def _top_two(values: Iterable[int]) -> tuple[int, int]:
    first = second = -1
    for h in values:
        if h >= first:
            first, second = h, first
        elif h > second:
            second = h
    return first, second


def centroids(n: int, edges: Iterable[Edge]) -> list[int]:
    """Nodes whose removal leaves no component larger than n // 2 (one or two)."""
    adj, parent, order = _tree(n, edges)
    size: dict[int, int] = {}
    found = []
    for u in order:
        total = 1
        balanced = True
        for v in _children(adj, parent, u):
            total += size[v]
            if size[v] > n // 2:
                balanced = False
        if n - total > n // 2:
            balanced = False
        size[u] = total
        if balanced:
            found.append(u)
    return found


def diameter(n: int, edges: Iterable[Edge]) -> int:
    """Number of edges on the longest path in the tree."""
    adj, parent, order = _tree(n, edges)
    height: dict[int, int] = {}
    best = 0
    for u in order:
        first, second = _top_two(height[v] for v in _children(adj, parent, u))
        best = max(best, first + second + 2)
        height[u] = first + 1
    return best


def heights_from_every_root(n: int, edges: Iterable[Edge]) -> dict[int, int]:
    """Height of the tree when rooted at each node, by re-rooting DP."""
    adj, parent, order = _tree(n, edges)
    inner: dict[int, int] = {}
    for u in order:
        inner[u] = max((1 + inner[v] for v in _children(adj, parent, u)), default=0)

    outer = {order[-1]: 0}
    for u in reversed(order):
        kids = _children(adj, parent, u)
        first, second = _top_two(inner[v] for v in kids)
        for v in kids:
            use = second if inner[v] == first else first
            outer[v] = max(2 + use, 1 + outer[u])
    return {node: max(inner[node], outer[node]) for node in range(1, n + 1)}


class LowestCommonAncestor:
    """Binary-lifting tables for ancestor queries on a rooted tree."""

    def __init__(self, n: int, edges: Iterable[Edge], root: int) -> None:
        adj, parent, order = _tree(n, edges, root)
        self.n = n
        self.root = root
        self._depth = [0] * (n + 1)
        for u in reversed(order):
            for v in _children(adj, parent, u):
                self._depth[v] = self._depth[u] + 1
        # Index 0 stands for "above the root" and points to itself.
        first = [0] * (n + 1)
        for v, p in parent.items():
            first[v] = p if p is not None else 0
        self._up = [first]
        for _ in range(1, max(1, n.bit_length())):
            prev = self._up[-1]
            self._up.append([prev[prev[v]] for v in range(n + 1)])

    def lca(self, u: int, v: int) -> int:
        """Deepest node that is an ancestor of both ``u`` and ``v``."""
        _check_node(self.n, u)
        _check_node(self.n, v)
        depth = self._depth
        if depth[u] < depth[v]:
            u, v = v, u
        for i in reversed(range(len(self._up))):
            if depth[u] - (1 << i) >= depth[v]:
                u = self._up[i][u]
        if u == v:
            return u
        for table in reversed(self._up):
            if table[u] != table[v]:
                u, v = table[u], table[v]
        return self._up[0][u]

    def distance(self, u: int, v: int) -> int:
        """Number of edges on the path between ``u`` and ``v``."""
        w = self.lca(u, v)
        return self._depth[u] + self._depth[v] - 2 * self._depth[w]

    def kth_ancestor(self, u: int, k: int) -> int | None:
        """The ancestor ``k`` steps above ``u``, or None past the root."""
        _check_node(self.n, u)
        if k < 0:
            raise ValueError("k must not be negative")
        if k > self._depth[u]:
            return None
        for i in _set_bits(k):
            u = self._up[i][u]
        return u


def _set_bits(k: int) -> list[int]:
    return [i for i in range(k.bit_length()) if k >> i & 1]