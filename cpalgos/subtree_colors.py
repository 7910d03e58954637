"""For every subtree, the sum of the colours that occur most often in it.

Counts from child subtrees are merged small-into-large, so each colour
occurrence moves O(log n) times.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field


@dataclass
class _Tally:
    counts: Counter[int] = field(default_factory=Counter)
    top: int = 0
    total: int = 0

    def add(self, color: int, amount: int = 1) -> None:
        self.counts[color] += amount
        count = self.counts[color]
        if count > self.top:
            self.top = count
            self.total = color
        elif count == self.top:
            self.total += color


def _postorder(n: int, edges: Iterable[tuple[int, int]]) -> tuple[list[int], dict[int, list[int]]]:
    edge_list = list(edges)
    if len(edge_list) != n - 1:
        raise ValueError(f"a tree on {n} nodes has {n - 1} edges, got {len(edge_list)}")
    adj: dict[int, list[int]] = {node: [] for node in range(1, n + 1)}
    for u, v in edge_list:
        for node in (u, v):
            if not 1 <= node <= n:
                raise ValueError(f"node {node} is outside 1..{n}")
        adj[u].append(v)
        adj[v].append(u)

    seen = {1}
    children: dict[int, list[int]] = {node: [] for node in range(1, n + 1)}
    order: list[int] = []
    stack = [(1, iter(adj[1]))]
    while stack:
        u, neighbours = stack[-1]
        for v in neighbours:
            if v in seen:
                continue
            seen.add(v)
            children[u].append(v)
            stack.append((v, iter(adj[v])))
            break
        else:
            stack.pop()
            order.append(u)
    if len(order) != n:
        raise ValueError("edges do not form a tree over all nodes")
    return order, children


def dominating_color_sums(
    colors: Sequence[int], edges: Iterable[tuple[int, int]]
) -> dict[int, int]:
    """Map each node of a tree rooted at 1 to the sum of its subtree's most frequent colours.

    ``colors[i - 1]`` is the colour of node ``i``.
    """
    colors = list(colors)
    n = len(colors)
    if n == 0:
        raise ValueError("a tree needs at least one node")
    order, children = _postorder(n, edges)

    tallies: dict[int, _Tally] = {}
    result: dict[int, int] = {}
    for u in order:
        child_tallies = [tallies.pop(v) for v in children[u]]
        if child_tallies:
            child_tallies.sort(key=lambda t: len(t.counts), reverse=True)
            tally = child_tallies[0]
            for other in child_tallies[1:]:
                for color, amount in other.counts.items():
                    tally.add(color, amount)
        else:
            tally = _Tally()
        tally.add(colors[u - 1])
        tallies[u] = tally
        result[u] = tally.total
    return {node: result[node] for node in range(1, n + 1)}