"""Bitmask dynamic programming over vertex subsets: Hamiltonian paths and tours.

Vertices are numbered 0..n-1.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Sequence


def _bits(mask: int) -> Iterator[int]:
    while mask:
        low = mask & -mask
        yield low.bit_length() - 1
        mask ^= low


def has_hamiltonian_path(n: int, edges: Iterable[tuple[int, int]]) -> bool:
    """Whether an undirected graph has a path visiting every vertex exactly once."""
    if n < 0:
        raise ValueError("n must not be negative")
    adj = [0] * n
    for a, b in edges:
        for node in (a, b):
            if not 0 <= node < n:
                raise ValueError(f"vertex {node} is outside 0..{n - 1}")
        adj[a] |= 1 << b
        adj[b] |= 1 << a

    # ends[mask] has bit i set when some path over exactly `mask` ends at i.
    ends = [0] * (1 << n)
    for i in range(n):
        ends[1 << i] = 1 << i
    for mask in range(1, 1 << n):
        for i in _bits(mask):
            bit = 1 << i
            if ends[mask ^ bit] & adj[i]:
                ends[mask] |= bit
    return n > 0 and ends[(1 << n) - 1] != 0


def shortest_tour(weights: Sequence[Sequence[int]]) -> tuple[int, list[int]]:
    """Cheapest closed tour through every vertex of a weighted matrix.

    Returns the cost and the visiting order, which starts at vertex 0; the
    tour closes by returning from the last vertex to 0.
    """
    n = len(weights)
    if n == 0:
        raise ValueError("weights must not be empty")
    if any(len(row) != n for row in weights):
        raise ValueError("weights must be a square matrix")

    full = (1 << n) - 1
    # best[mask][i]: cheapest way to finish, standing at i having visited `mask`.
    best: list[list[float]] = [[math.inf] * n for _ in range(1 << n)]
    best[full] = [weights[i][0] for i in range(n)]
    for mask in range(full - 1, 0, -1):
        row = best[mask]
        unvisited = [j for j in range(n) if not mask >> j & 1]
        for i in _bits(mask):
            row[i] = min(
                weights[i][j] + best[mask | 1 << j][j] for j in unvisited
            )

    order = [0]
    current, mask = 0, 1
    while mask != full:
        node = min(
            (j for j in range(n) if not mask >> j & 1),
            key=lambda j: weights[current][j] + best[mask | 1 << j][j],
        )
        order.append(node)
        mask |= 1 << node
        current = node
    return int(best[1][0]), order