"""Classic dynamic programmes: 0-1 knapsack, sums over subsets, matrix chains."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def knapsack(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Largest total value of items, each used at most once, within ``capacity``.

    Item ``i`` weighs ``weights[i]`` and is worth ``values[i]``.
    """
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if any(w < 0 for w in weights):
        raise ValueError("weights must not be negative")

    # best[j]: most value reachable with total weight at most j.
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for j in range(capacity, 0, -1):
            left = j - weight
            if left >= 0 and value + best[left] > best[j]:
                best[j] = value + best[left]
    return best[capacity]


def subset_sums(values: Iterable[int]) -> list[int]:
    """For every index ``mask``, the sum of ``values[x]`` over all ``x`` whose
    bits are a subset of the bits of ``mask``."""
    sums = list(values)
    n = len(sums)
    for bit in range(max(n - 1, 0).bit_length()):
        step = 1 << bit
        for mask in range(n):
            if mask & step:
                sums[mask] += sums[mask ^ step]
    return sums


def matrix_chain_cost(dims: Sequence[int]) -> int:
    """Fewest scalar multiplications to multiply a chain of matrices.

    Matrix ``i`` (counting from 1) has shape ``dims[i - 1] x dims[i]``.
    """
    count = len(dims) - 1
    if count < 1:
        raise ValueError("dims must describe at least one matrix")
    if any(d <= 0 for d in dims):
        raise ValueError("dimensions must be positive")

    # cost[i][j]: cheapest way to multiply matrices i..j (1-based).
    cost = [[0] * (count + 1) for _ in range(count + 1)]
    for length in range(2, count + 1):
        for i in range(1, count - length + 2):
            j = i + length - 1
            cost[i][j] = min(
                cost[i][k] + cost[k + 1][j] + dims[i - 1] * dims[k] * dims[j]
                for k in range(i, j)
            )
    return cost[1][count]