"""Binary searches over sorted sequences and the longest increasing subsequence."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Iterable, Sequence

_EPS = 1e-7


def last_index_at_most(values: Sequence[int], x: int) -> int:
    """Index of the last element ``<= x`` in ascending ``values``.

    Returns 0 when every element is larger than ``x``.
    """
    if not values:
        raise ValueError("values must not be empty")
    return max(bisect_right(values, x) - 1, 0)


def first_index_at_least(values: Sequence[int], x: int) -> int:
    """Index of the first element ``>= x`` in ascending ``values``.

    Returns the last index when every element is smaller than ``x``.
    """
    if not values:
        raise ValueError("values must not be empty")
    return min(bisect_left(values, x), len(values) - 1)


def bisect_sqrt(n: int) -> float:
    """Square root of ``n`` found by bisection, accurate to about 1e-7.

    The result never exceeds the true root: ``result * result <= n``.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    lo, hi = 0.0, float(n)
    while hi - lo >= _EPS:
        mid = (lo + hi + _EPS) / 2.0
        if mid * mid <= n:
            if mid <= lo:
                break
            lo = mid
        else:
            new_hi = mid - _EPS
            if new_hi >= hi:
                break
            hi = new_hi
    return lo


def lis_length(values: Iterable[int]) -> int:
    """Length of the longest strictly increasing subsequence."""
    tails: list[int] = []
    for value in values:
        pos = bisect_left(tails, value)
        if pos == len(tails):
            tails.append(value)
        else:
            tails[pos] = value
    return len(tails)