"""Array routines: counting sorts, maximum subarray sums, subarray with a given sum."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate


def _counts(values: Sequence[int]) -> list[int]:
    for value in values:
        if value < 0:
            raise ValueError(f"value {value} is negative")
    counts = [0] * (max(values) + 1)
    for value in values:
        counts[value] += 1
    return counts


def counting_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers by counting how often each occurs."""
    values = list(values)
    if not values:
        return []
    counts = _counts(values)
    return [value for value, count in enumerate(counts) for _ in range(count)]


def stable_counting_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers by prefix-summed counts, keeping equal items in order."""
    values = list(values)
    if not values:
        return []
    ends = list(accumulate(_counts(values)))
    result = [0] * len(values)
    for value in reversed(values):
        ends[value] -= 1
        result[ends[value]] = value
    return result


def max_subarray_sum(values: Iterable[int]) -> int:
    """Largest sum of a non-empty contiguous run (Kadane)."""
    best: int | None = None
    current = 0
    for value in values:
        current += value
        if best is None or current > best:
            best = current
        if current < 0:
            current = 0
    if best is None:
        raise ValueError("values must not be empty")
    return best


def _best_between(values: Sequence[int], lo: int, hi: int) -> int:
    if lo == hi:
        return values[lo]
    mid = (lo + hi) // 2
    best = max(_best_between(values, lo, mid), _best_between(values, mid + 1, hi))
    right = max(accumulate(values[mid + 1 : hi + 1]))
    left = max(accumulate(reversed(values[lo : mid + 1])))
    return max(best, right + left)


def max_subarray_sum_divide(values: Iterable[int]) -> int:
    """Largest sum of a non-empty contiguous run, by divide and conquer."""
    values = list(values)
    if not values:
        raise ValueError("values must not be empty")
    return _best_between(values, 0, len(values) - 1)


def find_subarray_with_sum(
    values: Sequence[int], target: int
) -> tuple[int, int] | None:
    """First window ``(start, stop)`` with ``sum(values[start:stop]) == target``.

    Uses a sliding window, so it is meant for non-negative values; windows are
    tried by increasing end. Returns None when no window matches.
    """
    start = 0
    total = 0
    for i, value in enumerate(values):
        total += value
        while start <= i and total > target:
            total -= values[start]
            start += 1
        if total == target:
            return start, i + 1
    return None