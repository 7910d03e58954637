"""Enumerating subsets and orderings of a sequence."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import permutations


def max_combination_sum(values: Iterable[int]) -> int:
    """Largest sum of any non-empty subset, or 0 when every subset sums below 0."""
    return sum(v for v in values if v > 0)


def _chains(s: str, start: int, suffix: str) -> Iterator[str]:
    word = s[start] + suffix
    yield word
    for nxt in range(start + 1, len(s)):
        yield from _chains(s, nxt, word)


def combinations_of(s: str) -> list[str]:
    """Every non-empty selection of characters of ``s``, in depth-first order.

    Characters are picked left to right and each pick is put in front, so
    each result reads its characters in reverse order of position.
    """
    return [word for start in range(len(s)) for word in _chains(s, start, "")]


def permutations_of(s: str) -> list[str]:
    """Every arrangement of the characters of ``s``, ordered by positions."""
    if not s:
        return []
    return ["".join(p) for p in permutations(s)]