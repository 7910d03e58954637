"""Exact and wildcard string matching: prefix function, KMP, Z-function."""

from __future__ import annotations


def prefix_function(pattern: str) -> list[int]:
    """For each position, the length of the longest proper border ending there.

    ``result[i]`` is the largest ``k < i + 1`` with
    ``pattern[:k] == pattern[i - k + 1 : i + 1]``.
    """
    pi = [0] * len(pattern)
    j = 0
    for i in range(1, len(pattern)):
        ch = pattern[i]
        while j and pattern[j] != ch:
            j = pi[j - 1]
        if pattern[j] == ch:
            j += 1
        pi[i] = j
    return pi


def kmp_search(text: str, pattern: str) -> list[int]:
    """Start indices of every occurrence of ``pattern`` in ``text``, overlaps included."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    pi = prefix_function(pattern)
    last = len(pattern) - 1
    matches = []
    j = 0
    for i, ch in enumerate(text):
        while j and pattern[j] != ch:
            j = pi[j - 1]
        if pattern[j] == ch:
            if j == last:
                matches.append(i - j)
                j = pi[j]
            else:
                j += 1
    return matches


def z_function(s: str) -> list[int]:
    """For each position ``i > 0``, the length of the longest common prefix of
    ``s`` and ``s[i:]``; position 0 holds 0."""
    n = len(s)
    z = [0] * n
    left = right = 0
    for i in range(1, n):
        if i <= right:
            z[i] = min(right - i + 1, z[i - left])
        while i + z[i] < n and s[z[i]] == s[i + z[i]]:
            z[i] += 1
        if i + z[i] - 1 > right:
            left, right = i, i + z[i] - 1
    return z


def wildcard_match(s: str, pattern: str) -> bool:
    """Whether ``pattern`` matches all of ``s``.

    ``?`` matches any one character and ``*`` any run of characters,
    the empty run included; every other character matches itself.
    """
    m = len(pattern)
    prev = [True] + [False] * m
    for j, ch in enumerate(pattern, 1):
        if ch != "*":
            break
        prev[j] = True

    for c in s:
        cur = [False] * (m + 1)
        for j, ch in enumerate(pattern, 1):
            if ch == "*":
                cur[j] = cur[j - 1] or prev[j] or prev[j - 1]
            elif ch == "?":
                cur[j] = prev[j - 1]
            else:
                cur[j] = prev[j - 1] and c == ch
        prev = cur
    return prev[m]