"""Dynamic programming on strings: LCS, palindromes, edit distance."""

from __future__ import annotations


def longest_common_subsequence(s: str, t: str) -> str:
    """One longest string that is a subsequence of both ``s`` and ``t``."""
    n, m = len(s), len(t)
    dp = [[0] * (m + 1) for _ in range(n + 1)]
    for i, a in enumerate(s, 1):
        row, above = dp[i], dp[i - 1]
        for j, b in enumerate(t, 1):
            best = max(above[j], row[j - 1])
            if a == b:
                best = max(best, above[j - 1] + 1)
            row[j] = best

    picked = []
    i, j = n, m
    while i > 0 and j > 0:
        if dp[i][j] == dp[i - 1][j]:
            i -= 1
        elif dp[i][j] == dp[i][j - 1]:
            j -= 1
        else:
            picked.append(s[i - 1])
            i -= 1
            j -= 1
    return "".join(reversed(picked))


def longest_palindromic_subsequence(s: str) -> int:
    """Length of the longest subsequence of ``s`` that reads the same reversed."""
    n = len(s)
    if n == 0:
        return 0
    dp = [[0] * n for _ in range(n)]
    for i in reversed(range(n)):
        dp[i][i] = 1
        for j in range(i + 1, n):
            if s[i] == s[j]:
                dp[i][j] = dp[i + 1][j - 1] + 2
            else:
                dp[i][j] = max(dp[i + 1][j], dp[i][j - 1])
    return dp[0][n - 1]


def longest_palindromic_substring(s: str) -> str:
    """Longest contiguous palindrome in ``s``; the leftmost one on a tie."""
    n = len(s)
    is_pal = [[False] * n for _ in range(n)]
    best_start, best_len = 0, min(n, 1)
    for i in reversed(range(n)):
        for j in range(i, n):
            if s[i] == s[j] and (j - i < 2 or is_pal[i + 1][j - 1]):
                is_pal[i][j] = True
                length = j - i + 1
                if length > best_len or (length == best_len and i < best_start):
                    best_start, best_len = i, length
    return s[best_start : best_start + best_len]


def edit_distance(a: str, b: str) -> int:
    """Fewest single-character insertions, deletions and replacements turning
    ``a`` into ``b``."""
    prev = list(range(len(a) + 1))
    for i, cb in enumerate(b, 1):
        cur = [i] + [0] * len(a)
        for j, ca in enumerate(a, 1):
            if ca == cb:
                cur[j] = prev[j - 1]
            else:
                cur[j] = min(prev[j - 1], prev[j], cur[j - 1]) + 1
        prev = cur
    return prev[-1]