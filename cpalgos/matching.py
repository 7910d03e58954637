"""Maximum bipartite matching by repeated augmenting-path rounds.

Left vertices are numbered 1..n and right vertices 1..m.
"""

from __future__ import annotations


class BipartiteMatching:
    """Bipartite graph whose maximum matching is grown by augmenting paths.

    Each round tries every unmatched left vertex once, and rounds repeat
    until one adds nothing; about O(E * sqrt(V)) in practice.
    """

    def __init__(self, n: int, m: int) -> None:
        if n < 0 or m < 0:
            raise ValueError("side sizes must not be negative")
        self.n = n
        self.m = m
        self._graph: list[list[int]] = [[] for _ in range(n + 1)]
        self._left_mate: list[int | None] = [None] * (n + 1)
        self._right_mate: list[int | None] = [None] * (m + 1)
        self._seen = [0] * (n + 1)
        self._round = 0
        self._result = 0

    def _check_left(self, v: int) -> None:
        if not 1 <= v <= self.n:
            raise ValueError(f"left vertex {v} is outside 1..{self.n}")

    def add_edge(self, frm: int, to: int) -> None:
        """Connect left vertex ``frm`` with right vertex ``to``."""
        self._check_left(frm)
        if not 1 <= to <= self.m:
            raise ValueError(f"right vertex {to} is outside 1..{self.m}")
        self._graph[frm].append(to)

    def _link(self, v: int, u: int) -> None:
        self._left_mate[v] = u
        self._right_mate[u] = v

    def _first_free(self, v: int) -> int | None:
        self._seen[v] = self._round
        return next(
            (u for u in self._graph[v] if self._right_mate[u] is None), None
        )

    def _augment(self, root: int) -> bool:
        free = self._first_free(root)
        if free is not None:
            self._link(root, free)
            return True
        # Each frame: left vertex, its remaining neighbours, neighbour being tried.
        stack = [[root, iter(self._graph[root]), None]]
        while stack:
            frame = stack[-1]
            neighbours = frame[1]
            for u in neighbours:
                owner = self._right_mate[u]
                if self._seen[owner] == self._round:
                    continue
                frame[2] = u
                free = self._first_free(owner)
                if free is not None:
                    self._link(owner, free)
                    for v, _, tried in reversed(stack):
                        self._link(v, tried)
                    return True
                stack.append([owner, iter(self._graph[owner]), None])
                break
            else:
                stack.pop()
        return False

    def solve(self) -> int:
        """Grow the matching to its maximum; return the pairs added by ``solve`` calls."""
        while True:
            self._round += 1
            added = sum(
                1
                for v in range(1, self.n + 1)
                if self._left_mate[v] is None and self._augment(v)
            )
            if not added:
                return self._result
            self._result += added

    def run_one(self, v: int) -> int:
        """Try one augmenting path from left vertex ``v``; 1 if it got matched, else 0."""
        self._check_left(v)
        if self._left_mate[v] is not None:
            return 0
        self._round += 1
        return int(self._augment(v))