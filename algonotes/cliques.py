"""Maximum clique by bitset branch and bound, and triangle enumeration."""

from __future__ import annotations

from collections.abc import Iterable


class MaxClique:
    """Maximum clique of an undirected graph on vertices 0 .. n-1."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("number of vertices must be non-negative")
        self.n = n
        self._degree = [0] * n
        self._edges: list[tuple[int, int]] = []

    def add_edge(self, u: int, v: int) -> None:
        """Add the undirected edge u-v."""
        for x in (u, v):
            if not 0 <= x < self.n:
                raise IndexError(f"vertex {x} out of range")
        self._edges.append((u, v))
        self._degree[u] += 1
        self._degree[v] += 1

    def solve(self) -> list[int]:
        """Vertices of one maximum clique."""
        n = self.n
        order = sorted(range(n), key=self._degree.__getitem__)
        rank = [0] * n
        for i, v in enumerate(order):
            rank[v] = i
        graph = [0] * n
        for u, v in self._edges:
            a, b = rank[u], rank[v]
            graph[a] |= 1 << b
            graph[b] |= 1 << a

        best = 0

        def search(chosen: int, candidates: int) -> None:
            nonlocal best
            if not candidates:
                if chosen.bit_count() > best.bit_count():
                    best = chosen
                return
            if (chosen | candidates).bit_count() <= best.bit_count():
                return
            remaining = candidates
            while remaining:
                low = remaining & -remaining
                x = low.bit_length() - 1
                search(chosen | low, candidates & graph[x])
                candidates &= ~low
                remaining ^= low

        search(0, (1 << n) - 1)
        return [order[i] for i in range(n) if (best >> i) & 1]


def find_triangles(
    n: int, edges: Iterable[tuple[int, int]]
) -> list[tuple[int, int, int]]:
    """Every triangle of the graph once, in O(n + m*sqrt(m)).

    Repeated edges and self-loops are ignored.
    """
    unique = sorted({(u, v) for u, v in edges})
    degree = [0] * n
    for u, v in unique:
        if u != v:
            degree[u] += 1
            degree[v] += 1

    forward: list[list[int]] = [[] for _ in range(n)]
    for u, v in unique:
        if u == v:
            continue
        if (degree[u], u) > (degree[v], v):
            u, v = v, u
        forward[u].append(v)

    triangles = []
    for i in range(n):
        marked = set(forward[i])
        for j in forward[i]:
            triangles.extend((i, j, k) for k in forward[j] if k in marked)
    return triangles