"""Disjoint-set forest with path compression and union by rank."""

from __future__ import annotations


class UnionFind:
    """Union-find over the elements 0 .. n-1."""

    __slots__ = ("_parent", "_rank", "_size", "_num_sets")

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("number of elements must be non-negative")
        self._parent = list(range(n))
        self._rank = [0] * n
        self._size = [1] * n
        self._num_sets = n

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, i: int) -> None:
        if not 0 <= i < len(self._parent):
            raise IndexError(f"element {i} out of range")

    def find(self, i: int) -> int:
        """Representative of the set holding i."""
        self._check(i)
        root = i
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[i] != root:
            self._parent[i], i = root, self._parent[i]
        return root

    def same_set(self, i: int, j: int) -> bool:
        return self.find(i) == self.find(j)

    def union(self, i: int, j: int) -> bool:
        """Merge the sets of i and j; False if they were already one set."""
        x, y = self.find(i), self.find(j)
        if x == y:
            return False
        if self._rank[x] > self._rank[y]:
            x, y = y, x
        self._parent[x] = y
        if self._rank[x] == self._rank[y]:
            self._rank[y] += 1
        self._size[y] += self._size[x]
        self._num_sets -= 1
        return True

    def num_sets(self) -> int:
        """Number of disjoint sets."""
        return self._num_sets

    def set_size(self, i: int) -> int:
        """Number of elements in the set holding i."""
        return self._size[self.find(i)]