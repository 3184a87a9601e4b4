"""Palindromic tree (eertree): distinct palindromic substrings and their counts."""

from __future__ import annotations

from collections.abc import Sequence

_START = object()
_BEYOND = object()


class PalindromicTree:
    """Eertree of a sequence; children are visited in sorted character order."""

    def __init__(self, text: Sequence) -> None:
        self.text = text
        self._length: list[int] = []
        self._right: list[int] = []
        self._link: list[int] = []
        self._quick: list[int] = []
        self._count: list[int] = []
        self._next: list[dict] = []
        self._new_node(0, -1)
        self._new_node(-1, -1)
        self._link[0] = 1
        self._chars: list = [_START]
        self._last = 0
        for i, c in enumerate(text):
            self._add(c, i)
        for i in range(len(self._length) - 1, -1, -1):
            self._count[self._link[i]] += self._count[i]

    def _new_node(self, length: int, right: int) -> int:
        self._length.append(length)
        self._right.append(right)
        self._link.append(0)
        self._quick.append(0)
        self._count.append(0)
        self._next.append({})
        return len(self._length) - 1

    def _char(self, i: int):
        return self._chars[i] if i < len(self._chars) else _BEYOND

    def _get_link(self, x: int) -> int:
        n = len(self._chars) - 1
        c = self._chars[n]
        length, link = self._length, self._link
        while self._char(n - length[x] - 1) != c:
            if self._char(n - length[link[x]] - 1) == c:
                x = link[x]
            else:
                x = self._quick[x]
        return x

    def _add(self, c, right: int) -> None:
        self._chars.append(c)
        n = len(self._chars) - 1
        length, link = self._length, self._link
        cur = self._get_link(self._last)
        children = self._next[cur]
        if c not in children:
            now = self._new_node(length[cur] + 2, right)
            target = self._next[self._get_link(link[cur])].get(c, 0)
            link[now] = target
            children[c] = now
            if self._char(n - length[target]) == self._char(n - length[link[target]]):
                self._quick[now] = self._quick[target]
            else:
                self._quick[now] = link[target]
        self._last = children[c]
        self._count[self._last] += 1

    def palindromes(self) -> list[tuple[int, int, int]]:
        """Each distinct palindrome as (left, right, frequency).

        ``text[left:right + 1]`` is its first occurrence; frequency counts
        all occurrences. Even-length palindromes come first.
        """
        out: list[tuple[int, int, int]] = []
        stack = [1, 0]
        while stack:
            u = stack.pop()
            if u > 1:
                right = self._right[u]
                out.append((right - self._length[u] + 1, right, self._count[u]))
            children = self._next[u]
            stack.extend(children[c] for c in sorted(children, reverse=True))
        return out