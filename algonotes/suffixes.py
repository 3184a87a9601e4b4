"""Suffix array with LCP, suffix automaton and a prefix trie."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Hashable, Iterable, Sequence
from dataclasses import dataclass, field


class SuffixArray:
    """Sorted suffixes of a sequence, with longest common prefixes of neighbours.

    ``sa[i]`` is the start of the i-th smallest suffix; ``lcp[i]`` is the
    length of the common prefix of suffixes ``sa[i]`` and ``sa[i - 1]``
    (``lcp[0] == 0``). A suffix that is a prefix of another sorts first.
    """

    def __init__(self, text: Sequence) -> None:
        self.text = text
        self.sa = self._build(text)
        self.lcp = self._build_lcp(text, self.sa)

    def __len__(self) -> int:
        return len(self.sa)

    @staticmethod
    def _build(text: Sequence) -> list[int]:
        n = len(text)
        alphabet = {c: r for r, c in enumerate(sorted(set(text)), start=1)}
        rank = [alphabet[c] for c in text]
        sa = sorted(range(n), key=rank.__getitem__)
        k = 1
        while k < n:
            def key(i: int, rank=rank, k=k) -> tuple[int, int]:
                return rank[i], rank[i + k] if i + k < n else 0

            sa.sort(key=key)
            new_rank = [0] * n
            r = 1
            new_rank[sa[0]] = r
            for prev, cur in zip(sa, sa[1:]):
                if key(cur) != key(prev):
                    r += 1
                new_rank[cur] = r
            rank = new_rank
            if r == n:
                break
            k <<= 1
        return sa

    @staticmethod
    def _build_lcp(text: Sequence, sa: list[int]) -> list[int]:
        n = len(sa)
        position = [0] * n
        for i, s in enumerate(sa):
            position[s] = i
        lcp = [0] * n
        h = 0
        for i in range(n):
            r = position[i]
            if r == 0:
                h = 0
                continue
            j = sa[r - 1]
            while i + h < n and j + h < n and text[i + h] == text[j + h]:
                h += 1
            lcp[r] = h
            if h:
                h -= 1
        return lcp

    def string_matching(self, pattern: Sequence) -> tuple[int, int] | None:
        """Inclusive range of suffix-array positions whose suffixes start with pattern.

        Returns None when pattern does not occur.
        """
        m = len(pattern)
        text = self.text

        def key(i: int):
            return text[i : i + m]

        lo = bisect_left(self.sa, pattern, key=key)
        hi = bisect_right(self.sa, pattern, key=key)
        if lo == hi:
            return None
        return lo, hi - 1

    def longest_repeated(self) -> tuple[int, int]:
        """(length, suffix-array position) of the longest repeated substring.

        The substring is ``text[sa[pos]:sa[pos] + length]``; (-1, 0) when the
        text has fewer than two suffixes.
        """
        best_len, best_idx = -1, 0
        for i in range(1, len(self.sa)):
            if self.lcp[i] > best_len:
                best_len, best_idx = self.lcp[i], i
        return best_len, best_idx

    def longest_common(self, split_idx: int) -> tuple[int, int]:
        """(length, suffix-array position) of the longest common substring.

        The text is taken as two strings joined at split_idx, each ending in
        its own terminator; (-1, 0) when no pair of neighbours straddles it.
        """
        best_len, best_idx = -1, 0
        sa, lcp = self.sa, self.lcp
        for i in range(1, len(sa)):
            if (sa[i] < split_idx) == (sa[i - 1] < split_idx):
                continue
            if lcp[i] > best_len:
                best_len, best_idx = lcp[i], i
        return best_len, best_idx


@dataclass
class State:
    """A suffix-automaton state: longest length, suffix link and transitions."""

    length: int
    link: int
    next: dict = field(default_factory=dict)


class SuffixAutomaton:
    """Suffix automaton built one character at a time."""

    def __init__(self) -> None:
        self.states: list[State] = [State(0, -1)]
        self.last = 0

    @classmethod
    def from_iterable(cls, chars: Iterable[Hashable]) -> SuffixAutomaton:
        automaton = cls()
        for c in chars:
            automaton.extend(c)
        return automaton

    def extend(self, c: Hashable) -> None:
        """Append character c to the text the automaton recognises."""
        states = self.states
        cur = len(states)
        states.append(State(states[self.last].length + 1, 0))
        p = self.last
        while p != -1 and c not in states[p].next:
            states[p].next[c] = cur
            p = states[p].link
        if p != -1:
            q = states[p].next[c]
            if states[p].length + 1 == states[q].length:
                states[cur].link = q
            else:
                clone = len(states)
                states.append(State(states[p].length + 1, states[q].link, dict(states[q].next)))
                while p != -1 and states[p].next.get(c) == q:
                    states[p].next[c] = clone
                    p = states[p].link
                states[q].link = states[cur].link = clone
        self.last = cur

    @property
    def order(self) -> list[int]:
        """Non-root states sorted by (length, id)."""
        return sorted(range(1, len(self.states)), key=lambda i: (self.states[i].length, i))

    def __contains__(self, substring: Iterable[Hashable]) -> bool:
        state = 0
        for c in substring:
            nxt = self.states[state].next.get(c)
            if nxt is None:
                return False
            state = nxt
        return True


@dataclass
class _TrieNode:
    children: dict = field(default_factory=dict)
    exist: bool = False


class Trie:
    """Prefix tree of words."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def insert(self, word: Iterable[Hashable]) -> None:
        node = self._root
        for c in word:
            node = node.children.setdefault(c, _TrieNode())
        node.exist = True

    def _walk(self, chars: Iterable[Hashable]) -> _TrieNode | None:
        node = self._root
        for c in chars:
            node = node.children.get(c)
            if node is None:
                return None
        return node

    def search(self, word: Iterable[Hashable]) -> bool:
        """True if word was inserted."""
        node = self._walk(word)
        return node is not None and node.exist

    def starts_with(self, prefix: Iterable[Hashable]) -> bool:
        """True if some inserted word starts with prefix."""
        return self._walk(prefix) is not None