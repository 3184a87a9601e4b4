"""Polynomial substring hashing with a pair of moduli (2**64 and 10**9 + 7)."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from itertools import accumulate

from .modint import ModInt

MOD = 1_000_000_007
_I64 = 1 << 63
_U64 = 1 << 64


def _wrap64(v: int) -> int:
    return (v + _I64) % _U64 - _I64


def _code(c) -> int:
    return ord(c) if isinstance(c, str) else int(c)


@dataclass(frozen=True)
class Hash:
    """A hash value: a signed 64-bit wrapping part and a part modulo MOD."""

    x: int
    y: ModInt

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", _wrap64(self.x))
        if not isinstance(self.y, ModInt):
            object.__setattr__(self, "y", ModInt(self.y, MOD))

    def __add__(self, other):
        if not isinstance(other, Hash):
            return NotImplemented
        return Hash(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        if not isinstance(other, Hash):
            return NotImplemented
        return Hash(self.x - other.x, self.y - other.y)

    def __mul__(self, other):
        if isinstance(other, Hash):
            return Hash(self.x * other.x, self.y * other.y)
        if isinstance(other, int):
            return Hash(self.x * other, self.y * other)
        return NotImplemented

    def __lt__(self, other):
        if not isinstance(other, Hash):
            return NotImplemented
        return (self.x, self.y.value) < (other.x, other.y.value)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


_ZERO = Hash(0, 0)


class HashGenerator:
    """Prefix hashes of sequences up to a fixed length, and substring queries on them."""

    def __init__(self, max_len: int, base: int = 311) -> None:
        if max_len < 0:
            raise ValueError("max_len must be non-negative")
        powers = [Hash(1, 1)]
        for _ in range(max_len):
            powers.append(powers[-1] * base)
        self._powers = powers

    def hash(self, s: Sequence) -> list[Hash]:
        """Prefix hashes of s: element i covers s[0..i]."""
        if len(s) > len(self._powers):
            raise ValueError("sequence is longer than this generator supports")
        return list(accumulate(p * _code(c) for p, c in zip(self._powers, s)))

    @staticmethod
    def _check(h: Sequence[Hash], left: int, right: int) -> None:
        if not 0 <= left <= right < len(h):
            raise IndexError(f"range [{left}, {right}] out of bounds for length {len(h)}")

    def get_hash(self, h: Sequence[Hash], left: int, right: int) -> Hash:
        """Hash of the inclusive range [left, right], comparable across positions."""
        self._check(h, left, right)
        raw = h[right] - (h[left - 1] if left else _ZERO)
        return raw * self._powers[len(self._powers) - 1 - left]

    def equals(self, h1, l1: int, r1: int, h2, l2: int, r2: int) -> bool:
        """Whether the ranges [l1, r1] and [l2, r2] hold equal content."""
        self._check(h1, l1, r1)
        self._check(h2, l2, r2)
        if r1 - l1 != r2 - l2:
            return False
        return self.get_hash(h1, l1, r1) == self.get_hash(h2, l2, r2)

    def max_common_prefix(self, h1, l1: int, r1: int, h2, l2: int, r2: int) -> int:
        """Length of the longest common prefix of the two ranges."""
        self._check(h1, l1, r1)
        self._check(h2, l2, r2)
        best = -1
        lo, hi = 0, min(r1 - l1, r2 - l2)
        while lo <= hi:
            mid = (lo + hi) // 2
            if self.equals(h1, l1, l1 + mid, h2, l2, l2 + mid):
                best = mid
                lo = mid + 1
            else:
                hi = mid - 1
        return best + 1

    def compare(self, s1, h1, l1: int, r1: int, s2, h2, l2: int, r2: int) -> int:
        """Three-way comparison of s1[l1..r1] and s2[l2..r2]: -1, 0 or 1."""
        self._check(h1, l1, r1)
        self._check(h2, l2, r2)
        k = self.max_common_prefix(h1, l1, r1, h2, l2, r2)
        c1 = _code(s1[l1 + k]) if l1 + k <= r1 else -1
        c2 = _code(s2[l2 + k]) if l2 + k <= r2 else -1
        return (c1 > c2) - (c1 < c2)