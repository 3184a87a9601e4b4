"""Integers modulo a fixed modulus, with binomials and primitive roots."""

from __future__ import annotations

from functools import lru_cache
from math import comb


class ModInt:
    """A residue modulo ``mod``; arithmetic returns new values."""

    __slots__ = ("value", "mod")

    def __init__(self, value: int, mod: int) -> None:
        if mod < 1:
            raise ValueError("modulus must be positive")
        self.mod = mod
        self.value = int(value) % mod

    def _coerce(self, other) -> int | None:
        if isinstance(other, ModInt):
            if other.mod != self.mod:
                raise ValueError("operands have different moduli")
            return other.value
        if isinstance(other, int):
            return other % self.mod
        return None

    def _make(self, value: int) -> ModInt:
        return ModInt(value, self.mod)

    def __add__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return self._make(self.value + v)

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return self._make(self.value - v)

    def __rsub__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return self._make(v - self.value)

    def __mul__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return self._make(self.value * v)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return self * self._make(v).inverse()

    def __rtruediv__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return self._make(v) * self.inverse()

    def __neg__(self) -> ModInt:
        return self._make(-self.value)

    def __eq__(self, other) -> bool:
        if isinstance(other, ModInt):
            return self.mod == other.mod and self.value == other.value
        if isinstance(other, int):
            return self.value == other % self.mod
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def __bool__(self) -> bool:
        return self.value != 0

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"ModInt({self.value}, {self.mod})"

    def __str__(self) -> str:
        return str(self.value)

    def pow(self, k: int) -> ModInt:
        """Raise to the power k; a negative k uses the inverse."""
        if k < 0:
            return self.inverse().pow(-k)
        return self._make(pow(self.value, k, self.mod))

    def inverse(self) -> ModInt:
        """Multiplicative inverse; ZeroDivisionError if none exists."""
        try:
            return self._make(pow(self.value, -1, self.mod))
        except ValueError:
            raise ZeroDivisionError(
                f"{self.value} has no inverse modulo {self.mod}"
            ) from None


def binomial(n: int, k: int, mod: int) -> ModInt:
    """C(n, k) as a residue modulo mod; zero when k is outside [0, n]."""
    if k < 0 or k > n:
        return ModInt(0, mod)
    return ModInt(comb(n, k), mod)


def _distinct_prime_factors(v: int) -> list[int]:
    factors = []
    i = 2
    while i * i <= v:
        if v % i == 0:
            factors.append(i)
            while v % i == 0:
                v //= i
        i += 1
    if v > 1:
        factors.append(v)
    return factors


@lru_cache(maxsize=None)
def find_primitive_root(mod: int) -> int | None:
    """Smallest primitive root of the prime mod, or None if there is none."""
    factors = _distinct_prime_factors(mod - 1)
    for g in range(1, mod):
        base = ModInt(g, mod)
        if all(base.pow((mod - 1) // f) != 1 for f in factors):
            return g
    return None