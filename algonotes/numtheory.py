"""Elementary number theory: totients, Bezout, modular roots and powers."""

from __future__ import annotations

import random
from math import isqrt


def phi_table(n: int) -> list[int]:
    """Euler's totient of every integer from 0 to n inclusive."""
    phi = list(range(n + 1))
    for i in range(2, n + 1):
        if phi[i] == i:
            for j in range(i, n + 1, i):
                phi[j] -= phi[j] // i
    return phi


def extgcd(a: int, b: int) -> tuple[int, int, int]:
    """Return (g, x, y) with a*x + b*y == g == gcd(a, b)."""
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y
    return old_r, old_x, old_y


def factmod(n: int, p: int) -> int:
    """n! with every factor of the prime p removed, taken modulo p."""
    result = 1
    while n > 1:
        if (n // p) % 2:
            result = result * (p - 1) % p
        for i in range(2, n % p + 1):
            result = result * i % p
        n //= p
    return result % p


def is_square(n: int) -> bool:
    """True when n is the square of an integer."""
    if n < 0:
        return False
    root = isqrt(n)
    return root * root == n


def is_fibonacci(n: int) -> bool:
    """True when n is a Fibonacci number."""
    return n >= 0 and (is_square(5 * n * n + 4) or is_square(5 * n * n - 4))


def mul_mod(a: int, b: int, m: int) -> int:
    """a * b modulo m."""
    return a % m * (b % m) % m


def pow_mod(a: int, b: int, m: int) -> int:
    """a ** b modulo m; gives 0 when m is 1."""
    return pow(a, b, m)


def primitive_root(p: int) -> int | None:
    """Smallest primitive root of the prime p, or None if there is none."""
    phi = p - 1
    n = phi
    factors = []
    i = 2
    while i * i <= n:
        if n % i == 0:
            factors.append(i)
            while n % i == 0:
                n //= i
        i += 1
    if n > 1:
        factors.append(n)

    for candidate in range(2, p + 1):
        if all(pow(candidate, phi // f, p) != 1 for f in factors):
            return candidate
    return None


def _cipolla(x: int, q: int, rng: random.Random) -> int:
    power = (q - 1) // 2
    top = power.bit_length() - 1
    while True:
        t = rng.randrange(q)
        # (z + t) ** power in Z_q[z] / (z*z - x), kept as b*z + c.
        b, c = 0, 1
        for k in range(top, -1, -1):
            a = b * b % q
            b = 2 * b * c % q
            c = (c * c + a * x) % q
            if (power >> k) & 1:
                a = b
                b = (b * t + c) % q
                c = (c * t + a * x) % q
        if b == 0:
            continue
        root = -(c - 1) * pow(b, -1, q) % q
        if root * root % q == x:
            return root


def sqrt_mod(x: int, q: int, rng: random.Random | None = None) -> int | None:
    """The smaller square root of x modulo the prime q, or None if none exists."""
    x %= q
    if q == 2 or x == 0:
        return min(x, q - x)
    if pow(x, (q - 1) // 2, q) != 1:
        return None
    if q % 4 == 3:
        root = pow(x, (q + 1) // 4, q)
    else:
        root = _cipolla(x, q, rng or random.Random())
    return min(root, q - root)