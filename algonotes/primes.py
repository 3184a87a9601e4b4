"""Primality testing, factorisation, prime enumeration and divisor functions."""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator
from itertools import groupby
from math import gcd, isqrt, prod

_SMALL_PRIMES = (
    2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59, 61, 67,
    71, 73, 79, 83, 89, 97, 101, 103, 107, 109, 113, 127, 131, 137, 139,
    149, 151, 157, 163, 167, 173, 179, 181, 191, 193, 197, 199,
)

# Miller-Rabin bases paired with the smallest strong pseudoprime to all
# bases up to and including that one; below the bound the test is exact.
_MR_BASES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)
_MR_BOUNDS = (
    2047, 1373653, 25326001, 3215031751, 2152302898747,
    3474749660383, 341550071728321, 341550071728321,
    3825123056546413051, 3825123056546413051, 3825123056546413051, 0,
)

_TRIAL_PRIMES = (2, 3, 5, 7, 11, 13, 17, 19)


def is_prime(n: int) -> bool:
    """Deterministic Miller-Rabin test, exact for every n below 2**64."""
    if n <= 3:
        return n >= 2
    for p in _SMALL_PRIMES:
        if n % p == 0:
            return n == p

    s, r = n - 1, 0
    while s % 2 == 0:
        s //= 2
        r += 1

    for base, bound in zip(_MR_BASES, _MR_BOUNDS):
        md = pow(base, s, n)
        if md != 1:
            for _ in range(1, r):
                if md == n - 1:
                    break
                md = md * md % n
            if md != n - 1:
                return False
        if n < bound:
            return True
    return True


def _find_divisor(n: int, rng: random.Random) -> int:
    """Return a non-trivial divisor of the odd composite n."""
    while True:
        c = 1 + rng.randrange(n - 1)
        x = y = 2
        d = 1
        while d == 1:
            x = (x * x + c) % n
            y = (y * y + c) % n
            y = (y * y + c) % n
            d = gcd(abs(x - y), n)
        if d != n:
            return d


def pollard_rho(n: int, rng: random.Random | None = None) -> list[int]:
    """Return the prime factors of n, with multiplicity, in no fixed order."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    rng = rng or random.Random()
    found: list[int] = []
    pending = [n]
    while pending:
        m = pending.pop()
        if m == 1:
            continue
        if is_prime(m):
            found.append(m)
        elif m % 2 == 0:
            found.append(2)
            pending.append(m // 2)
        else:
            d = _find_divisor(m, rng)
            pending.extend((d, m // d))
    return found


def factorize(n: int, rng: random.Random | None = None) -> list[int]:
    """Return the sorted prime factors of n, with multiplicity."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    factors: list[int] = []
    for p in _TRIAL_PRIMES:
        while n % p == 0:
            n //= p
            factors.append(p)
    if n != 1:
        factors.extend(pollard_rho(n, rng))
    return sorted(factors)


def prime_factorization(n: int, rng: random.Random | None = None) -> list[tuple[int, int]]:
    """Return the factorisation of n as sorted (prime, exponent) pairs."""
    return [(p, len(list(group))) for p, group in groupby(factorize(n, rng))]


def primes_up_to(n: int) -> list[int]:
    """Sieve of Eratosthenes: all primes not exceeding n."""
    if n < 2:
        return []
    flags = bytearray([1]) * (n + 1)
    flags[0] = flags[1] = 0
    for p in range(2, isqrt(n) + 1):
        if flags[p]:
            flags[p * p :: p] = bytes(len(range(p * p, n + 1, p)))
    return [i for i, flag in enumerate(flags) if flag]


def sieve(limit: int) -> Iterator[int]:
    """Yield the primes not exceeding limit, using an odd-only segmented sieve."""
    if limit < 2:
        return
    yield 2

    seg = max(isqrt(limit), 1)
    # Each entry is [prime, next odd index to strike within the coming block];
    # odd index i stands for the number 2*i + 1.
    crossers = [[p, (p * p - 1) // 2] for p in primes_up_to(seg) if p != 2]
    high = (limit - 1) // 2

    for low in range(0, high + 1, seg):
        block = bytearray([1]) * seg
        for entry in crossers:
            p, idx = entry
            if idx < seg:
                block[idx::p] = bytes(len(range(idx, seg, p)))
                idx += ((seg - 1 - idx) // p + 1) * p
            entry[1] = idx - seg
        if low == 0:
            block[0] = 0
        for i in range(min(seg, high - low + 1)):
            if block[i]:
                yield (low + i) * 2 + 1


def prime_pi(n: int) -> int:
    """Count the primes not exceeding n."""
    if n < 2:
        return 0
    r = isqrt(n)
    values = [n // i for i in range(1, r + 1)]
    values.extend(range(values[-1] - 1, 0, -1))
    counts = {v: v - 1 for v in values}
    for p in range(2, r + 1):
        if counts[p] > counts[p - 1]:
            below = counts[p - 1]
            square = p * p
            for v in values:
                if v < square:
                    break
                counts[v] -= counts[v // p] - below
    return counts[n]


def _trial_division(n: int, primes: Iterable[int]) -> tuple[list[tuple[int, int]], int]:
    if n < 1:
        raise ValueError("n must be a positive integer")
    factors: list[tuple[int, int]] = []
    for p in primes:
        if p * p > n:
            break
        exponent = 0
        while n % p == 0:
            n //= p
            exponent += 1
        if exponent:
            factors.append((p, exponent))
    return factors, n


def num_prime_factors(n: int, primes: Iterable[int]) -> int:
    """Number of prime factors of n counted with multiplicity."""
    factors, rest = _trial_division(n, primes)
    return sum(e for _, e in factors) + (rest != 1)


def num_divisors(n: int, primes: Iterable[int]) -> int:
    """Number of positive divisors of n."""
    factors, rest = _trial_division(n, primes)
    count = prod(e + 1 for _, e in factors)
    return 2 * count if rest != 1 else count


def sum_divisors(n: int, primes: Iterable[int]) -> int:
    """Sum of the positive divisors of n."""
    factors, rest = _trial_division(n, primes)
    total = prod(sum(p**k for k in range(e + 1)) for p, e in factors)
    if rest != 1:
        total *= rest + 1
    return total


def euler_phi(n: int, primes: Iterable[int]) -> int:
    """Euler's totient of n."""
    factors, rest = _trial_division(n, primes)
    result = n
    for p, _ in factors:
        result -= result // p
    if rest != 1:
        result -= result // rest
    return result