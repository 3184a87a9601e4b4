"""Pattern matching, Z-function, tandem repeats, palindromes and minimal rotation."""

from __future__ import annotations

from collections.abc import Sequence

_SEPARATOR = object()


def kmp_prefix(pattern: Sequence) -> list[int]:
    """Border table of pattern.

    ``b[i]`` is the length of the longest proper border of ``pattern[:i]``,
    with ``b[0] == -1``. The table has ``len(pattern) + 1`` entries.
    """
    b = [-1] * (len(pattern) + 1)
    j = -1
    for i, ch in enumerate(pattern):
        while j >= 0 and ch != pattern[j]:
            j = b[j]
        j += 1
        b[i + 1] = j
    return b


def kmp_count(text: Sequence, pattern: Sequence) -> int:
    """Number of possibly overlapping occurrences of pattern in text."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    b = kmp_prefix(pattern)
    m = len(pattern)
    j = 0
    count = 0
    for ch in text:
        while j >= 0 and ch != pattern[j]:
            j = b[j]
        j += 1
        if j == m:
            count += 1
            j = b[j]
    return count


def _z(s: Sequence) -> list[int]:
    n = len(s)
    z = [0] * n
    left = right = 0
    for i in range(1, n):
        if i <= right:
            z[i] = min(right - i + 1, z[i - left])
        while i + z[i] < n and s[z[i]] == s[i + z[i]]:
            z[i] += 1
        if i + z[i] - 1 > right:
            left, right = i, i + z[i] - 1
    return z


def z_function(s: Sequence) -> list[int]:
    """``z[i]`` is the length of the longest common prefix of s and s[i:]."""
    z = _z(s)
    if z:
        z[0] = len(s)
    return z


def _z_at(z: list[int], i: int) -> int:
    return z[i] if 0 <= i < len(z) else 0


def _find_tandems(s: Sequence, shift: int, out: list[tuple[int, int]]) -> None:
    n = len(s)
    if n <= 1:
        return
    nu = n // 2
    nv = n - nu
    u, v = s[:nu], s[nu:]
    ru = list(u)[::-1]
    rv = list(v)[::-1]

    _find_tandems(u, shift, out)
    _find_tandems(v, shift + nu, out)

    z1 = _z(ru)
    z2 = _z([*v, _SEPARATOR, *u])
    z3 = _z([*ru, _SEPARATOR, *rv])
    z4 = _z(v)
    for centre in range(n):
        left = centre < nu
        if left:
            half = nu - centre
            k1 = _z_at(z1, nu - centre)
            k2 = _z_at(z2, nv + 1 + centre)
        else:
            half = centre - nu + 1
            k1 = _z_at(z3, nu + 1 + nv - 1 - (centre - nu))
            k2 = _z_at(z4, centre - nu + 1)
        if k1 + k2 < half:
            continue
        for l1 in range(1, half + 1):
            if left and l1 == half:
                break
            l2 = half - l1
            if l1 <= k1 and l2 <= k2:
                pos = centre - l1 if left else centre - l1 - l2 - l1 + 1
                out.append((shift + pos, shift + pos + 2 * half))


def tandem_repeats(s: Sequence) -> list[tuple[int, int]]:
    """Every occurrence of a square ``w + w`` in s, by Main-Lorentz.

    Each occurrence is reported as a half-open ``(start, stop)`` pair.
    """
    out: list[tuple[int, int]] = []
    _find_tandems(s, 0, out)
    return out


def manacher(s: Sequence) -> tuple[list[int], list[int]]:
    """Longest palindromes around every centre.

    Returns ``(even, odd)``: ``even[i]`` is the length of the longest
    palindrome centred between i and i+1, ``odd[i]`` the length of the
    longest one centred at i.
    """
    n = len(s)
    if n == 0:
        return [], []
    result = [[0] * (n + 1), [0] * n]
    for z in (0, 1):
        radius = result[z]
        shrink = 1 - z
        left = right = 0
        for i in range(n):
            t = right - i + shrink
            if i < right:
                radius[i] = min(t, radius[left + t])
            l2 = i - radius[i]
            r2 = i + radius[i] - shrink
            while l2 and r2 + 1 < n and s[l2 - 1] == s[r2 + 1]:
                radius[i] += 1
                l2 -= 1
                r2 += 1
            if r2 > right:
                left, right = l2, r2
        for i in range(n):
            radius[i] = 2 * radius[i] + z
    return result[0][1:n], result[1]


def min_rotation(s: Sequence) -> int:
    """Start index of the lexicographically smallest rotation of s."""
    n = len(s)
    x, y = 0, 1
    while y < n:
        i = u = x
        j = v = y
        while s[i] == s[j]:
            u += 1
            v += 1
            i = 0 if i + 1 == n else i + 1
            j = 0 if j + 1 == n else j + 1
            if i == x:
                break
        if s[i] <= s[j]:
            y = v
        else:
            x = y
            if u > y:
                y = u
        y += 1
    return x