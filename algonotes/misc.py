"""Small helpers: 128-bit integer text, knight distance, sliding minimum, cube orders."""

from __future__ import annotations

import re
from collections import deque
from collections.abc import Sequence
from math import lcm
from typing import TypeVar

T = TypeVar("T")

_INT128_MIN = -(1 << 127)
_INT128_MAX = (1 << 127) - 1
_DECIMAL = re.compile(r"-?[0-9]+")


def _check_int128(x: int) -> int:
    if not _INT128_MIN <= x <= _INT128_MAX:
        raise OverflowError(f"{x} does not fit in a signed 128-bit integer")
    return x


def parse_int128(text: str) -> int:
    """Parse a decimal signed 128-bit integer."""
    text = text.strip()
    if not _DECIMAL.fullmatch(text):
        raise ValueError(f"not a decimal integer: {text!r}")
    return _check_int128(int(text))


def format_int128(x: int) -> str:
    """Render a signed 128-bit integer in decimal."""
    return str(_check_int128(x))


def ctz128(n: int) -> int:
    """Trailing zero bits of a signed 128-bit integer; 128 for zero."""
    _check_int128(n)
    if n == 0:
        return 128
    return (n & -n).bit_length() - 1


def knight_distance(x: int, y: int) -> int:
    """Fewest knight moves from (0, 0) to (x, y) on an unbounded board."""
    x, y = abs(x), abs(y)
    if x < y:
        x, y = y, x
    if (x, y) == (1, 0):
        return 3
    if (x, y) == (2, 2):
        return 4
    d = x - y
    if y > d:
        return 2 * ((y - d + 2) // 3) + d
    return d - 2 * ((d - y) // 4)


def sliding_min(values: Sequence[T], k: int) -> list[T]:
    """Minimum of every window of length k, in order."""
    if k < 1:
        raise ValueError("window length must be positive")
    window: deque[tuple[int, T]] = deque()
    result: list[T] = []
    for i, value in enumerate(values):
        while window and window[-1][1] >= value:
            window.pop()
        window.append((i, value))
        if i >= k - 1:
            if window[0][0] <= i - k:
                window.popleft()
            result.append(window[0][1])
    return result


# Stickers are numbered 1..54. For each face: the eight stickers around its
# centre, and the twelve edge stickers of the neighbouring faces.
_FACE_RINGS = (
    (1, 2, 3, 6, 9, 8, 7, 4),
    (28, 29, 30, 33, 36, 35, 34, 31),
    (37, 38, 39, 42, 45, 44, 43, 40),
    (19, 20, 21, 24, 27, 26, 25, 22),
    (46, 47, 48, 51, 54, 53, 52, 49),
    (10, 11, 12, 15, 18, 17, 16, 13),
)
_SIDE_RINGS = (
    (21, 20, 19, 10, 13, 16, 43, 44, 45, 54, 51, 48),
    (25, 26, 27, 46, 49, 52, 39, 38, 37, 18, 15, 12),
    (34, 35, 36, 52, 53, 54, 7, 8, 9, 16, 17, 18),
    (3, 2, 1, 48, 47, 46, 30, 29, 28, 12, 11, 10),
    (27, 24, 21, 1, 4, 7, 45, 42, 39, 36, 33, 30),
    (19, 22, 25, 28, 31, 34, 37, 40, 43, 9, 6, 3),
)
_FACES = {"U": 0, "D": 1, "L": 2, "R": 3, "F": 4}
_BACK = 5


def _turn(state: list[int], face: int) -> list[int]:
    turned = list(state)
    ring = _FACE_RINGS[face]
    for i, pos in enumerate(ring):
        turned[pos] = state[ring[(i + 6) % 8]]
    side = _SIDE_RINGS[face]
    for i, pos in enumerate(side):
        turned[pos] = state[side[(i + 9) % 12]]
    return turned


def rubik_order(moves: str) -> int:
    """How many further repetitions of the move sequence return the cube to its start.

    Upper-case letters U, D, L, R, F, B turn a face one way, lower-case
    letters turn it the other way; any other character counts as B.
    """
    expanded = "".join(ch.upper() * 3 if "a" <= ch <= "z" else ch for ch in moves)

    state = list(range(55))
    for ch in expanded:
        state = _turn(state, _FACES.get(ch, _BACK))

    order = 1
    seen = [False] * 55
    for start in range(1, 55):
        if seen[start]:
            continue
        seen[start] = True
        length = 1
        t = start
        while not seen[state[t]]:
            t = state[t]
            seen[t] = True
            length += 1
        order = lcm(order, length)
    return order - 1