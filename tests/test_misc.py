import random
from collections import deque

import pytest

from algonotes.misc import (
    ctz128,
    format_int128,
    knight_distance,
    parse_int128,
    rubik_order,
    sliding_min,
)


def test_int128_roundtrip():
    for x in (0, 1, -1, 2**127 - 1, -(2**127), 123456789012345678901234567890):
        assert parse_int128(format_int128(x)) == x


def test_parse_int128_values():
    assert parse_int128("-170141183460469231731687303715884105728") == -(2**127)
    assert format_int128(-12345) == "-12345"


def test_int128_overflow():
    with pytest.raises(OverflowError):
        parse_int128(str(2**127))
    with pytest.raises(OverflowError):
        format_int128(-(2**127) - 1)


def test_parse_int128_invalid():
    with pytest.raises(ValueError):
        parse_int128("12a")
    with pytest.raises(ValueError):
        parse_int128("")


def test_ctz128():
    assert ctz128(0) == 128
    assert ctz128(1 << 100) == 100
    assert ctz128(-(2**127)) == 127
    assert ctz128(3 << 70) == 70


def _knight_bfs(limit):
    moves = [(1, 2), (2, 1), (-1, 2), (-2, 1), (1, -2), (2, -1), (-1, -2), (-2, -1)]
    dist = {(0, 0): 0}
    queue = deque([(0, 0)])
    while queue:
        x, y = queue.popleft()
        for dx, dy in moves:
            nxt = (x + dx, y + dy)
            if abs(nxt[0]) <= limit and abs(nxt[1]) <= limit and nxt not in dist:
                dist[nxt] = dist[(x, y)] + 1
                queue.append(nxt)
    return dist


def test_knight_distance_matches_search():
    dist = _knight_bfs(14)
    for x in range(-6, 7):
        for y in range(-6, 7):
            assert knight_distance(x, y) == dist[(x, y)]


def test_knight_special_cases():
    assert knight_distance(1, 0) == 3
    assert knight_distance(2, 2) == 4
    assert knight_distance(-2, 2) == 4


def test_knight_symmetry():
    for x, y in [(7, 3), (10, 1), (5, 5)]:
        assert knight_distance(x, y) == knight_distance(y, x) == knight_distance(-x, y)


def test_sliding_min_matches_brute_force():
    rng = random.Random(7)
    for _ in range(50):
        values = [rng.randint(-20, 20) for _ in range(rng.randint(1, 30))]
        k = rng.randint(1, len(values))
        expected = [min(values[i : i + k]) for i in range(len(values) - k + 1)]
        assert sliding_min(values, k) == expected


def test_sliding_min_window_one_is_identity():
    values = [5, 3, 8, 1]
    assert sliding_min(values, 1) == values


def test_sliding_min_bad_window():
    with pytest.raises(ValueError):
        sliding_min([1, 2, 3], 0)


def test_rubik_identity_sequences():
    assert rubik_order("") == 0
    assert rubik_order("UUUU") == 0
    assert rubik_order("Uu") == 0
    assert rubik_order("RRRRLLLL") == 0


def test_rubik_single_face():
    assert rubik_order("U") == 3
    for face in "DLRFB":
        assert rubik_order(face) == rubik_order("U")


def test_rubik_lowercase_is_inverse_turn():
    for face in "UDLRFB":
        assert rubik_order(face.lower()) == rubik_order(face)
        assert rubik_order(face + face.lower()) == 0


def test_rubik_repetition_divides():
    seq = "RU"
    n = rubik_order(seq) + 1
    assert rubik_order(seq * n) == 0