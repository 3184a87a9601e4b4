import random
from fractions import Fraction

import pytest

from algonotes.matrix import Matrix
from algonotes.modint import ModInt


def _random_matrix(rng, n, m, lo=-5, hi=5):
    return Matrix([[Fraction(rng.randint(lo, hi)) for _ in range(m)] for _ in range(n)])


def test_construct_and_access():
    m = Matrix([[1, 2, 3], [4, 5, 6]])
    assert (m.n_row, m.n_col) == (2, 3)
    assert m[1, 2] == 6
    assert m.row(0) == [1, 2, 3]
    m[0, 0] = 9
    assert m.tolist() == [[9, 2, 3], [4, 5, 6]]


def test_ragged_rows_rejected():
    with pytest.raises(ValueError):
        Matrix([[1, 2], [3]])


def test_zeros():
    z = Matrix.zeros(2, 3)
    assert z.tolist() == [[0, 0, 0], [0, 0, 0]]


def test_transpose_twice():
    m = Matrix([[1, 2, 3], [4, 5, 6]])
    t = m.transpose()
    assert (t.n_row, t.n_col) == (3, 2)
    assert t[2, 0] == m[0, 2]
    assert t.transpose() == m


def test_identity_is_neutral():
    rng = random.Random(1)
    m = _random_matrix(rng, 3, 4)
    assert Matrix.identity(3) * m == m
    assert m * Matrix.identity(4) == m


def test_multiplication_shape_mismatch():
    with pytest.raises(ValueError):
        Matrix([[1, 2]]) * Matrix([[1, 2]])


def test_multiplication_associative():
    rng = random.Random(2)
    a, b, c = _random_matrix(rng, 2, 3), _random_matrix(rng, 3, 4), _random_matrix(rng, 4, 2)
    assert (a * b) * c == a * (b * c)


def test_pow_matches_repeated_product():
    m = Matrix([[1, 1], [1, 0]])
    assert m.pow(5) == m * m * m * m * m
    assert m.pow(0) == Matrix.identity(2)
    assert m.pow(1) == m


def test_pow_errors():
    with pytest.raises(ValueError):
        Matrix([[1, 2, 3]]).pow(2)
    with pytest.raises(ValueError):
        Matrix([[1]]).pow(-1)


def test_det_small():
    m = Matrix([[Fraction(1), Fraction(2)], [Fraction(3), Fraction(4)]])
    assert m.gauss().det() == -2


def test_det_needs_row_swap():
    m = Matrix([[Fraction(0), Fraction(1)], [Fraction(1), Fraction(0)]])
    assert m.gauss().det() == -1


def test_gauss_is_upper_triangular():
    rng = random.Random(3)
    g = _random_matrix(rng, 4, 4).gauss()
    assert all(g[i, j] == 0 for i in range(4) for j in range(i))


def test_det_multiplicative():
    rng = random.Random(4)
    for _ in range(5):
        a, b = _random_matrix(rng, 3, 3), _random_matrix(rng, 3, 3)
        assert (a * b).gauss().det() == a.gauss().det() * b.gauss().det()


def test_singular_det_is_zero():
    m = Matrix([[Fraction(1), Fraction(2)], [Fraction(2), Fraction(4)]])
    assert m.gauss().det() == 0


def test_float_gauss_matches_exact():
    rows = [[2, 1, 3], [4, 3, 1], [1, 5, 7]]
    exact = Matrix([[Fraction(v) for v in r] for r in rows]).gauss().det()
    approx = Matrix([[float(v) for v in r] for r in rows]).gauss().det()
    assert approx == pytest.approx(float(exact))


def test_inverse_fraction():
    rng = random.Random(5)
    m = _random_matrix(rng, 3, 3)
    while m.gauss().det() == 0:
        m = _random_matrix(rng, 3, 3)
    inv = m.inverse()
    assert m * inv == Matrix.identity(3)
    assert inv * m == Matrix.identity(3)


def test_inverse_modint():
    mod = 998244353
    m = Matrix([[ModInt(v, mod) for v in r] for r in [[3, 1, 4], [1, 5, 9], [2, 6, 5]]])
    assert m * m.inverse() == Matrix.identity(3)


def test_inverse_singular_raises():
    m = Matrix([[Fraction(1), Fraction(2)], [Fraction(2), Fraction(4)]])
    with pytest.raises(ValueError):
        m.inverse()


def test_sums():
    rows = [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12]]
    m = Matrix(rows)
    assert m.sum_all() == sum(map(sum, rows))
    assert m.submatrix_sum(1, 1, 3, 3) == rows[1][1] + rows[1][2] + rows[2][1] + rows[2][2]
    assert m.submatrix_sum(0, 0, 0, 4) == 0