"""Dense matrices over any numeric type, with Gaussian elimination."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


class Matrix:
    """A row-major matrix holding arbitrary numeric elements."""

    __slots__ = ("n_row", "n_col", "_rows")

    def __init__(self, rows: Iterable[Iterable]) -> None:
        data = [list(r) for r in rows]
        n_col = len(data[0]) if data else 0
        if any(len(r) != n_col for r in data):
            raise ValueError("all rows must have the same length")
        self._rows = data
        self.n_row = len(data)
        self.n_col = n_col

    @classmethod
    def zeros(cls, n_row: int, n_col: int) -> Matrix:
        return cls([[0] * n_col for _ in range(n_row)])

    @classmethod
    def identity(cls, n: int) -> Matrix:
        return cls([[int(i == j) for j in range(n)] for i in range(n)])

    def __getitem__(self, key):
        if isinstance(key, tuple):
            i, j = key
            return self._rows[i][j]
        return list(self._rows[key])

    def __setitem__(self, key, value) -> None:
        i, j = key
        self._rows[i][j] = value

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (self.n_row, self.n_col) == (other.n_row, other.n_col) and self._rows == other._rows

    __hash__ = None

    def __repr__(self) -> str:
        return f"Matrix({self._rows!r})"

    def row(self, r: int) -> list:
        """A copy of row r."""
        return list(self._rows[r])

    def tolist(self) -> list[list]:
        return [list(r) for r in self._rows]

    def _require_square(self) -> None:
        if self.n_row != self.n_col:
            raise ValueError("matrix must be square")

    def transpose(self) -> Matrix:
        return Matrix([[self._rows[i][j] for i in range(self.n_row)] for j in range(self.n_col)])

    def __mul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.n_col != other.n_row:
            raise ValueError("incompatible matrix shapes")
        cols = [[other._rows[k][j] for k in range(other.n_row)] for j in range(other.n_col)]
        return Matrix(
            [[sum((a * b for a, b in zip(row, col)), 0) for col in cols] for row in self._rows]
        )

    def pow(self, n: int) -> Matrix:
        """The n-th power of a square matrix, n >= 0."""
        self._require_square()
        if n < 0:
            raise ValueError("exponent must be non-negative")
        result = Matrix.identity(self.n_row)
        base = self
        while n:
            if n & 1:
                result = result * base
            n >>= 1
            if n:
                base = base * base
        return result

    @staticmethod
    def _pivot(rows: Sequence[list], h: int, c: int, floating: bool) -> int | None:
        best = None
        for j in range(h, len(rows)):
            value = rows[j][c]
            if value != 0:
                if not floating:
                    return j
                if best is None or abs(value) > abs(rows[best][c]):
                    best = j
        return best

    def gauss(self) -> Matrix:
        """Reduce to upper-triangular form keeping the determinant unchanged."""
        m = self.tolist()
        floating = any(isinstance(v, (float, complex)) for r in m for v in r)
        h = c = 0
        while h < self.n_row and c < self.n_col:
            piv = self._pivot(m, h, c, floating)
            if piv is None:
                c += 1
                continue
            if piv != h:
                m[piv], m[h] = m[h], m[piv]
                m[piv] = [-v for v in m[piv]]
            pivot_row = m[h]
            ws = [w for w in range(c, self.n_col) if pivot_row[w] != 0]
            inv = 1 / pivot_row[c]
            for hh, row in enumerate(m):
                if hh == h:
                    continue
                coeff = row[c] * inv
                for w in ws:
                    row[w] -= pivot_row[w] * coeff
                row[c] = row[c] - row[c]
            c += 1
            h += 1
        return Matrix(m)

    def det(self):
        """Product of the diagonal; the determinant of an upper-triangular matrix."""
        self._require_square()
        result = 1
        for i in range(self.n_row):
            result *= self._rows[i][i]
        return result

    def inverse(self) -> Matrix:
        """The inverse matrix; ValueError if the matrix is singular."""
        self._require_square()
        n = self.n_row
        ret = Matrix.identity(n).tolist()
        tmp = self.tolist()
        rank = 0
        for i in range(n):
            ti = next((t for t in range(i, n) if tmp[t][i] != 0), None)
            if ti is None:
                continue
            rank += 1
            ret[i], ret[ti] = ret[ti], ret[i]
            tmp[i], tmp[ti] = tmp[ti], tmp[i]

            inv = 1 / tmp[i][i]
            ret[i] = [v * inv for v in ret[i]]
            for j in range(i + 1, n):
                tmp[i][j] *= inv

            for h in range(n):
                if h == i:
                    continue
                coef = -tmp[h][i]
                ret[h] = [a + b * coef for a, b in zip(ret[h], ret[i])]
                for j in range(i + 1, n):
                    tmp[h][j] += tmp[i][j] * coef
        if rank < n:
            raise ValueError(f"matrix is singular (rank {rank} < {n})")
        return Matrix(ret)

    def sum_all(self):
        """Sum of every element."""
        return self.submatrix_sum(0, 0, self.n_row, self.n_col)

    def submatrix_sum(self, r1: int, c1: int, r2: int, c2: int):
        """Sum over rows [r1, r2) and columns [c1, c2)."""
        return sum((sum(row[c1:c2], 0) for row in self._rows[r1:r2]), 0)