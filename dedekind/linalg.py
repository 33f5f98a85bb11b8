"""
Integer lattices and small linear algebra helpers.

Lattices are subgroups of Z^n given by generators (row vectors).
They are stored in Hermite normal form, computed by FLINT, which
makes the representation canonical.

Linear algebra over GF(p) is done in pure Python: matrices
have the size of the field degree, so they are always tiny.
"""

from dataclasses import dataclass
import math

import flint


def hnf_rows(dim: int, vectors) -> tuple[tuple[int, ...], ...]:
    """
    Nonzero rows of the Hermite normal form of a list of vectors.

    >>> hnf_rows(2, [[2, 0], [0, 2], [1, 1]])
    ((1, 1), (0, 2))
    >>> hnf_rows(3, [])
    ()
    """
    vectors = [list(v) for v in vectors]
    if not vectors:
        return ()
    assert all(len(v) == dim for v in vectors)
    M = flint.fmpz_mat(len(vectors), dim, [int(x) for v in vectors for x in v])
    rows = []
    for row in M.hnf().table():
        row = tuple(int(x) for x in row)
        if any(row):
            rows.append(row)
    return tuple(rows)


def reversed_hnf_rows(vectors) -> tuple[tuple[int, ...], ...]:
    """
    Hermite normal form with reversed column order: the last column
    is eliminated first, so that the result is triangular with respect
    to the first columns.

    >>> reversed_hnf_rows([[3, 1], [1, 1]])
    ((1, 1), (2, 0))
    """
    vectors = [list(v) for v in vectors]
    dim = len(vectors[0])
    flipped = hnf_rows(dim, [v[::-1] for v in vectors])
    return tuple(row[::-1] for row in flipped)


def primitive_part(rows) -> tuple[flint.fmpq, list[list[int]]]:
    """
    Write a rational matrix as mul * M where M is an integer matrix
    whose entries have no common factor.

    >>> mul, m = primitive_part([[flint.fmpq(1, 2), 1], [0, flint.fmpq(3, 2)]])
    >>> m
    [[1, 2], [0, 3]]
    >>> mul == flint.fmpq(1, 2)
    True
    """
    rows = [[flint.fmpq(x) for x in r] for r in rows]
    den = math.lcm(*(int(x.q) for r in rows for x in r))
    ints = [[int(x.p) * (den // int(x.q)) for x in r] for r in rows]
    g = math.gcd(*(x for r in ints for x in r))
    if g == 0:
        return flint.fmpq(0), ints
    return flint.fmpq(g, den), [[x // g for x in r] for r in ints]


def _scaled_dual(rows, d: int) -> list[list[int]]:
    # Rows of d * transpose(inverse(B)), asserted to be integral.
    n = len(rows)
    B = flint.fmpq_mat(n, n, [x for r in rows for x in r])
    D = B.inv().transpose()
    out = []
    for i in range(n):
        row = []
        for j in range(n):
            x = D[i, j] * d
            assert x.q == 1
            row.append(int(x.p))
        out.append(row)
    return out


@dataclass(frozen=True)
class Lattice:
    """
    A subgroup of Z^dim. The basis is the list of nonzero rows of the
    Hermite normal form of any generating set, so equality of lattices
    is equality of dataclasses.

    >>> L = Lattice.span(2, [[2, 0], [0, 2], [1, 1]])
    >>> L.rank, L.index()
    (2, 2)
    >>> L.contains_element([3, 1]), L.contains_element([1, 0])
    (True, False)
    """

    dim: int
    basis: tuple[tuple[int, ...], ...]

    @classmethod
    def span(cls, dim: int, vectors) -> "Lattice":
        return cls(dim, hnf_rows(dim, vectors))

    @property
    def rank(self) -> int:
        return len(self.basis)

    def is_full_rank(self) -> bool:
        return self.rank == self.dim

    def contains_element(self, v) -> bool:
        assert len(v) == self.dim
        return hnf_rows(self.dim, self.basis + (tuple(v),)) == self.basis

    def contains(self, other: "Lattice") -> bool:
        assert self.dim == other.dim
        return self.add(other) == self

    def add(self, other: "Lattice") -> "Lattice":
        assert self.dim == other.dim
        return Lattice.span(self.dim, self.basis + other.basis)

    def intersect(self, other: "Lattice") -> "Lattice":
        """
        Intersection of full rank lattices, computed as the dual
        of the sum of dual lattices.

        >>> A = Lattice.span(2, [[2, 0], [0, 1]])
        >>> B = Lattice.span(2, [[3, 0], [0, 2]])
        >>> A.intersect(B).basis
        ((6, 0), (0, 2))
        """
        assert self.dim == other.dim
        assert self.is_full_rank() and other.is_full_rank()
        d = math.lcm(self.index(), other.index())
        # d * (A* + B*)
        dual_sum = hnf_rows(
            self.dim, _scaled_dual(self.basis, d) + _scaled_dual(other.basis, d)
        )
        # (A* + B*)* = d * (dual_sum)*
        return Lattice.span(self.dim, _scaled_dual(dual_sum, d))

    def index(self) -> int:
        "The index [Z^dim : L] of a full rank lattice"
        assert self.is_full_rank()
        n = self.dim
        M = flint.fmpz_mat(n, n, [x for r in self.basis for x in r])
        return abs(int(M.det()))


def matmul_mod(a: list[list[int]], b: list[list[int]], p: int) -> list[list[int]]:
    return [
        [sum(x * y for x, y in zip(row, col)) % p for col in zip(*b)] for row in a
    ]


def transpose(a: list[list[int]]) -> list[list[int]]:
    return [list(col) for col in zip(*a)]


def nullspace_mod(rows: list[list[int]], p: int) -> list[list[int]]:
    """
    Basis of the right kernel {v : M v = 0} of a matrix over GF(p).

    >>> nullspace_mod([[1, 1, 0], [0, 0, 1]], 2)
    [[1, 1, 0]]
    >>> nullspace_mod([[1, 2], [2, 4]], 5)
    [[3, 1]]
    """
    m = [[x % p for x in r] for r in rows]
    ncols = len(m[0])
    pivots: list[int] = []
    r = 0
    for c in range(ncols):
        piv = next((i for i in range(r, len(m)) if m[i][c]), None)
        if piv is None:
            continue
        m[r], m[piv] = m[piv], m[r]
        inv = pow(m[r][c], -1, p)
        m[r] = [x * inv % p for x in m[r]]
        for i in range(len(m)):
            if i != r and m[i][c]:
                f = m[i][c]
                m[i] = [(x - f * y) % p for x, y in zip(m[i], m[r])]
        pivots.append(c)
        r += 1
    kernel = []
    for fc in range(ncols):
        if fc in pivots:
            continue
        v = [0] * ncols
        v[fc] = 1
        for i, pc in enumerate(pivots):
            v[pc] = -m[i][fc] % p
        kernel.append(v)
    return kernel
