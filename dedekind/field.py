"""
Algebraic number fields K = Q[x]/m(x).

Elements are flint.fmpq_poly of degree less than deg(m), always
kept reduced modulo the (monic, irreducible) modulus m. Traces, norms
and minimal polynomials are computed from the matrix of multiplication
in the power basis 1, x, ..., x^(n-1).
"""

import logging
import math

import flint

logger = logging.getLogger("field")


def as_poly(coeffs) -> flint.fmpq_poly:
    if isinstance(coeffs, flint.fmpq_poly):
        return coeffs
    if isinstance(coeffs, (flint.fmpz_poly, int, flint.fmpz, flint.fmpq)):
        return flint.fmpq_poly(coeffs)
    return flint.fmpq_poly([flint.fmpq(c) for c in coeffs])


def coeff_list(poly: flint.fmpq_poly, n: int) -> list[flint.fmpq]:
    return [poly[i] for i in range(n)]


class NumberField:
    """
    The field Q[x]/m(x) for an irreducible polynomial m.

    >>> K = NumberField([-2, 0, 1])
    >>> a = K.element([1, 1])
    >>> K.norm(a) == -1, K.trace(a) == 2
    (True, True)
    >>> K.min_poly(K.mul(a, a)) == flint.fmpq_poly([1, -6, 1])
    True
    """

    def __init__(self, modulus):
        poly = as_poly(modulus)
        if poly.degree() < 1:
            raise ValueError(f"modulus {modulus} must have positive degree")
        poly = poly * (1 / poly[poly.degree()])

        # Irreducibility over Q is irreducibility of the primitive integer part
        den = math.lcm(*(int(c.q) for c in poly.coeffs()))
        ints = [int(c.p) * (den // int(c.q)) for c in poly.coeffs()]
        _c, facs = flint.fmpz_poly(ints).factor()
        if len(facs) != 1 or facs[0][1] != 1:
            raise ValueError(f"modulus {poly} is not irreducible")

        self.modulus: flint.fmpq_poly = poly
        self.degree: int = poly.degree()
        self._integral_basis = None
        self._roi = None

    def __repr__(self):
        return f"NumberField({self.modulus})"

    def __eq__(self, other):
        return isinstance(other, NumberField) and self.modulus == other.modulus

    def __hash__(self):
        return hash(str(self.modulus))

    # Elements

    def reduce(self, a) -> flint.fmpq_poly:
        return as_poly(a) % self.modulus

    def element(self, coeffs) -> flint.fmpq_poly:
        return self.reduce(as_poly(coeffs))

    def gen(self) -> flint.fmpq_poly:
        return self.reduce(flint.fmpq_poly([0, 1]))

    def zero(self) -> flint.fmpq_poly:
        return flint.fmpq_poly(0)

    def one(self) -> flint.fmpq_poly:
        return self.reduce(flint.fmpq_poly(1))

    def from_int(self, n: int) -> flint.fmpq_poly:
        return self.reduce(flint.fmpq_poly(n))

    def from_rational(self, q) -> flint.fmpq_poly:
        return self.reduce(flint.fmpq_poly([flint.fmpq(q)]))

    def is_zero(self, a) -> bool:
        return self.reduce(a) == 0

    def equal(self, a, b) -> bool:
        return self.reduce(a) == self.reduce(b)

    def to_vector(self, a) -> list[flint.fmpq]:
        "Coordinates in the power basis"
        return coeff_list(self.reduce(a), self.degree)

    def from_vector(self, v) -> flint.fmpq_poly:
        assert len(v) == self.degree
        return self.element(list(v))

    # Arithmetic

    def add(self, a, b):
        return self.reduce(a + b)

    def sub(self, a, b):
        return self.reduce(a - b)

    def neg(self, a):
        return self.reduce(-a)

    def mul(self, a, b):
        return self.reduce(a * b)

    def pow(self, a, k: int):
        if k < 0:
            return self.pow(self.inv(a), -k)
        result = self.one()
        base = self.reduce(a)
        while k:
            if k & 1:
                result = self.mul(result, base)
            base = self.mul(base, base)
            k >>= 1
        return result

    def inv(self, a):
        """
        Inverse by extended Euclid against the modulus.

        >>> K = NumberField([1, 0, 1])
        >>> half = flint.fmpq(1, 2)
        >>> K.inv(K.element([1, 1])) == K.element([half, -half])
        True
        """
        a = self.reduce(a)
        if a == 0:
            raise ZeroDivisionError("inverse of zero in number field")
        # Invariant: si * a = ri modulo m
        r0, r1 = self.modulus, a
        s0, s1 = flint.fmpq_poly(0), flint.fmpq_poly(1)
        while r1 != 0:
            q, r = divmod(r0, r1)
            r0, r1 = r1, r
            s0, s1 = s1, s0 - q * s1
        # The modulus is irreducible: the gcd is a constant.
        assert r0.degree() == 0
        return self.reduce(s0 * (1 / r0[0]))

    def div(self, a, b):
        return self.mul(a, self.inv(b))

    def evaluate(self, coeffs, a):
        "Value of polynomial sum(coeffs[i] x^i) at a (Horner)"
        result = self.zero()
        for c in reversed(list(coeffs)):
            result = self.add(self.mul(result, a), flint.fmpq_poly([flint.fmpq(c)]))
        return result

    # Linear algebra

    def mul_matrix(self, a) -> flint.fmpq_mat:
        "Matrix of y -> a*y in the power basis (column j is a*x^j)"
        n = self.degree
        cols = []
        y = self.reduce(a)
        for _ in range(n):
            cols.append(self.to_vector(y))
            y = self.reduce(y * flint.fmpq_poly([0, 1]))
        return flint.fmpq_mat(n, n, [cols[j][i] for i in range(n) for j in range(n)])

    def trace(self, a) -> flint.fmpq:
        M = self.mul_matrix(a)
        return sum((M[i, i] for i in range(self.degree)), flint.fmpq(0))

    def norm(self, a) -> flint.fmpq:
        return self.mul_matrix(a).det()

    def min_poly(self, a) -> flint.fmpq_poly:
        """
        Monic minimal polynomial over Q, from the first linear relation
        between successive powers 1, a, a^2...
        """
        n = self.degree
        a = self.reduce(a)
        powers = [self.to_vector(self.one())]
        y = self.one()
        while True:
            y = self.mul(y, a)
            powers.append(self.to_vector(y))
            k = len(powers) - 1
            M = flint.fmpq_mat(
                n, k + 1, [powers[j][i] for i in range(n) for j in range(k + 1)]
            )
            R, rank = M.rref()
            if rank == k:
                # The first k powers are independent, the pivots of R
                # are the first k columns: a^k = sum R[i,k] a^i
                coeffs = [-R[i, k] for i in range(k)] + [flint.fmpq(1)]
                return flint.fmpq_poly(coeffs)
            assert k < n

    def char_poly(self, a) -> flint.fmpq_poly:
        mp = self.min_poly(a)
        d = mp.degree()
        assert self.degree % d == 0
        return mp ** (self.degree // d)

    def trace_form_matrix(self, elems) -> flint.fmpq_mat:
        n = self.degree
        assert len(elems) == n
        return flint.fmpq_mat(
            n,
            n,
            [self.trace(self.mul(elems[r], elems[c])) for r in range(n) for c in range(n)],
        )

    def discriminant(self, elems) -> flint.fmpq:
        return self.trace_form_matrix(elems).det()

    # Integrality

    def is_algebraic_integer(self, a) -> bool:
        if self.trace(a).q != 1:
            return False
        if self.norm(a).q != 1:
            return False
        return all(c.q == 1 for c in self.min_poly(a).coeffs())

    def integral_multiple(self, a):
        "A multiple of a by a positive integer which is an algebraic integer"
        m = math.lcm(*(int(c.q) for c in self.min_poly(a).coeffs()))
        b = self.mul(flint.fmpq_poly(m), a)
        assert self.is_algebraic_integer(b)
        return b

    def integral_basis(self):
        if self._integral_basis is None:
            from dedekind.intbasis import compute_integral_basis

            self._integral_basis = compute_integral_basis(self)
        return self._integral_basis

    def ring_of_integers(self):
        if self._roi is None:
            from dedekind.ring import RingOfIntegers

            ib = self.integral_basis()
            self._roi = RingOfIntegers(self, ib.basis, ib.discriminant)
        return self._roi
