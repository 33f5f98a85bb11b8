"""
Ring of integers O_K of a number field, with a fixed integral basis.

Elements are integer coordinate vectors relative to the integral basis.
Multiplication goes through the number field: both operands are mapped
to K, multiplied there, and the product is mapped back.
"""

from dataclasses import dataclass
import logging
from typing import Optional

import flint

from dedekind.factor import IdealFactoring
from dedekind.ideal import IdealArithmetic
from dedekind.structure import (
    IntegerRing,
    IntegralClosureSquare,
    Morphism,
    RationalField,
)

logger = logging.getLogger("ring")


@dataclass(frozen=True)
class Element:
    coefficients: tuple[int, ...]

    @classmethod
    def from_coefficients(cls, coeffs) -> "Element":
        return cls(tuple(int(c) for c in coeffs))

    def into_coefficients(self) -> list[int]:
        return list(self.coefficients)

    @classmethod
    def basis_element(cls, n: int, i: int) -> "Element":
        return cls(tuple(int(j == i) for j in range(n)))


class RingOfIntegers(IdealArithmetic, IdealFactoring):
    """
    >>> from dedekind.field import NumberField
    >>> K = NumberField([-2, 0, 1])
    >>> R = RingOfIntegers(K, [K.one(), K.gen()], 8)
    >>> a = R.try_from_anf(K.element([1, 1]))
    >>> a
    Element(coefficients=(1, 1))
    >>> R.mul(a, a)
    Element(coefficients=(3, 2))
    >>> R.try_from_anf(K.element([0, flint.fmpq(1, 2)])) is None
    True
    """

    def __init__(self, field, basis, discriminant: int):
        n = field.degree
        assert len(basis) == n
        self.field = field
        self.basis = tuple(field.reduce(b) for b in basis)
        self.degree: int = n
        self.discriminant: int = int(discriminant)
        # Row i holds the power basis coordinates of basis[i]
        B = flint.fmpq_mat(n, n, [x for b in self.basis for x in field.to_vector(b)])
        self._basis_inv = B.inv()
        # Decomposition of rational primes, filled on demand
        self._primes = {}
        logger.debug(f"Ring of integers of {field} with discriminant {discriminant}")

    def __repr__(self):
        return f"RingOfIntegers({self.field.modulus})"

    def basis_element(self, i: int):
        "The i-th element of the integral basis, as a field element"
        return self.basis[i]

    # Coordinates

    def from_coefficients(self, coeffs) -> Element:
        x = Element.from_coefficients(coeffs)
        assert len(x.coefficients) == self.degree
        return x

    def into_coefficients(self, x: Element) -> list[int]:
        return x.into_coefficients()

    def unit_vector(self, i: int) -> Element:
        return Element.basis_element(self.degree, i)

    def is_element(self, x) -> bool:
        return isinstance(x, Element) and len(x.coefficients) == self.degree

    def to_anf(self, x: Element):
        K = self.field
        acc = K.zero()
        for c, b in zip(x.coefficients, self.basis):
            if c:
                acc += c * b
        return K.reduce(acc)

    def try_from_anf(self, a) -> Optional[Element]:
        "Coordinates of a field element, or None if it is not integral"
        n = self.degree
        v = flint.fmpq_mat(1, n, self.field.to_vector(a)) * self._basis_inv
        coeffs = [v[0, j] for j in range(n)]
        if any(c.q != 1 for c in coeffs):
            return None
        return Element(tuple(int(c.p) for c in coeffs))

    # Ring operations

    def zero(self) -> Element:
        return Element((0,) * self.degree)

    def one(self) -> Element:
        x = self.try_from_anf(self.field.one())
        assert x is not None
        return x

    def from_int(self, k: int) -> Element:
        return Element(tuple(k * c for c in self.one().coefficients))

    def is_zero(self, x: Element) -> bool:
        return not any(x.coefficients)

    def equal(self, x: Element, y: Element) -> bool:
        return x.coefficients == y.coefficients

    def add(self, x: Element, y: Element) -> Element:
        return Element(tuple(a + b for a, b in zip(x.coefficients, y.coefficients)))

    def neg(self, x: Element) -> Element:
        return Element(tuple(-a for a in x.coefficients))

    def sub(self, x: Element, y: Element) -> Element:
        return self.add(x, self.neg(y))

    def mul(self, x: Element, y: Element) -> Element:
        z = self.try_from_anf(self.field.mul(self.to_anf(x), self.to_anf(y)))
        # Products of algebraic integers are algebraic integers.
        assert z is not None
        return z

    def pow(self, x: Element, k: int) -> Element:
        assert k >= 0
        z = self.try_from_anf(self.field.pow(self.to_anf(x), k))
        assert z is not None
        return z

    def trace(self, x: Element) -> int:
        return int(self.field.trace(self.to_anf(x)).p)

    def norm(self, x: Element) -> int:
        return int(self.field.norm(self.to_anf(x)).p)

    def min_poly(self, x: Element) -> list[int]:
        "Integer coefficients (constant first) of the monic minimal polynomial"
        coeffs = self.field.min_poly(self.to_anf(x)).coeffs()
        assert all(c.q == 1 for c in coeffs)
        return [int(c.p) for c in coeffs]

    def integral_closure_square(self) -> IntegralClosureSquare:
        """
        The square Z -> O_K -> K, Z -> Q -> K.
        """
        K = self.field
        ZZ, QQ = IntegerRing(), RationalField()

        def r_to_z(x):
            a = self.to_anf(x)
            if a.degree() > 0 or a[0].q != 1:
                return None
            return int(a[0].p)

        def k_to_q(a):
            a = K.reduce(a)
            if a.degree() > 0:
                return None
            return a[0]

        def q_to_z(q):
            q = flint.fmpq(q)
            return int(q.p) if q.q == 1 else None

        return IntegralClosureSquare(
            z_ring=ZZ,
            r_ring=self,
            q_field=QQ,
            k_field=K,
            z_to_r=Morphism(ZZ, self, self.from_int, r_to_z),
            q_to_k=Morphism(QQ, K, K.from_rational, k_to_q),
            z_to_q=Morphism(ZZ, QQ, flint.fmpq, q_to_z),
            r_to_k=Morphism(self, K, self.to_anf, self.try_from_anf),
        )
