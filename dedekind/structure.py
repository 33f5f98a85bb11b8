"""
Capability interfaces for rings and fields.

Algorithms are written against these protocols: a "ring" is any object
providing the listed operations on its elements, which are plain Python
values (ints, flint.fmpq, flint.fmpq_poly, ring.Element...).
"""

from dataclasses import dataclass
import math
from typing import Any, Callable, Optional, Protocol, runtime_checkable

import flint


@runtime_checkable
class SemiRing(Protocol):
    def zero(self) -> Any: ...
    def one(self) -> Any: ...
    def equal(self, a, b) -> bool: ...
    def add(self, a, b) -> Any: ...
    def mul(self, a, b) -> Any: ...


@runtime_checkable
class Ring(SemiRing, Protocol):
    def neg(self, a) -> Any: ...
    def sub(self, a, b) -> Any: ...


@runtime_checkable
class IntegralDomain(Ring, Protocol):
    def is_zero(self, a) -> bool: ...


@runtime_checkable
class Field(IntegralDomain, Protocol):
    def inv(self, a) -> Any: ...
    def div(self, a, b) -> Any: ...


@runtime_checkable
class EuclideanDomain(IntegralDomain, Protocol):
    def quorem(self, a, b) -> tuple[Any, Any]: ...


@runtime_checkable
class DedekindDomain(IntegralDomain, Protocol):
    def principal_ideal(self, a) -> Any: ...
    def ideal_equal(self, a, b) -> bool: ...
    def ideal_contains(self, a, b) -> bool: ...
    def ideal_intersect(self, a, b) -> Any: ...
    def ideal_add(self, a, b) -> Any: ...
    def ideal_mul(self, a, b) -> Any: ...
    def factor_ideal(self, a) -> Any: ...


class IntegerRing:
    "The integers, as Python ints"

    def zero(self):
        return 0

    def one(self):
        return 1

    def equal(self, a, b):
        return a == b

    def is_zero(self, a):
        return a == 0

    def add(self, a, b):
        return a + b

    def sub(self, a, b):
        return a - b

    def neg(self, a):
        return -a

    def mul(self, a, b):
        return a * b

    def quorem(self, a, b):
        return divmod(a, b)

    def __repr__(self):
        return "ZZ"


class RationalField:
    "The rational numbers, as flint.fmpq"

    def zero(self):
        return flint.fmpq(0)

    def one(self):
        return flint.fmpq(1)

    def equal(self, a, b):
        return a == b

    def is_zero(self, a):
        return a == 0

    def add(self, a, b):
        return a + b

    def sub(self, a, b):
        return a - b

    def neg(self, a):
        return -a

    def mul(self, a, b):
        return a * b

    def inv(self, a):
        if a == 0:
            raise ZeroDivisionError("inverse of zero rational")
        return 1 / flint.fmpq(a)

    def div(self, a, b):
        return self.mul(a, self.inv(b))

    def __repr__(self):
        return "QQ"


@dataclass(frozen=True)
class Morphism:
    """
    An injective ring homomorphism. try_preimage returns None
    for elements outside the image.
    """

    domain: Any
    range: Any
    image: Callable[[Any], Any]
    try_preimage: Callable[[Any], Optional[Any]]


@dataclass(frozen=True)
class IntegralClosureSquare:
    """
    A commuting square of injective ring homomorphisms

        Q -> K
        ^    ^
        Z -> R

    where Q is the field of fractions of Z, K is a finite extension
    of Q and R is the integral closure of Z in K.
    """

    z_ring: Any
    r_ring: Any
    q_field: Any
    k_field: Any
    z_to_r: Morphism
    q_to_k: Morphism
    z_to_q: Morphism
    r_to_k: Morphism

    def z_to_k(self, x):
        return self.q_to_k.image(self.z_to_q.image(x))

    def min_poly_k_over_q(self, alpha) -> list:
        "Coefficients (constant first) of the monic minimal polynomial over Q"
        poly = self.k_field.min_poly(alpha)
        coeffs = [poly[i] for i in range(poly.degree() + 1)]
        assert coeffs[-1] == 1
        return coeffs

    def min_poly_r_over_z(self, alpha) -> list[int]:
        # Elements of R have monic minimal polynomials over Z.
        coeffs = self.min_poly_k_over_q(self.r_to_k.image(alpha))
        zcoeffs = [self.z_to_q.try_preimage(c) for c in coeffs]
        assert all(c is not None for c in zcoeffs)
        return zcoeffs

    def integralize_multiplier(self, alpha) -> int:
        "A nonzero integer d such that d * alpha belongs to R"
        coeffs = self.min_poly_k_over_q(alpha)
        return math.lcm(*(int(flint.fmpq(c).q) for c in coeffs))

    def numerator_and_denominator(self, alpha):
        """
        Elements n, d of R such that alpha = n / d in K.
        """
        d = self.z_to_r.image(self.integralize_multiplier(alpha))
        k = self.k_field
        n = self.r_to_k.try_preimage(k.mul(self.r_to_k.image(d), alpha))
        assert n is not None
        assert k.equal(alpha, k.div(self.r_to_k.image(n), self.r_to_k.image(d)))
        return n, d
