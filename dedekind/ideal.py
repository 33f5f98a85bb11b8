"""
Ideals of a ring of integers O_K with a fixed integral basis.

A nonzero ideal is a sublattice of Z^n (coordinates relative to the
integral basis) which has full rank and is stable under multiplication
by O_K. The zero ideal is kept as a separate case: it would be a
degenerate lattice of rank 0.

Ideal operations are lattice operations: sum is lattice sum,
intersection is lattice intersection, the product is spanned by
the n^2 products of basis elements and the norm is the index
of the lattice.
"""

from dataclasses import dataclass
import logging

from dedekind.linalg import Lattice

logger = logging.getLogger("ideal")

# Check that ideals are stable under multiplication (slow)
DEBUG_CHECK_IDEALS = False


class Ideal:
    "Either ZeroIdeal() or NonZeroIdeal(lattice)"

    __slots__ = ()


@dataclass(frozen=True)
class ZeroIdeal(Ideal):
    pass


@dataclass(frozen=True)
class NonZeroIdeal(Ideal):
    lattice: Lattice


class IdealArithmetic:
    """
    Ideal operations for RingOfIntegers.
    """

    def zero_ideal(self) -> ZeroIdeal:
        return ZeroIdeal()

    def unit_ideal(self) -> NonZeroIdeal:
        return self.principal_ideal(self.one())

    def check_ideal(self, ideal: Ideal):
        match ideal:
            case ZeroIdeal():
                pass
            case NonZeroIdeal(lattice=lattice):
                n = self.degree
                assert lattice.rank == n
                for v in lattice.basis:
                    x = self.from_coefficients(v)
                    for i in range(n):
                        y = self.mul(x, self.unit_vector(i))
                        assert lattice.contains_element(y.coefficients), (ideal, i)

    def _debug_check(self, *ideals):
        if DEBUG_CHECK_IDEALS:
            for ideal in ideals:
                self.check_ideal(ideal)

    def integer_basis(self, ideal: Ideal):
        "A basis of the ideal as a Z-module, or None for the zero ideal"
        match ideal:
            case ZeroIdeal():
                return None
            case NonZeroIdeal(lattice=lattice):
                return [self.from_coefficients(v) for v in lattice.basis]

    def ideal_from_integer_span(self, span) -> Ideal:
        """
        The ideal whose Z-basis is spanned by given elements.
        The caller is responsible for the span to be an ideal.
        """
        for x in span:
            assert self.is_element(x)
        lattice = Lattice.span(self.degree, [x.coefficients for x in span])
        if lattice.rank == 0:
            return ZeroIdeal()
        assert lattice.is_full_rank()
        return NonZeroIdeal(lattice)

    def principal_ideal(self, a) -> Ideal:
        if self.is_zero(a):
            return ZeroIdeal()
        K = self.field
        alpha = self.to_anf(a)
        span = []
        for i in range(self.degree):
            x = self.try_from_anf(K.mul(self.basis_element(i), alpha))
            assert x is not None
            span.append(x)
        ideal = self.ideal_from_integer_span(span)
        self._debug_check(ideal)
        return ideal

    def generated_ideal(self, elems) -> Ideal:
        "The ideal generated by a list of elements"
        ideal = ZeroIdeal()
        for x in elems:
            ideal = self.ideal_add(ideal, self.principal_ideal(x))
        return ideal

    def ideal_equal(self, a: Ideal, b: Ideal) -> bool:
        self._debug_check(a, b)
        match (a, b):
            case (ZeroIdeal(), ZeroIdeal()):
                return True
            case (NonZeroIdeal(lattice=la), NonZeroIdeal(lattice=lb)):
                return la == lb
            case _:
                return False

    def ideal_contains(self, a: Ideal, b: Ideal) -> bool:
        "Whether b is a subset of a"
        self._debug_check(a, b)
        match (a, b):
            case (_, ZeroIdeal()):
                return True
            case (ZeroIdeal(), NonZeroIdeal()):
                return False
            case (NonZeroIdeal(lattice=la), NonZeroIdeal(lattice=lb)):
                return la.contains(lb)

    def ideal_contains_element(self, a: Ideal, x) -> bool:
        self._debug_check(a)
        assert self.is_element(x)
        match a:
            case ZeroIdeal():
                return self.is_zero(x)
            case NonZeroIdeal(lattice=lattice):
                return lattice.contains_element(x.coefficients)

    def ideal_intersect(self, a: Ideal, b: Ideal) -> Ideal:
        self._debug_check(a, b)
        match (a, b):
            case (NonZeroIdeal(lattice=la), NonZeroIdeal(lattice=lb)):
                return NonZeroIdeal(la.intersect(lb))
            case _:
                return ZeroIdeal()

    def ideal_add(self, a: Ideal, b: Ideal) -> Ideal:
        self._debug_check(a, b)
        match (a, b):
            case (ZeroIdeal(), _):
                return b
            case (_, ZeroIdeal()):
                return a
            case (NonZeroIdeal(lattice=la), NonZeroIdeal(lattice=lb)):
                return NonZeroIdeal(la.add(lb))

    def ideal_mul(self, a: Ideal, b: Ideal) -> Ideal:
        self._debug_check(a, b)
        match (a, b):
            case (NonZeroIdeal(), NonZeroIdeal()):
                a_basis = self.integer_basis(a)
                b_basis = self.integer_basis(b)
                n = self.degree
                assert len(a_basis) == n and len(b_basis) == n
                span = [self.mul(x, y) for x in a_basis for y in b_basis]
                return self.ideal_from_integer_span(span)
            case _:
                return ZeroIdeal()

    def ideal_product(self, ideals) -> Ideal:
        result = self.unit_ideal()
        for ideal in ideals:
            result = self.ideal_mul(result, ideal)
        return result

    def ideal_power(self, ideal: Ideal, k: int) -> Ideal:
        assert k >= 0
        result = self.unit_ideal()
        while k:
            if k & 1:
                result = self.ideal_mul(result, ideal)
            ideal = self.ideal_mul(ideal, ideal)
            k >>= 1
        return result

    def ideal_norm(self, ideal: Ideal) -> int:
        """
        The index [O_K : I] of a nonzero ideal. By convention the zero
        ideal has norm 0.
        """
        match ideal:
            case ZeroIdeal():
                return 0
            case NonZeroIdeal(lattice=lattice):
                return lattice.index()
