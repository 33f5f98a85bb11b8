"""
Algebraic number fields, rings of integers and their ideals.

>>> from dedekind import NumberField
>>> R = NumberField([1, 0, 1]).ring_of_integers()
>>> R.discriminant
-4
>>> R.euler_phi(R.principal_ideal(R.from_int(5)))
16
"""

from dedekind.field import NumberField
from dedekind.factor import IdealFactorization, IdealSequence
from dedekind.ideal import Ideal, NonZeroIdeal, ZeroIdeal
from dedekind.intbasis import IntegralBasis, compute_integral_basis
from dedekind.linalg import Lattice
from dedekind.primes import PrimeIdeal, PrimeIdealFactor
from dedekind.ring import Element, RingOfIntegers

__all__ = [
    "Element",
    "Ideal",
    "IdealFactorization",
    "IdealSequence",
    "IntegralBasis",
    "Lattice",
    "NonZeroIdeal",
    "NumberField",
    "PrimeIdeal",
    "PrimeIdealFactor",
    "RingOfIntegers",
    "ZeroIdeal",
    "compute_integral_basis",
]
