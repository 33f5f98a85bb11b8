"""
Decomposition of a rational prime p in a ring of integers:

    p O_K = P1^e1 ... Pr^er      N(Pi) = p^fi    sum(ei fi) = n

Let theta be an integral generator of K with minimal polynomial g.
If p does not divide the index [O_K : Z[theta]], the Kummer-Dedekind
theorem applies: if g = product gi^ei modulo p then Pi = (p, gi(theta))
with residue class degree fi = deg gi.

Otherwise we decompose the algebra A = O_K/pO_K directly. The Frobenius
map x -> x^p is linear on A and its fixed points are the elements which
are constant on each local factor O_K/Pi^ei: they split p O_K into its
primary components Pi^ei. Adding the radical of p O_K (the kernel of a
large enough power of Frobenius) to Pi^ei gives Pi.
"""

from dataclasses import dataclass
import logging
import math

import flint

from dedekind.ideal import NonZeroIdeal
from dedekind.integers import valuation
from dedekind.linalg import matmul_mod, nullspace_mod, transpose

logger = logging.getLogger("primes")


@dataclass(frozen=True)
class PrimeIdeal:
    ideal: NonZeroIdeal
    p: int
    residue_class_degree: int

    def norm(self) -> int:
        return self.p**self.residue_class_degree


@dataclass(frozen=True)
class PrimeIdealFactor:
    "A prime ideal above p with its exponent in p O_K"

    prime_ideal: PrimeIdeal
    residue_class_degree: int
    ramification_exponent: int


def integral_generator(roi):
    """
    An algebraic integer theta generating K, its minimal polynomial
    (integer coefficients) and the index of Z[theta] in O_K.
    """
    K = roi.field
    theta = K.integral_multiple(K.gen())
    g = [int(c.p) for c in K.min_poly(theta).coeffs()]
    assert len(g) == K.degree + 1
    d = K.discriminant([K.pow(theta, i) for i in range(K.degree)])
    assert d.q == 1
    # disc(Z[theta]) = index^2 disc(O_K)
    index2, rem = divmod(int(d.p), roi.discriminant)
    assert rem == 0
    index = math.isqrt(index2)
    assert index * index == index2
    return theta, g, index


def split_prime(roi, p: int) -> list[PrimeIdealFactor]:
    """
    Prime ideals above p, sorted by norm.

    >>> from dedekind.field import NumberField
    >>> R = NumberField([1, 0, 1]).ring_of_integers()
    >>> [(f.residue_class_degree, f.ramification_exponent) for f in split_prime(R, 2)]
    [(1, 2)]
    >>> [(f.residue_class_degree, f.ramification_exponent) for f in split_prime(R, 3)]
    [(2, 1)]
    >>> [(f.residue_class_degree, f.ramification_exponent) for f in split_prime(R, 5)]
    [(1, 1), (1, 1)]
    """
    theta, g, index = integral_generator(roi)
    if index % p != 0:
        factors = kummer_dedekind(roi, p, theta, g)
    else:
        logger.debug(f"{p} divides the index of Z[theta] ({index}) in {roi}")
        factors = split_frobenius(roi, p)
    factors.sort(
        key=lambda f: (f.prime_ideal.norm(), f.prime_ideal.ideal.lattice.basis)
    )
    assert (
        sum(f.residue_class_degree * f.ramification_exponent for f in factors)
        == roi.degree
    )
    logger.debug(
        f"p={p} splits as "
        + " ".join(
            f"(f={f.residue_class_degree},e={f.ramification_exponent})"
            for f in factors
        )
    )
    return factors


def kummer_dedekind(roi, p: int, theta, g: list[int]) -> list[PrimeIdealFactor]:
    K = roi.field
    pO = roi.principal_ideal(roi.from_int(p))
    _lead, facs = flint.nmod_poly([c % p for c in g], p).factor()
    result = []
    for h, e in facs:
        h_theta = roi.try_from_anf(K.evaluate([int(c) for c in h.coeffs()], theta))
        assert h_theta is not None
        P = roi.ideal_add(pO, roi.principal_ideal(h_theta))
        f = h.degree()
        assert roi.ideal_norm(P) == p**f
        result.append(PrimeIdealFactor(PrimeIdeal(P, p, f), f, int(e)))
    return result


def _reduce_mod(roi, x, p: int):
    return roi.from_coefficients([c % p for c in x.coefficients])


def _pow_mod(roi, x, k: int, p: int):
    # x^k modulo p O_K
    result = roi.one()
    while k:
        if k & 1:
            result = _reduce_mod(roi, roi.mul(result, x), p)
        x = _reduce_mod(roi, roi.mul(x, x), p)
        k >>= 1
    return result


def split_frobenius(roi, p: int) -> list[PrimeIdealFactor]:
    n = roi.degree
    # Row i is the image of the i-th basis element by Frobenius,
    # vectors are multiplied on the right.
    frob = [
        list(_pow_mod(roi, roi.unit_vector(i), p, p).coefficients) for i in range(n)
    ]

    # Radical of p O_K: kernel of Frobenius^j where p^j >= n
    frob_j = frob
    pj = p
    while pj < n:
        frob_j = matmul_mod(frob_j, frob, p)
        pj *= p
    rad_vectors = nullspace_mod(transpose(frob_j), p)
    p_vectors = [[p * int(i == j) for j in range(n)] for i in range(n)]
    radical = roi.ideal_from_integer_span(
        [roi.from_coefficients(v) for v in rad_vectors + p_vectors]
    )

    # Fixed points of Frobenius
    frob_minus_id = [
        [(frob[i][j] - int(i == j)) % p for j in range(n)] for i in range(n)
    ]
    fixed = nullspace_mod(transpose(frob_minus_id), p)
    logger.debug(
        f"p={p}: {len(fixed)} prime ideals, radical has norm {roi.ideal_norm(radical)}"
    )

    components = [roi.principal_ideal(roi.from_int(p))]
    for v in fixed:
        e = roi.from_coefficients(v)
        mp = flint.nmod_poly([c % p for c in roi.min_poly(e)], p)
        values = [int(r) for r, _ in mp.roots()]
        split = []
        for J in components:
            for c in values:
                ec = roi.sub(e, roi.from_int(c))
                Jc = roi.ideal_add(J, roi.principal_ideal(ec))
                if roi.ideal_norm(Jc) > 1:
                    split.append(Jc)
        components = split
    assert len(components) == len(fixed)

    result = []
    for J in components:
        P = roi.ideal_add(J, radical)
        f = valuation(roi.ideal_norm(P), p)
        assert roi.ideal_norm(P) == p**f
        ef = valuation(roi.ideal_norm(J), p)
        assert ef % f == 0
        result.append(PrimeIdealFactor(PrimeIdeal(P, p, f), f, ef // f))
    return result
