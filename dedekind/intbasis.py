"""
Integral basis and discriminant of a number field.

The initial guess is made of integral multiples of the power basis
1, x, ..., x^(n-1). While p^2 divides the discriminant of the guess
(a1, ..., an), look for an algebraic integer of the form

    (x1 a1 + ... + xn an) / p     0 <= xi < p

If one exists, it is added to the lattice spanned by the guess
and a new guess is extracted by Hermite reduction: the discriminant
is then divided by a square multiple of p^2. If none exists for all
such p, the guess is an integral basis.

See https://www.ucl.ac.uk/~ucahmki/intbasis.pdf

The search is exponential in the degree: it is meant for fields
of small degree and discriminant.
"""

from dataclasses import dataclass
import itertools
import logging
import time

import flint

from dedekind.integers import factor
from dedekind.linalg import primitive_part, reversed_hnf_rows

logger = logging.getLogger("basis")


@dataclass(frozen=True)
class IntegralBasis:
    basis: tuple[flint.fmpq_poly, ...]
    discriminant: int


def compute_integral_basis(K, guess=None) -> IntegralBasis:
    """
    Compute an integral basis of number field K, optionally starting
    from a list of algebraic integers forming a basis of K.

    >>> from dedekind.field import NumberField
    >>> K = NumberField([5, 0, 1])
    >>> ib = compute_integral_basis(K)
    >>> ib.discriminant
    -20
    >>> K = NumberField([-5, 0, 1])
    >>> ib = compute_integral_basis(K)
    >>> ib.discriminant
    5
    >>> ib.basis[1] == K.element([flint.fmpq(1, 2), flint.fmpq(1, 2)])
    True
    """
    n = K.degree
    if guess is None:
        guess = [K.integral_multiple(K.pow(K.gen(), i)) for i in range(n)]
    else:
        guess = [K.reduce(a) for a in guess]
        assert len(guess) == n
        assert all(K.is_algebraic_integer(a) for a in guess)

    t0 = time.monotonic()
    rounds = 0
    while True:
        disc = K.discriminant(guess)
        # Discriminant of algebraic integers is a nonzero integer.
        assert disc.q == 1
        disc = int(disc.p)
        assert disc != 0

        alpha = None
        # Small primes first
        for p, k in factor(disc):
            if k < 2:
                continue
            alpha = search_integral_element(K, guess, p)
            if alpha is not None:
                logger.debug(f"Found algebraic integer {alpha} at p={p}")
                break
        if alpha is None:
            break

        guess = refine_basis(K, guess, alpha)
        rounds += 1

    dt = time.monotonic() - t0
    logger.info(
        f"Integral basis of {K.modulus} has discriminant {disc} ({rounds} refinements in {dt:.3f}s)"
    )
    return IntegralBasis(tuple(guess), disc)


def search_integral_element(K, guess, p: int):
    """
    Find a nonzero algebraic integer (x1 a1 + ... + xn an) / p
    with 0 <= xi < p, or return None.
    """
    n = K.degree
    inv_p = flint.fmpq(1, p)
    for xs in itertools.product(range(p), repeat=n):
        if not any(xs):
            continue
        alpha = K.zero()
        for xi, ai in zip(xs, guess):
            if xi:
                alpha += xi * ai
        alpha = K.reduce(alpha * inv_p)
        if not K.is_zero(alpha) and K.is_algebraic_integer(alpha):
            return alpha
    return None


def refine_basis(K, guess, alpha):
    """
    Extract a basis of the lattice spanned by guess and alpha.

    The basis is triangular with respect to the power basis: the i-th
    element has degree i.
    """
    n = K.degree
    rows = [K.to_vector(a) for a in list(guess) + [alpha]]
    mul, prim = primitive_part(rows)
    hnf = reversed_hnf_rows(prim)
    assert len(hnf) == n
    return [K.from_vector([mul * x for x in hnf[i]]) for i in reversed(range(n))]
