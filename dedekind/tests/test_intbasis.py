import itertools
import logging

import flint

from dedekind.field import NumberField
from dedekind.intbasis import compute_integral_basis

FIELDS = [
    # modulus, discriminant of the ring of integers
    ([1, 0, 1], -4),
    ([-2, 0, 1], 8),
    ([-3, 0, 1], 12),
    ([-5, 0, 1], 5),
    ([5, 0, 1], -20),
    ([3, 0, 1], -3),
    ([-2, 0, 0, 1], -108),
    ([-8, -2, -1, 1], -503),
    ([1, 1, 0, 0, 1], 229),
]


def test_discriminants():
    for modulus, disc in FIELDS:
        K = NumberField(modulus)
        ib = K.integral_basis()
        print(K, "discriminant", ib.discriminant)
        assert ib.discriminant == disc
        assert len(ib.basis) == K.degree
        assert all(K.is_algebraic_integer(b) for b in ib.basis)
        assert K.discriminant(list(ib.basis)) == disc


def test_known_basis():
    K = NumberField([-8, -2, -1, 1])
    ib = K.integral_basis()
    half = flint.fmpq(1, 2)
    # 1, x, (x + x^2)/2 up to unimodular change of basis
    R = K.ring_of_integers()
    assert R.try_from_anf(K.element([0, half, half])) is not None
    assert R.try_from_anf(K.element([0, 0, half])) is None
    assert ib.basis[0] == K.one()


def test_refine_from_basis():
    K = NumberField([3, 0, 1])
    ib = K.integral_basis()
    ib2 = compute_integral_basis(K, list(ib.basis))
    assert ib2 == ib

    # Start from a non-maximal order
    ib3 = compute_integral_basis(K, [K.one(), K.element([0, 4])])
    assert ib3.discriminant == -3



def test_anf_round_trip():
    K = NumberField([-8, -2, -1, 1])
    R = K.ring_of_integers()
    for coeffs in itertools.product(range(-2, 3), repeat=3):
        x = R.from_coefficients(coeffs)
        a = R.to_anf(x)
        assert R.try_from_anf(a) == x
        assert K.equal(R.to_anf(R.try_from_anf(a)), a)
        # a/2 is integral iff all coordinates are even
        half = R.try_from_anf(K.mul(a, K.from_rational(flint.fmpq(1, 2))))
        assert (half is None) == any(c % 2 for c in coeffs)

if __name__ == "__main__":
    from dedekind.logging import setup

    setup(logging.DEBUG)
    test_discriminants()
    test_known_basis()
    test_refine_from_basis()
    test_anf_round_trip()
