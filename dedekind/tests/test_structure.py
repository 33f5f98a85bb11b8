import flint

from dedekind.field import NumberField
from dedekind.structure import DedekindDomain, EuclideanDomain, IntegerRing


def test_integral_closure_square():
    K = NumberField([-5, 0, 1])
    R = K.ring_of_integers()
    sq = R.integral_closure_square()

    assert K.equal(sq.z_to_k(3), K.from_int(3))
    assert sq.z_to_r.try_preimage(R.from_int(4)) == 4
    assert sq.z_to_r.try_preimage(R.from_coefficients([0, 1])) is None
    assert sq.q_to_k.try_preimage(K.gen()) is None
    assert sq.q_to_k.try_preimage(K.from_rational(flint.fmpq(2, 3))) == flint.fmpq(
        2, 3
    )
    assert sq.z_to_q.try_preimage(flint.fmpq(1, 2)) is None

    # The golden ratio (1 + sqrt(5))/2
    phi = R.from_coefficients([0, 1])
    half = flint.fmpq(1, 2)
    assert K.equal(sq.r_to_k.image(phi), K.element([half, half]))
    assert sq.min_poly_r_over_z(phi) == [-1, -1, 1]

    alpha = K.element([0, flint.fmpq(1, 3)])
    assert sq.integralize_multiplier(alpha) == 9
    n, d = sq.numerator_and_denominator(alpha)
    assert K.equal(K.div(sq.r_to_k.image(n), sq.r_to_k.image(d)), alpha)
    assert R.equal(d, R.from_int(9))


def test_capabilities():
    ZZ = IntegerRing()
    assert isinstance(ZZ, EuclideanDomain)
    assert ZZ.quorem(7, 3) == (2, 1)
    R = NumberField([1, 0, 1]).ring_of_integers()
    assert isinstance(R, DedekindDomain)
    assert not isinstance(ZZ, DedekindDomain)


def test_ring_elements():
    K = NumberField([-5, 0, 1])
    R = K.ring_of_integers()
    x = R.from_coefficients([2, 3])
    assert R.into_coefficients(x) == [2, 3]
    assert R.equal(R.try_from_anf(R.to_anf(x)), x)
    assert R.try_from_anf(K.element([0, flint.fmpq(1, 2)])) is None
    assert R.equal(R.sub(R.add(x, R.one()), R.one()), x)
    assert R.is_zero(R.add(x, R.neg(x)))
    # N(2 + 3 phi) = 4 + 6 - 9
    assert R.norm(x) == 1
    assert R.trace(x) == 7


if __name__ == "__main__":
    test_integral_closure_square()
    test_capabilities()
    test_ring_elements()
