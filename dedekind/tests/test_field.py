import logging

import flint
import pytest

from dedekind.field import NumberField
from dedekind.structure import Field, IntegralDomain, RationalField, IntegerRing


def test_field_arith():
    # Q(cbrt(2))
    K = NumberField([-2, 0, 0, 1])
    x = K.gen()
    assert K.degree == 3
    assert K.equal(K.pow(x, 3), K.from_int(2))
    assert K.trace(x) == 0
    assert K.norm(x) == 2

    a = K.element([1, 2, 3])
    b = K.inv(a)
    assert K.equal(K.mul(a, b), K.one())
    assert K.equal(K.div(a, a), K.one())
    assert K.equal(K.pow(a, -2), K.mul(b, b))
    assert K.equal(K.sub(a, a), K.zero())
    assert K.equal(K.add(a, K.neg(a)), K.zero())
    assert K.equal(K.from_vector(K.to_vector(a)), a)


def test_field_monic():
    # 2x^2 - 1 defines Q(sqrt(2)/2)
    K = NumberField([-1, 0, 2])
    assert K.modulus == flint.fmpq_poly([flint.fmpq(-1, 2), 0, 1])
    assert not K.is_algebraic_integer(K.gen())
    assert K.equal(K.integral_multiple(K.gen()), K.element([0, 2]))


def test_field_errors():
    with pytest.raises(ValueError):
        NumberField([-1, 0, 1])
    with pytest.raises(ValueError):
        NumberField([3])
    K = NumberField([1, 0, 1])
    with pytest.raises(ZeroDivisionError):
        K.inv(K.zero())
    with pytest.raises(ZeroDivisionError):
        RationalField().inv(flint.fmpq(0))


def test_min_poly():
    K = NumberField([-2, 0, 0, 1])
    x = K.gen()
    assert K.min_poly(x) == flint.fmpq_poly([-2, 0, 0, 1])
    assert K.min_poly(K.from_int(3)) == flint.fmpq_poly([-3, 1])
    assert K.char_poly(K.from_int(3)) == flint.fmpq_poly([-3, 1]) ** 3
    # x^2 has minimal polynomial t^3 - 4
    assert K.min_poly(K.mul(x, x)) == flint.fmpq_poly([-4, 0, 0, 1])
    # Value of the minimal polynomial
    a = K.element([1, 1, 0])
    mp = [int(c.p) for c in K.min_poly(a).coeffs()]
    assert K.is_zero(K.evaluate(mp, a))


def test_discriminant():
    K = NumberField([1, 0, 1])
    assert K.discriminant([K.one(), K.gen()]) == -4
    K = NumberField([-8, -2, -1, 1])
    assert K.discriminant([K.pow(K.gen(), i) for i in range(3)]) == -2012


def test_capabilities():
    K = NumberField([1, 0, 1])
    assert isinstance(K, Field)
    assert isinstance(IntegerRing(), IntegralDomain)
    assert not isinstance(IntegerRing(), Field)
    assert isinstance(RationalField(), Field)


if __name__ == "__main__":
    from dedekind.logging import setup

    setup(logging.DEBUG)
    test_field_arith()
    test_field_monic()
    test_field_errors()
    test_min_poly()
    test_discriminant()
    test_capabilities()
