import itertools
import logging

from dedekind.field import NumberField
from dedekind.ideal import ZeroIdeal


def gaussian_integers():
    return NumberField([1, 0, 1]).ring_of_integers()


def test_euler_phi():
    R = gaussian_integers()
    assert R.euler_phi(R.principal_ideal(R.from_int(5))) == 16
    # Z[i]/2 has units 1 and i
    assert R.euler_phi(R.principal_ideal(R.from_int(2))) == 2
    assert R.euler_phi(R.unit_ideal()) == 1
    assert R.euler_phi(ZeroIdeal()) is None


def test_factor_ideal():
    R = gaussian_integers()
    assert R.factor_ideal(ZeroIdeal()) is None
    assert R.factor_ideal(R.unit_ideal()).factor_powers() == []

    # 60 = -i (1+i)^4 3 (2+i)(2-i)
    I = R.principal_ideal(R.from_int(60))
    facs = R.factor_ideal(I)
    assert sorted((P.norm(), e) for P, e in facs.factor_powers()) == [
        (2, 4),
        (5, 1),
        (5, 1),
        (9, 1),
    ]
    assert not facs.is_prime()

    P = R.primes_over(5)[0].prime_ideal
    assert R.factor_ideal(P.ideal).is_prime()


def test_factor_recombine():
    for modulus in ([1, 0, 1], [5, 0, 1], [-8, -2, -1, 1]):
        R = NumberField(modulus).ring_of_integers()
        for I in R.all_nonzero_ideals_norm_le(30):
            facs = R.factor_ideal(I)
            J = R.ideal_product(
                [R.ideal_power(P.ideal, e) for P, e in facs.factor_powers()]
            )
            assert R.ideal_equal(I, J)


def test_ideals_norm_eq():
    R = gaussian_integers()
    assert len(list(R.all_ideals_norm_eq(5040))) == 0
    assert len(list(R.all_ideals_norm_eq(5040 * 7))) == 2
    assert list(R.all_ideals_norm_eq(0)) == [ZeroIdeal()]
    (unit,) = R.all_ideals_norm_eq(1)
    assert R.ideal_equal(unit, R.unit_ideal())
    for I in R.all_ideals_norm_eq(25):
        assert R.ideal_norm(I) == 25
    assert len(list(R.all_ideals_norm_eq(25))) == 3


def test_all_ideals():
    R = gaussian_integers()
    first = list(itertools.islice(R.all_ideals(), 4))
    assert [R.ideal_norm(I) for I in first] == [0, 1, 2, 4]

    nonzero = list(itertools.islice(R.all_nonzero_ideals(), 9))
    small = list(R.all_nonzero_ideals_norm_le(10))
    norms = [R.ideal_norm(I) for I in small]
    assert norms == [1, 2, 4, 5, 5, 8, 9, 10, 10]
    assert all(R.ideal_equal(I, J) for I, J in zip(nonzero, small))


def test_sequence_restart():
    R = gaussian_integers()
    seq = R.all_nonzero_ideals_norm_le(20)
    assert list(seq) == list(seq)
    seq = R.all_ideals()
    a = next(iter(seq))
    b = next(iter(seq))
    assert a == b == ZeroIdeal()


if __name__ == "__main__":
    from dedekind.logging import setup

    setup(logging.DEBUG)
    test_euler_phi()
    test_factor_ideal()
    test_factor_recombine()
    test_ideals_norm_eq()
    test_all_ideals()
    test_sequence_restart()
