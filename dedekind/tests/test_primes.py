import logging

from dedekind.field import NumberField
from dedekind.primes import integral_generator, split_prime


def splitting(R, p):
    return sorted(
        (f.residue_class_degree, f.ramification_exponent) for f in split_prime(R, p)
    )


def test_kummer_dedekind():
    R = NumberField([5, 0, 1]).ring_of_integers()
    assert integral_generator(R)[2] == 1
    assert splitting(R, 2) == [(1, 2)]
    assert splitting(R, 3) == [(1, 1), (1, 1)]
    assert splitting(R, 5) == [(1, 2)]
    assert splitting(R, 7) == [(1, 1), (1, 1)]
    assert splitting(R, 11) == [(2, 1)]


def test_common_index_divisor():
    # 2 splits completely but x^3 - x^2 - 2x - 8 has no 3 distinct roots mod 2
    R = NumberField([-8, -2, -1, 1]).ring_of_integers()
    assert R.discriminant == -503
    assert integral_generator(R)[2] == 2
    facs = split_prime(R, 2)
    assert splitting(R, 2) == [(1, 1), (1, 1), (1, 1)]
    ideals = [f.prime_ideal.ideal for f in facs]
    for i in range(3):
        for j in range(i + 1, 3):
            assert not R.ideal_equal(ideals[i], ideals[j])
    assert R.ideal_equal(R.ideal_product(ideals), R.principal_ideal(R.from_int(2)))

    assert splitting(R, 503) == [(1, 1), (1, 2)]


def test_index_divisor_inert():
    # Z[sqrt(-3)] has index 2 in the ring of integers, 2 is inert
    R = NumberField([3, 0, 1]).ring_of_integers()
    assert integral_generator(R)[2] == 2
    assert splitting(R, 2) == [(2, 1)]
    assert splitting(R, 3) == [(1, 2)]
    assert splitting(R, 7) == [(1, 1), (1, 1)]


def test_index_divisor_ramified():
    # Q(i) defined by x^2 + 4: the generator is 2i
    R = NumberField([4, 0, 1]).ring_of_integers()
    assert R.discriminant == -4
    assert integral_generator(R)[2] == 2
    facs = split_prime(R, 2)
    assert splitting(R, 2) == [(1, 2)]
    P = facs[0].prime_ideal
    assert P.norm() == 2
    assert R.ideal_equal(R.ideal_power(P.ideal, 2), R.principal_ideal(R.from_int(2)))


def test_primes_cache():
    R = NumberField([1, 0, 1]).ring_of_integers()
    assert R.primes_over(5) is R.primes_over(5)
    assert [P.norm() for P in R.prime_ideals_norm_le(10)] == [2, 5, 5, 9]


if __name__ == "__main__":
    from dedekind.logging import setup

    setup(logging.DEBUG)
    test_kummer_dedekind()
    test_common_index_divisor()
    test_index_divisor_inert()
    test_index_divisor_ramified()
    test_primes_cache()
