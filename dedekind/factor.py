"""
Factorization of ideals into prime ideals, and enumeration
of ideals by norm.

An ideal of norm N is a product of prime ideals above the prime
factors of N. For N = p^k, the ideals of norm N are the products
P1^a1 ... Pr^ar of primes above p such that sum(ai fi) = k where
fi are the residue class degrees.
"""

from dataclasses import dataclass
import itertools
import logging

from dedekind.combinatorics import num_partitions_part_pool
from dedekind.ideal import Ideal, ZeroIdeal
from dedekind.integers import factor, product, smallprimes
from dedekind.primes import PrimeIdeal, PrimeIdealFactor, split_prime

logger = logging.getLogger("ideal")


@dataclass(frozen=True)
class IdealFactorization:
    "A product of distinct prime ideals with positive exponents"

    powers: tuple[tuple[PrimeIdeal, int], ...]

    def factor_powers(self) -> list[tuple[PrimeIdeal, int]]:
        return list(self.powers)

    def is_prime(self) -> bool:
        return len(self.powers) == 1 and self.powers[0][1] == 1


class IdealSequence:
    """
    A lazy sequence of ideals. It can be iterated several times,
    each iteration restarts the enumeration.
    """

    def __init__(self, func, *args):
        self._func = func
        self._args = args

    def __iter__(self):
        return iter(self._func(*self._args))


class IdealFactoring:
    """
    Factorization and enumeration of ideals for RingOfIntegers.
    """

    def primes_over(self, p: int) -> list[PrimeIdealFactor]:
        if p not in self._primes:
            self._primes[p] = split_prime(self, p)
        return self._primes[p]

    def factor_ideal(self, ideal: Ideal):
        """
        Factorization of a nonzero ideal as a product of prime ideals,
        or None for the zero ideal.
        """
        if isinstance(ideal, ZeroIdeal):
            return None
        norm = self.ideal_norm(ideal)
        powers = []
        for p, k in factor(norm):
            total = 0
            for fac in self.primes_over(p):
                P = fac.prime_ideal
                f = P.residue_class_degree
                v = 0
                Pv = P.ideal
                while (v + 1) * f <= k and self.ideal_contains(Pv, ideal):
                    v += 1
                    Pv = self.ideal_mul(Pv, P.ideal)
                if v:
                    powers.append((P, v))
                    total += v * f
            assert total == k, (ideal, p, k)
        logger.debug(f"Factored ideal of norm {norm} into {len(powers)} prime powers")
        return IdealFactorization(tuple(powers))

    def euler_phi(self, ideal: Ideal):
        "Order of the unit group of O_K/I, or None for the zero ideal"
        facs = self.factor_ideal(ideal)
        if facs is None:
            return None
        return product(
            [(P.norm() - 1) * P.norm() ** (e - 1) for P, e in facs.factor_powers()]
        )

    def all_ideals_norm_eq(self, n: int) -> IdealSequence:
        """
        All ideals of norm n. The zero ideal is the only ideal of norm 0.
        """
        return IdealSequence(self._ideals_norm_eq, n)

    def _ideals_norm_eq(self, n: int):
        if n == 0:
            yield ZeroIdeal()
            return
        choices = []
        for p, k in factor(n):
            primes = self.primes_over(p)
            pool = [fac.residue_class_degree for fac in primes]
            local = [
                self.ideal_product([primes[i].prime_ideal.ideal for i in idxs])
                for idxs in num_partitions_part_pool(k, pool)
            ]
            if not local:
                return
            choices.append(local)
        for ideals in itertools.product(*choices):
            yield self.ideal_product(ideals)

    def all_nonzero_ideals_norm_le(self, n: int) -> IdealSequence:
        "Nonzero ideals of norm at most n, by increasing norm"

        def gen():
            for m in range(1, n + 1):
                yield from self._ideals_norm_eq(m)

        return IdealSequence(gen)

    def all_ideals(self) -> IdealSequence:
        """
        All ideals by increasing norm, starting with the zero ideal.
        The sequence is infinite.
        """

        def gen():
            for m in itertools.count(0):
                yield from self._ideals_norm_eq(m)

        return IdealSequence(gen)

    def all_nonzero_ideals(self) -> IdealSequence:
        "All nonzero ideals by increasing norm (infinite sequence)"

        def gen():
            for m in itertools.count(1):
                yield from self._ideals_norm_eq(m)

        return IdealSequence(gen)

    def prime_ideals_norm_le(self, n: int) -> list[PrimeIdeal]:
        "Prime ideals of norm at most n, sorted by norm"
        primes = []
        for p in smallprimes(n + 1):
            for fac in self.primes_over(p):
                if fac.prime_ideal.norm() <= n:
                    primes.append(fac.prime_ideal)
        primes.sort(key=lambda P: P.norm())
        return primes
