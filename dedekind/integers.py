"""
Utility functions for integers.
"""

import math
import numpy as np

import flint


def smallprimes(B: int) -> list[int]:
    """
    >>> smallprimes(30)
    [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]
    """
    if B < 3:
        return []
    l = np.ones(B, dtype=np.uint8)
    l[0:2] = 0
    for i in range(math.isqrt(B) + 1):
        if l[i] == 0:
            continue
        l[i * i :: i] = 0
    return [int(_i) for _i in l.nonzero()[0]]


def factor(n: int | flint.fmpz) -> list[tuple[int, int]]:
    """
    Factorization of |n| as sorted (prime, exponent) pairs.

    >>> factor(-360)
    [(2, 3), (3, 2), (5, 1)]
    >>> factor(1)
    []
    """
    assert n != 0
    return sorted((int(l), int(e)) for l, e in flint.fmpz(abs(int(n))).factor())


def product(zs: list[int]) -> int:
    if len(zs) == 0:
        return 1
    elif len(zs) == 1:
        return zs[0]
    else:
        return product(zs[: len(zs) // 2]) * product(zs[len(zs) // 2 :])


def valuation(x: int, p: int) -> int:
    """
    >>> valuation(48, 2), valuation(48, 5)
    (4, 0)
    """
    if x == 0:
        # An approximation of infinity.
        return 0xFFFFFFFF
    v = 0
    while x % p == 0:
        v += 1
        x = x // p
    return v
