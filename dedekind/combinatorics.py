"""
Partitions of integers.

Partitions are listed as non-decreasing lists of parts. The part pool
variant is used to enumerate ideals of a given norm: each pool entry
is the residue class degree of a prime ideal, and a partition is a
multiset of prime ideals whose norms multiply to p^n.
"""

from typing import Callable, Iterator


def _partitions_sized(
    n: int, x: int, predicate: Callable[[int], bool], first: int
) -> Iterator[list[int]]:
    if n < x:
        return
    if n == 0 and x == 0:
        # The empty partition of 0
        yield []
        return
    if n == 0 or x == 0:
        return
    if x == 1:
        if first <= n and predicate(n):
            yield [n]
        return
    for k in range(first, n + 1):
        if not predicate(k):
            continue
        for rest in _partitions_sized(n - k, x - 1, predicate, k):
            yield [k] + rest


def num_partitions_sized_predicated(
    n: int, x: int, predicate: Callable[[int], bool]
) -> Iterator[list[int]]:
    """
    Partitions of n into exactly x nonzero parts satisfying the predicate.

    >>> list(num_partitions_sized_predicated(6, 2, lambda k: k % 2 == 1))
    [[1, 5], [3, 3]]
    >>> list(num_partitions_sized_predicated(6, 3, lambda k: k <= 3))
    [[1, 2, 3], [2, 2, 2]]
    """
    return _partitions_sized(n, x, predicate, 1)


def num_partitions_sized_zero_predicated(
    n: int, x: int, predicate: Callable[[int], bool]
) -> Iterator[list[int]]:
    """
    Partitions of n into exactly x parts satisfying the predicate,
    where parts may be zero.

    >>> list(num_partitions_sized_zero_predicated(6, 3, lambda k: k <= 3))
    [[0, 3, 3], [1, 2, 3], [2, 2, 2]]
    """
    for part in _partitions_sized(n + x, x, lambda k: predicate(k - 1), 1):
        yield [k - 1 for k in part]


def num_partitions_predicated(
    n: int, predicate: Callable[[int], bool]
) -> Iterator[list[int]]:
    """
    >>> list(num_partitions_predicated(6, lambda k: k % 2 == 1))
    [[1, 5], [3, 3], [1, 1, 1, 3], [1, 1, 1, 1, 1, 1]]
    """
    for x in range(1, n + 1):
        yield from num_partitions_sized_predicated(n, x, predicate)


def num_partitions_sized(n: int, x: int) -> Iterator[list[int]]:
    """
    >>> list(num_partitions_sized(8, 3))
    [[1, 1, 6], [1, 2, 5], [1, 3, 4], [2, 2, 4], [2, 3, 3]]
    """
    return num_partitions_sized_predicated(n, x, lambda _: True)


def num_partitions_sized_zero(n: int, x: int) -> Iterator[list[int]]:
    """
    >>> list(num_partitions_sized_zero(4, 3))
    [[0, 0, 4], [0, 1, 3], [0, 2, 2], [1, 1, 2]]
    """
    return num_partitions_sized_zero_predicated(n, x, lambda _: True)


def num_partitions(n: int) -> Iterator[list[int]]:
    """
    >>> list(num_partitions(4))
    [[4], [1, 3], [2, 2], [1, 1, 2], [1, 1, 1, 1]]
    """
    return num_partitions_predicated(n, lambda _: True)


def num_partitions_part_pool(n: int, pool: list[int]) -> Iterator[list[int]]:
    """
    Ways of writing n as a sum of entries of pool (each entry may be
    used several times). Results are non-decreasing lists of indices
    into pool.

    >>> list(num_partitions_part_pool(4, [1, 2]))
    [[0, 0, 0, 0], [0, 0, 1], [1, 1]]
    >>> list(num_partitions_part_pool(3, [2, 2]))
    []
    >>> list(num_partitions_part_pool(0, [1, 1]))
    [[]]
    """
    assert all(part > 0 for part in pool)

    def rec(m: int, start: int):
        if m == 0:
            yield []
            return
        for i in range(start, len(pool)):
            if pool[i] > m:
                continue
            for rest in rec(m - pool[i], i):
                yield [i] + rest

    return rec(n, 0)
