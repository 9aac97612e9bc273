"""Cayley table helpers for L-algebra tables: relabelling and isomorphism."""

from __future__ import annotations

from itertools import permutations
from typing import Sequence

import numpy as np

from src.core.algebra import LAlgebra


def unit_column_counts(a: LAlgebra) -> list[int]:
    """For each column ``j``, the number of rows ``i`` with ``i·j`` the unit.

    Equivalently the size of the downset of each element.
    """
    counts = np.count_nonzero(a.table == a.unit_value, axis=0)
    return [int(c) for c in counts]


def relabel(a: LAlgebra, perm: Sequence[int]) -> LAlgebra:
    """Reorder the elements of ``a``.

    ``perm[k]`` (1-based value) is the old element placed at new position
    ``k + 1``. Rows, columns and entries are all relabelled, so the result is
    isomorphic to ``a``.
    """
    n = a.size
    p = np.asarray(perm, dtype=np.int64) - 1
    if sorted(p.tolist()) != list(range(n)):
        raise ValueError(f"{list(perm)} is not a permutation of 1..{n}")
    inverse = np.empty(n, dtype=np.int64)
    inverse[p] = np.arange(n)
    t = a.table - 1
    new = inverse[t[np.ix_(p, p)]] + 1
    return LAlgebra(new)


def _is_isomorphism(t1: np.ndarray, t2: np.ndarray, perm: Sequence[int]) -> bool:
    n = len(perm)
    for x in range(n):
        for y in range(n):
            if perm[t1[x][y]] != t2[perm[x]][perm[y]]:
                return False
    return True


def algebras_are_isomorphic(a: LAlgebra, b: LAlgebra) -> bool:
    """Check if two L-algebras are isomorphic.

    Brute-force search over the ``(n-1)!`` permutations fixing the logical
    units, after comparing downset sizes. Identical tables match at the
    first candidate; a non-isomorphic pair of size above 10 is slow.
    """
    if a.size != b.size:
        return False

    n = a.size
    t1 = (a.table - 1).tolist()
    t2 = (b.table - 1).tolist()
    u1, u2 = a.unit_value - 1, b.unit_value - 1
    if sorted(unit_column_counts(a)) != sorted(unit_column_counts(b)):
        return False

    rest1 = [x for x in range(n) if x != u1]
    rest2 = [x for x in range(n) if x != u2]
    for images in permutations(rest2):
        perm = [0] * n
        perm[u1] = u2
        for x, y in zip(rest1, images):
            perm[x] = y
        if _is_isomorphism(t1, t2, perm):
            return True
    return False
