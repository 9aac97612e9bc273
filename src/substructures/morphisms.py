"""Morphisms between finite L-algebras.

A map ``f: a -> b`` is a sequence of 1-based images, ``f[x - 1]`` being the
image of element ``x``.
"""

from __future__ import annotations

import logging
from itertools import permutations, product
from typing import Sequence

from src.core.algebra import LAlgebra

log = logging.getLogger(__name__)


def is_morphism(f: Sequence[int], a: LAlgebra, b: LAlgebra) -> bool:
    """Check that ``f`` maps ``a`` into ``b`` and ``f(x·y) = f(x)·f(y)``."""
    if len(f) != a.size:
        return False
    if any(not 1 <= v <= b.size for v in f):
        return False
    ta, tb = a.table, b.table
    n = a.size
    for x in range(n):
        for y in range(n):
            if f[ta[x, y] - 1] != tb[f[x] - 1, f[y] - 1]:
                return False
    return True


def endomorphisms(a: LAlgebra) -> list[tuple[int, ...]]:
    """All endomorphisms of ``a``.

    Candidates fix the last element (the logical unit of a table in normal
    form) and range over all ``n^(n-1)`` choices for the other images, so this
    is exponential in ``n``.
    """
    n = a.size
    found = []
    for images in product(range(1, n + 1), repeat=n - 1):
        f = images + (n,)
        if is_morphism(f, a, a):
            found.append(f)
    log.debug("%d endomorphisms out of %d candidates", len(found), n ** (n - 1))
    return found


def automorphisms(a: LAlgebra) -> list[tuple[int, ...]]:
    """The bijective endomorphisms of ``a``, identity first.

    Candidates are the ``(n-1)!`` permutations fixing the logical unit, which
    every automorphism does, so the unit need not be the last element.
    """
    n, lu = a.size, a.unit_value
    rest = [v for v in range(1, n + 1) if v != lu]
    found = []
    for images in permutations(rest):
        f = [0] * n
        f[lu - 1] = lu
        for x, y in zip(rest, images):
            f[x - 1] = y
        if is_morphism(f, a, a):
            found.append(tuple(f))
    log.debug("%d automorphisms", len(found))
    return found
