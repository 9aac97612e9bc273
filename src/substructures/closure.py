"""Generated substructures, the ideal lattice and the prime spectrum.

``subalgebra_generated_by`` and ``ideal_generated_by`` are fixpoint
closures: the generated set ``T`` only grows and is bounded by the carrier,
so both terminate after at most ``n`` rounds. ``ideals`` and ``subalgebras``
enumerate the whole power set (``2^n`` candidates) and are meant for small
algebras only.
"""

from __future__ import annotations

import logging
from itertools import combinations
from typing import Iterable

from src.core.algebra import LAlgebra
from src.core.element import (
    Element, _owner, left_multiply_set, product_of_sets, right_multiply_set,
)
from src.core.errors import NotAnIdeal
from src.substructures.membership import (
    _as_subset, _check_variant, is_ideal, is_prime_ideal, is_subalgebra,
)

log = logging.getLogger(__name__)


def subalgebra_generated_by(s: Iterable[Element], a: LAlgebra) -> frozenset[Element]:
    """The smallest subalgebra of ``a`` containing ``s``."""
    s = set(_as_subset(s, a))
    t = {a.logical_unit()}
    rounds = 0
    while s:
        t |= s
        s = (product_of_sets(t, s) | product_of_sets(s, t)) - t
        rounds += 1
    log.debug("subalgebra closure reached %d elements in %d rounds", len(t), rounds)
    return frozenset(t)


def ideal_generated_by(s: Iterable[Element] | Element, a: LAlgebra) -> frozenset[Element]:
    """The ideal of ``a`` generated by ``s`` (a set of elements or one element).

    Each round adds, for the current frontier ``S``, the elements
    ``(x·y)·y``, ``y·(y·x)`` and ``y·x`` for ``x`` in ``S`` and all ``y``,
    then every ``y`` with some ``x·y`` already in the enlarged frontier.
    """
    if isinstance(s, Element):
        s = [s]
    s = set(_as_subset(s, a))
    t = {a.logical_unit()}
    elems = a.elements()
    rounds = 0
    while s:
        t |= s
        s1 = set(s)
        for y in elems:
            s1 |= right_multiply_set(right_multiply_set(s, y), y)
            s1 |= left_multiply_set(y, left_multiply_set(y, s))
        s = s1 | product_of_sets(elems, s)
        for x in list(s):
            for y in [z for z in elems if z not in s]:
                if x * y in s:
                    s.add(y)
        s -= t
        rounds += 1
    log.debug("ideal closure reached %d elements in %d rounds", len(t), rounds)
    return frozenset(t)


def ideal_product(
    i: Iterable[Element], j: Iterable[Element], variant: str = "and",
) -> frozenset[Element]:
    """Return ``{x : ⟨x⟩ ∩ i ⊆ j}`` for ideals ``i`` and ``j`` of one algebra."""
    i, j = list(i), list(j)
    if not i or not j:
        raise ValueError("ideal product of an empty set")
    a = _owner(i + j)
    if not is_ideal(i, a, variant):
        raise NotAnIdeal(f"{sorted(x.value for x in i)} is not an ideal")
    if not is_ideal(j, a, variant):
        raise NotAnIdeal(f"{sorted(x.value for x in j)} is not an ideal")
    i, j = frozenset(i), frozenset(j)
    return frozenset(x for x in a if ideal_generated_by(x, a) & i <= j)


def _subsets(a: LAlgebra):
    elems = a.elements()
    for k in range(len(elems) + 1):
        for combo in combinations(elems, k):
            yield frozenset(combo)


def ideals(a: LAlgebra, variant: str = "and") -> list[frozenset[Element]]:
    """All ideals of ``a``, by increasing size. Enumerates all ``2^n`` subsets."""
    _check_variant(variant)
    found = [s for s in _subsets(a) if is_ideal(s, a, variant)]
    log.debug("%d ideals in size-%d algebra", len(found), a.size)
    return found


def subalgebras(a: LAlgebra) -> list[frozenset[Element]]:
    """All subalgebras of ``a``, by increasing size. Enumerates all ``2^n`` subsets."""
    return [s for s in _subsets(a) if is_subalgebra(s, a)]


def prime_spectrum(a: LAlgebra, variant: str = "and") -> list[frozenset[Element]]:
    """The prime ideals of ``a``."""
    return [p for p in ideals(a, variant) if is_prime_ideal(p, a, variant)]


spec = prime_spectrum
