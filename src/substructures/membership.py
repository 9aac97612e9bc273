"""Membership tests for subalgebras, invariant sets, ideals and prime ideals."""

from __future__ import annotations

from typing import Iterable

from src.core.algebra import LAlgebra
from src.core.element import Element
from src.core.errors import NotASubset

# Clause (iii) of the ideal axioms: y·x and y·(x·y) must both lie in the set
# ("and", Rump's definition) or at least one of them ("or", kept for tables
# computed with the older rule).
IDEAL_VARIANTS = ("and", "or")


def _as_subset(s: Iterable[Element], a: LAlgebra) -> frozenset[Element]:
    s = list(s)
    for x in s:
        if x not in a:
            raise NotASubset(f"{x!r} is not an element of {a!r}")
    return frozenset(s)


def _check_variant(variant: str) -> None:
    if variant not in IDEAL_VARIANTS:
        raise ValueError(f"unknown ideal variant {variant!r}, expected one of {IDEAL_VARIANTS}")


def is_subalgebra(s: Iterable[Element], a: LAlgebra) -> bool:
    """Contains the logical unit and is closed under multiplication."""
    s = _as_subset(s, a)
    if a.logical_unit() not in s:
        return False
    for x in s:
        for y in s:
            if x * y not in s:
                return False
    return True


def is_invariant(s: Iterable[Element], a: LAlgebra) -> bool:
    """``x·y`` lies in ``s`` for every ``x`` in ``a`` and ``y`` in ``s``."""
    s = _as_subset(s, a)
    for x in a:
        for y in s:
            if x * y not in s:
                return False
    return True


def is_ideal(s: Iterable[Element], a: LAlgebra, variant: str = "and") -> bool:
    """Check the ideal axioms for ``s``.

    ``s`` must contain the logical unit and, for all ``x`` in ``s`` and
    ``y`` in ``a``:

    1. ``x·y`` in ``s`` implies ``y`` in ``s``;
    2. ``(x·y)·y`` is in ``s``;
    3. ``y·x`` and ``y·(x·y)`` are in ``s`` (``variant="or"``: either one).
    """
    _check_variant(variant)
    s = _as_subset(s, a)
    if a.logical_unit() not in s:
        return False
    for x in s:
        for y in a:
            xy = x * y
            if xy in s and y not in s:
                return False
            if xy * y not in s:
                return False
            left, twisted = y * x in s, y * xy in s
            if variant == "and" and not (left and twisted):
                return False
            if variant == "or" and not (left or twisted):
                return False
    return True


def is_prime_ideal(p: Iterable[Element], a: LAlgebra, variant: str = "and") -> bool:
    """A proper ideal ``p`` such that ``I·p ⊆ p`` for every ideal ``I ⊄ p``."""
    from src.substructures.closure import ideal_product, ideals

    p = _as_subset(p, a)
    if not is_ideal(p, a, variant) or len(p) == a.size:
        return False
    for i in ideals(a, variant):
        if i <= p:
            continue
        if not ideal_product(i, p, variant) <= p:
            return False
    return True
