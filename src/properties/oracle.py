"""Structural properties of finite L-algebras.

Every predicate is a universally quantified condition checked by brute force
over all elements, so the cost is ``O(n^k)`` for ``k`` quantified variables
(``n^4`` for ``is_abelian``). This is fine for the catalogued sizes (up to 8).
"""

from __future__ import annotations

import logging
from typing import Callable

from src.core.algebra import LAlgebra
from src.core.element import Element

log = logging.getLogger(__name__)


def is_sharp(a: LAlgebra) -> bool:
    """x·y = x·(x·y)."""
    for x in a:
        for y in a:
            if x * y != x * (x * y):
                return False
    return True


def is_symmetric(a: LAlgebra) -> bool:
    """x·y = y implies y·x = x."""
    for x in a:
        for y in a:
            if x * y == y and y * x != x:
                return False
    return True


def is_abelian(a: LAlgebra) -> bool:
    """(x·y)·(z·t) = (x·z)·(y·t)."""
    for x in a:
        for y in a:
            for z in a:
                for t in a:
                    if (x * y) * (z * t) != (x * z) * (y * t):
                        return False
    return True


def is_linear(a: LAlgebra) -> bool:
    """Any two elements are comparable."""
    for x in a:
        for y in a:
            if not (x <= y or x >= y):
                return False
    return True


def is_discrete(a: LAlgebra) -> bool:
    """x < y implies y is the logical unit."""
    lu = a.logical_unit()
    for x in a:
        for y in a:
            if x <= y and x != y and y != lu:
                return False
    return True


def is_semiregular(a: LAlgebra) -> bool:
    """((x·y)·z)·((y·x)·z) = ((x·y)·z)·z."""
    for x in a:
        for y in a:
            for z in a:
                if ((x * y) * z) * ((y * x) * z) != ((x * y) * z) * z:
                    return False
    return True


def is_regular(a: LAlgebra) -> bool:
    """Semiregular, and every x <= y has some z with z·x = y."""
    if not is_semiregular(a):
        return False
    elems = a.elements()
    for x in elems:
        for y in elems:
            if x <= y and not any(z * x == y for z in elems):
                return False
    return True


def is_hilbert(a: LAlgebra) -> bool:
    """x·(y·z) = (x·y)·(x·z)."""
    for x in a:
        for y in a:
            for z in a:
                if x * (y * z) != (x * y) * (x * z):
                    return False
    return True


def is_dual_bck(a: LAlgebra) -> bool:
    """x·(y·z) = (y·x)·z."""
    for x in a:
        for y in a:
            for z in a:
                if x * (y * z) != (y * x) * z:
                    return False
    return True


def is_kl(a: LAlgebra) -> bool:
    """x <= y·x."""
    for x in a:
        for y in a:
            if not x <= y * x:
                return False
    return True


def is_cl(a: LAlgebra) -> bool:
    """(x·(y·z))·(y·(x·z)) is the logical unit."""
    lu = a.logical_unit()
    for x in a:
        for y in a:
            for z in a:
                if (x * (y * z)) * (y * (x * z)) != lu:
                    return False
    return True


def is_prime_element(p: Element) -> bool:
    """p is not the unit, and every x satisfies x <= p or x·p = p."""
    a = p.algebra
    if p == a.logical_unit():
        return False
    for x in a:
        if not (x <= p or x * p == p):
            return False
    return True


def prime_elements(a: LAlgebra) -> list[Element]:
    return [x for x in a if is_prime_element(x)]


def is_prime(a: LAlgebra) -> bool:
    """Every element other than the logical unit is prime."""
    lu = a.logical_unit()
    for x in a:
        if x != lu and not is_prime_element(x):
            return False
    return True


PROPERTIES: dict[str, Callable[[LAlgebra], bool]] = {
    "sharp": is_sharp,
    "symmetric": is_symmetric,
    "abelian": is_abelian,
    "linear": is_linear,
    "discrete": is_discrete,
    "semiregular": is_semiregular,
    "regular": is_regular,
    "hilbert": is_hilbert,
    "dualBCK": is_dual_bck,
    "KL": is_kl,
    "CL": is_cl,
    "prime": is_prime,
}


def property_profile(a: LAlgebra) -> dict[str, bool]:
    """Evaluate every registered property of ``a``."""
    profile = {name: check(a) for name, check in PROPERTIES.items()}
    log.debug("profile of size-%d algebra: %s", a.size, profile)
    return profile
