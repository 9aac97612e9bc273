"""Finite L-algebras given by their multiplication table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

import numpy as np

from src.core.element import Element
from src.core.errors import InvalidAlgebra
from src.core.validator import check_l_algebra, coerce_table


@dataclass(frozen=True, eq=False)
class LAlgebra:
    """The L-algebra with elements ``{1,…,n}`` and ``i·j = table[i][j]``.

    The table is 1-based: entries lie in ``1..n`` and row/column ``i``
    (counting from 1) holds the products of element ``i``. With
    ``check=True`` the table is validated first and ``InvalidAlgebra`` is
    raised if it does not define an L-algebra. Without it the table is
    trusted as given.

    Instances are immutable and the stored array is read-only. Two algebras
    are equal iff their tables are identical (not iff they are isomorphic).

    >>> a = LAlgebra([[2, 2], [1, 2]])
    >>> a.logical_unit()
    Element(LAlgebra([[2, 2], [1, 2]]), 2)
    """

    table: np.ndarray

    def __init__(self, table: Any, check: bool = False):
        if check and not check_l_algebra(table):
            raise InvalidAlgebra(table)
        object.__setattr__(self, "table", coerce_table(table))

    @property
    def size(self) -> int:
        return int(self.table.shape[0])

    @property
    def unit_value(self) -> int:
        return int(self.table[0, 0])

    def logical_unit(self) -> Element:
        """The element ``u`` with ``x·x = x·u = u`` and ``u·x = x`` for all ``x``."""
        return Element(self, self.unit_value)

    def elements(self) -> list[Element]:
        """All elements, in the order ``1..n``."""
        return [Element(self, v) for v in range(1, self.size + 1)]

    def element(self, value: int) -> Element:
        if not 1 <= value <= self.size:
            raise ValueError(f"{value} is not an element of an L-algebra of size {self.size}")
        return Element(self, value)

    def random_element(self, rng: np.random.Generator | None = None) -> Element:
        """A uniformly sampled element. Pass ``rng`` for reproducible draws."""
        if rng is None:
            rng = np.random.default_rng()
        return Element(self, int(rng.integers(1, self.size + 1)))

    def to_list(self) -> list[list[int]]:
        return self.table.tolist()

    def __iter__(self) -> Iterator[Element]:
        return iter(self.elements())

    def __len__(self) -> int:
        return self.size

    def __contains__(self, x: object) -> bool:
        return isinstance(x, Element) and x.algebra is self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LAlgebra):
            return NotImplemented
        return np.array_equal(self.table, other.table)

    def __hash__(self) -> int:
        return hash((self.table.shape, self.table.tobytes()))

    def __reduce__(self):
        return (LAlgebra, (self.to_list(),))

    def __repr__(self) -> str:
        return f"LAlgebra({self.to_list()})"


def elements(a: LAlgebra) -> list[Element]:
    return a.elements()


def logical_unit(a: LAlgebra) -> Element:
    return a.logical_unit()


def random_element(a: LAlgebra, rng: np.random.Generator | None = None) -> Element:
    return a.random_element(rng)
