"""Elements of a finite L-algebra and set-lifted multiplication."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from src.core.errors import CrossAlgebraMismatch

if TYPE_CHECKING:
    from src.core.algebra import LAlgebra


@dataclass(frozen=True, eq=False)
class Element:
    """The element ``value`` (1-based) of ``algebra``.

    Binary operations require both operands to belong to the same
    ``LAlgebra`` instance; otherwise ``CrossAlgebraMismatch`` is raised.
    The order is ``x <= y`` iff ``x * y`` is the logical unit.
    """

    algebra: LAlgebra
    value: int

    def _check(self, other: Element) -> None:
        if self.algebra is not other.algebra:
            raise CrossAlgebraMismatch()

    def __mul__(self, other: Element) -> Element:
        if not isinstance(other, Element):
            return NotImplemented
        self._check(other)
        res = self.algebra.table[self.value - 1, other.value - 1]
        return Element(self.algebra, int(res))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Element):
            return NotImplemented
        self._check(other)
        return self.value == other.value

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Element):
            return NotImplemented
        self._check(other)
        return self.value != other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __le__(self, other: Element) -> bool:
        if not isinstance(other, Element):
            return NotImplemented
        self._check(other)
        return (self * other).value == self.algebra.unit_value

    def __lt__(self, other: Element) -> bool:
        return self <= other and self != other

    def __ge__(self, other: Element) -> bool:
        if not isinstance(other, Element):
            return NotImplemented
        self._check(other)
        return (other * self).value == self.algebra.unit_value

    def __gt__(self, other: Element) -> bool:
        return self >= other and self != other

    def __repr__(self) -> str:
        return f"Element({self.algebra!r}, {self.value})"


def _owner(elements: Iterable[Element]) -> LAlgebra | None:
    """Return the single algebra shared by ``elements`` (None if empty)."""
    owner = None
    for e in elements:
        if owner is None:
            owner = e.algebra
        elif e.algebra is not owner:
            raise CrossAlgebraMismatch()
    return owner


def product_of_sets(s: Iterable[Element], t: Iterable[Element]) -> frozenset[Element]:
    """Return ``{x*y : x in s, y in t}``."""
    s, t = list(s), list(t)
    _owner(s + t)
    return frozenset(x * y for x in s for y in t)


def right_multiply_set(s: Iterable[Element], x: Element) -> frozenset[Element]:
    """Return ``{y*x : y in s}``."""
    return product_of_sets(s, [x])


def left_multiply_set(x: Element, s: Iterable[Element]) -> frozenset[Element]:
    """Return ``{x*y : y in s}``."""
    return product_of_sets([x], s)


def upset(x: Element) -> list[Element]:
    """All elements ``y`` of ``x``'s algebra with ``y >= x``."""
    return [y for y in x.algebra if y >= x]


def downset(x: Element) -> list[Element]:
    """All elements ``y`` of ``x``'s algebra with ``y <= x``."""
    return [y for y in x.algebra if y <= x]
