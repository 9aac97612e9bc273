"""Normal form: a canonical reordering of the elements of an L-algebra.

Elements are sorted by how many rows hit the logical unit in their column
(the size of their downset), ties keeping the original order. The logical
unit, whose column is all units, ends up last.

This is a best-effort representative: isomorphic algebras normalise to the
same table only when the downset sizes already pin down the isomorphism.
Use ``src.models.cayley.algebras_are_isomorphic`` for an exact test.
"""

from __future__ import annotations

from src.core.algebra import LAlgebra
from src.models.cayley import relabel, unit_column_counts


def normal_form_permutation(a: LAlgebra) -> list[int]:
    """Old element values, in their normal-form order."""
    counts = unit_column_counts(a)
    return sorted(range(1, a.size + 1), key=lambda v: counts[v - 1])


def normal_form(a: LAlgebra) -> LAlgebra:
    return relabel(a, normal_form_permutation(a))
