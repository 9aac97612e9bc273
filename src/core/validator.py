"""Validation of L-algebra multiplication tables.

A table ``M`` (1-based entries) defines an L-algebra when, with
``lu = M[1,1]`` as the candidate logical unit,

- ``lu·j = j``, ``j·lu = lu`` and ``j·j = lu`` for every ``j``,
- no two distinct elements are both below each other
  (``M[i,j] = M[j,i] = lu`` forces ``i = j``),
- ``(i·j)·(i·k) = (j·i)·(j·k)`` for all ``i, j, k``.

The last identity is symmetric in ``i, j`` so only ``j > i`` is scanned.
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np

from src.core.errors import InvalidAlgebra

log = logging.getLogger(__name__)


def _as_int_matrix(table: Any) -> np.ndarray | None:
    """Return ``table`` as a 2-D int64 array, or None if it is not one."""
    if isinstance(table, np.ndarray):
        if not np.issubdtype(table.dtype, np.integer):
            return None
        arr = table
    else:
        try:
            rows = [list(row) for row in table]
        except TypeError:
            return None
        for row in rows:
            for v in row:
                if isinstance(v, bool) or not isinstance(v, (int, np.integer)):
                    return None
        try:
            arr = np.array(rows, dtype=np.int64)
        except ValueError:
            # ragged rows
            return None
    if arr.ndim != 2:
        return None
    return arr.astype(np.int64, copy=False)


def check_l_algebra(table: Any) -> bool:
    """Check if ``table`` is the multiplication table of an L-algebra.

    >>> check_l_algebra([[2, 2], [1, 2]])
    True
    >>> check_l_algebra([[1, 2], [1, 2]])
    False
    """
    m = _as_int_matrix(table)
    if m is None:
        return False
    n, cols = m.shape
    if n != cols or n == 0:
        return False
    if m.min() < 1 or m.max() > n:
        return False

    # Switch to 0-based indices for the scans below.
    t = m - 1
    lu = int(t[0, 0])

    for j in range(n):
        if t[lu, j] != j or t[j, lu] != lu or t[j, j] != lu:
            log.debug("logical unit axioms fail at %d (unit %d)", j + 1, lu + 1)
            return False
        for i in range(j + 1, n):
            if t[i, j] == lu and t[j, i] == lu:
                log.debug("elements %d and %d are below each other", i + 1, j + 1)
                return False

    for i in range(n):
        for j in range(i + 1, n):
            ij, ji = t[i, j], t[j, i]
            for k in range(n):
                if t[ij, t[i, k]] != t[ji, t[j, k]]:
                    log.debug("L-identity fails at (%d, %d, %d)", i + 1, j + 1, k + 1)
                    return False
    return True


def coerce_table(table: Any) -> np.ndarray:
    """Coerce ``table`` to a read-only square int64 array.

    Raises ``InvalidAlgebra`` when the input is not a square integer matrix.
    Entry ranges and axioms are not checked here.
    """
    m = _as_int_matrix(table)
    if m is None or m.shape[0] != m.shape[1] or m.shape[0] == 0:
        raise InvalidAlgebra(table, f"{table!r} is not a square integer matrix")
    arr = np.array(m, dtype=np.int64, copy=True)
    arr.flags.writeable = False
    return arr
