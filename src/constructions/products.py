"""Direct and semidirect products of L-algebras.

Pairs are encoded as single elements with the first coordinate as the slow
index: for factors of sizes ``m`` and ``n`` the pair ``(i, j)`` (both
1-based) becomes ``n*(i-1) + j``. Consumers of product tables rely on this
ordering.
"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from src.core.algebra import LAlgebra
from src.core.errors import InvalidAction
from src.substructures.morphisms import is_morphism

log = logging.getLogger(__name__)


def pair_index(i: int, j: int, n: int) -> int:
    """Encode the pair ``(i, j)`` with ``j`` ranging over ``1..n``."""
    return n * (i - 1) + j


def split_index(k: int, n: int) -> tuple[int, int]:
    """Inverse of ``pair_index``."""
    i, j = divmod(k - 1, n)
    return i + 1, j + 1


def trivial_algebra() -> LAlgebra:
    """The one-element L-algebra."""
    return LAlgebra([[1]])


def direct_product(a: LAlgebra, b: LAlgebra) -> LAlgebra:
    """The direct product ``a × b`` with coordinatewise multiplication."""
    if a.size == 1:
        return b
    if b.size == 1:
        return a
    m, n = a.size, b.size
    ta, tb = a.table - 1, b.table - 1
    # Row (i, j), column (k, l) -> (ta[i, k], tb[j, l]), 0-based.
    first = ta[:, None, :, None]
    second = tb[None, :, None, :]
    table = n * first + second + 1
    return LAlgebra(table.reshape(m * n, m * n))


def direct_product_of(*algebras: LAlgebra) -> LAlgebra:
    """Fold ``direct_product`` left to right, starting from the trivial algebra."""
    result = trivial_algebra()
    for a in algebras:
        result = direct_product(result, a)
    return result


def is_action(a: LAlgebra, b: LAlgebra, rho: Sequence[Sequence[int]]) -> bool:
    """Check that ``rho`` is an action of ``a`` on ``b``.

    ``rho[u - 1]`` is the map ``B -> B`` attached to ``u`` in ``a``. Each map
    must be an endomorphism of ``b``, the map at the logical unit of ``a``
    must be the identity, and for all ``u, v`` in ``a`` and ``i`` in ``b``

        rho[u·v](rho[u](i)) = rho[v·u](rho[v](i)).

    Raises ``InvalidAction`` naming the witnesses instead of returning False.
    """
    if len(rho) != a.size:
        raise InvalidAction(
            f"action has {len(rho)} maps, expected {a.size}", (len(rho), a.size),
        )
    for u, f in enumerate(rho, start=1):
        if not is_morphism(list(f), b, b):
            raise InvalidAction(f"map at {u} is not an endomorphism", (u,))

    lu = a.unit_value
    identity = list(range(1, b.size + 1))
    if list(rho[lu - 1]) != identity:
        raise InvalidAction(f"map at the logical unit {lu} is not the identity", (lu,))

    t = a.table
    for u in range(1, a.size + 1):
        for v in range(1, a.size + 1):
            uv, vu = int(t[u - 1, v - 1]), int(t[v - 1, u - 1])
            for i in range(1, b.size + 1):
                x = rho[u - 1][i - 1]
                y = rho[v - 1][i - 1]
                if rho[uv - 1][x - 1] != rho[vu - 1][y - 1]:
                    raise InvalidAction(
                        f"coherence fails for u={u}, v={v} at {i}", (u, v, i),
                    )
    return True


def semidirect_product(a: LAlgebra, b: LAlgebra, rho: Sequence[Sequence[int]]) -> LAlgebra:
    """The semidirect product of ``a`` and ``b`` for an action of ``b`` on ``a``.

    ``rho`` has one map ``a -> a`` per element of ``b``. On pairs ``(x, u)``
    with ``x`` in ``a`` and ``u`` in ``b``:

        (x, u)·(y, v) = (rho[u·v](x)·rho[v·u](y), u·v)

    With every map the identity this is ``direct_product(a, b)``.
    """
    is_action(b, a, rho)
    m, n = a.size, b.size
    r = np.asarray(rho, dtype=np.int64) - 1
    ta, tb = a.table - 1, b.table - 1
    table = np.empty((m * n, m * n), dtype=np.int64)
    for x in range(m):
        for u in range(n):
            row = n * x + u
            for y in range(m):
                for v in range(n):
                    uv, vu = tb[u, v], tb[v, u]
                    first = ta[r[uv, x], r[vu, y]]
                    second = uv
                    table[row, n * y + v] = n * first + second + 1
    log.debug("semidirect product of sizes %d and %d", m, n)
    return LAlgebra(table)
