"""Z3-based enumeration of finite L-algebras.

Uses Z3's SMT solver to search for multiplication tables satisfying the
L-algebra axioms. This is how a catalog can be (re)built for small sizes
without a precomputed database.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from src.core.algebra import LAlgebra
from src.models.cayley import algebras_are_isomorphic

try:
    import z3
    Z3_AVAILABLE = True
except ImportError:
    Z3_AVAILABLE = False

log = logging.getLogger(__name__)


@dataclass
class FinderResult:
    """Result from an L-algebra search at one size."""

    size: int
    tables: list[list[list[int]]]
    timed_out: bool = False
    error: str = ""


@dataclass
class LAlgebraSpectrum:
    """Number of L-algebras found per size."""

    spectrum: dict[int, int] = field(default_factory=dict)
    tables_by_size: dict[int, list[list[list[int]]]] = field(default_factory=dict)
    timed_out_sizes: list[int] = field(default_factory=list)

    def sizes_with_models(self) -> list[int]:
        return sorted(k for k, v in self.spectrum.items() if v > 0)

    def total_models(self) -> int:
        return sum(self.spectrum.values())

    def any_timed_out(self) -> bool:
        return len(self.timed_out_sizes) > 0

    def __repr__(self) -> str:
        return f"Spectrum({dict(sorted(self.spectrum.items()))})"


class Z3LAlgebraFinder:
    """Find L-algebra tables of a given size using Z3.

    The logical unit is fixed to the last element, which is where
    ``normal_form`` puts it, so every table found has ``M[1,1] = n``.
    """

    def __init__(self, timeout_ms: int = 30000):
        self.timeout_ms = timeout_ms

    def is_available(self) -> bool:
        return Z3_AVAILABLE

    def find_tables(
        self,
        n: int,
        max_models: int | None = None,
        dedupe: bool = False,
    ) -> FinderResult:
        """Enumerate L-algebra tables of size ``n`` (1-based entries).

        ``max_models=None`` enumerates until the search space is exhausted.
        With ``dedupe=True`` tables isomorphic to an earlier one are dropped.
        """
        if not Z3_AVAILABLE:
            return FinderResult(size=n, tables=[], error="z3-solver not installed")
        if n < 1:
            raise ValueError(f"size must be positive, got {n}")

        solver = z3.Solver()
        solver.set("timeout", self.timeout_ms)
        u = n - 1

        # 0-based table. Entries forced by the unit axioms are constants;
        # everything else is a bounded integer variable.
        free: list[z3.ArithRef] = []
        table: list[list] = []
        for i in range(n):
            row = []
            for j in range(n):
                if i == u:
                    row.append(z3.IntVal(j))
                elif j == u or i == j:
                    row.append(z3.IntVal(u))
                else:
                    v = z3.Int(f"m_{i}_{j}")
                    solver.add(v >= 0, v < n)
                    free.append(v)
                    row.append(v)
            table.append(row)

        for i in range(n):
            for j in range(i + 1, n):
                solver.add(z3.Not(z3.And(table[i][j] == u, table[j][i] == u)))

        for i in range(n):
            for j in range(i + 1, n):
                for k in range(n):
                    lhs = self._z3_lookup_2d(table, table[i][j], table[i][k], n)
                    rhs = self._z3_lookup_2d(table, table[j][i], table[j][k], n)
                    solver.add(lhs == rhs)

        tables: list[list[list[int]]] = []
        kept: list[LAlgebra] = []
        timed_out = False
        while max_models is None or len(tables) < max_models:
            result = solver.check()
            if result == z3.unknown:
                timed_out = True
                break
            if result != z3.sat:
                break

            model = solver.model()
            found = [
                [model.evaluate(table[i][j], model_completion=True).as_long() + 1 for j in range(n)]
                for i in range(n)
            ]
            candidate = LAlgebra(found)
            if not (dedupe and any(algebras_are_isomorphic(candidate, b) for b in kept)):
                tables.append(found)
                kept.append(candidate)
                log.debug("found L-algebra %d of size %d", len(tables), n)

            if not free:
                break
            # Block this model to find the next one
            solver.add(z3.Or([v != model.evaluate(v, model_completion=True) for v in free]))

        return FinderResult(size=n, tables=tables, timed_out=timed_out)

    def compute_spectrum(
        self,
        min_size: int = 1,
        max_size: int = 4,
        max_models_per_size: int | None = None,
        dedupe: bool = True,
    ) -> LAlgebraSpectrum:
        spectrum = LAlgebraSpectrum()
        for size in range(min_size, max_size + 1):
            result = self.find_tables(size, max_models_per_size, dedupe)
            spectrum.spectrum[size] = len(result.tables)
            spectrum.tables_by_size[size] = result.tables
            if result.timed_out:
                spectrum.timed_out_sizes.append(size)
        return spectrum

    def _z3_lookup_1d(self, row: list, idx, n: int):
        """Build a Z3 If-Then-Else chain for 1D table lookup."""
        if isinstance(idx, int):
            return row[idx]
        result = row[n - 1]
        for i in range(n - 2, -1, -1):
            result = z3.If(idx == i, row[i], result)
        return result

    def _z3_lookup_2d(self, table: list[list], row_idx, col_idx, n: int):
        """Build a Z3 If-Then-Else chain for 2D table lookup."""
        row_idx = _concrete(row_idx)
        col_idx = _concrete(col_idx)
        if isinstance(row_idx, int):
            return self._z3_lookup_1d(table[row_idx], col_idx, n)

        row_results = [self._z3_lookup_1d(table[i], col_idx, n) for i in range(n)]
        result = row_results[n - 1]
        for i in range(n - 2, -1, -1):
            result = z3.If(row_idx == i, row_results[i], result)
        return result


def _concrete(expr):
    """Turn a Z3 integer literal into a Python int; leave variables alone."""
    if isinstance(expr, int):
        return expr
    if z3.is_int_value(expr):
        return expr.as_long()
    return expr
