"""Parallel property profiling via ProcessPoolExecutor.

Property predicates are independent brute-force scans over immutable
tables, so a batch of algebras can be sharded across worker processes
without coordination.

Usage:
    from src.solvers.parallel import parallel_property_profiles

    tables = [catalog.fetch(5, k) for k in range(1, catalog.count(5) + 1)]
    profiles = parallel_property_profiles(tables, max_workers=8)
"""

from __future__ import annotations

import os
from concurrent.futures import ProcessPoolExecutor
from typing import Any


# ── Worker function (top-level for pickling) ─────────────────────────

def _profile_worker(table: Any) -> dict[str, bool]:
    """Compute the property profile of one table in a worker process."""
    from src.core.algebra import LAlgebra
    from src.properties.oracle import property_profile

    return property_profile(LAlgebra(table))


# ── Public API ───────────────────────────────────────────────────────

def parallel_property_profiles(
    tables: list[Any],
    max_workers: int | None = None,
) -> list[dict[str, bool]]:
    """Compute property profiles in parallel.

    Args:
        tables: Multiplication tables (nested lists or ``LAlgebra.table``).
        max_workers: Maximum number of worker processes.
            Defaults to min(len(tables), os.cpu_count() or 4).
            Pass 1 to force sequential execution.

    Returns:
        Profiles in the same order as ``tables``.
    """
    if not tables:
        return []

    if max_workers is None:
        max_workers = min(len(tables), os.cpu_count() or 4)
    max_workers = max(1, max_workers)

    # Sequential fast path: single item or single worker
    if max_workers == 1 or len(tables) == 1:
        return [_profile_worker(t) for t in tables]

    with ProcessPoolExecutor(max_workers=max_workers) as executor:
        results = list(executor.map(_profile_worker, tables))

    return results
