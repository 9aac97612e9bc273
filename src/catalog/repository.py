"""Algebra catalog: file-based storage of enumerated small L-algebras.

Layout under the base path::

    LA<n>/counts.json          {"counts": [c_1, c_2, ...]}
    LA<n>/LA<n>_<i>.jsonl      one JSON table per line (c_i lines)
    LA<n>/LA<n>_<i>.jsonl.bz2  same, bz2-compressed

Algebras of size ``n`` are numbered ``1..sum(counts)`` across the chunks in
order. Sizes 1 and 2 have exactly one L-algebra each and are answered
without touching the disk.
"""

from __future__ import annotations

import bz2
import json
import logging
import re
from bisect import bisect_left
from itertools import accumulate, islice
from pathlib import Path
from typing import Any, Iterable

from src.core.algebra import LAlgebra
from src.core.errors import CatalogLookupFailure

log = logging.getLogger(__name__)

_TRIVIAL = {
    1: [[1]],
    2: [[2, 2], [1, 2]],
}


class AlgebraCatalog:
    """Looks up L-algebras by ``(size, index)`` in a catalog directory."""

    def __init__(self, base_path: Path | str):
        self.base_path = Path(base_path)

    def _size_dir(self, n: int) -> Path:
        return self.base_path / f"LA{n}"

    def _chunk_path(self, n: int, i: int) -> Path:
        plain = self._size_dir(n) / f"LA{n}_{i}.jsonl"
        if plain.exists():
            return plain
        packed = plain.with_name(plain.name + ".bz2")
        if packed.exists():
            return packed
        raise CatalogLookupFailure(f"chunk {i} of L-algebras of size {n} is missing")

    def _counts(self, n: int) -> list[int]:
        if n < 1:
            raise CatalogLookupFailure(f"there are no L-algebras of size {n}")
        counts_file = self._size_dir(n) / "counts.json"
        if not counts_file.exists():
            raise CatalogLookupFailure(f"L-algebras of size {n} not implemented")
        try:
            data = json.loads(counts_file.read_text())
        except json.JSONDecodeError as e:
            raise CatalogLookupFailure(f"corrupt counts file {counts_file}: {e}") from e
        try:
            return [int(c) for c in data["counts"]]
        except (KeyError, TypeError, ValueError) as e:
            raise CatalogLookupFailure(f"corrupt counts file {counts_file}: no counts list") from e

    def sizes(self) -> list[int]:
        """Sizes with a catalog directory, plus the built-in sizes 1 and 2."""
        found = set(_TRIVIAL)
        if self.base_path.exists():
            for d in self.base_path.iterdir():
                m = re.fullmatch(r"LA(\d+)", d.name)
                if m and (d / "counts.json").exists():
                    found.add(int(m.group(1)))
        return sorted(found)

    def count(self, n: int) -> int:
        """Number of catalogued L-algebras of size ``n``."""
        if n in _TRIVIAL:
            return 1
        return sum(self._counts(n))

    def fetch(self, n: int, k: int) -> list[list[int]]:
        """The multiplication table of the ``k``-th (1-based) L-algebra of size ``n``."""
        if n in _TRIVIAL:
            if k != 1:
                raise CatalogLookupFailure(f"there is only 1 L-algebra of size {n}")
            return [list(row) for row in _TRIVIAL[n]]

        cumulative = list(accumulate(self._counts(n)))
        total = cumulative[-1] if cumulative else 0
        if k < 1 or k > total:
            raise CatalogLookupFailure(f"there are only {total} L-algebras of size {n}")

        chunk = bisect_left(cumulative, k)  # first chunk whose running total reaches k
        prev = cumulative[chunk - 1] if chunk > 0 else 0
        path = self._chunk_path(n, chunk + 1)
        log.debug("reading L-algebra %d of size %d from %s", k, n, path.name)

        opener = bz2.open if path.suffix == ".bz2" else open
        with opener(path, "rt") as f:
            line = next(islice(f, k - prev - 1, None), None)
        if line is None:
            raise CatalogLookupFailure(f"{path} holds fewer algebras than its count says")
        return json.loads(line)

    def load(self, n: int, k: int, check: bool = False) -> LAlgebra:
        return LAlgebra(self.fetch(n, k), check=check)

    def store(
        self,
        n: int,
        tables: Iterable[Any],
        chunk_size: int = 1000,
        compress: bool = False,
    ) -> Path:
        """Write ``tables`` as the catalog for size ``n``, replacing any existing one.

        Returns the size directory.
        """
        size_dir = self._size_dir(n)
        size_dir.mkdir(parents=True, exist_ok=True)
        for old in size_dir.glob(f"LA{n}_*.jsonl*"):
            old.unlink()

        rows = [_table_to_list(t) for t in tables]
        counts = []
        for start in range(0, len(rows), chunk_size):
            chunk = rows[start:start + chunk_size]
            i = len(counts) + 1
            text = "".join(json.dumps(t) + "\n" for t in chunk)
            path = size_dir / f"LA{n}_{i}.jsonl"
            if compress:
                path.with_name(path.name + ".bz2").write_bytes(bz2.compress(text.encode()))
            else:
                path.write_text(text)
            counts.append(len(chunk))

        (size_dir / "counts.json").write_text(json.dumps({"counts": counts}, indent=2))
        log.debug("stored %d L-algebras of size %d in %d chunk(s)", len(rows), n, len(counts))
        return size_dir


def _table_to_list(table: Any) -> list[list[int]]:
    if isinstance(table, LAlgebra):
        return table.to_list()
    return [[int(v) for v in row] for row in table]


def small_l_algebra(n: int, k: int, catalog: AlgebraCatalog) -> LAlgebra:
    """The ``k``-th L-algebra of size ``n`` from ``catalog``."""
    return catalog.load(n, k)


def number_of_l_algebras(n: int, catalog: AlgebraCatalog) -> int:
    return catalog.count(n)
