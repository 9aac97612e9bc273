"""Error taxonomy for L-algebra operations.

Every error here is a caller contract violation. None of them is recovered
internally; they propagate straight to the caller.
"""

from __future__ import annotations

from typing import Any


class LAlgebraError(Exception):
    """Base class for all L-algebra errors."""


class InvalidAlgebra(LAlgebraError, ValueError):
    """A table failed validation during a checked construction."""

    def __init__(self, table: Any, message: str | None = None):
        self.table = table
        super().__init__(message or f"{table!r} does not define an L-algebra")


class CrossAlgebraMismatch(LAlgebraError, TypeError):
    """An element operation mixed elements of different algebras."""

    def __init__(self, message: str = "elements not in the same L-algebra"):
        super().__init__(message)


class NotASubset(LAlgebraError, ValueError):
    """A set argument contains elements that do not belong to the algebra."""

    def __init__(self, message: str = "not a subset"):
        super().__init__(message)


class NotAnIdeal(LAlgebraError, ValueError):
    """A set passed where an ideal is required is not an ideal."""


class InvalidAction(LAlgebraError, ValueError):
    """A family of maps is not an action of one L-algebra on another."""

    def __init__(self, message: str, witnesses: tuple = ()):
        self.witnesses = tuple(witnesses)
        super().__init__(message)


class CatalogLookupFailure(LAlgebraError, LookupError):
    """The requested (size, index) pair is not in the catalog."""
