"""Error taxonomy for collection-level operations.

Each error also derives from the builtin a generic caller would expect, so
``except ValueError`` / ``except TypeError`` handlers keep working.
"""

from __future__ import annotations


class UnitGraphError(Exception):
    """Base class for every error raised by unitgraph."""


class CardinalityMismatchError(UnitGraphError, ValueError):
    """A value sequence does not line up with the members it addresses."""

    def __init__(self, message: str, *, expected: int | None = None, actual: int | None = None) -> None:
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class InvalidTargetError(UnitGraphError, TypeError):
    """A connect/disconnect target is neither a Collection nor a unit."""


class MissingConfigurationError(UnitGraphError, TypeError):
    """A required method or configuration record was not supplied."""


__all__ = [
    "UnitGraphError",
    "CardinalityMismatchError",
    "InvalidTargetError",
    "MissingConfigurationError",
]
