from __future__ import annotations


class InvalidMoveError(ValueError):
    """Raised when a checker is dropped into a full or non-existent column."""


class ContractViolation(AssertionError):
    """
    A caller broke an API contract (undoing an empty column, searching a
    finished game). Never caught inside the package.
    """
