"""Shared error types for gtn_manager.

Search misses are not errors (they return empty lists); these cover records
that cannot be built at all.
"""

from __future__ import annotations


class GtnError(Exception):
    """Base error for gtn_manager."""


class UnknownItemKindError(GtnError, ValueError):
    """Type tag is not a known variant, or belongs to another family."""


class RecordParseError(GtnError, ValueError):
    """A line of the record file could not be turned into a record."""

    def __init__(self, message: str, *, line_no: int | None = None) -> None:
        self.line_no = line_no
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)
