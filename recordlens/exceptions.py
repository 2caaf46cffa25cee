"""
Exception hierarchy for recordlens.

Absent results (no match, unknown discount code, empty store) and reporting
strings (future or malformed birth dates) are values, not errors. The types
below cover the remaining failure modes: bad construction input and lookups
of operations that do not exist.
"""

from __future__ import annotations

from typing import Iterable


class RecordLensError(Exception):
    """Base exception for all recordlens errors."""


class DuplicateRecordError(RecordLensError, ValueError):
    """Raised when a record store is seeded with a repeated identifier."""

    def __init__(self, record_id: int) -> None:
        super().__init__(f"Duplicate record id {record_id}")
        self.record_id = record_id


class UnknownQueryError(RecordLensError, ValueError):
    """Raised when the dispatcher is asked for an operation it does not know."""

    def __init__(self, name: str, available: Iterable[str]) -> None:
        self.name = name
        self.available = sorted(available)
        super().__init__(f"Unknown query '{name}'. Available: {', '.join(self.available)}")


class WrappedFailure(RecordLensError, RuntimeError):
    """Uniform failure raised by functions adapted with `functional.checked.wrap`."""


__all__ = [
    "RecordLensError",
    "DuplicateRecordError",
    "UnknownQueryError",
    "WrappedFailure",
]
