"""
Infrastructure package for recordlens.

Holds the in-memory record store the query engine reads from.
"""

from recordlens.infrastructure.record_store import RecordStore, get_default_store

__all__ = [
    "RecordStore",
    "get_default_store",
]
