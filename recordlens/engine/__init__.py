"""
Engine package for recordlens.

Re-exports the query engine so downstream code can import from
`recordlens.engine` directly.
"""

from recordlens.engine.query_engine import QueryEngine

__all__ = ["QueryEngine"]
