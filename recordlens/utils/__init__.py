"""
Utilities package for recordlens.

Exports shared helpers for logging, profiling, and other cross-cutting concerns.
Keep this package lightweight and free of domain-specific logic.
"""

from recordlens.utils.logging import configure_logging, get_logger
from recordlens.utils.profiler import ProfileStats, profile_block, profile_function

__all__ = [
    "configure_logging",
    "get_logger",
    "ProfileStats",
    "profile_block",
    "profile_function",
]
