"""
recordlens - in-memory employee queries and a small functional toolkit.

This package provides:

- A frozen employee model and a fixed, seeded in-memory record store
- A stateless query engine (filter, project, group, partition, aggregate,
  multi-key sort, compound filters)
- Functional helpers: text pipelines, a discount strategy table, a lazy
  evaluation gate, optional chaining, and age calculation
- A dispatcher and CLI that run one operation at a time with profiling and
  structured logging
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from recordlens.config import Settings, get_settings
from recordlens.dispatcher import QueryOutcome, available_queries, run_query
from recordlens.domain.models import Employee
from recordlens.engine.query_engine import QueryEngine
from recordlens.exceptions import (
    DuplicateRecordError,
    RecordLensError,
    UnknownQueryError,
    WrappedFailure,
)
from recordlens.functional import (
    DiscountTable,
    Option,
    Pipeline,
    apply_function,
    calculate_age,
    calculate_discount,
    heavy_computation,
    robust_optional_demo,
    text_pipeline,
    wrap,
)
from recordlens.infrastructure.record_store import RecordStore, get_default_store
from recordlens.utils.logging import configure_logging, get_logger
from recordlens.utils.profiler import ProfileStats, profile_block, profile_function

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Data
    "Employee",
    "RecordStore",
    "get_default_store",
    # Queries
    "QueryEngine",
    "QueryOutcome",
    "available_queries",
    "run_query",
    # Functional toolkit
    "DiscountTable",
    "Option",
    "Pipeline",
    "apply_function",
    "calculate_age",
    "calculate_discount",
    "heavy_computation",
    "robust_optional_demo",
    "text_pipeline",
    "wrap",
    # Errors
    "RecordLensError",
    "DuplicateRecordError",
    "UnknownQueryError",
    "WrappedFailure",
    # Logging
    "configure_logging",
    "get_logger",
    # Profiling
    "ProfileStats",
    "profile_block",
    "profile_function",
]
