"""
Functional toolkit for recordlens.

Re-exports the composable pipelines, the discount strategy table, the lazy
gate, optional chaining, and the age calculator so downstream code can import
from `recordlens.functional` directly.
"""

from recordlens.functional.abstract import Deferred, PricingRule, Transform
from recordlens.functional.age import calculate_age, period_between
from recordlens.functional.checked import wrap
from recordlens.functional.discounts import DiscountTable, calculate_discount
from recordlens.functional.lazy import expensive_operation, heavy_computation
from recordlens.functional.optional import Option, robust_optional_demo
from recordlens.functional.pipeline import (
    Pipeline,
    apply_function,
    apply_named_function,
    text_pipeline,
)

__all__ = [
    # Contracts
    "Deferred",
    "PricingRule",
    "Transform",
    # Pipelines
    "Pipeline",
    "apply_function",
    "apply_named_function",
    "text_pipeline",
    # Strategy table
    "DiscountTable",
    "calculate_discount",
    # Lazy gate
    "expensive_operation",
    "heavy_computation",
    # Optional chaining
    "Option",
    "robust_optional_demo",
    "calculate_age",
    "period_between",
    # Failure wrapping
    "wrap",
]
