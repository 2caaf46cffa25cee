"""
Callable contracts shared by the functional toolkit.

Text transforms, pricing rules, and deferred computations are plain callables;
the protocols below only name their shapes so signatures stay readable.
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class Transform(Protocol):
    """A single-argument text transform, e.g. `str.strip`."""

    def __call__(self, text: str) -> str: ...


@runtime_checkable
class PricingRule(Protocol):
    """Maps a price to a discounted price."""

    def __call__(self, price: float) -> float: ...


@runtime_checkable
class Deferred(Protocol[T_co]):
    """A zero-argument computation whose cost is paid only when called."""

    def __call__(self) -> T_co: ...


__all__ = ["Transform", "PricingRule", "Deferred"]
