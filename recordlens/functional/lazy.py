"""
Lazy evaluation gate.

`heavy_computation` runs a deferred computation only when asked to; a closed
gate returns a fixed sentinel and never calls the computation. Results are not
cached, so every open-gate call pays the full cost again.
"""

from __future__ import annotations

import time
from typing import Optional

from recordlens.config import get_settings
from recordlens.functional.abstract import Deferred
from recordlens.utils.logging import get_logger

log = get_logger(__name__)

SKIPPED = "Skipped"
EXPENSIVE_RESULT = "Expensive Result Computed!"


def heavy_computation(perform: bool, expensive_operation: Deferred[str]) -> str:
    if not perform:
        log.debug("[LAZY] gate closed, computation skipped")
        return SKIPPED
    return expensive_operation()


def expensive_operation(delay_seconds: Optional[float] = None) -> Deferred[str]:
    """
    Build a deferred computation that sleeps before returning its result.

    Parameters
    ----------
    delay_seconds : float | None
        How long the computation takes. Defaults to the configured
        HEAVY_COMPUTATION_DELAY_MS.
    """
    delay = get_settings().heavy_computation_delay_seconds if delay_seconds is None else delay_seconds

    def compute() -> str:
        log.info("[LAZY] running expensive computation", extra={"delay_seconds": delay})
        time.sleep(delay)
        return EXPENSIVE_RESULT

    return compute


__all__ = ["EXPENSIVE_RESULT", "SKIPPED", "expensive_operation", "heavy_computation"]
