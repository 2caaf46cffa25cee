"""
Adapter giving fallible functions a uniform failure type.
"""

from __future__ import annotations

import functools
from typing import Callable, TypeVar

from recordlens.exceptions import WrappedFailure

T = TypeVar("T")
R = TypeVar("R")


def wrap(func: Callable[[T], R]) -> Callable[[T], R]:
    """
    Return `func` with any `Exception` it raises re-raised as `WrappedFailure`.

    The original exception is kept as `__cause__`.
    """

    @functools.wraps(func)
    def wrapper(value: T) -> R:
        try:
            return func(value)
        except Exception as exc:
            raise WrappedFailure(str(exc) or type(exc).__name__) from exc

    return wrapper


__all__ = ["wrap"]
