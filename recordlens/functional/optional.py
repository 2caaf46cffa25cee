"""
Null-safe value chaining.

`Option` is a tagged present/absent value. `map` and `filter` only run on a
present value; a filter that rejects the value turns it absent, and `or_else`
resolves an absent value to a fallback.

Usage:
    Option.of(name).map(str.upper).filter(lambda s: s.startswith("J")).or_else("?")
"""

from __future__ import annotations

from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")

DEFAULT_VALUE = "Default Value (Input was null or didn't start with J)"
REQUIRED_PREFIX = "J"


class Option(Generic[T]):
    __slots__ = ("_value", "_present")

    def __init__(self, value: Optional[T], present: bool) -> None:
        self._value = value
        self._present = present

    @classmethod
    def of(cls, value: Optional[T]) -> "Option[T]":
        """Wrap `value`; None becomes absent."""
        return cls(value, value is not None)

    @classmethod
    def empty(cls) -> "Option[T]":
        return cls(None, False)

    @property
    def is_present(self) -> bool:
        return self._present

    def map(self, func: Callable[[T], Optional[U]]) -> "Option[U]":
        if not self._present:
            return Option.empty()
        return Option.of(func(self._value))  # type: ignore[arg-type]

    def filter(self, predicate: Callable[[T], bool]) -> "Option[T]":
        if self._present and predicate(self._value):  # type: ignore[arg-type]
            return self
        return Option.empty()

    def or_else(self, default: T) -> T:
        return self._value if self._present else default  # type: ignore[return-value]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        return (self._present, self._value) == (other._present, other._value)

    def __hash__(self) -> int:
        return hash((self._present, self._value))

    def __repr__(self) -> str:
        return f"Option({self._value!r})" if self._present else "Option.empty()"


def robust_optional_demo(value: Optional[str]) -> str:
    """
    Uppercase `value` and keep it if it then starts with "J".

    None, or a value that does not pass the check, gives `DEFAULT_VALUE`.
    """
    return (
        Option.of(value)
        .map(str.upper)
        .filter(lambda s: s.startswith(REQUIRED_PREFIX))
        .or_else(DEFAULT_VALUE)
    )


__all__ = ["DEFAULT_VALUE", "Option", "robust_optional_demo"]
