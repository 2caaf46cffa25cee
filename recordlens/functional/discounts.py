"""
Discount codes as a strategy table.

Each code maps to a pricing rule. The table is built once at import time and
exposed read-only; a code that is not in the table leaves the price unchanged.
Codes are matched exactly, so "vip" is not "VIP".
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

from recordlens.functional.abstract import PricingRule


def _percent_off(percent: int) -> PricingRule:
    factor = (100 - percent) / 100

    def rule(price: float) -> float:
        return price * factor

    rule.__name__ = f"percent_off_{percent}"
    return rule


def _identity(price: float) -> float:
    return price


DEFAULT_RULES: Mapping[str, PricingRule] = MappingProxyType(
    {
        "XMAS": _percent_off(10),
        "NEWYEAR": _percent_off(20),
        "VIP": _percent_off(50),
    }
)


class DiscountTable:
    """
    Immutable code -> pricing rule lookup with identity fallback.
    """

    __slots__ = ("_rules",)

    def __init__(self, rules: Optional[Mapping[str, PricingRule]] = None) -> None:
        source = DEFAULT_RULES if rules is None else rules
        self._rules: Mapping[str, PricingRule] = MappingProxyType(dict(source))

    @property
    def rules(self) -> Mapping[str, PricingRule]:
        return self._rules

    def codes(self) -> list[str]:
        return sorted(self._rules)

    def rule_for(self, code: str) -> PricingRule:
        return self._rules.get(code, _identity)

    def apply(self, code: str, price: float) -> float:
        return self.rule_for(code)(price)


_DEFAULT_TABLE = DiscountTable()


def calculate_discount(code: str, price: float, table: Optional[DiscountTable] = None) -> float:
    """
    Price after applying the rule registered for `code`.

    Unknown codes return `price` unchanged.
    """
    return (table or _DEFAULT_TABLE).apply(code, price)


__all__ = ["DEFAULT_RULES", "DiscountTable", "calculate_discount"]
