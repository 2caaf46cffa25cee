"""
Age calculation with reporting-string results.

`calculate_age` never raises: a birth date in the future and text that is not
an ISO date each produce their own message.
"""

from __future__ import annotations

import calendar
import re
from datetime import date
from typing import NamedTuple, Optional

from recordlens.utils.logging import get_logger

log = get_logger(__name__)

FUTURE_DATE_MESSAGE = "Birth date cannot be in the future"
INVALID_FORMAT_MESSAGE = "Invalid date format. Use YYYY-MM-DD"

_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")


class Period(NamedTuple):
    years: int
    months: int
    days: int


def _add_months(start: date, months: int) -> date:
    """Shift by whole months, clamping the day to the target month's length."""
    month_index = start.year * 12 + (start.month - 1) + months
    year, month = divmod(month_index, 12)
    day = min(start.day, calendar.monthrange(year, month + 1)[1])
    return date(year, month + 1, day)


def period_between(start: date, end: date) -> Period:
    """
    Calendar period from `start` to `end` (end >= start).

    Whole months are counted first; the remainder is counted in days from
    `start` shifted by those months.
    """
    total_months = (end.year - start.year) * 12 + (end.month - start.month)
    days = end.day - start.day
    if total_months > 0 and days < 0:
        total_months -= 1
        days = (end - _add_months(start, total_months)).days
    years, months = divmod(total_months, 12)
    return Period(years, months, days)


def calculate_age(birth_date: str, today: Optional[date] = None) -> str:
    current = today or date.today()
    try:
        if not _ISO_DATE.fullmatch(birth_date):
            raise ValueError(f"not an ISO date: {birth_date!r}")
        born = date.fromisoformat(birth_date)
    except (TypeError, ValueError):
        log.debug("[AGE] unparseable birth date", extra={"birth_date": birth_date})
        return INVALID_FORMAT_MESSAGE

    if born > current:
        return FUTURE_DATE_MESSAGE

    period = period_between(born, current)
    return f"Age is {period.years} years, {period.months} months, and {period.days} days"


__all__ = [
    "FUTURE_DATE_MESSAGE",
    "INVALID_FORMAT_MESSAGE",
    "Period",
    "calculate_age",
    "period_between",
]
