"""
Query engine over the in-memory record store.

Every operation is a pure function of the store contents and its arguments:
results are fresh lists/dicts, records are never modified, and empty input or
a query that matches nothing yields an empty result rather than an error.

Usage:
    from recordlens.engine import QueryEngine

    engine = QueryEngine()  # defaults to the seeded store
    engine.filter_by_department("it")
    engine.partition_by_salary(60_000)
"""

from __future__ import annotations

import functools
import statistics
from datetime import date
from typing import Any, Callable, Dict, List, Optional, TypeVar

from recordlens.domain.models import Employee
from recordlens.infrastructure.record_store import RecordStore, get_default_store
from recordlens.utils.logging import get_logger

log = get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def _traced(func: F) -> F:
    """Log each query call and the size of what it returned at DEBUG level."""

    @functools.wraps(func)
    def wrapper(self: "QueryEngine", *args: Any, **kwargs: Any) -> Any:
        result = func(self, *args, **kwargs)
        size = len(result) if isinstance(result, (list, dict)) else None
        log.debug(
            f"[QUERY] {func.__name__}",
            extra={"query": func.__name__, "query_args": list(args), "result_size": size},
        )
        return result

    return wrapper  # type: ignore[return-value]


def _same_department(left: str, right: str) -> bool:
    return left.casefold() == right.casefold()


class QueryEngine:
    """
    Stateless query operations bound to one record store.
    """

    def __init__(self, store: Optional[RecordStore] = None) -> None:
        self._store = store if store is not None else get_default_store()

    @property
    def store(self) -> RecordStore:
        return self._store

    @_traced
    def filter_by_department(self, department: str) -> List[Employee]:
        """Employees whose department equals `department`, ignoring case."""
        return [e for e in self._store if _same_department(e.department, department)]

    @_traced
    def map_to_names(self) -> List[str]:
        return [e.name for e in self._store]

    @_traced
    def group_by_department(self) -> Dict[str, List[Employee]]:
        """
        Bucket employees by department.

        Keys appear in the order their department is first seen; each bucket
        keeps the store order of its members.
        """
        groups: Dict[str, List[Employee]] = {}
        for employee in self._store:
            groups.setdefault(employee.department, []).append(employee)
        return groups

    @_traced
    def partition_by_salary(self, threshold: float) -> Dict[bool, List[Employee]]:
        """
        Split employees on ``salary > threshold``.

        Both keys are always present, so callers can index `True` and `False`
        without checking.
        """
        buckets: Dict[bool, List[Employee]] = {False: [], True: []}
        for employee in self._store:
            buckets[employee.salary > threshold].append(employee)
        return buckets

    @_traced
    def calculate_total_salary(self) -> float:
        return float(sum(e.salary for e in self._store))

    @_traced
    def get_all_distinct_projects(self) -> List[str]:
        # dict preserves insertion order, so this keeps first-seen order.
        return list(dict.fromkeys(p for e in self._store for p in e.projects))

    @_traced
    def get_highest_paid_employee(self) -> Optional[Employee]:
        """
        The best-paid employee, or None for an empty store.

        When several employees share the top salary the one that comes first
        in the store wins.
        """
        return max(self._store, key=lambda e: e.salary, default=None)

    @_traced
    def complex_filter(
        self, department: str, min_salary: float, joined_after: date
    ) -> List[Employee]:
        """
        Employees in `department` (ignoring case) earning more than
        `min_salary` who joined strictly after `joined_after`.
        """
        return [
            e
            for e in self._store
            if _same_department(e.department, department)
            and e.salary > min_salary
            and e.joining_date > joined_after
        ]

    @_traced
    def multi_level_sort(self) -> List[Employee]:
        """Department ascending, then salary descending; ties keep store order."""
        return sorted(self._store, key=lambda e: (e.department, -e.salary))

    @_traced
    def get_departments_with_avg_salary_greater_than(self, threshold: float) -> Dict[str, float]:
        averages = {
            department: statistics.fmean(e.salary for e in members)
            for department, members in self.group_by_department().items()
        }
        return {department: avg for department, avg in averages.items() if avg > threshold}


__all__ = ["QueryEngine"]
