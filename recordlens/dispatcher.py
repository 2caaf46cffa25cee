"""
Named registry of query and toolkit operations, run one at a time under the profiler.

Usage (example from CLI):
    from recordlens.dispatcher import run_query

    outcome = run_query("partition_by_salary", threshold=60_000)
    print(outcome.result[True])

Each call resolves the operation by name, checks that the required parameters
are present, executes it (queries against the engine, toolkit features on
their own), and logs the outcome. Failures are
logged with their traceback and re-raised.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

from recordlens.config import get_settings
from recordlens.engine.query_engine import QueryEngine
from recordlens.exceptions import UnknownQueryError
from recordlens.functional.age import calculate_age
from recordlens.functional.discounts import calculate_discount
from recordlens.functional.lazy import expensive_operation, heavy_computation
from recordlens.functional.optional import robust_optional_demo
from recordlens.functional.pipeline import apply_named_function, text_pipeline
from recordlens.utils.logging import get_logger
from recordlens.utils.profiler import ProfileStats, profile_block

log = get_logger(__name__)


@dataclass(frozen=True)
class QuerySpec:
    """
    A registered operation.

    Attributes
    ----------
    name : str
        Machine-friendly identifier used on the command line.
    description : str
        Human-friendly summary.
    params : tuple[str, ...]
        Keyword arguments the operation requires.
    optional : tuple[str, ...]
        Keyword arguments passed on even when None.
    uses_engine : bool
        Queries are invoked as ``runner(engine, **params)``; toolkit
        features as ``runner(**params)``.
    """

    name: str
    description: str
    runner: Callable[..., Any]
    params: Tuple[str, ...] = ()
    optional: Tuple[str, ...] = ()
    uses_engine: bool = True


@dataclass
class QueryOutcome:
    name: str
    result: Any
    params: Dict[str, Any] = field(default_factory=dict)
    profile: Optional[ProfileStats] = None


def _query_specs() -> Dict[str, QuerySpec]:
    """Registry of available queries and toolkit features."""
    specs = [
        QuerySpec(
            "filter_by_department",
            "Employees in a department (case-insensitive).",
            lambda engine, dept: engine.filter_by_department(dept),
            ("dept",),
        ),
        QuerySpec(
            "map_to_names",
            "Employee names in store order.",
            lambda engine: engine.map_to_names(),
        ),
        QuerySpec(
            "group_by_department",
            "Employees bucketed by department.",
            lambda engine: engine.group_by_department(),
        ),
        QuerySpec(
            "partition_by_salary",
            "Employees split on salary > threshold.",
            lambda engine, threshold: engine.partition_by_salary(threshold),
            ("threshold",),
        ),
        QuerySpec(
            "calculate_total_salary",
            "Sum of all salaries.",
            lambda engine: engine.calculate_total_salary(),
        ),
        QuerySpec(
            "get_all_distinct_projects",
            "Every project once, in first-seen order.",
            lambda engine: engine.get_all_distinct_projects(),
        ),
        QuerySpec(
            "get_highest_paid_employee",
            "Best-paid employee (first on ties).",
            lambda engine: engine.get_highest_paid_employee(),
        ),
        QuerySpec(
            "complex_filter",
            "Department, salary > min_salary, and joined after a date.",
            lambda engine, dept, min_salary, joined_after: engine.complex_filter(
                dept, min_salary, joined_after
            ),
            ("dept", "min_salary", "joined_after"),
        ),
        QuerySpec(
            "multi_level_sort",
            "Department ascending, salary descending.",
            lambda engine: engine.multi_level_sort(),
        ),
        QuerySpec(
            "get_departments_with_avg_salary_greater_than",
            "Departments whose mean salary exceeds threshold.",
            lambda engine, threshold: engine.get_departments_with_avg_salary_greater_than(threshold),
            ("threshold",),
        ),
        QuerySpec(
            "robust_optional_demo",
            "Uppercase a value and keep it only if it starts with J.",
            lambda value: robust_optional_demo(value),
            optional=("value",),
            uses_engine=False,
        ),
        QuerySpec(
            "calculate_age",
            "Years, months, and days since a birth date.",
            lambda birth_date: calculate_age(birth_date),
            ("birth_date",),
            uses_engine=False,
        ),
        QuerySpec(
            "apply_named_function",
            "Apply a named text transform (reverse, upper).",
            lambda text, mode: apply_named_function(text, mode),
            ("text", "mode"),
            uses_engine=False,
        ),
        QuerySpec(
            "text_pipeline",
            "Trim, uppercase, then mask text.",
            lambda text: text_pipeline(text),
            ("text",),
            uses_engine=False,
        ),
        QuerySpec(
            "calculate_discount",
            "Apply a discount code to a price.",
            lambda code, price: calculate_discount(code, price),
            ("code", "price"),
            uses_engine=False,
        ),
        QuerySpec(
            "heavy_computation",
            "Run the slow computation only when perform is true.",
            lambda perform: heavy_computation(perform, expensive_operation()),
            ("perform",),
            uses_engine=False,
        ),
    ]
    return {spec.name: spec for spec in specs}


def available_queries(uses_engine: Optional[bool] = None) -> List[str]:
    """
    List registered operation names.

    Pass `uses_engine=True` for store queries only, False for toolkit features.
    """
    specs = _query_specs()
    return sorted(
        name for name, spec in specs.items() if uses_engine is None or spec.uses_engine is uses_engine
    )


def describe_queries() -> List[QuerySpec]:
    specs = _query_specs()
    return [specs[name] for name in sorted(specs)]


def resolve_query(name: str) -> QuerySpec:
    specs = _query_specs()
    if name not in specs:
        raise UnknownQueryError(name, specs)
    return specs[name]


def _execute(spec: QuerySpec, engine: Optional[QueryEngine], params: Dict[str, Any]) -> Any:
    log.info(f"[QUERY START] {spec.name}", extra={"query": spec.name})
    try:
        result = spec.runner(engine, **params) if spec.uses_engine else spec.runner(**params)
    except Exception:
        log.exception(f"[QUERY FAILED] {spec.name}", extra={"query": spec.name})
        raise
    log.info(f"[QUERY SUCCESS] {spec.name}", extra={"query": spec.name})
    return result


def run_query(name: str, engine: Optional[QueryEngine] = None, **params: Any) -> QueryOutcome:
    """
    Run one registered query or toolkit feature.

    Parameters
    ----------
    name : str
        Registered query name (see `available_queries`).
    engine : QueryEngine | None
        Engine to run against. Defaults to one bound to the seeded store.
    **params
        Operation arguments; only the ones the operation declares are passed on.

    Raises
    ------
    UnknownQueryError
        If `name` is not registered.
    TypeError
        If a required parameter is missing.
    """
    spec = resolve_query(name)
    missing = [p for p in spec.params if params.get(p) is None]
    if missing:
        raise TypeError(f"Query '{name}' requires: {', '.join(missing)}")
    call_params = {p: params[p] for p in spec.params}
    call_params.update({p: params.get(p) for p in spec.optional})
    if spec.uses_engine:
        engine = engine or QueryEngine()

    if not get_settings().profile_queries:
        return QueryOutcome(name=name, result=_execute(spec, engine, call_params), params=call_params)

    with profile_block(name) as stats:
        result = _execute(spec, engine, call_params)
    log.info(
        f"[QUERY PROFILE] {name}",
        extra={"query": name, "duration_seconds": round(stats.duration_seconds, 4)},
    )
    return QueryOutcome(name=name, result=result, params=call_params, profile=stats)


__all__ = [
    "QueryOutcome",
    "QuerySpec",
    "available_queries",
    "describe_queries",
    "resolve_query",
    "run_query",
]
