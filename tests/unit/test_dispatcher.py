from __future__ import annotations

import logging
from datetime import date

import pytest

from recordlens import dispatcher
from recordlens.config import get_settings
from recordlens.dispatcher import QuerySpec, describe_queries, resolve_query, run_query
from recordlens.engine.query_engine import QueryEngine
from recordlens.exceptions import UnknownQueryError
from recordlens.functional.lazy import EXPENSIVE_RESULT, SKIPPED
from recordlens.functional.optional import DEFAULT_VALUE
from recordlens.infrastructure.record_store import RecordStore

EXPECTED_TOTAL_SALARY = 385000.0


def test_run_query_returns_result_and_profile(engine: QueryEngine):
    outcome = run_query("calculate_total_salary", engine=engine)
    assert outcome.name == "calculate_total_salary"
    assert outcome.result == EXPECTED_TOTAL_SALARY
    assert outcome.profile is not None
    assert outcome.profile.label == "calculate_total_salary"


def test_run_query_passes_declared_params_only(engine: QueryEngine):
    outcome = run_query("filter_by_department", engine=engine, dept="hr", threshold=1.0)
    assert [e.name for e in outcome.result] == ["Bob", "Eva"]
    assert outcome.params == {"dept": "hr"}


def test_run_query_complex_filter(engine: QueryEngine):
    outcome = run_query(
        "complex_filter",
        engine=engine,
        dept="IT",
        min_salary=70000,
        joined_after=date(2018, 1, 1),
    )
    assert [e.name for e in outcome.result] == ["Alice"]


def test_run_query_defaults_to_seeded_store():
    assert run_query("map_to_names").result[0] == "Alice"


def test_run_query_unknown_name():
    with pytest.raises(UnknownQueryError) as excinfo:
        run_query("drop_table")
    assert "filter_by_department" in str(excinfo.value)
    assert excinfo.value.available == sorted(excinfo.value.available)


def test_run_query_missing_param():
    with pytest.raises(TypeError, match="threshold"):
        run_query("partition_by_salary")


def test_run_query_without_profiling(monkeypatch, engine: QueryEngine):
    monkeypatch.setenv("PROFILE_QUERIES", "false")
    get_settings.cache_clear()
    outcome = run_query("map_to_names", engine=engine)
    assert outcome.profile is None
    assert len(outcome.result) == 6


def test_run_query_logs_and_reraises_failures(monkeypatch, caplog):
    def _boom(engine):
        raise RuntimeError("kaput")

    specs = {"boom": QuerySpec("boom", "always fails", _boom)}
    monkeypatch.setattr(dispatcher, "_query_specs", lambda: specs)

    with caplog.at_level(logging.ERROR, logger="recordlens.dispatcher"):
        with pytest.raises(RuntimeError, match="kaput"):
            run_query("boom", engine=QueryEngine(RecordStore()))

    assert any("[QUERY FAILED] boom" in r.getMessage() for r in caplog.records)


def test_describe_queries_sorted_with_params():
    specs = describe_queries()
    assert [s.name for s in specs] == dispatcher.available_queries()
    assert resolve_query("complex_filter").params == ("dept", "min_salary", "joined_after")


def test_toolkit_feature_runs_through_dispatcher():
    outcome = run_query("text_pipeline", text=" ab ")
    assert outcome.result == "**"
    assert outcome.params == {"text": " ab "}
    assert outcome.profile is not None
    assert outcome.profile.label == "text_pipeline"


def test_toolkit_feature_never_builds_an_engine(monkeypatch):
    def _no_engine(*args, **kwargs):
        raise AssertionError("toolkit features must not construct an engine")

    monkeypatch.setattr(dispatcher, "QueryEngine", _no_engine)
    assert run_query("calculate_discount", code="VIP", price=100.0).result == 50.0


@pytest.mark.parametrize(
    ("name", "params", "expected"),
    [
        ("robust_optional_demo", {}, DEFAULT_VALUE),
        ("robust_optional_demo", {"value": "jane"}, "JANE"),
        ("apply_named_function", {"text": "abc", "mode": "reverse"}, "cba"),
        ("heavy_computation", {"perform": False}, SKIPPED),
        ("heavy_computation", {"perform": True}, EXPENSIVE_RESULT),
        ("calculate_discount", {"code": "BOGUS", "price": 42.5}, 42.5),
    ],
)
def test_toolkit_features_by_name(name, params, expected):
    assert run_query(name, **params).result == expected


def test_toolkit_feature_missing_param():
    with pytest.raises(TypeError, match="mode"):
        run_query("apply_named_function", text="abc")


def test_available_queries_by_kind():
    store_queries = dispatcher.available_queries(uses_engine=True)
    features = dispatcher.available_queries(uses_engine=False)
    assert not set(store_queries) & set(features)
    assert sorted(store_queries + features) == dispatcher.available_queries()
    assert "calculate_age" in features
