from datetime import date
from time import sleep

import pytest
from pydantic import ValidationError

from recordlens import config
from recordlens.dispatcher import available_queries
from recordlens.domain.models import Employee
from recordlens.exceptions import DuplicateRecordError
from recordlens.infrastructure.record_store import RecordStore, get_default_store
from recordlens.utils import profiler

EXPECTED_SEED_SIZE = 6
EXPECTED_QUERY_COUNT = 16
EXPECTED_STORE_QUERY_COUNT = 10


def test_get_settings_defaults(monkeypatch):
    for name in ("APP_ENV", "LOG_LEVEL", "LOG_JSON", "HEAVY_COMPUTATION_DELAY_MS", "PROFILE_QUERIES"):
        monkeypatch.delenv(name, raising=False)
    settings = config.Settings(_env_file=None)
    assert settings.app_env == "development"
    assert settings.log_level == "INFO"
    assert settings.log_json is False
    assert settings.heavy_computation_delay_ms == 500
    assert settings.heavy_computation_delay_seconds == 0.5
    assert settings.profile_queries is True


def test_get_settings_reads_environment(monkeypatch):
    monkeypatch.setenv("HEAVY_COMPUTATION_DELAY_MS", "25")
    monkeypatch.setenv("PROFILE_QUERIES", "false")
    config.get_settings.cache_clear()
    settings = config.get_settings()
    assert settings.heavy_computation_delay_ms == 25
    assert settings.profile_queries is False


def test_get_settings_is_cached():
    assert config.get_settings() is config.get_settings()


def test_profile_block_measures_time():
    with profiler.profile_block("sleep") as stats:
        sleep(0.05)
    assert stats.duration_seconds >= 0.05
    assert stats.peak_rss_bytes is None or stats.peak_rss_bytes > 0
    if stats.cpu_percent is not None:
        assert isinstance(stats.cpu_percent, float)


def test_profile_function_returns_result_and_stats():
    @profiler.profile_function("adder")
    def add(a, b):
        return a + b

    result, stats = add(2, 3)
    assert result == 5
    assert stats.label == "adder"
    assert stats.as_dict()["label"] == "adder"


def test_available_queries_contains_known_entries():
    names = available_queries()
    assert "filter_by_department" in names
    assert "multi_level_sort" in names
    assert names == sorted(names)
    assert len(names) == EXPECTED_QUERY_COUNT
    assert len(available_queries(uses_engine=True)) == EXPECTED_STORE_QUERY_COUNT
    assert "text_pipeline" in available_queries(uses_engine=False)
    assert "text_pipeline" not in available_queries(uses_engine=True)


def test_seeded_store_holds_seed_set(seeded_store):
    assert len(seeded_store) == EXPECTED_SEED_SIZE
    assert [e.id for e in seeded_store] == [1, 2, 3, 4, 5, 6]
    assert seeded_store[0].name == "Alice"
    assert isinstance(seeded_store.records, tuple)


def test_default_store_is_shared():
    assert get_default_store() is get_default_store()


def test_store_rejects_duplicate_ids(make_employee):
    first = make_employee(id=1)
    second = make_employee(id=1, name="Other")
    with pytest.raises(DuplicateRecordError) as excinfo:
        RecordStore([first, second])
    assert excinfo.value.record_id == 1
    assert isinstance(excinfo.value, ValueError)


def test_empty_store_is_valid():
    store = RecordStore()
    assert len(store) == 0
    assert list(store) == []


def test_employee_is_frozen(seeded_store):
    with pytest.raises(ValidationError):
        seeded_store[0].salary = 1.0


def test_employee_rejects_negative_salary_and_blank_name():
    with pytest.raises(ValidationError):
        Employee(id=1, name="X", department="IT", salary=-1, joining_date=date(2020, 1, 1))
    with pytest.raises(ValidationError):
        Employee(id=1, name="   ", department="IT", salary=1, joining_date=date(2020, 1, 1))


def test_employee_accepts_camel_case_alias_and_list_projects():
    employee = Employee(
        id=9,
        name="Zed",
        department="Ops",
        salary=10,
        joiningDate="2022-02-02",
        projects=["One", "Two"],
    )
    assert employee.joining_date == date(2022, 2, 2)
    assert employee.projects == ("One", "Two")
