"""
Pytest configuration for recordlens.

Provides fixtures for:
- Seeded and empty record stores / engines
- Settings and logging isolation between tests
- Small hand-built employee sets for edge cases
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Generator

import pytest

from recordlens.config import get_settings
from recordlens.domain.models import Employee
from recordlens.engine.query_engine import QueryEngine
from recordlens.infrastructure.record_store import RecordStore


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """
    Keep tests independent of the caller's environment and of each other.

    Logs stay quiet so CLI output is only what the command prints, and the
    lazy demo does not actually sleep.
    """
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.setenv("HEAVY_COMPUTATION_DELAY_MS", "0")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Generator[None, None, None]:
    """
    Undo `configure_logging` calls made by CLI and logging tests.

    CliRunner streams are closed once a command returns, so handlers bound to
    them must not outlive the test.
    """
    def _owned_by_pytest(handler: logging.Handler) -> bool:
        return type(handler).__module__.startswith("_pytest")

    root = logging.getLogger()
    baseline = [h for h in root.handlers if not _owned_by_pytest(h)]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if not _owned_by_pytest(handler) and handler not in baseline:
            root.removeHandler(handler)
    for handler in baseline:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture(scope="session")
def seeded_store() -> RecordStore:
    return RecordStore.seeded()


@pytest.fixture
def engine(seeded_store: RecordStore) -> QueryEngine:
    return QueryEngine(seeded_store)


@pytest.fixture
def empty_engine() -> QueryEngine:
    return QueryEngine(RecordStore())


@pytest.fixture
def make_employee() -> Callable[..., Employee]:
    """
    Factory for employees with sensible defaults; override any field by keyword.
    """
    counter = {"next_id": 100}

    def _make(**overrides) -> Employee:
        counter["next_id"] += 1
        fields = {
            "id": counter["next_id"],
            "name": f"Employee {counter['next_id']}",
            "department": "IT",
            "salary": 50_000,
            "joining_date": date(2020, 1, 1),
            "projects": (),
        }
        fields.update(overrides)
        return Employee(**fields)

    return _make
