from __future__ import annotations

import json
import logging
from datetime import date

from recordlens.utils.logging import JsonFormatter, _json_formatter, configure_logging, get_logger

EXPECTED_RESULT_SIZE = 6
EXPECTED_THRESHOLD = 60000


def _record(msg: str = "hello") -> logging.LogRecord:
    return logging.LogRecord(
        name="test.logger",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


def test_json_formatter_promotes_standard_extra_fields() -> None:
    record = _record()
    record.result_size = EXPECTED_RESULT_SIZE
    record.query = "map_to_names"

    payload = json.loads(_json_formatter(record))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "test.logger"
    assert payload["message"] == "hello"
    assert payload["result_size"] == EXPECTED_RESULT_SIZE
    assert payload["query"] == "map_to_names"
    assert "lineno" not in payload


def test_json_formatter_supports_legacy_nested_extra_field() -> None:
    record = _record()
    record.extra = {"threshold": EXPECTED_THRESHOLD}

    payload = json.loads(_json_formatter(record))

    assert payload["threshold"] == EXPECTED_THRESHOLD


def test_json_formatter_serializes_dates_as_text() -> None:
    record = _record()
    record.joined_after = date(2018, 1, 1)

    payload = json.loads(JsonFormatter().format(record))

    assert payload["joined_after"] == "2018-01-01"


def test_configure_logging_sets_root_level() -> None:
    configure_logging(level="debug")
    assert logging.getLogger().level == logging.DEBUG
    configure_logging(level="WARNING", json_logs=True)
    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert isinstance(root.handlers[0].formatter, JsonFormatter)


def test_configure_logging_without_force_keeps_existing_setup() -> None:
    configure_logging(level="ERROR")
    configure_logging(level="DEBUG", force=False)
    assert logging.getLogger().level == logging.ERROR


def test_get_logger_returns_named_logger() -> None:
    assert get_logger("recordlens.test").name == "recordlens.test"
    assert get_logger() is logging.getLogger()
