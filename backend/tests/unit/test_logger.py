"""Unit tests for the logging utility."""

from __future__ import annotations

import json
import logging

from bloggy.api.deps import timing
from bloggy.core.logger import JSONFormatter, configure_logging


def test_configure_logging_sets_level() -> None:
    """``configure_logging`` should set the root logger level."""

    # Act
    configure_logging("DEBUG")

    # Assert
    assert logging.getLogger().level == logging.DEBUG
    configure_logging("INFO")


def test_json_formatter_includes_access_fields() -> None:
    """Access-log extras are promoted to top-level JSON keys."""

    record = logging.LogRecord("bloggy.access", logging.INFO, __file__, 1, "GET /api", None, None)
    record.method = "GET"
    record.status = 200
    record.request_id = "req-1"

    payload = json.loads(JSONFormatter().format(record))

    assert payload["message"] == "GET /api"
    assert payload["method"] == "GET"
    assert payload["status"] == 200
    assert payload["request_id"] == "req-1"


def test_timing_logs_endpoint_and_elapsed(app, caplog) -> None:
    """Handler timing records carry the endpoint through the JSON formatter."""

    @timing
    def handler():
        return "ok"

    caplog.set_level(logging.DEBUG, logger=app.logger.name)
    with app.test_request_context("/api/health"):
        assert handler() == "ok"

    record = next(r for r in caplog.records if r.getMessage() == "request.elapsed")
    payload = json.loads(JSONFormatter().format(record))

    assert payload["endpoint"] == "health.healthcheck"
    assert payload["elapsed_ms"] >= 0
