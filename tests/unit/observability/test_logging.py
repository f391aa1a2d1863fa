"""Unit tests for structured logging and correlation."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import pytest
import structlog
from structlog.testing import capture_logs

from car_inventory.observability.correlation import CorrelationContext, RequestContext
from car_inventory.observability.logging import CorrelationProcessor, JsonLoggerFactory, get_logger


@pytest.fixture(autouse=True)
def _reset() -> Iterator[None]:
    CorrelationContext.clear()
    yield
    CorrelationContext.clear()
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()


# ---------------------------------------------------------------------------
# CorrelationContext
# ---------------------------------------------------------------------------


class TestCorrelationContext:
    def test_empty_by_default(self) -> None:
        assert CorrelationContext.get() is None

    def test_set_get_clear(self) -> None:
        ctx = RequestContext(correlation_id="abc")
        CorrelationContext.set(ctx)
        assert CorrelationContext.get() is ctx
        CorrelationContext.clear()
        assert CorrelationContext.get() is None

    def test_new_generates_distinct_ids(self) -> None:
        assert RequestContext.new().correlation_id != RequestContext.new().correlation_id


# ---------------------------------------------------------------------------
# CorrelationProcessor
# ---------------------------------------------------------------------------


class TestCorrelationProcessor:
    def test_injects_correlation_id(self) -> None:
        CorrelationContext.set(RequestContext(correlation_id="cid-1"))
        event = CorrelationProcessor()(None, "info", {"event": "x"})
        assert event["correlation_id"] == "cid-1"

    def test_explicit_value_kept(self) -> None:
        CorrelationContext.set(RequestContext(correlation_id="cid-1"))
        event = CorrelationProcessor()(None, "info", {"event": "x", "correlation_id": "mine"})
        assert event["correlation_id"] == "mine"

    def test_no_context_no_field(self) -> None:
        assert "correlation_id" not in CorrelationProcessor()(None, "info", {"event": "x"})


# ---------------------------------------------------------------------------
# get_logger / JsonLoggerFactory
# ---------------------------------------------------------------------------


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger("cars.test", component="search").info("car_search", total=3)
        assert logs == [
            {"component": "search", "total": 3, "event": "car_search", "log_level": "info"}
        ]


class TestJsonLoggerFactory:
    def test_configure_sets_root_level(self) -> None:
        JsonLoggerFactory.configure("debug")
        assert logging.getLogger().level == logging.DEBUG
        assert len(logging.getLogger().handlers) == 1

    def test_json_output_includes_correlation_id(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(logging.INFO)
        CorrelationContext.set(RequestContext(correlation_id="cid-9"))
        get_logger("cars.json").info("filter_compiled", predicates=2)
        line = capsys.readouterr().err.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "filter_compiled"
        assert record["predicates"] == 2
        assert record["correlation_id"] == "cid-9"
        assert record["level"] == "info"
        assert record["logger"] == "cars.json"

    def test_console_renderer(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure("INFO", json=False)
        get_logger("cars.console").warning("store_failure")
        assert "store_failure" in capsys.readouterr().err
