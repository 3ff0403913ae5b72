"""Tests for correlation id propagation and log record enrichment."""

import logging

from marketplace.observability import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from marketplace.observability.logger import CorrelationIdFilter


class TestCorrelationId:
    def test_set_explicit_id(self) -> None:
        assert set_correlation_id("req-1") == "req-1"
        assert get_correlation_id() == "req-1"
        clear_correlation_id()

    def test_generates_id_when_missing(self) -> None:
        generated = set_correlation_id(None)

        assert generated
        assert get_correlation_id() == generated
        clear_correlation_id()

    def test_clear(self) -> None:
        set_correlation_id("req-2")
        clear_correlation_id()

        assert get_correlation_id() == ""


class TestCorrelationIdFilter:
    def _record(self) -> logging.LogRecord:
        return logging.LogRecord("test", logging.INFO, __file__, 1, "msg", None, None)

    def test_record_carries_current_id(self) -> None:
        set_correlation_id("req-3")
        record = self._record()

        assert CorrelationIdFilter().filter(record)
        assert record.correlation_id == "req-3"
        clear_correlation_id()

    def test_placeholder_outside_request(self) -> None:
        record = self._record()

        CorrelationIdFilter().filter(record)

        assert record.correlation_id == "-"
