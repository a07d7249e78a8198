"""TelemetryClient tests: severity mapping, exception records, and failure isolation."""

import logging
from unittest.mock import MagicMock, patch

import pytest

from app.shared.enums import SeverityLevel
from app.shared.telemetry.client import TelemetryClient


@pytest.mark.parametrize(
    ("severity", "level"),
    [
        (SeverityLevel.VERBOSE, logging.DEBUG),
        (SeverityLevel.INFORMATION, logging.INFO),
        (SeverityLevel.WARNING, logging.WARNING),
        (SeverityLevel.ERROR, logging.ERROR),
        (SeverityLevel.CRITICAL, logging.CRITICAL),
    ],
)
def test_track_trace_logs_at_mapped_level(severity: SeverityLevel, level: int) -> None:
    logger = MagicMock()
    TelemetryClient(logger).track_trace("hello", severity)

    logger.log.assert_called_once()
    assert logger.log.call_args[0][:2] == (level, "hello")
    assert logger.log.call_args[1]["extra"]["severity"] == severity.value


def test_track_trace_defaults_to_information() -> None:
    logger = MagicMock()
    TelemetryClient(logger).track_trace("hello")
    assert logger.log.call_args[0][0] == logging.INFO


def test_track_exception_logs_error_with_traceback(caplog: pytest.LogCaptureFixture) -> None:
    client = TelemetryClient(logging.getLogger("tests.telemetry"))
    try:
        raise ValueError("bad value")
    except ValueError as e:
        error = e

    with caplog.at_level(logging.ERROR, logger="tests.telemetry"):
        client.track_exception(error)

    assert len(caplog.records) == 1
    record = caplog.records[0]
    assert "ValueError: bad value" in record.getMessage()
    assert record.exc_info is not None
    assert record.exc_info[1] is error


def test_track_exception_marks_current_span() -> None:
    error = RuntimeError("boom")
    with patch("app.shared.telemetry.client.set_span_error") as set_span_error:
        TelemetryClient(MagicMock()).track_exception(error)
    set_span_error.assert_called_once_with(error)


def test_telemetry_failures_do_not_propagate() -> None:
    """A broken sink never raises into the caller."""
    logger = MagicMock()
    logger.log.side_effect = RuntimeError("sink down")
    logger.error.side_effect = RuntimeError("sink down")
    client = TelemetryClient(logger)

    client.track_trace("hello", SeverityLevel.ERROR)
    client.track_exception(ValueError("x"))

    assert logger.debug.call_count == 2
