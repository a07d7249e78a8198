"""Shared telemetry: logging setup, OpenTelemetry config, tracing helpers, client."""

from app.shared.telemetry.client import TelemetryClient
from app.shared.telemetry.logging import setup_logging
from app.shared.telemetry.telemetry import (
    TelemetryConfig,
    get_telemetry,
    set_telemetry,
)
from app.shared.telemetry.tracing import (
    add_span_attributes,
    add_span_event,
    get_trace_id,
    set_span_error,
    traced,
)

__all__ = [
    "setup_logging",
    "TelemetryClient",
    "TelemetryConfig",
    "get_telemetry",
    "set_telemetry",
    "traced",
    "add_span_attributes",
    "add_span_event",
    "set_span_error",
    "get_trace_id",
]
