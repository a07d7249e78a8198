"""Telemetry client: trace messages and exception records for request handlers.

Write-only collaborator passed to use cases explicitly. Every call is
fire-and-forget: failures inside telemetry are logged at DEBUG and never
propagate into the request path.
"""

import logging

from app.shared.enums import SeverityLevel
from app.shared.telemetry.tracing import add_span_event, get_trace_id, set_span_error


class TelemetryClient:
    """Sends trace messages and exceptions to logging and the current span."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or logging.getLogger("app.telemetry")

    def track_trace(
        self, message: str, severity: SeverityLevel = SeverityLevel.INFORMATION
    ) -> None:
        """Record a trace message at the given severity."""
        try:
            self.logger.log(
                severity.logging_level,
                message,
                extra={"severity": severity.value, "trace_id": get_trace_id()},
            )
            add_span_event("trace", {"message": message, "severity": severity.value})
        except Exception:
            self.logger.debug("track_trace failed", exc_info=True)

    def track_exception(self, error: BaseException) -> None:
        """Record an exception (type, message, traceback) on the current span and log."""
        try:
            set_span_error(error)
            self.logger.error(
                "Exception tracked: %s: %s",
                type(error).__name__,
                error,
                exc_info=(type(error), error, error.__traceback__),
                extra={"trace_id": get_trace_id()},
            )
        except Exception:
            self.logger.debug("track_exception failed", exc_info=True)
