"""Service interfaces (ports) for the application layer.

Protocols define contracts for cross-cutting collaborators (DIP).
"""

from __future__ import annotations

from typing import Protocol

from app.shared.enums import SeverityLevel


class ITelemetryClient(Protocol):
    """Protocol for the write-only telemetry collaborator.

    Implementations must not raise or block the calling request.
    """

    def track_trace(
        self, message: str, severity: SeverityLevel = SeverityLevel.INFORMATION
    ) -> None:
        """Record a trace message."""

    def track_exception(self, error: BaseException) -> None:
        """Record a structured exception (type, message, traceback)."""
