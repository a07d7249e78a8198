"""Shared enumerations for the ticket search extension.

Cross-cutting enums used by application and infrastructure (e.g.
telemetry severity). Domain-specific enums (e.g. SearchScope) live in
app.domain.enums.
"""

import logging
from enum import Enum


class SeverityLevel(str, Enum):
    """Severity of a telemetry trace message."""

    VERBOSE = "verbose"
    INFORMATION = "information"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"

    @property
    def logging_level(self) -> int:
        """Return the stdlib logging level for this severity."""
        return _LOGGING_LEVELS[self]


_LOGGING_LEVELS = {
    SeverityLevel.VERBOSE: logging.DEBUG,
    SeverityLevel.INFORMATION: logging.INFO,
    SeverityLevel.WARNING: logging.WARNING,
    SeverityLevel.ERROR: logging.ERROR,
    SeverityLevel.CRITICAL: logging.CRITICAL,
}
