"""Shared utilities: enums and telemetry.

Used by domain, application, and infrastructure. No business logic.
"""

from app.shared.enums import SeverityLevel

__all__ = ["SeverityLevel"]
