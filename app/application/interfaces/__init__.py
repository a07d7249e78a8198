"""Application interfaces (ports): repository and service protocols."""

from app.application.interfaces.repositories import ITicketSearchRepository
from app.application.interfaces.services import ITelemetryClient

__all__ = ["ITelemetryClient", "ITicketSearchRepository"]
