"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (ticket search backend).
"""

from app.application.interfaces import ITelemetryClient, ITicketSearchRepository
from app.application.use_cases import MessagingExtension

__all__ = [
    "ITelemetryClient",
    "ITicketSearchRepository",
    "MessagingExtension",
]
