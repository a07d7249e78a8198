"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the messaging extension use case and its
collaborators. Routes depend only on these dependencies, not on infra
directly; tests swap the search backend via app.dependency_overrides.
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import Depends

from app.application.interfaces import ITelemetryClient, ITicketSearchRepository
from app.application.use_cases.messaging_extension import MessagingExtension
from app.core.config import get_settings
from app.infrastructure.persistence.repositories import TicketSearchRepository
from app.shared.telemetry.client import TelemetryClient

_telemetry_logger = logging.getLogger("app.telemetry")


def get_ticket_search_repo() -> ITicketSearchRepository:
    """Ticket search backend (opens a session per search)."""
    settings = get_settings()
    return TicketSearchRepository(
        default_page_size=settings.search_default_page_size,
        max_page_size=settings.search_max_page_size,
    )


def get_telemetry_client() -> ITelemetryClient:
    """Telemetry collaborator for request handlers."""
    return TelemetryClient(_telemetry_logger)


def get_messaging_extension(
    search_repo: Annotated[ITicketSearchRepository, Depends(get_ticket_search_repo)],
    telemetry_client: Annotated[ITelemetryClient, Depends(get_telemetry_client)],
) -> MessagingExtension:
    """Messaging extension query use case."""
    return MessagingExtension(search_repo, telemetry_client)
