"""Persistence repositories. Re-exports for dependency injection."""

from app.infrastructure.persistence.repositories.ticket_search_repo import (
    TicketSearchRepository,
)

__all__ = ["TicketSearchRepository"]
