"""Application DTOs (no dependency on ORM or web framework)."""

from app.application.dtos.ticket import TicketEntity

__all__ = ["TicketEntity"]
