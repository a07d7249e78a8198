"""Persistence models: ORM entities."""

from app.infrastructure.persistence.models.ticket import Ticket

__all__ = ["Ticket"]
