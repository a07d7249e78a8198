"""DTOs for ticket search results (no dependency on ORM)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, kw_only=True)
class TicketEntity:
    """Ticket as returned by the search backend (read-model snapshot).

    status is the raw stored value: 0 is open, anything else is rendered
    as closed.
    """

    status: int
    title: str | None = None
    assigned_to_name: str | None = None
    date_created: datetime | None = None
    # Informational fields; not used for card rendering
    ticket_id: str | None = None
    description: str | None = None
    requester_name: str | None = None
    assigned_to_object_id: str | None = None
    date_assigned: datetime | None = None
    date_closed: datetime | None = None
