"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs or domain enums only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.application.dtos.ticket import TicketEntity
    from app.domain.enums import SearchScope


class ITicketSearchRepository(Protocol):
    """Protocol for the ticket search backend."""

    async def search_tickets(
        self,
        scope: SearchScope,
        query: str,
        count: int | None = None,
        skip: int | None = None,
    ) -> list[TicketEntity]:
        """Return tickets in scope matching query (trailing * = prefix match), in backend order.

        Raises BackendError when the search call fails.
        """
