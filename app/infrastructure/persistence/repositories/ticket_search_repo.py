"""Ticket search repository. Uses PostgreSQL full-text prefix matching on the ticket table."""

from __future__ import annotations

import re
from collections.abc import Callable
from contextlib import AbstractAsyncContextManager

# Registers the PostgreSQL to_tsvector/to_tsquery constructs used by func below
import sqlalchemy.dialects.postgresql  # noqa: F401
from sqlalchemy import Select, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.ticket import TicketEntity
from app.domain.enums import SearchScope, TicketState
from app.infrastructure.exceptions import BackendError
from app.infrastructure.persistence.database import session_scope
from app.infrastructure.persistence.models.ticket import Ticket

SessionFactory = Callable[[], AbstractAsyncContextManager[AsyncSession]]

# Letters and digits only; "_" and punctuation never form a term
_TERM_RE = re.compile(r"[^\W_]+")

# Words searched: title, description and the people on the ticket
_SEARCH_DOCUMENT = func.to_tsvector(
    "simple",
    func.concat_ws(
        " ",
        Ticket.title,
        Ticket.description,
        Ticket.requester_name,
        Ticket.assigned_to_name,
    ),
)

_SCOPE_FILTERS = {
    SearchScope.RECENT_TICKETS: (),
    SearchScope.OPEN_TICKETS: (
        Ticket.status == TicketState.OPEN,
        Ticket.assigned_to_object_id.is_(None),
    ),
    SearchScope.ASSIGNED_TICKETS: (
        Ticket.status == TicketState.OPEN,
        Ticket.assigned_to_object_id.is_not(None),
    ),
}

_SCOPE_ORDER = {
    SearchScope.RECENT_TICKETS: Ticket.last_modified_on,
    SearchScope.OPEN_TICKETS: Ticket.date_created,
    SearchScope.ASSIGNED_TICKETS: Ticket.date_assigned,
}


def build_prefix_tsquery(query: str) -> str | None:
    """Turn a wildcard query into a tsquery string; None when there is nothing to match.

    Terms are AND-ed; a trailing * makes the last term a prefix:
    "vpn acc*" -> "vpn & acc:*", "*" -> None.
    """
    terms = _TERM_RE.findall(query)
    if not terms:
        return None
    if query.rstrip().endswith("*"):
        terms[-1] = f"{terms[-1]}:*"
    return " & ".join(terms)


def build_search_statement(
    scope: SearchScope, query: str, limit: int, offset: int
) -> Select:
    """SELECT for one page of tickets in scope matching query, newest first."""
    stmt = select(Ticket).where(*_SCOPE_FILTERS[scope])
    tsquery = build_prefix_tsquery(query)
    if tsquery is not None:
        stmt = stmt.where(_SEARCH_DOCUMENT.op("@@")(func.to_tsquery("simple", tsquery)))
    return (
        stmt.order_by(_SCOPE_ORDER[scope].desc().nulls_last(), Ticket.ticket_id)
        .limit(limit)
        .offset(offset)
    )


def _to_entity(ticket: Ticket) -> TicketEntity:
    return TicketEntity(
        ticket_id=ticket.ticket_id,
        status=ticket.status,
        title=ticket.title,
        description=ticket.description,
        date_created=ticket.date_created,
        requester_name=ticket.requester_name,
        assigned_to_name=ticket.assigned_to_name,
        assigned_to_object_id=ticket.assigned_to_object_id,
        date_assigned=ticket.date_assigned,
        date_closed=ticket.date_closed,
    )


class TicketSearchRepository:
    """Search tickets by scope with prefix matching and paging (read-only).

    A session is opened per search from session_factory, so constructing the
    repository never touches the database.
    """

    def __init__(
        self,
        session_factory: SessionFactory = session_scope,
        default_page_size: int = 25,
        max_page_size: int = 100,
    ) -> None:
        self.session_factory = session_factory
        self.default_page_size = default_page_size
        self.max_page_size = max_page_size

    async def search_tickets(
        self,
        scope: SearchScope,
        query: str,
        count: int | None = None,
        skip: int | None = None,
    ) -> list[TicketEntity]:
        """Return up to count tickets after skip. count defaults to default_page_size, clamped to 1..max_page_size."""
        limit = (
            self.default_page_size
            if count is None
            else min(max(1, count), self.max_page_size)
        )
        offset = max(0, skip or 0)
        stmt = build_search_statement(scope, query, limit, offset)
        async with self.session_factory() as session:
            try:
                result = await session.execute(stmt)
                tickets = result.scalars().all()
            except (SQLAlchemyError, OSError) as e:
                raise BackendError(scope.value, str(e)) from e
        return [_to_entity(ticket) for ticket in tickets]
