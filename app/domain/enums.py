"""Domain enumerations for ticket search.

Enums represent fixed sets of domain values (search scopes, ticket state).
"""

from enum import Enum, IntEnum


class SearchScope(str, Enum):
    """Subset of the ticket store a messaging extension command searches.

    Pure dispatch key: the search backend decides what each scope filters on.
    """

    RECENT_TICKETS = "RecentTickets"
    OPEN_TICKETS = "OpenTickets"
    ASSIGNED_TICKETS = "AssignedTickets"


class TicketState(IntEnum):
    """Ticket status as stored by the ticket store.

    Only OPEN is meaningful to card rendering; every other stored value is
    shown as closed.
    """

    OPEN = 0
    CLOSED = 1
