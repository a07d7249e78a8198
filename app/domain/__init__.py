"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.enums import SearchScope, TicketState
from app.domain.exceptions import (
    MalformedRequestError,
    MessagingExtensionException,
    SqlNotConfiguredException,
)

__all__ = [
    # Enums
    "SearchScope",
    "TicketState",
    # Exceptions
    "MalformedRequestError",
    "MessagingExtensionException",
    "SqlNotConfiguredException",
]
