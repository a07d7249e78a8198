"""Infrastructure exceptions for the ticket search backend.

Backend errors extend MessagingExtensionException so presentation can map
them to HTTP responses consistently. The underlying driver error is chained
(raise ... from exc) and never interpreted here.
"""

from app.domain.exceptions import MessagingExtensionException


class BackendError(MessagingExtensionException):
    """Ticket search backend call failed."""

    def __init__(self, scope: str, reason: str) -> None:
        super().__init__(
            f"Ticket search failed for scope: {scope}",
            "BACKEND_ERROR",
            {"scope": scope, "reason": reason},
        )
