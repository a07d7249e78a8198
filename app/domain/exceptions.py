"""Domain exceptions for the ticket search extension.

Defines exceptions raised while handling a messaging extension query.
Presentation layer maps them to HTTP responses in exception handlers.
An unknown command id is not an error: it degrades to an empty result.
"""

from typing import Any


class MessagingExtensionException(Exception):
    """Base exception for all ticket search extension errors.

    All custom exceptions inherit from this class to allow consistent error
    handling and logging. Presentation layer maps these to HTTP responses
    using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context.
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error body used by the exception handlers."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class MalformedRequestError(MessagingExtensionException):
    """Raised when a query activity body cannot be decoded into a query."""

    def __init__(self, reason: str) -> None:
        """Initialize with the decoding failure reason.

        Args:
            reason: Why the body could not be decoded (parser message).
        """
        super().__init__(
            "Messaging extension query body could not be decoded",
            "MALFORMED_REQUEST",
            {"reason": reason},
        )


class SqlNotConfiguredException(MessagingExtensionException):
    """Raised when the ticket store is needed but DATABASE_URL is not set."""

    def __init__(self) -> None:
        super().__init__(
            message="Ticket search requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
