"""Pydantic request/response schemas for the API."""

from app.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)
from app.schemas.messaging_extension import (
    InvokeActivity,
    InvokeResponse,
    MessagingExtensionAttachment,
    MessagingExtensionQuery,
    MessagingExtensionResponse,
    MessagingExtensionResult,
    QueryOptions,
    QueryParameter,
    ThumbnailCard,
)

__all__ = [
    "HealthResponse",
    "InvokeActivity",
    "InvokeResponse",
    "MessagingExtensionAttachment",
    "MessagingExtensionQuery",
    "MessagingExtensionResponse",
    "MessagingExtensionResult",
    "QueryOptions",
    "QueryParameter",
    "ReadinessErrorResponse",
    "ReadinessResponse",
    "ThumbnailCard",
]
