"""Messaging extension wire schemas (invoke activity in, invoke response out).

Field names are snake_case in Python and camelCase on the wire
(commandId, queryOptions, attachmentLayout, composeExtension, ...).
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.core.constants import (
    ATTACHMENT_LAYOUT_LIST,
    INVOKE_RESPONSE_STATUS_OK,
    RESULT_TYPE,
    THUMBNAIL_CARD_CONTENT_TYPE,
)


class _WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class InvokeActivity(_WireModel):
    """Inbound activity. Only name and value matter to query handling."""

    type: str = Field(default="invoke", description="Activity type (invoke for extension queries)")
    name: str | None = Field(None, description="Activity kind, e.g. composeExtension/query")
    value: Any = Field(None, description="Query body: JSON object or JSON-encoded string")


class QueryParameter(_WireModel):
    """One named parameter from the extension's search command."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: Any = None


class QueryOptions(_WireModel):
    """Paging window requested by the client."""

    model_config = ConfigDict(frozen=True)

    count: int | None = Field(None, ge=0)
    skip: int | None = Field(None, ge=0)


class MessagingExtensionQuery(_WireModel):
    """Decoded body of a composeExtension/query activity."""

    model_config = ConfigDict(frozen=True)

    command_id: str | None = None
    parameters: list[QueryParameter] = Field(default_factory=list)
    query_options: QueryOptions | None = None


class ThumbnailCard(_WireModel):
    """Compact card: title plus one line of text."""

    title: str | None = None
    text: str


class CardAttachment(_WireModel):
    content_type: str = THUMBNAIL_CARD_CONTENT_TYPE
    content: ThumbnailCard


class MessagingExtensionAttachment(CardAttachment):
    """Full card shown when inserted, with the compact card shown in the result list."""

    preview: CardAttachment | None = None


class MessagingExtensionResult(_WireModel):
    """Response envelope: list layout of attachments in backend order."""

    type: str = RESULT_TYPE
    attachment_layout: str = ATTACHMENT_LAYOUT_LIST
    attachments: list[MessagingExtensionAttachment] = Field(default_factory=list)


class MessagingExtensionResponse(_WireModel):
    compose_extension: MessagingExtensionResult


class InvokeResponse(_WireModel):
    """Status and body the transport sends back for an invoke activity."""

    status: int = INVOKE_RESPONSE_STATUS_OK
    body: MessagingExtensionResponse
