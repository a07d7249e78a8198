"""Messaging extension query use case: dispatch a search command and render cards.

Flow: check the activity kind, decode the query body, pull the search text
out of the command parameters, map the command id to a search scope, await
the ticket search backend and format each ticket into an attachment.
Failures are reported to the telemetry client and re-raised unchanged.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from app.application.services.card_formatter import build_attachment
from app.core.constants import (
    PREFIX_MATCH_WILDCARD,
    QUERY_ACTIVITY_NAME,
    SEARCH_TEXT_PARAMETER_NAME,
)
from app.domain.enums import SearchScope
from app.domain.exceptions import MalformedRequestError
from app.schemas.messaging_extension import (
    InvokeActivity,
    InvokeResponse,
    MessagingExtensionQuery,
    MessagingExtensionResponse,
    MessagingExtensionResult,
    QueryOptions,
    QueryParameter,
)
from app.shared.enums import SeverityLevel
from app.shared.telemetry.tracing import add_span_attributes, traced

if TYPE_CHECKING:
    from app.application.dtos.ticket import TicketEntity
    from app.application.interfaces import ITelemetryClient, ITicketSearchRepository

logger = logging.getLogger(__name__)

# Command ids come from the composeExtensions section of the app manifest.
COMMAND_SCOPES: Mapping[str, SearchScope] = MappingProxyType({
    "recents": SearchScope.RECENT_TICKETS,
    "openrequests": SearchScope.OPEN_TICKETS,
    "assignedrequests": SearchScope.ASSIGNED_TICKETS,
})


def parse_query(value: Any) -> MessagingExtensionQuery:
    """Decode an activity value (JSON string or object) into a query.

    Raises:
        MalformedRequestError: value is not valid JSON or not a query object.
    """
    try:
        if isinstance(value, (str, bytes, bytearray)):
            return MessagingExtensionQuery.model_validate_json(value)
        return MessagingExtensionQuery.model_validate(value)
    except ValidationError as e:
        raise MalformedRequestError(str(e)) from e


def _parameter_text(value: Any) -> str:
    # Objects and arrays keep their JSON form
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        return json.dumps(value)
    return str(value)


def get_search_query_text(parameters: Sequence[QueryParameter]) -> str:
    """Return the value of the first searchText parameter (name matched ignoring case), else ""."""
    wanted = SEARCH_TEXT_PARAMETER_NAME.upper()
    for parameter in parameters:
        if parameter.name.upper() == wanted:
            return _parameter_text(parameter.value)
    return ""


class MessagingExtension:
    """Handles composeExtension/query activities for the ticket search commands."""

    def __init__(
        self,
        search_repo: "ITicketSearchRepository",
        telemetry_client: "ITelemetryClient",
    ) -> None:
        self.search_repo = search_repo
        self.telemetry_client = telemetry_client

    @traced("messaging_extension.handle_query")
    async def handle_query(self, activity: InvokeActivity) -> InvokeResponse | None:
        """Return search results for a query activity, or None to ignore any other activity.

        Raises:
            MalformedRequestError: query body could not be decoded.
            BackendError: ticket search failed.
        """
        try:
            if activity.name != QUERY_ACTIVITY_NAME:
                return None

            query = parse_query(activity.value)
            search_text = get_search_query_text(query.parameters)
            options = query.query_options or QueryOptions()
            result = await self.get_search_result(
                search_text,
                command_id=query.command_id,
                count=options.count,
                skip=options.skip,
            )
            return InvokeResponse(
                body=MessagingExtensionResponse(compose_extension=result)
            )
        except Exception as e:
            self.telemetry_client.track_trace(
                f"Failed to handle for ME activity: {e}", SeverityLevel.ERROR
            )
            self.telemetry_client.track_exception(e)
            raise

    @traced("messaging_extension.get_search_result")
    async def get_search_result(
        self,
        query: str | None,
        command_id: str | None,
        count: int | None = None,
        skip: int | None = None,
    ) -> MessagingExtensionResult:
        """Search the scope for command_id and render every hit, preserving backend order.

        Unknown command ids give an empty result without calling the backend.
        """
        query = (query or "") + PREFIX_MATCH_WILDCARD
        scope = COMMAND_SCOPES.get(command_id) if command_id is not None else None

        tickets: list[TicketEntity] = []
        if scope is None:
            logger.info("No search scope for command id %r; returning no results", command_id)
        else:
            add_span_attributes(scope=scope.value)
            tickets = await self.search_repo.search_tickets(scope, query, count, skip)

        add_span_attributes(result_count=len(tickets))
        return MessagingExtensionResult(
            attachments=[build_attachment(ticket) for ticket in tickets]
        )
