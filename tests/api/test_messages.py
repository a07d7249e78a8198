"""Tests for the bot messaging endpoint (POST /api/messages) with a mocked ticket search backend."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

from httpx import AsyncClient

from app.domain.enums import SearchScope
from app.infrastructure.exceptions import BackendError
from tests.conftest import make_ticket


def _activity(value, name: str = "composeExtension/query") -> dict:
    return {"type": "invoke", "name": name, "value": value}


async def test_open_requests_query_returns_compose_extension_result(
    client: AsyncClient, search_repo: AsyncMock
) -> None:
    """End-to-end: openrequests + searchText=vpn renders one attachment with preview and detail."""
    search_repo.search_tickets.return_value = [
        make_ticket(date_created=datetime(2023, 1, 1, tzinfo=timezone.utc))
    ]

    response = await client.post(
        "/api/messages",
        json=_activity(
            {
                "commandId": "openrequests",
                "parameters": [{"name": "searchText", "value": "vpn"}],
                "queryOptions": {"count": 5, "skip": 0},
            }
        ),
    )

    assert response.status_code == 200
    result = response.json()["composeExtension"]
    assert result["type"] == "result"
    assert result["attachmentLayout"] == "list"
    assert len(result["attachments"]) == 1
    attachment = result["attachments"][0]
    assert attachment["contentType"] == "application/vnd.microsoft.card.thumbnail"
    assert attachment["content"]["title"] == "Jane"
    assert attachment["content"]["text"] == (
        "Request: VPN access request | Open | 2023-01-01 00:00:00+00:00"
    )
    assert attachment["preview"]["content"]["title"] == "Jane"
    assert attachment["preview"]["content"]["text"] == (
        "Request: VPN access... | Open | 2023-01-01 00:00:00+00:00"
    )
    search_repo.search_tickets.assert_awaited_once_with(
        SearchScope.OPEN_TICKETS, "vpn*", 5, 0
    )


async def test_unknown_command_returns_empty_attachments(
    client: AsyncClient, search_repo: AsyncMock
) -> None:
    response = await client.post(
        "/api/messages",
        json=_activity({"commandId": "faq", "parameters": []}),
    )

    assert response.status_code == 200
    assert response.json()["composeExtension"]["attachments"] == []
    search_repo.search_tickets.assert_not_awaited()


async def test_non_query_activity_is_accepted_without_body(
    client: AsyncClient, search_repo: AsyncMock
) -> None:
    """Activities other than composeExtension/query get 202 and no content."""
    response = await client.post(
        "/api/messages",
        json={"type": "message", "text": "hello"},
    )

    assert response.status_code == 202
    assert response.content == b""
    search_repo.search_tickets.assert_not_awaited()


async def test_malformed_query_body_returns_400(
    client: AsyncClient, telemetry_client: MagicMock
) -> None:
    response = await client.post(
        "/api/messages",
        json=_activity("{not json"),
    )

    assert response.status_code == 400
    assert response.json()["error"] == "MALFORMED_REQUEST"
    telemetry_client.track_exception.assert_called_once()


async def test_backend_failure_returns_502_and_is_tracked(
    client: AsyncClient, search_repo: AsyncMock, telemetry_client: MagicMock
) -> None:
    search_repo.search_tickets.side_effect = BackendError("RecentTickets", "timeout")

    response = await client.post(
        "/api/messages",
        json=_activity({"commandId": "recents", "parameters": []}),
    )

    assert response.status_code == 502
    data = response.json()
    assert data["error"] == "BACKEND_ERROR"
    assert data["details"]["scope"] == "RecentTickets"
    telemetry_client.track_trace.assert_called_once()
    telemetry_client.track_exception.assert_called_once()


async def test_activity_body_must_be_an_object(client: AsyncClient) -> None:
    """A body that is not an activity object fails request validation (422)."""
    response = await client.post("/api/messages", json=["not", "an", "activity"])
    assert response.status_code == 422
    assert response.json()["error"] == "VALIDATION_ERROR"
