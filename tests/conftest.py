"""Pytest configuration and fixtures for the ticket search extension.

Uses app.main:app for HTTP tests with the ticket search backend swapped via
dependency_overrides. DB-dependent fixtures skip when DATABASE_URL is unset.
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient

from app.api.v1.dependencies import get_telemetry_client, get_ticket_search_repo
from app.application.dtos.ticket import TicketEntity
from app.infrastructure.persistence import database
from app.main import app


def make_ticket(
    title: str | None = "VPN access request",
    assigned_to_name: str | None = "Jane",
    status: int = 0,
    date_created: datetime | None = datetime(2023, 1, 1, tzinfo=timezone.utc),
    **extra,
) -> TicketEntity:
    return TicketEntity(
        title=title,
        assigned_to_name=assigned_to_name,
        status=status,
        date_created=date_created,
        **extra,
    )


@pytest.fixture
def search_repo() -> AsyncMock:
    """Ticket search backend returning no tickets unless a test sets return_value."""
    repo = AsyncMock()
    repo.search_tickets = AsyncMock(return_value=[])
    return repo


@pytest.fixture
def telemetry_client() -> MagicMock:
    """Telemetry collaborator recording track_trace / track_exception calls."""
    return MagicMock()


@pytest.fixture
async def client(search_repo: AsyncMock, telemetry_client: MagicMock) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI) with a mocked backend."""
    app.dependency_overrides[get_ticket_search_repo] = lambda: search_repo
    app.dependency_overrides[get_telemetry_client] = lambda: telemetry_client
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def db_session():
    """Database session for repository/integration tests. Rolls back after test.

    Requires DATABASE_URL. Skips (pytest.skip) when the ticket store is not
    configured. Use @pytest.mark.requires_db to mark tests that need this
    fixture; run without DB via: pytest -m 'not requires_db'.
    """
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        pytest.skip("Ticket store not configured: set DATABASE_URL")
    async with database.engine.begin() as conn:
        await conn.run_sync(database.Base.metadata.create_all)
    async with database.AsyncSessionLocal() as session:
        yield session
        await session.rollback()
