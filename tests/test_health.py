"""Smoke tests for health and app wiring."""

from unittest.mock import patch

from httpx import AsyncClient

from app.domain.exceptions import SqlNotConfiguredException


async def test_health_returns_ok(client: AsyncClient) -> None:
    """GET /api/v1/health returns 200 and status ok."""
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data.get("status") == "ok"


async def test_ready_returns_503_without_ticket_store(client: AsyncClient) -> None:
    """GET /api/v1/health/ready returns 503 when DATABASE_URL is not configured."""

    def _not_configured():
        raise SqlNotConfiguredException()

    with patch("app.api.v1.endpoints.health.session_scope", _not_configured):
        response = await client.get("/api/v1/health/ready")

    assert response.status_code == 503
    data = response.json()
    assert data["status"] == "not_ready"
    assert "not configured" in data["message"]
