"""API v1 router aggregation.

Includes the versioned REST endpoint modules with consistent prefix and tags.
The bot messaging endpoint is mounted separately at /api/messages (see app.main).
"""

from fastapi import APIRouter

from app.api.v1.endpoints import health

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
