"""FastAPI application entry point.

Wiring only: logging, lifespan, exception handlers, routers.
No business logic here. See app.core.lifespan and app.core.exception_handlers.

Run with:
    uvicorn app.main:app

Settings are loaded inside create_app() so that tests can set env (and
clear the get_settings cache) before calling create_app().
"""

from fastapi import FastAPI

from app.api.v1 import api_router
from app.api.v1.endpoints import messages
from app.core.config import get_settings
from app.core.exception_handlers import register_exception_handlers
from app.core.lifespan import create_lifespan
from app.shared.telemetry.logging import setup_logging


def create_app() -> FastAPI:
    """Build and return the FastAPI application. Settings are resolved here (deferred from import)."""
    settings = get_settings()
    setup_logging()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    register_exception_handlers(app)

    # Bot channel posts activities to /api/messages
    app.include_router(
        messages.router, prefix="/api/messages", tags=["messaging-extension"]
    )
    app.include_router(api_router, prefix="/api/v1")

    return app


app = create_app()
