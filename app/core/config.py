"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Telemetry options are validated at load time; the
database URL is optional so the service can start (and answer health
checks) before the ticket store is configured.
"""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_TELEMETRY_EXPORTERS = ("console", "otlp", "none")


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings are optional with defaults. Requests that need the ticket
    store fail with SqlNotConfiguredException until DATABASE_URL is set.
    """

    # App
    app_name: str = "ticket-search-extension"
    app_version: str = "1.0.0"
    debug: bool = False

    # Ticket store (PostgreSQL via asyncpg)
    database_url: str = ""
    database_echo: bool = False
    # Optional pool/driver overrides (None = use defaults in database.py)
    db_pool_size: int | None = None
    db_max_overflow: int | None = None
    db_command_timeout: int | None = None

    # Search paging
    search_default_page_size: int = 25
    search_max_page_size: int = 100

    # OpenTelemetry
    telemetry_enabled: bool = True
    telemetry_exporter: str = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_sample_rate: float = 1.0
    telemetry_environment: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_paging_and_telemetry(self) -> "Settings":
        """Validate paging bounds and telemetry exporter options."""
        if self.search_max_page_size < 1:
            raise ValueError("SEARCH_MAX_PAGE_SIZE must be at least 1.")
        if not 1 <= self.search_default_page_size <= self.search_max_page_size:
            raise ValueError(
                "SEARCH_DEFAULT_PAGE_SIZE must be between 1 and SEARCH_MAX_PAGE_SIZE, "
                f"got: {self.search_default_page_size!r}"
            )
        if self.telemetry_exporter not in _TELEMETRY_EXPORTERS:
            raise ValueError(
                f"telemetry_exporter must be one of {_TELEMETRY_EXPORTERS}, "
                f"got: {self.telemetry_exporter!r}"
            )
        if self.telemetry_exporter == "otlp" and not self.telemetry_otlp_endpoint:
            raise ValueError(
                "TELEMETRY_OTLP_ENDPOINT is required when telemetry_exporter is 'otlp' "
                "(e.g. http://localhost:4317)."
            )
        if not 0.0 <= self.telemetry_sample_rate <= 1.0:
            raise ValueError(
                f"telemetry_sample_rate must be between 0.0 and 1.0, got: {self.telemetry_sample_rate!r}"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
