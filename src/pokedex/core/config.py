# pokedex/core/config.py
"""
Central configuration for the catalog service.

Environment variables override defaults. Variable names are the upper-cased
field names (``POKEAPI_BASE_URL``, ``DEFAULT_PAGE_LIMIT``, ...).
"""
from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven settings with sensible defaults."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"
    log_json: bool = True

    # Upstream catalog
    pokeapi_base_url: str = Field(
        default="https://pokeapi.co/api/v2",
        description="Base URL of the upstream catalog",
    )
    request_timeout: float = Field(
        default=30.0, gt=0, description="Per-request transport timeout (s)"
    )

    # Pagination
    default_page_limit: int = Field(default=20, ge=1)
    max_page_limit: int = Field(
        default=100, ge=1, description="Largest page size accepted from callers"
    )

    # Search
    max_search_limit: int = Field(
        default=1000, ge=1, description="Entries scanned by substring search"
    )
    search_hydration_limit: int = Field(
        default=20, ge=1, description="Substring matches hydrated per search"
    )

    # Fan-out
    max_concurrency: int | None = Field(
        default=20,
        ge=1,
        description="Simultaneous hydration requests (unset = unbounded)",
    )


settings = Settings()
