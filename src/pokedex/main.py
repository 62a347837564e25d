# pokedex/main.py
"""
Catalog application factory.

Wires the upstream client and the aggregation service onto ``app.state``
and mounts the JSON routes.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from pokedex import __version__
from pokedex.api.catalog import router as catalog_router
from pokedex.api.discovery import router as discovery_router
from pokedex.core.catalog.service import CatalogClient, CatalogService
from pokedex.core.clients.pokeapi import PokeApiClient
from pokedex.core.config import Settings, settings as default_settings
from pokedex.core.errors import InvalidPagination, UpstreamFailure
from pokedex.core.logging import configure_logging

logger = logging.getLogger(__name__)


# -- Exception handlers --------------------------------------------------------


async def _upstream_failure_handler(request: Request, exc: UpstreamFailure) -> JSONResponse:
    logger.warning("%s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=502, content=exc.to_dict())


async def _invalid_pagination_handler(
    request: Request, exc: InvalidPagination
) -> JSONResponse:
    return JSONResponse(status_code=400, content=exc.to_dict())


# -- Lifespan ------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI):
    service: CatalogService = app.state.catalog_service
    logger.info("Catalog service up (upstream=%s)", getattr(service.client, "base_url", "?"))
    yield
    logger.info("Catalog service shutting down")


# -- Application factory -------------------------------------------------------


def create_app(
    settings: Settings | None = None,
    client: CatalogClient | None = None,
) -> FastAPI:
    """Build and wire the catalog FastAPI application."""
    cfg = settings or default_settings
    configure_logging(cfg.log_level, json=cfg.log_json)
    logger.info("Creating catalog application (env=%s)", cfg.app_env)

    if client is None:
        client = PokeApiClient(
            base_url=cfg.pokeapi_base_url,
            timeout=cfg.request_timeout,
        )

    app = FastAPI(
        title="Pokedex Catalog",
        version=__version__,
        description="Normalized, searchable, paginated view over PokeAPI",
        lifespan=lifespan,
    )

    app.state.settings = cfg
    app.state.catalog_service = CatalogService.from_settings(client, cfg)

    app.add_exception_handler(UpstreamFailure, _upstream_failure_handler)
    app.add_exception_handler(InvalidPagination, _invalid_pagination_handler)

    app.include_router(discovery_router)
    app.include_router(catalog_router)

    return app
