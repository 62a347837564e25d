# pokedex/api/dependencies.py
"""
FastAPI dependencies for request-scoped services.
"""
from __future__ import annotations

from fastapi import HTTPException, Request

from pokedex.core.catalog.service import CatalogService


def get_catalog_service(request: Request) -> CatalogService:
    """Return the CatalogService wired onto ``app.state``, or 503."""
    service = getattr(request.app.state, "catalog_service", None)
    if service is None:
        raise HTTPException(status_code=503, detail="Catalog service not configured")
    return service
