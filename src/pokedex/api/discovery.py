# pokedex/api/discovery.py
"""
Root-level health endpoint.
"""
from __future__ import annotations

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
async def health(request: Request) -> dict:
    service = getattr(request.app.state, "catalog_service", None)
    return {
        "status": "healthy",
        "catalog": getattr(service.client, "base_url", "configured")
        if service
        else "not configured",
    }
