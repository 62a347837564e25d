# pokedex/api/catalog.py
"""
JSON routes over :class:`CatalogService`.

``None`` from the service becomes 404; upstream failures are mapped to 502
by the exception handlers installed in :mod:`pokedex.main`.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from pokedex.api.dependencies import get_catalog_service
from pokedex.contracts.routes import GroupSchema, PageSchema, RecordSchema, SearchSchema
from pokedex.core.catalog.service import CatalogService

router = APIRouter(tags=["catalog"])


@router.get("/pokemon", response_model=PageSchema, operation_id="list_pokemon")
async def list_pokemon(
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1),
    service: CatalogService = Depends(get_catalog_service),
) -> PageSchema:
    result = await service.get_list_page(page, limit)
    return PageSchema.from_page(result)


@router.get(
    "/pokemon/{identifier}", response_model=RecordSchema, operation_id="get_pokemon"
)
async def get_pokemon(
    identifier: str,
    service: CatalogService = Depends(get_catalog_service),
) -> RecordSchema:
    record = await service.get_details(identifier)
    if record is None:
        raise HTTPException(status_code=404, detail=f"Pokemon '{identifier}' not found")
    return RecordSchema.from_record(record)


@router.get("/search", response_model=SearchSchema, operation_id="search_pokemon")
async def search_pokemon(
    q: str = Query(default=""),
    service: CatalogService = Depends(get_catalog_service),
) -> SearchSchema:
    result = await service.search(q)
    return SearchSchema.from_result(result, q.strip())


@router.get("/types", response_model=list[GroupSchema], operation_id="list_types")
async def list_types(
    service: CatalogService = Depends(get_catalog_service),
) -> list[GroupSchema]:
    groups = await service.list_groups()
    return [GroupSchema.from_summary(g) for g in groups]


@router.get(
    "/types/{group_key}", response_model=PageSchema, operation_id="list_type_members"
)
async def list_type_members(
    group_key: str,
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1),
    service: CatalogService = Depends(get_catalog_service),
) -> PageSchema:
    result = await service.get_group_page(group_key, page, limit)
    if result is None:
        raise HTTPException(status_code=404, detail=f"Type '{group_key}' not found")
    return PageSchema.from_page(result)
