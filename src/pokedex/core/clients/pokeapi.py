# pokedex/core/clients/pokeapi.py
"""
Thin async client for the PokeAPI catalog.

Every call issues exactly one GET. "Not found" comes back as ``None``;
anything else that goes wrong is raised as :class:`UpstreamFailure`.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping
from urllib.parse import quote

import httpx

from pokedex.core.errors import UpstreamFailure

logger = logging.getLogger(__name__)


def _normalize_key(identifier: str | int) -> str | None:
    """Lowercased, percent-encoded path segment, or None if it cannot name a resource.

    Empty keys and dot segments would resolve to the collection or a parent
    path rather than a single resource.
    """
    key = str(identifier).strip().lower()
    if not key.strip("."):
        return None
    return quote(key, safe="")


class PokeApiClient:
    """HTTP client for the PokeAPI v2 REST catalog.

    Contract::

        GET /pokemon?limit=&offset=     paginated entity listing
        GET /pokemon/{id}               single entity
        GET /pokemon-species/{id}       entity metadata
        GET /type                       all groups
        GET /type/{key}                 group with its full membership
    """

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float = 30.0,
    ) -> None:
        self._base = base_url.rstrip("/")
        self._timeout = timeout

    @property
    def base_url(self) -> str:
        return self._base

    async def _get(
        self,
        path: str,
        *,
        operation: str,
        params: Mapping[str, Any] | None = None,
        allow_missing: bool = True,
    ) -> Any | None:
        url = f"{self._base}/{path.lstrip('/')}"
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            try:
                resp = await client.get(url, params=dict(params or {}))
                if resp.status_code == 404 and allow_missing:
                    logger.debug("Not found upstream: %s", url)
                    return None
                resp.raise_for_status()
            except httpx.HTTPStatusError as ex:
                logger.warning(
                    "Request failed status=%s url=%s",
                    ex.response.status_code,
                    url,
                )
                raise UpstreamFailure(
                    operation,
                    f"upstream returned HTTP {ex.response.status_code}",
                    status_code=ex.response.status_code,
                    url=url,
                ) from ex
            except httpx.RequestError as ex:
                logger.warning("Transport error url=%s: %s", url, ex)
                raise UpstreamFailure(
                    operation, f"transport error: {ex}", url=url
                ) from ex

            try:
                return resp.json()
            except ValueError as ex:
                logger.warning("Undecodable response url=%s: %s", url, ex)
                raise UpstreamFailure(
                    operation,
                    "upstream returned invalid JSON",
                    status_code=resp.status_code,
                    url=url,
                ) from ex

    async def list_entities(self, limit: int, offset: int = 0) -> dict[str, Any]:
        """One page of the entity listing: ``{"count": int, "entries": [...]}``."""
        data = await self._get(
            "pokemon",
            operation="listing",
            params={"limit": limit, "offset": offset},
            allow_missing=False,
        )
        return {
            "count": int(data.get("count", 0)),
            "entries": list(data.get("results") or []),
        }

    async def _get_by_key(
        self, collection: str, identifier: str | int, *, operation: str
    ) -> Any | None:
        key = _normalize_key(identifier)
        if key is None:
            logger.debug("Unaddressable %s key %r", collection, identifier)
            return None
        return await self._get(f"{collection}/{key}", operation=operation)

    async def get_entity(self, identifier: str | int) -> dict[str, Any] | None:
        return await self._get_by_key(
            "pokemon", identifier, operation="single-entity fetch"
        )

    async def get_metadata(self, identifier: str | int) -> dict[str, Any] | None:
        return await self._get_by_key(
            "pokemon-species", identifier, operation="metadata fetch"
        )

    async def list_group_members(self, group_key: str) -> list[dict[str, Any]] | None:
        """Full, unpaginated membership of a group, in upstream order."""
        data = await self._get_by_key("type", group_key, operation="group fetch")
        if data is None:
            return None
        return [
            {"name": member["pokemon"]["name"]}
            for member in data.get("pokemon") or []
        ]

    async def list_groups(self) -> list[dict[str, Any]]:
        data = await self._get(
            "type",
            operation="group listing",
            # The group collection is small; ask for all of it in one page.
            params={"limit": 100},
            allow_missing=False,
        )
        return list(data.get("results") or [])
