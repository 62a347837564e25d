# pokedex/core/catalog/service.py
"""
CatalogService – aggregation layer over the upstream catalog client.

Turns listing/lookup/group endpoints into canonical records, with
pagination, two-phase search and client-side group paging.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator, Protocol

from pokedex.contracts.records import (
    CanonicalRecord,
    ExactMatch,
    GroupSummary,
    PageResult,
    ScanMatch,
    SearchResult,
)
from pokedex.core.catalog.fanout import gather_bounded
from pokedex.core.catalog.normalize import build_canonical_record, format_name
from pokedex.core.catalog.pagination import page_offset, validate_page
from pokedex.core.errors import UpstreamFailure

logger = logging.getLogger(__name__)

# Groups the upstream exposes that have no members worth browsing.
HIDDEN_GROUPS = frozenset({"unknown", "shadow"})


class CatalogClient(Protocol):
    async def list_entities(self, limit: int, offset: int = 0) -> dict[str, Any]: ...

    async def get_entity(self, identifier: str | int) -> dict[str, Any] | None: ...

    async def get_metadata(self, identifier: str | int) -> dict[str, Any] | None: ...

    async def list_group_members(
        self, group_key: str
    ) -> list[dict[str, Any]] | None: ...

    async def list_groups(self) -> list[dict[str, Any]]: ...


@contextmanager
def _operation(name: str) -> Iterator[None]:
    """Re-label upstream failures with the caller-facing operation name."""
    try:
        yield
    except UpstreamFailure as exc:
        if exc.operation == name:
            raise
        raise UpstreamFailure(
            name,
            f"{exc.operation}: {exc.message}",
            status_code=exc.status_code,
            url=exc.url,
        ) from exc


class CatalogService:
    """Facade for listing, lookup, search and group browsing."""

    def __init__(
        self,
        *,
        client: CatalogClient,
        default_limit: int = 20,
        max_limit: int | None = 100,
        search_scan_limit: int = 1000,
        search_hydration_limit: int = 20,
        max_concurrency: int | None = 20,
    ) -> None:
        self._client = client
        self._default_limit = default_limit
        self._max_limit = max_limit
        self._search_scan_limit = search_scan_limit
        self._search_hydration_limit = search_hydration_limit
        self._max_concurrency = max_concurrency

    @classmethod
    def from_settings(cls, client: CatalogClient, settings: Any) -> "CatalogService":
        return cls(
            client=client,
            default_limit=settings.default_page_limit,
            max_limit=settings.max_page_limit,
            search_scan_limit=settings.max_search_limit,
            search_hydration_limit=settings.search_hydration_limit,
            max_concurrency=settings.max_concurrency,
        )

    @property
    def client(self) -> CatalogClient:
        return self._client

    @property
    def default_limit(self) -> int:
        return self._default_limit

    # -- single entity ---------------------------------------------------

    async def _attach_metadata(self, entity_id: int) -> dict[str, Any] | None:
        """Best-effort metadata lookup: absence and failure both yield None."""
        try:
            metadata = await self._client.get_metadata(entity_id)
        except UpstreamFailure as exc:
            logger.info("Metadata unavailable for entity %s: %s", entity_id, exc)
            return None
        if metadata is None:
            logger.debug("No metadata for entity %s", entity_id)
        return metadata

    async def get_details(self, identifier: str | int) -> CanonicalRecord | None:
        entity = await self._client.get_entity(identifier)
        if not isinstance(entity, dict) or "id" not in entity or "name" not in entity:
            if entity is not None:
                logger.warning("Lookup %r returned a non-entity payload", identifier)
            return None
        metadata = await self._attach_metadata(entity["id"])
        return build_canonical_record(entity, metadata)

    async def _hydrate(self, names: list[str]) -> list[CanonicalRecord | None]:
        return await gather_bounded(
            self.get_details, names, max_concurrency=self._max_concurrency
        )

    # -- listing ---------------------------------------------------------

    async def get_list_page(
        self, page: int = 1, limit: int | None = None
    ) -> PageResult[CanonicalRecord | None]:
        """One page of the primary listing.

        Items stay index-aligned with the upstream page: an entry whose
        hydration comes back absent is kept as ``None``.
        """
        if limit is None:
            limit = self._default_limit
        validate_page(page, limit, max_limit=self._max_limit)
        offset = page_offset(page, limit)

        with _operation("listing"):
            listing = await self._client.list_entities(limit, offset)
            items = await self._hydrate([e["name"] for e in listing["entries"]])

        return PageResult.build(
            items, total_count=listing["count"], page=page, limit=limit
        )

    # -- search ----------------------------------------------------------

    async def search(self, query: str) -> SearchResult:
        term = (query or "").strip().lower()
        if not term:
            return ScanMatch(query="")

        with _operation("search"):
            record = await self.get_details(term)
            if record is not None:
                logger.debug("Search '%s' resolved as exact match", term)
                return ExactMatch(record=record)

            listing = await self._client.list_entities(self._search_scan_limit, 0)
            matches = [
                e["name"] for e in listing["entries"] if term in e["name"].lower()
            ]
            hydrated = await self._hydrate(matches[: self._search_hydration_limit])

        logger.debug(
            "Search '%s' scanned %d entries, %d match(es)",
            term,
            len(listing["entries"]),
            len(matches),
        )
        return ScanMatch(
            query=term,
            items=tuple(r for r in hydrated if r is not None),
            total_count=len(matches),
        )

    # -- groups ----------------------------------------------------------

    async def get_group_page(
        self, group_key: str, page: int = 1, limit: int | None = None
    ) -> PageResult[CanonicalRecord] | None:
        """Page through a group's membership, sliced locally.

        Returns None when the group does not exist upstream.
        """
        if limit is None:
            limit = self._default_limit
        validate_page(page, limit, max_limit=self._max_limit)
        offset = page_offset(page, limit)

        with _operation("group fetch"):
            members = await self._client.list_group_members(group_key)
            if members is None:
                return None
            window = [m["name"] for m in members[offset : offset + limit]]
            hydrated = await self._hydrate(window)

        return PageResult.build(
            [r for r in hydrated if r is not None],
            total_count=len(members),
            page=page,
            limit=limit,
        )

    async def list_groups(self) -> list[GroupSummary]:
        groups = await self._client.list_groups()
        return [
            GroupSummary(key=g["name"], display_name=format_name(g["name"]))
            for g in groups
            if g["name"] not in HIDDEN_GROUPS
        ]
