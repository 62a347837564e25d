from __future__ import annotations

from dataclasses import asdict
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from pokedex.contracts.records import (
    CanonicalRecord,
    GroupSummary,
    PageResult,
    SearchResult,
)


class AttributeSchema(BaseModel):
    name: str
    value: int


class TraitSchema(BaseModel):
    name: str
    is_secondary: bool = False


class RecordSchema(BaseModel):
    """Canonical record as served over HTTP."""

    id: int = Field(..., description="Stable upstream identifier")
    name: str = Field(..., description="Lowercase canonical key")
    display_name: str
    groups: list[str] = Field(..., min_length=1)
    primary_measure: float = Field(..., ge=0, description="Height (m)")
    secondary_measure: float = Field(..., ge=0, description="Weight (kg)")
    attributes: list[AttributeSchema] = Field(default_factory=list)
    traits: list[TraitSchema] = Field(default_factory=list)
    description: str
    classification: str
    color_key: str
    popularity_score: int
    friendliness_score: int
    image: str | None = None
    thumbnail: str | None = None

    @staticmethod
    def from_record(record: CanonicalRecord) -> "RecordSchema":
        return RecordSchema.model_validate(asdict(record))


class PageSchema(BaseModel):
    items: list[RecordSchema | None]
    total_count: int
    current_page: int
    total_pages: int
    has_next_page: bool
    has_prev_page: bool
    limit: int

    model_config = ConfigDict(extra="forbid")

    @staticmethod
    def from_page(page: PageResult) -> "PageSchema":
        return PageSchema(
            items=[
                RecordSchema.from_record(r) if r is not None else None
                for r in page.items
            ],
            total_count=page.total_count,
            current_page=page.current_page,
            total_pages=page.total_pages,
            has_next_page=page.has_next_page,
            has_prev_page=page.has_prev_page,
            limit=page.limit,
        )


class SearchSchema(BaseModel):
    kind: Literal["exact", "scan"]
    query: str
    items: list[RecordSchema]
    total_count: int

    @staticmethod
    def from_result(result: SearchResult, query: str) -> "SearchSchema":
        return SearchSchema(
            kind=result.kind,
            query=query,
            items=[RecordSchema.from_record(r) for r in result.items],
            total_count=result.total_count,
        )


class GroupSchema(BaseModel):
    key: str
    display_name: str

    @staticmethod
    def from_summary(group: GroupSummary) -> "GroupSchema":
        return GroupSchema(key=group.key, display_name=group.display_name)
