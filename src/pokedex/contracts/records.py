# pokedex/contracts/records.py
"""
Canonical records and page/search result shapes.

Records are frozen: they are built once per request from the upstream
payloads and never mutated afterwards.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Literal, Sequence, TypeVar, Union

from pokedex.core.catalog.pagination import page_bounds

T = TypeVar("T")


@dataclass(frozen=True)
class Attribute:
    """A named numeric attribute (base stat)."""

    name: str
    value: int


@dataclass(frozen=True)
class Trait:
    """A named trait (ability). ``is_secondary`` marks hidden abilities."""

    name: str
    is_secondary: bool = False


@dataclass(frozen=True)
class CanonicalRecord:
    """Normalized view of one catalog entity.

    Attributes:
        id: Stable upstream identifier.
        name: Lowercase canonical key.
        display_name: Human-formatted name (``"mr-mime"`` -> ``"Mr Mime"``).
        groups: Type keys ordered by upstream slot; the first is primary.
        primary_measure: Height in metres.
        secondary_measure: Weight in kilograms.
        attributes: Base stats, upstream order.
        traits: Abilities, slot order.
        description: English flavor text with line-wrap markers removed.
        classification: English genus.
        color_key: Species colour name.
        popularity_score: Capture rate.
        friendliness_score: Base happiness.
        image: High-resolution artwork, falling back to ``thumbnail``.
        thumbnail: Default front sprite.
    """

    id: int
    name: str
    display_name: str
    groups: tuple[str, ...]
    primary_measure: float
    secondary_measure: float
    attributes: tuple[Attribute, ...] = ()
    traits: tuple[Trait, ...] = ()
    description: str = "No description available."
    classification: str = "Unknown"
    color_key: str = "gray"
    popularity_score: int = 0
    friendliness_score: int = 0
    image: str | None = None
    thumbnail: str | None = None

    @property
    def primary_group(self) -> str:
        return self.groups[0]


@dataclass(frozen=True)
class GroupSummary:
    key: str
    display_name: str


@dataclass(frozen=True)
class PageResult(Generic[T]):
    """One page of results plus navigation flags."""

    items: tuple[T, ...]
    total_count: int
    current_page: int
    total_pages: int
    has_next_page: bool
    has_prev_page: bool
    limit: int

    @classmethod
    def build(
        cls,
        items: Sequence[T],
        *,
        total_count: int,
        page: int,
        limit: int,
    ) -> "PageResult[T]":
        bounds = page_bounds(page, limit, total_count)
        return cls(
            items=tuple(items),
            total_count=total_count,
            current_page=page,
            total_pages=bounds.total_pages,
            has_next_page=bounds.has_next_page,
            has_prev_page=bounds.has_prev_page,
            limit=limit,
        )


@dataclass(frozen=True)
class ExactMatch:
    """Search resolved the query directly as an identifier."""

    record: CanonicalRecord
    kind: Literal["exact"] = field(default="exact", init=False)

    @property
    def items(self) -> tuple[CanonicalRecord, ...]:
        return (self.record,)

    @property
    def total_count(self) -> int:
        return 1


@dataclass(frozen=True)
class ScanMatch:
    """Search fell back to a substring scan over the listing.

    ``total_count`` is the size of the full match set; ``items`` holds only
    the hydrated prefix of it and may be shorter.
    """

    query: str
    items: tuple[CanonicalRecord, ...] = ()
    total_count: int = 0
    kind: Literal["scan"] = field(default="scan", init=False)


SearchResult = Union[ExactMatch, ScanMatch]
