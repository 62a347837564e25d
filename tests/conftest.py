# tests/conftest.py
from __future__ import annotations

from typing import Any

import pytest

from pokedex.core.errors import UpstreamFailure


def entity_payload(
    name: str,
    id: int,
    *,
    types: tuple[str, ...] = ("normal",),
    height: int = 10,
    weight: int = 100,
    stats: dict[str, int] | None = None,
    abilities: tuple[tuple[str, bool], ...] = (("run-away", False),),
    artwork: str | None = "https://img.example/artwork.png",
    sprite: str | None = "https://img.example/sprite.png",
) -> dict[str, Any]:
    stats = stats if stats is not None else {"hp": 35, "special-attack": 50}
    return {
        "id": id,
        "name": name,
        "height": height,
        "weight": weight,
        "types": [
            {"slot": i + 1, "type": {"name": t, "url": f"/type/{t}"}}
            for i, t in enumerate(types)
        ],
        "stats": [
            {"base_stat": v, "effort": 0, "stat": {"name": k}} for k, v in stats.items()
        ],
        "abilities": [
            {"slot": i + 1, "is_hidden": hidden, "ability": {"name": a}}
            for i, (a, hidden) in enumerate(abilities)
        ],
        "sprites": {
            "front_default": sprite,
            "other": {"official-artwork": {"front_default": artwork}},
        },
    }


def species_payload(
    id: int,
    *,
    flavor: str = "A small\fcreature\nthat sparks.",
    genus: str = "Mouse Pokémon",
    color: str = "yellow",
    capture_rate: int = 190,
    base_happiness: int = 70,
) -> dict[str, Any]:
    return {
        "id": id,
        "flavor_text_entries": [
            {"flavor_text": "Une petite créature.", "language": {"name": "fr"}},
            {"flavor_text": flavor, "language": {"name": "en"}},
        ],
        "genera": [{"genus": genus, "language": {"name": "en"}}],
        "color": {"name": color},
        "capture_rate": capture_rate,
        "base_happiness": base_happiness,
    }


class FakeCatalogClient:
    """In-memory stand-in for PokeApiClient that records every call."""

    base_url = "http://catalog.test"

    def __init__(
        self,
        entities: list[dict[str, Any]] | None = None,
        species: dict[int, dict[str, Any]] | None = None,
        groups: dict[str, list[str]] | None = None,
        *,
        listing: list[str] | None = None,
        fail_metadata: bool = False,
        fail_entities: set[str] | None = None,
        fail_listing: bool = False,
    ) -> None:
        self.entities = {e["name"]: e for e in entities or []}
        self.species = species or {}
        self.groups = groups or {}
        # Listing may name entries that have no entity payload.
        self.listing = listing if listing is not None else list(self.entities)
        self.fail_metadata = fail_metadata
        self.fail_entities = fail_entities or set()
        self.fail_listing = fail_listing
        self.calls: list[tuple[str, Any]] = []

    async def list_entities(self, limit: int, offset: int = 0) -> dict[str, Any]:
        self.calls.append(("list_entities", (limit, offset)))
        if self.fail_listing:
            raise UpstreamFailure("listing", "boom", status_code=500)
        window = self.listing[offset : offset + limit]
        return {
            "count": len(self.listing),
            "entries": [{"name": n, "url": f"/pokemon/{n}"} for n in window],
        }

    async def get_entity(self, identifier):
        key = str(identifier).strip().lower()
        self.calls.append(("get_entity", key))
        if key in self.fail_entities:
            raise UpstreamFailure("single-entity fetch", "boom", status_code=500)
        return self.entities.get(key)

    async def get_metadata(self, identifier):
        self.calls.append(("get_metadata", identifier))
        if self.fail_metadata:
            raise UpstreamFailure("metadata fetch", "boom", status_code=503)
        return self.species.get(int(identifier))

    async def list_group_members(self, group_key: str):
        key = group_key.strip().lower()
        self.calls.append(("list_group_members", key))
        if key not in self.groups:
            return None
        return [{"name": n} for n in self.groups[key]]

    async def list_groups(self):
        self.calls.append(("list_groups", None))
        return [{"name": k, "url": f"/type/{k}"} for k in self.groups]

    def count(self, method: str) -> int:
        return sum(1 for name, _ in self.calls if name == method)


@pytest.fixture
def pikachu() -> dict[str, Any]:
    return entity_payload(
        "pikachu",
        25,
        types=("electric",),
        height=4,
        weight=60,
        stats={"hp": 35, "attack": 55, "special-attack": 50, "speed": 90},
        abilities=(("lightning-rod", True), ("static", False)),
    )


@pytest.fixture
def starter_client(pikachu) -> FakeCatalogClient:
    """Small catalog: pikachu plus the charmander line and a water type."""
    entities = [
        entity_payload("bulbasaur", 1, types=("grass", "poison")),
        entity_payload("charmander", 4, types=("fire",)),
        entity_payload("charmeleon", 5, types=("fire",)),
        entity_payload("charizard", 6, types=("fire", "flying")),
        entity_payload("squirtle", 7, types=("water",)),
        pikachu,
    ]
    return FakeCatalogClient(
        entities,
        species={25: species_payload(25)},
        groups={
            "fire": ["charmander", "charmeleon", "charizard"],
            "water": ["squirtle"],
            "unknown": [],
            "shadow": [],
        },
    )
