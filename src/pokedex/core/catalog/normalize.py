# pokedex/core/catalog/normalize.py
"""
Normalization of raw upstream payloads into :class:`CanonicalRecord`.

Everything here is pure: no I/O, no clock, no randomness. The same
entity/metadata pair always produces an equal record.
"""
from __future__ import annotations

import re
from typing import Any, Mapping

from pokedex.contracts.records import Attribute, CanonicalRecord, Trait

DEFAULT_DESCRIPTION = "No description available."
DEFAULT_CLASSIFICATION = "Unknown"
DEFAULT_COLOR = "gray"
DEFAULT_LANGUAGE = "en"
FALLBACK_GROUP = "unknown"

ATTRIBUTE_LABELS: dict[str, str] = {
    "hp": "HP",
    "attack": "Attack",
    "defense": "Defense",
    "special-attack": "Sp. Atk",
    "special-defense": "Sp. Def",
    "speed": "Speed",
}

# Upstream flavor text is wrapped for the handheld screens with form feeds,
# newlines and soft hyphens.
_WRAP_MARKERS = re.compile(r"[\f\n\r\t\v\u00ad\u00a0]")
_MULTISPACE = re.compile(r" {2,}")


def format_name(key: str) -> str:
    """``"mr-mime"`` -> ``"Mr Mime"``."""
    return " ".join(part.capitalize() for part in key.split("-") if part)


def format_attribute_name(key: str) -> str:
    return ATTRIBUTE_LABELS.get(key, format_name(key))


def clean_flavor_text(text: str) -> str:
    """Replace line-wrap markers with spaces, collapse space runs and trim the ends."""
    return _MULTISPACE.sub(" ", _WRAP_MARKERS.sub(" ", text)).strip()


def _localized(
    entries: Any, field: str, language: str = DEFAULT_LANGUAGE
) -> str | None:
    for entry in entries or []:
        if (entry.get("language") or {}).get("name") == language:
            value = entry.get(field)
            if value:
                return value
    return None


def _tenths(value: Any) -> float:
    try:
        return max(float(value), 0.0) / 10
    except (TypeError, ValueError):
        return 0.0


def _groups(entity: Mapping[str, Any]) -> tuple[str, ...]:
    slots = sorted(entity.get("types") or [], key=lambda t: t.get("slot", 0))
    groups = tuple(t["type"]["name"] for t in slots if t.get("type"))
    return groups or (FALLBACK_GROUP,)


def _attributes(entity: Mapping[str, Any]) -> tuple[Attribute, ...]:
    return tuple(
        Attribute(
            name=format_attribute_name(s["stat"]["name"]),
            value=int(s.get("base_stat") or 0),
        )
        for s in entity.get("stats") or []
    )


def _traits(entity: Mapping[str, Any]) -> tuple[Trait, ...]:
    slots = sorted(entity.get("abilities") or [], key=lambda a: a.get("slot", 0))
    return tuple(
        Trait(
            name=format_name(a["ability"]["name"]),
            is_secondary=bool(a.get("is_hidden", False)),
        )
        for a in slots
    )


def _images(entity: Mapping[str, Any]) -> tuple[str | None, str | None]:
    sprites = entity.get("sprites") or {}
    thumbnail = sprites.get("front_default")
    artwork = ((sprites.get("other") or {}).get("official-artwork") or {}).get(
        "front_default"
    )
    return artwork or thumbnail, thumbnail


def build_canonical_record(
    entity: Mapping[str, Any],
    metadata: Mapping[str, Any] | None = None,
) -> CanonicalRecord:
    """Merge an entity payload and its optional metadata into one record."""
    image, thumbnail = _images(entity)
    name = str(entity["name"]).lower()

    description = DEFAULT_DESCRIPTION
    classification = DEFAULT_CLASSIFICATION
    color_key = DEFAULT_COLOR
    popularity = 0
    friendliness = 0

    if metadata:
        flavor = _localized(metadata.get("flavor_text_entries"), "flavor_text")
        if flavor:
            description = clean_flavor_text(flavor) or DEFAULT_DESCRIPTION
        classification = (
            _localized(metadata.get("genera"), "genus") or DEFAULT_CLASSIFICATION
        )
        color_key = (metadata.get("color") or {}).get("name") or DEFAULT_COLOR
        popularity = int(metadata.get("capture_rate") or 0)
        friendliness = int(metadata.get("base_happiness") or 0)

    return CanonicalRecord(
        id=int(entity["id"]),
        name=name,
        display_name=format_name(name),
        groups=_groups(entity),
        primary_measure=_tenths(entity.get("height")),
        secondary_measure=_tenths(entity.get("weight")),
        attributes=_attributes(entity),
        traits=_traits(entity),
        description=description,
        classification=classification,
        color_key=color_key,
        popularity_score=popularity,
        friendliness_score=friendliness,
        image=image,
        thumbnail=thumbnail,
    )
