# pokedex/contracts/__init__.py
"""
Public data contracts surfaced by the aggregation layer.
"""
from pokedex.contracts.records import (
    Attribute,
    CanonicalRecord,
    ExactMatch,
    GroupSummary,
    PageResult,
    ScanMatch,
    SearchResult,
    Trait,
)

__all__ = [
    "Attribute",
    "CanonicalRecord",
    "ExactMatch",
    "GroupSummary",
    "PageResult",
    "ScanMatch",
    "SearchResult",
    "Trait",
]
