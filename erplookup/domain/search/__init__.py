"""Search row resolution and presentation."""

from erplookup.domain.search.icons import resolve_icon
from erplookup.domain.search.model import Color, Glyph, Icon, ResolvedResult, SearchResult
from erplookup.domain.search.resolver import (
    resolve,
    resolve_canonical_id,
    resolve_display_label,
    resolve_entity_type,
    to_search_result,
)

__all__ = [
    "Color",
    "Glyph",
    "Icon",
    "ResolvedResult",
    "SearchResult",
    "resolve",
    "resolve_canonical_id",
    "resolve_display_label",
    "resolve_entity_type",
    "resolve_icon",
    "to_search_result",
]
