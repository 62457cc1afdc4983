"""Field resolution for global-search rows.

Frappe's global search returns loosely shaped rows: which keys are present
depends on the DocType and on the server version. The functions here derive
the DocType, document name and display label through ordered fallbacks, so
every caller renders a row the same way.

A field counts only when it holds text that is non-empty after stripping.
Numbers, booleans and None are skipped even if the key exists.
"""

import re
from collections.abc import Iterable
from typing import Any

from erplookup.domain.search.icons import resolve_icon
from erplookup.domain.search.model import FieldValue, ResolvedResult, SearchResult

UNKNOWN = "Unknown"
DEFAULT_DOCTYPE = "Document"
UNKNOWN_DOCUMENT = "Unknown Document"

DOCTYPE_FIELDS = ("dt", "document_type", "type")
NAME_FIELDS = ("name", "value", "title")
LABEL_FIELDS = ("label", "title")

_DESCRIPTION_PREFIX = re.compile(r"^([^:]+):")


def _text(value: FieldValue) -> str | None:
    """Return stripped text, or None if the value is not usable text."""
    if isinstance(value, str):
        stripped = value.strip()
        if stripped:
            return stripped
    return None


def _first_text(result: SearchResult, fields: Iterable[str]) -> str | None:
    for field in fields:
        text = _text(result.get(field))
        if text is not None:
            return text
    return None


def doctype_from_description(description: str) -> str:
    """Extract the DocType from a "DocType: content" description.

    Returns "Unknown" when the description has no leading segment.
    """
    match = _DESCRIPTION_PREFIX.match(description)
    return match.group(1).strip() if match else UNKNOWN


def resolve_entity_type(result: SearchResult) -> str:
    """Determine the DocType of a search row.

    Order: ``doctype``, the prefix of ``description``, then ``dt``,
    ``document_type`` and ``type``. Falls back to "Document".
    """
    if doctype := _text(result.get("doctype")):
        return doctype

    description = result.get("description")
    if isinstance(description, str):
        extracted = doctype_from_description(description)
        if extracted and extracted != UNKNOWN:
            return extracted

    return _first_text(result, DOCTYPE_FIELDS) or DEFAULT_DOCTYPE


def resolve_canonical_id(result: SearchResult) -> str:
    """Document name: ``name``, ``value``, ``title``, else "Unknown Document"."""
    return _first_text(result, NAME_FIELDS) or UNKNOWN_DOCUMENT


def resolve_display_label(result: SearchResult) -> str:
    """Display label: ``label``, ``title``, else the document name."""
    return _first_text(result, LABEL_FIELDS) or resolve_canonical_id(result)


def resolve_subtitle(result: SearchResult) -> str:
    return _first_text(result, ("content", "description")) or ""


def resolve(result: SearchResult) -> ResolvedResult:
    """Resolve everything needed to render one search row."""
    doctype = resolve_entity_type(result)
    return ResolvedResult(
        doctype=doctype,
        name=resolve_canonical_id(result),
        label=resolve_display_label(result),
        subtitle=resolve_subtitle(result),
        icon=resolve_icon(doctype),
    )


def to_search_result(hit: dict[str, Any]) -> dict[str, FieldValue]:
    """Normalize a raw global-search hit into a SearchResult.

    Fills ``value``, ``label`` and a "DocType: content" ``description``
    from the hit, then lets every scalar field of the hit override them.
    Nested values (lists, dicts) are dropped.
    """
    name = hit.get("name") or hit.get("title") or UNKNOWN
    title = hit.get("title") or hit.get("name") or UNKNOWN
    doctype = hit.get("doctype")
    content = hit.get("content") or hit.get("description") or ""

    result: dict[str, FieldValue] = {
        "value": name,
        "label": title,
        "description": f"{doctype if isinstance(doctype, str) else ''}: {content}",
    }
    for key, value in hit.items():
        if value is None or isinstance(value, str | int | float | bool):
            result[key] = value
    return result
