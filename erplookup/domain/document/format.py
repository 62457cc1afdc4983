"""Display helpers for Frappe documents."""

import json
import re
from datetime import datetime
from typing import Any

EMPTY = "—"

# Shown as metadata next to the document rather than in the field list.
METADATA_FIELDS = ("status", "docstatus", "owner", "creation", "modified")

SUBTITLE_FIELDS = (
    "title",
    "subject",
    "description",
    "status",
    "customer",
    "supplier",
    "item_name",
    "full_name",
    "email",
)


def _is_blank(value: Any) -> bool:
    return value is None or value == ""


def format_value(value: Any) -> str:
    """Format a document field value for display."""
    if value is None:
        return EMPTY
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, dict | list):
        return json.dumps(value, indent=2, default=str)
    if isinstance(value, str) and "T" in value and ":" in value:
        try:
            return datetime.fromisoformat(value).strftime("%Y-%m-%d %H:%M")
        except ValueError:
            return value
    return str(value)


def humanize_field(fieldname: str) -> str:
    """'posting_date' -> 'Posting Date'."""
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), fieldname.replace("_", " "))


def split_document_fields(
    document: dict[str, Any],
) -> tuple[dict[str, str], dict[str, str]]:
    """Split a document into (metadata, fields), both humanized and formatted.

    Private fields (leading underscore) and empty values are dropped.
    """
    metadata = {
        humanize_field(key): format_value(document[key])
        for key in METADATA_FIELDS
        if not _is_blank(document.get(key))
    }
    fields = {
        humanize_field(key): format_value(value)
        for key, value in document.items()
        if key not in METADATA_FIELDS and not key.startswith("_") and not _is_blank(value)
    }
    return metadata, fields


def item_subtitle(item: dict[str, Any]) -> str:
    """Pick a meaningful one-line subtitle for a document list row."""
    for field in SUBTITLE_FIELDS:
        value = item.get(field)
        if value and isinstance(value, str):
            return value

    creation = item.get("creation")
    if not creation:
        return ""
    try:
        created = datetime.fromisoformat(str(creation))
    except ValueError:
        return f"Created: {creation}"
    return f"Created: {created.strftime('%Y-%m-%d')}"
