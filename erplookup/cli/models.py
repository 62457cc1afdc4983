"""Pydantic models for the CLI.

These are CLI-specific models, separate from the domain models.
"""

from pydantic import BaseModel


class CachedHit(BaseModel):
    """A resolved search row, kept for `erp show <#>`."""

    doctype: str
    name: str
    label: str
    subtitle: str = ""


class SearchCache(BaseModel):
    """Cached search results for numbered lookup."""

    query: str
    doctype: str | None = None
    searched_at: str
    results: list[CachedHit]
