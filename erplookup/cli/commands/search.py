"""Global search command."""

import logging

import cyclopts

from erplookup.cli.console import get_console
from erplookup.cli.models import CachedHit
from erplookup.cli.util import ERPLookupPaths
from erplookup.cli.util.client import get_client
from erplookup.cli.util.errors import fail
from erplookup.domain.search import resolve, to_search_result
from erplookup.domain.shared.error import ERPLookupError

logger = logging.getLogger(__name__)

app = cyclopts.App(name="search", help="Search ERPNext")


@app.default
def search(
    query: str = "",
    /,
    doctype: str | None = None,
    limit: int = 20,
) -> None:
    """Full-text search across ERPNext documents.

    Args:
        query: Search text.
        doctype: Only return documents of this DocType (e.g. 'Customer').
        limit: Maximum number of results.
    """
    console = get_console()

    if not query.strip():
        if doctype:
            console.empty_state(
                f"Search {doctype}",
                f"Enter your search query to find {doctype} documents",
            )
        else:
            console.empty_state(
                "Type to search",
                "Enter your search query to find DocTypes, documents, and more",
            )
        return

    try:
        with get_client() as client:
            with console.status("Searching..."):
                hits = client.global_search(query.strip(), doctype=doctype, limit=limit)
    except ERPLookupError as e:
        fail(console, e)

    results = [resolve(to_search_result(hit)) for hit in hits]
    logger.debug("Search %r returned %d results", query, len(results))

    if not results:
        console.empty_state(
            "No Results Found",
            f"No {doctype} documents found. Try different keywords."
            if doctype
            else "Try searching with different keywords",
        )
        return

    console.search_results(results)

    ERPLookupPaths().write_search_cache(
        query=query,
        doctype=doctype,
        results=[
            CachedHit(doctype=r.doctype, name=r.name, label=r.label, subtitle=r.subtitle)
            for r in results
        ],
    )
    console.search_hint()
