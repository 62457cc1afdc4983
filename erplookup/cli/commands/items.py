"""Document listing for a single DocType."""

import cyclopts

from erplookup.cli.console import get_console
from erplookup.cli.util.client import get_client
from erplookup.cli.util.errors import fail
from erplookup.domain.shared.error import ERPLookupError

app = cyclopts.App(name="items", help="List documents of a DocType")

LIST_LIMIT = 50
SEARCH_LIMIT = 20


@app.default
def items(
    doctype: str,
    query: str = "",
    /,
    limit: int | None = None,
) -> None:
    """List or search documents of a DocType.

    Without a query the most recent documents are listed. With a query,
    documents whose title field contains it are returned.

    Args:
        doctype: DocType name (e.g. 'Sales Invoice').
        query: Text to match against the DocType's title field.
        limit: Maximum number of documents (default 50 when listing, 20 when searching).
    """
    console = get_console()

    try:
        with get_client() as client:
            with console.status(f"Loading {doctype}..."):
                if query.strip():
                    documents = client.search_doctype_items(
                        doctype, query.strip(), limit or SEARCH_LIMIT
                    )
                else:
                    documents = client.get_doctype_items(doctype, limit or LIST_LIMIT)
            new_url = client.new_document_url(doctype)
    except ERPLookupError as e:
        fail(console, e)

    if not documents:
        console.empty_state(
            f"No {doctype} Items Found",
            "Try adjusting your search" if query.strip() else "This DocType has no items yet",
        )
        console.info(f"Create one: {new_url}")
        return

    console.document_list(doctype, documents)
    console.info(f"Use 'erp show \"{doctype}\" <name>' to view a document")
