"""Show command for viewing document details."""

import webbrowser
from typing import Annotated

import cyclopts

from erplookup.cli.console import get_console
from erplookup.cli.util.client import get_client, resolve_ref
from erplookup.cli.util.errors import fail
from erplookup.domain.shared.error import ERPLookupError

app = cyclopts.App(name="show", help="Show document details")


@app.default
def show(
    ref: str,
    name: str | None = None,
    /,
    as_json: Annotated[bool, cyclopts.Parameter(name="--json")] = False,
    open_browser: Annotated[bool, cyclopts.Parameter(name="--open")] = False,
) -> None:
    """Show a document from the last search or by DocType and name.

    Args:
        ref: Result number from the last search (1, 2, ...) or a DocType.
        name: Document name, when ref is a DocType.
        as_json: Print the raw document as JSON.
        open_browser: Also open the document in ERPNext.
    """
    console = get_console()

    try:
        doctype, doc_name = resolve_ref(ref, name)
        with get_client() as client:
            with console.status(f"Loading {doc_name}..."):
                document = client.get_document(doctype, doc_name)
            url = client.document_url(doctype, str(document.get("name") or doc_name))
    except ERPLookupError as e:
        fail(console, e)

    if as_json:
        console.json(document)
    else:
        console.document_detail(doctype, doc_name, document, url)

    if open_browser:
        webbrowser.open(url)
