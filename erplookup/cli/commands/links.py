"""Commands that print or open ERPNext desk URLs."""

import webbrowser
from typing import Annotated

import cyclopts

from erplookup.cli.console import get_console
from erplookup.cli.util.client import get_client, resolve_ref
from erplookup.cli.util.errors import fail
from erplookup.domain.shared.error import ERPLookupError


def _document_url(ref: str, name: str | None) -> str:
    console = get_console()
    try:
        doctype, doc_name = resolve_ref(ref, name)
        with get_client() as client:
            return client.document_url(doctype, doc_name)
    except ERPLookupError as e:
        fail(console, e)


def open_document(ref: str, name: str | None = None, /) -> None:
    """Open a document in ERPNext.

    Args:
        ref: Result number from the last search or a DocType.
        name: Document name, when ref is a DocType.
    """
    url = _document_url(ref, name)
    get_console().info(f"Opening {url}")
    webbrowser.open(url)


def url(ref: str, name: str | None = None, /) -> None:
    """Print the ERPNext URL of a document.

    Args:
        ref: Result number from the last search or a DocType.
        name: Document name, when ref is a DocType.
    """
    get_console().print(_document_url(ref, name), markup=False, highlight=False)


def new(
    doctype: str,
    /,
    open_browser: Annotated[bool, cyclopts.Parameter(name="--open")] = False,
) -> None:
    """Print (or open) the URL for creating a new document.

    Args:
        doctype: DocType name.
        open_browser: Open the form instead of printing its URL.
    """
    console = get_console()
    try:
        with get_client() as client:
            new_url = client.new_document_url(doctype)
    except ERPLookupError as e:
        fail(console, e)

    if open_browser:
        webbrowser.open(new_url)
    else:
        console.print(new_url, markup=False, highlight=False)
