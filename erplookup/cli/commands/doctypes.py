"""DocType listing command."""

import cyclopts

from erplookup.cli.console import get_console
from erplookup.cli.util.client import get_client
from erplookup.cli.util.errors import fail
from erplookup.domain.doctype.model import DocType
from erplookup.domain.shared.error import ERPLookupError

app = cyclopts.App(name="doctypes", help="List DocTypes")


def filter_doctypes(
    doctypes: list[DocType],
    text: str = "",
    custom_only: bool = False,
) -> list[DocType]:
    """Case-insensitive substring match on the DocType name."""
    needle = text.lower()
    return [
        d
        for d in doctypes
        if needle in d.name.lower() and (d.custom or not custom_only)
    ]


@app.default
def doctypes(
    text: str = "",
    /,
    custom_only: bool = False,
) -> None:
    """List DocTypes (child tables excluded).

    Args:
        text: Only show DocTypes whose name contains this text.
        custom_only: Only show custom DocTypes.
    """
    console = get_console()

    try:
        with get_client() as client:
            with console.status("Loading DocTypes..."):
                all_doctypes = client.get_doctypes()
    except ERPLookupError as e:
        fail(console, e)

    matched = filter_doctypes(all_doctypes, text, custom_only)
    if not matched:
        console.empty_state(
            "No DocTypes Found",
            "Try adjusting your search or check your ERPNext connection",
        )
        return

    console.doctype_list(matched)
    console.info("Use 'erp items <DocType>' to list its documents")
