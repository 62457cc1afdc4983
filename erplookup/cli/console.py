"""Console output for the CLI.

Provides a Console class that wraps rich for consistent output.
All CLI output should go through this module.
"""

from typing import Any

from rich.console import Console as RichConsole
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from erplookup.domain.doctype.model import DocType
from erplookup.domain.document.format import item_subtitle, split_document_fields
from erplookup.domain.search.model import Color, Glyph, ResolvedResult


class Console:
    """CLI output manager wrapping rich.

    Dynamic text coming from ERPNext is escaped before printing so that
    brackets in document names are not read as rich markup.
    """

    def __init__(self) -> None:
        self._console = RichConsole(stderr=False)
        self._err_console = RichConsole(stderr=True)

    # -------------------------------------------------------------------------
    # Status messages
    # -------------------------------------------------------------------------

    def success(self, message: str) -> None:
        """Print a success message."""
        self._console.print(f"[green]\u2713[/green] {escape(message)}")

    def error(self, message: str, *, hint: str | None = None) -> None:
        """Print an error message to stderr."""
        self._err_console.print(f"[red]\u2717[/red] {escape(message)}")
        if hint:
            self._err_console.print(f"  [dim]{hint}[/dim]")

    def warning(self, message: str) -> None:
        """Print a warning message."""
        self._console.print(f"[yellow]\u26a0[/yellow] {escape(message)}")

    def info(self, message: str) -> None:
        """Print an info message."""
        self._console.print(f"[dim]{escape(message)}[/dim]")

    # -------------------------------------------------------------------------
    # Structured output
    # -------------------------------------------------------------------------

    def print(self, *args: Any, **kwargs: Any) -> None:
        """Print to console (pass-through to rich)."""
        self._console.print(*args, **kwargs)

    def json(self, data: Any) -> None:
        """Pretty-print data as JSON."""
        self._console.print_json(data=data, default=str)

    def empty_state(self, title: str, description: str) -> None:
        """Print an empty-list placeholder."""
        self._console.print(f"[bold]{escape(title)}[/bold]")
        self._console.print(f"  [dim]{escape(description)}[/dim]")

    # -------------------------------------------------------------------------
    # DocTypes and documents
    # -------------------------------------------------------------------------

    def doctype_list(self, doctypes: list[DocType]) -> None:
        """Print DocTypes with Custom/Submittable markers."""
        table = Table(show_header=True, header_style="bold")
        table.add_column("", width=1)
        table.add_column("DocType")
        table.add_column("Module", style="dim")
        table.add_column("Flags")

        for doctype in doctypes:
            color = Color.ORANGE if doctype.custom else Color.BLUE
            flags = []
            if doctype.custom:
                flags.append("[dark_orange]Custom[/dark_orange]")
            if doctype.is_submittable:
                flags.append("[green]Submittable[/green]")
            table.add_row(
                f"[{color}]{Glyph.DOCUMENT.symbol}[/{color}]",
                escape(doctype.name),
                escape(doctype.module or ""),
                " ".join(flags),
            )

        self._console.print(table)

    def document_list(self, doctype: str, items: list[dict[str, Any]]) -> None:
        """Print one line per document with a guessed subtitle."""
        self._console.print(f"[bold]{escape(doctype)}[/bold] ({len(items)})\n")
        for item in items:
            name = escape(str(item.get("name", "")))
            subtitle = item_subtitle(item)
            line = f"  {name}"
            if subtitle:
                line += f"  [dim]{escape(subtitle)}[/dim]"
            self._console.print(line)

    def document_detail(self, doctype: str, name: str, document: dict[str, Any], url: str) -> None:
        """Print a document: metadata panel followed by its fields."""
        metadata, fields = split_document_fields(document)
        title = str(document.get("name") or name)

        meta_lines = [f"[cyan]DocType:[/cyan] {escape(doctype)}"]
        meta_lines += [
            f"[cyan]{escape(label)}:[/cyan] {escape(value)}" for label, value in metadata.items()
        ]

        self._console.print(
            Panel(
                "\n".join(meta_lines),
                title=f"[bold]{escape(title)}[/bold]",
                subtitle=f"[dim]{escape(url)}[/dim]",
                border_style="blue",
                padding=(1, 2),
            )
        )

        if not fields:
            self._console.print("[dim]No fields[/dim]")
            return

        self._console.print("[bold]Fields[/bold]")
        for label, value in fields.items():
            self._console.print(f"  [bold]{escape(label)}:[/bold] {escape(value)}")

    # -------------------------------------------------------------------------
    # Search results
    # -------------------------------------------------------------------------

    def search_results(self, results: list[ResolvedResult]) -> None:
        """Print resolved search rows as '[#] <glyph> [DocType] label'."""
        self._console.print(f"Found {len(results)} result{'s' if len(results) != 1 else ''}:\n")

        for i, result in enumerate(results, 1):
            icon = result.icon
            glyph = f"[{icon.color}]{icon.glyph.symbol}[/{icon.color}]"
            self._console.print(f"[bold blue]\\[{i}][/bold blue] {glyph} {escape(result.title)}")
            if result.subtitle:
                self._console.print(f"    [dim]{escape(result.subtitle)}[/dim]")

    def search_hint(self) -> None:
        """Print hint about using erp show."""
        self.info("Use 'erp show <#>' to view details or 'erp open <#>' to open in ERPNext")

    def status(self, message: str):
        """Return a status context manager for long operations.

        Usage:
            with console.status("Searching..."):
                do_something()
        """
        return self._console.status(message)


# Module-level default instance for convenience
_default: Console | None = None


def get_console() -> Console:
    """Get the default console instance."""
    global _default
    if _default is None:
        _default = Console()
    return _default
