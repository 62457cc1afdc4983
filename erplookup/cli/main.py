"""Main CLI application using Cyclopts.

The CLI is a thin HTTP client - everything it shows comes from the
ERPNext REST API.
"""

import cyclopts
import yaml
from pydantic import ValidationError

from erplookup.cli.commands import config, doctypes, items, links, search, show
from erplookup.config import Config, LoggingConfig, configure_logging

app = cyclopts.App(
    name="erp",
    help="ERPNext lookup - search, browse and open ERPNext documents",
)

app.command(doctypes.app, name="doctypes")
app.command(items.app, name="items")
app.command(search.app, name="search")
app.command(show.app, name="show")
app.command(links.open_document, name="open")
app.command(links.url, name="url")
app.command(links.new, name="new")
app.command(config.app, name="config")


def main() -> None:
    """Entry point: configure logging, then dispatch."""
    try:
        logging_config = Config().logging
    except (ValidationError, yaml.YAMLError):
        # `erp config validate` reports the details
        logging_config = LoggingConfig()
    configure_logging(logging_config)
    app()
