"""Config management commands."""

import sys
from pathlib import Path

import cyclopts
import yaml
from pydantic import ValidationError

from erplookup.cli.console import get_console
from erplookup.cli.util import ERPLookupPaths
from erplookup.config import Config

app = cyclopts.App(name="config", help="Manage erplookup configuration")

TEMPLATE = """\
# erplookup configuration
# Environment variables override these values, e.g. ERPLOOKUP_ERPNEXT__URL

erpnext:
  url: "{url}"
  api_key: "{api_key}"
  api_secret: "{api_secret}"
  # timeout: 30
  # retries: 3

# logging:
#   level: "DEBUG"
#   file: ~/.local/state/erplookup/erplookup.log
"""

SECRET_MASK = "********"


@app.command
def init(
    url: str = "https://erp.example.com",
    api_key: str = "",
    api_secret: str = "",
    path: Path | None = None,
    force: bool = False,
) -> None:
    """Create a config file from the template.

    Args:
        url: ERPNext site URL.
        api_key: API key (User > API Access in ERPNext).
        api_secret: API secret.
        path: Where to write the file (default: ~/.config/erplookup/config.yaml).
        force: Overwrite an existing file.
    """
    console = get_console()
    path = path or ERPLookupPaths().config_file

    if path.is_dir():
        console.error(f"{path} is a directory, not a file path")
        sys.exit(1)

    if path.exists() and not force:
        console.error(f"{path} already exists (refusing to overwrite)", hint="Use --force to replace it")
        sys.exit(1)

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(TEMPLATE.format(url=url, api_key=api_key, api_secret=api_secret))
    console.success(f"Created config at {path}")
    if not (api_key and api_secret):
        console.info("Add your API key and secret, then run: erp doctypes")


@app.command
def validate(path: Path | None = None) -> None:
    """Validate a config file.

    Args:
        path: Config file to check (default: ~/.config/erplookup/config.yaml).
    """
    console = get_console()
    path = path or ERPLookupPaths().config_file

    if not path.exists():
        console.error(f"{path} not found")
        sys.exit(1)

    try:
        data = yaml.safe_load(path.read_text()) or {}
        config = Config.model_validate(data)
    except (yaml.YAMLError, ValidationError) as e:
        console.error(f"{path} is invalid: {e}")
        sys.exit(1)

    missing = [
        name for name in ("url", "api_key", "api_secret") if not getattr(config.erpnext, name)
    ]
    if missing:
        console.warning(f"{path} is valid but missing: {', '.join(missing)}")
    else:
        console.success(f"{path} is valid")


@app.command
def show() -> None:
    """Show the effective config (secret masked)."""
    data = Config().model_dump(mode="json")
    if data["erpnext"]["api_secret"]:
        data["erpnext"]["api_secret"] = SECRET_MASK
    get_console().json(data)
