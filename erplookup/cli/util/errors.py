"""Error reporting for CLI commands."""

import sys
from typing import NoReturn

from erplookup.cli.console import Console
from erplookup.domain.shared.error import (
    AuthorizationError,
    ConfigurationError,
    ERPLookupError,
    ExternalServiceError,
)

CODE_HINTS: dict[str, str] = {
    "NO_SEARCH_CACHE": "Run a search first: erp search \"your query\"",
    "INVALID_CONFIG": "Run 'erp config validate' to see what is wrong",
}

HINTS: dict[type[ERPLookupError], str] = {
    ConfigurationError: "Run 'erp config init' or set ERPLOOKUP_ERPNEXT__URL, "
    "ERPLOOKUP_ERPNEXT__API_KEY and ERPLOOKUP_ERPNEXT__API_SECRET",
    AuthorizationError: "Check the API key and secret in your erplookup config",
    ExternalServiceError: "Check that the ERPNext site is reachable",
}


def fail(console: Console, error: ERPLookupError) -> NoReturn:
    """Print the error with a hint for its code or type and exit with status 1."""
    hint = CODE_HINTS.get(error.code) or next(
        (h for cls, h in HINTS.items() if isinstance(error, cls)), None
    )
    console.error(error.message, hint=hint)
    sys.exit(1)
