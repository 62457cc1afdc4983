"""Client wiring and document reference lookup for CLI commands."""

import pydantic
import yaml

from erplookup.cli.models import CachedHit
from erplookup.cli.util.paths import ERPLookupPaths
from erplookup.config import Config
from erplookup.domain.shared.error import ConfigurationError, NotFoundError, ValidationError
from erplookup.infrastructure.erpnext.client import ERPNextClient


def get_client() -> ERPNextClient:
    """Build a client from the effective configuration."""
    try:
        config = Config()
    except (pydantic.ValidationError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Invalid configuration: {e}", code="INVALID_CONFIG") from e
    return ERPNextClient(config.erpnext)


def resolve_ref(ref: str, name: str | None = None) -> tuple[str, str]:
    """Turn command arguments into a (doctype, name) pair.

    ``erp show 2`` picks the second row of the last search; ``erp show
    "Sales Invoice" SINV-0001`` names the document directly.

    Raises:
        ValidationError: The result number is out of range.
        NotFoundError: No search has been cached yet.
    """
    if name is not None:
        return ref, name

    if not ref.isdecimal():
        raise ValidationError(f"Expected a result number or a DocType and name, got '{ref}'")

    cache = ERPLookupPaths().read_search_cache()
    if cache is None:
        raise NotFoundError("No search results cached.", code="NO_SEARCH_CACHE")

    idx = int(ref) - 1
    if not 0 <= idx < len(cache.results):
        raise ValidationError(
            f"Invalid result number: {ref} (last search had {len(cache.results)} results)"
        )
    hit: CachedHit = cache.results[idx]
    return hit.doctype, hit.name
