"""Manages erplookup directories following the XDG Base Directory spec.

Directory layout:
    ~/.config/erplookup/
        config.yaml         # ERPNext site and credentials

    ~/.cache/erplookup/
        last_search.json    # Search cache for `erp show <#>`

Setting ERPLOOKUP_DATA_DIR switches to unified mode, where every directory
lives under that root (config/, cache/).
"""

import os
from datetime import UTC, datetime
from pathlib import Path

from pydantic import ValidationError

from erplookup.cli.models import CachedHit, SearchCache

DATA_DIR_ENV = "ERPLOOKUP_DATA_DIR"


class ERPLookupPaths:
    """Manages erplookup paths.

    Supports overriding individual directories for testing.
    """

    def __init__(
        self,
        *,
        config_dir: Path | None = None,
        cache_dir: Path | None = None,
    ) -> None:
        """Initialize paths.

        Args:
            config_dir: Override config directory (default: ~/.config/erplookup).
            cache_dir: Override cache directory (default: ~/.cache/erplookup).
        """
        unified = os.environ.get(DATA_DIR_ENV)
        if unified:
            root = Path(unified).expanduser()
            default_config = root / "config"
            default_cache = root / "cache"
        else:
            home = Path.home()
            default_config = home / ".config" / "erplookup"
            default_cache = home / ".cache" / "erplookup"

        self._config_dir = config_dir or default_config
        self._cache_dir = cache_dir or default_cache

    # -------------------------------------------------------------------------
    # Base directories
    # -------------------------------------------------------------------------

    @property
    def config_dir(self) -> Path:
        return self._config_dir

    @property
    def cache_dir(self) -> Path:
        return self._cache_dir

    # -------------------------------------------------------------------------
    # Files
    # -------------------------------------------------------------------------

    @property
    def config_file(self) -> Path:
        """Main config file."""
        return self._config_dir / "config.yaml"

    @property
    def search_cache_file(self) -> Path:
        """Search results cache file."""
        return self._cache_dir / "last_search.json"

    # -------------------------------------------------------------------------
    # Search cache
    # -------------------------------------------------------------------------

    def read_search_cache(self) -> SearchCache | None:
        """Read cached search results, or None if missing or unreadable."""
        if not self.search_cache_file.exists():
            return None
        try:
            return SearchCache.model_validate_json(self.search_cache_file.read_text())
        except (ValidationError, OSError):
            return None

    def write_search_cache(
        self,
        query: str,
        doctype: str | None,
        results: list[CachedHit],
    ) -> SearchCache:
        """Write search results to cache for numbered lookup."""
        self._cache_dir.mkdir(parents=True, exist_ok=True)
        cache = SearchCache(
            query=query,
            doctype=doctype,
            searched_at=datetime.now(UTC).isoformat(),
            results=results,
        )
        self.search_cache_file.write_text(cache.model_dump_json(indent=2))
        return cache
