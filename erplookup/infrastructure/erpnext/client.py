"""ERPNext REST client - talks to the Frappe resource and method APIs."""

import json
import logging
from typing import Any
from urllib.parse import quote

import httpx

from erplookup.config import ERPNextConfig
from erplookup.domain.doctype.model import DocType, DocTypeMeta
from erplookup.domain.shared.error import (
    AuthorizationError,
    ExternalServiceError,
    NotFoundError,
)
from erplookup.util.retry import with_retry

logger = logging.getLogger(__name__)

DOCTYPE_LIST_FIELDS = [
    "name",
    "module",
    "custom",
    "is_submittable",
    "is_child_table",
    "track_changes",
    "description",
]
GLOBAL_SEARCH_METHOD = "/api/method/frappe.utils.global_search.search"

# Characters encodeURIComponent leaves alone
_URI_SAFE = "!~*'()"


def _segment(value: str) -> str:
    return quote(value, safe=_URI_SAFE)


def doctype_slug(doctype: str) -> str:
    """Desk route for a DocType: 'Sales Invoice' -> 'sales-invoice'."""
    return doctype.lower().replace(" ", "-")


class ERPNextClient:
    """Read-only client for an ERPNext (Frappe) site.

    Every request goes through ``_get``, which retries transient transport
    errors and maps failures onto the erplookup error hierarchy.
    """

    def __init__(
        self,
        config: ERPNextConfig,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Create a client.

        Args:
            config: Site URL, API key/secret and timeouts.
            transport: Optional httpx transport (tests use httpx.MockTransport).
        """
        config.require_credentials()
        self._config = config
        self._client = httpx.Client(
            base_url=config.base_url,
            headers={
                "Authorization": f"token {config.api_key}:{config.api_secret}",
                "Content-Type": "application/json",
            },
            timeout=config.timeout,
            transport=transport,
        )

    def __enter__(self) -> "ERPNextClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    # -------------------------------------------------------------------------
    # DocTypes
    # -------------------------------------------------------------------------

    def get_doctypes(self) -> list[DocType]:
        """List DocTypes, excluding child tables."""
        data = self._get(
            "/api/resource/DocType",
            params={
                "fields": json.dumps(DOCTYPE_LIST_FIELDS),
                "filters": json.dumps([["DocType", "istable", "!=", 1]]),
                "limit_page_length": 200,
            },
            failure="Failed to fetch DocTypes. Please check your ERPNext connection settings.",
        )
        return [DocType.model_validate(row) for row in data.get("data") or []]

    def get_doctype_meta(self, doctype: str) -> DocTypeMeta:
        data = self._get(
            f"/api/resource/DocType/{_segment(doctype)}",
            failure=f"Failed to fetch meta for {doctype}",
        )
        return DocTypeMeta.model_validate(data.get("data") or {"name": doctype})

    # -------------------------------------------------------------------------
    # Documents
    # -------------------------------------------------------------------------

    def get_doctype_items(self, doctype: str, limit: int = 20) -> list[dict[str, Any]]:
        """List the most recent documents of a DocType."""
        data = self._get(
            f"/api/resource/{_segment(doctype)}",
            params={
                "fields": json.dumps(["*"]),
                "limit_page_length": limit,
            },
            failure=f"Failed to fetch items for {doctype}",
        )
        return data.get("data") or []

    def search_doctype_items(
        self,
        doctype: str,
        search_term: str,
        limit: int = 20,
    ) -> list[dict[str, Any]]:
        """Search documents of a DocType by its title field (SQL ``like``)."""
        meta = self.get_doctype_meta(doctype)
        data = self._get(
            f"/api/resource/{_segment(doctype)}",
            params={
                "fields": json.dumps(["*"]),
                "filters": json.dumps([[doctype, meta.search_field, "like", f"%{search_term}%"]]),
                "limit_page_length": limit,
            },
            failure=f"Failed to search items for {doctype}",
        )
        return data.get("data") or []

    def get_document(self, doctype: str, name: str) -> dict[str, Any]:
        """Fetch a single document with all its fields."""
        data = self._get(
            f"/api/resource/{_segment(doctype)}/{_segment(name)}",
            failure=f"Failed to fetch {doctype} {name}",
        )
        document = data.get("data")
        if not isinstance(document, dict):
            raise NotFoundError(f"{doctype} {name} not found")
        return document

    def global_search(
        self,
        text: str,
        doctype: str | None = None,
        limit: int = 20,
    ) -> list[dict[str, Any]]:
        """Full-text search across DocTypes (Frappe global search)."""
        params: dict[str, Any] = {"text": text, "limit": limit}
        if doctype:
            params["doctype"] = doctype
        data = self._get(GLOBAL_SEARCH_METHOD, params=params, failure="Search failed")
        hits = data.get("message") or []
        return [hit for hit in hits if isinstance(hit, dict)]

    # -------------------------------------------------------------------------
    # Desk URLs
    # -------------------------------------------------------------------------

    def document_url(self, doctype: str, name: str) -> str:
        return f"{self._config.base_url}/app/{doctype_slug(doctype)}/{_segment(name)}"

    def new_document_url(self, doctype: str) -> str:
        return f"{self._config.base_url}/app/{doctype_slug(doctype)}/new"

    # -------------------------------------------------------------------------
    # Transport
    # -------------------------------------------------------------------------

    def _get(
        self,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        failure: str,
    ) -> dict[str, Any]:
        """GET a JSON object, mapping failures to erplookup errors.

        Args:
            path: Path relative to the site URL.
            params: Query parameters.
            failure: Message for errors the user cannot act on directly.
        """
        logger.debug("GET %s params=%s", path, params)
        try:
            response = with_retry(
                lambda: self._client.get(path, params=params),
                retries=self._config.retries,
                exceptions=(httpx.ConnectError, httpx.ReadError),
            )
        except httpx.ConnectError as e:
            logger.warning("Could not connect to %s: %s", self._config.base_url, e)
            raise ExternalServiceError(
                f"{failure}: could not connect to {self._config.base_url}",
                code="CONNECTION_ERROR",
            ) from e
        except httpx.HTTPError as e:
            logger.warning("Request to %s failed: %s", path, e)
            raise ExternalServiceError(f"{failure}: {e}") from e

        if response.status_code in (401, 403):
            raise AuthorizationError(
                f"{failure}: ERPNext rejected the API credentials "
                f"({response.status_code})"
            )
        if response.status_code == 404:
            raise NotFoundError(f"{failure}: not found")
        if response.is_error:
            logger.warning("GET %s -> %s: %s", path, response.status_code, response.text[:200])
            raise ExternalServiceError(f"{failure}: HTTP {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            raise ExternalServiceError(f"{failure}: response was not JSON") from e
        if not isinstance(data, dict):
            raise ExternalServiceError(f"{failure}: unexpected response shape")
        return data
