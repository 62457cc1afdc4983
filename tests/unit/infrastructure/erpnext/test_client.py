"""Tests for the ERPNext REST client against a mocked transport."""

import json
from collections.abc import Callable

import httpx
import pytest

from erplookup.config import ERPNextConfig
from erplookup.domain.shared.error import (
    AuthorizationError,
    ConfigurationError,
    ExternalServiceError,
    NotFoundError,
)
from erplookup.infrastructure.erpnext.client import ERPNextClient, doctype_slug

MakeClient = Callable[..., ERPNextClient]


class TestRequests:
    """Request shapes for each API call."""

    def test_auth_header(self, make_client: MakeClient) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"data": []})

        with make_client(handler) as client:
            client.get_doctypes()

        assert seen[0].headers["Authorization"] == "token key:secret"

    def test_get_doctypes(self, make_client: MakeClient) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/api/resource/DocType"
            params = request.url.params
            assert json.loads(params["fields"])[0] == "name"
            assert json.loads(params["filters"]) == [["DocType", "istable", "!=", 1]]
            assert params["limit_page_length"] == "200"
            return httpx.Response(
                200,
                json={
                    "data": [
                        {"name": "Customer", "module": "Selling", "custom": 0},
                        {"name": "Fleet Car", "module": "Fleet", "custom": 1, "is_submittable": 1},
                    ]
                },
            )

        with make_client(handler) as client:
            doctypes = client.get_doctypes()

        assert [d.name for d in doctypes] == ["Customer", "Fleet Car"]
        assert doctypes[0].custom is False
        assert doctypes[1].custom is True
        assert doctypes[1].is_submittable is True

    def test_get_doctype_items(self, make_client: MakeClient) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/api/resource/Sales Invoice"
            assert request.url.params["limit_page_length"] == "50"
            return httpx.Response(200, json={"data": [{"name": "SINV-0001"}]})

        with make_client(handler) as client:
            items = client.get_doctype_items("Sales Invoice", limit=50)

        assert items == [{"name": "SINV-0001"}]

    def test_search_doctype_items_uses_title_field(self, make_client: MakeClient) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/api/resource/DocType/Customer":
                return httpx.Response(
                    200, json={"data": {"name": "Customer", "title_field": "customer_name"}}
                )
            assert request.url.path == "/api/resource/Customer"
            filters = json.loads(request.url.params["filters"])
            assert filters == [["Customer", "customer_name", "like", "%acme%"]]
            return httpx.Response(200, json={"data": [{"name": "CUST-0001"}]})

        with make_client(handler) as client:
            items = client.search_doctype_items("Customer", "acme")

        assert items == [{"name": "CUST-0001"}]

    def test_search_doctype_items_defaults_to_name(self, make_client: MakeClient) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path.startswith("/api/resource/DocType/"):
                return httpx.Response(200, json={"data": {"name": "ToDo"}})
            filters = json.loads(request.url.params["filters"])
            assert filters[0][1] == "name"
            return httpx.Response(200, json={"data": []})

        with make_client(handler) as client:
            assert client.search_doctype_items("ToDo", "x") == []

    def test_get_document(self, make_client: MakeClient) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.raw_path == b"/api/resource/Sales%20Invoice/SINV%2F0001"
            return httpx.Response(200, json={"data": {"name": "SINV/0001", "status": "Paid"}})

        with make_client(handler) as client:
            document = client.get_document("Sales Invoice", "SINV/0001")

        assert document["status"] == "Paid"

    def test_global_search(self, make_client: MakeClient) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/api/method/frappe.utils.global_search.search"
            assert request.url.params["text"] == "acme"
            assert request.url.params["doctype"] == "Customer"
            assert request.url.params["limit"] == "5"
            return httpx.Response(
                200,
                json={"message": [{"doctype": "Customer", "name": "CUST-1"}, "junk"]},
            )

        with make_client(handler) as client:
            hits = client.global_search("acme", doctype="Customer", limit=5)

        assert hits == [{"doctype": "Customer", "name": "CUST-1"}]

    def test_global_search_without_doctype(self, make_client: MakeClient) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert "doctype" not in request.url.params
            return httpx.Response(200, json={"message": None})

        with make_client(handler) as client:
            assert client.global_search("acme") == []


class TestErrors:
    """HTTP failures map onto the error hierarchy."""

    @pytest.mark.parametrize("status", [401, 403])
    def test_auth_errors(self, make_client: MakeClient, status: int) -> None:
        with make_client(lambda r: httpx.Response(status)) as client:
            with pytest.raises(AuthorizationError):
                client.get_doctypes()

    def test_not_found(self, make_client: MakeClient) -> None:
        with make_client(lambda r: httpx.Response(404)) as client:
            with pytest.raises(NotFoundError):
                client.get_document("Customer", "missing")

    def test_server_error(self, make_client: MakeClient) -> None:
        with make_client(lambda r: httpx.Response(500, text="boom")) as client:
            with pytest.raises(ExternalServiceError) as exc_info:
                client.get_doctypes()

        assert "Failed to fetch DocTypes" in exc_info.value.message
        assert "HTTP 500" in exc_info.value.message

    def test_non_json_response(self, make_client: MakeClient) -> None:
        with make_client(lambda r: httpx.Response(200, text="<html>")) as client:
            with pytest.raises(ExternalServiceError):
                client.get_doctypes()

    def test_connection_error(self, make_client: MakeClient) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        with make_client(handler) as client:
            with pytest.raises(ExternalServiceError) as exc_info:
                client.global_search("acme")

        assert exc_info.value.code == "CONNECTION_ERROR"

    def test_transient_error_retried(self, erpnext_config: ERPNextConfig) -> None:
        calls = 0

        def handler(request: httpx.Request) -> httpx.Response:
            nonlocal calls
            calls += 1
            if calls == 1:
                raise httpx.ReadError("reset", request=request)
            return httpx.Response(200, json={"data": []})

        config = erpnext_config.model_copy(update={"retries": 1})
        with ERPNextClient(config, transport=httpx.MockTransport(handler)) as client:
            assert client.get_doctypes() == []

        assert calls == 2

    def test_document_without_data(self, make_client: MakeClient) -> None:
        with make_client(lambda r: httpx.Response(200, json={})) as client:
            with pytest.raises(NotFoundError):
                client.get_document("Customer", "CUST-1")

    def test_missing_credentials(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            ERPNextClient(ERPNextConfig(url="https://erp.example.com"))

        assert "api_key" in exc_info.value.message
        assert "api_secret" in exc_info.value.message


class TestUrls:
    def test_doctype_slug(self) -> None:
        assert doctype_slug("Sales Invoice") == "sales-invoice"
        assert doctype_slug("ToDo") == "todo"

    def test_document_url(self, make_client: MakeClient) -> None:
        with make_client(lambda r: httpx.Response(200)) as client:
            url = client.document_url("Sales Invoice", "SINV 0001/A")

        assert url == "https://erp.example.com/app/sales-invoice/SINV%200001%2FA"

    def test_new_document_url(self, make_client: MakeClient) -> None:
        with make_client(lambda r: httpx.Response(200)) as client:
            assert client.new_document_url("Purchase Order") == (
                "https://erp.example.com/app/purchase-order/new"
            )

    def test_trailing_slash_in_site_url(self) -> None:
        config = ERPNextConfig(url="https://erp.example.com/", api_key="k", api_secret="s")
        with ERPNextClient(config) as client:
            assert client.new_document_url("Item") == "https://erp.example.com/app/item/new"
