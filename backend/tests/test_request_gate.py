"""
Blog API Backend: Request Gate Tests
=====================================

What:  The contract every endpoint shares, exercised over HTTP.

What we test:
    ✅ OPTIONS → 200, empty body, even with no backend configured
    ✅ Unsupported methods → 405 with the error envelope
    ✅ CORS headers on 2xx, 4xx, 5xx and preflight responses
    ✅ Unknown routes → 404 envelope
    ✅ Unhandled exceptions → 500 envelope that still carries CORS headers
"""

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from blog_api.config import settings
from blog_api.database import get_backend_client
from blog_api.main import create_app
from blog_api.middleware.request_id import resolve_request_id

CORS_HEADERS = (
    "access-control-allow-origin",
    "access-control-allow-methods",
    "access-control-allow-headers",
    "access-control-allow-credentials",
)


def assert_cors(response: httpx.Response, origin: str = "*") -> None:
    for header in CORS_HEADERS:
        assert header in response.headers, f"missing {header}"
    assert response.headers["access-control-allow-origin"] == origin
    assert response.headers["access-control-allow-credentials"] == "true"


class TestPreflight:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("path", ["/api/categories", "/api/posts", "/api/posts/1", "/health"])
    async def test_options_returns_empty_200(self, test_client, fake_backend, path):
        response = await test_client.options(path)

        assert response.status_code == 200
        assert response.content == b""
        assert_cors(response)
        assert fake_backend.requests == []

    @pytest.mark.asyncio
    async def test_options_succeeds_without_configuration(self, unconfigured_client):
        """Preflight never touches the backend client."""
        response = await unconfigured_client.options(
            "/api/categories",
            headers={"Origin": "http://localhost:5173", "Access-Control-Request-Method": "GET"},
        )

        assert response.status_code == 200
        assert response.content == b""
        assert_cors(response)

    @pytest.mark.asyncio
    async def test_allow_methods_lists_route_methods(self, test_client):
        response = await test_client.options("/api/categories")
        assert response.headers["access-control-allow-methods"] == "GET,OPTIONS"

    @pytest.mark.asyncio
    async def test_allow_methods_for_nested_route(self, test_client):
        response = await test_client.options("/api/posts/7/comments")
        assert response.headers["access-control-allow-methods"] == "GET,OPTIONS,POST"

    @pytest.mark.asyncio
    async def test_allow_headers(self, test_client):
        response = await test_client.options("/api/categories")
        assert response.headers["access-control-allow-headers"] == "Authorization, Content-Type"


class TestMethodGating:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ["POST", "PUT", "PATCH", "DELETE", "HEAD"])
    async def test_categories_rejects_non_get(self, test_client, fake_backend, method):
        response = await test_client.request(method, "/api/categories")

        assert response.status_code == 405
        if method != "HEAD":
            assert response.json() == {"success": False, "error": "Method not allowed"}
        assert response.headers["allow"] == "GET"
        assert_cors(response)
        assert fake_backend.requests == []

    @pytest.mark.asyncio
    async def test_health_rejects_post(self, test_client):
        response = await test_client.post("/health")

        assert response.status_code == 405
        assert response.json() == {"success": False, "error": "Method not allowed"}

    @pytest.mark.asyncio
    async def test_post_detail_rejects_patch(self, test_client):
        """PATCH is not routed; partial updates use PUT."""
        response = await test_client.patch("/api/posts/1", json={"title": "x"})

        assert response.status_code == 405
        assert response.headers["allow"] == "DELETE, GET, PUT"

    @pytest.mark.asyncio
    async def test_nested_route_rejects_put(self, test_client, fake_backend):
        response = await test_client.put("/api/posts/7/comments", json={"content": "x"})

        assert response.status_code == 405
        assert response.headers["allow"] == "GET, POST"
        assert fake_backend.requests == []

    @pytest.mark.asyncio
    async def test_method_rejected_before_configuration_check(self, unconfigured_client):
        response = await unconfigured_client.delete("/api/categories")

        assert response.status_code == 405
        assert response.json()["error"] == "Method not allowed"


class TestCorsOnEveryResponse:

    @pytest.mark.asyncio
    async def test_success_response(self, test_client):
        response = await test_client.get("/api/categories")

        assert response.status_code == 200
        assert_cors(response)

    @pytest.mark.asyncio
    async def test_configuration_error_response(self, unconfigured_client):
        response = await unconfigured_client.get("/api/categories")

        assert response.status_code == 500
        assert_cors(response)

    @pytest.mark.asyncio
    async def test_unknown_route(self, test_client):
        response = await test_client.get("/api/does-not-exist")

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Route not found"}
        assert_cors(response)
        assert "PUT" in response.headers["access-control-allow-methods"]

    @pytest.mark.asyncio
    async def test_unhandled_exception_becomes_500_envelope(self, test_client, fake_backend):
        fake_backend.raises = RuntimeError("boom")
        response = await test_client.get("/api/categories")

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "Internal server error"}
        assert_cors(response)

    @pytest.mark.asyncio
    async def test_configured_origin_adds_vary(self, monkeypatch, backend_client):
        monkeypatch.setattr(settings, "cors_origin", "https://blog.example.com")
        app = create_app()
        app.dependency_overrides[get_backend_client] = lambda: backend_client

        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            response = await client.get("/api/categories")

        assert response.status_code == 200
        assert_cors(response, origin="https://blog.example.com")
        assert response.headers["vary"] == "Origin"


class TestRequestId:

    @pytest.mark.asyncio
    async def test_generated_when_absent(self, test_client):
        response = await test_client.get("/health")
        assert len(response.headers["x-request-id"]) == 8

    @pytest.mark.asyncio
    async def test_echoed_when_sent(self, test_client):
        response = await test_client.get("/health", headers={"X-Request-ID": "abc-123"})
        assert response.headers["x-request-id"] == "abc-123"

    @pytest.mark.asyncio
    async def test_unsafe_client_id_replaced(self, test_client):
        response = await test_client.get("/health", headers={"X-Request-ID": "x" * 65})

        assert len(response.headers["x-request-id"]) == 8
        assert response.headers["x-request-id"] != "x" * 8

    @pytest.mark.parametrize("incoming", ["", "has space", "line\nbreak", "a/b", None])
    def test_resolve_rejects_odd_values(self, incoming):
        resolved = resolve_request_id(incoming)
        assert resolved != incoming
        assert len(resolved) == 8

    def test_resolve_keeps_token(self):
        assert resolve_request_id("req_01.A-b") == "req_01.A-b"
