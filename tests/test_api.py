"""
API surface tests - the ``GET /api`` description, the endpoint-key helpers
it is validated with, the catch-all 404 route and the diagnostic headers.
"""
import logging

import pytest
from httpx import AsyncClient, ASGITransport

from news_api.endpoints import ENDPOINTS, is_valid_api_endpoint, is_valid_request_method
from news_api.main import app
from news_api.middleware import TimingMiddleware


# ---------------------------------------------------------------------------
# Endpoint-key helpers
# ---------------------------------------------------------------------------

def test_valid_api_endpoints():
    for path in [
        "/api",
        "/api/topics",
        "/api/articles",
        "/api/articles/:article_id",
        "/api/articles/:article_id/comments",
        "/api/comments/:comment_id",
        "/api/users",
        "/api/users/:username",
        "/api/test/:multiple/parametric/:arguments",
        "/api/endpoint/with-hyphens-within/the-endpoint",
    ]:
        assert is_valid_api_endpoint(path), path


def test_invalid_api_endpoints():
    for path in [
        "a simple string",
        "/does/not/start/with/api",
        "/api/with/a/trailing/forward/slash/",
        "/api/with/a/trailing/hyphen-end-the-endpoint-",
        "/apis",
    ]:
        assert not is_valid_api_endpoint(path), path


def test_request_methods():
    for method in ["get", "POST", "Put", "patch", "DELETE"]:
        assert is_valid_request_method(method)
    for method in ["fetch", "OPTIONS", ""]:
        assert not is_valid_request_method(method)


# ---------------------------------------------------------------------------
# GET /api
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_describe_api(async_client: AsyncClient):
    resp = await async_client.get("/api")
    assert resp.status_code == 200
    assert resp.json() == {"api": ENDPOINTS}


@pytest.mark.asyncio
async def test_describe_api_keys_are_valid(async_client: AsyncClient):
    """Every documented key is '<METHOD> <path>' with a valid method and path."""
    api = (await async_client.get("/api")).json()["api"]
    for key, entry in api.items():
        method, path = key.split(" ")
        assert is_valid_request_method(method), key
        assert is_valid_api_endpoint(path), key
        assert isinstance(entry["description"], str)


def test_describe_api_covers_every_route():
    assert set(ENDPOINTS) == {
        "GET /api",
        "GET /api/topics",
        "GET /api/articles",
        "GET /api/articles/:article_id",
        "PATCH /api/articles/:article_id",
        "GET /api/articles/:article_id/comments",
        "POST /api/articles/:article_id/comments",
        "DELETE /api/comments/:comment_id",
        "PATCH /api/comments/:comment_id",
        "GET /api/users",
        "GET /api/users/:username",
    }


# ---------------------------------------------------------------------------
# Catch-all
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
@pytest.mark.parametrize("method", ["GET", "POST", "PATCH", "PUT", "DELETE"])
async def test_unmatched_route_any_method(async_client: AsyncClient, method: str):
    resp = await async_client.request(method, "/api/this-is-not-an-endpoint")
    assert resp.status_code == 404
    assert resp.json() == {"msg": "not found"}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "method, path",
    [
        ("POST", "/api/no-such-route"),
        ("PUT", "/api/articles/1"),
        ("DELETE", "/api/articles/1"),
        ("POST", "/api/topics"),
        ("GET", "/api/comments/1"),
        ("GET", "/"),
    ],
)
async def test_unregistered_method_path_pairs(async_client: AsyncClient, method: str, path: str):
    """Known paths with an unregistered method are also plain 404s."""
    resp = await async_client.request(method, path)
    assert resp.status_code == 404
    assert resp.json() == {"msg": "not found"}


# ---------------------------------------------------------------------------
# Diagnostic headers
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_timing_headers(async_client: AsyncClient):
    resp = await async_client.get("/api/articles/1")
    assert float(resp.headers["x-response-time-ms"]) >= 0
    assert int(resp.headers["x-query-count"]) >= 1


async def _access_log_levels(caplog, threshold: int) -> list[int]:
    caplog.set_level(logging.DEBUG, logger="news_api.middleware")
    transport = ASGITransport(app=TimingMiddleware(app, query_log_threshold=threshold))
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.get("/api/articles/1/comments")
    assert resp.status_code == 200
    return [r.levelno for r in caplog.records if r.name == "news_api.middleware"]


@pytest.mark.asyncio
async def test_access_log_is_debug_under_query_threshold(caplog):
    levels = await _access_log_levels(caplog, threshold=100)
    assert levels
    assert set(levels) == {logging.DEBUG}


@pytest.mark.asyncio
async def test_access_log_is_info_over_query_threshold(caplog):
    levels = await _access_log_levels(caplog, threshold=0)
    assert logging.INFO in levels
