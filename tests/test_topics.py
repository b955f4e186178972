"""
Topic endpoint tests - topics are seeded and read-only.
"""
import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_list_topics(async_client: AsyncClient, data):
    """GET /api/topics returns every seeded topic with slug and description."""
    resp = await async_client.get("/api/topics")
    assert resp.status_code == 200
    topics = resp.json()["topics"]
    assert len(topics) == len(data.topics)
    for topic in topics:
        assert isinstance(topic["slug"], str)
        assert isinstance(topic["description"], str)
    assert {t["slug"] for t in topics} == {t["slug"] for t in data.topics}


@pytest.mark.asyncio
async def test_list_topics_is_idempotent(async_client: AsyncClient):
    """Repeated reads with no mutation in between return identical lists."""
    first = await async_client.get("/api/topics")
    second = await async_client.get("/api/topics")
    assert first.json() == second.json()


@pytest.mark.asyncio
async def test_topics_trailing_path_not_found(async_client: AsyncClient):
    """Paths below /api/topics are not routes."""
    resp = await async_client.get("/api/topics/mitch")
    assert resp.status_code == 404
    assert resp.json() == {"msg": "not found"}
