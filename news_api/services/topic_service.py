"""
Topic service - read-only access to the ``topics`` table.

Topics are seeded and never written by the API.  ``select_topic`` is also
used by the article listing to tell an unknown topic (404) apart from a
known topic with no articles (empty list).
"""
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from news_api.errors import NotFound
from news_api.models import Topic


def _topic_to_dict(topic: Topic) -> dict:
    return {"slug": topic.slug, "description": topic.description}


async def select_topics(db: AsyncSession) -> list[dict]:
    result = await db.execute(select(Topic).order_by(Topic.slug))
    return [_topic_to_dict(t) for t in result.scalars().all()]


async def select_topic(db: AsyncSession, slug: str) -> dict:
    """Return the topic identified by *slug*, raising ``NotFound`` when absent."""
    result = await db.execute(select(Topic).where(Topic.slug == slug))
    topic = result.scalar_one_or_none()
    if topic is None:
        raise NotFound(f"topic {slug!r} does not exist")
    return _topic_to_dict(topic)
