"""
Article service - business logic for the Article table.

Design notes
------------
- ``comment_count`` is never stored.  Every read joins ``comments`` with a
  LEFT OUTER JOIN and ``COUNT(comments.comment_id)`` grouped by article, so
  articles without comments report 0 and the figure always matches the
  live rows.
- The listing accepts ``sort_by`` / ``order`` only through the
  ``SortColumn`` / ``SortOrder`` enums.  Raw strings from the query string
  are parsed into enum members (or rejected with ``BadRequest``) before any
  statement is built; the topic filter is always a bound parameter.
- Vote increments are a single ``UPDATE ... SET votes = votes + :delta
  ... RETURNING article_id``; a missing article is detected from the empty
  RETURNING set instead of a separate existence query.
- Service functions flush but do not commit; the transaction boundary
  is owned by the ``get_db`` dependency in the router layer.
"""
from enum import Enum

from sqlalchemy import Select, asc, desc, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from news_api.errors import BadRequest, NotFound
from news_api.models import Article, Comment
from news_api.services import topic_service


# ---------------------------------------------------------------------------
# Sort options
# ---------------------------------------------------------------------------

class SortColumn(str, Enum):
    """Columns the article listing may be ordered by."""

    ARTICLE_ID = "article_id"
    TITLE = "title"
    TOPIC = "topic"
    AUTHOR = "author"
    CREATED_AT = "created_at"
    VOTES = "votes"

    @classmethod
    def parse(cls, value: str | None) -> "SortColumn":
        if value is None:
            return cls.CREATED_AT
        try:
            return cls(value)
        except ValueError:
            raise BadRequest(f"cannot sort by {value!r}") from None

    @property
    def column(self):
        return getattr(Article, self.value)


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: str | None) -> "SortOrder":
        """Case-insensitive; ``None`` means the default (descending)."""
        if value is None:
            return cls.DESC
        try:
            return cls(value.lower())
        except ValueError:
            raise BadRequest(f"invalid sort order {value!r}") from None


# ---------------------------------------------------------------------------
# Query / serialisation helpers
# ---------------------------------------------------------------------------

def _select_with_comment_count() -> Select:
    return (
        select(Article, func.count(Comment.comment_id).label("comment_count"))
        .outerjoin(Comment, Comment.article_id == Article.article_id)
        .group_by(Article.article_id)
    )


def _article_to_dict(article: Article, comment_count: int) -> dict:
    """Serialise an Article for the list view (no body)."""
    return {
        "article_id": article.article_id,
        "title": article.title,
        "topic": article.topic,
        "author": article.author,
        "created_at": article.created_at.isoformat() if article.created_at else None,
        "votes": article.votes,
        "article_img_url": article.article_img_url,
        "comment_count": int(comment_count),
    }


def _article_detail_to_dict(article: Article, comment_count: int) -> dict:
    """Serialise an Article for the detail view."""
    data = _article_to_dict(article, comment_count)
    data["body"] = article.body
    return data


# ---------------------------------------------------------------------------
# Public service functions
# ---------------------------------------------------------------------------

async def select_article_by_id(db: AsyncSession, article_id: int) -> dict:
    """
    Return the detail dict for *article_id*, including ``comment_count``.

    Raises ``NotFound`` when the article does not exist.
    """
    q = _select_with_comment_count().where(Article.article_id == article_id)
    result = await db.execute(q)
    row = result.one_or_none()
    if row is None:
        raise NotFound(f"article {article_id} does not exist")
    article, comment_count = row
    return _article_detail_to_dict(article, comment_count)


async def list_articles(
    db: AsyncSession,
    topic: str | None = None,
    sort_by: str | None = None,
    order: str | None = None,
) -> list[dict]:
    """
    Return articles (list view) optionally filtered by *topic*.

    Validation happens in a fixed order: ``sort_by`` and ``order`` are
    checked against their allow-lists (``BadRequest``), then the topic is
    looked up (``NotFound`` if it has never existed).  A known topic with
    no articles yields an empty list.
    """
    sort_column = SortColumn.parse(sort_by)
    sort_order = SortOrder.parse(order)

    q = _select_with_comment_count()
    if topic is not None:
        await topic_service.select_topic(db, topic)
        q = q.where(Article.topic == topic)

    direction = asc if sort_order is SortOrder.ASC else desc
    q = q.order_by(direction(sort_column.column))

    result = await db.execute(q)
    return [_article_to_dict(article, count) for article, count in result.all()]


async def update_article_votes(db: AsyncSession, article_id: int, delta: int) -> dict:
    """
    Add *delta* (may be negative) to the article's votes and return the
    updated detail dict.

    Raises ``NotFound`` when no article matched, so an unknown id is never
    reported as a successful no-op.
    """
    stmt = (
        update(Article)
        .where(Article.article_id == article_id)
        .values(votes=Article.votes + delta)
        .returning(Article.article_id)
    )
    result = await db.execute(stmt)
    if result.scalar_one_or_none() is None:
        raise NotFound(f"article {article_id} does not exist")
    return await select_article_by_id(db, article_id)
