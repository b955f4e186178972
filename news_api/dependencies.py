from typing import Annotated

from fastapi import Path, Query

from news_api.schemas import INT32_MAX, INT32_MIN

# Path ids outside the id column's range are rejected as bad requests
# before any statement is built.
ArticleId = Annotated[int, Path(ge=INT32_MIN, le=INT32_MAX)]
CommentId = Annotated[int, Path(ge=INT32_MIN, le=INT32_MAX)]


class ArticleListParams:
    """
    Reusable FastAPI dependency that collects the article listing's
    filter / sort query parameters.

    Usage in a router::

        @router.get("")
        async def list_articles(params: ArticleListParams = Depends()):
            ...

    Values are passed through as raw strings.  The service layer parses
    ``sort_by`` and ``order`` into its ``SortColumn`` / ``SortOrder`` enums
    and answers 400 for anything outside them; this keeps the error body
    uniform (``{"msg": "bad request"}``) instead of FastAPI's field-level
    validation detail.  Query parameters not declared here are ignored.

    Attributes
    ----------
    topic:
        Topic slug to filter by, bound as a SQL parameter.
    sort_by:
        Column to sort by; ``None`` means ``created_at``.
    order:
        ``"asc"`` or ``"desc"`` in any case; ``None`` means ``desc``.
    """

    def __init__(
        self,
        topic: str | None = Query(
            None,
            description="Only return articles with this topic slug.",
        ),
        sort_by: str | None = Query(
            None,
            description="One of article_id, title, topic, author, created_at, votes.",
        ),
        order: str | None = Query(
            None,
            description="Sort direction: 'asc' or 'desc' (case-insensitive).",
        ),
    ) -> None:
        self.topic = topic
        self.sort_by = sort_by
        self.order = order
