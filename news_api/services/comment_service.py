"""
Comment service - comments attached to an article.

Comments are the only rows the API creates and deletes.  Deletes and vote
increments are single statements with ``RETURNING`` so that an unknown id
raises ``NotFound`` without a separate existence query.

``select_comments_by_article`` and ``insert_comment`` do not check that the
article exists: an unknown article yields ``[]`` / a foreign-key violation
respectively, and the router performs the explicit existence checks.
"""
from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from news_api.errors import NotFound
from news_api.models import Comment


def _comment_to_dict(comment: Comment) -> dict:
    return {
        "comment_id": comment.comment_id,
        "article_id": comment.article_id,
        "author": comment.author,
        "body": comment.body,
        "votes": comment.votes,
        "created_at": comment.created_at.isoformat() if comment.created_at else None,
    }


async def select_comments_by_article(db: AsyncSession, article_id: int) -> list[dict]:
    """Return the article's comments, most recent first."""
    q = (
        select(Comment)
        .where(Comment.article_id == article_id)
        .order_by(Comment.created_at.desc(), Comment.comment_id.desc())
    )
    result = await db.execute(q)
    return [_comment_to_dict(c) for c in result.scalars().all()]


async def insert_comment(
    db: AsyncSession,
    article_id: int,
    author: str,
    body: str,
) -> dict:
    """
    Create a comment with zero votes and a server-side ``created_at``.

    Storage-level foreign-key failures (unknown author or article) propagate
    as ``IntegrityError`` for the error chain to classify.
    """
    comment = Comment(article_id=article_id, author=author, body=body, votes=0)
    db.add(comment)
    await db.flush()
    # created_at is generated by the database; load it back.
    await db.refresh(comment)
    return _comment_to_dict(comment)


async def delete_comment_by_id(db: AsyncSession, comment_id: int) -> None:
    stmt = (
        delete(Comment)
        .where(Comment.comment_id == comment_id)
        .returning(Comment.comment_id)
    )
    result = await db.execute(stmt)
    if result.scalar_one_or_none() is None:
        raise NotFound(f"comment {comment_id} does not exist")


async def update_comment_votes(db: AsyncSession, comment_id: int, delta: int) -> dict:
    """Add *delta* to the comment's votes and return the updated comment."""
    stmt = (
        update(Comment)
        .where(Comment.comment_id == comment_id)
        .values(votes=Comment.votes + delta)
        .returning(Comment)
    )
    result = await db.execute(stmt)
    comment = result.scalar_one_or_none()
    if comment is None:
        raise NotFound(f"comment {comment_id} does not exist")
    return _comment_to_dict(comment)
