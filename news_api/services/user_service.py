"""
User service - read-only access to the ``users`` table.

Users are referenced by articles and comments through ``username``; the
API never creates or edits them.
"""
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from news_api.errors import NotFound
from news_api.models import User


def _user_to_dict(user: User) -> dict:
    """Serialise a User ORM instance to a plain dict."""
    return {
        "username": user.username,
        "name": user.name,
        "avatar_url": user.avatar_url,
    }


async def select_users(db: AsyncSession) -> list[dict]:
    """Return every user ordered by username."""
    result = await db.execute(select(User).order_by(User.username))
    return [_user_to_dict(u) for u in result.scalars().all()]


async def select_user_by_username(db: AsyncSession, username: str) -> dict:
    """
    Return the user identified by *username*.

    Raises ``NotFound`` when no user matches.  Comment creation calls this
    before inserting so an unknown author is reported as 404 rather than as
    a foreign-key violation.
    """
    result = await db.execute(select(User).where(User.username == username))
    user = result.scalar_one_or_none()
    if user is None:
        raise NotFound(f"user {username!r} does not exist")
    return _user_to_dict(user)
