"""Database seeder: rebuilds the schema and loads a dataset module."""
import argparse
import asyncio
import importlib
import logging
import time
from types import ModuleType

from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker

from news_api.database import Base, engine
from news_api.models import Article, Comment, Topic, User

logger = logging.getLogger(__name__)


async def seed(engine: AsyncEngine, data: ModuleType) -> None:
    """
    Drop and recreate every table on *engine*, then insert *data*.

    Articles are inserted in list order so their generated ids follow list
    position; comments are linked to articles through ``article_title``.
    """
    start = time.perf_counter()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    async with session_factory() as session:
        session.add_all([Topic(**row) for row in data.topics])
        session.add_all([User(**row) for row in data.users])
        await session.flush()

        articles = []
        for row in data.articles:
            article = Article(**row)
            session.add(article)
            # Flush one at a time so ids are assigned in list order.
            await session.flush()
            articles.append(article)
        article_ids = {a.title: a.article_id for a in articles}

        for row in data.comments:
            fields = dict(row)
            fields["article_id"] = article_ids[fields.pop("article_title")]
            session.add(Comment(**fields))
        await session.flush()

        await session.commit()

    logger.info(
        "Seeded %d topics, %d users, %d articles, %d comments in %.2fs",
        len(data.topics), len(data.users), len(data.articles), len(data.comments),
        time.perf_counter() - start,
    )


def main():
    parser = argparse.ArgumentParser(description="Seed the news database")
    parser.add_argument(
        "--data",
        default="sample",
        help="Dataset module under news_api.data (default: sample)",
    )
    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO)
    data = importlib.import_module(f"news_api.data.{args.data}")

    async def _run():
        try:
            await seed(engine, data)
        finally:
            await engine.dispose()

    asyncio.run(_run())


if __name__ == "__main__":
    main()
