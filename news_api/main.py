import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from news_api.config import settings
from news_api.database import engine
from news_api.error_handlers import register_error_handlers
from news_api.errors import NotFound
from news_api.middleware import TimingMiddleware
from news_api.routers import api, articles, comments, topics, users

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info("News API starting (env=%s)", settings.APP_ENV)
    yield
    # Shutdown: drain the connection pool
    await engine.dispose()
    logger.info("Database connection pool disposed")

app = FastAPI(
    title="News API",
    description="Topics, articles, comments and users of a news aggregator",
    version="1.0.0",
    lifespan=lifespan,
)

# Middleware
app.add_middleware(TimingMiddleware, query_log_threshold=settings.QUERY_LOG_THRESHOLD)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Routers
app.include_router(api.router)
app.include_router(topics.router)
app.include_router(articles.router)
app.include_router(comments.router)
app.include_router(users.router)


# Must stay the last route registered: anything unmatched above, any method.
@app.api_route(
    "/{path:path}",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"],
    include_in_schema=False,
)
async def not_found(path: str):
    raise NotFound(f"no route for /{path}")


def run() -> None:
    uvicorn.run("news_api.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
