from typing import Annotated

from pydantic import BaseModel, Field, StrictInt, StrictStr
from datetime import datetime

# Range of the ``Integer`` columns (ids and votes) on Postgres.
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


# --- Request bodies ---

class VotesUpdate(BaseModel):
    # Strict: "5", 1.5 and true are rejected rather than coerced.
    inc_votes: Annotated[StrictInt, Field(ge=INT32_MIN, le=INT32_MAX)]


class CommentCreate(BaseModel):
    # Unknown fields in the payload are ignored (pydantic default).
    username: StrictStr
    body: StrictStr


# --- Topic ---

class TopicResponse(BaseModel):
    slug: str
    description: str | None = None


class TopicList(BaseModel):
    topics: list[TopicResponse]


# --- User ---

class UserResponse(BaseModel):
    username: str
    name: str
    avatar_url: str | None = None


class UserList(BaseModel):
    users: list[UserResponse]


class UserEnvelope(BaseModel):
    user: UserResponse


# --- Article ---

class ArticleResponse(BaseModel):
    article_id: int
    title: str
    topic: str
    author: str
    created_at: datetime
    votes: int
    article_img_url: str | None = None
    comment_count: int


class ArticleDetail(ArticleResponse):
    body: str


class ArticleList(BaseModel):
    articles: list[ArticleResponse]


class ArticleEnvelope(BaseModel):
    article: ArticleDetail


# --- Comment ---

class CommentResponse(BaseModel):
    comment_id: int
    article_id: int
    author: str
    body: str
    votes: int
    created_at: datetime


class CommentList(BaseModel):
    comments: list[CommentResponse]


class CommentEnvelope(BaseModel):
    comment: CommentResponse
