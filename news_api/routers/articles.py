from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from news_api.database import get_db
from news_api.dependencies import ArticleId, ArticleListParams
from news_api.schemas import (
    ArticleEnvelope,
    ArticleList,
    CommentCreate,
    CommentEnvelope,
    CommentList,
    VotesUpdate,
)
from news_api.services import article_service, comment_service, user_service

router = APIRouter(prefix="/api/articles", tags=["articles"])

@router.get("", response_model=ArticleList)
async def list_articles(
    params: ArticleListParams = Depends(),
    db: AsyncSession = Depends(get_db),
):
    articles = await article_service.list_articles(
        db, params.topic, params.sort_by, params.order
    )
    return {"articles": articles}

@router.get("/{article_id}", response_model=ArticleEnvelope)
async def get_article(article_id: ArticleId, db: AsyncSession = Depends(get_db)):
    return {"article": await article_service.select_article_by_id(db, article_id)}

@router.patch("/{article_id}", response_model=ArticleEnvelope)
async def patch_article(article_id: ArticleId, data: VotesUpdate, db: AsyncSession = Depends(get_db)):
    article = await article_service.update_article_votes(db, article_id, data.inc_votes)
    return {"article": article}

@router.get("/{article_id}/comments", response_model=CommentList)
async def get_comments(article_id: ArticleId, db: AsyncSession = Depends(get_db)):
    # An unknown article must be 404, not an empty list.
    await article_service.select_article_by_id(db, article_id)
    return {"comments": await comment_service.select_comments_by_article(db, article_id)}

@router.post("/{article_id}/comments", status_code=201, response_model=CommentEnvelope)
async def post_comment(article_id: ArticleId, data: CommentCreate, db: AsyncSession = Depends(get_db)):
    await article_service.select_article_by_id(db, article_id)
    await user_service.select_user_by_username(db, data.username)
    comment = await comment_service.insert_comment(db, article_id, data.username, data.body)
    return {"comment": comment}
