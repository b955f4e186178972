from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from news_api.database import get_db
from news_api.dependencies import CommentId
from news_api.schemas import CommentEnvelope, VotesUpdate
from news_api.services import comment_service

router = APIRouter(prefix="/api/comments", tags=["comments"])

@router.delete("/{comment_id}", status_code=204)
async def delete_comment(comment_id: CommentId, db: AsyncSession = Depends(get_db)):
    await comment_service.delete_comment_by_id(db, comment_id)

@router.patch("/{comment_id}", response_model=CommentEnvelope)
async def patch_comment(comment_id: CommentId, data: VotesUpdate, db: AsyncSession = Depends(get_db)):
    comment = await comment_service.update_comment_votes(db, comment_id, data.inc_votes)
    return {"comment": comment}
