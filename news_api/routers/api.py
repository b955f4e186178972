from fastapi import APIRouter
from news_api.endpoints import ENDPOINTS

router = APIRouter(prefix="/api", tags=["api"])

@router.get("")
async def describe_api():
    return {"api": ENDPOINTS}
