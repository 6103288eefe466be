"""통계/추천 라우터 — 랜딩 페이지 API.

Stats Router — Platform statistics and the featured-content feed.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from collabhub.database import get_session_factory
from collabhub.schemas.stats import FeaturedResponse, StatsResponse
from collabhub.services.featured_service import featured_service
from collabhub.services.stats_service import stats_service

router: APIRouter = APIRouter()


@router.get("/stats", response_model=StatsResponse)
async def get_stats(
    session_factory: Annotated[async_sessionmaker[AsyncSession], Depends(get_session_factory)],
) -> dict:
    """플랫폼 통계를 조회합니다.

    Platform-wide counts, gathered concurrently.
    """
    return await stats_service.get_stats(session_factory)


@router.get("/featured", response_model=FeaturedResponse)
async def get_featured(
    session_factory: Annotated[async_sessionmaker[AsyncSession], Depends(get_session_factory)],
    featured_only: bool = False,
) -> dict:
    """추천 콘텐츠를 조회합니다 — 유형별 최신 FEATURED_LIMIT개.

    Newest items of each type; featured_only restricts to featured rows.
    """
    return await featured_service.get_featured(session_factory, featured_only=featured_only)
