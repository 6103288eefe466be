"""탐색 라우터 — 통합 검색 API.

Explore Router — Combined search across users, projects, articles and posts.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from collabhub.config import settings
from collabhub.database import get_session_factory
from collabhub.schemas.explore import ExploreResponse
from collabhub.services.explore_service import explore_service, parse_csv

router: APIRouter = APIRouter()


@router.get("/search", response_model=ExploreResponse)
async def search(
    session_factory: Annotated[async_sessionmaker[AsyncSession], Depends(get_session_factory)],
    q: str = "",
    content_types: Annotated[str, Query(alias="contentTypes")] = "",
    user_types: Annotated[str, Query(alias="userTypes")] = "",
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=settings.EXPLORE_MAX_LIMIT)] = settings.EXPLORE_DEFAULT_LIMIT,
    sort_by: Annotated[str, Query(alias="sortBy")] = "created_at",
    sort_order: Annotated[str, Query(alias="sortOrder")] = "desc",
) -> dict:
    """콘텐츠 유형별 통합 검색을 수행합니다.

    Search the requested content types concurrently and return one merged
    response. List parameters are comma separated, e.g.
    contentTypes=users,projects&userTypes=creator,brand.

    Args:
        session_factory: 세션 팩토리 — 유형별 동시 쿼리용 (Session factory)
        q: 검색어 (Free-text query)
        content_types: 검색할 콘텐츠 유형 (users, projects, articles, posts)
        user_types: 사용자 유형 필터, 비우거나 "all"이면 전체 (User-type filter)
        page: 페이지 번호, 1부터 시작 (Page number)
        limit: 유형별 페이지 크기 (Page size per content type)
        sort_by: 정렬 키 (alpha, likes, follows, watches, created, updated)
        sort_order: "asc" 또는 "desc" (Sort direction)

    Returns:
        dict: 유형별 결과, 페이지, 전체 페이지 수, 유형별 전체 개수
    """
    return await explore_service.search_all(
        session_factory,
        query=q.strip(),
        content_types=parse_csv(content_types),
        user_types=parse_csv(user_types),
        page=page,
        limit=limit,
        sort_by=sort_by,
        sort_order=sort_order,
    )
