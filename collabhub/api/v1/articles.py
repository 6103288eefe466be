"""아티클 라우터 — 아티클 CRUD API.

Article Router — Article listing, detail and author-only writes.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from collabhub.api.deps import get_current_user
from collabhub.database import get_db
from collabhub.models.article import Article
from collabhub.models.user import User
from collabhub.schemas.article import ArticleCreate, ArticleResponse, ArticleUpdate
from collabhub.schemas.common import MessageResponse, PaginatedResponse
from collabhub.services.article_service import article_service

router: APIRouter = APIRouter()


@router.get("", response_model=PaginatedResponse)
async def list_articles(
    db: Annotated[AsyncSession, Depends(get_db)],
    page: Annotated[int, Query(ge=1)] = 1,
    per_page: Annotated[int, Query(ge=1, le=100)] = 20,
) -> dict:
    """아티클 목록을 최신순으로 조회합니다."""
    articles, total = await article_service.list_articles(db, page, per_page)
    return {
        "items": [article_service.build_response(a) for a in articles],
        "total": total,
        "page": page,
        "per_page": per_page,
    }


@router.get("/{article_id}", response_model=ArticleResponse)
async def get_article(
    article_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> dict:
    """아티클 상세를 조회합니다 — 섹션은 order 순.

    Get an article with its sections in display order.
    """
    article: Article = await article_service.get_article(db, article_id)
    return article_service.build_response(article)


@router.post("", response_model=ArticleResponse, status_code=status.HTTP_201_CREATED)
async def create_article(
    data: ArticleCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> dict:
    """새 아티클을 섹션과 함께 생성합니다.

    Create an article with its sections.

    Args:
        data: 아티클 생성 데이터 (Article creation data)
        db: 비동기 데이터베이스 세션 (Async database session)
        current_user: 인증된 사용자, 작성자 (Authenticated user, author)

    Returns:
        dict: 생성된 아티클 (Created article)
    """
    article: Article = await article_service.create_article(db, current_user, data)
    await db.commit()
    return article_service.build_response(article)


@router.put("/{article_id}", response_model=ArticleResponse)
async def update_article(
    article_id: UUID,
    data: ArticleUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> dict:
    """아티클을 수정합니다 (작성자만). 섹션이 오면 전체 교체."""
    article: Article = await article_service.update_article(db, article_id, current_user, data)
    await db.commit()
    return article_service.build_response(article)


@router.delete("/{article_id}", response_model=MessageResponse)
async def delete_article(
    article_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> dict:
    """아티클을 삭제합니다 (작성자만)."""
    await article_service.delete_article(db, article_id, current_user)
    await db.commit()
    return {"message": "아티클이 삭제되었습니다 (Article deleted)"}
