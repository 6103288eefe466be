"""포스트 라우터 — 포스트 CRUD API.

Post Router — Post listing, detail and author-only writes.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from collabhub.api.deps import get_current_user
from collabhub.database import get_db
from collabhub.models.post import Post
from collabhub.models.user import User
from collabhub.schemas.common import MessageResponse, PaginatedResponse
from collabhub.schemas.post import PostCreate, PostResponse, PostUpdate
from collabhub.services.post_service import post_service

router: APIRouter = APIRouter()


@router.get("", response_model=PaginatedResponse)
async def list_posts(
    db: Annotated[AsyncSession, Depends(get_db)],
    page: Annotated[int, Query(ge=1)] = 1,
    per_page: Annotated[int, Query(ge=1, le=100)] = 20,
) -> dict:
    """포스트 목록을 최신순으로 조회합니다."""
    posts, total = await post_service.list_posts(db, page, per_page)
    return {
        "items": [post_service.build_response(p) for p in posts],
        "total": total,
        "page": page,
        "per_page": per_page,
    }


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(
    post_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> dict:
    post: Post = await post_service.get_post(db, post_id)
    return post_service.build_response(post)


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    data: PostCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> dict:
    """새 포스트를 생성합니다."""
    post: Post = await post_service.create_post(db, current_user, data)
    await db.commit()
    return post_service.build_response(post)


@router.put("/{post_id}", response_model=PostResponse)
async def update_post(
    post_id: UUID,
    data: PostUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> dict:
    """포스트를 수정합니다 (작성자만)."""
    post: Post = await post_service.update_post(db, post_id, current_user, data)
    await db.commit()
    return post_service.build_response(post)


@router.delete("/{post_id}", response_model=MessageResponse)
async def delete_post(
    post_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> dict:
    """포스트를 삭제합니다 (작성자만)."""
    await post_service.delete_post(db, post_id, current_user)
    await db.commit()
    return {"message": "포스트가 삭제되었습니다 (Post deleted)"}
