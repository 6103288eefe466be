"""사용자 라우터 — 프로필 조회/수정 API.

User Router — Public profile listing and detail, plus the current user's
own profile read/update.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from collabhub.api.deps import get_current_user
from collabhub.database import get_db
from collabhub.models.user import User
from collabhub.schemas.common import PaginatedResponse
from collabhub.schemas.user import UserContentResponse, UserResponse, UserUpdate
from collabhub.services.user_service import user_service

router: APIRouter = APIRouter()


@router.get("", response_model=PaginatedResponse)
async def list_users(
    db: Annotated[AsyncSession, Depends(get_db)],
    page: Annotated[int, Query(ge=1)] = 1,
    per_page: Annotated[int, Query(ge=1, le=100)] = 20,
) -> dict:
    """사용자 목록을 최신순으로 조회합니다.

    List user profiles, newest first.
    """
    users, total = await user_service.list_users(db, page, per_page)
    return {
        "items": [user_service.build_response(u) for u in users],
        "total": total,
        "page": page,
        "per_page": per_page,
    }


@router.get("/me", response_model=UserResponse)
async def get_me(
    current_user: Annotated[User, Depends(get_current_user)],
) -> dict:
    """내 프로필을 조회합니다 (이메일 포함).

    Get the current user's profile, including private fields.
    """
    return user_service.build_response(current_user, include_private=True)


@router.put("/me", response_model=UserResponse)
async def update_me(
    data: UserUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> dict:
    """내 프로필을 수정합니다.

    Update the current user's profile. Only fields present in the body are
    written; a username already taken returns 409.

    Args:
        data: 수정 데이터 (Update data)
        db: 비동기 데이터베이스 세션 (Async database session)
        current_user: 인증된 사용자 (Authenticated user)

    Returns:
        dict: 수정된 프로필 (Updated profile)
    """
    user: User = await user_service.update_profile(db, current_user, data)
    await db.commit()
    return user_service.build_response(user, include_private=True)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> dict:
    """사용자 프로필을 조회합니다."""
    user: User = await user_service.get_user(db, user_id)
    return user_service.build_response(user)


@router.get("/{user_id}/content", response_model=UserContentResponse)
async def get_user_content(
    user_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> dict:
    """사용자의 프로젝트, 아티클, 포스트를 조회합니다.

    Get a user's projects, articles and posts.
    """
    return await user_service.get_user_content(db, user_id)
