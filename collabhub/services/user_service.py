"""사용자 서비스 — 프로필 조회/수정 비즈니스 로직.

User Service — Business logic for public profiles: listing, detail,
self-service profile updates, and the per-user content listing.
"""

import logging
from typing import Any, Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from collabhub.models.user import User
from collabhub.repositories.user_repository import user_repository
from collabhub.schemas.user import UserUpdate
from collabhub.utils.exceptions import DuplicateError, NotFoundError
from collabhub.utils.media import resolve_image

logger = logging.getLogger(__name__)

# 목록형 프로필 필드 — JSON list columns normalised to []
USER_LIST_FIELDS: tuple[str, ...] = (
    "skills",
    "expertise",
    "interest_tags",
    "experience_tags",
    "education_tags",
    "target_audience",
    "solutions_offered",
)


def owner_fields(owner: User | None) -> dict[str, Any]:
    """소유 엔티티 응답에 붙일 소유자 필드를 구성합니다.

    Build the owner fields attached to project, article and post responses.

    Args:
        owner: 소유자 사용자 또는 None (Owning user, or None)

    Returns:
        dict: username, user_type, user_profile_image_* 딕셔너리
    """
    if owner is None:
        return {
            "username": None,
            "user_type": None,
            "user_profile_image_url": None,
            "user_profile_image_upload": None,
            "user_profile_image_display": "url",
        }
    return {
        "username": owner.username,
        "user_type": owner.user_type,
        "user_profile_image_url": owner.profile_image_url,
        "user_profile_image_upload": owner.profile_image_upload,
        "user_profile_image_display": owner.profile_image_display or "url",
    }


class UserService:
    """사용자 서비스.

    User service providing profile reads and self-service updates.
    """

    def build_response(self, user: User, include_private: bool = False) -> dict:
        """사용자 응답 딕셔너리를 구성합니다 (기본값 정규화).

        Build the profile response dict with nullable columns normalised.

        Args:
            user: 사용자 ORM 객체 (User ORM object)
            include_private: 이메일 포함 여부 (Include email, for /users/me)

        Returns:
            dict: 정규화된 프로필 딕셔너리 (Normalised profile dict)
        """
        display: str = user.profile_image_display or "url"
        response: dict[str, Any] = {
            "id": str(user.id),
            "username": user.username,
            "email": user.email if include_private else None,
            "bio": user.bio,
            "user_type": user.user_type,
            "career_title": user.career_title,
            "work_status": user.work_status,
            "seeking": user.seeking,
            "profile_image_url": user.profile_image_url,
            "profile_image_upload": user.profile_image_upload,
            "profile_image_display": display,
            "profile_image": resolve_image(
                user.profile_image_url, user.profile_image_upload, display
            ),
            "likes_count": user.likes_count or 0,
            "followers_count": user.followers_count or 0,
            "watches_count": user.watches_count or 0,
            "featured": bool(user.featured),
            "created_at": user.created_at,
            "updated_at": user.updated_at,
        }
        for field in USER_LIST_FIELDS:
            response[field] = getattr(user, field) or []
        return response

    async def list_users(
        self,
        db: AsyncSession,
        page: int = 1,
        per_page: int = 20,
    ) -> tuple[Sequence[User], int]:
        """사용자 목록을 최신순으로 조회합니다.

        List users newest first.
        """
        return await user_repository.list_paginated(db, page, per_page)

    async def get_user(self, db: AsyncSession, user_id: UUID) -> User:
        """사용자를 조회합니다.

        Get a user by id.

        Raises:
            NotFoundError: 사용자가 없을 때 (When user not found)
        """
        user: User | None = await user_repository.get_by_id(db, user_id)
        if user is None:
            raise NotFoundError("사용자를 찾을 수 없습니다 (User not found)")
        return user

    async def update_profile(
        self,
        db: AsyncSession,
        user: User,
        data: UserUpdate,
    ) -> User:
        """현재 사용자의 프로필을 수정합니다.

        Apply a partial profile update for the current user.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            user: 현재 사용자 (Authenticated user)
            data: 수정 데이터 (Update payload; unset fields untouched)

        Returns:
            User: 수정된 사용자 (Updated user)

        Raises:
            DuplicateError: 사용자명이 이미 사용 중일 때 (When username is taken)
        """
        update_data: dict = data.model_dump(exclude_unset=True)

        new_username: str | None = update_data.get("username")
        if new_username is not None and new_username != user.username:
            existing: User | None = await user_repository.get_by_username(db, new_username)
            if existing is not None:
                raise DuplicateError("이미 사용 중인 사용자명입니다 (Username already taken)")
        elif "username" in update_data and new_username is None:
            # 사용자명은 비울 수 없음 — Username cannot be cleared
            update_data.pop("username")

        updated: User | None = await user_repository.update(db, user.id, update_data)
        if updated is None:
            raise NotFoundError("사용자를 찾을 수 없습니다 (User not found)")
        logger.info("Profile updated for user %s (fields: %s)", user.id, sorted(update_data))
        return updated

    async def get_user_content(self, db: AsyncSession, user_id: UUID) -> dict:
        """사용자의 프로젝트, 아티클, 포스트를 조회합니다.

        Collect a user's projects, articles and posts as response dicts.

        Raises:
            NotFoundError: 사용자가 없을 때 (When user not found)
        """
        # 순환 임포트 방지 — Deferred to avoid a circular import
        from collabhub.services.article_service import article_service
        from collabhub.services.post_service import post_service
        from collabhub.services.project_service import project_service

        await self.get_user(db, user_id)
        projects = await project_service.list_by_user(db, user_id)
        articles = await article_service.list_by_user(db, user_id)
        posts = await post_service.list_by_user(db, user_id)
        return {
            "projects": [project_service.build_response(p) for p in projects],
            "articles": [article_service.build_response(a) for a in articles],
            "posts": [post_service.build_response(p) for p in posts],
        }


# 싱글턴 인스턴스 — Singleton instance
user_service: UserService = UserService()
