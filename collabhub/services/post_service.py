"""포스트 서비스 — 포스트 비즈니스 로직.

Post Service — Business logic for short-form posts: CRUD with owner-only
writes and image resolution.
"""

import logging
from typing import Any, Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from collabhub.models.post import Post
from collabhub.models.user import User
from collabhub.repositories.post_repository import post_repository
from collabhub.schemas.post import PostCreate, PostUpdate
from collabhub.services.interaction_service import remove_entity_references
from collabhub.services.user_service import owner_fields
from collabhub.utils.exceptions import ForbiddenError, NotFoundError
from collabhub.utils.media import resolve_image

logger = logging.getLogger(__name__)


class PostService:
    """포스트 서비스.

    Post service providing listing, detail and owner-only writes.
    """

    def build_response(self, post: Post) -> dict:
        """포스트 응답 딕셔너리를 구성합니다.

        Build the post response dict with defaults applied, the resolved
        post_image and owner fields. The author must be loaded.
        """
        display: str = post.post_image_display or "url"
        return {
            "id": str(post.id),
            "user_id": str(post.user_id),
            "title": post.title,
            "description": post.description,
            "media_url": post.media_url,
            "post_image_url": post.post_image_url,
            "post_image_upload": post.post_image_upload,
            "post_image_display": display,
            "post_image": resolve_image(post.post_image_url, post.post_image_upload, display),
            "tags": post.tags or [],
            "comments_count": post.comments_count or 0,
            "likes_count": post.likes_count or 0,
            "follows_count": post.follows_count or 0,
            "watches_count": post.watches_count or 0,
            "featured": bool(post.featured),
            "created_at": post.created_at,
            "updated_at": post.updated_at,
            **owner_fields(post.author),
        }

    async def list_posts(
        self,
        db: AsyncSession,
        page: int = 1,
        per_page: int = 20,
    ) -> tuple[Sequence[Post], int]:
        return await post_repository.list_paginated(db, page, per_page)

    async def list_by_user(self, db: AsyncSession, user_id: UUID) -> Sequence[Post]:
        return await post_repository.get_all(
            db, filters={"user_id": user_id}, order_by=Post.created_at.desc()
        )

    async def get_post(self, db: AsyncSession, post_id: UUID) -> Post:
        """포스트를 조회합니다.

        Raises:
            NotFoundError: 포스트가 없을 때 (When post not found)
        """
        post: Post | None = await post_repository.get_by_id(db, post_id)
        if post is None:
            raise NotFoundError("포스트를 찾을 수 없습니다 (Post not found)")
        return post

    async def _get_owned(self, db: AsyncSession, post_id: UUID, user: User) -> Post:
        post: Post = await self.get_post(db, post_id)
        if post.user_id != user.id:
            raise ForbiddenError("이 포스트에 대한 권한이 없습니다 (Not the post author)")
        return post

    async def create_post(self, db: AsyncSession, user: User, data: PostCreate) -> Post:
        """새 포스트를 생성합니다.

        Create a post authored by the current user.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            user: 현재 사용자, 작성자 (Authenticated user, becomes author)
            data: 생성 데이터 (Creation payload)

        Returns:
            Post: 생성된 포스트 (Created post, author loaded)
        """
        values: dict[str, Any] = data.model_dump(exclude_none=True)
        values["user_id"] = user.id
        post: Post = await post_repository.create(db, values)
        logger.info("Post %s created by user %s", post.id, user.id)
        return await self.get_post(db, post.id)

    async def update_post(
        self,
        db: AsyncSession,
        post_id: UUID,
        user: User,
        data: PostUpdate,
    ) -> Post:
        """포스트를 수정합니다 (작성자만).

        Raises:
            NotFoundError: 포스트가 없을 때 (When post not found)
            ForbiddenError: 작성자가 아닐 때 (When the user is not the author)
        """
        await self._get_owned(db, post_id, user)
        update_data: dict[str, Any] = data.model_dump(exclude_unset=True)
        if update_data.get("title", "") is None:
            update_data.pop("title")
        await post_repository.update(db, post_id, update_data)
        return await self.get_post(db, post_id)

    async def delete_post(self, db: AsyncSession, post_id: UUID, user: User) -> bool:
        """포스트를 삭제합니다 (작성자만). 댓글과 상호작용도 함께 삭제."""
        await self._get_owned(db, post_id, user)
        await remove_entity_references(db, "post", post_id)
        deleted: bool = await post_repository.delete(db, post_id)
        logger.info("Post %s deleted by user %s", post_id, user.id)
        return deleted


# 싱글턴 인스턴스 — Singleton instance
post_service: PostService = PostService()
