"""포스트 레포지토리 — 포스트 관련 DB 쿼리 담당.

Post Repository — Handles post database queries, including the posts
explore search builder.
"""

from typing import Any, Sequence
from uuid import UUID

from sqlalchemy import Select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from collabhub.models.post import Post
from collabhub.models.user import User
from collabhub.repositories.base import BaseRepository, is_type_filter_active


class PostRepository(BaseRepository[Post]):
    """포스트 레포지토리.

    Post repository. Queries eager-load the author.

    Extends:
        BaseRepository[Post]
    """

    def __init__(self) -> None:
        super().__init__(Post)

    def loader_options(self) -> list[Any]:
        return [selectinload(Post.author)]

    async def list_paginated(
        self,
        db: AsyncSession,
        page: int = 1,
        per_page: int = 20,
        user_id: UUID | None = None,
    ) -> tuple[Sequence[Post], int]:
        """포스트 목록을 최신순으로 조회합니다."""
        query: Select = self.base_query()
        if user_id is not None:
            query = query.where(Post.user_id == user_id)
        query = query.order_by(Post.created_at.desc(), Post.id)
        return await self.get_paginated(db, query, page, per_page)

    async def search(
        self,
        db: AsyncSession,
        query_text: str,
        user_types: Sequence[str],
        page: int,
        per_page: int,
        sort_field: str,
        sort_order: str,
    ) -> tuple[Sequence[Post], int]:
        """포스트를 검색합니다 — 제목 또는 본문 부분 일치.

        Search posts by case-insensitive substring on title or description.
        The user-type filter applies to the author.

        Returns:
            tuple[Sequence[Post], int]: (포스트 목록, 전체 개수)
        """
        query: Select = self.base_query()
        if query_text:
            query = query.where(self.text_match(query_text, Post.title, Post.description))
        if is_type_filter_active(user_types):
            query = query.join(User, Post.user_id == User.id).where(
                User.user_type.in_(list(user_types))
            )
        query = self.apply_sort(query, sort_field, sort_order)
        return await self.get_paginated(db, query, page, per_page)


# 싱글턴 인스턴스 — Singleton instance
post_repository: PostRepository = PostRepository()
