"""댓글 레포지토리 — 댓글 관련 DB 쿼리 담당.

Comment Repository — Handles comment database queries.
"""

from typing import Any, Sequence
from uuid import UUID

from sqlalchemy import Select, delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from collabhub.models.comment import Comment
from collabhub.repositories.base import BaseRepository


class CommentRepository(BaseRepository[Comment]):
    """댓글 레포지토리.

    Comment repository. Queries eager-load the author for the username.

    Extends:
        BaseRepository[Comment]
    """

    def __init__(self) -> None:
        super().__init__(Comment)

    def loader_options(self) -> list[Any]:
        return [selectinload(Comment.author)]

    async def get_for_entity(
        self,
        db: AsyncSession,
        entity_type: str,
        entity_id: UUID,
    ) -> Sequence[Comment]:
        """엔티티에 달린 댓글을 최신순으로 조회합니다.

        Retrieve all comments on one entity, newest first.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            entity_type: 대상 유형 (Target type)
            entity_id: 대상 UUID (Target identifier)

        Returns:
            Sequence[Comment]: 댓글 목록 (Comments, newest first)
        """
        query: Select = (
            self.base_query()
            .where(Comment.entity_type == entity_type, Comment.entity_id == entity_id)
            .order_by(Comment.created_at.desc(), Comment.id)
        )
        result = await db.execute(query)
        return result.scalars().all()

    async def delete_for_entity(
        self,
        db: AsyncSession,
        entity_type: str,
        entity_id: UUID,
    ) -> list[UUID]:
        """엔티티에 달린 댓글을 모두 삭제하고 삭제된 ID를 반환합니다.

        Delete every comment on one entity. The ids are returned so likes on
        those comments can be removed as well.
        """
        result = await db.execute(
            select(Comment.id).where(
                Comment.entity_type == entity_type, Comment.entity_id == entity_id
            )
        )
        comment_ids: list[UUID] = list(result.scalars().all())
        if comment_ids:
            await db.execute(delete(Comment).where(Comment.id.in_(comment_ids)))
        return comment_ids


# 싱글턴 인스턴스 — Singleton instance
comment_repository: CommentRepository = CommentRepository()
