"""댓글 서비스 — 댓글 비즈니스 로직.

Comment Service — Business logic for comments on projects, articles and
posts. Only the author may delete a comment.
"""

import logging
from typing import Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from collabhub.models.comment import Comment
from collabhub.models.post import Post
from collabhub.models.user import User
from collabhub.repositories.comment_repository import comment_repository
from collabhub.schemas.comment import CommentCreate
from collabhub.services.interaction_service import entity_exists, remove_entity_references
from collabhub.utils.exceptions import BadRequestError, ForbiddenError, NotFoundError

logger = logging.getLogger(__name__)


class CommentService:
    """댓글 서비스."""

    def build_response(self, comment: Comment) -> dict:
        """댓글 응답 딕셔너리를 구성합니다 (작성자 정보 포함).

        Build the comment response dict. The author must be loaded.
        """
        author: User | None = comment.author
        return {
            "id": str(comment.id),
            "user_id": str(comment.user_id),
            "entity_type": comment.entity_type,
            "entity_id": str(comment.entity_id),
            "text": comment.text,
            "likes_count": comment.likes_count or 0,
            "featured": bool(comment.featured),
            "username": author.username if author else None,
            "user_profile_image_url": author.profile_image_url if author else None,
            "created_at": comment.created_at,
            "updated_at": comment.updated_at,
        }

    async def create_comment(
        self,
        db: AsyncSession,
        user: User,
        data: CommentCreate,
    ) -> Comment:
        """댓글을 작성합니다.

        Create a comment on an existing project, article or post. A post
        comment also raises the post's comments_count.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            user: 현재 사용자, 작성자 (Authenticated user, becomes author)
            data: 댓글 데이터 (Comment payload)

        Returns:
            Comment: 생성된 댓글, 작성자 로드됨 (Created comment, author loaded)

        Raises:
            BadRequestError: 내용이 공백뿐일 때 (When text is blank)
            NotFoundError: 대상이 없을 때 (When the target does not exist)
        """
        text: str = data.text.strip()
        if not text:
            raise BadRequestError("댓글 내용이 비어 있습니다 (Comment text is empty)")
        if not await entity_exists(db, data.entity_type, data.entity_id):
            raise NotFoundError("대상을 찾을 수 없습니다 (Target entity not found)")

        comment: Comment = await comment_repository.create(
            db,
            {
                "user_id": user.id,
                "entity_type": data.entity_type,
                "entity_id": data.entity_id,
                "text": text,
            },
        )
        if data.entity_type == "post":
            await comment_repository.adjust_counter(
                db, Post, "comments_count", data.entity_id, 1
            )
        logger.info("Comment %s added on %s %s", comment.id, data.entity_type, data.entity_id)
        return await self.get_comment(db, comment.id)

    async def get_comment(self, db: AsyncSession, comment_id: UUID) -> Comment:
        comment: Comment | None = await comment_repository.get_by_id(db, comment_id)
        if comment is None:
            raise NotFoundError("댓글을 찾을 수 없습니다 (Comment not found)")
        return comment

    async def list_comments(
        self,
        db: AsyncSession,
        entity_type: str,
        entity_id: UUID,
    ) -> Sequence[Comment]:
        """엔티티의 댓글을 최신순으로 조회합니다."""
        return await comment_repository.get_for_entity(db, entity_type, entity_id)

    async def delete_comment(self, db: AsyncSession, comment_id: UUID, user: User) -> bool:
        """댓글을 삭제합니다 (작성자만).

        Delete a comment and the likes on it. A post comment also lowers the
        post's comments_count.

        Raises:
            NotFoundError: 댓글이 없을 때 (When comment not found)
            ForbiddenError: 작성자가 아닐 때 (When the user is not the author)
        """
        comment: Comment = await self.get_comment(db, comment_id)
        if comment.user_id != user.id:
            raise ForbiddenError("본인 댓글만 삭제할 수 있습니다 (Not the comment author)")
        await remove_entity_references(db, "comment", comment_id)
        deleted: bool = await comment_repository.delete(db, comment_id)
        if comment.entity_type == "post":
            await comment_repository.adjust_counter(
                db, Post, "comments_count", comment.entity_id, -1
            )
        return deleted


# 싱글턴 인스턴스 — Singleton instance
comment_service: CommentService = CommentService()
