"""댓글 라우터 — 댓글 작성/조회/삭제 API.

Comment Router — Comments on projects, articles and posts.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from collabhub.api.deps import get_current_user
from collabhub.database import get_db
from collabhub.models.comment import Comment
from collabhub.models.user import User
from collabhub.schemas.comment import CommentCreate, CommentEntityType, CommentResponse
from collabhub.schemas.common import MessageResponse
from collabhub.services.comment_service import comment_service

router: APIRouter = APIRouter()


@router.post("", response_model=CommentResponse, status_code=status.HTTP_201_CREATED)
async def create_comment(
    data: CommentCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> dict:
    """댓글을 작성합니다.

    Create a comment. The response carries the author's username.

    Args:
        data: 댓글 데이터 (Comment data)
        db: 비동기 데이터베이스 세션 (Async database session)
        current_user: 인증된 사용자 (Authenticated user)

    Returns:
        dict: 생성된 댓글 (Created comment)
    """
    comment: Comment = await comment_service.create_comment(db, current_user, data)
    await db.commit()
    return comment_service.build_response(comment)


@router.get("/{entity_type}/{entity_id}", response_model=list[CommentResponse])
async def list_comments(
    entity_type: CommentEntityType,
    entity_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[dict]:
    """엔티티의 댓글을 최신순으로 조회합니다."""
    comments = await comment_service.list_comments(db, entity_type, entity_id)
    return [comment_service.build_response(c) for c in comments]


@router.delete("/{comment_id}", response_model=MessageResponse)
async def delete_comment(
    comment_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> dict:
    """댓글을 삭제합니다 (작성자만)."""
    await comment_service.delete_comment(db, comment_id, current_user)
    await db.commit()
    return {"message": "댓글이 삭제되었습니다 (Comment deleted)"}
