"""댓글 관련 Pydantic 요청/응답 스키마 정의.

Comment Pydantic request/response schema definitions.
"""

from datetime import datetime
from typing import Literal
from uuid import UUID
from pydantic import BaseModel, Field

# 댓글 대상 유형 — Entity types that accept comments
CommentEntityType = Literal["project", "article", "post"]


class CommentCreate(BaseModel):
    """댓글 생성 요청 스키마.

    Comment creation request schema.

    Attributes:
        entity_type: 대상 유형 (Target type)
        entity_id: 대상 UUID (Target identifier)
        text: 댓글 내용 (Comment body, must not be blank)
    """

    entity_type: CommentEntityType
    entity_id: UUID
    text: str = Field(..., min_length=1, max_length=5000)


class CommentResponse(BaseModel):
    """댓글 응답 스키마 — 작성자 정보 포함.

    Comment response schema including the author's username and image.
    """

    id: str
    user_id: str
    entity_type: str
    entity_id: str
    text: str
    likes_count: int = 0
    featured: bool = False
    username: str | None = None  # 작성자 사용자명 (Author username)
    user_profile_image_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
