"""포스트 관련 Pydantic 요청/응답 스키마 정의.

Post Pydantic request/response schema definitions.
"""

from datetime import datetime
from pydantic import BaseModel, Field

from collabhub.schemas.common import OwnerFields


class PostCreate(BaseModel):
    """포스트 생성 요청 스키마.

    Post creation request schema.

    Attributes:
        title: 제목 (Title, required)
        description: 본문 (Body text)
        media_url: 첨부 미디어 URL (Attached media)
        post_image_*: 이미지 필드 (Image fields)
        tags: 태그 목록 (Tags)
    """

    title: str = Field(..., min_length=1, max_length=500)
    description: str | None = None
    media_url: str | None = None
    post_image_url: str | None = None
    post_image_upload: str | None = None
    post_image_display: str | None = None
    tags: list[str] | None = None


class PostUpdate(BaseModel):
    """포스트 수정 요청 스키마 (부분 업데이트)."""

    title: str | None = Field(default=None, min_length=1, max_length=500)
    description: str | None = None
    media_url: str | None = None
    post_image_url: str | None = None
    post_image_upload: str | None = None
    post_image_display: str | None = None
    tags: list[str] | None = None


class PostResponse(OwnerFields):
    """포스트 응답 스키마 — 기본값 정규화 완료."""

    id: str  # 포스트 UUID 문자열 (Post UUID as string)
    user_id: str
    title: str
    description: str | None = None
    media_url: str | None = None
    post_image_url: str | None = None
    post_image_upload: str | None = None
    post_image_display: str = "url"
    post_image: str | None = None  # 표시 모드로 해석된 이미지 (Resolved image)
    tags: list[str] = []
    comments_count: int = 0
    likes_count: int = 0
    follows_count: int = 0
    watches_count: int = 0
    featured: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None
