"""아티클 관련 Pydantic 요청/응답 스키마 정의.

Article and article-section Pydantic request/response schema definitions.
"""

from datetime import datetime
from pydantic import BaseModel, Field

from collabhub.schemas.common import OwnerFields


class ArticleSectionInput(BaseModel):
    """아티클 섹션 입력 스키마.

    Article section payload. When order is omitted the section takes its
    position in the submitted list.
    """

    type: str = "full-width-text"  # 섹션 유형 (Section layout type)
    title: str | None = None
    subtitle: str | None = None
    text: str | None = None
    media_url: str | None = None
    media_subtext: str | None = None
    order: int | None = None  # 표시 순서 (Display order, optional)


class ArticleSectionResponse(BaseModel):
    """아티클 섹션 응답 스키마."""

    id: str
    type: str
    title: str | None = None
    subtitle: str | None = None
    text: str | None = None
    media_url: str | None = None
    media_subtext: str | None = None
    order: int = 0


class ArticleCreate(BaseModel):
    """아티클 생성 요청 스키마.

    Article creation request schema. A missing or blank title becomes
    "Untitled Article".

    Attributes:
        title: 제목 (Title, optional)
        article_image_*: 대표 이미지 (Cover image fields)
        tags / citations / contributors / related_media: 목록 필드 (Lists)
        sections: 섹션 목록 (Ordered sections)
    """

    title: str | None = Field(default=None, max_length=500)
    article_image_url: str | None = None
    article_image_upload: str | None = None
    article_image_display: str | None = None
    tags: list[str] | None = None
    citations: list[str] | None = None
    contributors: list[str] | None = None
    related_media: list[str] | None = None
    sections: list[ArticleSectionInput] = []


class ArticleUpdate(BaseModel):
    """아티클 수정 요청 스키마 (부분 업데이트).

    Article update request schema. When sections is present it replaces
    every existing section.
    """

    title: str | None = Field(default=None, max_length=500)
    article_image_url: str | None = None
    article_image_upload: str | None = None
    article_image_display: str | None = None
    tags: list[str] | None = None
    citations: list[str] | None = None
    contributors: list[str] | None = None
    related_media: list[str] | None = None
    sections: list[ArticleSectionInput] | None = None


class ArticleResponse(OwnerFields):
    """아티클 응답 스키마 — 요약(excerpt)과 정렬된 섹션 포함.

    Article response schema with excerpt and ordered sections.
    """

    id: str  # 아티클 UUID 문자열 (Article UUID as string)
    user_id: str  # 작성자 UUID 문자열 (Author UUID as string)
    title: str
    article_image_url: str | None = None
    article_image_upload: str | None = None
    article_image_display: str = "url"
    article_image: str | None = None  # 표시 모드로 해석된 이미지 (Resolved image)
    tags: list[str] = []
    citations: list[str] = []
    contributors: list[str] = []
    related_media: list[str] = []
    likes_count: int = 0
    follows_count: int = 0
    watches_count: int = 0
    featured: bool = False
    excerpt: str = ""  # 첫 섹션 텍스트 요약 (First-section text excerpt)
    sections: list[ArticleSectionResponse] = []
    created_at: datetime | None = None
    updated_at: datetime | None = None
