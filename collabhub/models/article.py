"""아티클 관련 SQLAlchemy ORM 모델 정의.

Article-related SQLAlchemy ORM model definitions.
An article is a titled document composed of ordered sections
(text, media, or both).

Tables:
    - articles: 아티클 (Articles)
    - article_sections: 아티클 섹션 (Ordered article sections)
"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import JSON, String, Boolean, DateTime, ForeignKey, Integer, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from collabhub.database import Base


class Article(Base):
    """아티클 모델 — 사용자가 작성한 섹션 기반 문서.

    Article model — Section-based document authored by a user.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        user_id: 작성자 FK (Author user foreign key)
        title: 제목 (Title, searchable)
        article_image_url / _upload / _display: 대표 이미지 (Cover image)
        tags, citations, contributors, related_media: 목록 필드 (JSON arrays)
        likes_count / follows_count / watches_count: 상호작용 카운터
        featured: 추천 여부 (Featured flag)
        created_at / updated_at: 생성/수정 일시 (Timestamps)

    Relationships:
        author: 작성자 (Author)
        sections: 섹션 목록 — order 순 (Sections ordered by "order", cascade delete)
    """

    __tablename__ = "articles"

    # 아티클 고유 식별자 — Article unique identifier (UUID v4, auto-generated)
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 작성자 FK — Author (CASCADE: 사용자 삭제 시 아티클도 삭제)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)

    article_image_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    article_image_upload: Mapped[str | None] = mapped_column(Text, nullable=True)
    article_image_display: Mapped[str | None] = mapped_column(String(20), nullable=True, default="url")

    tags: Mapped[list | None] = mapped_column(JSON, nullable=True)
    citations: Mapped[list | None] = mapped_column(JSON, nullable=True)
    contributors: Mapped[list | None] = mapped_column(JSON, nullable=True)
    related_media: Mapped[list | None] = mapped_column(JSON, nullable=True)

    likes_count: Mapped[int | None] = mapped_column(Integer, nullable=True, default=0)
    follows_count: Mapped[int | None] = mapped_column(Integer, nullable=True, default=0)
    watches_count: Mapped[int | None] = mapped_column(Integer, nullable=True, default=0)
    featured: Mapped[bool | None] = mapped_column(Boolean, nullable=True, default=False)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True, default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # 관계 — Relationships
    author = relationship("User", back_populates="articles")
    sections = relationship(
        "ArticleSection",
        back_populates="article",
        cascade="all, delete-orphan",
        order_by="ArticleSection.order",
    )


class ArticleSection(Base):
    """아티클 섹션 모델 — 아티클 본문의 한 블록.

    Article section model — One block of an article body.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        article_id: 소속 아티클 FK (Parent article)
        type: 섹션 유형 (Section type, e.g. "full-width-text", "media")
        title / subtitle: 섹션 제목 (Section headings)
        text: 본문 텍스트 (Body text; first section feeds the excerpt)
        media_url / media_subtext: 미디어 및 캡션 (Media and caption)
        order: 표시 순서 (Display order)
    """

    __tablename__ = "article_sections"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    article_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("articles.id", ondelete="CASCADE"), nullable=False, index=True)
    type: Mapped[str] = mapped_column(String(50), nullable=False, default="full-width-text")
    title: Mapped[str | None] = mapped_column(String(500), nullable=True)
    subtitle: Mapped[str | None] = mapped_column(String(500), nullable=True)
    text: Mapped[str | None] = mapped_column(Text, nullable=True)
    media_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    media_subtext: Mapped[str | None] = mapped_column(Text, nullable=True)
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    article = relationship("Article", back_populates="sections")
