"""포스트 SQLAlchemy ORM 모델 정의.

Post SQLAlchemy ORM model definition.
A post is a short-form update with an optional image and tags.

Tables:
    - posts: 포스트 (Short-form posts)
"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import JSON, String, Boolean, DateTime, ForeignKey, Integer, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from collabhub.database import Base


class Post(Base):
    """포스트 모델 — 사용자가 작성한 짧은 게시물.

    Post model — Short-form update authored by a user.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        user_id: 작성자 FK (Author user foreign key)
        title: 제목 (Title, searchable)
        description: 본문 (Body text, searchable)
        media_url: 첨부 미디어 URL (Attached media URL)
        post_image_url / _upload / _display: 이미지 (Image)
        tags: 태그 목록 (JSON array)
        comments_count: 댓글 수 (Comment counter)
        likes_count / follows_count / watches_count: 상호작용 카운터
        featured: 추천 여부 (Featured flag)
    """

    __tablename__ = "posts"

    # 포스트 고유 식별자 — Post unique identifier (UUID v4, auto-generated)
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 작성자 FK — Author (CASCADE: 사용자 삭제 시 포스트도 삭제)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    media_url: Mapped[str | None] = mapped_column(Text, nullable=True)

    post_image_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    post_image_upload: Mapped[str | None] = mapped_column(Text, nullable=True)
    post_image_display: Mapped[str | None] = mapped_column(String(20), nullable=True, default="url")

    tags: Mapped[list | None] = mapped_column(JSON, nullable=True)

    comments_count: Mapped[int | None] = mapped_column(Integer, nullable=True, default=0)
    likes_count: Mapped[int | None] = mapped_column(Integer, nullable=True, default=0)
    follows_count: Mapped[int | None] = mapped_column(Integer, nullable=True, default=0)
    watches_count: Mapped[int | None] = mapped_column(Integer, nullable=True, default=0)
    featured: Mapped[bool | None] = mapped_column(Boolean, nullable=True, default=False)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    author = relationship("User", back_populates="posts")
