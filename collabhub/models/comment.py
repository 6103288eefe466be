"""댓글 SQLAlchemy ORM 모델 정의.

Comment SQLAlchemy ORM model definition.
Comments attach to any entity via (entity_type, entity_id), like interactions.

Tables:
    - comments: 댓글 (Comments on projects, articles, posts)
"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import Boolean, DateTime, ForeignKey, Index, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from collabhub.database import Base


class Comment(Base):
    """댓글 모델 — 엔티티에 달린 사용자 댓글.

    Comment model — A user's comment on an entity.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        user_id: 작성자 FK (Author user foreign key)
        entity_type: 대상 유형 (Target type: project/article/post)
        entity_id: 대상 UUID (Target identifier)
        text: 댓글 내용 (Comment body)
        likes_count: 좋아요 수 (Likes received)
        featured: 추천 여부 (Featured flag)
        created_at / updated_at: 생성/수정 일시 (Timestamps)
    """

    __tablename__ = "comments"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 작성자 FK — CASCADE: 사용자 삭제 시 댓글도 삭제
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    entity_type: Mapped[str] = mapped_column(String(20), nullable=False)
    entity_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    likes_count: Mapped[int | None] = mapped_column(Integer, nullable=True, default=0)
    featured: Mapped[bool | None] = mapped_column(Boolean, nullable=True, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        Index("ix_comments_entity", "entity_type", "entity_id"),
    )

    author = relationship("User")
