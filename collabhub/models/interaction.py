"""상호작용(좋아요/팔로우/워치) SQLAlchemy ORM 모델 정의.

Interaction SQLAlchemy ORM model definitions.
Likes, follows and watches share one shape: a user acting on a polymorphic
target identified by (entity_type, entity_id). A user can act on a given
target at most once per interaction kind.

Tables:
    - likes: 좋아요 (Likes)
    - follows: 팔로우 (Follows)
    - watches: 워치 (Watches)
"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import DateTime, ForeignKey, Index, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from collabhub.database import Base


class InteractionMixin:
    """상호작용 공통 컬럼 — 사용자 × (엔티티 유형, 엔티티 ID).

    Shared interaction columns.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        user_id: 행위자 FK (Acting user foreign key)
        entity_type: 대상 유형 (Target type: user/project/article/post/comment)
        entity_id: 대상 UUID (Target identifier, not a FK — polymorphic)
        created_at: 생성 일시 UTC (Creation timestamp)
    """

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 행위자 FK — CASCADE: 사용자 삭제 시 상호작용도 삭제
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    entity_type: Mapped[str] = mapped_column(String(20), nullable=False)
    entity_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))


class Like(InteractionMixin, Base):
    """좋아요 모델."""

    __tablename__ = "likes"
    __table_args__ = (
        UniqueConstraint("user_id", "entity_type", "entity_id", name="uq_like_user_entity"),
        Index("ix_likes_entity", "entity_type", "entity_id"),
    )


class Follow(InteractionMixin, Base):
    """팔로우 모델."""

    __tablename__ = "follows"
    __table_args__ = (
        UniqueConstraint("user_id", "entity_type", "entity_id", name="uq_follow_user_entity"),
        Index("ix_follows_entity", "entity_type", "entity_id"),
    )


class Watch(InteractionMixin, Base):
    """워치 모델."""

    __tablename__ = "watches"
    __table_args__ = (
        UniqueConstraint("user_id", "entity_type", "entity_id", name="uq_watch_user_entity"),
        Index("ix_watches_entity", "entity_type", "entity_id"),
    )
