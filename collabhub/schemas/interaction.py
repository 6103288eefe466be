"""상호작용(좋아요/팔로우/워치) Pydantic 스키마 정의.

Like / follow / watch Pydantic request/response schema definitions.
"""

from datetime import datetime
from typing import Literal
from uuid import UUID
from pydantic import BaseModel

# 상호작용 대상 유형 — Entity types an interaction may target
InteractionEntityType = Literal["user", "project", "article", "post", "comment"]


class InteractionCreate(BaseModel):
    """상호작용 생성 요청 스키마.

    Interaction creation request schema.

    Attributes:
        entity_type: 대상 유형 (Target type)
        entity_id: 대상 UUID (Target identifier)
    """

    entity_type: InteractionEntityType
    entity_id: UUID


class InteractionResponse(BaseModel):
    """상호작용 응답 스키마."""

    id: str
    user_id: str
    entity_type: str
    entity_id: str
    created_at: datetime | None = None


class InteractionStatusResponse(BaseModel):
    """상호작용 여부 응답 (Whether the current user has acted on the entity)."""

    active: bool


class CountResponse(BaseModel):
    """집계 응답 (Single count)."""

    count: int


class EntityIdListResponse(BaseModel):
    """엔티티 ID 목록 응답 (Ids of entities the current user acted on)."""

    entity_type: str
    entity_ids: list[str]
