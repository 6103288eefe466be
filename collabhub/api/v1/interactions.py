"""상호작용 라우터 — 좋아요/팔로우/워치 API.

Interaction Router — Likes, follows and watches share one set of endpoints;
build_interaction_router creates the router for one interaction kind.

Endpoints (per kind, e.g. /likes):
    POST   ""            상호작용 추가 (Add; 404 unknown target, 409 duplicate)
    DELETE ""            상호작용 취소 (Remove; 404 when absent)
    GET    /status       내 상호작용 여부 (Whether I acted on the entity)
    GET    /count        대상의 상호작용 수 (Count on one entity)
    GET    /user-count   내가 상호작용한 유형별 수 (My count per entity type)
    GET    /mine         내가 상호작용한 엔티티 ID (My entity ids per type)
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from collabhub.api.deps import get_current_user
from collabhub.database import get_db
from collabhub.models.user import User
from collabhub.schemas.common import MessageResponse
from collabhub.schemas.interaction import (
    CountResponse,
    EntityIdListResponse,
    InteractionCreate,
    InteractionEntityType,
    InteractionResponse,
    InteractionStatusResponse,
)
from collabhub.services.interaction_service import (
    InteractionService,
    follow_service,
    like_service,
    watch_service,
)


def build_interaction_router(service: InteractionService) -> APIRouter:
    """상호작용 종류 하나에 대한 라우터를 생성합니다.

    Build the router for one interaction kind.

    Args:
        service: 상호작용 서비스 (like_service / follow_service / watch_service)

    Returns:
        APIRouter: 해당 종류의 엔드포인트 (Endpoints for that kind)
    """
    router: APIRouter = APIRouter()

    @router.post("", response_model=InteractionResponse, status_code=status.HTTP_201_CREATED)
    async def add_interaction(
        data: InteractionCreate,
        db: Annotated[AsyncSession, Depends(get_db)],
        current_user: Annotated[User, Depends(get_current_user)],
    ) -> dict:
        interaction = await service.add(db, current_user, data.entity_type, data.entity_id)
        await db.commit()
        return service.build_response(interaction)

    @router.delete("", response_model=MessageResponse)
    async def remove_interaction(
        entity_type: InteractionEntityType,
        entity_id: UUID,
        db: Annotated[AsyncSession, Depends(get_db)],
        current_user: Annotated[User, Depends(get_current_user)],
    ) -> dict:
        await service.remove(db, current_user, entity_type, entity_id)
        await db.commit()
        return {"message": f"{service.kind.capitalize()} removed"}

    @router.get("/status", response_model=InteractionStatusResponse)
    async def get_status(
        entity_type: InteractionEntityType,
        entity_id: UUID,
        db: Annotated[AsyncSession, Depends(get_db)],
        current_user: Annotated[User, Depends(get_current_user)],
    ) -> dict:
        return {"active": await service.is_active(db, current_user, entity_type, entity_id)}

    @router.get("/count", response_model=CountResponse)
    async def get_count(
        entity_type: InteractionEntityType,
        entity_id: UUID,
        db: Annotated[AsyncSession, Depends(get_db)],
    ) -> dict:
        return {"count": await service.count(db, entity_type, entity_id)}

    @router.get("/user-count", response_model=CountResponse)
    async def get_user_count(
        entity_type: InteractionEntityType,
        db: Annotated[AsyncSession, Depends(get_db)],
        current_user: Annotated[User, Depends(get_current_user)],
    ) -> dict:
        return {"count": await service.count_for_user(db, current_user, entity_type)}

    @router.get("/mine", response_model=EntityIdListResponse)
    async def get_mine(
        entity_type: InteractionEntityType,
        db: Annotated[AsyncSession, Depends(get_db)],
        current_user: Annotated[User, Depends(get_current_user)],
    ) -> dict:
        entity_ids = await service.entity_ids_for_user(db, current_user, entity_type)
        return {"entity_type": entity_type, "entity_ids": [str(i) for i in entity_ids]}

    return router


likes_router: APIRouter = build_interaction_router(like_service)
follows_router: APIRouter = build_interaction_router(follow_service)
watches_router: APIRouter = build_interaction_router(watch_service)
