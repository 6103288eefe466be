"""상호작용 서비스 — 좋아요/팔로우/워치 비즈니스 로직.

Interaction Service — Business logic shared by likes, follows and watches.
One service instance per interaction kind, parameterised by its repository
and by the counter column each target type keeps for that kind.
"""

import logging
from typing import Any, Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from collabhub.models.article import Article
from collabhub.models.comment import Comment
from collabhub.models.post import Post
from collabhub.models.project import Project
from collabhub.models.user import User
from collabhub.repositories.comment_repository import comment_repository
from collabhub.repositories.interaction_repository import (
    InteractionRepository,
    follow_repository,
    like_repository,
    watch_repository,
)
from collabhub.utils.exceptions import BadRequestError, DuplicateError, NotFoundError

logger = logging.getLogger(__name__)

# 엔티티 유형 → 모델 — Entity type to target model
ENTITY_MODELS: dict[str, type[Any]] = {
    "user": User,
    "project": Project,
    "article": Article,
    "post": Post,
    "comment": Comment,
}

# 종류별 카운터 컬럼 — Counter column each target keeps per interaction kind
LIKE_COUNTERS: dict[str, str] = {
    "user": "likes_count",
    "project": "likes_count",
    "article": "likes_count",
    "post": "likes_count",
    "comment": "likes_count",
}
FOLLOW_COUNTERS: dict[str, str] = {
    "user": "followers_count",
    "project": "follows_count",
    "article": "follows_count",
    "post": "follows_count",
}
WATCH_COUNTERS: dict[str, str] = {
    "user": "watches_count",
    "project": "watches_count",
    "article": "watches_count",
    "post": "watches_count",
}


async def entity_exists(db: AsyncSession, entity_type: str, entity_id: UUID) -> bool:
    """대상 엔티티 존재 여부를 확인합니다.

    Whether the polymorphic target (entity_type, entity_id) exists.
    """
    model: type[Any] | None = ENTITY_MODELS.get(entity_type)
    if model is None:
        return False
    result = await db.execute(select(model.id).where(model.id == entity_id))
    return result.scalar_one_or_none() is not None


async def remove_entity_references(db: AsyncSession, entity_type: str, entity_id: UUID) -> None:
    """삭제되는 엔티티를 가리키는 상호작용과 댓글을 정리합니다.

    Delete the likes, follows, watches and comments that point at an entity
    about to be deleted, plus the likes on those comments. Interaction and
    comment rows reference targets only by (entity_type, entity_id), so the
    database cannot cascade these.
    """
    comment_ids = await comment_repository.delete_for_entity(db, entity_type, entity_id)
    await like_repository.delete_for_entities(db, "comment", comment_ids)
    for repository in (like_repository, follow_repository, watch_repository):
        await repository.delete_for_entities(db, entity_type, [entity_id])
    logger.debug(
        "Removed references to %s %s (%d comments)", entity_type, entity_id, len(comment_ids)
    )


class InteractionService:
    """상호작용 서비스 — 종류(kind)별 인스턴스.

    Interaction service, instantiated once per kind.

    Attributes:
        kind: 종류 이름 (like / follow / watch)
        repository: 상호작용 레포지토리 (Interaction table repository)
        counters: 대상 유형 → 카운터 컬럼 (Target type to counter column)
    """

    def __init__(
        self,
        kind: str,
        repository: InteractionRepository,
        counters: dict[str, str],
    ) -> None:
        self.kind: str = kind
        self.repository: InteractionRepository = repository
        self.counters: dict[str, str] = counters

    def _check_entity_type(self, entity_type: str) -> str:
        """이 종류가 지원하는 대상 유형인지 확인하고 카운터 컬럼을 반환합니다.

        Raises:
            BadRequestError: 지원하지 않는 대상 유형 (Unsupported target type)
        """
        counter: str | None = self.counters.get(entity_type)
        if counter is None:
            raise BadRequestError(
                f"지원하지 않는 대상 유형입니다 (Cannot {self.kind} entity type '{entity_type}')"
            )
        return counter

    def build_response(self, interaction: Any) -> dict:
        return {
            "id": str(interaction.id),
            "user_id": str(interaction.user_id),
            "entity_type": interaction.entity_type,
            "entity_id": str(interaction.entity_id),
            "created_at": interaction.created_at,
        }

    async def add(
        self,
        db: AsyncSession,
        user: User,
        entity_type: str,
        entity_id: UUID,
    ) -> Any:
        """상호작용을 추가하고 대상 카운터를 증가시킵니다.

        Record the interaction and increment the target's counter.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            user: 현재 사용자 (Acting user)
            entity_type: 대상 유형 (Target type)
            entity_id: 대상 UUID (Target identifier)

        Returns:
            상호작용 ORM 객체 (Created interaction row)

        Raises:
            BadRequestError: 지원하지 않는 대상 유형 (Unsupported target type)
            NotFoundError: 대상이 없을 때 (When the target does not exist)
            DuplicateError: 이미 존재할 때 (When already recorded)
        """
        counter: str = self._check_entity_type(entity_type)
        if not await entity_exists(db, entity_type, entity_id):
            raise NotFoundError("대상을 찾을 수 없습니다 (Target entity not found)")
        if await self.repository.find(db, user.id, entity_type, entity_id) is not None:
            raise DuplicateError(f"이미 처리되었습니다 (Already {self.kind}d)")

        # 동시 요청은 find를 통과할 수 있음 — 유니크 제약 위반은 409로
        # Concurrent requests can both pass find; the unique constraint decides
        try:
            async with db.begin_nested():
                interaction = await self.repository.create(
                    db,
                    {"user_id": user.id, "entity_type": entity_type, "entity_id": entity_id},
                )
        except IntegrityError:
            raise DuplicateError(f"이미 처리되었습니다 (Already {self.kind}d)")
        await self.repository.adjust_counter(
            db, ENTITY_MODELS[entity_type], counter, entity_id, 1
        )
        logger.info("User %s %sd %s %s", user.id, self.kind, entity_type, entity_id)
        return interaction

    async def remove(
        self,
        db: AsyncSession,
        user: User,
        entity_type: str,
        entity_id: UUID,
    ) -> None:
        """상호작용을 삭제하고 대상 카운터를 감소시킵니다 (0 미만 불가).

        Remove the interaction and decrement the target's counter, never
        below zero.

        Raises:
            BadRequestError: 지원하지 않는 대상 유형 (Unsupported target type)
            NotFoundError: 상호작용이 없을 때 (When no interaction exists)
        """
        counter: str = self._check_entity_type(entity_type)
        interaction = await self.repository.find(db, user.id, entity_type, entity_id)
        if interaction is None:
            raise NotFoundError(f"{self.kind} 기록이 없습니다 ({self.kind.capitalize()} not found)")

        await db.delete(interaction)
        await db.flush()
        await self.repository.adjust_counter(
            db, ENTITY_MODELS[entity_type], counter, entity_id, -1
        )
        logger.info("User %s removed %s on %s %s", user.id, self.kind, entity_type, entity_id)

    async def is_active(
        self,
        db: AsyncSession,
        user: User,
        entity_type: str,
        entity_id: UUID,
    ) -> bool:
        """현재 사용자의 상호작용 여부."""
        return await self.repository.find(db, user.id, entity_type, entity_id) is not None

    async def count(self, db: AsyncSession, entity_type: str, entity_id: UUID) -> int:
        """대상의 상호작용 수 (행 기준)."""
        return await self.repository.count_for_entity(db, entity_type, entity_id)

    async def count_for_user(self, db: AsyncSession, user: User, entity_type: str) -> int:
        """현재 사용자가 상호작용한 해당 유형 엔티티 수."""
        return await self.repository.count_for_user(db, user.id, entity_type)

    async def entity_ids_for_user(
        self,
        db: AsyncSession,
        user: User,
        entity_type: str,
    ) -> Sequence[UUID]:
        """현재 사용자가 상호작용한 해당 유형 엔티티 ID 목록 (최신순)."""
        return await self.repository.entity_ids_for_user(db, user.id, entity_type)


# 싱글턴 인스턴스 — One instance per interaction kind
like_service: InteractionService = InteractionService("like", like_repository, LIKE_COUNTERS)
follow_service: InteractionService = InteractionService("follow", follow_repository, FOLLOW_COUNTERS)
watch_service: InteractionService = InteractionService("watch", watch_repository, WATCH_COUNTERS)
