"""상호작용 레포지토리 — 좋아요/팔로우/워치 DB 쿼리 담당.

Interaction Repository — Handles like, follow and watch queries.
The three tables share one shape, so one repository class is instantiated
per table. Counter updates on the target rows use BaseRepository.adjust_counter.
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import Select, delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from collabhub.models.interaction import Follow, Like, Watch
from collabhub.repositories.base import BaseRepository, ModelType


class InteractionRepository(BaseRepository[ModelType]):
    """상호작용 레포지토리 — 모델 클래스로 매개변수화.

    Interaction repository parameterised by the interaction model.

    Extends:
        BaseRepository[Like | Follow | Watch]
    """

    async def find(
        self,
        db: AsyncSession,
        user_id: UUID,
        entity_type: str,
        entity_id: UUID,
    ) -> ModelType | None:
        """사용자의 특정 엔티티 상호작용을 조회합니다.

        Retrieve the row recording that a user acted on an entity.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            user_id: 사용자 UUID (Acting user)
            entity_type: 대상 유형 (Target type)
            entity_id: 대상 UUID (Target identifier)

        Returns:
            ModelType | None: 상호작용 행 또는 None (Interaction row or None)
        """
        result = await db.execute(
            select(self.model).where(
                self.model.user_id == user_id,
                self.model.entity_type == entity_type,
                self.model.entity_id == entity_id,
            )
        )
        return result.scalar_one_or_none()

    async def count_for_entity(
        self,
        db: AsyncSession,
        entity_type: str,
        entity_id: UUID,
    ) -> int:
        """엔티티의 상호작용 수를 집계합니다.

        Count interaction rows targeting one entity.
        """
        result = await db.execute(
            select(func.count()).select_from(self.model).where(
                self.model.entity_type == entity_type,
                self.model.entity_id == entity_id,
            )
        )
        return result.scalar() or 0

    async def count_for_user(
        self,
        db: AsyncSession,
        user_id: UUID,
        entity_type: str,
    ) -> int:
        """사용자가 상호작용한 특정 유형 엔티티 수를 집계합니다.

        Count entities of one type the user has acted on.
        """
        result = await db.execute(
            select(func.count()).select_from(self.model).where(
                self.model.user_id == user_id,
                self.model.entity_type == entity_type,
            )
        )
        return result.scalar() or 0

    async def entity_ids_for_user(
        self,
        db: AsyncSession,
        user_id: UUID,
        entity_type: str,
    ) -> Sequence[UUID]:
        """사용자가 상호작용한 엔티티 ID 목록을 최신순으로 조회합니다.

        Retrieve ids of entities of one type the user has acted on,
        most recent first.
        """
        query: Select = (
            select(self.model.entity_id)
            .where(self.model.user_id == user_id, self.model.entity_type == entity_type)
            .order_by(self.model.created_at.desc())
        )
        result = await db.execute(query)
        return result.scalars().all()

    async def delete_for_entities(
        self,
        db: AsyncSession,
        entity_type: str,
        entity_ids: Sequence[UUID],
    ) -> int:
        """대상 엔티티들의 상호작용을 모두 삭제합니다.

        Delete every interaction row targeting the given entities, used when
        the targets themselves are deleted.

        Returns:
            int: 삭제된 행 수 (Number of rows deleted)
        """
        if not entity_ids:
            return 0
        result = await db.execute(
            delete(self.model).where(
                self.model.entity_type == entity_type,
                self.model.entity_id.in_(list(entity_ids)),
            )
        )
        return result.rowcount or 0


# 싱글턴 인스턴스 — One instance per interaction table
like_repository: InteractionRepository[Like] = InteractionRepository(Like)
follow_repository: InteractionRepository[Follow] = InteractionRepository(Follow)
watch_repository: InteractionRepository[Watch] = InteractionRepository(Watch)
