"""프로젝트 레포지토리 — 프로젝트 관련 DB 쿼리 담당.

Project Repository — Handles all project-related database queries,
including the projects explore search builder.
"""

from typing import Any, Sequence
from uuid import UUID

from sqlalchemy import Select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from collabhub.models.project import Project
from collabhub.models.user import User
from collabhub.repositories.base import BaseRepository, is_type_filter_active


class ProjectRepository(BaseRepository[Project]):
    """프로젝트 레포지토리.

    Project repository. Every query eager-loads the owner so the service
    can attach the owner's username and profile image.

    Extends:
        BaseRepository[Project]
    """

    def __init__(self) -> None:
        """레포지토리를 초기화합니다.

        Initialize the project repository with Project model.
        """
        super().__init__(Project)

    def loader_options(self) -> list[Any]:
        return [selectinload(Project.owner)]

    async def list_paginated(
        self,
        db: AsyncSession,
        page: int = 1,
        per_page: int = 20,
        user_id: UUID | None = None,
    ) -> tuple[Sequence[Project], int]:
        """프로젝트 목록을 최신순으로 조회합니다 (소유자 필터 선택).

        Retrieve a newest-first page of projects, optionally for one owner.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            page: 페이지 번호, 1부터 시작 (Page number, 1-based)
            per_page: 페이지당 항목 수 (Items per page)
            user_id: 소유자 UUID 필터 (Owner filter, optional)

        Returns:
            tuple[Sequence[Project], int]: (프로젝트 목록, 전체 개수)
        """
        query: Select = self.base_query()
        if user_id is not None:
            query = query.where(Project.user_id == user_id)
        query = query.order_by(Project.created_at.desc(), Project.id)
        return await self.get_paginated(db, query, page, per_page)

    async def search(
        self,
        db: AsyncSession,
        query_text: str,
        user_types: Sequence[str],
        page: int,
        per_page: int,
        sort_field: str,
        sort_order: str,
    ) -> tuple[Sequence[Project], int]:
        """프로젝트를 검색합니다 — 이름 또는 설명 부분 일치.

        Search projects by case-insensitive substring on project_name or
        project_description. The user-type filter applies to the owner.

        Returns:
            tuple[Sequence[Project], int]: (프로젝트 목록, 전체 개수)
        """
        query: Select = self.base_query()
        if query_text:
            query = query.where(
                self.text_match(query_text, Project.project_name, Project.project_description)
            )
        if is_type_filter_active(user_types):
            # 소유자의 사용자 유형 기준 — Filter on the owning user's type
            query = query.join(User, Project.user_id == User.id).where(
                User.user_type.in_(list(user_types))
            )
        query = self.apply_sort(query, sort_field, sort_order)
        return await self.get_paginated(db, query, page, per_page)


# 싱글턴 인스턴스 — Singleton instance
project_repository: ProjectRepository = ProjectRepository()
