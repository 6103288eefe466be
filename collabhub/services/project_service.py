"""프로젝트 서비스 — 프로젝트 비즈니스 로직.

Project Service — Business logic for project listings: CRUD with owner-only
writes, flattening of grouped request fields into columns, and the
normalised response shape shared with the explore search.
"""

import logging
from typing import Any, Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from collabhub.models.project import Project
from collabhub.models.user import User
from collabhub.repositories.project_repository import project_repository
from collabhub.schemas.project import ProjectCreate, ProjectUpdate
from collabhub.services.interaction_service import remove_entity_references
from collabhub.services.user_service import owner_fields
from collabhub.utils.exceptions import ForbiddenError, NotFoundError
from collabhub.utils.media import resolve_image

logger = logging.getLogger(__name__)

# 그룹 필드 → 컬럼 접두사 — Grouped request field to column prefix
GROUPED_FIELDS: dict[str, str] = {
    "seeking": "seeking_",
    "notification_preferences": "notification_preferences_",
    "social_links": "social_links_",
}

PROJECT_LIST_FIELDS: tuple[str, ...] = (
    "skills_required",
    "expertise_needed",
    "target_audience",
    "solutions_offered",
    "project_tags",
    "industry_tags",
    "technology_tags",
    "website_links",
)

PROJECT_TEXT_FIELDS: tuple[str, ...] = (
    "project_name",
    "project_description",
    "project_type",
    "project_category",
    "project_status",
    "project_title",
    "project_handle",
    "project_image_url",
    "project_image_upload",
    "client",
    "client_location",
    "client_website",
    "contract_type",
    "budget",
    "budget_range",
    "project_timeline",
)


def flatten_groups(data: dict[str, Any]) -> dict[str, Any]:
    """중첩 그룹을 평탄한 컬럼 딕셔너리로 변환합니다.

    Flatten nested groups into column names, e.g.
    {"seeking": {"brand": True}} becomes {"seeking_brand": True}.
    Groups set to None are dropped.
    """
    flat: dict[str, Any] = {}
    for key, value in data.items():
        prefix: str | None = GROUPED_FIELDS.get(key)
        if prefix is None:
            flat[key] = value
        elif value is not None:
            for sub_key, sub_value in value.items():
                flat[f"{prefix}{sub_key}"] = sub_value
    return flat


def _flag(value: bool | None, default: bool) -> bool:
    return default if value is None else bool(value)


class ProjectService:
    """프로젝트 서비스.

    Project service providing listing, detail and owner-only writes.
    """

    def build_response(self, project: Project) -> dict:
        """프로젝트 응답 딕셔너리를 구성합니다 (기본값 정규화, 그룹 재중첩).

        Build the project response dict: defaults applied, grouped fields
        re-nested, owner fields attached. The owner must be loaded.

        Args:
            project: 프로젝트 ORM 객체 (Project ORM object, owner loaded)

        Returns:
            dict: 정규화된 프로젝트 딕셔너리 (Normalised project dict)
        """
        display: str = project.project_image_display or "url"
        response: dict[str, Any] = {
            "id": str(project.id),
            "user_id": str(project.user_id),
            **{field: getattr(project, field) for field in PROJECT_TEXT_FIELDS},
            "project_image_display": display,
            "project_image": resolve_image(
                project.project_image_url, project.project_image_upload, display
            ),
            "currency": project.currency or "USD",
            "seeking": {
                "creator": _flag(project.seeking_creator, False),
                "brand": _flag(project.seeking_brand, False),
                "freelancer": _flag(project.seeking_freelancer, False),
                "contractor": _flag(project.seeking_contractor, False),
            },
            "project_visibility": project.project_visibility or "public",
            "search_visibility": _flag(project.search_visibility, True),
            "notification_preferences": {
                "email": _flag(project.notification_preferences_email, True),
                "push": _flag(project.notification_preferences_push, True),
                "digest": _flag(project.notification_preferences_digest, True),
            },
            "social_links": {
                "youtube": project.social_links_youtube,
                "instagram": project.social_links_instagram,
                "github": project.social_links_github,
                "twitter": project.social_links_twitter,
                "linkedin": project.social_links_linkedin,
            },
            "likes_count": project.likes_count or 0,
            "follows_count": project.follows_count or 0,
            "watches_count": project.watches_count or 0,
            "featured": bool(project.featured),
            "created_at": project.created_at,
            "updated_at": project.updated_at,
            **owner_fields(project.owner),
        }
        for field in PROJECT_LIST_FIELDS:
            response[field] = getattr(project, field) or []
        return response

    async def list_projects(
        self,
        db: AsyncSession,
        page: int = 1,
        per_page: int = 20,
    ) -> tuple[Sequence[Project], int]:
        """프로젝트 목록을 최신순으로 조회합니다."""
        return await project_repository.list_paginated(db, page, per_page)

    async def list_by_user(self, db: AsyncSession, user_id: UUID) -> Sequence[Project]:
        """사용자의 모든 프로젝트를 최신순으로 조회합니다."""
        return await project_repository.get_all(
            db, filters={"user_id": user_id}, order_by=Project.created_at.desc()
        )

    async def get_project(self, db: AsyncSession, project_id: UUID) -> Project:
        """프로젝트를 조회합니다.

        Get a project by id.

        Raises:
            NotFoundError: 프로젝트가 없을 때 (When project not found)
        """
        project: Project | None = await project_repository.get_by_id(db, project_id)
        if project is None:
            raise NotFoundError("프로젝트를 찾을 수 없습니다 (Project not found)")
        return project

    async def _get_owned(self, db: AsyncSession, project_id: UUID, user: User) -> Project:
        """소유자 검증 후 프로젝트를 반환합니다.

        Raises:
            NotFoundError: 프로젝트가 없을 때 (When project not found)
            ForbiddenError: 소유자가 아닐 때 (When the user is not the owner)
        """
        project: Project = await self.get_project(db, project_id)
        if project.user_id != user.id:
            raise ForbiddenError("이 프로젝트에 대한 권한이 없습니다 (Not the project owner)")
        return project

    async def create_project(
        self,
        db: AsyncSession,
        user: User,
        data: ProjectCreate,
    ) -> Project:
        """새 프로젝트를 생성합니다.

        Create a project owned by the current user. Unset fields take the
        column defaults.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            user: 현재 사용자, 소유자 (Authenticated user, becomes owner)
            data: 생성 데이터 (Creation payload)

        Returns:
            Project: 생성된 프로젝트, 소유자 로드됨 (Created project, owner loaded)
        """
        values: dict[str, Any] = flatten_groups(data.model_dump(exclude_none=True))
        values["user_id"] = user.id
        project: Project = await project_repository.create(db, values)
        logger.info("Project %s created by user %s", project.id, user.id)
        return await self.get_project(db, project.id)

    async def update_project(
        self,
        db: AsyncSession,
        project_id: UUID,
        user: User,
        data: ProjectUpdate,
    ) -> Project:
        """프로젝트를 수정합니다 (소유자만).

        Apply a partial update. Only the owner may update.

        Raises:
            NotFoundError: 프로젝트가 없을 때 (When project not found)
            ForbiddenError: 소유자가 아닐 때 (When the user is not the owner)
        """
        await self._get_owned(db, project_id, user)
        update_data: dict[str, Any] = flatten_groups(data.model_dump(exclude_unset=True))
        # 이름은 비울 수 없음 — project_name cannot be cleared
        if update_data.get("project_name", "") is None:
            update_data.pop("project_name")
        await project_repository.update(db, project_id, update_data)
        return await self.get_project(db, project_id)

    async def delete_project(
        self,
        db: AsyncSession,
        project_id: UUID,
        user: User,
    ) -> bool:
        """프로젝트를 삭제합니다 (소유자만).

        Delete a project together with the likes, follows, watches and
        comments that point at it.

        Raises:
            NotFoundError: 프로젝트가 없을 때 (When project not found)
            ForbiddenError: 소유자가 아닐 때 (When the user is not the owner)
        """
        await self._get_owned(db, project_id, user)
        await remove_entity_references(db, "project", project_id)
        deleted: bool = await project_repository.delete(db, project_id)
        logger.info("Project %s deleted by user %s", project_id, user.id)
        return deleted


# 싱글턴 인스턴스 — Singleton instance
project_service: ProjectService = ProjectService()
