"""프로젝트 라우터 — 프로젝트 CRUD API.

Project Router — Project listing, detail and owner-only writes.
Follows 3-layer architecture: Router → Service → Repository.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from collabhub.api.deps import get_current_user
from collabhub.database import get_db
from collabhub.models.project import Project
from collabhub.models.user import User
from collabhub.schemas.common import MessageResponse, PaginatedResponse
from collabhub.schemas.project import ProjectCreate, ProjectResponse, ProjectUpdate
from collabhub.services.project_service import project_service

router: APIRouter = APIRouter()


@router.get("", response_model=PaginatedResponse)
async def list_projects(
    db: Annotated[AsyncSession, Depends(get_db)],
    page: Annotated[int, Query(ge=1)] = 1,
    per_page: Annotated[int, Query(ge=1, le=100)] = 20,
) -> dict:
    """프로젝트 목록을 최신순으로 조회합니다.

    List projects, newest first.

    Args:
        db: 비동기 데이터베이스 세션 (Async database session)
        page: 페이지 번호 (Page number)
        per_page: 페이지당 항목 수 (Items per page)

    Returns:
        dict: 페이지네이션된 프로젝트 목록 (Paginated project list)
    """
    projects, total = await project_service.list_projects(db, page, per_page)
    return {
        "items": [project_service.build_response(p) for p in projects],
        "total": total,
        "page": page,
        "per_page": per_page,
    }


@router.get("/user/{user_id}", response_model=list[ProjectResponse])
async def list_user_projects(
    user_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[dict]:
    """특정 사용자의 프로젝트를 조회합니다."""
    projects = await project_service.list_by_user(db, user_id)
    return [project_service.build_response(p) for p in projects]


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> dict:
    """프로젝트 상세를 조회합니다."""
    project: Project = await project_service.get_project(db, project_id)
    return project_service.build_response(project)


@router.post("", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
async def create_project(
    data: ProjectCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> dict:
    """새 프로젝트를 생성합니다 — 소유자는 현재 사용자.

    Create a project owned by the current user.
    """
    project: Project = await project_service.create_project(db, current_user, data)
    await db.commit()
    return project_service.build_response(project)


@router.put("/{project_id}", response_model=ProjectResponse)
async def update_project(
    project_id: UUID,
    data: ProjectUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> dict:
    """프로젝트를 수정합니다 (소유자만).

    Update a project. Only the owner may update it.
    """
    project: Project = await project_service.update_project(db, project_id, current_user, data)
    await db.commit()
    return project_service.build_response(project)


@router.delete("/{project_id}", response_model=MessageResponse)
async def delete_project(
    project_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> dict:
    """프로젝트를 삭제합니다 (소유자만)."""
    await project_service.delete_project(db, project_id, current_user)
    await db.commit()
    return {"message": "프로젝트가 삭제되었습니다 (Project deleted)"}
