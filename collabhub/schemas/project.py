"""프로젝트 관련 Pydantic 요청/응답 스키마 정의.

Project Pydantic request/response schema definitions.
Grouped fields (seeking, notification_preferences, social_links) are nested
here and flattened to columns by the project service.
"""

from datetime import datetime
from pydantic import BaseModel, Field

from collabhub.schemas.common import OwnerFields


class SeekingGroup(BaseModel):
    """구하는 협업자 유형 그룹 (Collaborator types the project is seeking)."""

    creator: bool = False
    brand: bool = False
    freelancer: bool = False
    contractor: bool = False


class NotificationPreferences(BaseModel):
    """알림 설정 그룹 (Notification preference group)."""

    email: bool = True
    push: bool = True
    digest: bool = True


class SocialLinks(BaseModel):
    """소셜 링크 그룹 (Social link group)."""

    youtube: str | None = None
    instagram: str | None = None
    github: str | None = None
    twitter: str | None = None
    linkedin: str | None = None


class ProjectBase(BaseModel):
    """프로젝트 공통 필드 — 생성/수정 요청에서 공유.

    Project fields shared by the create and update requests. Everything
    is optional here; ProjectCreate makes project_name required.
    """

    project_description: str | None = None
    project_type: str | None = None
    project_category: str | None = None
    project_status: str | None = None
    project_title: str | None = None
    project_handle: str | None = None
    project_image_url: str | None = None
    project_image_upload: str | None = None
    project_image_display: str | None = None
    client: str | None = None
    client_location: str | None = None
    client_website: str | None = None
    contract_type: str | None = None
    budget: str | None = None
    budget_range: str | None = None
    currency: str | None = None
    project_timeline: str | None = None
    skills_required: list[str] | None = None
    expertise_needed: list[str] | None = None
    target_audience: list[str] | None = None
    solutions_offered: list[str] | None = None
    project_tags: list[str] | None = None
    industry_tags: list[str] | None = None
    technology_tags: list[str] | None = None
    website_links: list[str] | None = None
    project_visibility: str | None = None
    search_visibility: bool | None = None
    seeking: SeekingGroup | None = None
    notification_preferences: NotificationPreferences | None = None
    social_links: SocialLinks | None = None


class ProjectCreate(ProjectBase):
    """프로젝트 생성 요청 스키마.

    Project creation request schema. The owner is the authenticated user.

    Attributes:
        project_name: 프로젝트 이름 (Project name, required)
    """

    project_name: str = Field(..., min_length=1, max_length=255)


class ProjectUpdate(ProjectBase):
    """프로젝트 수정 요청 스키마 (부분 업데이트)."""

    project_name: str | None = Field(default=None, min_length=1, max_length=255)


class ProjectResponse(OwnerFields):
    """프로젝트 응답 스키마 — 기본값 정규화 및 그룹 재중첩 완료.

    Project response schema with defaults applied and grouped fields
    re-nested.
    """

    id: str  # 프로젝트 UUID 문자열 (Project UUID as string)
    user_id: str  # 소유자 UUID 문자열 (Owner UUID as string)
    project_name: str
    project_description: str | None = None
    project_type: str | None = None
    project_category: str | None = None
    project_status: str | None = None
    project_title: str | None = None
    project_handle: str | None = None
    project_image_url: str | None = None
    project_image_upload: str | None = None
    project_image_display: str = "url"
    project_image: str | None = None  # 표시 모드로 해석된 이미지 (Resolved image)
    client: str | None = None
    client_location: str | None = None
    client_website: str | None = None
    contract_type: str | None = None
    budget: str | None = None
    budget_range: str | None = None
    currency: str = "USD"
    project_timeline: str | None = None
    skills_required: list[str] = []
    expertise_needed: list[str] = []
    target_audience: list[str] = []
    solutions_offered: list[str] = []
    project_tags: list[str] = []
    industry_tags: list[str] = []
    technology_tags: list[str] = []
    website_links: list[str] = []
    seeking: SeekingGroup = Field(default_factory=SeekingGroup)
    project_visibility: str = "public"
    search_visibility: bool = True
    notification_preferences: NotificationPreferences = Field(default_factory=NotificationPreferences)
    social_links: SocialLinks = Field(default_factory=SocialLinks)
    likes_count: int = 0
    follows_count: int = 0
    watches_count: int = 0
    featured: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None
