"""프로젝트 SQLAlchemy ORM 모델 정의.

Project SQLAlchemy ORM model definition.
A project is a collaboration listing owned by one user. Grouped request
fields (seeking, notification preferences, social links) are stored as
flat columns and re-nested by the project service.

Tables:
    - projects: 협업 프로젝트 (Collaboration projects)
"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import JSON, String, Boolean, DateTime, ForeignKey, Integer, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from collabhub.database import Base


class Project(Base):
    """프로젝트 모델 — 사용자가 소유한 협업 프로젝트.

    Project model — Collaboration listing owned by a user.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        user_id: 소유자 FK (Owner user foreign key)
        project_name: 프로젝트 이름 (Project name, searchable)
        project_description: 설명 (Description, searchable)
        project_type / project_category / project_status: 분류 (Classification)
        project_image_url / _upload / _display: 대표 이미지 (Cover image)
        budget / budget_range / currency / project_timeline: 예산 및 일정
        client / client_location / client_website: 클라이언트 정보 (Client info)
        skills_required, expertise_needed, target_audience, solutions_offered,
        project_tags, industry_tags, technology_tags, website_links: 태그 목록
        seeking_*: 구하는 협업자 유형 플래그 (Seeking flags)
        project_visibility / search_visibility: 공개 설정 (Visibility)
        notification_preferences_*: 알림 설정 (Notification preferences)
        social_links_*: 소셜 링크 (Social links)
        likes_count / follows_count / watches_count: 상호작용 카운터
        featured: 추천 여부 (Featured flag)
    """

    __tablename__ = "projects"

    # 프로젝트 고유 식별자 — Project unique identifier (UUID v4, auto-generated)
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 소유자 FK — Owner (CASCADE: 사용자 삭제 시 프로젝트도 삭제)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    project_name: Mapped[str] = mapped_column(String(255), nullable=False)
    project_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    project_type: Mapped[str | None] = mapped_column(String(100), nullable=True)
    project_category: Mapped[str | None] = mapped_column(String(100), nullable=True)
    project_status: Mapped[str | None] = mapped_column(String(50), nullable=True)
    project_title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    project_handle: Mapped[str | None] = mapped_column(String(100), nullable=True)

    # 대표 이미지 — Cover image (display 값으로 url/upload 선택)
    project_image_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    project_image_upload: Mapped[str | None] = mapped_column(Text, nullable=True)
    project_image_display: Mapped[str | None] = mapped_column(String(20), nullable=True, default="url")

    # 클라이언트/계약 — Client and contract details
    client: Mapped[str | None] = mapped_column(String(255), nullable=True)
    client_location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    client_website: Mapped[str | None] = mapped_column(String(500), nullable=True)
    contract_type: Mapped[str | None] = mapped_column(String(100), nullable=True)

    # 예산/일정 — Budget and timeline
    budget: Mapped[str | None] = mapped_column(String(100), nullable=True)
    budget_range: Mapped[str | None] = mapped_column(String(100), nullable=True)
    currency: Mapped[str | None] = mapped_column(String(10), nullable=True, default="USD")
    project_timeline: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # 태그 목록 — JSON arrays
    skills_required: Mapped[list | None] = mapped_column(JSON, nullable=True)
    expertise_needed: Mapped[list | None] = mapped_column(JSON, nullable=True)
    target_audience: Mapped[list | None] = mapped_column(JSON, nullable=True)
    solutions_offered: Mapped[list | None] = mapped_column(JSON, nullable=True)
    project_tags: Mapped[list | None] = mapped_column(JSON, nullable=True)
    industry_tags: Mapped[list | None] = mapped_column(JSON, nullable=True)
    technology_tags: Mapped[list | None] = mapped_column(JSON, nullable=True)
    website_links: Mapped[list | None] = mapped_column(JSON, nullable=True)

    # 구하는 협업자 — Seeking flags (API에서는 seeking{} 그룹)
    seeking_creator: Mapped[bool | None] = mapped_column(Boolean, nullable=True, default=False)
    seeking_brand: Mapped[bool | None] = mapped_column(Boolean, nullable=True, default=False)
    seeking_freelancer: Mapped[bool | None] = mapped_column(Boolean, nullable=True, default=False)
    seeking_contractor: Mapped[bool | None] = mapped_column(Boolean, nullable=True, default=False)

    # 공개 설정 — Visibility
    project_visibility: Mapped[str | None] = mapped_column(String(20), nullable=True, default="public")
    search_visibility: Mapped[bool | None] = mapped_column(Boolean, nullable=True, default=True)

    # 알림 설정 — Notification preferences (API에서는 notification_preferences{} 그룹)
    notification_preferences_email: Mapped[bool | None] = mapped_column(Boolean, nullable=True, default=True)
    notification_preferences_push: Mapped[bool | None] = mapped_column(Boolean, nullable=True, default=True)
    notification_preferences_digest: Mapped[bool | None] = mapped_column(Boolean, nullable=True, default=True)

    # 소셜 링크 — Social links (API에서는 social_links{} 그룹)
    social_links_youtube: Mapped[str | None] = mapped_column(String(500), nullable=True)
    social_links_instagram: Mapped[str | None] = mapped_column(String(500), nullable=True)
    social_links_github: Mapped[str | None] = mapped_column(String(500), nullable=True)
    social_links_twitter: Mapped[str | None] = mapped_column(String(500), nullable=True)
    social_links_linkedin: Mapped[str | None] = mapped_column(String(500), nullable=True)

    # 상호작용 카운터 — Denormalised interaction counters
    likes_count: Mapped[int | None] = mapped_column(Integer, nullable=True, default=0)
    follows_count: Mapped[int | None] = mapped_column(Integer, nullable=True, default=0)
    watches_count: Mapped[int | None] = mapped_column(Integer, nullable=True, default=0)
    featured: Mapped[bool | None] = mapped_column(Boolean, nullable=True, default=False)

    # 생성 일시 — Record creation timestamp (UTC)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    # 수정 일시 — Last modification timestamp (UTC, auto-updated)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # 관계 — Relationships
    owner = relationship("User", back_populates="projects")
