"""사용자(프로필) SQLAlchemy ORM 모델 정의.

User (profile) SQLAlchemy ORM model definition.
A user is both an account and a public profile: creator, brand, freelancer
or contractor. Interaction counters are denormalised onto the row and kept
in step by the like/follow/watch services.

Tables:
    - users: 사용자 계정 및 공개 프로필 (User accounts and public profiles)
"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import JSON, String, Boolean, DateTime, Integer, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from collabhub.database import Base


class User(Base):
    """사용자 모델 — 계정 및 공개 프로필 정보.

    User model — Account and public profile information.
    Several profile columns are nullable for rows created before the profile
    editor existed; readers normalise them to defaults.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        username: 사용자명 (Public handle, globally unique)
        email: 이메일 (Email address, optional)
        bio: 자기소개 (Free-text biography, searchable)
        user_type: 사용자 유형 (creator / brand / freelancer / contractor)
        career_title: 직함 (Career title)
        profile_image_url: 외부 이미지 URL (External profile image URL)
        profile_image_upload: 업로드 이미지 경로 (Uploaded image relative path)
        profile_image_display: 표시 모드 (Which image to show: "url" or "upload")
        work_status: 근무 상태 (Availability status)
        seeking: 구하는 것 (What the user is looking for)
        skills, expertise, interest_tags, experience_tags, education_tags,
        target_audience, solutions_offered: 태그 목록 (Tag lists, JSON arrays)
        likes_count: 좋아요 수 (Likes received)
        followers_count: 팔로워 수 (Followers)
        watches_count: 워치 수 (Watchers)
        featured: 추천 여부 (Featured on the landing page)
        is_active: 활성 상태 (Active status)
        created_at: 생성 일시 UTC (Creation timestamp)
        updated_at: 수정 일시 UTC (Last update timestamp)

    Relationships:
        projects: 소유 프로젝트 (Owned projects, cascade delete)
        articles: 작성 아티클 (Authored articles, cascade delete)
        posts: 작성 포스트 (Authored posts, cascade delete)
    """

    __tablename__ = "users"

    # 사용자 고유 식별자 — User unique identifier (UUID v4, auto-generated)
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 사용자명 — Public handle (전역 고유, globally unique)
    username: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    # 자기소개 — Biography (검색 대상, searchable)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    # 사용자 유형 — creator / brand / freelancer / contractor
    user_type: Mapped[str | None] = mapped_column(String(50), nullable=True, index=True)
    career_title: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # 프로필 이미지 — URL 또는 업로드 중 display 값에 따라 선택
    profile_image_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    profile_image_upload: Mapped[str | None] = mapped_column(Text, nullable=True)
    profile_image_display: Mapped[str | None] = mapped_column(String(20), nullable=True, default="url")

    work_status: Mapped[str | None] = mapped_column(String(100), nullable=True)
    seeking: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # 태그 목록 — JSON 배열 (JSON arrays of strings)
    skills: Mapped[list | None] = mapped_column(JSON, nullable=True)
    expertise: Mapped[list | None] = mapped_column(JSON, nullable=True)
    interest_tags: Mapped[list | None] = mapped_column(JSON, nullable=True)
    experience_tags: Mapped[list | None] = mapped_column(JSON, nullable=True)
    education_tags: Mapped[list | None] = mapped_column(JSON, nullable=True)
    target_audience: Mapped[list | None] = mapped_column(JSON, nullable=True)
    solutions_offered: Mapped[list | None] = mapped_column(JSON, nullable=True)

    # 상호작용 카운터 — Denormalised interaction counters
    likes_count: Mapped[int | None] = mapped_column(Integer, nullable=True, default=0)
    followers_count: Mapped[int | None] = mapped_column(Integer, nullable=True, default=0)
    watches_count: Mapped[int | None] = mapped_column(Integer, nullable=True, default=0)

    featured: Mapped[bool | None] = mapped_column(Boolean, nullable=True, default=False)
    # 활성 상태 — Whether the account may authenticate
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    # 생성 일시 — Record creation timestamp (UTC)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    # 수정 일시 — Last modification timestamp (UTC, auto-updated)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # 관계 — Relationships (cascade: 사용자 삭제 시 콘텐츠도 삭제)
    projects = relationship("Project", back_populates="owner", cascade="all, delete-orphan")
    articles = relationship("Article", back_populates="author", cascade="all, delete-orphan")
    posts = relationship("Post", back_populates="author", cascade="all, delete-orphan")
