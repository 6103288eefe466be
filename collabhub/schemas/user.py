"""사용자(프로필) 관련 Pydantic 요청/응답 스키마 정의.

User/profile Pydantic request/response schema definitions.
"""

from datetime import datetime
from pydantic import BaseModel, Field

from collabhub.schemas.article import ArticleResponse
from collabhub.schemas.post import PostResponse
from collabhub.schemas.project import ProjectResponse


class UserUpdate(BaseModel):
    """프로필 수정 요청 스키마 (부분 업데이트).

    Profile update request schema (partial update). Only fields present in
    the request body are written.

    Attributes:
        username: 사용자명 (New handle; 409 if taken)
        bio / career_title / user_type / work_status / seeking: 프로필 텍스트
        profile_image_*: 프로필 이미지 (Profile image fields)
        skills ... solutions_offered: 태그 목록 (Tag lists)
    """

    username: str | None = Field(default=None, min_length=1, max_length=100)
    email: str | None = None
    bio: str | None = None
    user_type: str | None = None
    career_title: str | None = None
    work_status: str | None = None
    seeking: str | None = None
    profile_image_url: str | None = None
    profile_image_upload: str | None = None
    profile_image_display: str | None = None
    skills: list[str] | None = None
    expertise: list[str] | None = None
    interest_tags: list[str] | None = None
    experience_tags: list[str] | None = None
    education_tags: list[str] | None = None
    target_audience: list[str] | None = None
    solutions_offered: list[str] | None = None


class UserResponse(BaseModel):
    """사용자 프로필 응답 스키마 — 기본값 정규화 완료.

    User profile response schema. Nullable columns are normalised:
    counters to 0, lists to [], image display to "url".
    """

    id: str  # 사용자 UUID 문자열 (User UUID as string)
    username: str
    email: str | None = None  # 본인 조회 시에만 포함 (Only on /users/me)
    bio: str | None = None
    user_type: str | None = None
    career_title: str | None = None
    work_status: str | None = None
    seeking: str | None = None
    profile_image_url: str | None = None
    profile_image_upload: str | None = None
    profile_image_display: str = "url"
    profile_image: str | None = None  # 표시 모드로 해석된 이미지 (Resolved image)
    skills: list[str] = []
    expertise: list[str] = []
    interest_tags: list[str] = []
    experience_tags: list[str] = []
    education_tags: list[str] = []
    target_audience: list[str] = []
    solutions_offered: list[str] = []
    likes_count: int = 0
    followers_count: int = 0
    watches_count: int = 0
    featured: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None



class UserContentResponse(BaseModel):
    """사용자 콘텐츠 응답 스키마 — 프로젝트, 아티클, 포스트.

    A user's own projects, articles and posts, each newest first.
    """

    projects: list[ProjectResponse] = []
    articles: list[ArticleResponse] = []
    posts: list[PostResponse] = []
