"""통계 및 추천 콘텐츠 Pydantic 응답 스키마 정의.

Platform statistics and featured-content response schemas.
"""

from pydantic import BaseModel

from collabhub.schemas.article import ArticleResponse
from collabhub.schemas.comment import CommentResponse
from collabhub.schemas.post import PostResponse
from collabhub.schemas.project import ProjectResponse
from collabhub.schemas.user import UserResponse


class StatsResponse(BaseModel):
    """플랫폼 통계 응답 스키마.

    Platform-wide counts. total_content is projects + articles + posts.
    """

    users: int = 0
    projects: int = 0
    articles: int = 0
    posts: int = 0
    likes: int = 0
    follows: int = 0
    watches: int = 0
    total_content: int = 0


class FeaturedResponse(BaseModel):
    """추천 콘텐츠 응답 스키마 — 유형별 최신 항목."""

    users: list[UserResponse] = []
    projects: list[ProjectResponse] = []
    articles: list[ArticleResponse] = []
    posts: list[PostResponse] = []
    comments: list[CommentResponse] = []
