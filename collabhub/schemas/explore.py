"""탐색(검색) Pydantic 응답 스키마 정의.

Explore/search Pydantic response schema definitions.
"""

from typing import Literal
from pydantic import BaseModel, Field

from collabhub.schemas.article import ArticleResponse
from collabhub.schemas.post import PostResponse
from collabhub.schemas.project import ProjectResponse
from collabhub.schemas.user import UserResponse

# 검색 가능한 콘텐츠 유형 — Content types the explore search can query
ContentType = Literal["users", "projects", "articles", "posts"]


class ExploreResults(BaseModel):
    """콘텐츠 유형별 결과 목록 — 요청하지 않은 유형은 빈 목록.

    Per-content-type result lists. Types that were not requested are empty.
    """

    users: list[UserResponse] = []
    projects: list[ProjectResponse] = []
    articles: list[ArticleResponse] = []
    posts: list[PostResponse] = []


class ExploreTotals(BaseModel):
    """콘텐츠 유형별 전체 일치 수 (Total matches per content type)."""

    users: int = 0
    projects: int = 0
    articles: int = 0
    posts: int = 0


class ExploreResponse(BaseModel):
    """통합 검색 응답 스키마.

    Combined search response schema.

    Attributes:
        results: 유형별 결과 (Per-type results)
        page: 현재 페이지 (Current page, 1-based)
        total_pages: 전체 페이지 수 — 요청 유형 중 최대, 최소 1
                     (Largest page count across requested types, at least 1)
        totals: 유형별 전체 일치 수 (Per-type total matches)
    """

    results: ExploreResults = Field(default_factory=ExploreResults)
    page: int = 1
    total_pages: int = 1
    totals: ExploreTotals = Field(default_factory=ExploreTotals)
