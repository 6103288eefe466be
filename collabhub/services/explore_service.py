"""탐색(검색) 서비스 — 다중 엔티티 통합 검색.

Explore Service — Multi-entity search and aggregation.

Each content type (users, projects, articles, posts) has a query builder
that turns a free-text query, a user-type filter, pagination and a sort key
into one database fetch and normalises the rows into response dicts. The
aggregator runs the requested builders concurrently, each in its own
session, and merges the results into a single response.

Sort keys from clients never reach SQL directly: they are looked up in a
fixed allow-list per content type, and anything unknown sorts by
created_at.
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from collabhub.repositories.article_repository import article_repository
from collabhub.repositories.post_repository import post_repository
from collabhub.repositories.project_repository import project_repository
from collabhub.repositories.user_repository import user_repository
from collabhub.services.article_service import article_service
from collabhub.services.post_service import post_service
from collabhub.services.project_service import project_service
from collabhub.services.user_service import user_service
from collabhub.utils.pagination import page_count

logger = logging.getLogger(__name__)

# 콘텐츠 유형 — Content types in response order
CONTENT_TYPES: tuple[str, ...] = ("users", "projects", "articles", "posts")

DEFAULT_SORT_COLUMN: str = "created_at"

# 정렬 허용 목록 — 클라이언트 정렬 키 → 콘텐츠 유형별 컬럼
# Sort allow-list: client sort key -> column per content type
SORT_FIELD_MAP: dict[str, dict[str, str]] = {
    "alpha": {
        "users": "username",
        "projects": "project_name",
        "articles": "title",
        "posts": "title",
    },
    "likes": {
        "users": "likes_count",
        "projects": "likes_count",
        "articles": "likes_count",
        "posts": "likes_count",
    },
    "follows": {
        "users": "followers_count",
        "projects": "follows_count",
        "articles": "follows_count",
        "posts": "follows_count",
    },
    "watches": {
        "users": "watches_count",
        "projects": "watches_count",
        "articles": "watches_count",
        "posts": "watches_count",
    },
    "created": {content_type: "created_at" for content_type in CONTENT_TYPES},
    "updated": {content_type: "updated_at" for content_type in CONTENT_TYPES},
}


def resolve_sort_field(content_type: str, sort_by: str | None) -> str:
    """정렬 키를 콘텐츠 유형의 컬럼명으로 변환합니다.

    Map a client sort key to the column for one content type. Unknown keys
    (including the legacy default "created_at") resolve to created_at.

    Args:
        content_type: 콘텐츠 유형 (users / projects / articles / posts)
        sort_by: 클라이언트 정렬 키 (Client sort key)

    Returns:
        str: 허용된 컬럼명 (Allow-listed column name)
    """
    columns: dict[str, str] | None = SORT_FIELD_MAP.get(sort_by or "")
    if columns is None:
        return DEFAULT_SORT_COLUMN
    return columns.get(content_type, DEFAULT_SORT_COLUMN)


def resolve_sort_order(sort_order: str | None) -> str:
    """정렬 방향 — 정확히 "asc"일 때만 오름차순, 그 외 내림차순."""
    return "asc" if sort_order == "asc" else "desc"


def parse_csv(value: str | None) -> list[str]:
    """쉼표 구분 문자열을 목록으로 변환합니다 (공백/빈 항목 제거).

    Split a comma-separated query parameter, trimming blanks.
    """
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


class ExploreService:
    """탐색 서비스.

    Explore service: one query builder per content type plus the
    concurrent aggregator.
    """

    async def _run_builder(
        self,
        content_type: str,
        search: Callable[..., Awaitable[tuple[Sequence[Any], int]]],
        build: Callable[[Any], dict],
        db: AsyncSession,
        query: str,
        user_types: Sequence[str],
        page: int,
        limit: int,
        sort_field: str,
        sort_order: str,
    ) -> tuple[list[dict], int]:
        """공통 빌더 실행 — DB 오류 시 로그 후 빈 결과.

        Run one repository search and normalise its rows. A database error
        is logged and yields an empty result.
        """
        try:
            rows, total = await search(
                db, query, user_types, page, limit, sort_field, sort_order
            )
        except SQLAlchemyError:
            logger.exception("Explore search for %s failed (query=%r)", content_type, query)
            return [], 0
        return [build(row) for row in rows], total

    async def search_users(
        self,
        db: AsyncSession,
        query: str,
        user_types: Sequence[str],
        page: int,
        limit: int,
        sort_field: str,
        sort_order: str,
    ) -> tuple[list[dict], int]:
        """사용자를 검색합니다 — username 또는 bio 부분 일치.

        Search users by username or bio; the user-type filter applies to
        the user's own type.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            query: 검색어 (Free-text query; empty matches all)
            user_types: 사용자 유형 필터 (Empty or containing "all" disables it)
            page: 페이지 번호, 1부터 시작 (Page number, 1-based)
            limit: 페이지당 항목 수 (Items per page)
            sort_field: 허용된 컬럼명 (Allow-listed column)
            sort_order: "asc" | "desc"

        Returns:
            tuple[list[dict], int]: (정규화된 사용자 목록, 전체 일치 수)
        """
        return await self._run_builder(
            "users", user_repository.search, user_service.build_response,
            db, query, user_types, page, limit, sort_field, sort_order,
        )

    async def search_projects(
        self,
        db: AsyncSession,
        query: str,
        user_types: Sequence[str],
        page: int,
        limit: int,
        sort_field: str,
        sort_order: str,
    ) -> tuple[list[dict], int]:
        """프로젝트를 검색합니다 — 이름 또는 설명, 소유자 유형 필터."""
        return await self._run_builder(
            "projects", project_repository.search, project_service.build_response,
            db, query, user_types, page, limit, sort_field, sort_order,
        )

    async def search_articles(
        self,
        db: AsyncSession,
        query: str,
        user_types: Sequence[str],
        page: int,
        limit: int,
        sort_field: str,
        sort_order: str,
    ) -> tuple[list[dict], int]:
        """아티클을 검색합니다 — 제목만, 작성자 유형 필터."""
        return await self._run_builder(
            "articles", article_repository.search, article_service.build_response,
            db, query, user_types, page, limit, sort_field, sort_order,
        )

    async def search_posts(
        self,
        db: AsyncSession,
        query: str,
        user_types: Sequence[str],
        page: int,
        limit: int,
        sort_field: str,
        sort_order: str,
    ) -> tuple[list[dict], int]:
        """포스트를 검색합니다 — 제목 또는 본문, 작성자 유형 필터."""
        return await self._run_builder(
            "posts", post_repository.search, post_service.build_response,
            db, query, user_types, page, limit, sort_field, sort_order,
        )

    async def search_all(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        query: str,
        content_types: Sequence[str],
        user_types: Sequence[str],
        page: int,
        limit: int,
        sort_by: str | None,
        sort_order: str | None,
    ) -> dict:
        """요청된 콘텐츠 유형을 동시에 검색하고 결과를 병합합니다.

        Run the builders for the requested content types concurrently and
        merge their results. Each builder gets its own session, since an
        AsyncSession cannot serve concurrent tasks. Unrequested types come
        back as empty lists; unknown content types are ignored.

        Args:
            session_factory: 세션 팩토리 (Session factory)
            query: 검색어 (Free-text query)
            content_types: 요청 콘텐츠 유형 (Requested content types)
            user_types: 사용자 유형 필터 (User-type filter)
            page: 페이지 번호, 1부터 시작 (Page number, 1-based)
            limit: 페이지당 항목 수 (Items per page per content type)
            sort_by: 클라이언트 정렬 키 (Client sort key)
            sort_order: 정렬 방향 (Sort direction)

        Returns:
            dict: {"results": {...}, "page", "total_pages", "totals": {...}}
        """
        builders: dict[str, Callable[..., Awaitable[tuple[list[dict], int]]]] = {
            "users": self.search_users,
            "projects": self.search_projects,
            "articles": self.search_articles,
            "posts": self.search_posts,
        }
        requested: list[str] = [ct for ct in CONTENT_TYPES if ct in set(content_types)]
        order: str = resolve_sort_order(sort_order)

        async def run(content_type: str) -> tuple[list[dict], int]:
            async with session_factory() as db:
                return await builders[content_type](
                    db,
                    query,
                    user_types,
                    page,
                    limit,
                    resolve_sort_field(content_type, sort_by),
                    order,
                )

        outcomes: list[tuple[list[dict], int]] = await asyncio.gather(
            *(run(content_type) for content_type in requested)
        )

        results: dict[str, list[dict]] = {content_type: [] for content_type in CONTENT_TYPES}
        totals: dict[str, int] = {content_type: 0 for content_type in CONTENT_TYPES}
        for content_type, (items, total) in zip(requested, outcomes):
            results[content_type] = items
            totals[content_type] = total

        total_pages: int = max(
            (page_count(totals[content_type], limit) for content_type in requested),
            default=1,
        )
        logger.debug(
            "Explore search q=%r types=%s totals=%s", query, requested, totals
        )
        return {
            "results": results,
            "page": page,
            "total_pages": total_pages,
            "totals": totals,
        }


# 싱글턴 인스턴스 — Singleton instance
explore_service: ExploreService = ExploreService()
