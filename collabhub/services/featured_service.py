"""추천 콘텐츠 서비스 — 랜딩 페이지용 최신/추천 항목.

Featured Service — Newest (optionally featured-only) users, projects,
articles, posts and comments for the landing page. Each list is fetched
concurrently in its own session and falls back to an empty list when its
query fails.
"""

import asyncio
import logging
from typing import Any, Callable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from collabhub.config import settings
from collabhub.repositories.article_repository import article_repository
from collabhub.repositories.base import BaseRepository
from collabhub.repositories.comment_repository import comment_repository
from collabhub.repositories.post_repository import post_repository
from collabhub.repositories.project_repository import project_repository
from collabhub.repositories.user_repository import user_repository
from collabhub.services.article_service import article_service
from collabhub.services.comment_service import comment_service
from collabhub.services.post_service import post_service
from collabhub.services.project_service import project_service
from collabhub.services.user_service import user_service

logger = logging.getLogger(__name__)


class FeaturedService:
    """추천 콘텐츠 서비스."""

    async def get_featured(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        featured_only: bool = False,
        limit: int | None = None,
    ) -> dict:
        """유형별 최신 항목을 동시에 조회합니다.

        Fetch the newest items of every type concurrently.

        Args:
            session_factory: 세션 팩토리 (Session factory)
            featured_only: 추천 항목만 (Only rows flagged featured)
            limit: 유형별 최대 개수, 기본 FEATURED_LIMIT (Per-type limit)

        Returns:
            dict: users/projects/articles/posts/comments 목록
        """
        per_type: int = limit or settings.FEATURED_LIMIT
        sources: dict[str, tuple[BaseRepository, Callable[[Any], dict]]] = {
            "users": (user_repository, user_service.build_response),
            "projects": (project_repository, project_service.build_response),
            "articles": (article_repository, article_service.build_response),
            "posts": (post_repository, post_service.build_response),
            "comments": (comment_repository, comment_service.build_response),
        }

        async def fetch(
            key: str,
            repository: BaseRepository,
            build: Callable[[Any], dict],
        ) -> list[dict]:
            try:
                async with session_factory() as db:
                    rows = await repository.get_latest(db, per_type, featured_only)
                    return [build(row) for row in rows]
            except SQLAlchemyError:
                logger.exception("Featured %s query failed", key)
                return []

        lists: list[list[dict]] = await asyncio.gather(
            *(fetch(key, repo, build) for key, (repo, build) in sources.items())
        )
        return dict(zip(sources.keys(), lists))


# 싱글턴 인스턴스 — Singleton instance
featured_service: FeaturedService = FeaturedService()
