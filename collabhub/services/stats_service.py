"""통계 서비스 — 플랫폼 전체 집계.

Stats Service — Platform-wide counts for the landing page, gathered
concurrently with one session per count.
"""

import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from collabhub.repositories.article_repository import article_repository
from collabhub.repositories.base import BaseRepository
from collabhub.repositories.interaction_repository import (
    follow_repository,
    like_repository,
    watch_repository,
)
from collabhub.repositories.post_repository import post_repository
from collabhub.repositories.project_repository import project_repository
from collabhub.repositories.user_repository import user_repository

logger = logging.getLogger(__name__)

# 응답 키 → 레포지토리 — Response key to the repository it counts
COUNTED: dict[str, BaseRepository] = {
    "users": user_repository,
    "projects": project_repository,
    "articles": article_repository,
    "posts": post_repository,
    "likes": like_repository,
    "follows": follow_repository,
    "watches": watch_repository,
}


class StatsService:
    """통계 서비스."""

    async def get_stats(self, session_factory: async_sessionmaker[AsyncSession]) -> dict:
        """플랫폼 통계를 동시에 집계합니다.

        Count every table concurrently. total_content is
        projects + articles + posts.

        Args:
            session_factory: 세션 팩토리 (Session factory)

        Returns:
            dict: 키별 개수와 total_content (Counts per key plus total_content)
        """

        async def count(repository: BaseRepository) -> int:
            async with session_factory() as db:
                return await repository.count(db)

        values: list[int] = await asyncio.gather(*(count(r) for r in COUNTED.values()))
        stats: dict[str, int] = dict(zip(COUNTED.keys(), values))
        stats["total_content"] = stats["projects"] + stats["articles"] + stats["posts"]
        logger.debug("Platform stats: %s", stats)
        return stats


# 싱글턴 인스턴스 — Singleton instance
stats_service: StatsService = StatsService()
