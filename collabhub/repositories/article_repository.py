"""아티클 레포지토리 — 아티클 및 섹션 DB 쿼리 담당.

Article Repository — Handles article and section database queries,
including the articles explore search builder.
"""

from typing import Any, Sequence
from uuid import UUID

from sqlalchemy import Select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from collabhub.models.article import Article, ArticleSection
from collabhub.models.user import User
from collabhub.repositories.base import BaseRepository, is_type_filter_active


class ArticleRepository(BaseRepository[Article]):
    """아티클 레포지토리.

    Article repository. Queries eager-load the author and the ordered
    sections (the first section feeds the excerpt).

    Extends:
        BaseRepository[Article]
    """

    def __init__(self) -> None:
        """레포지토리를 초기화합니다.

        Initialize the article repository with Article model.
        """
        super().__init__(Article)

    def loader_options(self) -> list[Any]:
        return [selectinload(Article.author), selectinload(Article.sections)]

    async def list_paginated(
        self,
        db: AsyncSession,
        page: int = 1,
        per_page: int = 20,
        user_id: UUID | None = None,
    ) -> tuple[Sequence[Article], int]:
        """아티클 목록을 최신순으로 조회합니다.

        Retrieve a newest-first page of articles, optionally for one author.
        """
        query: Select = self.base_query()
        if user_id is not None:
            query = query.where(Article.user_id == user_id)
        query = query.order_by(Article.created_at.desc(), Article.id)
        return await self.get_paginated(db, query, page, per_page)

    async def search(
        self,
        db: AsyncSession,
        query_text: str,
        user_types: Sequence[str],
        page: int,
        per_page: int,
        sort_field: str,
        sort_order: str,
    ) -> tuple[Sequence[Article], int]:
        """아티클을 검색합니다 — 제목만 부분 일치.

        Search articles by case-insensitive substring on the title only.
        The user-type filter applies to the author.

        Returns:
            tuple[Sequence[Article], int]: (아티클 목록, 전체 개수)
        """
        query: Select = self.base_query()
        if query_text:
            query = query.where(self.text_match(query_text, Article.title))
        if is_type_filter_active(user_types):
            query = query.join(User, Article.user_id == User.id).where(
                User.user_type.in_(list(user_types))
            )
        query = self.apply_sort(query, sort_field, sort_order)
        return await self.get_paginated(db, query, page, per_page)

    async def replace_sections(
        self,
        db: AsyncSession,
        article: Article,
        sections: list[dict[str, Any]],
    ) -> None:
        """아티클의 섹션을 모두 교체합니다.

        Drop every section of the article and attach the given ones. The
        article must have been loaded with its sections. A section without
        an explicit order takes its list position.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            article: 대상 아티클, 섹션 로드됨 (Target article, sections loaded)
            sections: 새 섹션 데이터 목록 (New section payloads)
        """
        # delete-orphan 캐스케이드로 기존 섹션 삭제 — Orphans are deleted on flush
        article.sections.clear()
        for index, section in enumerate(sections):
            data: dict[str, Any] = dict(section)
            if data.get("order") is None:
                data["order"] = index
            article.sections.append(ArticleSection(**data))
        await db.flush()


# 싱글턴 인스턴스 — Singleton instance
article_repository: ArticleRepository = ArticleRepository()
