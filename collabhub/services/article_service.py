"""아티클 서비스 — 아티클 및 섹션 비즈니스 로직.

Article Service — Business logic for section-based articles: CRUD with
owner-only writes, section replacement, and the excerpt shown on cards.
"""

import logging
from typing import Any, Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from collabhub.models.article import Article, ArticleSection
from collabhub.models.user import User
from collabhub.repositories.article_repository import article_repository
from collabhub.schemas.article import ArticleCreate, ArticleUpdate
from collabhub.services.interaction_service import remove_entity_references
from collabhub.services.user_service import owner_fields
from collabhub.utils.exceptions import ForbiddenError, NotFoundError
from collabhub.utils.media import resolve_image

logger = logging.getLogger(__name__)

DEFAULT_ARTICLE_TITLE: str = "Untitled Article"
EXCERPT_LENGTH: int = 150
NO_CONTENT_EXCERPT: str = "No content available"


def build_excerpt(sections: Sequence[ArticleSection]) -> str:
    """첫 섹션 텍스트로 요약을 만듭니다.

    Excerpt from the first section (by order): its text cut to 150
    characters followed by "...". Without a first section or text,
    "No content available".
    """
    if not sections:
        return NO_CONTENT_EXCERPT
    first: ArticleSection = min(sections, key=lambda s: s.order or 0)
    if not first.text:
        return NO_CONTENT_EXCERPT
    return first.text[:EXCERPT_LENGTH] + "..."


def _section_response(section: ArticleSection) -> dict:
    return {
        "id": str(section.id),
        "type": section.type or "full-width-text",
        "title": section.title,
        "subtitle": section.subtitle,
        "text": section.text,
        "media_url": section.media_url,
        "media_subtext": section.media_subtext,
        "order": section.order or 0,
    }


class ArticleService:
    """아티클 서비스.

    Article service providing listing, detail and owner-only writes.
    """

    def build_response(self, article: Article) -> dict:
        """아티클 응답 딕셔너리를 구성합니다.

        Build the article response dict with defaults applied, the excerpt,
        ordered sections and owner fields. Author and sections must be loaded.

        Args:
            article: 아티클 ORM 객체 (Article ORM object)

        Returns:
            dict: 정규화된 아티클 딕셔너리 (Normalised article dict)
        """
        sections: list[ArticleSection] = sorted(article.sections, key=lambda s: s.order or 0)
        display: str = article.article_image_display or "url"
        return {
            "id": str(article.id),
            "user_id": str(article.user_id),
            "title": article.title or DEFAULT_ARTICLE_TITLE,
            "article_image_url": article.article_image_url,
            "article_image_upload": article.article_image_upload,
            "article_image_display": display,
            "article_image": resolve_image(
                article.article_image_url, article.article_image_upload, display
            ),
            "tags": article.tags or [],
            "citations": article.citations or [],
            "contributors": article.contributors or [],
            "related_media": article.related_media or [],
            "likes_count": article.likes_count or 0,
            "follows_count": article.follows_count or 0,
            "watches_count": article.watches_count or 0,
            "featured": bool(article.featured),
            "excerpt": build_excerpt(sections),
            "sections": [_section_response(s) for s in sections],
            "created_at": article.created_at,
            "updated_at": article.updated_at,
            **owner_fields(article.author),
        }

    async def list_articles(
        self,
        db: AsyncSession,
        page: int = 1,
        per_page: int = 20,
    ) -> tuple[Sequence[Article], int]:
        """아티클 목록을 최신순으로 조회합니다."""
        return await article_repository.list_paginated(db, page, per_page)

    async def list_by_user(self, db: AsyncSession, user_id: UUID) -> Sequence[Article]:
        """사용자의 모든 아티클을 최신순으로 조회합니다."""
        return await article_repository.get_all(
            db, filters={"user_id": user_id}, order_by=Article.created_at.desc()
        )

    async def get_article(self, db: AsyncSession, article_id: UUID) -> Article:
        """아티클을 조회합니다.

        Raises:
            NotFoundError: 아티클이 없을 때 (When article not found)
        """
        article: Article | None = await article_repository.get_by_id(db, article_id)
        if article is None:
            raise NotFoundError("아티클을 찾을 수 없습니다 (Article not found)")
        return article

    async def _get_owned(self, db: AsyncSession, article_id: UUID, user: User) -> Article:
        article: Article = await self.get_article(db, article_id)
        if article.user_id != user.id:
            raise ForbiddenError("이 아티클에 대한 권한이 없습니다 (Not the article author)")
        return article

    async def create_article(
        self,
        db: AsyncSession,
        user: User,
        data: ArticleCreate,
    ) -> Article:
        """새 아티클을 섹션과 함께 생성합니다.

        Create an article with its sections. A blank title becomes
        "Untitled Article".

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            user: 현재 사용자, 작성자 (Authenticated user, becomes author)
            data: 생성 데이터 (Creation payload)

        Returns:
            Article: 생성된 아티클, 섹션 로드됨 (Created article, sections loaded)
        """
        values: dict[str, Any] = data.model_dump(exclude_none=True, exclude={"sections"})
        values["title"] = (data.title or "").strip() or DEFAULT_ARTICLE_TITLE
        values["user_id"] = user.id
        created: Article = await article_repository.create(db, values)

        article: Article = await self.get_article(db, created.id)
        if data.sections:
            await article_repository.replace_sections(
                db, article, [s.model_dump() for s in data.sections]
            )
        logger.info(
            "Article %s created by user %s with %d sections",
            article.id, user.id, len(data.sections),
        )
        return await self.get_article(db, article.id)

    async def update_article(
        self,
        db: AsyncSession,
        article_id: UUID,
        user: User,
        data: ArticleUpdate,
    ) -> Article:
        """아티클을 수정합니다 (작성자만). 섹션이 오면 전체 교체.

        Apply a partial update. When sections are supplied they replace
        every existing section.

        Raises:
            NotFoundError: 아티클이 없을 때 (When article not found)
            ForbiddenError: 작성자가 아닐 때 (When the user is not the author)
        """
        article: Article = await self._get_owned(db, article_id, user)
        update_data: dict[str, Any] = data.model_dump(exclude_unset=True, exclude={"sections"})
        if "title" in update_data:
            update_data["title"] = (update_data["title"] or "").strip() or DEFAULT_ARTICLE_TITLE

        if update_data:
            await article_repository.update(db, article_id, update_data)
        if data.sections is not None:
            article = await self.get_article(db, article_id)
            await article_repository.replace_sections(
                db, article, [s.model_dump() for s in data.sections]
            )
        return await self.get_article(db, article_id)

    async def delete_article(
        self,
        db: AsyncSession,
        article_id: UUID,
        user: User,
    ) -> bool:
        """아티클을 삭제합니다 (작성자만). 섹션, 댓글, 상호작용도 함께 삭제."""
        await self._get_owned(db, article_id, user)
        await remove_entity_references(db, "article", article_id)
        deleted: bool = await article_repository.delete(db, article_id)
        logger.info("Article %s deleted by user %s", article_id, user.id)
        return deleted


# 싱글턴 인스턴스 — Singleton instance
article_service: ArticleService = ArticleService()
