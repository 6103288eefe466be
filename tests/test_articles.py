"""아티클 API 테스트 — 섹션 교체 및 요약 포함."""

import uuid

from httpx import AsyncClient

from collabhub.models.article import ArticleSection
from collabhub.services.article_service import build_excerpt
from tests.conftest import auth_header

URL = "/api/v1/articles"


class TestExcerpt:
    def test_first_section_by_order(self):
        """order가 가장 작은 섹션의 텍스트 사용"""
        sections = [
            ArticleSection(order=2, text="second"),
            ArticleSection(order=1, text="first"),
        ]
        assert build_excerpt(sections) == "first..."

    def test_no_sections(self):
        """섹션이 없으면 No content available"""
        assert build_excerpt([]) == "No content available"

    def test_first_section_without_text(self):
        """첫 섹션에 텍스트가 없으면 No content available"""
        sections = [
            ArticleSection(order=0, type="media", media_url="https://example.com/x.png"),
            ArticleSection(order=1, text="later"),
        ]
        assert build_excerpt(sections) == "No content available"


class TestCreateArticle:
    async def test_create_with_sections(self, client: AsyncClient, creator_token: str):
        """섹션과 함께 생성 — order 생략 시 목록 위치"""
        res = await client.post(URL, json={
            "title": "Color grading basics",
            "tags": ["post-production"],
            "sections": [
                {"title": "Intro", "text": "Start with a calibrated monitor."},
                {"type": "media", "media_url": "https://example.com/scope.png"},
            ],
        }, headers=auth_header(creator_token))
        assert res.status_code == 201
        data = res.json()
        assert data["title"] == "Color grading basics"
        assert data["username"] == "alice"
        assert [s["order"] for s in data["sections"]] == [0, 1]
        assert data["sections"][1]["type"] == "media"
        assert data["excerpt"] == "Start with a calibrated monitor...."

    async def test_blank_title_defaults(self, client: AsyncClient, creator_token: str):
        """빈 제목은 Untitled Article"""
        res = await client.post(URL, json={"title": "   "}, headers=auth_header(creator_token))
        assert res.status_code == 201
        data = res.json()
        assert data["title"] == "Untitled Article"
        assert data["sections"] == []
        assert data["excerpt"] == "No content available"


class TestUpdateArticle:
    async def test_sections_replaced(
        self, client: AsyncClient, creator_article, creator_token: str,
    ):
        """섹션을 보내면 전체 교체"""
        res = await client.put(
            f"{URL}/{creator_article.id}",
            json={"sections": [{"text": "Rewritten intro"}]},
            headers=auth_header(creator_token),
        )
        assert res.status_code == 200
        data = res.json()
        assert data["title"] == "Filming at altitude"
        assert len(data["sections"]) == 1
        assert data["excerpt"] == "Rewritten intro..."

    async def test_sections_kept_when_omitted(
        self, client: AsyncClient, creator_article, creator_token: str,
    ):
        """섹션을 보내지 않으면 유지"""
        res = await client.put(
            f"{URL}/{creator_article.id}",
            json={"title": "Filming at high altitude"},
            headers=auth_header(creator_token),
        )
        assert res.status_code == 200
        data = res.json()
        assert data["title"] == "Filming at high altitude"
        assert len(data["sections"]) == 2

    async def test_non_author_forbidden(
        self, client: AsyncClient, creator_article, brand_token: str,
    ):
        """작성자가 아니면 403"""
        res = await client.put(
            f"{URL}/{creator_article.id}",
            json={"title": "Mine now"},
            headers=auth_header(brand_token),
        )
        assert res.status_code == 403


class TestReadDeleteArticle:
    async def test_get_detail(self, client: AsyncClient, creator_article):
        """상세 조회 — 섹션 순서대로"""
        res = await client.get(f"{URL}/{creator_article.id}")
        assert res.status_code == 200
        assert [s["order"] for s in res.json()["sections"]] == [0, 1]

    async def test_list(self, client: AsyncClient, creator_article, brand_article):
        """목록 조회"""
        res = await client.get(URL)
        assert res.status_code == 200
        assert res.json()["total"] == 2

    async def test_delete(self, client: AsyncClient, creator_article, creator_token: str):
        """작성자 삭제 후 404"""
        res = await client.delete(f"{URL}/{creator_article.id}", headers=auth_header(creator_token))
        assert res.status_code == 200
        res = await client.get(f"{URL}/{creator_article.id}")
        assert res.status_code == 404

    async def test_get_not_found(self, client: AsyncClient):
        """없는 아티클 404"""
        res = await client.get(f"{URL}/{uuid.uuid4()}")
        assert res.status_code == 404
