"""플랫폼 통계 및 추천 콘텐츠 API 테스트."""

from httpx import AsyncClient
from sqlalchemy.exc import OperationalError

from collabhub.repositories.post_repository import post_repository
from collabhub.services.featured_service import featured_service
from tests.conftest import auth_header


class TestStats:
    async def test_counts(
        self, client: AsyncClient, creator_project, brand_project, creator_article,
        creator_post, brand_token: str,
    ):
        """테이블별 개수와 total_content"""
        body = {"entity_type": "project", "entity_id": str(creator_project.id)}
        await client.post("/api/v1/likes", json=body, headers=auth_header(brand_token))

        res = await client.get("/api/v1/stats")
        assert res.status_code == 200
        assert res.json() == {
            "users": 2,
            "projects": 2,
            "articles": 1,
            "posts": 1,
            "likes": 1,
            "follows": 0,
            "watches": 0,
            "total_content": 4,
        }

    async def test_empty_platform(self, client: AsyncClient):
        """데이터가 없으면 모두 0"""
        res = await client.get("/api/v1/stats")
        assert all(value == 0 for value in res.json().values())


class TestFeatured:
    async def test_newest_per_type(
        self, client: AsyncClient, creator_user, brand_user, freelancer_user,
        creator_project, brand_project, creator_post, brand_post,
    ):
        """유형별 최신 항목"""
        res = await client.get("/api/v1/featured")
        assert res.status_code == 200
        data = res.json()
        assert [u["username"] for u in data["users"]] == ["bob", "acme", "alice"]
        assert [p["project_name"] for p in data["projects"]] == [
            "Trail Gear Launch", "Mountain Documentary",
        ]
        assert [p["title"] for p in data["posts"]] == ["Spring catalogue", "Behind the scenes"]
        assert data["articles"] == []
        assert data["comments"] == []

    async def test_featured_only(self, client: AsyncClient, db, creator_project, brand_project):
        """featured_only면 추천 표시된 항목만"""
        creator_project.featured = True
        await db.commit()

        res = await client.get("/api/v1/featured", params={"featured_only": "true"})
        data = res.json()
        assert [p["project_name"] for p in data["projects"]] == ["Mountain Documentary"]
        assert data["users"] == []

    async def test_limit(self, session_factory, creator_user, brand_user, freelancer_user):
        """유형별 개수 제한"""
        data = await featured_service.get_featured(session_factory, limit=1)
        assert [u["username"] for u in data["users"]] == ["bob"]

    async def test_failed_source_is_empty(
        self, session_factory, creator_post, monkeypatch,
    ):
        """한 유형 조회 실패 시 해당 목록만 비움"""
        async def failing_latest(*args, **kwargs):
            raise OperationalError("SELECT", {}, Exception("timeout"))

        monkeypatch.setattr(post_repository, "get_latest", failing_latest)
        data = await featured_service.get_featured(session_factory)
        assert data["posts"] == []
        assert [u["username"] for u in data["users"]] == ["alice"]
