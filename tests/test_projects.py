"""프로젝트 API 테스트."""

import uuid

from httpx import AsyncClient

from tests.conftest import auth_header

URL = "/api/v1/projects"


class TestCreateProject:
    async def test_create_with_grouped_fields(self, client: AsyncClient, creator_token: str):
        """그룹 필드(seeking/social_links)와 함께 생성"""
        res = await client.post(URL, json={
            "project_name": "Short Film",
            "project_description": "Ten minute drama",
            "skills_required": ["lighting"],
            "seeking": {"brand": True},
            "social_links": {"github": "https://github.com/alice"},
        }, headers=auth_header(creator_token))
        assert res.status_code == 201
        data = res.json()
        assert data["project_name"] == "Short Film"
        assert data["username"] == "alice"
        assert data["seeking"] == {
            "creator": False, "brand": True, "freelancer": False, "contractor": False,
        }
        assert data["social_links"]["github"] == "https://github.com/alice"
        assert data["skills_required"] == ["lighting"]
        assert data["currency"] == "USD"

    async def test_name_required(self, client: AsyncClient, creator_token: str):
        """프로젝트명 누락/빈 값 시 422"""
        res = await client.post(URL, json={"project_name": ""}, headers=auth_header(creator_token))
        assert res.status_code == 422
        res = await client.post(URL, json={}, headers=auth_header(creator_token))
        assert res.status_code == 422

    async def test_requires_auth(self, client: AsyncClient):
        """인증 없이 생성 시 401"""
        res = await client.post(URL, json={"project_name": "X"})
        assert res.status_code == 401


class TestReadProjects:
    async def test_list_newest_first(self, client: AsyncClient, creator_project, brand_project):
        """목록은 최신순 페이지네이션"""
        res = await client.get(URL, params={"per_page": 1})
        assert res.status_code == 200
        data = res.json()
        assert data["total"] == 2
        assert data["per_page"] == 1
        assert [p["project_name"] for p in data["items"]] == ["Trail Gear Launch"]

    async def test_get_detail(self, client: AsyncClient, creator_project):
        """상세 조회"""
        res = await client.get(f"{URL}/{creator_project.id}")
        assert res.status_code == 200
        assert res.json()["seeking"]["brand"] is True

    async def test_get_not_found(self, client: AsyncClient):
        """없는 프로젝트 404"""
        res = await client.get(f"{URL}/{uuid.uuid4()}")
        assert res.status_code == 404

    async def test_list_by_user(
        self, client: AsyncClient, creator_user, creator_project, brand_project,
    ):
        """사용자별 프로젝트 조회"""
        res = await client.get(f"{URL}/user/{creator_user.id}")
        assert res.status_code == 200
        assert [p["id"] for p in res.json()] == [str(creator_project.id)]


class TestUpdateDeleteProject:
    async def test_owner_can_update(
        self, client: AsyncClient, creator_project, creator_token: str,
    ):
        """소유자 부분 수정 — 보내지 않은 필드는 유지"""
        res = await client.put(
            f"{URL}/{creator_project.id}",
            json={"project_status": "in-progress", "seeking": {"creator": True}},
            headers=auth_header(creator_token),
        )
        assert res.status_code == 200
        data = res.json()
        assert data["project_status"] == "in-progress"
        assert data["project_name"] == "Mountain Documentary"
        assert data["seeking"]["creator"] is True
        assert data["seeking"]["brand"] is True

    async def test_non_owner_forbidden(
        self, client: AsyncClient, creator_project, brand_token: str,
    ):
        """소유자가 아니면 403"""
        res = await client.put(
            f"{URL}/{creator_project.id}",
            json={"project_name": "Hijacked"},
            headers=auth_header(brand_token),
        )
        assert res.status_code == 403
        res = await client.delete(f"{URL}/{creator_project.id}", headers=auth_header(brand_token))
        assert res.status_code == 403

    async def test_owner_can_delete(
        self, client: AsyncClient, creator_project, creator_token: str,
    ):
        """소유자 삭제 후 404"""
        res = await client.delete(f"{URL}/{creator_project.id}", headers=auth_header(creator_token))
        assert res.status_code == 200
        res = await client.get(f"{URL}/{creator_project.id}")
        assert res.status_code == 404

    async def test_delete_removes_interactions_and_comments(
        self, client: AsyncClient, creator_project, creator_token: str, brand_token: str,
    ):
        """삭제 시 대상의 좋아요/팔로우/댓글도 함께 삭제"""
        target = {"entity_type": "project", "entity_id": str(creator_project.id)}
        await client.post("/api/v1/likes", json=target, headers=auth_header(brand_token))
        await client.post("/api/v1/follows", json=target, headers=auth_header(brand_token))
        comment = await client.post(
            "/api/v1/comments", json={**target, "text": "Interested"}, headers=auth_header(brand_token),
        )
        await client.post(
            "/api/v1/likes",
            json={"entity_type": "comment", "entity_id": comment.json()["id"]},
            headers=auth_header(creator_token),
        )

        res = await client.delete(f"{URL}/{creator_project.id}", headers=auth_header(creator_token))
        assert res.status_code == 200

        res = await client.get(
            "/api/v1/likes/mine", params={"entity_type": "project"}, headers=auth_header(brand_token),
        )
        assert res.json()["entity_ids"] == []
        res = await client.get(f"/api/v1/comments/project/{creator_project.id}")
        assert res.json() == []

        stats = (await client.get("/api/v1/stats")).json()
        assert stats["likes"] == 0
        assert stats["follows"] == 0
