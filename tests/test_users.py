"""사용자 프로필 API 테스트."""

import uuid

from httpx import AsyncClient

from tests.conftest import auth_header

URL = "/api/v1/users"


class TestMe:
    async def test_get_me_includes_email(self, client: AsyncClient, creator_token: str):
        """내 프로필 조회 — 이메일 포함"""
        res = await client.get(f"{URL}/me", headers=auth_header(creator_token))
        assert res.status_code == 200
        data = res.json()
        assert data["username"] == "alice"
        assert data["email"] == "alice@example.com"
        assert data["skills"] == ["editing", "storytelling"]

    async def test_update_me(self, client: AsyncClient, creator_token: str):
        """프로필 부분 수정"""
        res = await client.put(
            f"{URL}/me",
            json={"bio": "Now shooting commercials", "work_status": "available"},
            headers=auth_header(creator_token),
        )
        assert res.status_code == 200
        data = res.json()
        assert data["bio"] == "Now shooting commercials"
        assert data["work_status"] == "available"
        assert data["career_title"] == "Director"

    async def test_update_username_taken(
        self, client: AsyncClient, creator_token: str, brand_user,
    ):
        """이미 사용 중인 사용자명으로 변경 시 409"""
        res = await client.put(
            f"{URL}/me", json={"username": "acme"}, headers=auth_header(creator_token),
        )
        assert res.status_code == 409

    async def test_update_same_username_allowed(self, client: AsyncClient, creator_token: str):
        """자기 사용자명 그대로 전송은 허용"""
        res = await client.put(
            f"{URL}/me", json={"username": "alice"}, headers=auth_header(creator_token),
        )
        assert res.status_code == 200


class TestPublicProfiles:
    async def test_get_user_hides_email(self, client: AsyncClient, creator_user):
        """공개 프로필에는 이메일 미포함"""
        res = await client.get(f"{URL}/{creator_user.id}")
        assert res.status_code == 200
        assert res.json()["email"] is None

    async def test_get_user_not_found(self, client: AsyncClient):
        """없는 사용자 404"""
        res = await client.get(f"{URL}/{uuid.uuid4()}")
        assert res.status_code == 404

    async def test_list_users(self, client: AsyncClient, creator_user, brand_user):
        """사용자 목록 — 최신순"""
        res = await client.get(URL)
        assert res.status_code == 200
        data = res.json()
        assert data["total"] == 2
        assert [u["username"] for u in data["items"]] == ["acme", "alice"]

    async def test_user_content(
        self, client: AsyncClient, creator_user, creator_project, creator_article,
        creator_post, brand_post,
    ):
        """사용자의 프로젝트/아티클/포스트 모음"""
        res = await client.get(f"{URL}/{creator_user.id}/content")
        assert res.status_code == 200
        data = res.json()
        assert [p["project_name"] for p in data["projects"]] == ["Mountain Documentary"]
        assert [a["title"] for a in data["articles"]] == ["Filming at altitude"]
        assert [p["title"] for p in data["posts"]] == ["Behind the scenes"]
