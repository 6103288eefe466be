"""좋아요/팔로우/워치 API 테스트 — 중복 방지 및 카운터 갱신."""

import uuid

from httpx import AsyncClient

from collabhub.models.project import Project
from collabhub.repositories.interaction_repository import like_repository
from tests.conftest import auth_header

LIKES = "/api/v1/likes"
FOLLOWS = "/api/v1/follows"
WATCHES = "/api/v1/watches"


class TestLikes:
    async def test_like_increments_counter(
        self, client: AsyncClient, creator_project, brand_token: str,
    ):
        """좋아요 추가 시 대상 likes_count 증가"""
        body = {"entity_type": "project", "entity_id": str(creator_project.id)}
        res = await client.post(LIKES, json=body, headers=auth_header(brand_token))
        assert res.status_code == 201
        assert res.json()["entity_id"] == str(creator_project.id)

        project = (await client.get(f"/api/v1/projects/{creator_project.id}")).json()
        assert project["likes_count"] == 4

    async def test_duplicate_like_conflict(
        self, client: AsyncClient, creator_post, brand_token: str,
    ):
        """같은 대상에 두 번 좋아요 시 409"""
        body = {"entity_type": "post", "entity_id": str(creator_post.id)}
        assert (await client.post(LIKES, json=body, headers=auth_header(brand_token))).status_code == 201
        res = await client.post(LIKES, json=body, headers=auth_header(brand_token))
        assert res.status_code == 409

    async def test_concurrent_duplicate_like_conflict(
        self, client: AsyncClient, creator_post, brand_token: str, monkeypatch,
    ):
        """사전 조회를 통과한 중복 좋아요도 유니크 제약으로 409"""
        async def find_nothing(*args, **kwargs):
            return None

        body = {"entity_type": "post", "entity_id": str(creator_post.id)}
        assert (await client.post(LIKES, json=body, headers=auth_header(brand_token))).status_code == 201

        monkeypatch.setattr(like_repository, "find", find_nothing)
        res = await client.post(LIKES, json=body, headers=auth_header(brand_token))
        assert res.status_code == 409

        res = await client.get(f"{LIKES}/count", params=body)
        assert res.json() == {"count": 1}
        post = (await client.get(f"/api/v1/posts/{creator_post.id}")).json()
        assert post["likes_count"] == 1

    async def test_like_missing_target(self, client: AsyncClient, brand_token: str):
        """없는 대상 404"""
        body = {"entity_type": "article", "entity_id": str(uuid.uuid4())}
        res = await client.post(LIKES, json=body, headers=auth_header(brand_token))
        assert res.status_code == 404

    async def test_unknown_entity_type(self, client: AsyncClient, brand_token: str):
        """알 수 없는 대상 유형 422"""
        body = {"entity_type": "store", "entity_id": str(uuid.uuid4())}
        res = await client.post(LIKES, json=body, headers=auth_header(brand_token))
        assert res.status_code == 422

    async def test_unlike_decrements_counter(
        self, client: AsyncClient, creator_project, brand_token: str,
    ):
        """좋아요 취소 시 카운터 감소"""
        params = {"entity_type": "project", "entity_id": str(creator_project.id)}
        await client.post(LIKES, json=params, headers=auth_header(brand_token))
        res = await client.delete(LIKES, params=params, headers=auth_header(brand_token))
        assert res.status_code == 200

        project = (await client.get(f"/api/v1/projects/{creator_project.id}")).json()
        assert project["likes_count"] == 3

    async def test_counter_never_negative(
        self, client: AsyncClient, brand_project, creator_token: str,
    ):
        """NULL/0 카운터는 감소해도 0 유지"""
        params = {"entity_type": "project", "entity_id": str(brand_project.id)}
        assert (await client.post(LIKES, json=params, headers=auth_header(creator_token))).status_code == 201
        project = (await client.get(f"/api/v1/projects/{brand_project.id}")).json()
        assert project["likes_count"] == 1

        await client.delete(LIKES, params=params, headers=auth_header(creator_token))
        project = (await client.get(f"/api/v1/projects/{brand_project.id}")).json()
        assert project["likes_count"] == 0

    async def test_unlike_without_like(
        self, client: AsyncClient, creator_project, brand_token: str,
    ):
        """좋아요가 없으면 취소 시 404"""
        params = {"entity_type": "project", "entity_id": str(creator_project.id)}
        res = await client.delete(LIKES, params=params, headers=auth_header(brand_token))
        assert res.status_code == 404

    async def test_status_and_count(
        self, client: AsyncClient, creator_post, brand_token: str, creator_token: str,
    ):
        """상태/개수 조회"""
        params = {"entity_type": "post", "entity_id": str(creator_post.id)}
        res = await client.get(f"{LIKES}/status", params=params, headers=auth_header(brand_token))
        assert res.json() == {"active": False}

        await client.post(LIKES, json=params, headers=auth_header(brand_token))
        await client.post(LIKES, json=params, headers=auth_header(creator_token))

        res = await client.get(f"{LIKES}/status", params=params, headers=auth_header(brand_token))
        assert res.json() == {"active": True}
        res = await client.get(f"{LIKES}/count", params=params)
        assert res.json() == {"count": 2}

    async def test_requires_auth(self, client: AsyncClient, creator_post):
        """인증 없이 좋아요 401"""
        body = {"entity_type": "post", "entity_id": str(creator_post.id)}
        res = await client.post(LIKES, json=body)
        assert res.status_code == 401


class TestFollows:
    async def test_follow_user_updates_followers(
        self, client: AsyncClient, creator_user, brand_token: str,
    ):
        """사용자 팔로우 시 followers_count 증가"""
        body = {"entity_type": "user", "entity_id": str(creator_user.id)}
        res = await client.post(FOLLOWS, json=body, headers=auth_header(brand_token))
        assert res.status_code == 201

        user = (await client.get(f"/api/v1/users/{creator_user.id}")).json()
        assert user["followers_count"] == 3

    async def test_follow_comment_not_supported(self, client: AsyncClient, brand_token: str):
        """댓글은 팔로우 불가 400"""
        body = {"entity_type": "comment", "entity_id": str(uuid.uuid4())}
        res = await client.post(FOLLOWS, json=body, headers=auth_header(brand_token))
        assert res.status_code == 400

    async def test_user_count_and_mine(
        self, client: AsyncClient, creator_user, freelancer_user, brand_token: str,
    ):
        """내가 팔로우한 사용자 수와 ID 목록"""
        for target in (creator_user, freelancer_user):
            body = {"entity_type": "user", "entity_id": str(target.id)}
            await client.post(FOLLOWS, json=body, headers=auth_header(brand_token))

        res = await client.get(
            f"{FOLLOWS}/user-count", params={"entity_type": "user"}, headers=auth_header(brand_token),
        )
        assert res.json() == {"count": 2}

        res = await client.get(
            f"{FOLLOWS}/mine", params={"entity_type": "user"}, headers=auth_header(brand_token),
        )
        data = res.json()
        assert data["entity_type"] == "user"
        assert set(data["entity_ids"]) == {str(creator_user.id), str(freelancer_user.id)}


class TestWatches:
    async def test_watch_article(
        self, client: AsyncClient, creator_article, brand_token: str,
    ):
        """아티클 워치 시 watches_count 증가, 중복 409"""
        body = {"entity_type": "article", "entity_id": str(creator_article.id)}
        res = await client.post(WATCHES, json=body, headers=auth_header(brand_token))
        assert res.status_code == 201
        res = await client.post(WATCHES, json=body, headers=auth_header(brand_token))
        assert res.status_code == 409

        article = (await client.get(f"/api/v1/articles/{creator_article.id}")).json()
        assert article["watches_count"] == 1


class TestCounterFloor:
    async def test_adjust_counter_floors_at_zero(self, db, brand_project):
        """카운터 감소는 0 아래로 내려가지 않음"""
        await like_repository.adjust_counter(db, Project, "likes_count", brand_project.id, -1)
        await db.commit()
        await db.refresh(brand_project)
        assert brand_project.likes_count == 0
