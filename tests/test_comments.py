"""댓글 API 테스트."""

import uuid

from httpx import AsyncClient

from tests.conftest import auth_header

URL = "/api/v1/comments"


class TestComments:
    async def test_create_and_list(
        self, client: AsyncClient, creator_post, brand_token: str, creator_token: str,
    ):
        """댓글 작성 후 최신순 조회 — 작성자 정보 포함"""
        body = {"entity_type": "post", "entity_id": str(creator_post.id), "text": "  Great shot!  "}
        res = await client.post(URL, json=body, headers=auth_header(brand_token))
        assert res.status_code == 201
        data = res.json()
        assert data["text"] == "Great shot!"
        assert data["username"] == "acme"

        body["text"] = "Thanks"
        await client.post(URL, json=body, headers=auth_header(creator_token))

        res = await client.get(f"{URL}/post/{creator_post.id}")
        assert res.status_code == 200
        comments = res.json()
        assert len(comments) == 2
        assert {c["username"] for c in comments} == {"acme", "alice"}

    async def test_blank_text_rejected(
        self, client: AsyncClient, creator_post, brand_token: str,
    ):
        """공백뿐인 댓글 400"""
        body = {"entity_type": "post", "entity_id": str(creator_post.id), "text": "   "}
        res = await client.post(URL, json=body, headers=auth_header(brand_token))
        assert res.status_code == 400

    async def test_missing_target(self, client: AsyncClient, brand_token: str):
        """없는 대상에 댓글 404"""
        body = {"entity_type": "project", "entity_id": str(uuid.uuid4()), "text": "Hi"}
        res = await client.post(URL, json=body, headers=auth_header(brand_token))
        assert res.status_code == 404

    async def test_users_cannot_be_commented(self, client: AsyncClient, creator_user, brand_token: str):
        """사용자는 댓글 대상이 아님 422"""
        body = {"entity_type": "user", "entity_id": str(creator_user.id), "text": "Hi"}
        res = await client.post(URL, json=body, headers=auth_header(brand_token))
        assert res.status_code == 422

    async def test_delete_only_by_author(
        self, client: AsyncClient, creator_project, brand_token: str, creator_token: str,
    ):
        """작성자만 삭제 가능"""
        body = {"entity_type": "project", "entity_id": str(creator_project.id), "text": "Count me in"}
        comment_id = (await client.post(URL, json=body, headers=auth_header(brand_token))).json()["id"]

        res = await client.delete(f"{URL}/{comment_id}", headers=auth_header(creator_token))
        assert res.status_code == 403

        res = await client.delete(f"{URL}/{comment_id}", headers=auth_header(brand_token))
        assert res.status_code == 200
        res = await client.get(f"{URL}/project/{creator_project.id}")
        assert res.json() == []


class TestPostCommentCount:
    async def test_count_follows_comments(
        self, client: AsyncClient, creator_post, brand_token: str,
    ):
        """포스트 댓글 작성/삭제 시 comments_count 갱신"""
        body = {"entity_type": "post", "entity_id": str(creator_post.id), "text": "Nice"}
        first = await client.post(URL, json=body, headers=auth_header(brand_token))
        await client.post(URL, json=body, headers=auth_header(brand_token))

        post = (await client.get(f"/api/v1/posts/{creator_post.id}")).json()
        assert post["comments_count"] == 2

        await client.delete(f"{URL}/{first.json()['id']}", headers=auth_header(brand_token))
        post = (await client.get(f"/api/v1/posts/{creator_post.id}")).json()
        assert post["comments_count"] == 1

    async def test_delete_removes_comment_likes(
        self, client: AsyncClient, creator_post, brand_token: str, creator_token: str,
    ):
        """댓글 삭제 시 댓글의 좋아요도 삭제"""
        body = {"entity_type": "post", "entity_id": str(creator_post.id), "text": "Nice"}
        comment_id = (await client.post(URL, json=body, headers=auth_header(brand_token))).json()["id"]
        like = {"entity_type": "comment", "entity_id": comment_id}
        await client.post("/api/v1/likes", json=like, headers=auth_header(creator_token))

        await client.delete(f"{URL}/{comment_id}", headers=auth_header(brand_token))
        res = await client.get("/api/v1/likes/count", params=like)
        assert res.json() == {"count": 0}
