"""탐색(검색) API 및 쿼리 빌더 테스트.

Explore API and query-builder tests: free-text matching, user-type filter,
sort allow-list, pagination, and the concurrent aggregator.
"""

import pytest
from httpx import AsyncClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from collabhub.repositories.user_repository import user_repository
from collabhub.services.explore_service import (
    explore_service,
    parse_csv,
    resolve_sort_field,
    resolve_sort_order,
)

URL = "/api/v1/explore/search"


class TestSortResolution:
    def test_alpha_maps_per_type(self):
        """alpha 정렬 키는 유형별 이름 컬럼으로 해석"""
        assert resolve_sort_field("users", "alpha") == "username"
        assert resolve_sort_field("projects", "alpha") == "project_name"
        assert resolve_sort_field("articles", "alpha") == "title"
        assert resolve_sort_field("posts", "alpha") == "title"

    def test_follows_maps_to_followers_for_users(self):
        """follows 키는 사용자에게 followers_count"""
        assert resolve_sort_field("users", "follows") == "followers_count"
        assert resolve_sort_field("projects", "follows") == "follows_count"

    def test_unknown_key_falls_back_to_created_at(self):
        """허용되지 않은 키는 created_at"""
        assert resolve_sort_field("users", "password; DROP TABLE users") == "created_at"
        assert resolve_sort_field("posts", None) == "created_at"
        assert resolve_sort_field("projects", "created_at") == "created_at"

    def test_sort_order(self):
        """정확히 asc일 때만 오름차순"""
        assert resolve_sort_order("asc") == "asc"
        assert resolve_sort_order("ASC") == "desc"
        assert resolve_sort_order(None) == "desc"

    def test_parse_csv(self):
        """쉼표 구분 파라미터 분리"""
        assert parse_csv("users, projects,,") == ["users", "projects"]
        assert parse_csv("") == []
        assert parse_csv(None) == []


class TestSearchUsers:
    async def test_query_matches_username_or_bio(
        self, client: AsyncClient, creator_user, brand_user, freelancer_user,
    ):
        """username 또는 bio 부분 일치 (대소문자 무시)"""
        res = await client.get(URL, params={"q": "FILM", "contentTypes": "users"})
        assert res.status_code == 200
        names = {u["username"] for u in res.json()["results"]["users"]}
        assert names == {"alice", "acme"}

    async def test_user_type_filter(
        self, client: AsyncClient, creator_user, brand_user, freelancer_user,
    ):
        """사용자 유형 필터 적용"""
        res = await client.get(
            URL, params={"contentTypes": "users", "userTypes": "brand,freelancer"}
        )
        body = res.json()
        assert {u["username"] for u in body["results"]["users"]} == {"acme", "bob"}
        assert body["totals"]["users"] == 2

    @pytest.mark.parametrize("user_types", ["", "all", "creator,all"])
    async def test_all_or_empty_disables_filter(
        self, client: AsyncClient, creator_user, brand_user, freelancer_user, user_types,
    ):
        """빈 필터 또는 all 포함 시 필터 미적용"""
        res = await client.get(URL, params={"contentTypes": "users", "userTypes": user_types})
        assert res.json()["totals"]["users"] == 3

    async def test_sort_by_likes_ascending(
        self, client: AsyncClient, creator_user, brand_user,
    ):
        """likes 정렬 키 + asc"""
        res = await client.get(
            URL, params={"contentTypes": "users", "sortBy": "likes", "sortOrder": "asc"}
        )
        assert [u["username"] for u in res.json()["results"]["users"]] == ["acme", "alice"]

    async def test_default_sort_is_newest_first(
        self, client: AsyncClient, creator_user, brand_user, freelancer_user,
    ):
        """기본 정렬은 created_at 내림차순"""
        res = await client.get(URL, params={"contentTypes": "users"})
        assert [u["username"] for u in res.json()["results"]["users"]] == ["bob", "acme", "alice"]

    async def test_unknown_sort_key_is_ignored(
        self, client: AsyncClient, creator_user, brand_user,
    ):
        """허용되지 않은 정렬 키는 created_at으로 대체"""
        res = await client.get(URL, params={"contentTypes": "users", "sortBy": "email"})
        assert res.status_code == 200
        assert [u["username"] for u in res.json()["results"]["users"]] == ["acme", "alice"]

    async def test_null_fields_are_normalised(
        self, client: AsyncClient, freelancer_user,
    ):
        """NULL 필드는 기본값으로 정규화"""
        res = await client.get(URL, params={"contentTypes": "users"})
        user = res.json()["results"]["users"][0]
        assert user["likes_count"] == 0
        assert user["followers_count"] == 0
        assert user["skills"] == []
        assert user["profile_image_display"] == "url"
        assert user["email"] is None

    async def test_like_wildcards_are_literal(
        self, client: AsyncClient, creator_user, brand_user,
    ):
        """% 와 _ 는 와일드카드가 아닌 문자로 취급"""
        res = await client.get(URL, params={"q": "%", "contentTypes": "users"})
        assert res.json()["totals"]["users"] == 0


class TestSearchOwnedContent:
    async def test_projects_filtered_by_owner_type(
        self, client: AsyncClient, creator_project, brand_project,
    ):
        """프로젝트는 소유자 유형으로 필터"""
        res = await client.get(
            URL, params={"q": "film", "contentTypes": "projects", "userTypes": "brand"}
        )
        projects = res.json()["results"]["projects"]
        assert [p["project_name"] for p in projects] == ["Trail Gear Launch"]
        assert projects[0]["username"] == "acme"
        assert projects[0]["user_type"] == "brand"

    async def test_project_defaults(self, client: AsyncClient, brand_project):
        """프로젝트 NULL 기본값 정규화 및 그룹 재중첩"""
        res = await client.get(URL, params={"contentTypes": "projects"})
        project = res.json()["results"]["projects"][0]
        assert project["currency"] == "USD"
        assert project["project_visibility"] == "public"
        assert project["search_visibility"] is True
        assert project["notification_preferences"] == {"email": True, "push": True, "digest": True}
        assert project["seeking"]["creator"] is False
        assert project["likes_count"] == 0
        assert project["skills_required"] == []

    async def test_articles_match_title_only(
        self, client: AsyncClient, creator_article, brand_article,
    ):
        """아티클은 제목만 검색"""
        res = await client.get(URL, params={"q": "film", "contentTypes": "articles"})
        titles = [a["title"] for a in res.json()["results"]["articles"]]
        assert titles == ["Our film sponsorships", "Filming at altitude"]

        res = await client.get(URL, params={"q": "Intro", "contentTypes": "articles"})
        assert res.json()["results"]["articles"] == []

    async def test_article_excerpt_and_sections(
        self, client: AsyncClient, creator_article, brand_article,
    ):
        """요약은 첫 섹션 텍스트 150자 + ..., 섹션 없으면 No content available"""
        res = await client.get(
            URL, params={"contentTypes": "articles", "sortBy": "alpha", "sortOrder": "asc"}
        )
        with_sections, without_sections = res.json()["results"]["articles"]
        assert with_sections["title"] == "Filming at altitude"
        assert with_sections["excerpt"] == "x" * 150 + "..."
        assert [s["order"] for s in with_sections["sections"]] == [0, 1]
        assert without_sections["excerpt"] == "No content available"
        assert without_sections["sections"] == []

    async def test_posts_match_description_and_resolve_image(
        self, client: AsyncClient, creator_post, brand_post,
    ):
        """포스트는 제목/본문 검색, 이미지 표시 방식 해석"""
        res = await client.get(URL, params={"q": "trailer", "contentTypes": "posts"})
        posts = res.json()["results"]["posts"]
        assert len(posts) == 1
        assert posts[0]["post_image"] == "/uploads/posts/bts.jpg"

        res = await client.get(URL, params={"q": "catalogue", "contentTypes": "posts"})
        post = res.json()["results"]["posts"][0]
        assert post["post_image"] == "https://example.com/catalogue.jpg"
        assert post["post_image_display"] == "url"
        assert post["tags"] == []
        assert post["comments_count"] == 0


class TestAggregator:
    async def test_unrequested_types_are_empty(
        self, client: AsyncClient, creator_user, creator_project, creator_post,
    ):
        """요청하지 않은 유형은 빈 목록과 0"""
        res = await client.get(URL, params={"contentTypes": "projects"})
        body = res.json()
        assert len(body["results"]["projects"]) == 1
        assert body["results"]["users"] == []
        assert body["results"]["posts"] == []
        assert body["totals"] == {"users": 0, "projects": 1, "articles": 0, "posts": 0}

    async def test_no_content_types(self, client: AsyncClient, creator_user):
        """유형 미지정 시 모두 빈 결과, total_pages 1"""
        res = await client.get(URL)
        body = res.json()
        assert all(items == [] for items in body["results"].values())
        assert body["page"] == 1
        assert body["total_pages"] == 1

    async def test_unknown_content_types_ignored(self, client: AsyncClient, creator_user):
        """알 수 없는 유형은 무시"""
        res = await client.get(URL, params={"contentTypes": "users,widgets"})
        assert res.status_code == 200
        assert res.json()["totals"]["users"] == 1

    async def test_pagination_and_total_pages(
        self, client: AsyncClient, creator_user, brand_user, freelancer_user,
        creator_project, brand_project,
    ):
        """total_pages는 요청 유형 중 가장 큰 페이지 수"""
        res = await client.get(
            URL,
            params={"contentTypes": "users,projects", "limit": 2, "page": 2},
        )
        body = res.json()
        assert body["page"] == 2
        assert body["total_pages"] == 2
        assert [u["username"] for u in body["results"]["users"]] == ["alice"]
        assert body["results"]["projects"] == []
        assert body["totals"]["users"] == 3
        assert body["totals"]["projects"] == 2

    async def test_invalid_paging_rejected(self, client: AsyncClient):
        """page < 1 또는 limit 초과 시 422"""
        assert (await client.get(URL, params={"page": 0})).status_code == 422
        assert (await client.get(URL, params={"limit": 1000})).status_code == 422

    async def test_builder_error_yields_empty_result(
        self, session_factory, creator_user, brand_user, monkeypatch,
    ):
        """DB 오류 시 해당 유형만 빈 결과"""
        async def failing_search(*args, **kwargs):
            raise OperationalError("SELECT", {}, Exception("connection lost"))

        monkeypatch.setattr(user_repository, "search", failing_search)
        body = await explore_service.search_all(
            session_factory, "", ["users"], [], 1, 12, None, None,
        )
        assert body["results"]["users"] == []
        assert body["totals"]["users"] == 0

    async def test_search_users_direct(self, db: AsyncSession, creator_user, brand_user):
        """빌더 직접 호출 — (목록, 전체 수) 반환"""
        items, total = await explore_service.search_users(
            db, "acme", [], 1, 12, "created_at", "desc",
        )
        assert total == 1
        assert items[0]["username"] == "acme"
