"""v1 API 라우터 패키지 — 모든 엔드포인트 통합.

v1 API Router package — Aggregates every endpoint into a single router
for inclusion in the FastAPI application under /api/v1.

Included routers:
    - explore: 통합 검색 (Combined search)
    - users: 프로필 (Profiles)
    - projects / articles / posts: 콘텐츠 CRUD (Content CRUD)
    - likes / follows / watches: 상호작용 (Interactions)
    - comments: 댓글 (Comments)
    - stats: 통계 및 추천 콘텐츠 (Stats and featured feed)
"""

from fastapi import APIRouter

from collabhub.api.v1.articles import router as articles_router
from collabhub.api.v1.comments import router as comments_router
from collabhub.api.v1.explore import router as explore_router
from collabhub.api.v1.interactions import follows_router, likes_router, watches_router
from collabhub.api.v1.posts import router as posts_router
from collabhub.api.v1.projects import router as projects_router
from collabhub.api.v1.stats import router as stats_router
from collabhub.api.v1.users import router as users_router

api_router: APIRouter = APIRouter()

# 검색 — Explore
api_router.include_router(explore_router, prefix="/explore", tags=["Explore"])

# 프로필 및 콘텐츠 — Profiles and content
api_router.include_router(users_router, prefix="/users", tags=["Users"])
api_router.include_router(projects_router, prefix="/projects", tags=["Projects"])
api_router.include_router(articles_router, prefix="/articles", tags=["Articles"])
api_router.include_router(posts_router, prefix="/posts", tags=["Posts"])

# 상호작용 — Interactions
api_router.include_router(likes_router, prefix="/likes", tags=["Likes"])
api_router.include_router(follows_router, prefix="/follows", tags=["Follows"])
api_router.include_router(watches_router, prefix="/watches", tags=["Watches"])
api_router.include_router(comments_router, prefix="/comments", tags=["Comments"])

# 랜딩 페이지 — /stats, /featured
api_router.include_router(stats_router, tags=["Stats"])
