"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package ensures all models are registered with the
SQLAlchemy metadata, which is required for Alembic migrations and
relationship resolution.

Modules:
    user: 사용자 및 공개 프로필 (Users and public profiles)
    project: 협업 프로젝트 (Collaboration projects)
    article: 아티클 및 섹션 (Articles and their sections)
    post: 포스트 (Short-form posts)
    comment: 댓글 (Comments on any entity)
    interaction: 좋아요/팔로우/워치 (Likes, follows, watches)
"""

from collabhub.models.user import User
from collabhub.models.project import Project
from collabhub.models.article import Article, ArticleSection
from collabhub.models.post import Post
from collabhub.models.comment import Comment
from collabhub.models.interaction import Like, Follow, Watch

__all__ = [
    "User",
    "Project",
    "Article", "ArticleSection",
    "Post",
    "Comment",
    "Like", "Follow", "Watch",
]
