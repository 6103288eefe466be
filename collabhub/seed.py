"""데모 데이터 시드 스크립트 — 사용자와 샘플 콘텐츠 생성.

Seed script — Creates demo users and sample content so the explore page,
stats and featured feed have something to show in development.

Usage:
    python -m collabhub.seed

Creates:
    - 4명의 사용자: creator / brand / freelancer / contractor (4 users)
    - 사용자별 프로젝트 1개, 아티클 1개(섹션 2개), 포스트 1개
      (One project, one two-section article and one post per user)

Prints an access token per user for trying authenticated endpoints.
"""

import asyncio
import logging

from sqlalchemy import select

from collabhub.database import Base, async_session, engine
from collabhub.models import Article, ArticleSection, Post, Project, User
from collabhub.utils.jwt import create_access_token
from collabhub.utils.logging import configure_logging

logger = logging.getLogger(__name__)

# (사용자명, 유형, 직함, 소개) — (username, user_type, career_title, bio)
DEMO_USERS: list[tuple[str, str, str, str]] = [
    ("maya", "creator", "Video Creator", "Travel and food videos, 200k subscribers."),
    ("northwind", "brand", "Outdoor Apparel", "Sustainable gear for trail runners."),
    ("devon", "freelancer", "Motion Designer", "Animated explainers and brand intros."),
    ("buildright", "contractor", "Studio Builder", "Sound-treated home studios, turnkey."),
]


async def seed() -> None:
    """데이터베이스를 데모 데이터로 시드합니다.

    Seed the database with demo data. Creates tables if they don't exist.

    Idempotent: 사용자가 이미 있으면 건너뜁니다 (Skips if any user exists).
    """
    # 테이블 생성 — DDL 실행 (Create all tables from ORM metadata)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        result = await db.execute(select(User).limit(1))
        if result.scalar_one_or_none():
            logger.info("Already seeded. Skipping.")
            return

        users: list[User] = []
        for username, user_type, title, bio in DEMO_USERS:
            user: User = User(
                username=username,
                email=f"{username}@example.com",
                user_type=user_type,
                career_title=title,
                bio=bio,
                skills=[user_type, "collaboration"],
            )
            db.add(user)
            users.append(user)
        await db.flush()  # flush로 user.id 생성 (Flush to generate user ids)

        for user in users:
            db.add(
                Project(
                    user_id=user.id,
                    project_name=f"{user.career_title} Showcase",
                    project_description=f"A collaboration project by {user.username}.",
                    project_tags=[user.user_type],
                    seeking_creator=user.user_type != "creator",
                    seeking_brand=user.user_type != "brand",
                )
            )
            article: Article = Article(
                user_id=user.id,
                title=f"How {user.username} works",
                tags=["process"],
            )
            article.sections = [
                ArticleSection(order=0, title="Background", text=user.bio),
                ArticleSection(order=1, type="media", media_url="https://example.com/cover.jpg"),
            ]
            db.add(article)
            db.add(
                Post(
                    user_id=user.id,
                    title=f"{user.username} is open for collaborations",
                    description="Reach out through the platform.",
                    tags=["announcement"],
                )
            )

        await db.commit()
        logger.info("Seeded %d users with sample content", len(users))
        for user in users:
            token: str = create_access_token({"sub": str(user.id), "username": user.username})
            logger.info("Token for %s: %s", user.username, token)


if __name__ == "__main__":
    configure_logging()
    asyncio.run(seed())
