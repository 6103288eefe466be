"""테스트 인프라 — 임시 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — Temporary SQLite database, session, and httpx client
fixtures. Each test gets a fresh database file under tmp_path so the
explore/stats/featured handlers, which open their own sessions from the
session factory, see exactly the rows the test committed.
"""

from collections.abc import AsyncGenerator
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from collabhub.database import Base, get_db, get_session_factory
from collabhub.main import app
from collabhub.models import Article, ArticleSection, Post, Project, User
from collabhub.utils.jwt import create_access_token

# 고정 기준 시각 — 생성 순서를 결정적으로 (Fixed base time for deterministic ordering)
BASE_TIME = datetime(2026, 1, 1, tzinfo=timezone.utc)


def at(minutes: int) -> datetime:
    """기준 시각 + n분."""
    return BASE_TIME + timedelta(minutes=minutes)


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진 — 임시 파일 DB에 스키마 생성."""
    eng = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", echo=False)
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_factory: async_sessionmaker[AsyncSession]) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def client(
    db: AsyncSession,
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션과 세션 팩토리를 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db
    app.dependency_overrides[get_session_factory] = lambda: session_factory

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성 (모두 커밋)
# ---------------------------------------------------------------------------
async def _add(db: AsyncSession, obj):
    db.add(obj)
    await db.commit()
    await db.refresh(obj)
    return obj


@pytest_asyncio.fixture
async def creator_user(db: AsyncSession) -> User:
    """크리에이터 사용자를 생성합니다."""
    return await _add(db, User(
        username="alice",
        email="alice@example.com",
        user_type="creator",
        bio="Documentary film maker",
        career_title="Director",
        skills=["editing", "storytelling"],
        likes_count=5,
        followers_count=2,
        created_at=at(1),
        updated_at=at(1),
    ))


@pytest_asyncio.fixture
async def brand_user(db: AsyncSession) -> User:
    """브랜드 사용자를 생성합니다."""
    return await _add(db, User(
        username="acme",
        user_type="brand",
        bio="Outdoor gear for film crews",
        likes_count=1,
        followers_count=9,
        created_at=at(2),
        updated_at=at(2),
    ))


@pytest_asyncio.fixture
async def freelancer_user(db: AsyncSession) -> User:
    """프리랜서 사용자를 생성합니다 — 대부분의 선택 필드가 NULL."""
    return await _add(db, User(
        username="bob",
        user_type="freelancer",
        profile_image_display=None,
        likes_count=None,
        followers_count=None,
        watches_count=None,
        created_at=at(3),
        updated_at=at(3),
    ))


@pytest_asyncio.fixture
async def creator_project(db: AsyncSession, creator_user: User) -> Project:
    return await _add(db, Project(
        user_id=creator_user.id,
        project_name="Mountain Documentary",
        project_description="A film about alpine villages",
        project_tags=["film"],
        seeking_brand=True,
        likes_count=3,
        created_at=at(10),
        updated_at=at(10),
    ))


@pytest_asyncio.fixture
async def brand_project(db: AsyncSession, brand_user: User) -> Project:
    """NULL 기본값 정규화 확인용 프로젝트."""
    return await _add(db, Project(
        user_id=brand_user.id,
        project_name="Trail Gear Launch",
        project_description="Looking for film creators",
        currency=None,
        project_visibility=None,
        search_visibility=None,
        notification_preferences_email=None,
        seeking_creator=None,
        likes_count=None,
        created_at=at(11),
        updated_at=at(11),
    ))


@pytest_asyncio.fixture
async def creator_article(db: AsyncSession, creator_user: User) -> Article:
    article = Article(
        user_id=creator_user.id,
        title="Filming at altitude",
        tags=["howto"],
        created_at=at(20),
        updated_at=at(20),
    )
    article.sections = [
        ArticleSection(order=1, type="media", media_url="https://example.com/a.jpg"),
        ArticleSection(order=0, title="Intro", text="x" * 200),
    ]
    return await _add(db, article)


@pytest_asyncio.fixture
async def brand_article(db: AsyncSession, brand_user: User) -> Article:
    """섹션이 없는 아티클."""
    return await _add(db, Article(
        user_id=brand_user.id,
        title="Our film sponsorships",
        created_at=at(21),
        updated_at=at(21),
    ))


@pytest_asyncio.fixture
async def creator_post(db: AsyncSession, creator_user: User) -> Post:
    return await _add(db, Post(
        user_id=creator_user.id,
        title="Behind the scenes",
        description="New film trailer is out",
        post_image_upload="posts/bts.jpg",
        post_image_display="upload",
        created_at=at(30),
        updated_at=at(30),
    ))


@pytest_asyncio.fixture
async def brand_post(db: AsyncSession, brand_user: User) -> Post:
    return await _add(db, Post(
        user_id=brand_user.id,
        title="Spring catalogue",
        description=None,
        post_image_url="https://example.com/catalogue.jpg",
        post_image_display=None,
        tags=None,
        created_at=at(31),
        updated_at=at(31),
    ))


def make_token(user: User) -> str:
    """테스트용 JWT 액세스 토큰을 생성합니다."""
    return create_access_token({"sub": str(user.id), "username": user.username})


@pytest.fixture
def creator_token(creator_user: User) -> str:
    return make_token(creator_user)


@pytest.fixture
def brand_token(brand_user: User) -> str:
    return make_token(brand_user)


def auth_header(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
