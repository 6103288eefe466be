"""사용자 레포지토리 — 사용자(프로필) 관련 DB 쿼리 담당.

User Repository — Handles all user/profile-related database queries,
including the users explore search builder.
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from collabhub.models.user import User
from collabhub.repositories.base import BaseRepository, is_type_filter_active


class UserRepository(BaseRepository[User]):
    """사용자 레포지토리.

    User repository with search, username lookup and listing queries.

    Extends:
        BaseRepository[User]
    """

    def __init__(self) -> None:
        """레포지토리를 초기화합니다.

        Initialize the user repository with User model.
        """
        super().__init__(User)

    async def get_by_username(
        self,
        db: AsyncSession,
        username: str,
    ) -> User | None:
        """사용자명으로 사용자를 조회합니다.

        Retrieve a user by exact username.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            username: 사용자명 (Username)

        Returns:
            User | None: 조회된 사용자 또는 None (Found user or None)
        """
        result = await db.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()

    async def get_active(
        self,
        db: AsyncSession,
        user_id: UUID,
    ) -> User | None:
        """활성 사용자만 조회합니다 — 토큰 검증용.

        Retrieve a user only if the account is active.
        """
        result = await db.execute(
            select(User).where(User.id == user_id, User.is_active.is_(True))
        )
        return result.scalar_one_or_none()

    async def list_paginated(
        self,
        db: AsyncSession,
        page: int = 1,
        per_page: int = 20,
    ) -> tuple[Sequence[User], int]:
        """사용자 목록을 최신순으로 조회합니다.

        Retrieve a newest-first page of users.
        """
        query: Select = select(User).order_by(User.created_at.desc(), User.id)
        return await self.get_paginated(db, query, page, per_page)

    async def search(
        self,
        db: AsyncSession,
        query_text: str,
        user_types: Sequence[str],
        page: int,
        per_page: int,
        sort_field: str,
        sort_order: str,
    ) -> tuple[Sequence[User], int]:
        """사용자를 검색합니다 — username 또는 bio 부분 일치.

        Search users by case-insensitive substring on username or bio,
        optionally restricted to the given user types.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            query_text: 검색어, 빈 문자열이면 전체 (Query; empty matches all)
            user_types: 사용자 유형 필터 (User-type filter; empty or "all" disables it)
            page: 페이지 번호, 1부터 시작 (Page number, 1-based)
            per_page: 페이지당 항목 수 (Items per page)
            sort_field: 허용 목록에서 해석된 컬럼명 (Allow-listed column name)
            sort_order: "asc" 또는 "desc" (Sort direction)

        Returns:
            tuple[Sequence[User], int]: (사용자 목록, 전체 개수)
        """
        query: Select = select(User)
        if query_text:
            query = query.where(self.text_match(query_text, User.username, User.bio))
        if is_type_filter_active(user_types):
            query = query.where(User.user_type.in_(list(user_types)))
        query = self.apply_sort(query, sort_field, sort_order)
        return await self.get_paginated(db, query, page, per_page)


# 싱글턴 인스턴스 — Singleton instance
user_repository: UserRepository = UserRepository()
