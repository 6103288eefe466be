"""기본 CRUD 레포지토리 — 모든 레포지토리의 부모 클래스.

Base CRUD Repository — Parent class for all domain repositories.
Provides generic Create, Read, Update, Delete operations plus the shared
text-search helpers used by the explore query builders.

Usage:
    class PostRepository(BaseRepository[Post]):
        def __init__(self) -> None:
            super().__init__(Post)
"""

from typing import Any, Generic, Sequence, TypeVar
from uuid import UUID

from sqlalchemy import ColumnElement, Select, case, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from collabhub.database import Base
from collabhub.utils.pagination import paginate

# 제네릭 타입 변수 — SQLAlchemy 모델을 나타냄
# Generic type variable representing a SQLAlchemy model
ModelType = TypeVar("ModelType", bound=Base)

# 기본 정렬 컬럼 — 허용 목록에 없는 정렬 키의 대체값
# Fallback sort column for anything outside the allow-list
DEFAULT_SORT_FIELD: str = "created_at"


def is_type_filter_active(user_types: Sequence[str] | None) -> bool:
    """사용자 유형 필터 적용 여부 — 비어 있거나 "all"이 포함되면 미적용.

    Whether a user-type filter should be applied. An empty list or one
    containing "all" means no filtering.
    """
    return bool(user_types) and "all" not in user_types


class BaseRepository(Generic[ModelType]):
    """제네릭 CRUD 레포지토리.

    Generic CRUD repository providing common database operations.

    Attributes:
        model: SQLAlchemy 모델 클래스 (The SQLAlchemy model class)
    """

    def __init__(self, model: type[ModelType]) -> None:
        """레포지토리를 초기화합니다.

        Initialize the repository with a model class.

        Args:
            model: 이 레포지토리가 관리할 SQLAlchemy 모델 클래스
                   (SQLAlchemy model class this repository manages)
        """
        self.model: type[ModelType] = model

    def loader_options(self) -> list[Any]:
        """기본 eager-load 옵션 — 하위 클래스에서 재정의합니다.

        Relationship loader options applied to detail, list and search
        queries. Async sessions cannot lazy-load, so anything the service
        layer reads from a relationship must be listed here.
        """
        return []

    def base_query(self) -> Select:
        """eager-load 옵션이 적용된 기본 SELECT."""
        return select(self.model).options(*self.loader_options())

    # --- 검색 헬퍼 (Search helpers) ---

    def text_match(self, query: str, *columns: Any) -> ColumnElement[bool]:
        """대소문자 무시 부분 문자열 매칭 조건을 만듭니다 (OR 결합).

        Build a case-insensitive substring match across the given columns,
        OR-combined. LIKE wildcards in the query are matched literally.

        Args:
            query: 검색어 (Free-text query)
            *columns: 검색 대상 컬럼 (Columns to match against)

        Returns:
            ColumnElement[bool]: WHERE 조건 (Filter expression)
        """
        escaped: str = query.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
        pattern: str = f"%{escaped}%"
        return or_(*(column.ilike(pattern, escape="\\") for column in columns))

    def sort_column(self, sort_field: str) -> Any:
        """정렬 필드명을 모델 컬럼으로 변환합니다 — 알 수 없으면 created_at.

        Resolve a sort field name to a mapped column of this model, falling
        back to created_at for anything that is not a column.
        """
        columns = self.model.__table__.columns
        if sort_field not in columns:
            sort_field = DEFAULT_SORT_FIELD
        return getattr(self.model, sort_field)

    def apply_sort(self, query: Select, sort_field: str, sort_order: str) -> Select:
        """정렬을 적용합니다 — 동률일 때 id로 안정 정렬.

        Apply ORDER BY with an id tiebreaker so pages are stable.
        """
        column = self.sort_column(sort_field)
        ordered = column.asc() if sort_order == "asc" else column.desc()
        return query.order_by(ordered, self.model.id)

    # --- CRUD ---

    async def get_by_id(
        self,
        db: AsyncSession,
        record_id: UUID,
    ) -> ModelType | None:
        """ID로 단일 레코드를 조회합니다.

        Retrieve a single record by its UUID.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 조회할 레코드의 UUID (UUID of the record to retrieve)

        Returns:
            ModelType | None: 조회된 레코드 또는 None (Found record or None)
        """
        # populate_existing — 세션에 이미 있는 객체의 관계도 다시 로드
        # Reload relationships even for objects already in the identity map
        query: Select = (
            self.base_query()
            .where(self.model.id == record_id)
            .execution_options(populate_existing=True)
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def get_latest(
        self,
        db: AsyncSession,
        limit: int,
        featured_only: bool = False,
    ) -> Sequence[ModelType]:
        """최신 레코드를 limit개 조회합니다.

        Retrieve the newest records, optionally restricted to featured ones.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            limit: 최대 행 수 (Maximum number of rows)
            featured_only: 추천 항목만 조회 여부 (Only rows flagged featured)

        Returns:
            Sequence[ModelType]: 최신순 레코드 목록 (Newest-first records)
        """
        query: Select = self.base_query()
        if featured_only:
            query = query.where(self.model.featured.is_(True))
        query = query.order_by(self.model.created_at.desc(), self.model.id).limit(limit)
        result = await db.execute(query)
        return result.scalars().all()

    async def get_all(
        self,
        db: AsyncSession,
        filters: dict[str, Any] | None = None,
        order_by: Any | None = None,
        limit: int | None = None,
    ) -> Sequence[ModelType]:
        """조건에 맞는 모든 레코드를 조회합니다.

        Retrieve all records matching the given filters.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            filters: 추가 필터 딕셔너리 {'컬럼명': 값}
                     (Additional filter dict {'column_name': value})
            order_by: 정렬 기준 컬럼 (Column to order by)
            limit: 최대 행 수 (Maximum number of rows)

        Returns:
            Sequence[ModelType]: 조회된 레코드 목록 (List of matching records)
        """
        query: Select = self.base_query()

        # 동적 필터 적용 — Dynamic filter application
        if filters:
            for column_name, value in filters.items():
                if hasattr(self.model, column_name) and value is not None:
                    query = query.where(getattr(self.model, column_name) == value)

        if order_by is not None:
            query = query.order_by(order_by)
        if limit is not None:
            query = query.limit(limit)

        result = await db.execute(query)
        return result.scalars().all()

    async def get_paginated(
        self,
        db: AsyncSession,
        query: Select,
        page: int = 1,
        per_page: int = 20,
    ) -> tuple[Sequence[ModelType], int]:
        """페이지네이션이 적용된 레코드 목록을 조회합니다.

        Retrieve a paginated list of records.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            query: 기본 SELECT 쿼리 (Base SELECT query)
            page: 현재 페이지 번호, 1부터 시작 (Current page number, 1-based)
            per_page: 페이지당 레코드 수 (Number of records per page)

        Returns:
            tuple[Sequence[ModelType], int]: (레코드 목록, 전체 개수)
                                             (List of records, total count)
        """
        return await paginate(db, query, page, per_page)

    async def count(self, db: AsyncSession) -> int:
        """전체 레코드 수를 반환합니다.

        Return the total number of rows in the table.
        """
        result = await db.execute(select(func.count()).select_from(self.model))
        return result.scalar() or 0

    async def create(
        self,
        db: AsyncSession,
        obj_data: dict[str, Any],
    ) -> ModelType:
        """새 레코드를 생성합니다.

        Create a new record in the database.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            obj_data: 생성할 레코드의 데이터 딕셔너리
                      (Dictionary of data for the new record)

        Returns:
            ModelType: 생성된 레코드 (The created record)
        """
        db_obj: ModelType = self.model(**obj_data)
        db.add(db_obj)
        await db.flush()
        await db.refresh(db_obj)
        return db_obj

    async def update(
        self,
        db: AsyncSession,
        record_id: UUID,
        update_data: dict[str, Any],
    ) -> ModelType | None:
        """기존 레코드를 업데이트합니다.

        Update an existing record by its UUID.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 업데이트할 레코드의 UUID (UUID of the record to update)
            update_data: 업데이트할 필드와 값의 딕셔너리
                         (Dictionary of fields and values to update)

        Returns:
            ModelType | None: 업데이트된 레코드 또는 None (Updated record or None)
        """
        # 먼저 레코드 존재 여부 확인 — First verify record exists
        db_obj: ModelType | None = await self.get_by_id(db, record_id)
        if db_obj is None:
            return None

        # Pydantic exclude_unset으로 전달된 필드만 업데이트 (None 값도 허용)
        # Update all fields passed via exclude_unset (allows setting to None)
        for field, value in update_data.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)

        await db.flush()
        await db.refresh(db_obj)
        return db_obj

    async def delete(
        self,
        db: AsyncSession,
        record_id: UUID,
    ) -> bool:
        """레코드를 삭제합니다.

        Delete a record by its UUID.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 삭제할 레코드의 UUID (UUID of the record to delete)

        Returns:
            bool: 삭제 성공 여부 (Whether the deletion was successful)
        """
        db_obj: ModelType | None = await self.get_by_id(db, record_id)
        if db_obj is None:
            return False

        await db.delete(db_obj)
        await db.flush()
        return True


    async def adjust_counter(
        self,
        db: AsyncSession,
        target_model: type[Any],
        counter_field: str,
        entity_id: UUID,
        delta: int,
    ) -> None:
        """대상 행의 카운터를 원자적으로 증감합니다 — 0 미만 불가.

        Atomically add delta to a counter column on the target row. NULL
        counters count as 0 and the result never drops below 0.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            target_model: 대상 모델 클래스 (Target model, e.g. Project)
            counter_field: 카운터 컬럼명 (Counter column, e.g. "likes_count")
            entity_id: 대상 UUID (Target identifier)
            delta: 증감값 (+1 or -1)
        """
        column = getattr(target_model, counter_field)
        current = func.coalesce(column, 0)
        new_value = case((current + delta > 0, current + delta), else_=0)
        await db.execute(
            update(target_model)
            .where(target_model.id == entity_id)
            .values({counter_field: new_value})
            .execution_options(synchronize_session=False)
        )
