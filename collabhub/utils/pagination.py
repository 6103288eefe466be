"""페이지네이션 유틸리티 모듈.

Pagination utility module for SQLAlchemy async queries.
Provides a generic paginate function used by repositories and the explore
query builders, plus a page-count helper for response metadata.
"""

import math
from typing import Any, Sequence

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession


def page_offset(page: int, per_page: int) -> int:
    """페이지 번호를 OFFSET 값으로 변환합니다 (1부터 시작).

    Convert a 1-based page number into a row offset.
    """
    return (max(page, 1) - 1) * per_page


def page_count(total: int, per_page: int) -> int:
    """전체 페이지 수를 계산합니다 — 최소 1.

    Compute the number of pages for a total item count (at least 1).
    """
    if per_page <= 0:
        return 1
    return max(1, math.ceil(total / per_page))


async def paginate(
    db: AsyncSession,
    query: Select[Any],
    page: int = 1,
    per_page: int = 20,
) -> tuple[Sequence[Any], int]:
    """SQLAlchemy 쿼리에 대한 페이지네이션을 수행합니다.

    Execute a paginated SQLAlchemy query, returning items and total count.
    Runs two queries: one for the total count (via subquery) and one for
    the actual page of results with OFFSET/LIMIT.

    Args:
        db: 비동기 DB 세션 (Async database session)
        query: SQLAlchemy Select 쿼리 (Base query to paginate)
        page: 요청 페이지 번호, 1부터 시작 (Page number, 1-indexed, default: 1)
        per_page: 페이지당 항목 수 (Items per page, default: 20)

    Returns:
        tuple[Sequence[Any], int]: (항목 목록, 전체 개수) 튜플
            (Tuple of paginated items and total count)
    """
    # 전체 개수 조회 — 정렬 제거 후 서브쿼리로 감싸서 COUNT 실행
    # (Count total via subquery; ORDER BY is irrelevant for counting)
    count_query = select(func.count()).select_from(query.order_by(None).subquery())
    total: int = (await db.execute(count_query)).scalar() or 0

    # 페이지 항목 조회 — OFFSET/LIMIT 적용 (Fetch page items with offset/limit)
    result = await db.execute(query.offset(page_offset(page, per_page)).limit(per_page))
    items: Sequence[Any] = result.scalars().all()

    return items, total
