"""공통 Pydantic 응답 스키마 정의.

Common Pydantic response schema definitions shared across API domains:
pagination wrapper, generic message, and the owner fields attached to
projects, articles and posts.
"""

from typing import Any
from pydantic import BaseModel


class PaginatedResponse(BaseModel):
    """페이지네이션 응답 스키마.

    Paginated response wrapper schema.
    Wraps a list of items with pagination metadata.

    Attributes:
        items: 항목 목록 (List of result items)
        total: 전체 항목 수 (Total count across all pages)
        page: 현재 페이지 번호 (Current page number, 1-based)
        per_page: 페이지당 항목 수 (Items per page)
    """

    items: list[Any]  # 결과 항목 목록 (List of items for the current page)
    total: int  # 전체 항목 수 (Total item count)
    page: int  # 현재 페이지 — 1부터 시작 (Current page, 1-indexed)
    per_page: int  # 페이지당 항목 수 (Items per page)


class MessageResponse(BaseModel):
    """범용 메시지 응답 스키마.

    Generic message response schema for simple confirmations
    (deletes, unlikes, unfollows).

    Attributes:
        message: 응답 메시지 (Response message string)
    """

    message: str  # 응답 메시지 (Human-readable confirmation message)


class OwnerFields(BaseModel):
    """소유자 정보 필드 — 소유 엔티티 응답에 포함.

    Owner fields carried by every owned entity (project, article, post)
    so cards can render the author without a second request.
    """

    username: str | None = None  # 소유자 사용자명 (Owner username)
    user_type: str | None = None  # 소유자 유형 (Owner user type)
    user_profile_image_url: str | None = None
    user_profile_image_upload: str | None = None
    user_profile_image_display: str = "url"
