"""FastAPI 의존성 주입 모듈 — 인증.

FastAPI dependency injection module — Authentication.
Bearer tokens are issued by the platform's auth service; this module only
verifies them and loads the user they name.

Authentication Flow:
    1. 클라이언트가 Authorization: Bearer <token> 헤더를 전송
       (Client sends Authorization: Bearer <token> header)
    2. HTTPBearer가 토큰을 추출 (HTTPBearer extracts the token)
    3. decode_token()이 JWT를 검증하고 페이로드를 반환
       (decode_token verifies JWT and returns payload)
    4. 페이로드의 "sub" 필드로 활성 사용자를 조회
       (Active user is fetched using the payload "sub" field)
"""

from typing import Annotated
from uuid import UUID

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from collabhub.database import get_db
from collabhub.models.user import User
from collabhub.repositories.user_repository import user_repository
from collabhub.utils.exceptions import UnauthorizedError
from collabhub.utils.jwt import decode_token

# HTTP Bearer 토큰 추출기 — 헤더가 없으면 직접 401 반환
# (Extracts the bearer token; a missing header is turned into 401 below)
security: HTTPBearer = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> User:
    """JWT 토큰에서 현재 인증된 사용자를 추출합니다.

    Decode the bearer token and return the authenticated, active user.

    Args:
        credentials: HTTP Bearer 토큰 자격 증명 (Bearer token credentials, optional)
        db: 비동기 DB 세션 (Async database session)

    Returns:
        User: 인증된 사용자 ORM 인스턴스 (Authenticated user ORM instance)

    Raises:
        UnauthorizedError: 토큰 누락/무효/만료, 잘못된 토큰 유형
                           (Missing, invalid or expired token, or wrong token type)
        UnauthorizedError: 사용자가 없거나 비활성 (User not found or inactive)
    """
    if credentials is None:
        raise UnauthorizedError("Authentication required")

    try:
        payload: dict = decode_token(credentials.credentials)
        user_id: UUID = UUID(str(payload["sub"]))
    except (jwt.InvalidTokenError, KeyError, ValueError):
        raise UnauthorizedError("Invalid or expired token")

    # 토큰 타입 검증 — Only access tokens authenticate requests
    if payload.get("type") != "access":
        raise UnauthorizedError("Invalid token type")

    user: User | None = await user_repository.get_active(db, user_id)
    if user is None:
        raise UnauthorizedError("User not found or inactive")
    return user

