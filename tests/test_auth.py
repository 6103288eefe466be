"""인증 의존성 테스트 — Bearer 토큰 검증."""

import uuid
from datetime import datetime, timedelta, timezone

import jwt
from httpx import AsyncClient

from collabhub.config import settings
from collabhub.utils.jwt import create_access_token, decode_token
from tests.conftest import auth_header

ME_URL = "/api/v1/users/me"


class TestTokens:
    def test_access_token_round_trip(self):
        """발급한 토큰은 검증되고 type이 access"""
        token = create_access_token({"sub": "abc"})
        payload = decode_token(token)
        assert payload["sub"] == "abc"
        assert payload["type"] == "access"


class TestGetCurrentUser:
    async def test_missing_header(self, client: AsyncClient):
        """헤더 없으면 401"""
        res = await client.get(ME_URL)
        assert res.status_code == 401

    async def test_garbage_token(self, client: AsyncClient):
        """형식이 잘못된 토큰 401"""
        res = await client.get(ME_URL, headers=auth_header("not-a-jwt"))
        assert res.status_code == 401

    async def test_expired_token(self, client: AsyncClient, creator_user):
        """만료된 토큰 401"""
        token = jwt.encode(
            {
                "sub": str(creator_user.id),
                "type": "access",
                "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
            },
            settings.JWT_SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
        )
        res = await client.get(ME_URL, headers=auth_header(token))
        assert res.status_code == 401

    async def test_wrong_token_type(self, client: AsyncClient, creator_user):
        """access가 아닌 토큰 401"""
        token = jwt.encode(
            {
                "sub": str(creator_user.id),
                "type": "refresh",
                "exp": datetime.now(timezone.utc) + timedelta(minutes=5),
            },
            settings.JWT_SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
        )
        res = await client.get(ME_URL, headers=auth_header(token))
        assert res.status_code == 401

    async def test_unknown_user(self, client: AsyncClient):
        """존재하지 않는 사용자 401"""
        token = create_access_token({"sub": str(uuid.uuid4())})
        res = await client.get(ME_URL, headers=auth_header(token))
        assert res.status_code == 401

    async def test_invalid_subject(self, client: AsyncClient):
        """UUID가 아닌 sub 401"""
        token = create_access_token({"sub": "not-a-uuid"})
        res = await client.get(ME_URL, headers=auth_header(token))
        assert res.status_code == 401

    async def test_inactive_user(self, client: AsyncClient, db, creator_user, creator_token: str):
        """비활성 사용자 401"""
        creator_user.is_active = False
        await db.commit()
        res = await client.get(ME_URL, headers=auth_header(creator_token))
        assert res.status_code == 401
