"""Unit tests for authentication dependencies."""

from uuid import uuid4

import pytest
from fastapi.security import HTTPAuthorizationCredentials

from api.dependencies.auth import get_current_user
from core.exceptions import AuthenticationError, ErrorCode
from infrastructure.auth.jwt_provider import JWKSCache, JWTAuthProvider
from infrastructure.auth.provider import TokenUser


def _provider(expire_minutes: int = 30) -> JWTAuthProvider:
    return JWTAuthProvider(
        secret_key="test-secret",
        algorithm="HS256",
        expire_minutes=expire_minutes,
        jwks=JWKSCache(""),
    )


def _bearer(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


@pytest.fixture
def token_user() -> TokenUser:
    return TokenUser(id=uuid4(), display_name="Robin")


class TestGetCurrentUser:
    @pytest.mark.asyncio
    async def test_returns_auth_user(self, token_user: TokenUser):
        provider = _provider()

        result = await get_current_user(_bearer(provider.create_token(token_user)), provider)

        assert result.id == token_user.id
        assert result.display_name == "Robin"
        assert result.email is None

    @pytest.mark.asyncio
    async def test_missing_header(self):
        with pytest.raises(AuthenticationError) as exc_info:
            await get_current_user(None, _provider())

        assert exc_info.value.error_code == ErrorCode.UNAUTHORIZED
        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_malformed_token(self):
        with pytest.raises(AuthenticationError) as exc_info:
            await get_current_user(_bearer("invalid.jwt.token"), _provider())

        assert exc_info.value.error_code == ErrorCode.INVALID_TOKEN

    @pytest.mark.asyncio
    async def test_expired_token(self, token_user: TokenUser):
        token = _provider(expire_minutes=-1).create_token(token_user)

        with pytest.raises(AuthenticationError) as exc_info:
            await get_current_user(_bearer(token), _provider())

        assert exc_info.value.error_code == ErrorCode.INVALID_TOKEN
