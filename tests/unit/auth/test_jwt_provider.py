"""Unit tests for JWTAuthProvider and the JWKS cache."""

from uuid import uuid4

import httpx
import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec
from jose import jwt as jose_jwt
from jose.backends import ECKey

from infrastructure.auth.jwt_provider import JWKSCache, JWTAuthProvider, _user_from_claims
from infrastructure.auth.provider import TokenUser

JWKS_URL = "https://project.supabase.co/auth/v1/.well-known/jwks.json"


def _es256_keypair() -> tuple[str, dict]:
    private = ec.generate_private_key(ec.SECP256R1())
    pem = private.private_bytes(
        serialization.Encoding.PEM,
        serialization.PrivateFormat.PKCS8,
        serialization.NoEncryption(),
    ).decode()
    public_jwk = ECKey(pem, "ES256").public_key().to_dict()
    return pem, public_jwk


def _mock_jwks(monkeypatch: pytest.MonkeyPatch, keys: list[dict], calls: list[int]) -> None:
    real_client = httpx.AsyncClient

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(1)
        return httpx.Response(200, json={"keys": keys})

    monkeypatch.setattr(
        httpx,
        "AsyncClient",
        lambda *a, **kw: real_client(transport=httpx.MockTransport(handler)),
    )


@pytest.fixture
def hs256_provider() -> JWTAuthProvider:
    return JWTAuthProvider(
        secret_key="test-secret",
        algorithm="HS256",
        expire_minutes=30,
        jwks=JWKSCache(""),
    )


class TestUserFromClaims:
    def test_reads_metadata_display_name(self):
        user_id = uuid4()
        user = _user_from_claims(
            {"sub": str(user_id), "role": "authenticated", "user_metadata": {"full_name": "Sam"}}
        )
        assert user == TokenUser(id=user_id, display_name="Sam", role="authenticated")

    def test_email_is_optional(self):
        user = _user_from_claims({"sub": str(uuid4())})
        assert user is not None
        assert user.email is None

    def test_missing_sub(self):
        assert _user_from_claims({"email": "a@example.com"}) is None

    def test_sub_must_be_uuid(self):
        assert _user_from_claims({"sub": "not-a-uuid"}) is None


class TestHS256:
    async def test_round_trip(self, hs256_provider: JWTAuthProvider):
        user = TokenUser(id=uuid4(), email="a@example.com", display_name="A")

        result = await hs256_provider.validate_token(hs256_provider.create_token(user))

        assert result is not None
        assert result.id == user.id
        assert result.email == "a@example.com"
        assert result.display_name == "A"
        assert result.role == "authenticated"

    async def test_token_without_email(self, hs256_provider: JWTAuthProvider):
        user = TokenUser(id=uuid4())
        token = hs256_provider.create_token(user)

        assert "email" not in jose_jwt.get_unverified_claims(token)
        result = await hs256_provider.validate_token(token)
        assert result is not None and result.id == user.id

    async def test_wrong_secret(self, hs256_provider: JWTAuthProvider):
        token = jose_jwt.encode({"sub": str(uuid4())}, "other-secret", algorithm="HS256")
        assert await hs256_provider.validate_token(token) is None

    async def test_garbage(self, hs256_provider: JWTAuthProvider):
        assert await hs256_provider.validate_token("not.a.jwt") is None


class TestES256:
    async def test_verified_against_jwks(self, monkeypatch: pytest.MonkeyPatch):
        pem, public_jwk = _es256_keypair()
        calls: list[int] = []
        _mock_jwks(monkeypatch, [{**public_jwk, "kid": "k1"}], calls)
        provider = JWTAuthProvider(secret_key="unused", jwks=JWKSCache(JWKS_URL))
        user_id = uuid4()
        token = jose_jwt.encode(
            {"sub": str(user_id), "aud": "authenticated", "role": "authenticated"},
            pem,
            algorithm="ES256",
            headers={"kid": "k1"},
        )

        result = await provider.validate_token(token)

        assert result is not None
        assert result.id == user_id
        assert len(calls) == 1

    async def test_unknown_kid(self, monkeypatch: pytest.MonkeyPatch):
        pem, public_jwk = _es256_keypair()
        calls: list[int] = []
        _mock_jwks(monkeypatch, [{**public_jwk, "kid": "k1"}], calls)
        provider = JWTAuthProvider(secret_key="unused", jwks=JWKSCache(JWKS_URL))
        token = jose_jwt.encode(
            {"sub": str(uuid4())}, pem, algorithm="ES256", headers={"kid": "rotated"}
        )

        assert await provider.validate_token(token) is None

    async def test_missing_kid(self):
        pem, _ = _es256_keypair()
        provider = JWTAuthProvider(secret_key="unused", jwks=JWKSCache(JWKS_URL))
        token = jose_jwt.encode({"sub": str(uuid4())}, pem, algorithm="ES256")

        assert await provider.validate_token(token) is None


class TestJWKSCache:
    async def test_keys_are_cached_within_ttl(self, monkeypatch: pytest.MonkeyPatch):
        calls: list[int] = []
        _mock_jwks(monkeypatch, [{"kid": "k1", "kty": "EC"}], calls)
        cache = JWKSCache(JWKS_URL)

        assert await cache.get("k1") == {"kid": "k1", "kty": "EC"}
        assert await cache.get("k1") is not None
        assert len(calls) == 1

    async def test_unknown_kid_forces_refresh(self, monkeypatch: pytest.MonkeyPatch):
        calls: list[int] = []
        _mock_jwks(monkeypatch, [{"kid": "k1"}], calls)
        cache = JWKSCache(JWKS_URL)

        await cache.get("k1")
        assert await cache.get("k2") is None
        assert len(calls) == 2

    async def test_invalidate(self, monkeypatch: pytest.MonkeyPatch):
        calls: list[int] = []
        _mock_jwks(monkeypatch, [{"kid": "k1"}], calls)
        cache = JWKSCache(JWKS_URL)

        await cache.get("k1")
        cache.invalidate()
        await cache.get("k1")
        assert len(calls) == 2

    async def test_fetch_failure_yields_no_key(self, monkeypatch: pytest.MonkeyPatch):
        real_client = httpx.AsyncClient

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503)

        monkeypatch.setattr(
            httpx,
            "AsyncClient",
            lambda *a, **kw: real_client(transport=httpx.MockTransport(handler)),
        )

        assert await JWKSCache(JWKS_URL).get("k1") is None

    async def test_no_url_configured(self):
        assert await JWKSCache("").get("k1") is None
