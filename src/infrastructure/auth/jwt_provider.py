"""JWT authentication provider.

Accepts Supabase-issued access tokens (ES256, verified against the project's
JWKS) and locally signed HS256 tokens used in development and tests.

Claims read from the token:
    sub            auth user id (required)
    email          optional; phone sign-ups have none
    role           "authenticated" for signed-in users
    user_metadata  display_name / name / full_name
"""

import logging
import time
from datetime import datetime, timedelta
from typing import Any, Optional
from uuid import UUID

import httpx
from jose import JWTError, jwt
from jose.backends import ECKey

from core.config import settings
from infrastructure.auth.provider import TokenUser

logger = logging.getLogger(__name__)

JWKS_TTL_SECONDS = 3600


class JWKSCache:
    """kid -> JWK mapping fetched from Supabase and refreshed hourly."""

    def __init__(self, url: str, ttl: float = JWKS_TTL_SECONDS) -> None:
        self._url = url
        self._ttl = ttl
        self._keys: dict[str, dict[str, Any]] = {}
        self._fetched_at = 0.0

    def invalidate(self) -> None:
        self._fetched_at = 0.0

    async def get(self, kid: str) -> dict[str, Any] | None:
        if not self._url:
            return None
        if time.monotonic() - self._fetched_at > self._ttl:
            await self._refresh()
        key = self._keys.get(kid)
        if key is None:
            # Unknown kid: the signing key may have rotated
            await self._refresh()
            key = self._keys.get(kid)
        return key

    async def _refresh(self) -> None:
        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(self._url, timeout=10.0)
                response.raise_for_status()
        except httpx.HTTPError:
            logger.exception("Failed to fetch JWKS from %s", self._url)
            return

        self._keys = {
            key["kid"]: key for key in response.json().get("keys", []) if key.get("kid")
        }
        self._fetched_at = time.monotonic()
        logger.info("Fetched %d JWKS keys", len(self._keys))


_jwks = JWKSCache(settings.supabase_jwks_url)


def _user_from_claims(payload: dict[str, Any]) -> Optional[TokenUser]:
    subject = payload.get("sub")
    if not subject:
        return None
    try:
        user_id = UUID(subject)
    except ValueError:
        return None

    metadata = payload.get("user_metadata") or {}
    display_name = (
        metadata.get("display_name")
        or metadata.get("name")
        or metadata.get("full_name")
        or payload.get("name")
    )
    return TokenUser(
        id=user_id,
        email=payload.get("email"),
        display_name=display_name,
        role=payload.get("role"),
    )


class JWTAuthProvider:
    """JWT-based authentication provider."""

    def __init__(
        self,
        secret_key: str = settings.jwt_secret_key,
        algorithm: str = settings.jwt_algorithm,
        expire_minutes: int = settings.jwt_expire_minutes,
        jwks: JWKSCache | None = None,
    ) -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expire_minutes = expire_minutes
        self._jwks = jwks or _jwks

    async def validate_token(self, token: str) -> Optional[TokenUser]:
        """
        Validate a JWT and extract the user.

        The signing algorithm is taken from the token header: ES256 tokens
        are checked against JWKS, anything else against the shared secret.

        Returns:
            TokenUser if valid, None if invalid or expired
        """
        try:
            header = jwt.get_unverified_header(token)
            if header.get("alg") == "ES256":
                payload = await self._decode_es256(token, header)
            else:
                payload = jwt.decode(
                    token,
                    self._secret_key,
                    algorithms=[self._algorithm],
                    options={"verify_aud": False},
                )
        except JWTError:
            return None

        if payload is None:
            return None
        return _user_from_claims(payload)

    async def _decode_es256(self, token: str, header: dict) -> Optional[dict]:
        kid = header.get("kid")
        if not kid:
            return None

        key_data = await self._jwks.get(kid)
        if not key_data:
            logger.warning("JWKS key not found for kid=%s", kid)
            return None

        return jwt.decode(
            token,
            ECKey(key_data, algorithm="ES256"),
            algorithms=["ES256"],
            options={"verify_aud": False},
        )

    def create_token(self, user: TokenUser) -> str:
        """Sign an HS256 token shaped like a Supabase access token."""
        payload: dict[str, Any] = {
            "sub": str(user.id),
            "aud": "authenticated",
            "role": user.role or "authenticated",
            "exp": datetime.utcnow() + timedelta(minutes=self._expire_minutes),
            "user_metadata": {"display_name": user.display_name},
        }
        if user.email:
            payload["email"] = user.email

        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
