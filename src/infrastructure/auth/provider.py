"""Authentication provider protocol."""

from dataclasses import dataclass
from typing import Optional, Protocol
from uuid import UUID


@dataclass
class TokenUser:
    """The auth identity carried by a bearer token.

    ``id`` is the auth user id (token ``sub``). Profiles reference it through
    ``profiles.user_id``; it is not a profile id.
    """

    id: UUID
    email: Optional[str] = None
    display_name: Optional[str] = None
    role: Optional[str] = None


class IAuthProvider(Protocol):
    """Protocol for authentication providers."""

    async def validate_token(self, token: str) -> Optional[TokenUser]:
        """Return the token's user, or None if the token is invalid or expired."""
        ...

    def create_token(self, user: TokenUser) -> str:
        """Issue a token for a user (local development and tests)."""
        ...
