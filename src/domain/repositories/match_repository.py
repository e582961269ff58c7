"""Match repository protocol."""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from domain.entities.match import Match


class IMatchRepository(Protocol):
    """Repository interface for Match entities."""

    async def get(self, id: UUID) -> Match | None:
        """Get a match by ID."""
        ...

    async def get_for_pair(self, first: UUID, second: UUID) -> Match | None:
        """Get the match between two profiles, in either order."""
        ...

    async def create(self, match: Match) -> Match | None:
        """Create a match. Returns None if the pair is already matched."""
        ...

    async def list_for_profile(self, profile_id: UUID) -> list[Match]:
        """All matches a profile takes part in, most recent activity first."""
        ...

    async def touch(self, id: UUID, at: datetime) -> None:
        """Set the last message timestamp of a match."""
        ...

    async def delete(self, id: UUID) -> bool:
        """Delete a match (messages cascade) and return success status."""
        ...
