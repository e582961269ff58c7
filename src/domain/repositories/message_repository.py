"""Message repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.message import Message


class IMessageRepository(Protocol):
    """Repository interface for Message entities."""

    async def create(self, message: Message) -> Message:
        """Create a new message."""
        ...

    async def list_for_match(
        self, match_id: UUID, limit: int = 50, offset: int = 0
    ) -> list[Message]:
        """Messages of a match, oldest first."""
        ...

    async def mark_read(self, match_id: UUID, reader_id: UUID) -> int:
        """Mark unread messages not sent by the reader as read. Returns count updated."""
        ...

    async def get_unread_counts(
        self, match_ids: list[UUID], reader_id: UUID
    ) -> dict[UUID, int]:
        """Unread message counts per match for a reader (batch fetch)."""
        ...
