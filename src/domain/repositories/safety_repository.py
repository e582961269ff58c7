"""Block and report repository protocols."""

from typing import Protocol
from uuid import UUID

from domain.entities.safety import Block, Report


class IBlockRepository(Protocol):
    """Repository interface for Block entities."""

    async def get(self, blocker_id: UUID, blocked_id: UUID) -> Block | None:
        """Get a block by its two parties."""
        ...

    async def create(self, block: Block) -> Block:
        """Create a new block."""
        ...

    async def delete(self, blocker_id: UUID, blocked_id: UUID) -> bool:
        """Remove a block and return success status."""
        ...

    async def list_for_blocker(self, blocker_id: UUID) -> list[Block]:
        """Blocks a profile has placed, newest first."""
        ...

    async def get_blocked_ids(self, blocker_id: UUID) -> set[UUID]:
        """IDs the profile has blocked."""
        ...

    async def get_blocker_ids(self, blocked_id: UUID) -> set[UUID]:
        """IDs that have blocked the profile."""
        ...

    async def exists_between(self, first: UUID, second: UUID) -> bool:
        """True if either profile blocked the other."""
        ...


class IReportRepository(Protocol):
    """Repository interface for Report entities."""

    async def create(self, report: Report) -> Report:
        """Create a new report."""
        ...

    async def list_for_reporter(self, reporter_id: UUID) -> list[Report]:
        """Reports filed by a profile, newest first."""
        ...
