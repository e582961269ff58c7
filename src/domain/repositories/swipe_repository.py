"""Swipe repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.swipe import Swipe


class ISwipeRepository(Protocol):
    """Repository interface for Swipe entities."""

    async def get(self, swiper_id: UUID, swiped_id: UUID) -> Swipe | None:
        """Get the swipe one profile made on another."""
        ...

    async def upsert(self, swipe: Swipe) -> Swipe:
        """Insert a swipe, or replace the action of the existing one for the pair."""
        ...

    async def get_swiped_ids(self, swiper_id: UUID) -> set[UUID]:
        """IDs of every profile the swiper has acted on, any action."""
        ...

    async def get_positive_swiper_ids(self, swiped_id: UUID) -> list[UUID]:
        """IDs of profiles that liked or superliked the given profile, newest first."""
        ...
