"""Profile and photo repository protocols."""

from typing import Protocol
from uuid import UUID

from domain.entities.discovery import DiscoveryQuery
from domain.entities.profile import Profile, ProfilePhoto


class IProfileRepository(Protocol):
    """Repository interface for Profile entities."""

    async def get(self, id: UUID) -> Profile | None:
        """Get a profile by ID."""
        ...

    async def get_by_user_id(self, user_id: UUID) -> Profile | None:
        """Get the profile owned by an auth user."""
        ...

    async def get_many(self, ids: list[UUID]) -> dict[UUID, Profile]:
        """Get several profiles in one query, keyed by ID."""
        ...

    async def create(self, profile: Profile) -> Profile:
        """Create a new profile."""
        ...

    async def update(self, profile: Profile) -> Profile:
        """Update an existing profile."""
        ...

    async def lock_pair(self, first: UUID, second: UUID) -> None:
        """Row-lock two profiles in a stable order for the rest of the transaction."""
        ...

    async def find_candidates(self, query: DiscoveryQuery, limit: int) -> list[Profile]:
        """Visible, complete profiles matching the attribute filters, newest first."""
        ...


class IProfilePhotoRepository(Protocol):
    """Repository interface for ProfilePhoto entities."""

    async def get(self, id: UUID) -> ProfilePhoto | None:
        """Get a photo by ID."""
        ...

    async def list_for_profile(self, profile_id: UUID) -> list[ProfilePhoto]:
        """Get a profile's photos in display order."""
        ...

    async def count_for_profile(self, profile_id: UUID) -> int:
        """Number of photos attached to a profile."""
        ...

    async def create(self, photo: ProfilePhoto) -> ProfilePhoto:
        """Attach a new photo."""
        ...

    async def clear_primary(self, profile_id: UUID) -> None:
        """Unset the primary flag on every photo of a profile."""
        ...

    async def delete(self, id: UUID) -> bool:
        """Delete a photo and return success status."""
        ...
