"""Profile service layer: the caller's own profile, other profiles and photos."""

from collections.abc import Callable
from datetime import datetime
from typing import Any
from uuid import UUID

import structlog

from core.config import settings
from core.exceptions import (
    InvalidProfileError,
    PhotoLimitError,
    PhotoNotFoundError,
    ProfileAlreadyExistsError,
    ProfileNotFoundError,
)
from domain.entities.profile import AccountType, Profile, ProfilePhoto
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()

# Fields a user may set on their own profile. Verification and membership
# are managed elsewhere.
EDITABLE_FIELDS = frozenset(
    {
        "display_name",
        "account_type",
        "age",
        "bio",
        "gender",
        "city",
        "state",
        "country",
        "latitude",
        "longitude",
        "seeking_genders",
        "seeking_account_types",
        "interests",
        "is_visible",
        "age_range_min",
        "age_range_max",
        "max_distance",
        "show_only_verified",
        "show_only_with_photos",
    }
)


async def require_profile(uow: IUnitOfWork, user_id: UUID) -> Profile:
    """Resolve the caller's profile from the token subject."""
    profile = await uow.profiles.get_by_user_id(user_id)
    if not profile:
        raise ProfileNotFoundError()
    return profile


def _check_age_range(profile: Profile) -> None:
    low, high = profile.age_range_min, profile.age_range_max
    if low is not None and high is not None and low > high:
        raise InvalidProfileError("age_range_min must not exceed age_range_max")


class ProfileService:
    """Service layer for Profile business logic."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def get_my_profile(self, user_id: UUID) -> Profile:
        """Get the caller's own profile."""
        async with self._uow_factory() as uow:
            return await require_profile(uow, user_id)

    async def create_profile(self, user_id: UUID, fields: dict[str, Any]) -> Profile:
        """Create the caller's profile. One profile per user."""
        async with self._uow_factory() as uow:
            if await uow.profiles.get_by_user_id(user_id):
                raise ProfileAlreadyExistsError(str(user_id))

            values = {k: v for k, v in fields.items() if k in EDITABLE_FIELDS and v is not None}
            if "account_type" in values:
                values["account_type"] = AccountType(values["account_type"])

            profile = Profile(user_id=user_id, **values)
            _check_age_range(profile)
            profile.refresh_completeness()

            created = await uow.profiles.create(profile)
            await uow.commit()

            logger.info(
                "profile_created",
                profile_id=str(created.id),
                is_complete=created.is_profile_complete,
            )
            return created

    async def update_profile(self, user_id: UUID, changes: dict[str, Any]) -> Profile:
        """Apply a partial update. Explicit ``None`` clears a nullable field."""
        async with self._uow_factory() as uow:
            profile = await require_profile(uow, user_id)

            for name, value in changes.items():
                if name not in EDITABLE_FIELDS:
                    continue
                if name == "display_name" and not value:
                    raise InvalidProfileError("display_name cannot be empty")
                if name == "account_type" and value is not None:
                    value = AccountType(value)
                if name in ("seeking_genders", "seeking_account_types") and value is None:
                    value = []
                if name == "interests":
                    value = sorted({t.strip().lower() for t in value or [] if t.strip()})
                if name in ("is_visible", "show_only_verified", "show_only_with_photos") and value is None:
                    continue
                setattr(profile, name, value)

            _check_age_range(profile)
            profile.refresh_completeness()
            profile.updated_at = datetime.utcnow()

            updated = await uow.profiles.update(profile)
            await uow.commit()
            return updated

    async def get_profile(self, profile_id: UUID, viewer_user_id: UUID) -> Profile:
        """View another profile. Hidden or block-related profiles are 404."""
        async with self._uow_factory() as uow:
            viewer = await require_profile(uow, viewer_user_id)
            profile = await uow.profiles.get(profile_id)

            if not profile:
                raise ProfileNotFoundError(str(profile_id))
            if profile.id == viewer.id:
                return profile
            if not profile.is_visible:
                raise ProfileNotFoundError(str(profile_id))
            if await uow.blocks.exists_between(viewer.id, profile.id):
                raise ProfileNotFoundError(str(profile_id))
            return profile

    # --- Photos ---

    async def list_photos(self, user_id: UUID) -> list[ProfilePhoto]:
        """Photos of the caller's profile, primary first."""
        async with self._uow_factory() as uow:
            profile = await require_profile(uow, user_id)
            return await uow.photos.list_for_profile(profile.id)

    async def add_photo(
        self,
        user_id: UUID,
        url: str,
        storage_path: str | None = None,
        is_primary: bool = False,
    ) -> ProfilePhoto:
        """Record a photo already uploaded to object storage."""
        async with self._uow_factory() as uow:
            profile = await require_profile(uow, user_id)

            count = await uow.photos.count_for_profile(profile.id)
            if count >= settings.max_photos_per_profile:
                raise PhotoLimitError(settings.max_photos_per_profile)

            # The first photo is primary by default
            is_primary = is_primary or count == 0
            if is_primary:
                await uow.photos.clear_primary(profile.id)

            photo = await uow.photos.create(
                ProfilePhoto(
                    profile_id=profile.id,
                    url=url,
                    storage_path=storage_path,
                    is_primary=is_primary,
                    position=count,
                )
            )
            await uow.commit()
            return photo

    async def delete_photo(self, user_id: UUID, photo_id: UUID) -> None:
        """Delete one of the caller's photos."""
        async with self._uow_factory() as uow:
            profile = await require_profile(uow, user_id)

            photo = await uow.photos.get(photo_id)
            if not photo or photo.profile_id != profile.id:
                raise PhotoNotFoundError(str(photo_id))

            await uow.photos.delete(photo_id)
            await uow.commit()
