"""SQLAlchemy implementation of Profile and ProfilePhoto repositories."""

from uuid import UUID

from sqlalchemy import and_, exists, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.discovery import DiscoveryQuery
from domain.entities.profile import (
    AccountType,
    MembershipType,
    Profile,
    ProfilePhoto,
    VerificationStatus,
)
from infrastructure.database.models import ProfileModel, ProfilePhotoModel

# Columns copied verbatim between entity and model on update
_MUTABLE_FIELDS = (
    "display_name",
    "age",
    "bio",
    "gender",
    "city",
    "state",
    "country",
    "latitude",
    "longitude",
    "is_visible",
    "is_profile_complete",
    "age_range_min",
    "age_range_max",
    "max_distance",
    "show_only_verified",
    "show_only_with_photos",
    "updated_at",
)


class SQLAlchemyProfileRepository:
    """SQLAlchemy implementation of IProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> Profile | None:
        """Get a profile by ID."""
        stmt = select(ProfileModel).where(ProfileModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_by_user_id(self, user_id: UUID) -> Profile | None:
        """Get the profile owned by an auth user."""
        stmt = select(ProfileModel).where(ProfileModel.user_id == user_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_many(self, ids: list[UUID]) -> dict[UUID, Profile]:
        """Get several profiles in one query, keyed by ID."""
        if not ids:
            return {}
        stmt = select(ProfileModel).where(ProfileModel.id.in_(ids))
        result = await self._session.execute(stmt)
        return {model.id: self._to_entity(model) for model in result.scalars()}

    async def create(self, profile: Profile) -> Profile:
        """Create a new profile."""
        model = self._to_model(profile)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def update(self, profile: Profile) -> Profile:
        """Update an existing profile."""
        stmt = select(ProfileModel).where(ProfileModel.id == profile.id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            raise ValueError(f"Profile {profile.id} not found")

        for name in _MUTABLE_FIELDS:
            setattr(model, name, getattr(profile, name))
        model.account_type = profile.account_type.value if profile.account_type else None
        model.seeking_genders = list(profile.seeking_genders)
        model.seeking_account_types = list(profile.seeking_account_types)
        model.interests = list(profile.interests)
        model.verification_status = profile.verification_status.value
        model.membership_type = profile.membership_type.value

        await self._session.flush()
        return self._to_entity(model)

    async def lock_pair(self, first: UUID, second: UUID) -> None:
        """Row-lock two profiles in ID order.

        Ordering the lock keeps A->B and B->A swipes from deadlocking each
        other. SQLite ignores FOR UPDATE.
        """
        stmt = (
            select(ProfileModel.id)
            .where(ProfileModel.id.in_([first, second]))
            .order_by(ProfileModel.id)
            .with_for_update()
        )
        await self._session.execute(stmt)

    async def find_candidates(self, query: DiscoveryQuery, limit: int) -> list[Profile]:
        """Visible, complete profiles matching the attribute filters, newest first."""
        stmt = select(ProfileModel).where(
            ProfileModel.is_visible.is_(True),
            ProfileModel.is_profile_complete.is_(True),
        )

        if query.exclude_ids:
            stmt = stmt.where(ProfileModel.id.not_in(list(query.exclude_ids)))

        filters = query.filters
        if filters.min_age is not None:
            stmt = stmt.where(ProfileModel.age >= filters.min_age)
        if filters.max_age is not None:
            stmt = stmt.where(ProfileModel.age <= filters.max_age)
        if filters.account_types:
            stmt = stmt.where(ProfileModel.account_type.in_(filters.account_types))
        if filters.genders:
            stmt = stmt.where(ProfileModel.gender.in_(filters.genders))
        if filters.only_verified:
            stmt = stmt.where(
                ProfileModel.verification_status == VerificationStatus.VERIFIED.value
            )
        if filters.only_with_photos:
            stmt = stmt.where(
                exists().where(ProfilePhotoModel.profile_id == ProfileModel.id)
            )

        bounds = query.bounds
        if bounds is not None:
            in_box = [ProfileModel.latitude.between(bounds.min_lat, bounds.max_lat)]
            if bounds.min_lon is not None and bounds.max_lon is not None:
                in_box.append(ProfileModel.longitude.between(bounds.min_lon, bounds.max_lon))
            # Profiles without coordinates are never distance-filtered
            stmt = stmt.where(
                or_(
                    ProfileModel.latitude.is_(None),
                    ProfileModel.longitude.is_(None),
                    and_(*in_box),
                )
            )

        stmt = stmt.order_by(ProfileModel.created_at.desc(), ProfileModel.id).limit(limit)
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    def _to_entity(self, model: ProfileModel) -> Profile:
        """Convert ORM model to domain entity."""
        return Profile(
            id=model.id,
            user_id=model.user_id,
            display_name=model.display_name,
            account_type=AccountType(model.account_type) if model.account_type else None,
            age=model.age,
            bio=model.bio,
            gender=model.gender,
            city=model.city,
            state=model.state,
            country=model.country,
            latitude=model.latitude,
            longitude=model.longitude,
            seeking_genders=list(model.seeking_genders or []),
            seeking_account_types=list(model.seeking_account_types or []),
            interests=list(model.interests or []),
            verification_status=VerificationStatus(model.verification_status),
            membership_type=MembershipType(model.membership_type),
            is_visible=model.is_visible,
            is_profile_complete=model.is_profile_complete,
            age_range_min=model.age_range_min,
            age_range_max=model.age_range_max,
            max_distance=model.max_distance,
            show_only_verified=model.show_only_verified,
            show_only_with_photos=model.show_only_with_photos,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Profile) -> ProfileModel:
        """Convert domain entity to ORM model."""
        return ProfileModel(
            id=entity.id,
            user_id=entity.user_id,
            display_name=entity.display_name,
            account_type=entity.account_type.value if entity.account_type else None,
            age=entity.age,
            bio=entity.bio,
            gender=entity.gender,
            city=entity.city,
            state=entity.state,
            country=entity.country,
            latitude=entity.latitude,
            longitude=entity.longitude,
            seeking_genders=list(entity.seeking_genders),
            seeking_account_types=list(entity.seeking_account_types),
            interests=list(entity.interests),
            verification_status=entity.verification_status.value,
            membership_type=entity.membership_type.value,
            is_visible=entity.is_visible,
            is_profile_complete=entity.is_profile_complete,
            age_range_min=entity.age_range_min,
            age_range_max=entity.age_range_max,
            max_distance=entity.max_distance,
            show_only_verified=entity.show_only_verified,
            show_only_with_photos=entity.show_only_with_photos,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )


class SQLAlchemyProfilePhotoRepository:
    """SQLAlchemy implementation of IProfilePhotoRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> ProfilePhoto | None:
        """Get a photo by ID."""
        stmt = select(ProfilePhotoModel).where(ProfilePhotoModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def list_for_profile(self, profile_id: UUID) -> list[ProfilePhoto]:
        """Get a profile's photos, primary first, then by position."""
        stmt = (
            select(ProfilePhotoModel)
            .where(ProfilePhotoModel.profile_id == profile_id)
            .order_by(
                ProfilePhotoModel.is_primary.desc(),
                ProfilePhotoModel.position,
                ProfilePhotoModel.created_at,
            )
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def count_for_profile(self, profile_id: UUID) -> int:
        """Number of photos attached to a profile."""
        stmt = (
            select(func.count())
            .select_from(ProfilePhotoModel)
            .where(ProfilePhotoModel.profile_id == profile_id)
        )
        result = await self._session.execute(stmt)
        return result.scalar() or 0

    async def create(self, photo: ProfilePhoto) -> ProfilePhoto:
        """Attach a new photo."""
        model = ProfilePhotoModel(
            id=photo.id,
            profile_id=photo.profile_id,
            url=photo.url,
            storage_path=photo.storage_path,
            is_primary=photo.is_primary,
            position=photo.position,
            created_at=photo.created_at,
        )
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def clear_primary(self, profile_id: UUID) -> None:
        """Unset the primary flag on every photo of a profile."""
        stmt = (
            update(ProfilePhotoModel)
            .where(
                ProfilePhotoModel.profile_id == profile_id,
                ProfilePhotoModel.is_primary.is_(True),
            )
            .values(is_primary=False)
        )
        await self._session.execute(stmt)

    async def delete(self, id: UUID) -> bool:
        """Delete a photo."""
        stmt = select(ProfilePhotoModel).where(ProfilePhotoModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    def _to_entity(self, model: ProfilePhotoModel) -> ProfilePhoto:
        """Convert ORM model to domain entity."""
        return ProfilePhoto(
            id=model.id,
            profile_id=model.profile_id,
            url=model.url,
            storage_path=model.storage_path,
            is_primary=model.is_primary,
            position=model.position,
            created_at=model.created_at,
        )
