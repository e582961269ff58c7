"""Discovery service: the candidate feed and the "who liked me" list."""

from collections.abc import Callable
from uuid import UUID

import structlog

from core.config import settings
from core.exceptions import MembershipRequiredError
from domain.entities.discovery import (
    DiscoveryCandidate,
    DiscoveryFilters,
    DiscoveryOverrides,
    DiscoveryQuery,
    bounding_box,
    rank_candidates,
)
from domain.entities.profile import Profile
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.profile_service import require_profile

logger = structlog.get_logger()


class DiscoveryService:
    """Service layer for candidate discovery."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def get_candidates(
        self,
        user_id: UUID,
        overrides: DiscoveryOverrides | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[DiscoveryCandidate]:
        """Candidates for the caller, nearest first.

        Never returns the caller, anyone the caller has swiped on, or anyone
        on either side of a block. Ranking covers the newest
        ``discovery_scan_limit`` profiles that pass the store filters; with
        ``max_distance`` set those are limited to the surrounding area first.
        """
        limit = min(limit or settings.discovery_default_limit, settings.discovery_max_limit)

        async with self._uow_factory() as uow:
            requester = await require_profile(uow, user_id)

            filters = DiscoveryFilters.from_profile(requester)
            if overrides is not None:
                filters = filters.merged_with(overrides)

            exclude = await self._exclusion_set(uow, requester)

            bounds = None
            if filters.max_distance is not None and requester.has_coordinates:
                bounds = bounding_box(
                    requester.latitude,  # type: ignore[arg-type]
                    requester.longitude,  # type: ignore[arg-type]
                    filters.max_distance,
                )

            query = DiscoveryQuery(exclude_ids=frozenset(exclude), filters=filters, bounds=bounds)
            scan = max(settings.discovery_scan_limit, offset + limit)
            profiles = await uow.profiles.find_candidates(query, scan)

        ranked = rank_candidates(requester, profiles, filters)
        page = ranked[offset : offset + limit]

        logger.debug(
            "discovery_served",
            profile_id=str(requester.id),
            scanned=len(profiles),
            returned=len(page),
        )
        return page

    async def get_likes_received(self, user_id: UUID) -> list[Profile]:
        """Profiles that liked the caller and are still waiting for a reply.

        Paid memberships only.
        """
        async with self._uow_factory() as uow:
            requester = await require_profile(uow, user_id)
            if not requester.has_paid_membership:
                raise MembershipRequiredError("premium")

            liker_ids = await uow.swipes.get_positive_swiper_ids(requester.id)
            if not liker_ids:
                return []

            skip = await self._exclusion_set(uow, requester)
            pending = [pid for pid in liker_ids if pid not in skip]
            profiles = await uow.profiles.get_many(pending)

            # Keep newest-like-first order from the swipe store
            return [
                profiles[pid]
                for pid in pending
                if pid in profiles and profiles[pid].is_visible
            ]

    async def _exclusion_set(self, uow: IUnitOfWork, requester: Profile) -> set[UUID]:
        """Self, already-swiped, and block-related profile ids."""
        exclude = {requester.id}
        exclude |= await uow.swipes.get_swiped_ids(requester.id)
        exclude |= await uow.blocks.get_blocker_ids(requester.id)
        exclude |= await uow.blocks.get_blocked_ids(requester.id)
        return exclude
