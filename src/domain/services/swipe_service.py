"""Swipe service: records swipes and detects mutual likes."""

from collections.abc import Callable
from uuid import UUID

import structlog

from core.exceptions import BlockedError, InvalidSwipeError, ProfileNotFoundError
from domain.entities.match import Match, SwipeResult
from domain.entities.swipe import Swipe, SwipeAction
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.profile_service import require_profile

logger = structlog.get_logger()


class SwipeService:
    """Service layer for swipes and match detection."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def record_swipe(
        self, user_id: UUID, swiped_id: UUID, action: SwipeAction | str
    ) -> SwipeResult:
        """Record a swipe and create the match if it closes a mutual like.

        The swipe, the reciprocity check and the match insert run in one
        transaction with both profile rows locked, so two reciprocal swipes
        on the same pair produce exactly one match.
        """
        try:
            action = SwipeAction(action)
        except ValueError:
            raise InvalidSwipeError(f"Unknown swipe action: {action}") from None

        async with self._uow_factory() as uow:
            swiper = await require_profile(uow, user_id)
            if swiper.id == swiped_id:
                raise InvalidSwipeError("You cannot swipe on your own profile")

            target = await uow.profiles.get(swiped_id)
            if not target or not target.is_visible or not target.is_profile_complete:
                raise ProfileNotFoundError(str(swiped_id))

            await uow.profiles.lock_pair(swiper.id, swiped_id)
            if await uow.blocks.exists_between(swiper.id, swiped_id):
                raise BlockedError()

            swipe = await uow.swipes.upsert(
                Swipe(swiper_id=swiper.id, swiped_id=swiped_id, action=action)
            )

            match = None
            if action.is_positive:
                match = await self._close_pair(uow, swipe)

            await uow.commit()

        if match:
            logger.info(
                "match_created",
                match_id=str(match.id),
                profile_a_id=str(match.profile_a_id),
                profile_b_id=str(match.profile_b_id),
            )
        return SwipeResult(swipe=swipe, is_match=match is not None, match=match)

    async def _close_pair(self, uow: IUnitOfWork, swipe: Swipe) -> Match | None:
        """Create a match if the target already liked the swiper.

        Returns None when there is no reciprocal like or the pair has
        already matched.
        """
        reverse = await uow.swipes.get(swipe.swiped_id, swipe.swiper_id)
        if not reverse or not reverse.action.is_positive:
            return None

        if await uow.matches.get_for_pair(swipe.swiper_id, swipe.swiped_id):
            return None

        # The unique pair key turns a lost race into None instead of a duplicate
        return await uow.matches.create(
            Match(profile_a_id=swipe.swiper_id, profile_b_id=swipe.swiped_id)
        )
