"""Match service layer."""

from collections.abc import Callable
from uuid import UUID

import structlog

from core.exceptions import MatchNotFoundError
from domain.entities.match import Match, MatchView
from domain.entities.swipe import Swipe, SwipeAction
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.profile_service import require_profile

logger = structlog.get_logger()


async def require_participant(uow: IUnitOfWork, match_id: UUID, profile_id: UUID) -> Match:
    """Load a match the profile takes part in. Anything else is 404."""
    match = await uow.matches.get(match_id)
    if not match or not match.involves(profile_id):
        raise MatchNotFoundError(str(match_id))
    return match


class MatchService:
    """Service layer for Match business logic."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def list_matches(self, user_id: UUID) -> list[MatchView]:
        """The caller's matches with counterpart and unread count, latest activity first."""
        async with self._uow_factory() as uow:
            me = await require_profile(uow, user_id)
            matches = await uow.matches.list_for_profile(me.id)
            if not matches:
                return []

            hidden = await uow.blocks.get_blocked_ids(me.id)
            hidden |= await uow.blocks.get_blocker_ids(me.id)
            matches = [m for m in matches if m.counterpart_of(me.id) not in hidden]

            counterparts = await uow.profiles.get_many([m.counterpart_of(me.id) for m in matches])
            unread = await uow.messages.get_unread_counts([m.id for m in matches], me.id)

            views = [
                MatchView(
                    match=m,
                    counterpart=counterparts[m.counterpart_of(me.id)],
                    unread_count=unread.get(m.id, 0),
                )
                for m in matches
                if m.counterpart_of(me.id) in counterparts
            ]
            views.sort(key=lambda v: v.match.activity_at, reverse=True)
            return views

    async def get_match(self, match_id: UUID, user_id: UUID) -> MatchView:
        """One match seen from the caller."""
        async with self._uow_factory() as uow:
            me = await require_profile(uow, user_id)
            match = await require_participant(uow, match_id, me.id)

            counterpart = await uow.profiles.get(match.counterpart_of(me.id))
            if not counterpart:
                raise MatchNotFoundError(str(match_id))

            unread = await uow.messages.get_unread_counts([match.id], me.id)
            return MatchView(
                match=match,
                counterpart=counterpart,
                unread_count=unread.get(match.id, 0),
            )

    async def unmatch(self, match_id: UUID, user_id: UUID) -> None:
        """Delete a match and its conversation.

        Both swipes become passes, so the pair only matches again if both
        members like each other anew.
        """
        async with self._uow_factory() as uow:
            me = await require_profile(uow, user_id)
            match = await require_participant(uow, match_id, me.id)

            await uow.profiles.lock_pair(match.profile_a_id, match.profile_b_id)
            await uow.matches.delete(match_id)
            for swiper_id, swiped_id in (
                (match.profile_a_id, match.profile_b_id),
                (match.profile_b_id, match.profile_a_id),
            ):
                await uow.swipes.upsert(
                    Swipe(swiper_id=swiper_id, swiped_id=swiped_id, action=SwipeAction.PASS)
                )
            await uow.commit()

        logger.info("match_removed", match_id=str(match_id), profile_id=str(me.id))
