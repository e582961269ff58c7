"""Safety service: blocking and reporting profiles."""

from collections.abc import Callable
from uuid import UUID

import structlog

from core.exceptions import BlockNotFoundError, ProfileNotFoundError, SelfActionError
from domain.entities.safety import Block, Report
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.profile_service import require_profile

logger = structlog.get_logger()


class SafetyService:
    """Service layer for blocks and reports."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def block(self, user_id: UUID, blocked_id: UUID) -> Block:
        """Block a profile. Blocking twice returns the existing block."""
        async with self._uow_factory() as uow:
            me = await require_profile(uow, user_id)
            if me.id == blocked_id:
                raise SelfActionError("block")
            if not await uow.profiles.get(blocked_id):
                raise ProfileNotFoundError(str(blocked_id))

            existing = await uow.blocks.get(me.id, blocked_id)
            if existing:
                return existing

            block = await uow.blocks.create(Block(blocker_id=me.id, blocked_id=blocked_id))
            await uow.commit()

        logger.info("profile_blocked", blocker_id=str(me.id), blocked_id=str(blocked_id))
        return block

    async def unblock(self, user_id: UUID, blocked_id: UUID) -> None:
        """Lift a block the caller placed."""
        async with self._uow_factory() as uow:
            me = await require_profile(uow, user_id)
            if not await uow.blocks.delete(me.id, blocked_id):
                raise BlockNotFoundError(str(blocked_id))
            await uow.commit()

        logger.info("profile_unblocked", blocker_id=str(me.id), blocked_id=str(blocked_id))

    async def list_blocks(self, user_id: UUID) -> list[Block]:
        async with self._uow_factory() as uow:
            me = await require_profile(uow, user_id)
            return await uow.blocks.list_for_blocker(me.id)

    async def report(
        self,
        user_id: UUID,
        reported_id: UUID,
        reason: str,
        description: str | None = None,
    ) -> Report:
        """File a report for moderation."""
        async with self._uow_factory() as uow:
            me = await require_profile(uow, user_id)
            if me.id == reported_id:
                raise SelfActionError("report")
            if not await uow.profiles.get(reported_id):
                raise ProfileNotFoundError(str(reported_id))

            report = await uow.reports.create(
                Report(
                    reporter_id=me.id,
                    reported_id=reported_id,
                    reason=reason.strip(),
                    description=description,
                )
            )
            await uow.commit()

        logger.info(
            "report_created",
            report_id=str(report.id),
            reported_id=str(reported_id),
            reason=report.reason,
        )
        return report
