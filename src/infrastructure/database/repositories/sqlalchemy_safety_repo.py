"""SQLAlchemy implementation of Block and Report repositories."""

from uuid import UUID

from sqlalchemy import and_, delete, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.safety import Block, Report, ReportStatus
from infrastructure.database.models import BlockModel, ReportModel


class SQLAlchemyBlockRepository:
    """SQLAlchemy implementation of IBlockRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, blocker_id: UUID, blocked_id: UUID) -> Block | None:
        """Get a block by its two parties."""
        stmt = select(BlockModel).where(
            BlockModel.blocker_id == blocker_id,
            BlockModel.blocked_id == blocked_id,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def create(self, block: Block) -> Block:
        """Create a new block."""
        model = BlockModel(
            id=block.id,
            blocker_id=block.blocker_id,
            blocked_id=block.blocked_id,
            created_at=block.created_at,
        )
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def delete(self, blocker_id: UUID, blocked_id: UUID) -> bool:
        """Remove a block and return success status."""
        stmt = delete(BlockModel).where(
            BlockModel.blocker_id == blocker_id,
            BlockModel.blocked_id == blocked_id,
        )
        result = await self._session.execute(stmt)
        return result.rowcount > 0  # type: ignore[attr-defined, no-any-return]

    async def list_for_blocker(self, blocker_id: UUID) -> list[Block]:
        """Blocks a profile has placed, newest first."""
        stmt = (
            select(BlockModel)
            .where(BlockModel.blocker_id == blocker_id)
            .order_by(BlockModel.created_at.desc())
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def get_blocked_ids(self, blocker_id: UUID) -> set[UUID]:
        """IDs the profile has blocked."""
        stmt = select(BlockModel.blocked_id).where(BlockModel.blocker_id == blocker_id)
        result = await self._session.execute(stmt)
        return set(result.scalars())

    async def get_blocker_ids(self, blocked_id: UUID) -> set[UUID]:
        """IDs that have blocked the profile."""
        stmt = select(BlockModel.blocker_id).where(BlockModel.blocked_id == blocked_id)
        result = await self._session.execute(stmt)
        return set(result.scalars())

    async def exists_between(self, first: UUID, second: UUID) -> bool:
        """True if either profile blocked the other."""
        stmt = (
            select(BlockModel.id)
            .where(
                or_(
                    and_(BlockModel.blocker_id == first, BlockModel.blocked_id == second),
                    and_(BlockModel.blocker_id == second, BlockModel.blocked_id == first),
                )
            )
            .limit(1)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None

    def _to_entity(self, model: BlockModel) -> Block:
        """Convert ORM model to domain entity."""
        return Block(
            id=model.id,
            blocker_id=model.blocker_id,
            blocked_id=model.blocked_id,
            created_at=model.created_at,
        )


class SQLAlchemyReportRepository:
    """SQLAlchemy implementation of IReportRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, report: Report) -> Report:
        """Create a new report."""
        model = ReportModel(
            id=report.id,
            reporter_id=report.reporter_id,
            reported_id=report.reported_id,
            reason=report.reason,
            description=report.description,
            status=report.status.value,
            created_at=report.created_at,
        )
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def list_for_reporter(self, reporter_id: UUID) -> list[Report]:
        """Reports filed by a profile, newest first."""
        stmt = (
            select(ReportModel)
            .where(ReportModel.reporter_id == reporter_id)
            .order_by(ReportModel.created_at.desc())
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    def _to_entity(self, model: ReportModel) -> Report:
        """Convert ORM model to domain entity."""
        return Report(
            id=model.id,
            reporter_id=model.reporter_id,
            reported_id=model.reported_id,
            reason=model.reason,
            description=model.description,
            status=ReportStatus(model.status),
            created_at=model.created_at,
        )
