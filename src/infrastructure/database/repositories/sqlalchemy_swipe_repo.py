"""SQLAlchemy implementation of Swipe repository."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.swipe import POSITIVE_ACTIONS, Swipe, SwipeAction
from infrastructure.database.models import SwipeModel


class SQLAlchemySwipeRepository:
    """SQLAlchemy implementation of ISwipeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, swiper_id: UUID, swiped_id: UUID) -> Swipe | None:
        """Get the swipe one profile made on another."""
        model = await self._get_model(swiper_id, swiped_id)
        return self._to_entity(model) if model else None

    async def upsert(self, swipe: Swipe) -> Swipe:
        """Insert a swipe, or replace the action of the existing one.

        Callers hold the pair lock, so select-then-write cannot race with a
        concurrent swipe on the same pair.
        """
        model = await self._get_model(swipe.swiper_id, swipe.swiped_id)

        if model:
            model.action = swipe.action.value
            model.created_at = swipe.created_at
        else:
            model = SwipeModel(
                id=swipe.id,
                swiper_id=swipe.swiper_id,
                swiped_id=swipe.swiped_id,
                action=swipe.action.value,
                created_at=swipe.created_at,
            )
            self._session.add(model)

        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def get_swiped_ids(self, swiper_id: UUID) -> set[UUID]:
        """IDs of every profile the swiper has acted on."""
        stmt = select(SwipeModel.swiped_id).where(SwipeModel.swiper_id == swiper_id)
        result = await self._session.execute(stmt)
        return set(result.scalars())

    async def get_positive_swiper_ids(self, swiped_id: UUID) -> list[UUID]:
        """IDs of profiles that liked or superliked the given profile, newest first."""
        stmt = (
            select(SwipeModel.swiper_id)
            .where(
                SwipeModel.swiped_id == swiped_id,
                SwipeModel.action.in_([a.value for a in POSITIVE_ACTIONS]),
            )
            .order_by(SwipeModel.created_at.desc())
        )
        result = await self._session.execute(stmt)
        return list(result.scalars())

    async def _get_model(self, swiper_id: UUID, swiped_id: UUID) -> SwipeModel | None:
        stmt = select(SwipeModel).where(
            SwipeModel.swiper_id == swiper_id,
            SwipeModel.swiped_id == swiped_id,
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_entity(self, model: SwipeModel) -> Swipe:
        """Convert ORM model to domain entity."""
        return Swipe(
            id=model.id,
            swiper_id=model.swiper_id,
            swiped_id=model.swiped_id,
            action=SwipeAction(model.action),
            created_at=model.created_at,
        )
