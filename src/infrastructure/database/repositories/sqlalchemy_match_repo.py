"""SQLAlchemy implementation of Match repository."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import delete, func, or_, select, update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.match import Match, make_pair_key
from infrastructure.database.models import MatchModel, MessageModel


class SQLAlchemyMatchRepository:
    """SQLAlchemy implementation of IMatchRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> Match | None:
        """Get a match by ID."""
        stmt = select(MatchModel).where(MatchModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_for_pair(self, first: UUID, second: UUID) -> Match | None:
        """Get the match between two profiles, in either order."""
        stmt = select(MatchModel).where(MatchModel.pair_key == make_pair_key(first, second))
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def create(self, match: Match) -> Match | None:
        """Insert a match unless the pair already has one.

        Uses ``ON CONFLICT (pair_key) DO NOTHING`` so a duplicate never
        aborts the surrounding transaction.
        """
        dialect = self._session.get_bind().dialect.name
        insert = sqlite.insert if dialect == "sqlite" else postgresql.insert
        stmt = (
            insert(MatchModel)
            .values(
                id=match.id,
                profile_a_id=match.profile_a_id,
                profile_b_id=match.profile_b_id,
                pair_key=match.pair_key,
                matched_at=match.matched_at,
                last_message_at=match.last_message_at,
            )
            .on_conflict_do_nothing(index_elements=["pair_key"])
        )
        result = await self._session.execute(stmt)
        if result.rowcount == 0:
            return None
        return await self.get(match.id)

    async def list_for_profile(self, profile_id: UUID) -> list[Match]:
        """All matches a profile takes part in, most recent activity first."""
        activity = func.coalesce(MatchModel.last_message_at, MatchModel.matched_at)
        stmt = (
            select(MatchModel)
            .where(
                or_(
                    MatchModel.profile_a_id == profile_id,
                    MatchModel.profile_b_id == profile_id,
                )
            )
            .order_by(activity.desc())
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def touch(self, id: UUID, at: datetime) -> None:
        """Set the last message timestamp of a match."""
        stmt = update(MatchModel).where(MatchModel.id == id).values(last_message_at=at)
        await self._session.execute(stmt)

    async def delete(self, id: UUID) -> bool:
        """Delete a match together with its messages."""
        await self._session.execute(delete(MessageModel).where(MessageModel.match_id == id))
        result = await self._session.execute(delete(MatchModel).where(MatchModel.id == id))
        return result.rowcount > 0  # type: ignore[attr-defined, no-any-return]

    def _to_entity(self, model: MatchModel) -> Match:
        """Convert ORM model to domain entity."""
        return Match(
            id=model.id,
            profile_a_id=model.profile_a_id,
            profile_b_id=model.profile_b_id,
            matched_at=model.matched_at,
            last_message_at=model.last_message_at,
        )
