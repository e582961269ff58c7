"""SQLAlchemy implementation of Message repository."""

from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.message import Message, MessageType
from infrastructure.database.models import MessageModel


class SQLAlchemyMessageRepository:
    """SQLAlchemy implementation of IMessageRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, message: Message) -> Message:
        """Create a new message."""
        model = MessageModel(
            id=message.id,
            match_id=message.match_id,
            sender_id=message.sender_id,
            content=message.content,
            type=message.type.value,
            is_read=message.is_read,
            created_at=message.created_at,
        )
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def list_for_match(
        self, match_id: UUID, limit: int = 50, offset: int = 0
    ) -> list[Message]:
        """Messages of a match, oldest first."""
        stmt = (
            select(MessageModel)
            .where(MessageModel.match_id == match_id)
            .order_by(MessageModel.created_at, MessageModel.id)
            .limit(limit)
            .offset(offset)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def mark_read(self, match_id: UUID, reader_id: UUID) -> int:
        """Mark the other participant's unread messages as read. Returns count updated."""
        stmt = (
            update(MessageModel)
            .where(
                MessageModel.match_id == match_id,
                MessageModel.sender_id != reader_id,
                MessageModel.is_read.is_(False),
            )
            .values(is_read=True)
        )
        result = await self._session.execute(stmt)
        return result.rowcount  # type: ignore[attr-defined, no-any-return]

    async def get_unread_counts(
        self, match_ids: list[UUID], reader_id: UUID
    ) -> dict[UUID, int]:
        """Unread message counts per match for a reader."""
        if not match_ids:
            return {}
        stmt = (
            select(MessageModel.match_id, func.count())
            .where(
                MessageModel.match_id.in_(match_ids),
                MessageModel.sender_id != reader_id,
                MessageModel.is_read.is_(False),
            )
            .group_by(MessageModel.match_id)
        )
        result = await self._session.execute(stmt)
        return {row[0]: row[1] for row in result.all()}

    def _to_entity(self, model: MessageModel) -> Message:
        """Convert ORM model to domain entity."""
        return Message(
            id=model.id,
            match_id=model.match_id,
            sender_id=model.sender_id,
            content=model.content,
            type=MessageType(model.type),
            is_read=model.is_read,
            created_at=model.created_at,
        )
