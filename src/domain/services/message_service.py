"""Message service layer."""

from collections.abc import Callable
from uuid import UUID

from core.config import settings
from core.exceptions import BlockedError, InvalidMessageError
from domain.entities.message import Message, MessageType
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.match_service import require_participant
from domain.services.profile_service import require_profile


class MessageService:
    """Service layer for chat messages inside a match."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def send_message(
        self,
        match_id: UUID,
        user_id: UUID,
        content: str,
        type: MessageType | str = MessageType.TEXT,
    ) -> Message:
        """Send a message and bump the match's last activity."""
        content = (content or "").strip()
        if not content:
            raise InvalidMessageError("Message content cannot be empty")
        if len(content) > settings.message_max_length:
            raise InvalidMessageError(
                f"Message content exceeds {settings.message_max_length} characters"
            )
        try:
            message_type = MessageType(type)
        except ValueError:
            raise InvalidMessageError(f"Unknown message type: {type}") from None

        async with self._uow_factory() as uow:
            me = await require_profile(uow, user_id)
            match = await require_participant(uow, match_id, me.id)

            if await uow.blocks.exists_between(me.id, match.counterpart_of(me.id)):
                raise BlockedError()

            message = await uow.messages.create(
                Message(match_id=match.id, sender_id=me.id, content=content, type=message_type)
            )
            await uow.matches.touch(match.id, message.created_at)
            await uow.commit()
            return message

    async def get_messages(
        self,
        match_id: UUID,
        user_id: UUID,
        limit: int = 50,
        offset: int = 0,
        mark_read: bool = True,
    ) -> list[Message]:
        """A page of the conversation, oldest first."""
        async with self._uow_factory() as uow:
            me = await require_profile(uow, user_id)
            match = await require_participant(uow, match_id, me.id)

            messages = await uow.messages.list_for_match(match.id, limit=limit, offset=offset)

            if mark_read and any(m.sender_id != me.id and not m.is_read for m in messages):
                await uow.messages.mark_read(match.id, me.id)
                await uow.commit()

            return messages

    async def mark_read(self, match_id: UUID, user_id: UUID) -> int:
        """Mark every message from the counterpart as read."""
        async with self._uow_factory() as uow:
            me = await require_profile(uow, user_id)
            match = await require_participant(uow, match_id, me.id)

            count = await uow.messages.mark_read(match.id, me.id)
            await uow.commit()
            return count
