"""Message domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from uuid import UUID, uuid4


class MessageType(StrEnum):
    TEXT = "text"
    IMAGE = "image"


@dataclass
class Message:
    """Domain entity for a chat message inside a match."""

    match_id: UUID
    sender_id: UUID
    content: str
    id: UUID = field(default_factory=uuid4)
    type: MessageType = MessageType.TEXT
    is_read: bool = False
    created_at: datetime = field(default_factory=datetime.utcnow)
