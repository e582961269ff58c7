"""Pydantic schemas for Message API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from domain.entities.message import MessageType


class MessageCreate(BaseModel):
    """Schema for sending a message. Content is trimmed server-side."""

    match_id: UUID
    content: str = Field(..., min_length=1)
    type: MessageType = MessageType.TEXT


class MessageResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    match_id: UUID
    sender_id: UUID
    content: str
    type: MessageType
    is_read: bool
    created_at: datetime


class MessageListResponse(BaseModel):
    data: list[MessageResponse]


class MessageDetailResponse(BaseModel):
    data: MessageResponse


class MarkReadResult(BaseModel):
    updated: int


class MarkReadResponse(BaseModel):
    data: MarkReadResult
