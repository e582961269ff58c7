"""Pydantic schemas for block and report API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from domain.entities.safety import ReportStatus


class BlockCreate(BaseModel):
    blocked_id: UUID


class BlockResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    blocked_id: UUID
    created_at: datetime


class BlockListResponse(BaseModel):
    data: list[BlockResponse]


class BlockDetailResponse(BaseModel):
    data: BlockResponse


class ReportCreate(BaseModel):
    """Schema for reporting a profile."""

    reported_id: UUID
    reason: str = Field(..., min_length=1, max_length=100)
    description: str | None = Field(None, max_length=2000)


class ReportResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    reported_id: UUID
    reason: str
    description: str | None = None
    status: ReportStatus
    created_at: datetime


class ReportDetailResponse(BaseModel):
    data: ReportResponse
