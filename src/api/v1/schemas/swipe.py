"""Pydantic schemas for Swipe API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from api.v1.schemas.match import MatchResponse
from domain.entities.match import SwipeResult
from domain.entities.swipe import SwipeAction


class SwipeCreate(BaseModel):
    """Schema for recording a swipe."""

    swiped_id: UUID
    action: SwipeAction


class SwipeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    swiper_id: UUID
    swiped_id: UUID
    action: SwipeAction
    created_at: datetime


class SwipeResultResponse(BaseModel):
    """Outcome of a swipe. ``match`` is set only when this swipe closed a mutual like."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "swipe": {
                    "id": "8f7e4567-e89b-12d3-a456-426614174000",
                    "swiper_id": "123e4567-e89b-12d3-a456-426614174000",
                    "swiped_id": "456e4567-e89b-12d3-a456-426614174000",
                    "action": "like",
                    "created_at": "2026-01-28T10:00:00",
                },
                "is_match": True,
                "match": {
                    "id": "9a7e4567-e89b-12d3-a456-426614174000",
                    "profile_a_id": "123e4567-e89b-12d3-a456-426614174000",
                    "profile_b_id": "456e4567-e89b-12d3-a456-426614174000",
                    "matched_at": "2026-01-28T10:00:00",
                    "last_message_at": None,
                },
            }
        }
    )

    swipe: SwipeResponse
    is_match: bool
    match: MatchResponse | None = None

    @classmethod
    def from_result(cls, result: SwipeResult) -> "SwipeResultResponse":
        return cls(
            swipe=SwipeResponse.model_validate(result.swipe),
            is_match=result.is_match,
            match=MatchResponse.model_validate(result.match) if result.match else None,
        )
