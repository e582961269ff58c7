"""Pydantic schemas for Match API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from api.v1.schemas.profile import ProfileResponse
from domain.entities.match import MatchView


class MatchResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    profile_a_id: UUID
    profile_b_id: UUID
    matched_at: datetime
    last_message_at: datetime | None = None


class MatchViewResponse(BaseModel):
    """A match as seen by the caller."""

    id: UUID
    matched_at: datetime
    last_message_at: datetime | None = None
    counterpart: ProfileResponse
    unread_count: int = 0

    @classmethod
    def from_view(cls, view: MatchView) -> "MatchViewResponse":
        return cls(
            id=view.match.id,
            matched_at=view.match.matched_at,
            last_message_at=view.match.last_message_at,
            counterpart=ProfileResponse.from_entity(view.counterpart),
            unread_count=view.unread_count,
        )


class MatchListResponse(BaseModel):
    data: list[MatchViewResponse]


class MatchDetailResponse(BaseModel):
    data: MatchViewResponse
