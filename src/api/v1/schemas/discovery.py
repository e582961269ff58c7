"""Pydantic schemas for Discovery API."""

from pydantic import BaseModel

from api.v1.schemas.profile import ProfileResponse
from domain.entities.discovery import DiscoveryCandidate


class CandidateResponse(BaseModel):
    """A discovery candidate. ``distance_km`` is null when either side has no location."""

    profile: ProfileResponse
    distance_km: float | None = None

    @classmethod
    def from_candidate(cls, candidate: DiscoveryCandidate) -> "CandidateResponse":
        distance = candidate.distance_km
        return cls(
            profile=ProfileResponse.from_entity(candidate.profile),
            distance_km=round(distance, 1) if distance is not None else None,
        )


class CandidateListResponse(BaseModel):
    data: list[CandidateResponse]


class LikesReceivedResponse(BaseModel):
    data: list[ProfileResponse]
