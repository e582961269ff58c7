"""Discovery API routes."""

from fastapi import APIRouter, Depends, Query, Request

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_discovery_service
from api.v1.schemas.common import AUTH_RESPONSES
from api.v1.schemas.discovery import CandidateListResponse, CandidateResponse
from core.rate_limit import READ_LIMIT, limiter
from domain.entities.discovery import DiscoveryOverrides
from domain.services.discovery_service import DiscoveryService

router = APIRouter(prefix="/discovery", tags=["discovery"], responses=AUTH_RESPONSES)


def _split(values: list[str] | None) -> tuple[str, ...] | None:
    """Accept both ``?genders=a&genders=b`` and ``?genders=a,b``."""
    if not values:
        return None
    items = tuple(item.strip() for value in values for item in value.split(",") if item.strip())
    return items or None


@router.get("", response_model=CandidateListResponse, summary="Discovery feed")
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_candidates(
    request: Request,
    user: CurrentUser,
    min_age: int | None = Query(None, ge=18, le=120),
    max_age: int | None = Query(None, ge=18, le=120),
    account_types: list[str] | None = Query(None, description="single, couple"),
    genders: list[str] | None = Query(None),
    max_distance: float | None = Query(None, gt=0, description="Kilometres"),
    only_verified: bool | None = Query(None),
    only_with_photos: bool | None = Query(None),
    interests: list[str] | None = Query(None, description="Match any of these tags"),
    limit: int | None = Query(None, ge=1, le=100, description="Page size (default 50)"),
    offset: int = Query(0, ge=0),
    service: DiscoveryService = Depends(get_discovery_service),
) -> CandidateListResponse:
    """
    Profiles the caller has not swiped on yet, nearest first.

    Unset filters fall back to the caller's saved preferences. Profiles
    without a location are listed after every located one.

    Distances are ranked over the newest 500 profiles that pass the other
    filters. Setting ``max_distance`` draws that window from the
    surrounding area only.
    """
    overrides = DiscoveryOverrides(
        min_age=min_age,
        max_age=max_age,
        account_types=_split(account_types),
        genders=_split(genders),
        max_distance=max_distance,
        only_verified=only_verified,
        only_with_photos=only_with_photos,
        interests=_split(interests),
    )
    candidates = await service.get_candidates(user.id, overrides, limit=limit, offset=offset)
    return CandidateListResponse(data=[CandidateResponse.from_candidate(c) for c in candidates])
