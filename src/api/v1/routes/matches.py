"""Match API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_match_service
from api.v1.schemas.common import AUTH_RESPONSES
from api.v1.schemas.match import MatchDetailResponse, MatchListResponse, MatchViewResponse
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.match_service import MatchService

router = APIRouter(prefix="/matches", tags=["matches"], responses=AUTH_RESPONSES)


@router.get("", response_model=MatchListResponse, summary="List my matches")
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_matches(
    request: Request,
    user: CurrentUser,
    service: MatchService = Depends(get_match_service),
) -> MatchListResponse:
    """Matches with the other member's profile and unread count, most recent activity first."""
    views = await service.list_matches(user.id)
    return MatchListResponse(data=[MatchViewResponse.from_view(v) for v in views])


@router.get("/{match_id}", response_model=MatchDetailResponse, summary="Get a match")
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_match(
    request: Request,
    match_id: UUID,
    user: CurrentUser,
    service: MatchService = Depends(get_match_service),
) -> MatchDetailResponse:
    view = await service.get_match(match_id, user.id)
    return MatchDetailResponse(data=MatchViewResponse.from_view(view))


@router.delete(
    "/{match_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Unmatch",
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def unmatch(
    request: Request,
    match_id: UUID,
    user: CurrentUser,
    service: MatchService = Depends(get_match_service),
) -> None:
    """Remove the match and its conversation for both members."""
    await service.unmatch(match_id, user.id)
    return None
