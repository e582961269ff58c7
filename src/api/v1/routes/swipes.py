"""Swipe and likes API routes."""

from fastapi import APIRouter, Depends, Request

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_discovery_service, get_swipe_service
from api.v1.schemas.common import AUTH_RESPONSES
from api.v1.schemas.discovery import LikesReceivedResponse
from api.v1.schemas.profile import ProfileResponse
from api.v1.schemas.swipe import SwipeCreate, SwipeResultResponse
from core.rate_limit import READ_LIMIT, SWIPE_LIMIT, limiter
from domain.services.discovery_service import DiscoveryService
from domain.services.swipe_service import SwipeService

router = APIRouter(prefix="/swipe", tags=["swipes"], responses=AUTH_RESPONSES)
likes_router = APIRouter(prefix="/likes", tags=["swipes"], responses=AUTH_RESPONSES)


@router.post(
    "",
    response_model=SwipeResultResponse,
    summary="Swipe on a profile",
    responses={400: {"description": "Swipe on own profile"}},
)
@limiter.limit(SWIPE_LIMIT)  # type: ignore[untyped-decorator]
async def swipe(
    request: Request,
    body: SwipeCreate,
    user: CurrentUser,
    service: SwipeService = Depends(get_swipe_service),
) -> SwipeResultResponse:
    """
    Like, superlike or pass on a profile.

    Swiping again on the same profile replaces the earlier action.
    ``is_match`` is true only on the swipe that completes a mutual like.
    """
    result = await service.record_swipe(user.id, body.swiped_id, body.action)
    return SwipeResultResponse.from_result(result)


@likes_router.get(
    "",
    response_model=LikesReceivedResponse,
    summary="Who liked me",
    responses={403: {"description": "Requires premium or vip membership"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def likes_received(
    request: Request,
    user: CurrentUser,
    service: DiscoveryService = Depends(get_discovery_service),
) -> LikesReceivedResponse:
    """Profiles that liked the caller and have not been answered yet."""
    profiles = await service.get_likes_received(user.id)
    return LikesReceivedResponse(data=[ProfileResponse.from_entity(p) for p in profiles])
