"""Block and report API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_safety_service
from api.v1.schemas.common import AUTH_RESPONSES
from api.v1.schemas.safety import (
    BlockCreate,
    BlockDetailResponse,
    BlockListResponse,
    BlockResponse,
    ReportCreate,
    ReportDetailResponse,
    ReportResponse,
)
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.safety_service import SafetyService

block_router = APIRouter(prefix="/block", tags=["safety"], responses=AUTH_RESPONSES)
report_router = APIRouter(prefix="/report", tags=["safety"], responses=AUTH_RESPONSES)


@block_router.get("", response_model=BlockListResponse, summary="List my blocks")
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_blocks(
    request: Request,
    user: CurrentUser,
    service: SafetyService = Depends(get_safety_service),
) -> BlockListResponse:
    blocks = await service.list_blocks(user.id)
    return BlockListResponse(data=[BlockResponse.model_validate(b) for b in blocks])


@block_router.post(
    "",
    response_model=BlockDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Block a profile",
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def block_profile(
    request: Request,
    body: BlockCreate,
    user: CurrentUser,
    service: SafetyService = Depends(get_safety_service),
) -> BlockDetailResponse:
    """Hide a profile from the caller and the caller from it. Repeating is harmless."""
    block = await service.block(user.id, body.blocked_id)
    return BlockDetailResponse(data=BlockResponse.model_validate(block))


@block_router.delete(
    "/{profile_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Unblock a profile",
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def unblock_profile(
    request: Request,
    profile_id: UUID,
    user: CurrentUser,
    service: SafetyService = Depends(get_safety_service),
) -> None:
    await service.unblock(user.id, profile_id)
    return None


@report_router.post(
    "",
    response_model=ReportDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Report a profile",
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def report_profile(
    request: Request,
    body: ReportCreate,
    user: CurrentUser,
    service: SafetyService = Depends(get_safety_service),
) -> ReportDetailResponse:
    """File a report for the moderation queue."""
    report = await service.report(user.id, body.reported_id, body.reason, body.description)
    return ReportDetailResponse(data=ReportResponse.model_validate(report))
