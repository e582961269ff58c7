"""Message API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_message_service
from api.v1.schemas.common import AUTH_RESPONSES
from api.v1.schemas.message import (
    MarkReadResponse,
    MarkReadResult,
    MessageCreate,
    MessageDetailResponse,
    MessageListResponse,
    MessageResponse,
)
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.message_service import MessageService

router = APIRouter(prefix="/messages", tags=["messages"], responses=AUTH_RESPONSES)


@router.get("/{match_id}", response_model=MessageListResponse, summary="Conversation")
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_messages(
    request: Request,
    match_id: UUID,
    user: CurrentUser,
    limit: int = Query(50, ge=1, le=100, description="Page size"),
    offset: int = Query(0, ge=0),
    mark_read: bool = Query(True, description="Mark the other member's messages as read"),
    service: MessageService = Depends(get_message_service),
) -> MessageListResponse:
    """Messages of a match, oldest first."""
    messages = await service.get_messages(
        match_id, user.id, limit=limit, offset=offset, mark_read=mark_read
    )
    return MessageListResponse(data=[MessageResponse.model_validate(m) for m in messages])


@router.post(
    "",
    response_model=MessageDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Send a message",
    responses={
        400: {"description": "Empty or oversized content"},
        403: {"description": "One member blocked the other"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def send_message(
    request: Request,
    body: MessageCreate,
    user: CurrentUser,
    service: MessageService = Depends(get_message_service),
) -> MessageDetailResponse:
    message = await service.send_message(body.match_id, user.id, body.content, body.type)
    return MessageDetailResponse(data=MessageResponse.model_validate(message))


@router.post("/{match_id}/read", response_model=MarkReadResponse, summary="Mark as read")
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def mark_read(
    request: Request,
    match_id: UUID,
    user: CurrentUser,
    service: MessageService = Depends(get_message_service),
) -> MarkReadResponse:
    updated = await service.mark_read(match_id, user.id)
    return MarkReadResponse(data=MarkReadResult(updated=updated))
