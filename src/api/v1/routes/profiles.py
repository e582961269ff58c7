"""Profile API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_profile_service
from api.v1.schemas.common import AUTH_RESPONSES
from api.v1.schemas.profile import (
    MyProfileDetailResponse,
    MyProfileResponse,
    PhotoCreate,
    PhotoDetailResponse,
    PhotoListResponse,
    PhotoResponse,
    ProfileCreate,
    ProfileDetailResponse,
    ProfileResponse,
    ProfileUpdate,
)
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.profile_service import ProfileService

router = APIRouter(prefix="/profile", tags=["profile"], responses=AUTH_RESPONSES)
profiles_router = APIRouter(prefix="/profiles", tags=["profile"], responses=AUTH_RESPONSES)


@router.get("", response_model=MyProfileDetailResponse, summary="Get my profile")
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_my_profile(
    request: Request,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> MyProfileDetailResponse:
    """Get the authenticated user's own profile, including private preferences."""
    profile = await service.get_my_profile(user.id)
    return MyProfileDetailResponse(data=MyProfileResponse.from_entity(profile))


@router.post(
    "",
    response_model=MyProfileDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create my profile",
    responses={409: {"description": "Profile already exists"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_my_profile(
    request: Request,
    body: ProfileCreate,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> MyProfileDetailResponse:
    """Create the authenticated user's profile. One profile per user."""
    profile = await service.create_profile(user.id, body.model_dump(exclude_unset=True))
    return MyProfileDetailResponse(data=MyProfileResponse.from_entity(profile))


@router.patch(
    "",
    response_model=MyProfileDetailResponse,
    summary="Update my profile",
    responses={400: {"description": "Inconsistent profile fields"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_my_profile(
    request: Request,
    body: ProfileUpdate,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> MyProfileDetailResponse:
    """Partially update the profile. Omitted fields are left unchanged."""
    profile = await service.update_profile(user.id, body.model_dump(exclude_unset=True))
    return MyProfileDetailResponse(data=MyProfileResponse.from_entity(profile))


@router.get("/photos", response_model=PhotoListResponse, summary="List my photos")
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_photos(
    request: Request,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> PhotoListResponse:
    photos = await service.list_photos(user.id)
    return PhotoListResponse(data=[PhotoResponse.from_entity(p) for p in photos])


@router.post(
    "/photos",
    response_model=PhotoDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a photo",
    responses={400: {"description": "Photo limit reached"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def add_photo(
    request: Request,
    body: PhotoCreate,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> PhotoDetailResponse:
    """Record a photo that was already uploaded to object storage."""
    photo = await service.add_photo(
        user.id,
        url=str(body.url),
        storage_path=body.storage_path,
        is_primary=body.is_primary,
    )
    return PhotoDetailResponse(data=PhotoResponse.from_entity(photo))


@router.delete(
    "/photos/{photo_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a photo",
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_photo(
    request: Request,
    photo_id: UUID,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> None:
    await service.delete_photo(user.id, photo_id)
    return None


@profiles_router.get(
    "/{profile_id}",
    response_model=ProfileDetailResponse,
    summary="View a profile",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_profile(
    request: Request,
    profile_id: UUID,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """View another member's public profile. Hidden and blocked profiles are 404."""
    profile = await service.get_profile(profile_id, user.id)
    return ProfileDetailResponse(data=ProfileResponse.from_entity(profile))
