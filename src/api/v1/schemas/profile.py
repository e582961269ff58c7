"""Pydantic schemas for Profile API."""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, HttpUrl, model_validator

from domain.entities.profile import Profile, ProfilePhoto

Gender = Literal["male", "female", "non_binary", "transgender", "other"]
AccountTypeName = Literal["single", "couple"]


class ProfileFields(BaseModel):
    """Fields a user can set on their own profile."""

    account_type: AccountTypeName | None = None
    age: int | None = Field(None, ge=18, le=120)
    bio: str | None = Field(None, max_length=2000)
    gender: Gender | None = None
    city: str | None = Field(None, max_length=100)
    state: str | None = Field(None, max_length=100)
    country: str | None = Field(None, max_length=100)
    latitude: float | None = Field(None, ge=-90, le=90)
    longitude: float | None = Field(None, ge=-180, le=180)
    seeking_genders: list[Gender] | None = None
    seeking_account_types: list[AccountTypeName] | None = None
    interests: list[str] | None = Field(None, max_length=50)
    is_visible: bool | None = None
    age_range_min: int | None = Field(None, ge=18, le=120)
    age_range_max: int | None = Field(None, ge=18, le=120)
    max_distance: int | None = Field(None, gt=0, le=20000)
    show_only_verified: bool | None = None
    show_only_with_photos: bool | None = None

    @model_validator(mode="after")
    def check_age_range(self) -> "ProfileFields":
        low, high = self.age_range_min, self.age_range_max
        if low is not None and high is not None and low > high:
            raise ValueError("age_range_min must not exceed age_range_max")
        return self


class ProfileCreate(ProfileFields):
    """Schema for creating the caller's profile."""

    display_name: str = Field(..., min_length=1, max_length=100)


class ProfileUpdate(ProfileFields):
    """Schema for a partial profile update. Only sent fields are applied."""

    display_name: str | None = Field(None, min_length=1, max_length=100)


class ProfileResponse(BaseModel):
    """Schema for Profile response."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "display_name": "Alex & Sam",
                "account_type": "couple",
                "age": 31,
                "city": "Lisbon",
                "interests": ["hiking", "jazz"],
                "verification_status": "verified",
                "is_profile_complete": True,
            }
        },
    )

    id: UUID
    display_name: str
    account_type: str | None = None
    age: int | None = None
    bio: str | None = None
    gender: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    interests: list[str] = []
    verification_status: str
    is_profile_complete: bool
    created_at: datetime

    @classmethod
    def from_entity(cls, profile: Profile) -> "ProfileResponse":
        return cls.model_validate(profile)


class MyProfileResponse(ProfileResponse):
    """The caller's own profile, including private preferences."""

    user_id: UUID
    latitude: float | None = None
    longitude: float | None = None
    seeking_genders: list[str] = []
    seeking_account_types: list[str] = []
    membership_type: str
    is_visible: bool
    age_range_min: int | None = None
    age_range_max: int | None = None
    max_distance: int | None = None
    show_only_verified: bool
    show_only_with_photos: bool
    updated_at: datetime

    @classmethod
    def from_entity(cls, profile: Profile) -> "MyProfileResponse":
        return cls.model_validate(profile)


class ProfileDetailResponse(BaseModel):
    data: ProfileResponse


class MyProfileDetailResponse(BaseModel):
    data: MyProfileResponse


class PhotoCreate(BaseModel):
    """Schema for recording an uploaded photo."""

    url: HttpUrl
    storage_path: str | None = Field(None, max_length=500)
    is_primary: bool = False


class PhotoResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    url: str
    storage_path: str | None = None
    is_primary: bool
    position: int
    created_at: datetime

    @classmethod
    def from_entity(cls, photo: ProfilePhoto) -> "PhotoResponse":
        return cls.model_validate(photo)


class PhotoListResponse(BaseModel):
    data: list[PhotoResponse]


class PhotoDetailResponse(BaseModel):
    data: PhotoResponse
