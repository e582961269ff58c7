"""Profile domain entities."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from uuid import UUID, uuid4


class AccountType(StrEnum):
    """Whether a profile represents one person or a couple."""

    SINGLE = "single"
    COUPLE = "couple"


class VerificationStatus(StrEnum):
    """Identity verification state of a profile."""

    PENDING = "pending"
    VERIFIED = "verified"
    REJECTED = "rejected"


class MembershipType(StrEnum):
    """Membership tier. Paid tiers unlock "who liked me"."""

    FREE = "free"
    PREMIUM = "premium"
    VIP = "vip"


PAID_MEMBERSHIPS = frozenset({MembershipType.PREMIUM, MembershipType.VIP})

GENDERS = ("male", "female", "non_binary", "transgender", "other")


@dataclass
class Profile:
    """Domain entity for a dating profile (one per authenticated user)."""

    user_id: UUID
    display_name: str
    id: UUID = field(default_factory=uuid4)
    account_type: AccountType | None = None
    age: int | None = None
    bio: str | None = None
    gender: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    seeking_genders: list[str] = field(default_factory=list)
    seeking_account_types: list[str] = field(default_factory=list)
    interests: list[str] = field(default_factory=list)
    verification_status: VerificationStatus = VerificationStatus.PENDING
    membership_type: MembershipType = MembershipType.FREE
    is_visible: bool = True
    is_profile_complete: bool = False
    age_range_min: int | None = None
    age_range_max: int | None = None
    max_distance: int | None = None
    show_only_verified: bool = False
    show_only_with_photos: bool = False
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        """Normalize interest tags and keep timestamps ordered."""
        self.interests = sorted({tag.strip().lower() for tag in self.interests if tag.strip()})
        if self.updated_at < self.created_at:
            self.updated_at = self.created_at

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    @property
    def is_verified(self) -> bool:
        return self.verification_status == VerificationStatus.VERIFIED

    @property
    def has_paid_membership(self) -> bool:
        return self.membership_type in PAID_MEMBERSHIPS

    def refresh_completeness(self) -> None:
        """A profile is discoverable once name, age and account type are set."""
        self.is_profile_complete = bool(
            self.display_name and self.display_name.strip()
            and self.age is not None
            and self.account_type is not None
        )


@dataclass
class ProfilePhoto:
    """Domain entity for a photo attached to a profile.

    The bytes live in object storage; only the public URL is tracked here.
    """

    profile_id: UUID
    url: str
    id: UUID = field(default_factory=uuid4)
    storage_path: str | None = None
    is_primary: bool = False
    position: int = 0
    created_at: datetime = field(default_factory=datetime.utcnow)
