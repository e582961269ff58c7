"""Match domain entities."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

from domain.entities.profile import Profile
from domain.entities.swipe import Swipe


def make_pair_key(first: UUID, second: UUID) -> str:
    """Order-independent key for an unordered pair of profiles."""
    low, high = sorted((str(first), str(second)))
    return f"{low}:{high}"


@dataclass
class Match:
    """Domain entity for a mutual like between two profiles.

    ``profile_a_id`` is the swiper whose like closed the pair; the pair is
    otherwise undirected and identified by ``pair_key``.
    """

    profile_a_id: UUID
    profile_b_id: UUID
    id: UUID = field(default_factory=uuid4)
    matched_at: datetime = field(default_factory=datetime.utcnow)
    last_message_at: datetime | None = None

    @property
    def pair_key(self) -> str:
        return make_pair_key(self.profile_a_id, self.profile_b_id)

    def involves(self, profile_id: UUID) -> bool:
        return profile_id in (self.profile_a_id, self.profile_b_id)

    def counterpart_of(self, profile_id: UUID) -> UUID:
        """Return the other participant."""
        if profile_id == self.profile_a_id:
            return self.profile_b_id
        if profile_id == self.profile_b_id:
            return self.profile_a_id
        raise ValueError(f"Profile {profile_id} is not part of match {self.id}")

    @property
    def activity_at(self) -> datetime:
        """Timestamp used to order a match list."""
        return self.last_message_at or self.matched_at


@dataclass(frozen=True, slots=True)
class MatchView:
    """Read-only value object: a match seen from one participant."""

    match: Match
    counterpart: Profile
    unread_count: int = 0


@dataclass(frozen=True, slots=True)
class SwipeResult:
    """Outcome of recording a swipe."""

    swipe: Swipe
    is_match: bool
    match: Match | None = None
