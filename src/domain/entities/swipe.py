"""Swipe domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from uuid import UUID, uuid4


class SwipeAction(StrEnum):
    """A one-way reaction from one profile toward another."""

    LIKE = "like"
    PASS = "pass"
    SUPERLIKE = "superlike"

    @property
    def is_positive(self) -> bool:
        """Likes and superlikes can close a match; passes never do."""
        return self in POSITIVE_ACTIONS


POSITIVE_ACTIONS = frozenset({SwipeAction.LIKE, SwipeAction.SUPERLIKE})


@dataclass
class Swipe:
    """Domain entity for a swipe. One row per (swiper, swiped) pair."""

    swiper_id: UUID
    swiped_id: UUID
    action: SwipeAction
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)
