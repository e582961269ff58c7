"""Block and report domain entities."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from uuid import UUID, uuid4


class ReportStatus(StrEnum):
    """Moderation state of a report."""

    PENDING = "pending"
    REVIEWED = "reviewed"
    DISMISSED = "dismissed"


@dataclass
class Block:
    """Domain entity for a block. Hides both parties from each other."""

    blocker_id: UUID
    blocked_id: UUID
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)


@dataclass
class Report:
    """Domain entity for a user report awaiting moderation."""

    reporter_id: UUID
    reported_id: UUID
    reason: str
    id: UUID = field(default_factory=uuid4)
    description: str | None = None
    status: ReportStatus = ReportStatus.PENDING
    created_at: datetime = field(default_factory=datetime.utcnow)
