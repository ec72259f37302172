"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

from feedback.config import Settings
from feedback.domain.model import ModerationWarning, Thread
from feedback.domain.value import (
    AdminId,
    AnonymousId,
    ThreadId,
    ThreadStatus,
    WarningId,
    WarningLevel,
)

# Same values the test container loads from the environment
_settings = Settings()
ADMIN_TOKEN = _settings.admin.token
ADMIN_ID = AdminId(_settings.admin.admin_id)

# Fixed reference time so ordering assertions don't depend on the clock
T0 = datetime(2026, 1, 1, 12, 0, 0)


def at(minutes: int) -> datetime:
    """Reference time plus ``minutes``."""
    return T0 + timedelta(minutes=minutes)


def make_thread(
    content: str = "Great board",
    rating: int = 4,
    anonymous_id: str | None = None,
    status: ThreadStatus = ThreadStatus.ACTIVE,
    created_at: datetime | None = None,
) -> Thread:
    """Build a thread without going through the service."""
    created = created_at or datetime.now()
    return Thread(
        id=ThreadId(uuid4()),
        content=content,
        rating=rating,
        anonymous_id=AnonymousId(anonymous_id or f"anon_{uuid4().hex[:12]}"),
        status=status,
        image_url=None,
        created_at=created,
        updated_at=created,
    )


def make_warning(
    anonymous_id: str,
    level: WarningLevel,
    created_at: datetime,
    reason: str = "Off topic",
    thread_id: ThreadId | None = None,
) -> ModerationWarning:
    """Build a warning with an explicit timestamp."""
    return ModerationWarning(
        id=WarningId(uuid4()),
        anonymous_id=AnonymousId(anonymous_id),
        warning_level=level,
        reason=reason,
        thread_id=thread_id,
        reply_id=None,
        admin_id=ADMIN_ID,
        created_at=created_at,
    )
