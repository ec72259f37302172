"""Moderation warning entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from feedback.domain.model.common import DomainModel
from feedback.domain.value import (
    AdminId,
    AnonymousId,
    ReplyId,
    ThreadId,
    WarningId,
    WarningLevel,
)


class ModerationWarning(DomainModel):
    """Warning issued by the moderator against an anonymous identity.

    Warnings are append-only: they are never edited or removed, and an
    identity can accumulate any number of them. ``anonymous_id`` is the
    target, ``admin_id`` the issuer.
    """

    id: WarningId
    anonymous_id: AnonymousId
    warning_level: WarningLevel
    reason: str = Field(min_length=1)
    thread_id: Optional[ThreadId] = None
    reply_id: Optional[ReplyId] = None
    admin_id: AdminId
    created_at: datetime = Field(default_factory=datetime.now)

    def outranks(self, other: "ModerationWarning") -> bool:
        """Whether this warning takes precedence over ``other``.

        Severity decides first; between equal severities the newer one wins.
        """
        return (self.warning_level.severity, self.created_at) > (
            other.warning_level.severity,
            other.created_at,
        )
