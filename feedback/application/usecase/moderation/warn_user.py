"""Warn user use case."""

from uuid import UUID

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from feedback.application.usecase.view import WarningBadge, WarningItem
from feedback.domain.error import ValidationError
from feedback.domain.service import ModerationService, WarningService
from feedback.domain.value import AdminId, AnonymousId, ReplyId, ThreadId, WarningLevel


class WarnUserRequest(BaseModel):
    """Warn user request."""

    anonymous_id: str  # Author token
    warning_level: WarningLevel
    reason: str
    thread_id: str | None = None  # Context thread (UUID string)
    reply_id: str | None = None  # Context reply (UUID string)
    admin_id: str  # Resolved from the admin token


class WarnUserResponse(BaseModel):
    """Warn user response."""

    warning: WarningItem
    effective_warning: WarningBadge | None  # Standing after this warning


class WarnUserUseCase:
    """Use case for issuing a moderation warning against an author token."""

    def __init__(
        self, moderation_service: ModerationService, warning_service: WarningService
    ) -> None:
        """Initialize warn user use case.

        Args:
            moderation_service: Moderation domain service
            warning_service: Warning domain service (effective warning lookup)
        """
        self.moderation_service = moderation_service
        self.warning_service = warning_service

    async def execute(self, request: WarnUserRequest) -> WarnUserResponse:
        """Execute warn user flow.

        A new warning never replaces an older one; the response reports
        which warning is now effective for the identity.

        Raises:
            ValidationError: If the target token or reason is malformed, or the
                reply does not belong to the context thread
            NotFoundError: If the context thread or reply does not exist
        """
        try:
            target = AnonymousId(request.anonymous_id)
        except PydanticValidationError as e:
            raise ValidationError("Anonymous id must be 1-255 characters") from e

        warning = await self.moderation_service.warn(
            target=target,
            level=request.warning_level,
            reason=request.reason,
            admin_id=AdminId(UUID(request.admin_id)),
            thread_id=ThreadId(UUID(request.thread_id)) if request.thread_id else None,
            reply_id=ReplyId(UUID(request.reply_id)) if request.reply_id else None,
        )
        effective = await self.warning_service.effective_warning(target)

        return WarnUserResponse(
            warning=WarningItem.from_warning(warning),
            effective_warning=WarningBadge.from_warning(effective),
        )
