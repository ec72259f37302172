"""Moderator routes.

Every route requires the ``X-Admin-Token`` header to match the configured
admin token. The resolved admin id is passed to the use cases.
"""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, status
from pydantic import BaseModel, Field

from feedback.application.usecase.moderation import (
    AdminReplyRequest,
    AdminReplyUseCase,
    ArchiveThreadUseCase,
    DeleteThreadUseCase,
    ListWarningsResponse,
    ListWarningsUseCase,
    ModerateThreadRequest,
    ModerateThreadResponse,
    WarnUserRequest,
    WarnUserResponse,
    WarnUserUseCase,
)
from feedback.application.usecase.news import (
    NewsItem,
    PublishNewsRequest,
    PublishNewsUseCase,
)
from feedback.application.usecase.thread import (
    ListAllThreadsResponse,
    ListAllThreadsUseCase,
)
from feedback.application.usecase.view import ReplyItem
from feedback.domain.service import AdminIdentityService
from feedback.domain.value import WarningLevel

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


class AdminReplyBody(BaseModel):
    """Body of a moderator reply."""

    content: str


class WarnUserBody(BaseModel):
    """Body of a warning."""

    anonymous_id: str = Field(min_length=1, max_length=255)
    warning_level: WarningLevel
    reason: str
    thread_id: UUID | None = None
    reply_id: UUID | None = None


@router.get("/threads", response_model=ListAllThreadsResponse)
async def list_all_threads(
    admin_identity: FromDishka[AdminIdentityService],
    use_case: FromDishka[ListAllThreadsUseCase],
    x_admin_token: str | None = Header(default=None),
) -> ListAllThreadsResponse:
    """Audit listing: every thread in every status with replies and warnings."""
    admin_identity.require(x_admin_token, "list all threads")
    return await use_case.execute()


@router.post("/threads/{thread_id}/archive", response_model=ModerateThreadResponse)
async def archive_thread(
    thread_id: UUID,
    admin_identity: FromDishka[AdminIdentityService],
    use_case: FromDishka[ArchiveThreadUseCase],
    x_admin_token: str | None = Header(default=None),
) -> ModerateThreadResponse:
    """Hide a thread from the board. Repeating the call is harmless."""
    admin_id = admin_identity.require(x_admin_token, "archive threads")
    return await use_case.execute(
        ModerateThreadRequest(thread_id=str(thread_id), admin_id=str(admin_id))
    )


@router.post("/threads/{thread_id}/delete", response_model=ModerateThreadResponse)
async def delete_thread(
    thread_id: UUID,
    admin_identity: FromDishka[AdminIdentityService],
    use_case: FromDishka[DeleteThreadUseCase],
    x_admin_token: str | None = Header(default=None),
) -> ModerateThreadResponse:
    """Tombstone a thread. The record stays in the audit listing."""
    admin_id = admin_identity.require(x_admin_token, "delete threads")
    return await use_case.execute(
        ModerateThreadRequest(thread_id=str(thread_id), admin_id=str(admin_id))
    )


@router.post(
    "/threads/{thread_id}/replies",
    response_model=ReplyItem,
    status_code=status.HTTP_201_CREATED,
)
async def reply_as_admin(
    thread_id: UUID,
    body: AdminReplyBody,
    admin_identity: FromDishka[AdminIdentityService],
    use_case: FromDishka[AdminReplyUseCase],
    x_admin_token: str | None = Header(default=None),
) -> ReplyItem:
    """Reply to a thread as the moderator."""
    admin_id = admin_identity.require(x_admin_token, "reply as admin")
    return await use_case.execute(
        AdminReplyRequest(
            thread_id=str(thread_id), content=body.content, admin_id=str(admin_id)
        )
    )


@router.post(
    "/warnings", response_model=WarnUserResponse, status_code=status.HTTP_201_CREATED
)
async def warn_user(
    body: WarnUserBody,
    admin_identity: FromDishka[AdminIdentityService],
    use_case: FromDishka[WarnUserUseCase],
    x_admin_token: str | None = Header(default=None),
) -> WarnUserResponse:
    """Issue a warning against an author token."""
    admin_id = admin_identity.require(x_admin_token, "warn users")
    return await use_case.execute(
        WarnUserRequest(
            anonymous_id=body.anonymous_id,
            warning_level=body.warning_level,
            reason=body.reason,
            thread_id=str(body.thread_id) if body.thread_id else None,
            reply_id=str(body.reply_id) if body.reply_id else None,
            admin_id=str(admin_id),
        )
    )


@router.get("/warnings", response_model=ListWarningsResponse)
async def list_warnings(
    admin_identity: FromDishka[AdminIdentityService],
    use_case: FromDishka[ListWarningsUseCase],
    x_admin_token: str | None = Header(default=None),
) -> ListWarningsResponse:
    """Every warning, newest first."""
    admin_identity.require(x_admin_token, "list warnings")
    return await use_case.execute()


@router.post("/news", response_model=NewsItem, status_code=status.HTTP_201_CREATED)
async def publish_news(
    body: PublishNewsRequest,
    admin_identity: FromDishka[AdminIdentityService],
    use_case: FromDishka[PublishNewsUseCase],
    x_admin_token: str | None = Header(default=None),
) -> NewsItem:
    """Publish an announcement."""
    admin_identity.require(x_admin_token, "publish news")
    return await use_case.execute(body)
