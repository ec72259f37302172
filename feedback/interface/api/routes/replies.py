"""Reply routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel

from feedback.application.usecase.reply import (
    ListRepliesRequest,
    ListRepliesResponse,
    ListRepliesUseCase,
    SubmitReplyRequest,
    SubmitReplyUseCase,
)
from feedback.application.usecase.view import ReplyItem

router = APIRouter(prefix="/threads", tags=["replies"], route_class=DishkaRoute)


class ReplyBody(BaseModel):
    """Body of a reply submission."""

    content: str


@router.get("/{thread_id}/replies", response_model=ListRepliesResponse)
async def list_replies(
    thread_id: UUID,
    use_case: FromDishka[ListRepliesUseCase],
) -> ListRepliesResponse:
    """List a thread's replies, oldest first, with author warning badges."""
    return await use_case.execute(ListRepliesRequest(thread_id=str(thread_id)))


@router.post(
    "/{thread_id}/replies",
    response_model=ReplyItem,
    status_code=status.HTTP_201_CREATED,
)
async def submit_reply(
    thread_id: UUID,
    body: ReplyBody,
    use_case: FromDishka[SubmitReplyUseCase],
) -> ReplyItem:
    """Reply anonymously to a thread."""
    return await use_case.execute(
        SubmitReplyRequest(thread_id=str(thread_id), content=body.content)
    )
