"""Thread routes (public board)."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, Request, status
from pydantic import BaseModel

from feedback.application.usecase.thread import (
    ListActiveThreadsRequest,
    ListActiveThreadsResponse,
    ListActiveThreadsUseCase,
    SubmitThreadRequest,
    SubmitThreadResponse,
    SubmitThreadUseCase,
)
from feedback.application.usecase.view import ThreadListItem
from feedback.config import IdentitySettings
from feedback.interface.api.cookies import read_vote_identity

router = APIRouter(prefix="/threads", tags=["threads"], route_class=DishkaRoute)


class LiveBoardResponse(BaseModel):
    """Snapshot kept by the live board feed."""

    threads: list[ThreadListItem]
    version: int  # Increases on every refresh


@router.get("", response_model=ListActiveThreadsResponse)
async def list_threads(
    request: Request,
    use_case: FromDishka[ListActiveThreadsUseCase],
    identity_settings: FromDishka[IdentitySettings],
    limit: int = Query(default=50, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
) -> ListActiveThreadsResponse:
    """List active threads, newest first.

    When the caller carries a vote identity cookie, each thread reports the
    caller's current vote. Listing never creates an identity.
    """
    return await use_case.execute(
        ListActiveThreadsRequest(
            limit=limit,
            offset=offset,
            vote_identity=read_vote_identity(request, identity_settings),
        )
    )


@router.post(
    "", response_model=SubmitThreadResponse, status_code=status.HTTP_201_CREATED
)
async def submit_thread(
    body: SubmitThreadRequest,
    use_case: FromDishka[SubmitThreadUseCase],
) -> SubmitThreadResponse:
    """Post a new anonymous feedback thread.

    Raises (via error handlers):
        400: Blank or too long content, rating outside 1-5
    """
    return await use_case.execute(body)


@router.get("/live", response_model=LiveBoardResponse)
async def live_board(request: Request) -> LiveBoardResponse:
    """Newest active threads as last re-fetched after a thread change.

    Clients can poll this cheaply and compare ``version`` to notice
    inserts, archives and deletions.

    Raises:
        503: If the live board feed is not running
    """
    feed = getattr(request.app.state, "thread_feed", None)
    if feed is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Live board is not running",
        )
    return LiveBoardResponse(threads=feed.snapshot, version=feed.refresh_count)
