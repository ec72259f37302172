"""Reaction routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, Response
from pydantic import BaseModel

from feedback.application.usecase.reaction import (
    CastReactionRequest,
    CastReactionUseCase,
    GetReactionsRequest,
    GetReactionsUseCase,
    ReactionStateResponse,
)
from feedback.config import IdentitySettings
from feedback.domain.service import IdentityService
from feedback.domain.value import ReactionType
from feedback.interface.api.cookies import CookieIdentityStorage, read_vote_identity

router = APIRouter(prefix="/threads", tags=["reactions"], route_class=DishkaRoute)


class ReactionBody(BaseModel):
    """Body of a reaction cast."""

    reaction_type: ReactionType


@router.post("/{thread_id}/reactions", response_model=ReactionStateResponse)
async def cast_reaction(
    thread_id: UUID,
    body: ReactionBody,
    request: Request,
    response: Response,
    use_case: FromDishka[CastReactionUseCase],
    identity_service: FromDishka[IdentityService],
    identity_settings: FromDishka[IdentitySettings],
) -> ReactionStateResponse:
    """Toggle a like or dislike.

    Casting the caller's current vote again removes it. The vote identity
    cookie is issued on the first vote from a browser.
    """
    storage = CookieIdentityStorage(request, response, identity_settings)
    vote_identity = identity_service.get_or_create_vote_identity(storage)

    return await use_case.execute(
        CastReactionRequest(
            thread_id=str(thread_id),
            vote_identity=vote_identity.root,
            reaction_type=body.reaction_type,
        )
    )


@router.get("/{thread_id}/reactions", response_model=ReactionStateResponse)
async def get_reactions(
    thread_id: UUID,
    request: Request,
    use_case: FromDishka[GetReactionsUseCase],
    identity_settings: FromDishka[IdentitySettings],
) -> ReactionStateResponse:
    """Counts on a thread and the caller's current vote."""
    return await use_case.execute(
        GetReactionsRequest(
            thread_id=str(thread_id),
            vote_identity=read_vote_identity(request, identity_settings),
        )
    )
