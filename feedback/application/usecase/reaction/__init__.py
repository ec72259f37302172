"""Reaction use cases."""

from .cast_reaction import (
    CastReactionRequest,
    CastReactionUseCase,
    ReactionStateResponse,
)
from .get_reactions import GetReactionsRequest, GetReactionsUseCase

__all__ = [
    "CastReactionRequest",
    "CastReactionUseCase",
    "GetReactionsRequest",
    "GetReactionsUseCase",
    "ReactionStateResponse",
]
