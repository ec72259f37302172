"""Reaction entity.

Reactions are like/dislike votes on a thread, keyed by the voter's
anonymous vote identity.
"""

from datetime import datetime

from pydantic import Field

from feedback.domain.model.common import DomainModel
from feedback.domain.value import AnonymousId, ReactionId, ReactionType, ThreadId


class Reaction(DomainModel):
    """Reaction entity.

    Business rules:
    - One reaction per (thread, vote identity), enforced by a unique key
    - Casting the same type again removes it, a different type replaces it
    """

    id: ReactionId
    thread_id: ThreadId
    anonymous_id: AnonymousId
    reaction_type: ReactionType
    created_at: datetime = Field(default_factory=datetime.now)
