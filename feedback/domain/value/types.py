"""Domain value objects for Feedback Hub.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and small pieces of business logic.
"""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import Field, field_validator

from feedback.domain.value.common import RootValueObject, ValueObject
from feedback.domain.value.identifiers import AdminId


class ThreadStatus(str, Enum):
    """Moderation status of a thread.

    Moderation is one-directional: nothing ever returns to ACTIVE.
    """

    ACTIVE = "active"
    ARCHIVED = "archived"
    DELETED = "deleted"

    def can_transition_to(self, target: "ThreadStatus") -> bool:
        """Whether moving from this status to ``target`` is allowed."""
        return target in _ALLOWED_TRANSITIONS[self]


_ALLOWED_TRANSITIONS: dict[ThreadStatus, frozenset[ThreadStatus]] = {
    ThreadStatus.ACTIVE: frozenset({ThreadStatus.ARCHIVED, ThreadStatus.DELETED}),
    ThreadStatus.ARCHIVED: frozenset({ThreadStatus.DELETED}),
    ThreadStatus.DELETED: frozenset(),
}


class ReactionType(str, Enum):
    """Type of reaction a visitor can leave on a thread."""

    LIKE = "like"
    DISLIKE = "dislike"


class WarningLevel(str, Enum):
    """Severity of a moderation warning, ordered LOW < MEDIUM < HIGH."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def severity(self) -> int:
        """Numeric rank used for precedence comparisons."""
        return _SEVERITY[self]


_SEVERITY = {WarningLevel.LOW: 1, WarningLevel.MEDIUM: 2, WarningLevel.HIGH: 3}


class AnonymousId(RootValueObject[str]):
    """Opaque anonymous identity token.

    Used both as an authorship tag (``anon_...``) and as a vote
    deduplication key (``session_...``). Matching is plain string equality.
    """

    @field_validator("root")
    @classmethod
    def validate_token(cls, v: str) -> str:
        """Validate token is not empty and within length limits."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Anonymous id must be 1-255 characters")
        return v


class AnonymousAuthor(ValueObject):
    """Reply written by an anonymous visitor."""

    kind: Literal["anonymous"] = "anonymous"
    anonymous_id: AnonymousId


class AdminAuthor(ValueObject):
    """Reply written by the moderator."""

    kind: Literal["admin"] = "admin"
    admin_id: AdminId


# Exactly one of the two, by construction
Author = Annotated[Union[AnonymousAuthor, AdminAuthor], Field(discriminator="kind")]


class ReactionCounts(ValueObject):
    """Aggregate like/dislike counts for a thread."""

    likes: int = Field(default=0, ge=0)
    dislikes: int = Field(default=0, ge=0)
