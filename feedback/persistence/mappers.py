"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's ORM. The same row shape is used by the PostgreSQL
repositories and the in-memory store.
"""

from typing import Any, Dict
from uuid import UUID

from feedback.domain.model import ModerationWarning, News, Reaction, Reply, Thread
from feedback.domain.value import (
    AdminAuthor,
    AdminId,
    AnonymousAuthor,
    AnonymousId,
    NewsId,
    ReactionId,
    ReactionType,
    ReplyId,
    ThreadId,
    ThreadStatus,
    WarningId,
    WarningLevel,
)


def _uuid(value: Any) -> UUID:
    """Accept UUIDs from asyncpg or strings from other drivers."""
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> UUID | None:
    return _uuid(value) if value else None


def row_to_thread(row: Dict[str, Any]) -> Thread:
    """Convert database row to Thread domain model.

    Args:
        row: Database row as dict

    Returns:
        Thread domain model
    """
    return Thread(
        id=ThreadId(_uuid(row["id"])),
        content=row["content"],
        rating=row["rating"],
        anonymous_id=AnonymousId(row["anonymous_id"]),
        status=ThreadStatus(row["status"]),
        image_url=row.get("image_url"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def thread_to_dict(thread: Thread) -> Dict[str, Any]:
    """Convert Thread domain model to database dict.

    Args:
        thread: Thread domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = thread.model_dump()
    data["status"] = thread.status.value
    return data


def row_to_reply(row: Dict[str, Any]) -> Reply:
    """Convert database row to Reply domain model.

    The row carries two author columns of which exactly one is set.
    """
    if row.get("admin_id"):
        author: AnonymousAuthor | AdminAuthor = AdminAuthor(
            admin_id=AdminId(_uuid(row["admin_id"]))
        )
    else:
        author = AnonymousAuthor(anonymous_id=AnonymousId(row["anonymous_id"]))

    return Reply(
        id=ReplyId(_uuid(row["id"])),
        thread_id=ThreadId(_uuid(row["thread_id"])),
        content=row["content"],
        author=author,
        created_at=row["created_at"],
    )


def reply_to_dict(reply: Reply) -> Dict[str, Any]:
    """Convert Reply domain model to database dict (author flattened to columns)."""
    author = reply.author
    return {
        "id": reply.id,
        "thread_id": reply.thread_id,
        "content": reply.content,
        "anonymous_id": author.anonymous_id.root
        if isinstance(author, AnonymousAuthor)
        else None,
        "admin_id": author.admin_id if isinstance(author, AdminAuthor) else None,
        "created_at": reply.created_at,
    }


def row_to_reaction(row: Dict[str, Any]) -> Reaction:
    """Convert database row to Reaction domain model."""
    return Reaction(
        id=ReactionId(_uuid(row["id"])),
        thread_id=ThreadId(_uuid(row["thread_id"])),
        anonymous_id=AnonymousId(row["anonymous_id"]),
        reaction_type=ReactionType(row["reaction_type"]),
        created_at=row["created_at"],
    )


def reaction_to_dict(reaction: Reaction) -> Dict[str, Any]:
    """Convert Reaction domain model to database dict."""
    data = reaction.model_dump()
    data["reaction_type"] = reaction.reaction_type.value
    return data


def row_to_warning(row: Dict[str, Any]) -> ModerationWarning:
    """Convert database row to ModerationWarning domain model."""
    thread_id = _optional_uuid(row.get("thread_id"))
    reply_id = _optional_uuid(row.get("reply_id"))
    return ModerationWarning(
        id=WarningId(_uuid(row["id"])),
        anonymous_id=AnonymousId(row["anonymous_id"]),
        warning_level=WarningLevel(row["warning_level"]),
        reason=row["reason"],
        thread_id=ThreadId(thread_id) if thread_id else None,
        reply_id=ReplyId(reply_id) if reply_id else None,
        admin_id=AdminId(_uuid(row["admin_id"])),
        created_at=row["created_at"],
    )


def warning_to_dict(warning: ModerationWarning) -> Dict[str, Any]:
    """Convert ModerationWarning domain model to database dict."""
    data = warning.model_dump()
    data["warning_level"] = warning.warning_level.value
    return data


def row_to_news(row: Dict[str, Any]) -> News:
    """Convert database row to News domain model."""
    return News(
        id=NewsId(_uuid(row["id"])),
        title=row["title"],
        content=row["content"],
        display_order=row["display_order"],
        is_active=row["is_active"],
        expires_at=row.get("expires_at"),
        created_at=row["created_at"],
    )


def news_to_dict(news: News) -> Dict[str, Any]:
    """Convert News domain model to database dict."""
    return news.model_dump()
