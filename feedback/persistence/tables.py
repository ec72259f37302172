"""SQLAlchemy table definitions for Feedback Hub.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

thread_status_enum = postgresql.ENUM(
    "active", "archived", "deleted", name="thread_status", create_type=False
)
warning_level_enum = postgresql.ENUM(
    "low", "medium", "high", name="user_warning_level", create_type=False
)

# ============================================================================
# THREADS TABLE
# ============================================================================
threads_table = Table(
    "threads",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("content", Text, nullable=False),
    Column("rating", Integer, nullable=False),
    Column("anonymous_id", String(255), nullable=False),  # Author token
    Column("status", thread_status_enum, nullable=False, server_default="active"),
    Column("image_url", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("rating BETWEEN 1 AND 5", name="rating_range"),
)

Index("idx_threads_created_at", threads_table.c.created_at.desc())
Index("idx_threads_status", threads_table.c.status)

# ============================================================================
# REPLIES TABLE
# ============================================================================
replies_table = Table(
    "replies",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "thread_id", UUID, ForeignKey("threads.id", ondelete="RESTRICT"), nullable=False
    ),
    Column("content", Text, nullable=False),
    Column("anonymous_id", String(255), nullable=True),
    Column("admin_id", UUID, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    # Exactly one author column is set
    CheckConstraint(
        "(anonymous_id IS NULL) <> (admin_id IS NULL)",
        name="single_author",
    ),
)

Index("idx_replies_thread_id", replies_table.c.thread_id)
Index("idx_replies_created_at", replies_table.c.created_at)

# ============================================================================
# THREAD REACTIONS TABLE
# ============================================================================
thread_reactions_table = Table(
    "thread_reactions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "thread_id", UUID, ForeignKey("threads.id", ondelete="CASCADE"), nullable=False
    ),
    Column("anonymous_id", String(255), nullable=False),  # Vote identity
    Column("reaction_type", String(16), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("thread_id", "anonymous_id", name="uq_thread_reaction"),
    CheckConstraint(
        "reaction_type IN ('like', 'dislike')", name="reaction_type_valid"
    ),
)

Index("idx_thread_reactions_thread_id", thread_reactions_table.c.thread_id)

# ============================================================================
# USER WARNINGS TABLE
# ============================================================================
user_warnings_table = Table(
    "user_warnings",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("anonymous_id", String(255), nullable=False),  # Target, matched by value
    Column("warning_level", warning_level_enum, nullable=False),
    Column("reason", Text, nullable=False),
    Column(
        "thread_id", UUID, ForeignKey("threads.id", ondelete="SET NULL"), nullable=True
    ),
    Column(
        "reply_id", UUID, ForeignKey("replies.id", ondelete="SET NULL"), nullable=True
    ),
    Column("admin_id", UUID, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_user_warnings_anonymous_id", user_warnings_table.c.anonymous_id)
Index("idx_user_warnings_thread_id", user_warnings_table.c.thread_id)
Index("idx_user_warnings_created_at", user_warnings_table.c.created_at.desc())

# ============================================================================
# NEWS TABLE
# ============================================================================
news_table = Table(
    "news",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("title", String(200), nullable=False),
    Column("content", Text, nullable=False),
    Column("display_order", Integer, nullable=False, server_default="0"),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_news_display_order", news_table.c.display_order)
