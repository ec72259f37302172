"""initial_schema

Create the schema for Feedback Hub:
- Threads (rated anonymous feedback, moderation status)
- Replies (anonymous or moderator author)
- Thread reactions (one like/dislike per thread and vote identity)
- User warnings (append-only, matched to authors by token)
- News (announcements above the board)

Revision ID: 3f1c2a9d8e47
Revises:
Create Date: 2026-10-19 10:12:04.511238

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d8e47"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamp(name: str) -> sa.Column:
    return sa.Column(
        name,
        sa.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def _id() -> sa.Column:
    return sa.Column(
        "id", sa.UUID(), server_default=sa.text("gen_random_uuid()"), nullable=False
    )


def upgrade() -> None:
    """Upgrade schema."""
    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE thread_status AS ENUM ('active', 'archived', 'deleted');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE user_warning_level AS ENUM ('low', 'medium', 'high');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # THREADS table
    # ========================================================================
    op.create_table(
        "threads",
        _id(),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("rating", sa.Integer(), nullable=False),
        sa.Column("anonymous_id", sa.String(255), nullable=False),
        sa.Column(
            "status",
            postgresql.ENUM(
                "active",
                "archived",
                "deleted",
                name="thread_status",
                create_type=False,
            ),
            nullable=False,
            server_default="active",
        ),
        sa.Column("image_url", sa.Text(), nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("rating BETWEEN 1 AND 5", name="rating_range"),
    )
    op.create_index(
        "idx_threads_created_at", "threads", [sa.text("created_at DESC")]
    )
    op.create_index("idx_threads_status", "threads", ["status"])

    # ========================================================================
    # REPLIES table
    # ========================================================================
    op.create_table(
        "replies",
        _id(),
        sa.Column("thread_id", sa.UUID(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("anonymous_id", sa.String(255), nullable=True),
        sa.Column("admin_id", sa.UUID(), nullable=True),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["thread_id"], ["threads.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "(anonymous_id IS NULL) <> (admin_id IS NULL)", name="single_author"
        ),
    )
    op.create_index("idx_replies_thread_id", "replies", ["thread_id"])
    op.create_index("idx_replies_created_at", "replies", ["created_at"])

    # ========================================================================
    # THREAD_REACTIONS table
    # ========================================================================
    op.create_table(
        "thread_reactions",
        _id(),
        sa.Column("thread_id", sa.UUID(), nullable=False),
        sa.Column("anonymous_id", sa.String(255), nullable=False),
        sa.Column("reaction_type", sa.String(16), nullable=False),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["thread_id"], ["threads.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("thread_id", "anonymous_id", name="uq_thread_reaction"),
        sa.CheckConstraint(
            "reaction_type IN ('like', 'dislike')", name="reaction_type_valid"
        ),
    )
    op.create_index(
        "idx_thread_reactions_thread_id", "thread_reactions", ["thread_id"]
    )

    # ========================================================================
    # USER_WARNINGS table
    # ========================================================================
    op.create_table(
        "user_warnings",
        _id(),
        sa.Column("anonymous_id", sa.String(255), nullable=False),
        sa.Column(
            "warning_level",
            postgresql.ENUM(
                "low", "medium", "high", name="user_warning_level", create_type=False
            ),
            nullable=False,
        ),
        sa.Column("reason", sa.Text(), nullable=False),
        sa.Column("thread_id", sa.UUID(), nullable=True),
        sa.Column("reply_id", sa.UUID(), nullable=True),
        sa.Column("admin_id", sa.UUID(), nullable=False),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["thread_id"], ["threads.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["reply_id"], ["replies.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_user_warnings_anonymous_id", "user_warnings", ["anonymous_id"]
    )
    op.create_index("idx_user_warnings_thread_id", "user_warnings", ["thread_id"])
    op.create_index(
        "idx_user_warnings_created_at",
        "user_warnings",
        [sa.text("created_at DESC")],
    )

    # ========================================================================
    # NEWS table
    # ========================================================================
    op.create_table(
        "news",
        _id(),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("display_order", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column("expires_at", sa.TIMESTAMP(timezone=True), nullable=True),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_news_display_order", "news", ["display_order"])


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("news")
    op.drop_table("user_warnings")
    op.drop_table("thread_reactions")
    op.drop_table("replies")
    op.drop_table("threads")

    # Drop ENUM types
    op.execute("DROP TYPE IF EXISTS user_warning_level")
    op.execute("DROP TYPE IF EXISTS thread_status")
