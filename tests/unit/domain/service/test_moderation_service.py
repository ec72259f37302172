"""Unit tests for ModerationService."""

from uuid import uuid4

import pytest

from feedback.domain.error import (
    InvalidStatusTransitionError,
    NotFoundError,
    ValidationError,
)
from feedback.domain.repository import ThreadRepository
from feedback.domain.service import (
    ModerationService,
    ReplyService,
    ThreadService,
    WarningService,
)
from feedback.domain.value import (
    AnonymousAuthor,
    AnonymousId,
    ReplyId,
    ThreadId,
    ThreadStatus,
    WarningLevel,
)
from tests.conftest import ADMIN_ID, make_thread
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestModerateThreads:
    """Tests for archive and remove."""

    @pytest.mark.asyncio
    async def test_archive_hides_from_board_but_keeps_record(self, unit_env):
        """Submit, archive, list: the board is empty and the audit keeps it."""
        # Arrange
        moderation_service = await unit_env.get(ModerationService)
        thread_service = await unit_env.get(ThreadService)
        thread = await thread_service.submit_thread("Spam", 1)

        # Act
        archived = await moderation_service.archive(thread.id, ADMIN_ID)

        # Assert
        assert archived.status == ThreadStatus.ARCHIVED
        assert await thread_service.list_active_threads() == []
        audit = await thread_service.list_all_threads()
        assert [t.id for t in audit] == [thread.id]

    @pytest.mark.asyncio
    async def test_remove_is_a_tombstone(self, unit_env):
        """Deleted threads stay in storage with status DELETED."""
        moderation_service = await unit_env.get(ModerationService)
        thread_repo = await unit_env.get(ThreadRepository)
        thread = await thread_repo.save(make_thread())

        await moderation_service.remove(thread.id, ADMIN_ID)

        stored = await thread_repo.find_by_id(thread.id)
        assert stored.status == ThreadStatus.DELETED

    @pytest.mark.asyncio
    async def test_archive_after_delete_rejected(self, unit_env):
        """A deleted thread cannot be archived."""
        moderation_service = await unit_env.get(ModerationService)
        thread_repo = await unit_env.get(ThreadRepository)
        thread = await thread_repo.save(make_thread(status=ThreadStatus.DELETED))

        with pytest.raises(InvalidStatusTransitionError):
            await moderation_service.archive(thread.id, ADMIN_ID)


class TestModeratorReplies:
    """Tests for reply_as_admin."""

    @pytest.mark.asyncio
    async def test_reply_as_admin(self, unit_env):
        """Moderator replies are attributed to the admin id."""
        moderation_service = await unit_env.get(ModerationService)
        thread_repo = await unit_env.get(ThreadRepository)
        thread = await thread_repo.save(make_thread())

        reply = await moderation_service.reply_as_admin(
            thread.id, "We are on it", ADMIN_ID
        )

        assert reply.is_admin_reply
        assert reply.author.admin_id == ADMIN_ID


class TestWarn:
    """Tests for warn."""

    @pytest.mark.asyncio
    async def test_warn_thread_author(self, unit_env):
        """Warning a thread's author records the thread context."""
        # Arrange
        moderation_service = await unit_env.get(ModerationService)
        warning_service = await unit_env.get(WarningService)
        thread_repo = await unit_env.get(ThreadRepository)
        thread = await thread_repo.save(make_thread())

        # Act
        warning = await moderation_service.warn(
            target=thread.anonymous_id,
            level=WarningLevel.MEDIUM,
            reason="Be civil",
            admin_id=ADMIN_ID,
            thread_id=thread.id,
        )

        # Assert
        assert warning.thread_id == thread.id
        assert await warning_service.warnings_for_thread(thread.id) == [warning]

    @pytest.mark.asyncio
    async def test_warn_with_missing_thread_context(self, unit_env):
        """A context thread must exist."""
        moderation_service = await unit_env.get(ModerationService)
        thread = make_thread()

        with pytest.raises(NotFoundError):
            await moderation_service.warn(
                target=thread.anonymous_id,
                level=WarningLevel.LOW,
                reason="Nope",
                admin_id=ADMIN_ID,
                thread_id=ThreadId(uuid4()),
            )

    @pytest.mark.asyncio
    async def test_warn_reply_author_records_reply_thread(self, unit_env):
        """A reply context fills in the thread the reply belongs to."""
        # Arrange
        moderation_service = await unit_env.get(ModerationService)
        reply_service = await unit_env.get(ReplyService)
        thread_repo = await unit_env.get(ThreadRepository)
        thread = await thread_repo.save(make_thread())
        author = AnonymousAuthor(anonymous_id=AnonymousId("anon_1_replier01"))
        reply = await reply_service.submit_reply(thread.id, "Rude reply", author)

        # Act
        warning = await moderation_service.warn(
            target=author.anonymous_id,
            level=WarningLevel.HIGH,
            reason="Abusive",
            admin_id=ADMIN_ID,
            reply_id=reply.id,
        )

        # Assert
        assert warning.reply_id == reply.id
        assert warning.thread_id == thread.id

    @pytest.mark.asyncio
    async def test_warn_with_missing_reply_context(self, unit_env):
        """A context reply must exist."""
        moderation_service = await unit_env.get(ModerationService)
        thread = make_thread()

        with pytest.raises(NotFoundError):
            await moderation_service.warn(
                target=thread.anonymous_id,
                level=WarningLevel.LOW,
                reason="Nope",
                admin_id=ADMIN_ID,
                reply_id=ReplyId(uuid4()),
            )

    @pytest.mark.asyncio
    async def test_warn_with_reply_from_another_thread(self, unit_env):
        """The reply context must belong to the thread context."""
        moderation_service = await unit_env.get(ModerationService)
        reply_service = await unit_env.get(ReplyService)
        warning_service = await unit_env.get(WarningService)
        thread_repo = await unit_env.get(ThreadRepository)
        first = await thread_repo.save(make_thread())
        second = await thread_repo.save(make_thread())
        author = AnonymousAuthor(anonymous_id=AnonymousId("anon_1_replier01"))
        reply = await reply_service.submit_reply(first.id, "On the first", author)

        with pytest.raises(ValidationError):
            await moderation_service.warn(
                target=author.anonymous_id,
                level=WarningLevel.MEDIUM,
                reason="Wrong context",
                admin_id=ADMIN_ID,
                thread_id=second.id,
                reply_id=reply.id,
            )

        assert await warning_service.warnings_for(author.anonymous_id) == []
