"""Unit tests for the reply use cases."""

from uuid import uuid4

import pytest

from feedback.application.usecase.reply import (
    ListRepliesRequest,
    ListRepliesUseCase,
    SubmitReplyRequest,
    SubmitReplyUseCase,
)
from feedback.config import ContentSettings
from feedback.domain.error import NotFoundError, ValidationError
from feedback.domain.repository import ReplyRepository, ThreadRepository
from feedback.domain.service import ModerationService, WarningService
from feedback.domain.value import AnonymousId, ThreadStatus, WarningLevel
from tests.conftest import ADMIN_ID, make_thread
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestSubmitReplyUseCase:
    """Tests for SubmitReplyUseCase."""

    @pytest.mark.asyncio
    async def test_each_reply_gets_own_identity(self, unit_env):
        """Two replies by the same visitor are not linkable."""
        # Arrange
        use_case = await unit_env.get(SubmitReplyUseCase)
        thread_repo = await unit_env.get(ThreadRepository)
        thread = await thread_repo.save(make_thread())

        # Act
        first = await use_case.execute(
            SubmitReplyRequest(thread_id=str(thread.id), content="One")
        )
        second = await use_case.execute(
            SubmitReplyRequest(thread_id=str(thread.id), content="Two")
        )

        # Assert
        assert first.anonymous_id.startswith("anon_")
        assert first.anonymous_id != second.anonymous_id
        assert not first.is_admin

    @pytest.mark.asyncio
    async def test_reply_over_length_cap_rejected(self, unit_env):
        """Replies are capped on submission."""
        use_case = await unit_env.get(SubmitReplyUseCase)
        settings = await unit_env.get(ContentSettings)
        thread_repo = await unit_env.get(ThreadRepository)
        thread = await thread_repo.save(make_thread())

        with pytest.raises(ValidationError):
            await use_case.execute(
                SubmitReplyRequest(
                    thread_id=str(thread.id),
                    content="x" * (settings.reply_max_length + 1),
                )
            )

    @pytest.mark.asyncio
    async def test_reply_to_missing_thread(self, unit_env):
        """Unknown threads cannot be replied to."""
        use_case = await unit_env.get(SubmitReplyUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                SubmitReplyRequest(thread_id=str(uuid4()), content="Hello")
            )

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [ThreadStatus.ARCHIVED, ThreadStatus.DELETED])
    async def test_reply_to_hidden_thread(self, unit_env, status):
        """Archived and deleted threads take no public replies."""
        # Arrange
        use_case = await unit_env.get(SubmitReplyUseCase)
        reply_repo = await unit_env.get(ReplyRepository)
        thread_repo = await unit_env.get(ThreadRepository)
        thread = await thread_repo.save(make_thread(status=status))

        # Act
        with pytest.raises(NotFoundError):
            await use_case.execute(
                SubmitReplyRequest(thread_id=str(thread.id), content="Hello")
            )

        # Assert
        assert await reply_repo.find_by_thread(thread.id) == []


class TestListRepliesUseCase:
    """Tests for ListRepliesUseCase."""

    @pytest.mark.asyncio
    async def test_list_replies_with_badges(self, unit_env):
        """Warned authors carry their effective badge; admin replies none."""
        # Arrange
        submit = await unit_env.get(SubmitReplyUseCase)
        list_replies = await unit_env.get(ListRepliesUseCase)
        moderation_service = await unit_env.get(ModerationService)
        warning_service = await unit_env.get(WarningService)
        thread_repo = await unit_env.get(ThreadRepository)
        thread = await thread_repo.save(make_thread())

        reply = await submit.execute(
            SubmitReplyRequest(thread_id=str(thread.id), content="Hot take")
        )
        await moderation_service.reply_as_admin(thread.id, "Calm down", ADMIN_ID)
        await warning_service.issue_warning(
            AnonymousId(reply.anonymous_id), WarningLevel.MEDIUM, "Tone", ADMIN_ID
        )

        # Act
        response = await list_replies.execute(
            ListRepliesRequest(thread_id=str(thread.id))
        )

        # Assert
        assert response.total == 2
        anon_item, admin_item = response.replies
        assert anon_item.author_warning.level == WarningLevel.MEDIUM
        assert admin_item.is_admin
        assert admin_item.anonymous_id is None
        assert admin_item.author_warning is None

    @pytest.mark.asyncio
    async def test_list_replies_missing_thread(self, unit_env):
        """Listing replies of an unknown thread raises NotFoundError."""
        list_replies = await unit_env.get(ListRepliesUseCase)

        with pytest.raises(NotFoundError):
            await list_replies.execute(ListRepliesRequest(thread_id=str(uuid4())))

    @pytest.mark.asyncio
    async def test_list_replies_of_deleted_thread(self, unit_env):
        """A deleted thread's conversation is not served publicly."""
        list_replies = await unit_env.get(ListRepliesUseCase)
        moderation_service = await unit_env.get(ModerationService)
        thread_repo = await unit_env.get(ThreadRepository)
        thread = await thread_repo.save(make_thread())
        await moderation_service.reply_as_admin(thread.id, "Noted", ADMIN_ID)
        await moderation_service.remove(thread.id, ADMIN_ID)

        with pytest.raises(NotFoundError):
            await list_replies.execute(ListRepliesRequest(thread_id=str(thread.id)))
