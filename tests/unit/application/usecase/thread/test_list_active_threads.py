"""Unit tests for ListActiveThreadsUseCase."""

import pytest

from feedback.application.usecase.thread import (
    ListActiveThreadsRequest,
    ListActiveThreadsUseCase,
)
from feedback.domain.repository import ThreadRepository
from feedback.domain.service import (
    ModerationService,
    ReactionService,
    ReplyService,
    WarningService,
)
from feedback.domain.value import (
    AdminAuthor,
    AnonymousId,
    ReactionType,
    ThreadStatus,
    WarningLevel,
)
from tests.conftest import ADMIN_ID, at, make_thread
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

VOTER = "session_1700000000000_vvvvvvvvv"


class TestListActiveThreadsUseCase:
    """Tests for ListActiveThreadsUseCase."""

    @pytest.mark.asyncio
    async def test_board_shows_counts_badges_and_my_vote(self, unit_env):
        """Each item carries reaction counts, reply count, badge and my vote."""
        # Arrange
        use_case = await unit_env.get(ListActiveThreadsUseCase)
        thread_repo = await unit_env.get(ThreadRepository)
        reaction_service = await unit_env.get(ReactionService)
        reply_service = await unit_env.get(ReplyService)
        warning_service = await unit_env.get(WarningService)

        thread = await thread_repo.save(make_thread("Busy", created_at=at(2)))
        quiet = await thread_repo.save(make_thread("Quiet", created_at=at(1)))
        await reaction_service.cast_reaction(
            thread.id, AnonymousId(VOTER), ReactionType.LIKE
        )
        await reply_service.submit_reply(
            thread.id, "Noted", AdminAuthor(admin_id=ADMIN_ID)
        )
        await warning_service.issue_warning(
            thread.anonymous_id, WarningLevel.HIGH, "Rude", ADMIN_ID
        )

        # Act
        response = await use_case.execute(
            ListActiveThreadsRequest(vote_identity=VOTER)
        )

        # Assert
        assert response.total == 2
        busy_item, quiet_item = response.threads
        assert busy_item.thread_id == str(thread.id)
        assert busy_item.likes == 1
        assert busy_item.dislikes == 0
        assert busy_item.reply_count == 1
        assert busy_item.my_reaction == ReactionType.LIKE
        assert busy_item.author_warning.level == WarningLevel.HIGH
        assert quiet_item.thread_id == str(quiet.id)
        assert quiet_item.author_warning is None
        assert quiet_item.my_reaction is None

    @pytest.mark.asyncio
    async def test_without_vote_identity_no_vote_reported(self, unit_env):
        """Anonymous visitors without a vote token see no my_reaction."""
        use_case = await unit_env.get(ListActiveThreadsUseCase)
        thread_repo = await unit_env.get(ThreadRepository)
        reaction_service = await unit_env.get(ReactionService)
        thread = await thread_repo.save(make_thread())
        await reaction_service.cast_reaction(
            thread.id, AnonymousId(VOTER), ReactionType.DISLIKE
        )

        response = await use_case.execute(ListActiveThreadsRequest())

        assert response.threads[0].my_reaction is None
        assert response.threads[0].dislikes == 1

    @pytest.mark.asyncio
    async def test_archived_thread_leaves_board(self, unit_env):
        """Submit, archive, list: the archived thread is gone."""
        # Arrange
        use_case = await unit_env.get(ListActiveThreadsUseCase)
        moderation_service = await unit_env.get(ModerationService)
        thread_repo = await unit_env.get(ThreadRepository)
        thread = await thread_repo.save(make_thread())

        # Act
        await moderation_service.archive(thread.id, ADMIN_ID)
        response = await use_case.execute(ListActiveThreadsRequest())

        # Assert
        assert response.threads == []
        assert response.total == 0

    @pytest.mark.asyncio
    async def test_pagination_reports_total(self, unit_env):
        """Total counts every active thread, not just the page."""
        use_case = await unit_env.get(ListActiveThreadsUseCase)
        thread_repo = await unit_env.get(ThreadRepository)
        for i in range(3):
            await thread_repo.save(make_thread(f"Thread {i}", created_at=at(i)))
        await thread_repo.save(make_thread(status=ThreadStatus.DELETED))

        response = await use_case.execute(ListActiveThreadsRequest(limit=2, offset=0))

        assert len(response.threads) == 2
        assert response.total == 3
        assert response.threads[0].content == "Thread 2"
