"""Unit tests for SubmitThreadUseCase."""

import pytest

from feedback.application.usecase.thread import (
    ListActiveThreadsRequest,
    ListActiveThreadsUseCase,
    SubmitThreadRequest,
    SubmitThreadUseCase,
)
from feedback.config import ContentSettings
from feedback.domain.error import ValidationError
from feedback.domain.value import ThreadStatus
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestSubmitThreadUseCase:
    """Tests for SubmitThreadUseCase."""

    @pytest.mark.asyncio
    async def test_submit_thread(self, unit_env):
        """Submitted threads appear on the board."""
        # Arrange
        submit = await unit_env.get(SubmitThreadUseCase)
        list_threads = await unit_env.get(ListActiveThreadsUseCase)

        # Act
        response = await submit.execute(
            SubmitThreadRequest(content="Great board", rating=5)
        )

        # Assert
        assert response.status == ThreadStatus.ACTIVE
        assert response.anonymous_id.startswith("anon_")
        board = await list_threads.execute(ListActiveThreadsRequest())
        assert [t.thread_id for t in board.threads] == [response.thread_id]

    @pytest.mark.asyncio
    async def test_content_at_length_cap_accepted(self, unit_env):
        """Content exactly at the form cap is fine."""
        submit = await unit_env.get(SubmitThreadUseCase)
        settings = await unit_env.get(ContentSettings)
        content = "x" * settings.thread_max_length

        response = await submit.execute(SubmitThreadRequest(content=content, rating=3))

        assert response.content == content

    @pytest.mark.asyncio
    async def test_content_over_length_cap_rejected(self, unit_env):
        """Content one character over the cap is rejected."""
        submit = await unit_env.get(SubmitThreadUseCase)
        settings = await unit_env.get(ContentSettings)

        with pytest.raises(ValidationError):
            await submit.execute(
                SubmitThreadRequest(
                    content="x" * (settings.thread_max_length + 1), rating=3
                )
            )

    @pytest.mark.asyncio
    async def test_invalid_rating_rejected(self, unit_env):
        """The rating range is enforced on submission."""
        submit = await unit_env.get(SubmitThreadUseCase)

        with pytest.raises(ValidationError):
            await submit.execute(SubmitThreadRequest(content="Meh", rating=0))
