"""Unit tests for ReactionService."""

from datetime import datetime
from uuid import uuid4

import pytest

from feedback.domain.error import NotFoundError, PersistenceError
from feedback.domain.model import Reaction
from feedback.domain.repository import ReactionRepository, ThreadRepository
from feedback.domain.service import ReactionService
from feedback.domain.value import (
    AnonymousId,
    ReactionCounts,
    ReactionId,
    ReactionType,
    ThreadId,
)
from tests.conftest import make_thread
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

VOTER_A = AnonymousId("session_1700000000000_aaaaaaaaa")
VOTER_B = AnonymousId("session_1700000000000_bbbbbbbbb")


class TestCastReaction:
    """Tests for the toggle behaviour of cast_reaction."""

    @pytest.mark.asyncio
    async def test_first_like_is_added(self, unit_env):
        """A new vote is counted."""
        # Arrange
        reaction_service = await unit_env.get(ReactionService)
        thread_repo = await unit_env.get(ThreadRepository)
        thread = await thread_repo.save(make_thread())

        # Act
        counts = await reaction_service.cast_reaction(
            thread.id, VOTER_A, ReactionType.LIKE
        )

        # Assert
        assert counts == ReactionCounts(likes=1, dislikes=0)
        assert await reaction_service.get_reaction(thread.id, VOTER_A) == (
            ReactionType.LIKE
        )

    @pytest.mark.asyncio
    async def test_same_reaction_twice_removes_it(self, unit_env):
        """Casting the current vote again clears it."""
        reaction_service = await unit_env.get(ReactionService)
        thread_repo = await unit_env.get(ThreadRepository)
        thread = await thread_repo.save(make_thread())

        await reaction_service.cast_reaction(thread.id, VOTER_A, ReactionType.LIKE)
        counts = await reaction_service.cast_reaction(
            thread.id, VOTER_A, ReactionType.LIKE
        )

        assert counts == ReactionCounts(likes=0, dislikes=0)
        assert await reaction_service.get_reaction(thread.id, VOTER_A) is None

    @pytest.mark.asyncio
    async def test_opposite_reaction_switches(self, unit_env):
        """Casting the other type replaces the vote instead of adding one."""
        # Arrange
        reaction_service = await unit_env.get(ReactionService)
        reaction_repo = await unit_env.get(ReactionRepository)
        thread_repo = await unit_env.get(ThreadRepository)
        thread = await thread_repo.save(make_thread())
        await reaction_service.cast_reaction(thread.id, VOTER_A, ReactionType.LIKE)

        # Act
        counts = await reaction_service.cast_reaction(
            thread.id, VOTER_A, ReactionType.DISLIKE
        )

        # Assert
        assert counts == ReactionCounts(likes=0, dislikes=1)
        assert len(await reaction_repo.find_by_thread(thread.id)) == 1

    @pytest.mark.asyncio
    async def test_two_voters_scenario(self, unit_env):
        """A likes, B dislikes, A switches to dislike: 0 likes, 2 dislikes."""
        # Arrange
        reaction_service = await unit_env.get(ReactionService)
        thread_repo = await unit_env.get(ThreadRepository)
        thread = await thread_repo.save(make_thread())

        # Act
        await reaction_service.cast_reaction(thread.id, VOTER_A, ReactionType.LIKE)
        await reaction_service.cast_reaction(thread.id, VOTER_B, ReactionType.DISLIKE)
        counts = await reaction_service.cast_reaction(
            thread.id, VOTER_A, ReactionType.DISLIKE
        )

        # Assert
        assert counts == ReactionCounts(likes=0, dislikes=2)
        assert await reaction_service.get_counts(thread.id) == counts

    @pytest.mark.asyncio
    async def test_cast_on_missing_thread(self, unit_env):
        """Votes need an existing thread."""
        reaction_service = await unit_env.get(ReactionService)

        with pytest.raises(NotFoundError):
            await reaction_service.cast_reaction(
                ThreadId(uuid4()), VOTER_A, ReactionType.LIKE
            )

    @pytest.mark.asyncio
    async def test_store_rejects_second_row_for_same_identity(self, unit_env):
        """At most one reaction row per (thread, identity)."""
        # Arrange
        reaction_service = await unit_env.get(ReactionService)
        reaction_repo = await unit_env.get(ReactionRepository)
        thread_repo = await unit_env.get(ThreadRepository)
        thread = await thread_repo.save(make_thread())
        await reaction_service.cast_reaction(thread.id, VOTER_A, ReactionType.LIKE)

        store = reaction_repo.store
        duplicate = {
            "id": ReactionId(uuid4()),
            "thread_id": thread.id,
            "anonymous_id": VOTER_A.root,
            "reaction_type": ReactionType.DISLIKE.value,
            "created_at": datetime.now(),
        }

        # Act & Assert
        with pytest.raises(PersistenceError):
            await store.insert("thread_reactions", duplicate)

        assert await reaction_service.get_counts(thread.id) == ReactionCounts(
            likes=1, dislikes=0
        )


class TestBatchLookups:
    """Tests for the per-page lookups."""

    @pytest.mark.asyncio
    async def test_counts_and_reactions_for_threads(self, unit_env):
        """One call covers every thread on the page."""
        # Arrange
        reaction_service = await unit_env.get(ReactionService)
        thread_repo = await unit_env.get(ThreadRepository)
        liked = await thread_repo.save(make_thread("Liked"))
        disliked = await thread_repo.save(make_thread("Disliked"))
        untouched = await thread_repo.save(make_thread("Untouched"))
        await reaction_service.cast_reaction(liked.id, VOTER_A, ReactionType.LIKE)
        await reaction_service.cast_reaction(liked.id, VOTER_B, ReactionType.LIKE)
        await reaction_service.cast_reaction(
            disliked.id, VOTER_A, ReactionType.DISLIKE
        )
        ids = [liked.id, disliked.id, untouched.id]

        # Act
        counts = await reaction_service.get_counts_for_threads(ids)
        mine = await reaction_service.get_reactions_for_threads(VOTER_A, ids)

        # Assert
        assert counts[liked.id] == ReactionCounts(likes=2, dislikes=0)
        assert counts[disliked.id] == ReactionCounts(likes=0, dislikes=1)
        assert counts[untouched.id] == ReactionCounts()
        assert mine == {
            liked.id: ReactionType.LIKE,
            disliked.id: ReactionType.DISLIKE,
        }

    @pytest.mark.asyncio
    async def test_empty_batches(self, unit_env):
        """No threads, no queries."""
        reaction_service = await unit_env.get(ReactionService)

        assert await reaction_service.get_counts_for_threads([]) == {}
        assert await reaction_service.get_reactions_for_threads(VOTER_A, []) == {}

    @pytest.mark.asyncio
    async def test_upsert_keeps_single_row(self, unit_env):
        """Upserting for an existing identity switches the stored row."""
        reaction_repo = await unit_env.get(ReactionRepository)
        thread_repo = await unit_env.get(ThreadRepository)
        thread = await thread_repo.save(make_thread())

        for reaction_type in (ReactionType.LIKE, ReactionType.DISLIKE):
            await reaction_repo.upsert(
                Reaction(
                    id=ReactionId(uuid4()),
                    thread_id=thread.id,
                    anonymous_id=VOTER_A,
                    reaction_type=reaction_type,
                    created_at=datetime.now(),
                )
            )

        rows = await reaction_repo.find_by_thread(thread.id)
        assert [r.reaction_type for r in rows] == [ReactionType.DISLIKE]
