"""Warning repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from feedback.domain.model.warning import ModerationWarning
from feedback.domain.value import AnonymousId, ThreadId, WarningId


class WarningRepository(ABC):
    """Repository for ModerationWarning entity.

    Warnings are append-only, so the contract has no update or delete.
    All finders return warnings newest first.
    """

    @abstractmethod
    async def find_by_id(self, warning_id: WarningId) -> Optional[ModerationWarning]:
        """Find a warning by ID.

        Args:
            warning_id: The warning's unique identifier

        Returns:
            The warning if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_identity(
        self, anonymous_id: AnonymousId
    ) -> List[ModerationWarning]:
        """Find all warnings issued against an identity.

        Args:
            anonymous_id: The target identity

        Returns:
            List of warnings, newest first
        """
        pass

    @abstractmethod
    async def find_by_identities(
        self, anonymous_ids: Sequence[AnonymousId]
    ) -> List[ModerationWarning]:
        """Find warnings against any of several identities (batch query).

        Args:
            anonymous_ids: Target identities

        Returns:
            List of warnings, newest first
        """
        pass

    @abstractmethod
    async def find_by_thread(self, thread_id: ThreadId) -> List[ModerationWarning]:
        """Find warnings issued in the context of a thread.

        Args:
            thread_id: The thread given as warning context

        Returns:
            List of warnings, newest first
        """
        pass

    @abstractmethod
    async def find_by_threads(
        self, thread_ids: Sequence[ThreadId]
    ) -> List[ModerationWarning]:
        """Find warnings whose context is any of several threads (batch query).

        Args:
            thread_ids: The threads given as warning context

        Returns:
            List of warnings, newest first
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[ModerationWarning]:
        """Find every warning.

        Returns:
            List of all warnings, newest first
        """
        pass

    @abstractmethod
    async def save(self, warning: ModerationWarning) -> ModerationWarning:
        """Append a warning.

        Args:
            warning: The warning to save

        Returns:
            The saved warning
        """
        pass
