"""Warning domain service."""

from collections.abc import Iterable
from datetime import datetime
from typing import Sequence
from uuid import uuid4

import logfire

from feedback.domain.error import ValidationError
from feedback.domain.model.warning import ModerationWarning
from feedback.domain.repository import WarningRepository
from feedback.domain.value import (
    AdminId,
    AnonymousId,
    ReplyId,
    ThreadId,
    WarningId,
    WarningLevel,
)

from .base import Service


def select_effective_warning(
    warnings: Iterable[ModerationWarning],
) -> ModerationWarning | None:
    """Pick the warning that represents an identity's standing.

    Highest severity wins; among equal severities the most recent wins.
    A newer low warning therefore never hides an older high one.

    Args:
        warnings: Warnings for a single identity, in any order

    Returns:
        The effective warning, or None if there are none
    """
    effective: ModerationWarning | None = None
    for warning in warnings:
        if effective is None or warning.outranks(effective):
            effective = warning
    return effective


class WarningService(Service):
    """Domain service for the append-only warning registry."""

    def __init__(self, warning_repository: WarningRepository) -> None:
        """Initialize warning service.

        Args:
            warning_repository: Warning repository
        """
        self.warning_repository = warning_repository

    async def issue_warning(
        self,
        target: AnonymousId,
        level: WarningLevel,
        reason: str,
        admin_id: AdminId,
        thread_id: ThreadId | None = None,
        reply_id: ReplyId | None = None,
    ) -> ModerationWarning:
        """Append a warning against an anonymous identity.

        Args:
            target: Identity being warned
            level: Severity
            reason: Explanation shown with the warning badge
            admin_id: Issuing moderator
            thread_id: Thread the warning refers to, if any
            reply_id: Reply the warning refers to, if any

        Returns:
            The saved warning

        Raises:
            ValidationError: If reason is blank
        """
        text = (reason or "").strip()
        if not text:
            raise ValidationError("Warning reason must not be empty")

        with logfire.span(
            "warning_service.issue_warning",
            anonymous_id=target.root,
            level=level.value,
            thread_id=str(thread_id) if thread_id else None,
        ):
            warning = ModerationWarning(
                id=WarningId(uuid4()),
                anonymous_id=target,
                warning_level=level,
                reason=text,
                thread_id=thread_id,
                reply_id=reply_id,
                admin_id=admin_id,
                created_at=datetime.now(),
            )

            saved = await self.warning_repository.save(warning)
            logfire.info(
                "Warning issued",
                warning_id=str(saved.id),
                anonymous_id=target.root,
                level=level.value,
                admin_id=str(admin_id),
            )
            return saved

    async def effective_warning(self, target: AnonymousId) -> ModerationWarning | None:
        """Resolve the warning that represents an identity's standing.

        Args:
            target: Identity to look up

        Returns:
            The effective warning, or None if the identity was never warned
        """
        warnings = await self.warning_repository.find_by_identity(target)
        return select_effective_warning(warnings)

    async def effective_warnings(
        self, targets: Sequence[AnonymousId]
    ) -> dict[AnonymousId, ModerationWarning]:
        """Resolve effective warnings for several identities in one query.

        Args:
            targets: Identities to look up

        Returns:
            Mapping of identity to effective warning (unwarned identities are absent)
        """
        unique_targets = list(dict.fromkeys(targets))
        if not unique_targets:
            return {}

        grouped: dict[AnonymousId, list[ModerationWarning]] = {}
        for warning in await self.warning_repository.find_by_identities(
            unique_targets
        ):
            grouped.setdefault(warning.anonymous_id, []).append(warning)

        effective = {}
        for target, warnings in grouped.items():
            selected = select_effective_warning(warnings)
            if selected:
                effective[target] = selected
        return effective

    async def warnings_for(self, target: AnonymousId) -> list[ModerationWarning]:
        """All warnings against an identity, newest first."""
        return await self.warning_repository.find_by_identity(target)

    async def warnings_for_thread(self, thread_id: ThreadId) -> list[ModerationWarning]:
        """Warnings issued in the context of a thread, newest first."""
        return await self.warning_repository.find_by_thread(thread_id)

    async def warnings_for_threads(
        self, thread_ids: Sequence[ThreadId]
    ) -> dict[ThreadId, list[ModerationWarning]]:
        """Warnings issued in the context of several threads, in one query.

        Every given thread is present in the result; warnings are newest first.
        """
        grouped: dict[ThreadId, list[ModerationWarning]] = {
            tid: [] for tid in thread_ids
        }
        if not thread_ids:
            return grouped

        for warning in await self.warning_repository.find_by_threads(thread_ids):
            if warning.thread_id in grouped:
                grouped[warning.thread_id].append(warning)
        return grouped

    async def list_warnings(self) -> list[ModerationWarning]:
        """Every warning in the registry, newest first."""
        with logfire.span("warning_service.list_warnings"):
            warnings = await self.warning_repository.find_all()
            logfire.info("Warnings listed", count=len(warnings))
            return warnings
