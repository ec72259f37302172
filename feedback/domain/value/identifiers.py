"""Strongly typed identifiers for Feedback Hub domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Core domain entity identifiers
ThreadId = NewType("ThreadId", UUID)
ReplyId = NewType("ReplyId", UUID)
ReactionId = NewType("ReactionId", UUID)
WarningId = NewType("WarningId", UUID)
NewsId = NewType("NewsId", UUID)

# Moderator account identifier (resolved by the admin identity interface)
AdminId = NewType("AdminId", UUID)
