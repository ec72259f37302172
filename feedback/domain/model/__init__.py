"""Domain model entities for Feedback Hub."""

from feedback.domain.model.news import News
from feedback.domain.model.reaction import Reaction
from feedback.domain.model.reply import Reply
from feedback.domain.model.thread import Thread
from feedback.domain.model.warning import ModerationWarning

__all__ = [
    "Thread",
    "Reply",
    "Reaction",
    "ModerationWarning",
    "News",
]
