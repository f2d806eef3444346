"""Domain model entities for Debatify."""

from debatify.domain.model.content import Comment, ContentItem
from debatify.domain.model.notification import Notification
from debatify.domain.model.one_time_code import OneTimeCode
from debatify.domain.model.user import User

__all__ = [
    "User",
    "ContentItem",
    "Comment",
    "Notification",
    "OneTimeCode",
]
