"""Domain value objects for Debatify."""

from debatify.domain.value.identifiers import (
    CommentId,
    ContentId,
    NotificationId,
    OneTimeCodeId,
    UserId,
)
from debatify.domain.value.types import (
    CodePurpose,
    ContentKind,
    NotificationType,
    Stance,
    Username,
    VoteDirection,
    VoteRepeatPolicy,
)

__all__ = [
    # Identifiers
    "UserId",
    "ContentId",
    "CommentId",
    "NotificationId",
    "OneTimeCodeId",
    # Types
    "CodePurpose",
    "ContentKind",
    "NotificationType",
    "Stance",
    "Username",
    "VoteDirection",
    "VoteRepeatPolicy",
]
