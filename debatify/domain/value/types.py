"""Domain value objects for Debatify.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from debatify.domain.value.common import RootValueObject


class ContentKind(str, Enum):
    """Kind of user-authored content.

    All kinds share the same engagement surface (votes, bookmarks,
    comments, views); they differ in which fields are required.
    """

    DISCUSSION = "discussion"
    DEBATE = "debate"
    BLOG = "blog"

    @property
    def requires_category(self) -> bool:
        """Discussions and debates are filed under a category."""
        return self in (ContentKind.DISCUSSION, ContentKind.DEBATE)

    @property
    def requires_stance(self) -> bool:
        """Debate comments take a side."""
        return self is ContentKind.DEBATE

    @property
    def label(self) -> str:
        """Human-readable name used in notification messages."""
        return self.value


class Stance(str, Enum):
    """Side taken by a debate comment."""

    WITH = "with"
    AGAINST = "against"


class VoteDirection(str, Enum):
    """Direction of a vote."""

    UP = "up"
    DOWN = "down"


class VoteRepeatPolicy(str, Enum):
    """What casting the same vote twice does.

    TOGGLE: the second vote removes the first.
    REJECT: the second vote fails with "Already voted".
    """

    TOGGLE = "toggle"
    REJECT = "reject"


class NotificationType(str, Enum):
    """Kind of event a notification reports."""

    FOLLOW = "follow"
    UNFOLLOW = "unfollow"
    UPVOTE = "upvote"
    DOWNVOTE = "downvote"
    COMMENT = "comment"
    COMMENT_LIKE = "comment_like"


class CodePurpose(str, Enum):
    """Why a one-time code was issued."""

    VERIFY_EMAIL = "verify_email"
    RESET_PASSWORD = "reset_password"


class Username(RootValueObject[str]):
    """Public, unique user name.

    1-50 characters, no whitespace. Leading/trailing whitespace is trimmed.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        v = v.strip()
        if not re.match(r"^\S{1,50}$", v):
            raise ValueError("Username must be 1-50 characters without spaces")
        return v
