"""Strongly typed identifiers for Debatify domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
ContentId = NewType("ContentId", UUID)
CommentId = NewType("CommentId", UUID)
NotificationId = NewType("NotificationId", UUID)
OneTimeCodeId = NewType("OneTimeCodeId", UUID)
