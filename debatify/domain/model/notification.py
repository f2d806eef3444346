"""Notification entity.

Notifications tell a user that someone else engaged with them or their
content. They are only ever created, marked read, or deleted together
with the content they refer to.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from debatify.domain.model.common import DomainModel, utcnow
from debatify.domain.value import CommentId, NotificationId, NotificationType, UserId


class Notification(DomainModel):
    """Notification entity.

    related_id points at the content item for content engagements
    (including comment likes, which also carry comment_id), and at the
    acting user for follow/unfollow.
    """

    id: NotificationId
    recipient_id: UserId
    actor_id: UserId
    type: NotificationType
    message: str = Field(min_length=1, max_length=1000)
    related_id: UUID
    comment_id: Optional[CommentId] = None
    read: bool = False
    created_at: datetime = Field(default_factory=utcnow)
