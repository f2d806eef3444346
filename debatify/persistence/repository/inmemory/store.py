"""Shared state behind the in-memory repositories."""

from dataclasses import dataclass, field

from debatify.domain.model import ContentItem, Notification, OneTimeCode, User
from debatify.domain.value import ContentId, NotificationId, UserId


@dataclass
class InMemoryStore:
    """Tables for the in-memory repositories.

    Lives for the whole container so that data written in one request is
    visible to the next, like a database.
    """

    users: dict[UserId, User] = field(default_factory=dict)
    content: dict[ContentId, ContentItem] = field(default_factory=dict)
    notifications: dict[NotificationId, Notification] = field(default_factory=dict)
    codes: list[OneTimeCode] = field(default_factory=list)
