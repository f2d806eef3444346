"""In-memory notification repository for testing."""

from typing import List
from uuid import UUID

from debatify.domain.model import Notification
from debatify.domain.repository import NotificationRepository
from debatify.domain.value import UserId

from .store import InMemoryStore


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def save(self, notification: Notification) -> Notification:
        self._store.notifications[notification.id] = notification
        return notification

    async def find_by_recipient(
        self, recipient_id: UserId, limit: int = 50
    ) -> List[Notification]:
        mine = [
            n for n in self._store.notifications.values() if n.recipient_id == recipient_id
        ]
        mine.sort(key=lambda n: n.created_at, reverse=True)
        return mine[:limit]

    async def mark_all_read(self, recipient_id: UserId) -> int:
        changed = 0
        for notification in list(self._store.notifications.values()):
            if notification.recipient_id == recipient_id and not notification.read:
                self._store.notifications[notification.id] = notification.model_copy(
                    update={"read": True}
                )
                changed += 1
        return changed

    async def delete_by_related_id(self, related_id: UUID) -> int:
        doomed = [
            n.id for n in self._store.notifications.values() if n.related_id == related_id
        ]
        for notification_id in doomed:
            del self._store.notifications[notification_id]
        return len(doomed)
