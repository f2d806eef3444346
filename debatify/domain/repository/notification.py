"""Notification repository interface."""

from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from debatify.domain.model.notification import Notification
from debatify.domain.value import UserId


class NotificationRepository(ABC):
    """Repository for Notification entities."""

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Insert a notification.

        Implementations must keep a failed insert from affecting other
        writes in the same unit of work.
        """
        pass

    @abstractmethod
    async def find_by_recipient(
        self, recipient_id: UserId, limit: int = 50
    ) -> List[Notification]:
        """List a user's notifications, newest first.

        Args:
            recipient_id: The recipient's user ID
            limit: Maximum number of notifications to return

        Returns:
            Notifications ordered by created_at descending
        """
        pass

    @abstractmethod
    async def mark_all_read(self, recipient_id: UserId) -> int:
        """Mark every unread notification of a user as read.

        Returns:
            Number of notifications changed
        """
        pass

    @abstractmethod
    async def delete_by_related_id(self, related_id: UUID) -> int:
        """Delete every notification that refers to ``related_id``.

        Returns:
            Number of notifications deleted
        """
        pass
