"""PostgreSQL implementation of Notification repository."""

from typing import List
from uuid import UUID

import logfire
from sqlalchemy import delete, desc, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from debatify.domain.model import Notification
from debatify.domain.repository import NotificationRepository
from debatify.domain.value import UserId
from debatify.persistence.mappers import notification_to_dict, row_to_notification
from debatify.persistence.tables import notifications_table


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, notification: Notification) -> Notification:
        """Insert inside a SAVEPOINT.

        A failed insert rolls back to the savepoint only, so the request
        transaction that holds the engagement write stays usable.
        """
        async with self.session.begin_nested():
            await self.session.execute(
                insert(notifications_table).values(**notification_to_dict(notification))
            )
        return notification

    async def find_by_recipient(
        self, recipient_id: UserId, limit: int = 50
    ) -> List[Notification]:
        """List a user's notifications, newest first."""
        stmt = (
            select(notifications_table)
            .where(notifications_table.c.recipient_id == recipient_id)
            .order_by(desc(notifications_table.c.created_at))
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_notification(row._asdict()) for row in result.fetchall()]

    async def mark_all_read(self, recipient_id: UserId) -> int:
        """Mark unread notifications as read."""
        stmt = (
            update(notifications_table)
            .where(
                notifications_table.c.recipient_id == recipient_id,
                notifications_table.c.read.is_(False),
            )
            .values(read=True)
        )
        result = await self.session.execute(stmt)
        return result.rowcount or 0

    async def delete_by_related_id(self, related_id: UUID) -> int:
        """Delete notifications about one content item."""
        with logfire.span(
            "notification_repository.delete_by_related_id", related_id=str(related_id)
        ):
            result = await self.session.execute(
                delete(notifications_table).where(
                    notifications_table.c.related_id == related_id
                )
            )
            return result.rowcount or 0
