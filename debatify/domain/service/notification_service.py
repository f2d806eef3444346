"""Notification fanout."""

from string import Template
from typing import Optional
from uuid import UUID, uuid4

import logfire

from debatify.domain.model import Notification
from debatify.domain.repository import NotificationRepository, UserRepository
from debatify.domain.value import CommentId, NotificationId, NotificationType, UserId

from .base import Service


def template_literal(text: str) -> str:
    """Escape user text for embedding in a message template."""
    return text.replace("$", "$$")


class NotificationService(Service):
    """Domain service for creating and reading notifications.

    Message templates name the actor as ``$actor``; it is replaced with the
    actor's username when the notification is created, e.g.
    ``'$actor upvoted your debate "Cats vs dogs"'``.
    """

    def __init__(
        self,
        notification_repository: NotificationRepository,
        user_repository: UserRepository,
    ) -> None:
        self.notification_repository = notification_repository
        self.user_repository = user_repository

    async def notify(
        self,
        recipient_id: UserId,
        actor_id: UserId,
        type: NotificationType,
        related_id: UUID,
        message_template: str,
        comment_id: Optional[CommentId] = None,
    ) -> Optional[Notification]:
        """Create a notification for ``recipient_id``.

        Nothing is created when the recipient is the actor.

        Returns:
            The stored notification, or None when skipped
        """
        if recipient_id == actor_id:
            return None

        with logfire.span(
            "notification_service.notify",
            recipient_id=str(recipient_id),
            actor_id=str(actor_id),
            type=type.value,
        ):
            actor = await self.user_repository.find_by_id(actor_id)
            actor_name = str(actor.username) if actor else "Someone"
            message = Template(message_template).safe_substitute(actor=actor_name)

            notification = Notification(
                id=NotificationId(uuid4()),
                recipient_id=recipient_id,
                actor_id=actor_id,
                type=type,
                message=message,
                related_id=related_id,
                comment_id=comment_id,
            )
            saved = await self.notification_repository.save(notification)
            logfire.info(
                "Notification created",
                notification_id=str(saved.id),
                recipient_id=str(recipient_id),
                type=type.value,
            )
            return saved

    async def list_recent(
        self, recipient_id: UserId, limit: int = 50
    ) -> list[Notification]:
        """Newest-first notifications for a user."""
        with logfire.span(
            "notification_service.list_recent", recipient_id=str(recipient_id)
        ):
            return await self.notification_repository.find_by_recipient(
                recipient_id, limit=limit
            )

    async def mark_all_read(self, recipient_id: UserId) -> int:
        """Mark every unread notification of a user as read.

        Returns:
            Number of notifications changed
        """
        with logfire.span(
            "notification_service.mark_all_read", recipient_id=str(recipient_id)
        ):
            count = await self.notification_repository.mark_all_read(recipient_id)
            logfire.info(
                "Notifications marked read", recipient_id=str(recipient_id), count=count
            )
            return count

    async def cascade_delete(self, related_id: UUID) -> int:
        """Delete every notification about a content item."""
        with logfire.span(
            "notification_service.cascade_delete", related_id=str(related_id)
        ):
            count = await self.notification_repository.delete_by_related_id(related_id)
            logfire.info(
                "Notifications deleted", related_id=str(related_id), count=count
            )
            return count


class NotificationDispatcher(Service):
    """Sends notifications after the primary write has succeeded.

    A failure to notify is logged and dropped: the engagement that caused
    it has already been saved and its response must not change.
    """

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def dispatch(
        self,
        recipient_id: UserId,
        actor_id: UserId,
        type: NotificationType,
        related_id: UUID,
        message_template: str,
        comment_id: Optional[CommentId] = None,
    ) -> Optional[Notification]:
        try:
            return await self.notification_service.notify(
                recipient_id,
                actor_id,
                type,
                related_id,
                message_template,
                comment_id=comment_id,
            )
        except Exception:
            logfire.exception(
                "Notification dispatch failed",
                recipient_id=str(recipient_id),
                actor_id=str(actor_id),
                type=type.value,
            )
            return None
