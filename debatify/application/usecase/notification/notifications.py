"""Notification use cases."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from debatify.config import EngagementSettings
from debatify.domain.service import NotificationService
from debatify.domain.value import NotificationType, UserId

from ..common import ApiModel, parse_id


class NotificationView(ApiModel):
    id: str
    type: NotificationType
    message: str
    actor_id: str
    related_id: str
    comment_id: Optional[str] = None
    read: bool
    created_at: datetime


class ListNotificationsRequest(BaseModel):
    user_id: str  # Set from the authenticated actor


class ListNotificationsResponse(BaseModel):
    notifications: list[NotificationView]


class ListNotificationsUseCase:
    """Use case for the caller's most recent notifications."""

    def __init__(
        self,
        notification_service: NotificationService,
        engagement_settings: EngagementSettings,
    ) -> None:
        self.notification_service = notification_service
        self.engagement_settings = engagement_settings

    async def execute(
        self, request: ListNotificationsRequest
    ) -> ListNotificationsResponse:
        notifications = await self.notification_service.list_recent(
            UserId(parse_id(request.user_id, "user")),
            limit=self.engagement_settings.notification_page_size,
        )
        return ListNotificationsResponse(
            notifications=[
                NotificationView(
                    id=str(n.id),
                    type=n.type,
                    message=n.message,
                    actor_id=str(n.actor_id),
                    related_id=str(n.related_id),
                    comment_id=str(n.comment_id) if n.comment_id else None,
                    read=n.read,
                    created_at=n.created_at,
                )
                for n in notifications
            ]
        )


class MarkNotificationsReadRequest(BaseModel):
    user_id: str  # Set from the authenticated actor


class MarkNotificationsReadResponse(ApiModel):
    message: str
    updated: int


class MarkNotificationsReadUseCase:
    """Use case for marking all of the caller's notifications read."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(
        self, request: MarkNotificationsReadRequest
    ) -> MarkNotificationsReadResponse:
        updated = await self.notification_service.mark_all_read(
            UserId(parse_id(request.user_id, "user"))
        )
        return MarkNotificationsReadResponse(
            message="All notifications marked as read", updated=updated
        )
