"""Notification use cases."""

from .notifications import (
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    MarkNotificationsReadRequest,
    MarkNotificationsReadResponse,
    MarkNotificationsReadUseCase,
    NotificationView,
)

__all__ = [
    "ListNotificationsRequest",
    "ListNotificationsResponse",
    "ListNotificationsUseCase",
    "MarkNotificationsReadRequest",
    "MarkNotificationsReadResponse",
    "MarkNotificationsReadUseCase",
    "NotificationView",
]
