"""Domain services."""

from .access_service import AccessService
from .base import Service
from .content_service import ContentService
from .email_service import EmailSender, EmailService
from .engagement_service import EngagementService
from .jwt_service import JWTService
from .notification_service import NotificationDispatcher, NotificationService
from .one_time_code_service import OneTimeCodeService
from .storage_service import BlobStorage, StorageService, Upload
from .user_service import UserService

__all__ = [
    "AccessService",
    "BlobStorage",
    "ContentService",
    "EmailSender",
    "EmailService",
    "EngagementService",
    "JWTService",
    "NotificationDispatcher",
    "NotificationService",
    "OneTimeCodeService",
    "Service",
    "StorageService",
    "Upload",
    "UserService",
]
