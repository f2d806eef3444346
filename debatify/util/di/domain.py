"""Domain layer DI providers."""

from dishka import Scope, provide

from debatify.config import (
    AuthSettings,
    EmailSettings,
    EngagementSettings,
    OneTimeCodeSettings,
    StorageSettings,
)
from debatify.domain.repository import (
    ContentRepository,
    NotificationRepository,
    OneTimeCodeRepository,
    UserRepository,
)
from debatify.domain.service import (
    AccessService,
    BlobStorage,
    ContentService,
    EmailSender,
    EmailService,
    EngagementService,
    JWTService,
    NotificationDispatcher,
    NotificationService,
    OneTimeCodeService,
    StorageService,
    UserService,
)
from debatify.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_access_service(self, jwt_service: JWTService) -> AccessService:
        """Provide access gate."""
        return AccessService(jwt_service=jwt_service)

    @provide
    def get_notification_service(
        self,
        notification_repository: NotificationRepository,
        user_repository: UserRepository,
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(
            notification_repository=notification_repository,
            user_repository=user_repository,
        )

    @provide
    def get_notification_dispatcher(
        self, notification_service: NotificationService
    ) -> NotificationDispatcher:
        """Provide notification fanout."""
        return NotificationDispatcher(notification_service=notification_service)

    @provide
    def get_user_service(
        self,
        user_repository: UserRepository,
        notification_dispatcher: NotificationDispatcher,
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository,
            notification_dispatcher=notification_dispatcher,
        )

    @provide
    def get_content_service(
        self,
        content_repository: ContentRepository,
        notification_service: NotificationService,
        storage_service: StorageService,
    ) -> ContentService:
        """Provide content domain service."""
        return ContentService(
            content_repository=content_repository,
            notification_service=notification_service,
            storage_service=storage_service,
        )

    @provide
    def get_engagement_service(
        self,
        content_repository: ContentRepository,
        user_repository: UserRepository,
        notification_dispatcher: NotificationDispatcher,
        engagement_settings: EngagementSettings,
    ) -> EngagementService:
        """Provide engagement domain service."""
        return EngagementService(
            content_repository=content_repository,
            user_repository=user_repository,
            notification_dispatcher=notification_dispatcher,
            engagement_settings=engagement_settings,
        )

    @provide
    def get_one_time_code_service(
        self,
        code_repository: OneTimeCodeRepository,
        code_settings: OneTimeCodeSettings,
    ) -> OneTimeCodeService:
        """Provide one-time code domain service."""
        return OneTimeCodeService(
            code_repository=code_repository, code_settings=code_settings
        )

    @provide
    def get_email_service(
        self,
        email_sender: EmailSender,
        email_settings: EmailSettings,
        code_settings: OneTimeCodeSettings,
    ) -> EmailService:
        """Provide email domain service."""
        return EmailService(
            email_sender=email_sender,
            email_settings=email_settings,
            code_settings=code_settings,
        )

    @provide
    def get_storage_service(
        self, blob_storage: BlobStorage, storage_settings: StorageSettings
    ) -> StorageService:
        """Provide storage domain service."""
        return StorageService(
            blob_storage=blob_storage, storage_settings=storage_settings
        )
