"""Application layer DI providers."""

from dishka import Scope, provide

from debatify.application.usecase.auth import (
    ChangePasswordUseCase,
    LoginUseCase,
    RequestPasswordResetUseCase,
    RequestVerificationCodeUseCase,
    ResetPasswordUseCase,
    SignupUseCase,
    VerifyEmailUseCase,
)
from debatify.application.usecase.content import (
    CreateContentUseCase,
    DeleteContentUseCase,
    GetContentUseCase,
    ListBookmarksUseCase,
    ListContentUseCase,
)
from debatify.application.usecase.engagement import (
    AddCommentUseCase,
    BookmarkUseCase,
    LikeCommentUseCase,
    VoteUseCase,
)
from debatify.application.usecase.notification import (
    ListNotificationsUseCase,
    MarkNotificationsReadUseCase,
)
from debatify.application.usecase.support import SubmitSupportRequestUseCase
from debatify.application.usecase.user import (
    FollowUserUseCase,
    GetUserProfileUseCase,
    ListFollowsUseCase,
    SearchUsersUseCase,
    UpdateBioUseCase,
    UpdateProfilePictureUseCase,
)
from debatify.config import EngagementSettings, Settings
from debatify.domain.service import (
    AccessService,
    ContentService,
    EmailService,
    EngagementService,
    JWTService,
    NotificationService,
    OneTimeCodeService,
    StorageService,
    UserService,
)
from debatify.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_signup_use_case(
        self,
        user_service: UserService,
        code_service: OneTimeCodeService,
        email_service: EmailService,
        settings: Settings,
    ) -> SignupUseCase:
        """Provide signup use case."""
        return SignupUseCase(
            user_service=user_service,
            code_service=code_service,
            email_service=email_service,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_verify_email_use_case(
        self, user_service: UserService, code_service: OneTimeCodeService
    ) -> VerifyEmailUseCase:
        """Provide verify email use case."""
        return VerifyEmailUseCase(user_service=user_service, code_service=code_service)

    @provide(scope=Scope.REQUEST)
    def get_request_verification_code_use_case(
        self,
        user_service: UserService,
        code_service: OneTimeCodeService,
        email_service: EmailService,
    ) -> RequestVerificationCodeUseCase:
        """Provide request verification code use case."""
        return RequestVerificationCodeUseCase(
            user_service=user_service,
            code_service=code_service,
            email_service=email_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_request_password_reset_use_case(
        self,
        user_service: UserService,
        code_service: OneTimeCodeService,
        email_service: EmailService,
    ) -> RequestPasswordResetUseCase:
        """Provide request password reset use case."""
        return RequestPasswordResetUseCase(
            user_service=user_service,
            code_service=code_service,
            email_service=email_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_reset_password_use_case(
        self,
        user_service: UserService,
        code_service: OneTimeCodeService,
        settings: Settings,
    ) -> ResetPasswordUseCase:
        """Provide reset password use case."""
        return ResetPasswordUseCase(
            user_service=user_service, code_service=code_service, settings=settings
        )

    @provide(scope=Scope.REQUEST)
    def get_change_password_use_case(
        self, user_service: UserService, settings: Settings
    ) -> ChangePasswordUseCase:
        """Provide change password use case."""
        return ChangePasswordUseCase(user_service=user_service, settings=settings)

    # Content use cases
    @provide(scope=Scope.REQUEST)
    def get_create_content_use_case(
        self, content_service: ContentService, user_service: UserService
    ) -> CreateContentUseCase:
        """Provide create content use case."""
        return CreateContentUseCase(
            content_service=content_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_content_use_case(
        self,
        content_service: ContentService,
        engagement_service: EngagementService,
        access_service: AccessService,
    ) -> GetContentUseCase:
        """Provide get content use case."""
        return GetContentUseCase(
            content_service=content_service,
            engagement_service=engagement_service,
            access_service=access_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_content_use_case(
        self, content_service: ContentService, user_service: UserService
    ) -> ListContentUseCase:
        """Provide list content use case."""
        return ListContentUseCase(
            content_service=content_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_content_use_case(
        self, content_service: ContentService
    ) -> DeleteContentUseCase:
        """Provide delete content use case."""
        return DeleteContentUseCase(content_service=content_service)

    @provide(scope=Scope.REQUEST)
    def get_list_bookmarks_use_case(
        self, content_service: ContentService
    ) -> ListBookmarksUseCase:
        """Provide list bookmarks use case."""
        return ListBookmarksUseCase(content_service=content_service)

    # Engagement use cases
    @provide(scope=Scope.REQUEST)
    def get_vote_use_case(self, engagement_service: EngagementService) -> VoteUseCase:
        """Provide vote use case."""
        return VoteUseCase(engagement_service=engagement_service)

    @provide(scope=Scope.REQUEST)
    def get_bookmark_use_case(
        self, engagement_service: EngagementService
    ) -> BookmarkUseCase:
        """Provide bookmark use case."""
        return BookmarkUseCase(engagement_service=engagement_service)

    @provide(scope=Scope.REQUEST)
    def get_add_comment_use_case(
        self, engagement_service: EngagementService
    ) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(engagement_service=engagement_service)

    @provide(scope=Scope.REQUEST)
    def get_like_comment_use_case(
        self, engagement_service: EngagementService
    ) -> LikeCommentUseCase:
        """Provide like comment use case."""
        return LikeCommentUseCase(engagement_service=engagement_service)

    # Notification use cases
    @provide(scope=Scope.REQUEST)
    def get_list_notifications_use_case(
        self,
        notification_service: NotificationService,
        engagement_settings: EngagementSettings,
    ) -> ListNotificationsUseCase:
        """Provide list notifications use case."""
        return ListNotificationsUseCase(
            notification_service=notification_service,
            engagement_settings=engagement_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_mark_notifications_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkNotificationsReadUseCase:
        """Provide mark notifications read use case."""
        return MarkNotificationsReadUseCase(notification_service=notification_service)

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_user_profile_use_case(
        self, user_service: UserService
    ) -> GetUserProfileUseCase:
        """Provide get user profile use case."""
        return GetUserProfileUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_search_users_use_case(
        self, user_service: UserService
    ) -> SearchUsersUseCase:
        """Provide search users use case."""
        return SearchUsersUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_follow_user_use_case(self, user_service: UserService) -> FollowUserUseCase:
        """Provide follow/unfollow use case."""
        return FollowUserUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_list_follows_use_case(
        self, user_service: UserService
    ) -> ListFollowsUseCase:
        """Provide followers/followings use case."""
        return ListFollowsUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_update_bio_use_case(self, user_service: UserService) -> UpdateBioUseCase:
        """Provide update bio use case."""
        return UpdateBioUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_update_profile_picture_use_case(
        self, user_service: UserService, storage_service: StorageService
    ) -> UpdateProfilePictureUseCase:
        """Provide update profile picture use case."""
        return UpdateProfilePictureUseCase(
            user_service=user_service, storage_service=storage_service
        )

    # Support use cases
    @provide(scope=Scope.REQUEST)
    def get_submit_support_request_use_case(
        self, email_service: EmailService
    ) -> SubmitSupportRequestUseCase:
        """Provide support request use case."""
        return SubmitSupportRequestUseCase(email_service=email_service)
