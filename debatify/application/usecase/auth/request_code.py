"""Use cases that mail a fresh one-time code."""

import logfire
from pydantic import EmailStr

from debatify.domain.error import ConflictError, NotFoundError
from debatify.domain.service import EmailService, OneTimeCodeService, UserService
from debatify.domain.value import CodePurpose

from ..common import ApiModel
from .verify_email import MessageResponse


class RequestVerificationCodeRequest(ApiModel):
    """``identifier`` is either the email or the username."""

    identifier: str


class RequestVerificationCodeUseCase:
    """Re-send an email verification code, superseding older ones."""

    def __init__(
        self,
        user_service: UserService,
        code_service: OneTimeCodeService,
        email_service: EmailService,
    ) -> None:
        self.user_service = user_service
        self.code_service = code_service
        self.email_service = email_service

    async def execute(self, request: RequestVerificationCodeRequest) -> MessageResponse:
        """Issue and mail a verification code.

        Raises:
            NotFoundError: No such user
            ConflictError: Email already verified
        """
        with logfire.span("request_verification_code"):
            user = await self.user_service.find_by_identifier(request.identifier)
            if user is None:
                raise NotFoundError("User", request.identifier)
            if user.is_verified:
                raise ConflictError("Email already verified")

            code = await self.code_service.issue(user.email, CodePurpose.VERIFY_EMAIL)
            await self.email_service.send_verification_code(user.email, code.code)
            return MessageResponse(message="Verification code sent to email")


class RequestPasswordResetRequest(ApiModel):
    email: EmailStr


class RequestPasswordResetUseCase:
    """Mail a password reset code, superseding older ones."""

    def __init__(
        self,
        user_service: UserService,
        code_service: OneTimeCodeService,
        email_service: EmailService,
    ) -> None:
        self.user_service = user_service
        self.code_service = code_service
        self.email_service = email_service

    async def execute(self, request: RequestPasswordResetRequest) -> MessageResponse:
        """Issue and mail a reset code.

        Raises:
            NotFoundError: No account for the email
        """
        email = str(request.email).lower()
        with logfire.span("request_password_reset"):
            user = await self.user_service.get_user_by_email(email)
            if user is None:
                raise NotFoundError("User", email)

            code = await self.code_service.issue(email, CodePurpose.RESET_PASSWORD)
            await self.email_service.send_password_reset_code(email, code.code)
            return MessageResponse(message="Reset code sent to email")
