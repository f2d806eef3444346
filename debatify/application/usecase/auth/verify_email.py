"""Verify-email use case."""

import logfire
from pydantic import EmailStr

from debatify.domain.error import NotFoundError
from debatify.domain.service import OneTimeCodeService, UserService

from ..common import ApiModel


class VerifyEmailRequest(ApiModel):
    email: EmailStr
    code: str


class MessageResponse(ApiModel):
    """Response carrying only a human-readable message."""

    message: str


class VerifyEmailUseCase:
    """Use case for confirming an email with the code sent at signup."""

    def __init__(
        self, user_service: UserService, code_service: OneTimeCodeService
    ) -> None:
        self.user_service = user_service
        self.code_service = code_service

    async def execute(self, request: VerifyEmailRequest) -> MessageResponse:
        """Mark the account verified.

        Raises:
            NotFoundError: No account for the email
            ValidationError: Code is wrong, superseded or expired
        """
        email = str(request.email).lower()
        with logfire.span("verify_email"):
            user = await self.user_service.get_user_by_email(email)
            if user is None:
                raise NotFoundError("User", email)

            await self.code_service.verify(email, request.code)
            await self.user_service.update_fields(user.id, is_verified=True)
            logfire.info("Email verified", user_id=str(user.id))
            return MessageResponse(message="Email verified successfully")
