"""Password reset and change use cases."""

import asyncio

import logfire
from pydantic import EmailStr, Field

from debatify.config import Settings
from debatify.domain.error import NotFoundError, ValidationError
from debatify.domain.model import User
from debatify.domain.service import OneTimeCodeService, UserService
from debatify.domain.value import UserId
from debatify.util.password import hash_password, verify_password

from ..common import ApiModel, parse_id
from .verify_email import MessageResponse


class ResetPasswordRequest(ApiModel):
    email: EmailStr
    code: str
    new_password: str = Field(min_length=6, max_length=128)


class ChangePasswordRequest(ApiModel):
    user_id: str  # Set from the authenticated actor
    old_password: str
    new_password: str = Field(min_length=6, max_length=128)


class _PasswordWriter:
    def __init__(self, user_service: UserService, settings: Settings) -> None:
        self.user_service = user_service
        self.settings = settings

    async def _store_password(self, user: User, password: str) -> None:
        password_hash = await asyncio.to_thread(
            hash_password, password, self.settings.auth.password_hash_rounds
        )
        await self.user_service.update_fields(user.id, password_hash=password_hash)


class ResetPasswordUseCase(_PasswordWriter):
    """Set a new password with a mailed reset code."""

    def __init__(
        self,
        user_service: UserService,
        code_service: OneTimeCodeService,
        settings: Settings,
    ) -> None:
        super().__init__(user_service, settings)
        self.code_service = code_service

    async def execute(self, request: ResetPasswordRequest) -> MessageResponse:
        """Reset the password.

        Raises:
            NotFoundError: No account for the email
            ValidationError: Code is wrong, superseded or expired
        """
        email = str(request.email).lower()
        with logfire.span("reset_password"):
            user = await self.user_service.get_user_by_email(email)
            if user is None:
                raise NotFoundError("User", email)

            await self.code_service.verify(email, request.code)
            await self._store_password(user, request.new_password)
            logfire.info("Password reset", user_id=str(user.id))
            return MessageResponse(message="Password reset successful")


class ChangePasswordUseCase(_PasswordWriter):
    """Change the password of the logged-in user."""

    async def execute(self, request: ChangePasswordRequest) -> MessageResponse:
        """Change the password.

        Raises:
            ValidationError: Old password is wrong
        """
        user_id = UserId(parse_id(request.user_id, "user"))
        with logfire.span("change_password", user_id=str(user_id)):
            user = await self.user_service.get_by_id(user_id)
            if not await asyncio.to_thread(
                verify_password, request.old_password, user.password_hash
            ):
                raise ValidationError("Incorrect old password")

            await self._store_password(user, request.new_password)
            logfire.info("Password changed", user_id=str(user_id))
            return MessageResponse(message="Password changed successfully")
