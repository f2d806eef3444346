"""Signup use case."""

import asyncio
from uuid import uuid4

import logfire
from pydantic import EmailStr, Field

from debatify.config import Settings
from debatify.domain.error import ConflictError, ValidationError
from debatify.domain.model import User
from debatify.domain.service import EmailService, OneTimeCodeService, UserService
from debatify.domain.value import CodePurpose, UserId, Username
from debatify.util.password import hash_password

from ..common import ApiModel, UserSummary


class SignupRequest(ApiModel):
    """Signup request."""

    username: str = Field(min_length=1, max_length=50)
    email: EmailStr
    password: str = Field(min_length=6, max_length=128)


class SignupResponse(ApiModel):
    """Signup response."""

    message: str
    user: UserSummary


class SignupUseCase:
    """Use case for registering a new account.

    The account starts unverified; a verification code is emailed.
    """

    def __init__(
        self,
        user_service: UserService,
        code_service: OneTimeCodeService,
        email_service: EmailService,
        settings: Settings,
    ) -> None:
        """Initialize signup use case.

        Args:
            user_service: User domain service
            code_service: One-time code domain service
            email_service: Email domain service
            settings: Application settings
        """
        self.user_service = user_service
        self.code_service = code_service
        self.email_service = email_service
        self.settings = settings

    async def execute(self, request: SignupRequest) -> SignupResponse:
        """Execute signup flow.

        Raises:
            ValidationError: Username is malformed
            ConflictError: Username or email already registered
        """
        try:
            username = Username(request.username)
        except ValueError as e:
            raise ValidationError(f"Invalid username: {request.username}") from e
        email = str(request.email).lower()

        with logfire.span("signup", username=username.root):
            if await self.user_service.get_user_by_email(email):
                raise ConflictError("Username or email already exists")
            if await self.user_service.find_by_identifier(username.root):
                raise ConflictError("Username or email already exists")

            password_hash = await asyncio.to_thread(
                hash_password, request.password, self.settings.auth.password_hash_rounds
            )
            user = await self.user_service.save(
                User(
                    id=UserId(uuid4()),
                    username=username,
                    email=email,
                    password_hash=password_hash,
                )
            )

            code = await self.code_service.issue(email, CodePurpose.VERIFY_EMAIL)
            await self.email_service.send_verification_code(email, code.code)

            logfire.info("User signed up", user_id=str(user.id))
            return SignupResponse(
                message="Signup successful. Verification code sent to email.",
                user=UserSummary.from_user(user),
            )
