"""Login use case."""

import asyncio

import logfire

from debatify.domain.error import AccessDeniedError, InvalidCredentialError
from debatify.domain.service import JWTService, UserService
from debatify.util.password import verify_password

from ..common import ApiModel, UserSummary


class LoginRequest(ApiModel):
    """Login request.

    ``identifier`` is either the email or the username.
    """

    identifier: str
    password: str


class LoginResponse(ApiModel):
    """Login response."""

    message: str
    token: str
    user_id: str
    username: str
    email: str
    user: UserSummary


class LoginUseCase:
    """Use case for password login."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Raises:
            InvalidCredentialError: Unknown user or wrong password
            AccessDeniedError: Email not verified yet
        """
        with logfire.span("login"):
            user = await self.user_service.find_by_identifier(request.identifier)
            if user is None or not await asyncio.to_thread(
                verify_password, request.password, user.password_hash
            ):
                logfire.warn("Login rejected")
                raise InvalidCredentialError("Invalid email/username or password")

            if not user.is_verified:
                logfire.warn("Login by unverified user", user_id=str(user.id))
                raise AccessDeniedError("Please verify your email first")

            token = self.jwt_service.issue(user.id)
            logfire.info("User logged in", user_id=str(user.id))

            return LoginResponse(
                message=f"Welcome back, {user.username}",
                token=token,
                user_id=str(user.id),
                username=user.username.root,
                email=user.email,
                user=UserSummary.from_user(user),
            )
