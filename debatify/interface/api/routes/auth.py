"""Authentication routes.

Account lifecycle: signup, email verification with one-time codes, login
with a bearer token, password reset and change.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, status
from pydantic import Field

from debatify.application.usecase.auth import (
    ChangePasswordRequest,
    ChangePasswordUseCase,
    LoginRequest,
    LoginResponse,
    LoginUseCase,
    MessageResponse,
    RequestPasswordResetRequest,
    RequestPasswordResetUseCase,
    RequestVerificationCodeRequest,
    RequestVerificationCodeUseCase,
    ResetPasswordRequest,
    ResetPasswordUseCase,
    SignupRequest,
    SignupResponse,
    SignupUseCase,
    VerifyEmailRequest,
    VerifyEmailUseCase,
)
from debatify.application.usecase.common import ApiModel
from debatify.domain.service import AccessService

router = APIRouter(prefix="/auth", tags=["auth"], route_class=DishkaRoute)


class ChangePasswordAPIRequest(ApiModel):
    """API request for changing the password of the authenticated user."""

    old_password: str
    new_password: str = Field(min_length=6, max_length=128)


@router.post(
    "/signup", response_model=SignupResponse, status_code=status.HTTP_201_CREATED
)
async def signup(
    request: SignupRequest,
    signup_use_case: FromDishka[SignupUseCase],
) -> SignupResponse:
    """Register a new account.

    The account starts unverified; a verification code is emailed to the
    given address.

    Example:
        POST /auth/signup
        {"username": "alice", "email": "alice@example.com", "password": "secret1"}
    """
    return await signup_use_case.execute(request)


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> LoginResponse:
    """Exchange an email/username and password for a bearer token.

    Example:
        POST /auth/login
        {"identifier": "alice", "password": "secret1"}

        Response:
        {"message": "Welcome back, alice", "token": "eyJ...", "userId": "...", ...}
    """
    return await login_use_case.execute(request)


@router.post("/verify-email", response_model=MessageResponse)
async def verify_email(
    request: VerifyEmailRequest,
    verify_email_use_case: FromDishka[VerifyEmailUseCase],
) -> MessageResponse:
    """Mark an account verified using the emailed code."""
    return await verify_email_use_case.execute(request)


@router.post("/request-verification-code", response_model=MessageResponse)
async def request_verification_code(
    request: RequestVerificationCodeRequest,
    request_code_use_case: FromDishka[RequestVerificationCodeUseCase],
) -> MessageResponse:
    """Send a fresh verification code, superseding any earlier one."""
    return await request_code_use_case.execute(request)


@router.post("/request-password-reset", response_model=MessageResponse)
async def request_password_reset(
    request: RequestPasswordResetRequest,
    request_reset_use_case: FromDishka[RequestPasswordResetUseCase],
) -> MessageResponse:
    """Email a password reset code."""
    return await request_reset_use_case.execute(request)


@router.post("/reset-password", response_model=MessageResponse)
async def reset_password(
    request: ResetPasswordRequest,
    reset_password_use_case: FromDishka[ResetPasswordUseCase],
) -> MessageResponse:
    """Set a new password using a reset code."""
    return await reset_password_use_case.execute(request)


@router.put("/change-password", response_model=MessageResponse)
async def change_password(
    request: ChangePasswordAPIRequest,
    change_password_use_case: FromDishka[ChangePasswordUseCase],
    access_service: FromDishka[AccessService],
    authorization: str | None = Header(default=None),
) -> MessageResponse:
    """Change the password of the authenticated user.

    Requires the current password.
    """
    actor_id = access_service.authenticate(authorization)

    return await change_password_use_case.execute(
        ChangePasswordRequest(
            user_id=str(actor_id),
            old_password=request.old_password,
            new_password=request.new_password,
        )
    )
