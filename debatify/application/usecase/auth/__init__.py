"""Account use cases."""

from .login import LoginRequest, LoginResponse, LoginUseCase
from .password import (
    ChangePasswordRequest,
    ChangePasswordUseCase,
    ResetPasswordRequest,
    ResetPasswordUseCase,
)
from .request_code import (
    RequestPasswordResetRequest,
    RequestPasswordResetUseCase,
    RequestVerificationCodeRequest,
    RequestVerificationCodeUseCase,
)
from .signup import SignupRequest, SignupResponse, SignupUseCase
from .verify_email import MessageResponse, VerifyEmailRequest, VerifyEmailUseCase

__all__ = [
    "ChangePasswordRequest",
    "ChangePasswordUseCase",
    "LoginRequest",
    "LoginResponse",
    "LoginUseCase",
    "MessageResponse",
    "RequestPasswordResetRequest",
    "RequestPasswordResetUseCase",
    "RequestVerificationCodeRequest",
    "RequestVerificationCodeUseCase",
    "ResetPasswordRequest",
    "ResetPasswordUseCase",
    "SignupRequest",
    "SignupResponse",
    "SignupUseCase",
    "VerifyEmailRequest",
    "VerifyEmailUseCase",
]
