"""Support use cases."""

from .submit_support_request import (
    SubmitSupportRequestUseCase,
    SupportRequest,
    SupportResponse,
)

__all__ = ["SubmitSupportRequestUseCase", "SupportRequest", "SupportResponse"]
