"""Support request use case."""

from pydantic import EmailStr, Field

from debatify.domain.service import EmailService

from ..common import ApiModel


class SupportRequest(ApiModel):
    name: str = Field(min_length=1, max_length=200)
    email: EmailStr
    message: str = Field(min_length=1, max_length=10000)


class SupportResponse(ApiModel):
    message: str


class SubmitSupportRequestUseCase:
    """Use case for forwarding a support request to the support inbox."""

    def __init__(self, email_service: EmailService) -> None:
        self.email_service = email_service

    async def execute(self, request: SupportRequest) -> SupportResponse:
        await self.email_service.forward_support_request(
            request.name, str(request.email), request.message
        )
        return SupportResponse(message="Support request sent successfully")
