"""Support routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from debatify.application.usecase.support import (
    SubmitSupportRequestUseCase,
    SupportRequest,
    SupportResponse,
)

router = APIRouter(prefix="/support", tags=["support"], route_class=DishkaRoute)


@router.post("", response_model=SupportResponse)
async def submit_support_request(
    request: SupportRequest,
    submit_support_request_use_case: FromDishka[SubmitSupportRequestUseCase],
) -> SupportResponse:
    """Forward a support message to the support mailbox."""
    return await submit_support_request_use_case.execute(request)
