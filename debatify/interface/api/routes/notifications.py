"""Notification routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header

from debatify.application.usecase.notification import (
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    MarkNotificationsReadRequest,
    MarkNotificationsReadResponse,
    MarkNotificationsReadUseCase,
)
from debatify.domain.service import AccessService

router = APIRouter(
    prefix="/notifications", tags=["notifications"], route_class=DishkaRoute
)


@router.get("", response_model=ListNotificationsResponse)
async def list_notifications(
    list_notifications_use_case: FromDishka[ListNotificationsUseCase],
    access_service: FromDishka[AccessService],
    authorization: str | None = Header(default=None),
) -> ListNotificationsResponse:
    """The caller's most recent notifications, newest first."""
    actor_id = access_service.authenticate(authorization)

    return await list_notifications_use_case.execute(
        ListNotificationsRequest(user_id=str(actor_id))
    )


@router.put("/mark-read", response_model=MarkNotificationsReadResponse)
async def mark_notifications_read(
    mark_read_use_case: FromDishka[MarkNotificationsReadUseCase],
    access_service: FromDishka[AccessService],
    authorization: str | None = Header(default=None),
) -> MarkNotificationsReadResponse:
    """Mark all of the caller's notifications as read."""
    actor_id = access_service.authenticate(authorization)

    return await mark_read_use_case.execute(
        MarkNotificationsReadRequest(user_id=str(actor_id))
    )
