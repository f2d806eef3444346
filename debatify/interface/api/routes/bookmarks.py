"""Bookmark routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header

from debatify.application.usecase.content import (
    ListBookmarksRequest,
    ListBookmarksResponse,
    ListBookmarksUseCase,
)
from debatify.domain.service import AccessService

router = APIRouter(prefix="/bookmarks", tags=["bookmarks"], route_class=DishkaRoute)


@router.get("", response_model=ListBookmarksResponse)
async def list_bookmarks(
    list_bookmarks_use_case: FromDishka[ListBookmarksUseCase],
    access_service: FromDishka[AccessService],
    authorization: str | None = Header(default=None),
) -> ListBookmarksResponse:
    """List everything the caller bookmarked, across all kinds, newest first.

    Each item carries its ``kind``.
    """
    actor_id = access_service.authenticate(authorization)

    return await list_bookmarks_use_case.execute(
        ListBookmarksRequest(user_id=str(actor_id))
    )
