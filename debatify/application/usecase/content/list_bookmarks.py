"""Aggregated bookmarks use case."""

import asyncio

import logfire
from pydantic import BaseModel

from debatify.domain.service import ContentService
from debatify.domain.value import ContentKind, UserId

from ..common import ContentView, parse_id


class ListBookmarksRequest(BaseModel):
    user_id: str  # Set from the authenticated actor


class ListBookmarksResponse(BaseModel):
    items: list[ContentView]


class ListBookmarksUseCase:
    """Use case for everything a user bookmarked, across all kinds.

    The per-kind lookups run concurrently; results are merged newest first.
    Each item carries its ``kind`` so clients can tell them apart.
    """

    def __init__(self, content_service: ContentService) -> None:
        self.content_service = content_service

    async def execute(self, request: ListBookmarksRequest) -> ListBookmarksResponse:
        user_id = UserId(parse_id(request.user_id, "user"))
        with logfire.span("list_bookmarks", user_id=str(user_id)):
            per_kind = await asyncio.gather(
                *(
                    self.content_service.list_bookmarked(kind, user_id)
                    for kind in ContentKind
                )
            )
            items = [item for batch in per_kind for item in batch]
            items.sort(key=lambda item: item.created_at, reverse=True)

            logfire.info("Bookmarks listed", user_id=str(user_id), count=len(items))
            return ListBookmarksResponse(
                items=[
                    ContentView.from_item(item, viewer_id=user_id, redact_private=True)
                    for item in items
                ]
            )
