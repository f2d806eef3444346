"""Content listing use cases."""

from typing import Optional

from pydantic import BaseModel

from debatify.domain.service import ContentService, UserService
from debatify.domain.value import ContentKind, UserId

from ..common import ContentView, parse_id, parse_username


class ListContentRequest(BaseModel):
    """List content request.

    Exactly one of the filters applies, checked in this order:
    ``following_of`` (feed of a user's followings), ``author`` (one
    user's items), or nothing (everything of the kind).
    """

    kind: ContentKind
    viewer_id: Optional[str] = None
    following_of: Optional[str] = None
    author: Optional[str] = None  # username
    limit: int = 100
    offset: int = 0


class ListContentResponse(BaseModel):
    items: list[ContentView]


class ListContentUseCase:
    """Use case for the newest-first listings of one content kind."""

    def __init__(self, content_service: ContentService, user_service: UserService) -> None:
        self.content_service = content_service
        self.user_service = user_service

    async def execute(self, request: ListContentRequest) -> ListContentResponse:
        """List items.

        Raises:
            NotFoundError: The named user does not exist
        """
        viewer_id = (
            UserId(parse_id(request.viewer_id, "user")) if request.viewer_id else None
        )

        if request.following_of is not None:
            user = await self.user_service.get_by_id(
                UserId(parse_id(request.following_of, "user"))
            )
            items = await self.content_service.list_following_feed(request.kind, user)
        elif request.author is not None:
            author = await self.user_service.get_by_username(parse_username(request.author))
            items = await self.content_service.list_by_author(request.kind, author.id)
        else:
            items = await self.content_service.list_by_kind(
                request.kind, limit=request.limit, offset=request.offset
            )

        return ListContentResponse(
            items=[
                ContentView.from_item(item, viewer_id=viewer_id, redact_private=True)
                for item in items
            ]
        )
