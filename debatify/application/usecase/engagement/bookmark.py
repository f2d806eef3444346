"""Bookmark use case."""

from pydantic import BaseModel

from debatify.domain.service import EngagementService
from debatify.domain.value import ContentId, ContentKind, UserId

from ..common import ApiModel, parse_id


class BookmarkRequest(BaseModel):
    kind: ContentKind
    content_id: str
    user_id: str  # Set from the authenticated actor


class BookmarkResponse(ApiModel):
    bookmark_count: int
    is_bookmarked: bool


class BookmarkUseCase:
    """Use case for toggling a bookmark."""

    def __init__(self, engagement_service: EngagementService) -> None:
        self.engagement_service = engagement_service

    async def execute(self, request: BookmarkRequest) -> BookmarkResponse:
        item, bookmarked = await self.engagement_service.bookmark(
            request.kind,
            ContentId(parse_id(request.content_id, request.kind.label)),
            UserId(parse_id(request.user_id, "user")),
        )
        return BookmarkResponse(
            bookmark_count=item.bookmark_count, is_bookmarked=bookmarked
        )
