"""Get content use case."""

from typing import Optional

from pydantic import BaseModel

from debatify.domain.service import AccessService, ContentService, EngagementService
from debatify.domain.value import ContentId, ContentKind, UserId

from ..common import ContentView, parse_id


class GetContentRequest(BaseModel):
    """Get content request."""

    kind: ContentKind
    content_id: str
    passcode: Optional[str] = None
    is_poll: bool = False  # Client refresh; does not count as a view
    viewer_id: Optional[str] = None


class GetContentUseCase:
    """Use case for reading one item.

    The passcode gate runs before the view is counted, so a rejected read
    leaves the counter alone.
    """

    def __init__(
        self,
        content_service: ContentService,
        engagement_service: EngagementService,
        access_service: AccessService,
    ) -> None:
        self.content_service = content_service
        self.engagement_service = engagement_service
        self.access_service = access_service

    async def execute(self, request: GetContentRequest) -> ContentView:
        """Read the item and count the view.

        Raises:
            ValidationError: Malformed id
            NotFoundError: No such item
            AccessDeniedError: Private item and wrong passcode
        """
        content_id = ContentId(parse_id(request.content_id, request.kind.label))
        viewer_id = (
            UserId(parse_id(request.viewer_id, "user")) if request.viewer_id else None
        )

        item = await self.content_service.get(request.kind, content_id)
        self.access_service.ensure_readable(item, request.passcode)

        item = await self.engagement_service.record_view(
            request.kind, content_id, is_poll=request.is_poll
        )
        return ContentView.from_item(item, viewer_id=viewer_id)
