"""Create content use case."""

from typing import Optional

from pydantic import Field

from debatify.domain.service import ContentService, Upload, UserService
from debatify.domain.value import ContentKind, UserId

from ..common import ApiModel, ContentView, parse_id


class CreateContentRequest(ApiModel):
    """Create content request.

    ``body`` is the discussion/debate description or the blog text.
    ``attachments`` are only accepted for blogs.
    """

    kind: ContentKind
    user_id: str  # Set from the authenticated actor
    title: str = Field(min_length=1, max_length=300)
    body: str = Field(min_length=1, max_length=50000)
    category: Optional[str] = None
    is_private: bool = False
    passcode: Optional[str] = None
    attachments: list[Upload] = Field(default_factory=list)


class CreateContentUseCase:
    """Use case for creating a discussion, debate or blog."""

    def __init__(self, content_service: ContentService, user_service: UserService) -> None:
        """Initialize create content use case.

        Args:
            content_service: Content domain service
            user_service: User domain service
        """
        self.content_service = content_service
        self.user_service = user_service

    async def execute(self, request: CreateContentRequest) -> ContentView:
        """Create the item.

        Raises:
            NotFoundError: Author does not exist
            ValidationError: Missing category or passcode, or bad attachments
            ProviderError: Storage backend failed
        """
        author = await self.user_service.get_by_id(
            UserId(parse_id(request.user_id, "user"))
        )
        item = await self.content_service.create(
            kind=request.kind,
            author=author,
            title=request.title,
            body=request.body,
            category=request.category,
            is_private=request.is_private,
            passcode=request.passcode,
            attachments=request.attachments,
        )
        return ContentView.from_item(item, viewer_id=author.id)
