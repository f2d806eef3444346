"""Comment use cases."""

from typing import Optional

from pydantic import BaseModel

from debatify.domain.service import EngagementService
from debatify.domain.value import CommentId, ContentId, ContentKind, Stance, UserId

from ..common import ApiModel, ContentView, parse_id


class AddCommentRequest(BaseModel):
    """Add comment request.

    ``stance`` is required on debates and refused elsewhere.
    """

    kind: ContentKind
    content_id: str
    user_id: str  # Set from the authenticated actor
    text: str
    stance: Optional[Stance] = None


class AddCommentUseCase:
    """Use case for commenting on any content kind."""

    def __init__(self, engagement_service: EngagementService) -> None:
        self.engagement_service = engagement_service

    async def execute(self, request: AddCommentRequest) -> ContentView:
        """Append the comment and return the whole item.

        Raises:
            NotFoundError: No such item
            ValidationError: Stance or text rules violated
        """
        user_id = UserId(parse_id(request.user_id, "user"))
        item = await self.engagement_service.add_comment(
            request.kind,
            ContentId(parse_id(request.content_id, request.kind.label)),
            user_id,
            request.text,
            request.stance,
        )
        return ContentView.from_item(item, viewer_id=user_id)


class LikeCommentRequest(BaseModel):
    kind: ContentKind
    content_id: str
    comment_id: str
    user_id: str  # Set from the authenticated actor


class LikeCommentResponse(ApiModel):
    likes: int
    liked_by: list[str]
    is_liked: bool


class LikeCommentUseCase:
    """Use case for toggling a like on a comment."""

    def __init__(self, engagement_service: EngagementService) -> None:
        self.engagement_service = engagement_service

    async def execute(self, request: LikeCommentRequest) -> LikeCommentResponse:
        """Toggle the like.

        Raises:
            NotFoundError: No such item or comment
        """
        user_id = UserId(parse_id(request.user_id, "user"))
        comment = await self.engagement_service.like_comment(
            request.kind,
            ContentId(parse_id(request.content_id, request.kind.label)),
            CommentId(parse_id(request.comment_id, "comment")),
            user_id,
        )
        return LikeCommentResponse(
            likes=comment.likes,
            liked_by=[str(u) for u in comment.liked_by],
            is_liked=user_id in comment.liked_by,
        )
