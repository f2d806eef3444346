"""Vote use case."""

from pydantic import BaseModel

from debatify.domain.service import EngagementService
from debatify.domain.value import ContentId, ContentKind, UserId, VoteDirection

from ..common import ApiModel, parse_id


class VoteRequest(BaseModel):
    """Upvote or downvote request."""

    kind: ContentKind
    content_id: str
    user_id: str  # Set from the authenticated actor
    direction: VoteDirection


class VoteResponse(ApiModel):
    """Vote counts after the vote."""

    upvotes: int
    downvotes: int


class VoteUseCase:
    """Use case for upvoting or downvoting any content kind."""

    def __init__(self, engagement_service: EngagementService) -> None:
        """Initialize vote use case.

        Args:
            engagement_service: Engagement domain service
        """
        self.engagement_service = engagement_service

    async def execute(self, request: VoteRequest) -> VoteResponse:
        """Execute vote.

        Raises:
            ValidationError: Malformed id
            NotFoundError: No such item
            AlreadyVotedError: Repeated vote where the kind rejects repeats
            StaleContentError: Contended beyond the retry limit
        """
        item = await self.engagement_service.vote(
            request.kind,
            ContentId(parse_id(request.content_id, request.kind.label)),
            UserId(parse_id(request.user_id, "user")),
            request.direction,
        )
        return VoteResponse(upvotes=item.upvotes, downvotes=item.downvotes)
