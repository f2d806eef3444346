"""Delete content use case."""

from pydantic import BaseModel

from debatify.domain.service import ContentService
from debatify.domain.value import ContentId, ContentKind, UserId

from ..common import parse_id


class DeleteContentRequest(BaseModel):
    kind: ContentKind
    content_id: str
    user_id: str  # Set from the authenticated actor


class DeleteContentResponse(BaseModel):
    message: str


class DeleteContentUseCase:
    """Use case for an author deleting their own item."""

    def __init__(self, content_service: ContentService) -> None:
        self.content_service = content_service

    async def execute(self, request: DeleteContentRequest) -> DeleteContentResponse:
        """Delete the item and its notifications.

        Raises:
            NotFoundError: No such item
            NotAuthorizedError: Actor is not the author
        """
        await self.content_service.delete(
            request.kind,
            ContentId(parse_id(request.content_id, request.kind.label)),
            UserId(parse_id(request.user_id, "user")),
        )
        return DeleteContentResponse(
            message=f"{request.kind.label.capitalize()} deleted successfully"
        )
