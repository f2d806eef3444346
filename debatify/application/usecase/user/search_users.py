"""Search users use case."""

from pydantic import BaseModel

from debatify.domain.error import ValidationError
from debatify.domain.service import UserService

from ..common import UserSummary


class SearchUsersRequest(BaseModel):
    query: str
    limit: int = 20


class SearchUsersResponse(BaseModel):
    users: list[UserSummary]


class SearchUsersUseCase:
    """Use case for case-insensitive username search."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: SearchUsersRequest) -> SearchUsersResponse:
        """Search.

        Raises:
            ValidationError: Blank query
        """
        if not request.query.strip():
            raise ValidationError("Query is required")
        users = await self.user_service.search(request.query, limit=request.limit)
        return SearchUsersResponse(users=[UserSummary.from_user(u) for u in users])
