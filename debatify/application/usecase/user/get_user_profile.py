"""Get user profile use case."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from debatify.domain.service import UserService
from debatify.domain.value import UserId

from ..common import ApiModel, UserSummary, parse_id, parse_username


class GetUserProfileRequest(BaseModel):
    """Get user profile request.

    Look up by ``username``, or by ``user_id`` for the caller's own profile.
    """

    username: Optional[str] = None
    user_id: Optional[str] = None


class GetUserProfileResponse(ApiModel):
    """Public profile with the follow graph expanded to summaries."""

    id: str
    username: str
    bio: str
    profile_picture: str
    followers: list[UserSummary]
    followings: list[UserSummary]
    created_at: datetime


class GetUserProfileUseCase:
    """Use case for getting a user's profile."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get user profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetUserProfileRequest) -> GetUserProfileResponse:
        """Execute get user profile flow.

        Raises:
            NotFoundError: No such user
            ValidationError: Neither username nor user id given, or malformed
        """
        if request.user_id is not None:
            user = await self.user_service.get_by_id(
                UserId(parse_id(request.user_id, "user"))
            )
        else:
            user = await self.user_service.get_by_username(
                parse_username(request.username or "")
            )

        followers = await self.user_service.get_many(list(user.followers))
        followings = await self.user_service.get_many(list(user.followings))

        return GetUserProfileResponse(
            id=str(user.id),
            username=user.username.root,
            bio=user.bio,
            profile_picture=user.profile_picture,
            followers=[UserSummary.from_user(u) for u in followers],
            followings=[UserSummary.from_user(u) for u in followings],
            created_at=user.created_at,
        )
