"""Follow and unfollow use cases."""

from pydantic import BaseModel

from debatify.domain.service import UserService
from debatify.domain.value import UserId

from ..common import ApiModel, UserSummary, parse_id, parse_username


class FollowUserRequest(BaseModel):
    """Follow or unfollow request."""

    user_id: str  # Set from the authenticated actor
    username: str  # The user to (un)follow
    follow: bool = True


class FollowUserResponse(ApiModel):
    message: str
    follower_count: int


class FollowUserUseCase:
    """Use case for following or unfollowing another user."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: FollowUserRequest) -> FollowUserResponse:
        """Add or remove the follow edge.

        Raises:
            NotFoundError: Target user does not exist
            SelfReferenceError: Target is the actor
            AlreadyFollowingError / NotFollowingError: Edge already in that state
        """
        actor_id = UserId(parse_id(request.user_id, "user"))
        target = await self.user_service.get_by_username(
            parse_username(request.username)
        )

        if request.follow:
            target = await self.user_service.follow(actor_id, target.id)
            message = "Followed successfully"
        else:
            target = await self.user_service.unfollow(actor_id, target.id)
            message = "Unfollowed successfully"

        return FollowUserResponse(message=message, follower_count=len(target.followers))


class ListFollowsRequest(BaseModel):
    username: str
    followers: bool = True  # False lists followings


class ListFollowsResponse(BaseModel):
    users: list[UserSummary]


class ListFollowsUseCase:
    """Use case for listing a user's followers or followings."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: ListFollowsRequest) -> ListFollowsResponse:
        user = await self.user_service.get_by_username(parse_username(request.username))
        ids = user.followers if request.followers else user.followings
        users = await self.user_service.get_many(list(ids))
        return ListFollowsResponse(users=[UserSummary.from_user(u) for u in users])
