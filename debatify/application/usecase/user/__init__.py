"""User use cases."""

from .follow_user import (
    FollowUserRequest,
    FollowUserResponse,
    FollowUserUseCase,
    ListFollowsRequest,
    ListFollowsResponse,
    ListFollowsUseCase,
)
from .get_user_profile import (
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
)
from .search_users import SearchUsersRequest, SearchUsersResponse, SearchUsersUseCase
from .update_user_profile import (
    UpdateBioRequest,
    UpdateBioResponse,
    UpdateBioUseCase,
    UpdateProfilePictureRequest,
    UpdateProfilePictureResponse,
    UpdateProfilePictureUseCase,
)

__all__ = [
    "FollowUserRequest",
    "FollowUserResponse",
    "FollowUserUseCase",
    "GetUserProfileRequest",
    "GetUserProfileResponse",
    "GetUserProfileUseCase",
    "ListFollowsRequest",
    "ListFollowsResponse",
    "ListFollowsUseCase",
    "SearchUsersRequest",
    "SearchUsersResponse",
    "SearchUsersUseCase",
    "UpdateBioRequest",
    "UpdateBioResponse",
    "UpdateBioUseCase",
    "UpdateProfilePictureRequest",
    "UpdateProfilePictureResponse",
    "UpdateProfilePictureUseCase",
]
