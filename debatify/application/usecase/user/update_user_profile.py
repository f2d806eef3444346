"""Update user profile use cases."""

import logfire
from pydantic import BaseModel, Field

from debatify.domain.service import StorageService, UserService
from debatify.domain.value import UserId

from ..common import ApiModel, parse_id


class UpdateBioRequest(BaseModel):
    """Update bio request."""

    user_id: str  # From authenticated user
    bio: str = Field(max_length=500)


class UpdateBioResponse(ApiModel):
    message: str
    bio: str


class UpdateBioUseCase:
    """Use case for updating a user's bio."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize update bio use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: UpdateBioRequest) -> UpdateBioResponse:
        user_id = UserId(parse_id(request.user_id, "user"))
        saved = await self.user_service.update_fields(user_id, bio=request.bio)
        return UpdateBioResponse(message="Bio updated", bio=saved.bio)


class UpdateProfilePictureRequest(BaseModel):
    """Update profile picture request."""

    user_id: str  # From authenticated user
    data: bytes
    filename: str
    content_type: str


class UpdateProfilePictureResponse(ApiModel):
    message: str
    profile_picture: str


class UpdateProfilePictureUseCase:
    """Use case for uploading a new profile picture.

    The image goes to blob storage and the user keeps the returned URL.
    """

    def __init__(self, user_service: UserService, storage_service: StorageService) -> None:
        self.user_service = user_service
        self.storage_service = storage_service

    async def execute(
        self, request: UpdateProfilePictureRequest
    ) -> UpdateProfilePictureResponse:
        """Store the image and update the user.

        Raises:
            ValidationError: Empty, oversized or non-image upload
            ProviderError: Storage backend failed
        """
        user_id = UserId(parse_id(request.user_id, "user"))
        await self.user_service.get_by_id(user_id)

        url = await self.storage_service.store_image(
            request.data, request.filename, request.content_type
        )
        saved = await self.user_service.update_fields(user_id, profile_picture=url)
        logfire.info("Profile picture updated", user_id=str(user_id))
        return UpdateProfilePictureResponse(
            message="Profile picture updated", profile_picture=saved.profile_picture
        )
