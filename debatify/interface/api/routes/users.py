"""User profile routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, File, Header, Query, UploadFile

from debatify.application.usecase.common import ApiModel
from debatify.application.usecase.content import (
    ListContentRequest,
    ListContentResponse,
    ListContentUseCase,
)
from debatify.application.usecase.user import (
    FollowUserRequest,
    FollowUserResponse,
    FollowUserUseCase,
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
    ListFollowsRequest,
    ListFollowsResponse,
    ListFollowsUseCase,
    SearchUsersRequest,
    SearchUsersResponse,
    SearchUsersUseCase,
    UpdateBioRequest,
    UpdateBioResponse,
    UpdateBioUseCase,
    UpdateProfilePictureRequest,
    UpdateProfilePictureResponse,
    UpdateProfilePictureUseCase,
)
from debatify.domain.service import AccessService
from debatify.domain.value import ContentKind

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateBioAPIRequest(ApiModel):
    """API request for updating the caller's bio."""

    bio: str


@router.get("/me", response_model=GetUserProfileResponse)
async def get_my_profile(
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
    access_service: FromDishka[AccessService],
    authorization: str | None = Header(default=None),
) -> GetUserProfileResponse:
    """Get the authenticated user's profile."""
    actor_id = access_service.authenticate(authorization)

    return await get_user_profile_use_case.execute(
        GetUserProfileRequest(user_id=str(actor_id))
    )


@router.put("/me/bio", response_model=UpdateBioResponse)
async def update_my_bio(
    request: UpdateBioAPIRequest,
    update_bio_use_case: FromDishka[UpdateBioUseCase],
    access_service: FromDishka[AccessService],
    authorization: str | None = Header(default=None),
) -> UpdateBioResponse:
    """Replace the caller's bio (at most 500 characters)."""
    actor_id = access_service.authenticate(authorization)

    return await update_bio_use_case.execute(
        UpdateBioRequest(user_id=str(actor_id), bio=request.bio)
    )


@router.put("/me/profile-picture", response_model=UpdateProfilePictureResponse)
async def update_my_profile_picture(
    update_profile_picture_use_case: FromDishka[UpdateProfilePictureUseCase],
    access_service: FromDishka[AccessService],
    profile_picture: UploadFile = File(alias="profilePicture"),
    authorization: str | None = Header(default=None),
) -> UpdateProfilePictureResponse:
    """Upload a new profile picture.

    Multipart form with a single ``profilePicture`` image file.
    """
    actor_id = access_service.authenticate(authorization)
    data = await profile_picture.read()

    return await update_profile_picture_use_case.execute(
        UpdateProfilePictureRequest(
            user_id=str(actor_id),
            data=data,
            filename=profile_picture.filename or "upload",
            content_type=profile_picture.content_type or "application/octet-stream",
        )
    )


@router.get("/search", response_model=SearchUsersResponse)
async def search_users(
    search_users_use_case: FromDishka[SearchUsersUseCase],
    query: str = Query(default=""),
) -> SearchUsersResponse:
    """Find users whose username contains ``query`` (case-insensitive)."""
    return await search_users_use_case.execute(SearchUsersRequest(query=query))


@router.get("/{username}", response_model=GetUserProfileResponse)
async def get_user_profile(
    username: str,
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
) -> GetUserProfileResponse:
    """Get a user's public profile by username.

    Example:
        GET /users/alice

        Response:
        {
            "id": "123e4567-e89b-12d3-a456-426614174000",
            "username": "alice",
            "bio": "",
            "profilePicture": "/images/default-avatar.png",
            "followers": [],
            "followings": [],
            "createdAt": "2025-01-15T12:34:56Z"
        }
    """
    return await get_user_profile_use_case.execute(
        GetUserProfileRequest(username=username)
    )


@router.post("/{username}/follow", response_model=FollowUserResponse)
async def follow_user(
    username: str,
    follow_user_use_case: FromDishka[FollowUserUseCase],
    access_service: FromDishka[AccessService],
    authorization: str | None = Header(default=None),
) -> FollowUserResponse:
    """Follow a user."""
    actor_id = access_service.authenticate(authorization)

    return await follow_user_use_case.execute(
        FollowUserRequest(user_id=str(actor_id), username=username, follow=True)
    )


@router.post("/{username}/unfollow", response_model=FollowUserResponse)
async def unfollow_user(
    username: str,
    follow_user_use_case: FromDishka[FollowUserUseCase],
    access_service: FromDishka[AccessService],
    authorization: str | None = Header(default=None),
) -> FollowUserResponse:
    """Stop following a user."""
    actor_id = access_service.authenticate(authorization)

    return await follow_user_use_case.execute(
        FollowUserRequest(user_id=str(actor_id), username=username, follow=False)
    )


@router.get("/{username}/followers", response_model=ListFollowsResponse)
async def list_followers(
    username: str,
    list_follows_use_case: FromDishka[ListFollowsUseCase],
    access_service: FromDishka[AccessService],
    authorization: str | None = Header(default=None),
) -> ListFollowsResponse:
    """List a user's followers. Requires authentication."""
    access_service.authenticate(authorization)

    return await list_follows_use_case.execute(
        ListFollowsRequest(username=username, followers=True)
    )


@router.get("/{username}/followings", response_model=ListFollowsResponse)
async def list_followings(
    username: str,
    list_follows_use_case: FromDishka[ListFollowsUseCase],
    access_service: FromDishka[AccessService],
    authorization: str | None = Header(default=None),
) -> ListFollowsResponse:
    """List the users a user follows. Requires authentication."""
    access_service.authenticate(authorization)

    return await list_follows_use_case.execute(
        ListFollowsRequest(username=username, followers=False)
    )


@router.get("/{username}/content/{kind}", response_model=ListContentResponse)
async def list_user_content(
    username: str,
    kind: ContentKind,
    list_content_use_case: FromDishka[ListContentUseCase],
    access_service: FromDishka[AccessService],
    authorization: str | None = Header(default=None),
) -> ListContentResponse:
    """List a user's items of one kind, newest first."""
    viewer_id = access_service.optional_actor(authorization)

    return await list_content_use_case.execute(
        ListContentRequest(
            kind=kind,
            viewer_id=str(viewer_id) if viewer_id else None,
            author=username,
        )
    )
