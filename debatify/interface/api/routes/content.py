"""Content routes.

One set of routes serves all three kinds; ``kind`` is one of
``discussion``, ``debate`` or ``blog``.
"""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, File, Form, Header, Query, UploadFile, status
from pydantic import Field

from debatify.application.usecase.common import ApiModel, ContentView
from debatify.application.usecase.content import (
    CreateContentRequest,
    CreateContentUseCase,
    DeleteContentRequest,
    DeleteContentResponse,
    DeleteContentUseCase,
    GetContentRequest,
    GetContentUseCase,
    ListContentRequest,
    ListContentResponse,
    ListContentUseCase,
)
from debatify.application.usecase.engagement import (
    AddCommentRequest,
    AddCommentUseCase,
    BookmarkRequest,
    BookmarkResponse,
    BookmarkUseCase,
    LikeCommentRequest,
    LikeCommentResponse,
    LikeCommentUseCase,
    VoteRequest,
    VoteResponse,
    VoteUseCase,
)
from debatify.domain.service import AccessService, Upload
from debatify.domain.value import ContentKind, Stance, VoteDirection

router = APIRouter(prefix="/content", tags=["content"], route_class=DishkaRoute)


class CreateContentAPIRequest(ApiModel):
    """API request for creating a discussion or debate."""

    title: str = Field(min_length=1, max_length=300)
    body: str = Field(min_length=1, max_length=50000)
    category: Optional[str] = None
    is_private: bool = False
    passcode: Optional[str] = None


class AddCommentAPIRequest(ApiModel):
    """API request for commenting. Debates require a stance."""

    text: str
    stance: Optional[Stance] = None


@router.post(
    "/blog", response_model=ContentView, status_code=status.HTTP_201_CREATED
)
async def create_blog(
    create_content_use_case: FromDishka[CreateContentUseCase],
    access_service: FromDishka[AccessService],
    title: str = Form(min_length=1, max_length=300),
    body: str = Form(min_length=1, max_length=50000),
    category: Optional[str] = Form(default=None),
    is_private: bool = Form(default=False, alias="isPrivate"),
    passcode: Optional[str] = Form(default=None),
    files: Optional[list[UploadFile]] = File(default=None),
    authorization: str | None = Header(default=None),
) -> ContentView:
    """Create a blog from a multipart form.

    Up to 10 ``files`` (images, audio, video or PDF, 5 MB each) are stored
    and their URLs recorded on the blog.
    """
    actor_id = access_service.authenticate(authorization)

    attachments = [
        Upload(
            data=await upload.read(),
            filename=upload.filename or "upload",
            content_type=upload.content_type or "application/octet-stream",
        )
        for upload in files or []
    ]
    return await create_content_use_case.execute(
        CreateContentRequest(
            kind=ContentKind.BLOG,
            user_id=str(actor_id),
            title=title,
            body=body,
            category=category,
            is_private=is_private,
            passcode=passcode,
            attachments=attachments,
        )
    )


@router.post(
    "/{kind}", response_model=ContentView, status_code=status.HTTP_201_CREATED
)
async def create_content(
    kind: ContentKind,
    request: CreateContentAPIRequest,
    create_content_use_case: FromDishka[CreateContentUseCase],
    access_service: FromDishka[AccessService],
    authorization: str | None = Header(default=None),
) -> ContentView:
    """Create a discussion or debate authored by the caller.

    Blogs are created through the multipart route above.

    Example:
        POST /content/debate
        Authorization: Bearer eyJ...
        {"title": "Tabs or spaces", "body": "...", "category": "tech"}
    """
    actor_id = access_service.authenticate(authorization)

    return await create_content_use_case.execute(
        CreateContentRequest(
            kind=kind,
            user_id=str(actor_id),
            title=request.title,
            body=request.body,
            category=request.category,
            is_private=request.is_private,
            passcode=request.passcode,
        )
    )


@router.get("/{kind}", response_model=ListContentResponse)
async def list_content(
    kind: ContentKind,
    list_content_use_case: FromDishka[ListContentUseCase],
    access_service: FromDishka[AccessService],
    limit: int = Query(default=100, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    authorization: str | None = Header(default=None),
) -> ListContentResponse:
    """List items of a kind, newest first.

    Private items appear with their body and comments withheld.
    """
    viewer_id = access_service.optional_actor(authorization)

    return await list_content_use_case.execute(
        ListContentRequest(
            kind=kind,
            viewer_id=str(viewer_id) if viewer_id else None,
            limit=limit,
            offset=offset,
        )
    )


@router.get("/{kind}/following", response_model=ListContentResponse)
async def list_following_content(
    kind: ContentKind,
    list_content_use_case: FromDishka[ListContentUseCase],
    access_service: FromDishka[AccessService],
    authorization: str | None = Header(default=None),
) -> ListContentResponse:
    """List items authored by users the caller follows, newest first."""
    actor_id = access_service.authenticate(authorization)

    return await list_content_use_case.execute(
        ListContentRequest(
            kind=kind, viewer_id=str(actor_id), following_of=str(actor_id)
        )
    )


@router.get("/{kind}/{content_id}", response_model=ContentView)
async def get_content(
    kind: ContentKind,
    content_id: str,
    get_content_use_case: FromDishka[GetContentUseCase],
    access_service: FromDishka[AccessService],
    passcode: str | None = Query(default=None),
    poll: bool = Query(default=False),
    authorization: str | None = Header(default=None),
) -> ContentView:
    """Read one item and count the view.

    Private items require the passcode. ``poll=true`` marks a client
    refresh, which does not count as a view.
    """
    viewer_id = access_service.optional_actor(authorization)

    return await get_content_use_case.execute(
        GetContentRequest(
            kind=kind,
            content_id=content_id,
            passcode=passcode,
            is_poll=poll,
            viewer_id=str(viewer_id) if viewer_id else None,
        )
    )


@router.delete("/{kind}/{content_id}", response_model=DeleteContentResponse)
async def delete_content(
    kind: ContentKind,
    content_id: str,
    delete_content_use_case: FromDishka[DeleteContentUseCase],
    access_service: FromDishka[AccessService],
    authorization: str | None = Header(default=None),
) -> DeleteContentResponse:
    """Delete an item. Only its author may do so."""
    actor_id = access_service.authenticate(authorization)

    return await delete_content_use_case.execute(
        DeleteContentRequest(kind=kind, content_id=content_id, user_id=str(actor_id))
    )


async def _vote(
    kind: ContentKind,
    content_id: str,
    direction: VoteDirection,
    vote_use_case: VoteUseCase,
    access_service: AccessService,
    authorization: str | None,
) -> VoteResponse:
    actor_id = access_service.authenticate(authorization)

    return await vote_use_case.execute(
        VoteRequest(
            kind=kind,
            content_id=content_id,
            user_id=str(actor_id),
            direction=direction,
        )
    )


@router.post("/{kind}/{content_id}/upvote", response_model=VoteResponse)
async def upvote(
    kind: ContentKind,
    content_id: str,
    vote_use_case: FromDishka[VoteUseCase],
    access_service: FromDishka[AccessService],
    authorization: str | None = Header(default=None),
) -> VoteResponse:
    """Upvote an item.

    Repeating an upvote removes it on discussions and debates; on blogs it
    is rejected unless the blog vote policy is set to toggle.
    """
    return await _vote(
        kind, content_id, VoteDirection.UP, vote_use_case, access_service, authorization
    )


@router.post("/{kind}/{content_id}/downvote", response_model=VoteResponse)
async def downvote(
    kind: ContentKind,
    content_id: str,
    vote_use_case: FromDishka[VoteUseCase],
    access_service: FromDishka[AccessService],
    authorization: str | None = Header(default=None),
) -> VoteResponse:
    """Downvote an item. Same repeat rules as upvotes."""
    return await _vote(
        kind,
        content_id,
        VoteDirection.DOWN,
        vote_use_case,
        access_service,
        authorization,
    )


@router.post("/{kind}/{content_id}/bookmark", response_model=BookmarkResponse)
async def bookmark(
    kind: ContentKind,
    content_id: str,
    bookmark_use_case: FromDishka[BookmarkUseCase],
    access_service: FromDishka[AccessService],
    authorization: str | None = Header(default=None),
) -> BookmarkResponse:
    """Toggle the caller's bookmark on an item."""
    actor_id = access_service.authenticate(authorization)

    return await bookmark_use_case.execute(
        BookmarkRequest(kind=kind, content_id=content_id, user_id=str(actor_id))
    )


@router.post(
    "/{kind}/{content_id}/comment",
    response_model=ContentView,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    kind: ContentKind,
    content_id: str,
    request: AddCommentAPIRequest,
    add_comment_use_case: FromDishka[AddCommentUseCase],
    access_service: FromDishka[AccessService],
    authorization: str | None = Header(default=None),
) -> ContentView:
    """Append a comment and return the updated item."""
    actor_id = access_service.authenticate(authorization)

    return await add_comment_use_case.execute(
        AddCommentRequest(
            kind=kind,
            content_id=content_id,
            user_id=str(actor_id),
            text=request.text,
            stance=request.stance,
        )
    )


@router.post(
    "/{kind}/{content_id}/comment/{comment_id}/like",
    response_model=LikeCommentResponse,
)
async def like_comment(
    kind: ContentKind,
    content_id: str,
    comment_id: str,
    like_comment_use_case: FromDishka[LikeCommentUseCase],
    access_service: FromDishka[AccessService],
    authorization: str | None = Header(default=None),
) -> LikeCommentResponse:
    """Toggle the caller's like on a comment."""
    actor_id = access_service.authenticate(authorization)

    return await like_comment_use_case.execute(
        LikeCommentRequest(
            kind=kind,
            content_id=content_id,
            comment_id=comment_id,
            user_id=str(actor_id),
        )
    )
