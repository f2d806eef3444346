"""Shared request/response models for use cases.

Responses serialize with camelCase keys (``bookmarkCount``,
``viewsFormatted``) for the web client; Python code uses snake_case.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from debatify.domain.error import ValidationError
from debatify.domain.model import Comment, ContentItem, User
from debatify.domain.value import ContentKind, Stance, UserId, Username
from debatify.util.format import format_views


class ApiModel(BaseModel):
    """Base for models that cross the HTTP boundary."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def parse_id(value: str, label: str) -> UUID:
    """Parse a UUID from a path or body value.

    Raises:
        ValidationError: Not a UUID
    """
    try:
        return UUID(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {label} id: {value}")


def parse_username(value: str) -> Username:
    """Parse a username from a path value.

    Raises:
        ValidationError: Empty or contains whitespace
    """
    try:
        return Username(value)
    except ValueError:
        raise ValidationError(f"Invalid username: {value}")


class UserSummary(ApiModel):
    """Public view of a user."""

    id: str
    username: str
    profile_picture: str
    bio: str = ""

    @classmethod
    def from_user(cls, user: User) -> "UserSummary":
        return cls(
            id=str(user.id),
            username=user.username.root,
            profile_picture=user.profile_picture,
            bio=user.bio,
        )


class CommentView(ApiModel):
    id: str
    author_id: str
    author_username: str
    text: str
    stance: Optional[Stance] = None
    likes: int
    liked_by: list[str]
    created_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentView":
        return cls(
            id=str(comment.id),
            author_id=str(comment.author_id),
            author_username=comment.author_username.root,
            text=comment.text,
            stance=comment.stance,
            likes=comment.likes,
            liked_by=[str(u) for u in comment.liked_by],
            created_at=comment.created_at,
        )


class ContentView(ApiModel):
    """Content item as returned to clients.

    The passcode of a private item is never included.
    """

    id: str
    kind: ContentKind
    title: str
    body: str
    category: Optional[str] = None
    file_urls: list[str]
    author_id: str
    author_username: str
    is_private: bool
    views: int
    views_formatted: str
    upvotes: int
    downvotes: int
    upvoted_by: list[str]
    downvoted_by: list[str]
    bookmark_count: int
    is_bookmarked: bool
    comments: list[CommentView]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_item(
        cls,
        item: ContentItem,
        viewer_id: Optional[UserId] = None,
        redact_private: bool = False,
    ) -> "ContentView":
        """Build the view of an item.

        With ``redact_private`` (listings), a private item shows its
        metadata only: body and comments stay behind the passcode.
        """
        redacted = redact_private and item.is_private
        return cls(
            id=str(item.id),
            kind=item.kind,
            title=item.title,
            body="" if redacted else item.body,
            category=item.category,
            file_urls=list(item.file_urls),
            author_id=str(item.author_id),
            author_username=item.author_username.root,
            is_private=item.is_private,
            views=item.views,
            views_formatted=format_views(item.views),
            upvotes=item.upvotes,
            downvotes=item.downvotes,
            upvoted_by=[str(u) for u in item.upvoted_by],
            downvoted_by=[str(u) for u in item.downvoted_by],
            bookmark_count=item.bookmark_count,
            is_bookmarked=item.is_bookmarked_by(viewer_id),
            comments=(
                [] if redacted else [CommentView.from_comment(c) for c in item.comments]
            ),
            created_at=item.created_at,
            updated_at=item.updated_at,
        )
