"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Iterable, List
from uuid import UUID

from debatify.domain.model import Comment, ContentItem, Notification, OneTimeCode, User
from debatify.domain.value import (
    CodePurpose,
    CommentId,
    ContentId,
    ContentKind,
    NotificationId,
    NotificationType,
    OneTimeCodeId,
    UserId,
    Username,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _user_ids(values: Iterable[Any] | None) -> List[UserId]:
    return [UserId(_uuid(v)) for v in values or []]


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        email=row["email"],
        password_hash=row["password_hash"],
        is_verified=row["is_verified"],
        bio=row.get("bio") or "",
        profile_picture=row["profile_picture"],
        followers=_user_ids(row.get("followers")),
        followings=_user_ids(row.get("followings")),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return user.model_dump()


def row_to_content_item(row: Dict[str, Any]) -> ContentItem:
    """Convert database row to ContentItem domain model.

    Embedded comments are stored as a JSON array and validated back into
    Comment models.
    """
    return ContentItem(
        id=ContentId(_uuid(row["id"])),
        kind=ContentKind(row["kind"]),
        title=row["title"],
        body=row["body"],
        category=row.get("category"),
        file_urls=list(row.get("file_urls") or []),
        author_id=UserId(_uuid(row["author_id"])),
        author_username=Username(row["author_username"]),
        is_private=row["is_private"],
        passcode=row.get("passcode"),
        views=row["views"],
        upvotes=row["upvotes"],
        upvoted_by=_user_ids(row.get("upvoted_by")),
        downvotes=row["downvotes"],
        downvoted_by=_user_ids(row.get("downvoted_by")),
        bookmark_count=row["bookmark_count"],
        bookmarked_by=_user_ids(row.get("bookmarked_by")),
        comments=[Comment.model_validate(c) for c in row.get("comments") or []],
        version=row["version"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def content_item_to_dict(item: ContentItem) -> Dict[str, Any]:
    """Convert ContentItem domain model to database dict.

    Comments are dumped in JSON mode so the JSONB column receives plain
    strings for ids and timestamps.
    """
    data = item.model_dump(exclude={"comments"})
    data["kind"] = item.kind.value
    data["comments"] = [c.model_dump(mode="json") for c in item.comments]
    return data


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model."""
    return Notification(
        id=NotificationId(_uuid(row["id"])),
        recipient_id=UserId(_uuid(row["recipient_id"])),
        actor_id=UserId(_uuid(row["actor_id"])),
        type=NotificationType(row["type"]),
        message=row["message"],
        related_id=_uuid(row["related_id"]),
        comment_id=CommentId(_uuid(row["comment_id"])) if row.get("comment_id") else None,
        read=row["read"],
        created_at=row["created_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    data = notification.model_dump()
    data["type"] = notification.type.value
    return data


def row_to_one_time_code(row: Dict[str, Any]) -> OneTimeCode:
    """Convert database row to OneTimeCode domain model."""
    return OneTimeCode(
        id=OneTimeCodeId(_uuid(row["id"])),
        email=row["email"],
        code=row["code"],
        purpose=CodePurpose(row["purpose"]),
        expires_at=row["expires_at"],
        created_at=row["created_at"],
    )


def one_time_code_to_dict(code: OneTimeCode) -> Dict[str, Any]:
    data = code.model_dump()
    data["purpose"] = code.purpose.value
    return data
