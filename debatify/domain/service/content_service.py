"""Content domain service."""

from typing import Optional
from uuid import uuid4

import logfire

from debatify.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from debatify.domain.model import ContentItem, User
from debatify.domain.repository import ContentRepository
from debatify.domain.value import ContentId, ContentKind, UserId

from .base import Service
from .notification_service import NotificationService
from .storage_service import StorageService, Upload


class ContentService(Service):
    """Domain service for creating, listing and deleting content."""

    def __init__(
        self,
        content_repository: ContentRepository,
        notification_service: NotificationService,
        storage_service: StorageService,
    ) -> None:
        """Initialize content service.

        Args:
            content_repository: Content repository
            notification_service: Used to delete notifications with their content
            storage_service: Stores blog attachments
        """
        self.content_repository = content_repository
        self.notification_service = notification_service
        self.storage_service = storage_service

    async def create(
        self,
        kind: ContentKind,
        author: User,
        title: str,
        body: str,
        category: Optional[str] = None,
        is_private: bool = False,
        passcode: Optional[str] = None,
        attachments: Optional[list[Upload]] = None,
    ) -> ContentItem:
        """Create a content item.

        A public item never keeps a passcode, even if one was sent. Blog
        attachments are uploaded only once every field has been accepted,
        and the item keeps the URLs the storage returned.

        Raises:
            ValidationError: Missing category or passcode, bad fields, or
                attachments on a kind that takes none
        """
        with logfire.span(
            "content_service.create", kind=kind.value, author_id=str(author.id)
        ):
            category = category.strip() if category else None
            if kind.requires_category and not category:
                raise ValidationError(f"Category is required for a {kind.label}")
            if is_private and not passcode:
                raise ValidationError("Passcode is required for private content")
            attachments = attachments or []
            if attachments and kind != ContentKind.BLOG:
                raise ValidationError(f"A {kind.label} cannot have attachments")
            self.storage_service.check_attachments(attachments)

            try:
                item = ContentItem(
                    id=ContentId(uuid4()),
                    kind=kind,
                    title=title.strip(),
                    body=body,
                    category=category,
                    author_id=author.id,
                    author_username=author.username,
                    is_private=is_private,
                    passcode=passcode if is_private else None,
                )
            except ValueError as e:
                raise ValidationError(str(e)) from e

            if attachments:
                file_urls = await self.storage_service.store_attachments(attachments)
                item = item.model_copy(update={"file_urls": file_urls})

            saved = await self.content_repository.create(item)
            logfire.info(
                "Content created",
                kind=kind.value,
                content_id=str(saved.id),
                is_private=saved.is_private,
            )
            return saved

    async def get(self, kind: ContentKind, content_id: ContentId) -> ContentItem:
        """Get a content item of a given kind.

        Raises:
            NotFoundError: No item of this kind with this id
        """
        with logfire.span(
            "content_service.get", kind=kind.value, content_id=str(content_id)
        ):
            item = await self.content_repository.find_by_id(content_id, kind=kind)
            if item is None:
                logfire.warn(
                    "Content not found", kind=kind.value, content_id=str(content_id)
                )
                raise NotFoundError(kind.label.capitalize(), str(content_id))
            return item

    async def list_by_kind(
        self, kind: ContentKind, limit: int = 100, offset: int = 0
    ) -> list[ContentItem]:
        """All items of one kind, newest first."""
        with logfire.span("content_service.list_by_kind", kind=kind.value):
            return await self.content_repository.find_by_kind(
                kind, limit=limit, offset=offset
            )

    async def list_by_author(
        self, kind: ContentKind, author_id: UserId
    ) -> list[ContentItem]:
        """Items of one kind written by a user, newest first."""
        with logfire.span(
            "content_service.list_by_author", kind=kind.value, author_id=str(author_id)
        ):
            return await self.content_repository.find_by_authors(kind, [author_id])

    async def list_following_feed(
        self, kind: ContentKind, user: User
    ) -> list[ContentItem]:
        """Public items of one kind by the authors the user follows."""
        with logfire.span(
            "content_service.list_following_feed",
            kind=kind.value,
            user_id=str(user.id),
        ):
            if not user.followings:
                return []
            return await self.content_repository.find_by_authors(
                kind, list(user.followings), include_private=False
            )

    async def list_bookmarked(
        self, kind: ContentKind, user_id: UserId
    ) -> list[ContentItem]:
        """Items of one kind bookmarked by the user."""
        with logfire.span(
            "content_service.list_bookmarked", kind=kind.value, user_id=str(user_id)
        ):
            return await self.content_repository.find_bookmarked(kind, user_id)

    async def delete(
        self, kind: ContentKind, content_id: ContentId, actor_id: UserId
    ) -> None:
        """Delete an item and every notification about it.

        Raises:
            NotFoundError: No such item
            NotAuthorizedError: The actor is not the author
        """
        with logfire.span(
            "content_service.delete",
            kind=kind.value,
            content_id=str(content_id),
            actor_id=str(actor_id),
        ):
            item = await self.get(kind, content_id)
            if item.author_id != actor_id:
                logfire.warn(
                    "Delete by non-author rejected",
                    content_id=str(content_id),
                    actor_id=str(actor_id),
                )
                raise NotAuthorizedError(kind.label, str(content_id), str(actor_id))

            await self.content_repository.delete(content_id)
            removed = await self.notification_service.cascade_delete(content_id)
            logfire.info(
                "Content deleted",
                kind=kind.value,
                content_id=str(content_id),
                notifications_removed=removed,
            )
