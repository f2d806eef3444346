"""Content repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from debatify.domain.model.content import ContentItem
from debatify.domain.value import ContentId, ContentKind, UserId


class ContentRepository(ABC):
    """Repository for ContentItem aggregate.

    Writes to an existing item are compare-and-set on ``version``: the
    update only lands if the stored version still equals the version the
    item was read at.
    """

    @abstractmethod
    async def find_by_id(
        self, content_id: ContentId, kind: Optional[ContentKind] = None
    ) -> Optional[ContentItem]:
        """Find a content item by ID.

        Args:
            content_id: The item's unique identifier
            kind: Only match items of this kind (None for any kind)

        Returns:
            The item if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_kind(
        self, kind: ContentKind, limit: int = 100, offset: int = 0
    ) -> List[ContentItem]:
        """List items of one kind, newest first."""
        pass

    @abstractmethod
    async def find_by_authors(
        self,
        kind: ContentKind,
        author_ids: List[UserId],
        include_private: bool = True,
    ) -> List[ContentItem]:
        """List items of one kind written by any of the given authors.

        Args:
            kind: Content kind
            author_ids: Authors to include
            include_private: Whether private items are included

        Returns:
            Items newest first
        """
        pass

    @abstractmethod
    async def find_bookmarked(
        self, kind: ContentKind, user_id: UserId
    ) -> List[ContentItem]:
        """List items of one kind bookmarked by the user."""
        pass

    @abstractmethod
    async def create(self, item: ContentItem) -> ContentItem:
        """Insert a new item.

        Args:
            item: The item to insert

        Returns:
            The stored item
        """
        pass

    @abstractmethod
    async def update(self, item: ContentItem) -> Optional[ContentItem]:
        """Write back a modified item if nobody else changed it first.

        ``item.version`` is the version the item was read at.

        Args:
            item: The modified item

        ``views`` is not written; it changes only through
        ``increment_views``. ``updated_at`` is set to the write time.

        Returns:
            The stored item with its version bumped by one, or None when
            the stored version no longer matches (stale write)
        """
        pass

    @abstractmethod
    async def increment_views(
        self, content_id: ContentId, kind: Optional[ContentKind] = None
    ) -> Optional[ContentItem]:
        """Add one view in place, leaving ``version`` alone.

        Returns:
            The item after the increment, or None if it does not exist
        """
        pass

    @abstractmethod
    async def delete(self, content_id: ContentId) -> bool:
        """Delete an item.

        Returns:
            True if an item was deleted
        """
        pass
