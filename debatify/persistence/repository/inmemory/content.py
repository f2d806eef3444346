"""In-memory content repository for testing."""

from datetime import datetime, timezone
from typing import List, Optional

from debatify.domain.model import ContentItem
from debatify.domain.repository import ContentRepository
from debatify.domain.value import ContentId, ContentKind, UserId

from .store import InMemoryStore


def _newest_first(items: list[ContentItem]) -> list[ContentItem]:
    return sorted(items, key=lambda i: i.created_at, reverse=True)


class InMemoryContentRepository(ContentRepository):
    """In-memory implementation of ContentRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(
        self, content_id: ContentId, kind: Optional[ContentKind] = None
    ) -> Optional[ContentItem]:
        item = self._store.content.get(content_id)
        if item is None or (kind is not None and item.kind != kind):
            return None
        return item

    async def find_by_kind(
        self, kind: ContentKind, limit: int = 100, offset: int = 0
    ) -> List[ContentItem]:
        items = [i for i in self._store.content.values() if i.kind == kind]
        return _newest_first(items)[offset : offset + limit]

    async def find_by_authors(
        self,
        kind: ContentKind,
        author_ids: List[UserId],
        include_private: bool = True,
    ) -> List[ContentItem]:
        authors = set(author_ids)
        items = [
            i
            for i in self._store.content.values()
            if i.kind == kind
            and i.author_id in authors
            and (include_private or not i.is_private)
        ]
        return _newest_first(items)

    async def find_bookmarked(
        self, kind: ContentKind, user_id: UserId
    ) -> List[ContentItem]:
        items = [
            i
            for i in self._store.content.values()
            if i.kind == kind and user_id in i.bookmarked_by
        ]
        return _newest_first(items)

    async def create(self, item: ContentItem) -> ContentItem:
        self._store.content[item.id] = item
        return item

    async def update(self, item: ContentItem) -> Optional[ContentItem]:
        """Compare-and-set on ``version``."""
        current = self._store.content.get(item.id)
        if current is None or current.version != item.version:
            return None
        stored = item.model_copy(
            update={
                "version": item.version + 1,
                "views": current.views,
                "updated_at": datetime.now(timezone.utc),
            }
        )
        self._store.content[item.id] = stored
        return stored

    async def increment_views(
        self, content_id: ContentId, kind: Optional[ContentKind] = None
    ) -> Optional[ContentItem]:
        current = await self.find_by_id(content_id, kind=kind)
        if current is None:
            return None
        stored = current.model_copy(update={"views": current.views + 1})
        self._store.content[content_id] = stored
        return stored

    async def delete(self, content_id: ContentId) -> bool:
        return self._store.content.pop(content_id, None) is not None
