"""PostgreSQL implementation of Content repository."""

import asyncio
from datetime import datetime, timezone
from typing import List, Optional

import logfire
from sqlalchemy import any_, delete, desc, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from debatify.domain.model import ContentItem
from debatify.domain.repository import ContentRepository
from debatify.domain.value import ContentId, ContentKind, UserId
from debatify.persistence.mappers import content_item_to_dict, row_to_content_item
from debatify.persistence.tables import content_items_table

# Counted in place by increment_views
_NOT_REWRITTEN = frozenset({"id", "views", "created_at"})


class PostgresContentRepository(ContentRepository):
    """PostgreSQL implementation of ContentRepository.

    An AsyncSession cannot run two statements at once, so every query
    holds ``_lock``. This lets callers fan out with ``asyncio.gather``.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session
        self._lock = asyncio.Lock()

    async def _fetch_all(self, stmt) -> List[ContentItem]:
        async with self._lock:
            result = await self.session.execute(stmt)
            rows = result.fetchall()
        return [row_to_content_item(row._asdict()) for row in rows]

    async def find_by_id(
        self, content_id: ContentId, kind: Optional[ContentKind] = None
    ) -> Optional[ContentItem]:
        """Find a content item by ID."""
        stmt = select(content_items_table).where(content_items_table.c.id == content_id)
        if kind is not None:
            stmt = stmt.where(content_items_table.c.kind == kind.value)
        items = await self._fetch_all(stmt)
        return items[0] if items else None

    async def find_by_kind(
        self, kind: ContentKind, limit: int = 100, offset: int = 0
    ) -> List[ContentItem]:
        """List items of one kind, newest first."""
        with logfire.span(
            "content_repository.find_by_kind", kind=kind.value, limit=limit, offset=offset
        ):
            stmt = (
                select(content_items_table)
                .where(content_items_table.c.kind == kind.value)
                .order_by(desc(content_items_table.c.created_at))
                .limit(limit)
                .offset(offset)
            )
            return await self._fetch_all(stmt)

    async def find_by_authors(
        self,
        kind: ContentKind,
        author_ids: List[UserId],
        include_private: bool = True,
    ) -> List[ContentItem]:
        """List items of one kind by any of the given authors."""
        if not author_ids:
            return []
        with logfire.span(
            "content_repository.find_by_authors",
            kind=kind.value,
            authors=len(author_ids),
            include_private=include_private,
        ):
            stmt = select(content_items_table).where(
                content_items_table.c.kind == kind.value,
                content_items_table.c.author_id.in_(author_ids),
            )
            if not include_private:
                stmt = stmt.where(content_items_table.c.is_private.is_(False))
            stmt = stmt.order_by(desc(content_items_table.c.created_at))
            return await self._fetch_all(stmt)

    async def find_bookmarked(
        self, kind: ContentKind, user_id: UserId
    ) -> List[ContentItem]:
        """List items of one kind bookmarked by the user."""
        stmt = (
            select(content_items_table)
            .where(
                content_items_table.c.kind == kind.value,
                user_id == any_(content_items_table.c.bookmarked_by),
            )
            .order_by(desc(content_items_table.c.created_at))
        )
        return await self._fetch_all(stmt)

    async def create(self, item: ContentItem) -> ContentItem:
        """Insert a new item."""
        async with self._lock:
            await self.session.execute(
                insert(content_items_table).values(**content_item_to_dict(item))
            )
            await self.session.flush()
        return item

    async def update(self, item: ContentItem) -> Optional[ContentItem]:
        """Compare-and-set write on ``version``; ``views`` is left as stored."""
        values = {
            k: v
            for k, v in content_item_to_dict(item).items()
            if k not in _NOT_REWRITTEN
        }
        values["version"] = item.version + 1
        values["updated_at"] = datetime.now(timezone.utc)
        stmt = (
            update(content_items_table)
            .where(
                content_items_table.c.id == item.id,
                content_items_table.c.version == item.version,
            )
            .values(**values)
            .returning(*content_items_table.c)
        )
        async with self._lock:
            result = await self.session.execute(stmt)
            row = result.fetchone()

        if row is None:
            logfire.warn(
                "Conditional update missed",
                content_id=str(item.id),
                expected_version=item.version,
            )
            return None
        return row_to_content_item(row._asdict())

    async def increment_views(
        self, content_id: ContentId, kind: Optional[ContentKind] = None
    ) -> Optional[ContentItem]:
        """``views = views + 1`` in one statement, without a version bump."""
        stmt = (
            update(content_items_table)
            .where(content_items_table.c.id == content_id)
            .values(views=content_items_table.c.views + 1)
            .returning(*content_items_table.c)
        )
        if kind is not None:
            stmt = stmt.where(content_items_table.c.kind == kind.value)
        async with self._lock:
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_content_item(row._asdict()) if row else None

    async def delete(self, content_id: ContentId) -> bool:
        """Delete an item."""
        async with self._lock:
            result = await self.session.execute(
                delete(content_items_table).where(content_items_table.c.id == content_id)
            )
        return (result.rowcount or 0) > 0
