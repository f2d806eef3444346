"""PostgreSQL implementation of User repository."""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import logfire
from sqlalchemy import any_, func, literal, not_, select, update
from sqlalchemy.dialects.postgresql import UUID, insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from debatify.domain.error import ConflictError
from debatify.domain.model import User
from debatify.domain.repository import UserRepository
from debatify.domain.value import UserId, Username
from debatify.persistence.mappers import row_to_user, user_to_dict
from debatify.persistence.tables import users_table


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


# Follow arrays change only through add_follow and remove_follow
_INSERT_ONLY = frozenset({"id", "followers", "followings"})


def _uuid(value: UserId):
    return literal(value, UUID)


def _contains(column, value: UserId):
    return _uuid(value) == any_(column)


def _append(column, value: UserId):
    return func.array_append(column, _uuid(value), type_=column.type)


def _remove(column, value: UserId):
    return func.array_remove(column, _uuid(value), type_=column.type)


class PostgresUserRepository(UserRepository):
    """Users table access. Follow lists are stored as UUID arrays."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _first(self, stmt) -> Optional[User]:
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return await self._first(select(users_table).where(users_table.c.id == user_id))

    async def find_by_ids(self, user_ids: List[UserId]) -> List[User]:
        """Load several users with one query, keeping the requested order."""
        if not user_ids:
            return []
        result = await self.session.execute(
            select(users_table).where(users_table.c.id.in_(user_ids))
        )
        by_id = {row.id: row_to_user(row._asdict()) for row in result.fetchall()}
        return [by_id[user_id] for user_id in user_ids if user_id in by_id]

    async def find_by_username(self, username: Username) -> Optional[User]:
        return await self._first(
            select(users_table).where(users_table.c.username == username.root)
        )

    async def find_by_email(self, email: str) -> Optional[User]:
        return await self._first(
            select(users_table).where(users_table.c.email == email.lower())
        )

    async def search(self, query: str, limit: int = 20) -> List[User]:
        """ILIKE substring match on username."""
        with logfire.span("user_repository.search", query=query, limit=limit):
            pattern = f"%{_escape_like(query)}%"
            stmt = (
                select(users_table)
                .where(users_table.c.username.ilike(pattern, escape="\\"))
                .order_by(users_table.c.username)
                .limit(limit)
            )
            result = await self.session.execute(stmt)
            return [row_to_user(row._asdict()) for row in result.fetchall()]

    async def save(self, user: User) -> User:
        """Insert the user, or overwrite its profile columns keyed by id.

        Runs in a savepoint so a unique violation leaves the request
        transaction usable. Follow arrays are only written on insert.

        Raises:
            ConflictError: Another account already has the username or email
        """
        values = user_to_dict(user)
        stmt = insert(users_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[users_table.c.id],
            set_={k: v for k, v in values.items() if k not in _INSERT_ONLY},
        ).returning(users_table)
        try:
            async with self.session.begin_nested():
                saved = await self._first(stmt)
        except IntegrityError as e:
            logfire.warn("User save hit a unique constraint", user_id=str(user.id))
            raise ConflictError("Username or email already exists") from e
        return saved

    async def update_fields(
        self, user_id: UserId, fields: Dict[str, Any]
    ) -> Optional[User]:
        stmt = (
            update(users_table)
            .where(users_table.c.id == user_id)
            .values(**fields)
            .returning(users_table)
        )
        return await self._first(stmt)

    async def add_follow(self, actor_id: UserId, target_id: UserId) -> bool:
        """Append both ends of the edge, guarded against duplicates."""
        now = datetime.now(timezone.utc)
        with logfire.span(
            "user_repository.add_follow",
            actor_id=str(actor_id),
            target_id=str(target_id),
        ):
            result = await self.session.execute(
                update(users_table)
                .where(
                    users_table.c.id == actor_id,
                    not_(_contains(users_table.c.followings, target_id)),
                )
                .values(
                    followings=_append(users_table.c.followings, target_id),
                    updated_at=now,
                )
            )
            if result.rowcount == 0:
                return False
            await self.session.execute(
                update(users_table)
                .where(
                    users_table.c.id == target_id,
                    not_(_contains(users_table.c.followers, actor_id)),
                )
                .values(
                    followers=_append(users_table.c.followers, actor_id),
                    updated_at=now,
                )
            )
            return True

    async def remove_follow(self, actor_id: UserId, target_id: UserId) -> bool:
        """Remove both ends of the edge."""
        now = datetime.now(timezone.utc)
        with logfire.span(
            "user_repository.remove_follow",
            actor_id=str(actor_id),
            target_id=str(target_id),
        ):
            result = await self.session.execute(
                update(users_table)
                .where(
                    users_table.c.id == actor_id,
                    _contains(users_table.c.followings, target_id),
                )
                .values(
                    followings=_remove(users_table.c.followings, target_id),
                    updated_at=now,
                )
            )
            if result.rowcount == 0:
                return False
            await self.session.execute(
                update(users_table)
                .where(users_table.c.id == target_id)
                .values(
                    followers=_remove(users_table.c.followers, actor_id),
                    updated_at=now,
                )
            )
            return True
