"""In-memory user repository for testing."""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from debatify.domain.error import ConflictError
from debatify.domain.model.user import User
from debatify.domain.repository.user import UserRepository
from debatify.domain.value import UserId, Username

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._store.users.get(user_id)

    async def find_by_ids(self, user_ids: List[UserId]) -> List[User]:
        """Find several users in the requested order."""
        return [self._store.users[u] for u in user_ids if u in self._store.users]

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username."""
        for user in self._store.users.values():
            if user.username == username:
                return user
        return None

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email."""
        email = email.lower()
        for user in self._store.users.values():
            if user.email == email:
                return user
        return None

    async def search(self, query: str, limit: int = 20) -> List[User]:
        """Case-insensitive substring search on username."""
        needle = query.lower()
        matches = [
            user
            for user in self._store.users.values()
            if needle in user.username.root.lower()
        ]
        return sorted(matches, key=lambda u: u.username.root)[:limit]

    async def save(self, user: User) -> User:
        """Save or update a user, enforcing unique username and email.

        Stored follow lists win over the ones on ``user``.
        """
        for other in self._store.users.values():
            if other.id != user.id and (
                other.username == user.username or other.email == user.email
            ):
                raise ConflictError("Username or email already exists")
        existing = self._store.users.get(user.id)
        if existing is not None:
            user = user.model_copy(
                update={
                    "followers": existing.followers,
                    "followings": existing.followings,
                }
            )
        self._store.users[user.id] = user
        return user

    async def update_fields(
        self, user_id: UserId, fields: Dict[str, Any]
    ) -> Optional[User]:
        existing = self._store.users.get(user_id)
        if existing is None:
            return None
        updated = existing.model_copy(update=fields)
        self._store.users[user_id] = updated
        return updated

    async def add_follow(self, actor_id: UserId, target_id: UserId) -> bool:
        actor = self._store.users.get(actor_id)
        target = self._store.users.get(target_id)
        if actor is None or target is None or target_id in actor.followings:
            return False
        now = datetime.now(timezone.utc)
        self._store.users[actor_id] = actor.model_copy(
            update={"followings": [*actor.followings, target_id], "updated_at": now}
        )
        if actor_id not in target.followers:
            self._store.users[target_id] = target.model_copy(
                update={"followers": [*target.followers, actor_id], "updated_at": now}
            )
        return True

    async def remove_follow(self, actor_id: UserId, target_id: UserId) -> bool:
        actor = self._store.users.get(actor_id)
        if actor is None or target_id not in actor.followings:
            return False
        now = datetime.now(timezone.utc)
        self._store.users[actor_id] = actor.model_copy(
            update={
                "followings": [u for u in actor.followings if u != target_id],
                "updated_at": now,
            }
        )
        target = self._store.users.get(target_id)
        if target is not None:
            self._store.users[target_id] = target.model_copy(
                update={
                    "followers": [u for u in target.followers if u != actor_id],
                    "updated_at": now,
                }
            )
        return True
