"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from debatify.domain.model.user import User
from debatify.domain.value import UserId, Username


class UserRepository(ABC):
    """Persistence contract for users, including their follow lists."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: List[UserId]) -> List[User]:
        """Find several users at once, in the order of ``user_ids``.

        Unknown ids are skipped. Used to expand follower lists into
        summaries without one query per user.
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Exact, case-sensitive username lookup."""
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Look up by email; emails are stored lower-cased."""
        pass

    @abstractmethod
    async def search(self, query: str, limit: int = 20) -> List[User]:
        """Find users whose username contains ``query``, case-insensitively.

        Args:
            query: Substring to look for
            limit: Maximum number of users to return

        Returns:
            Matching users ordered by username
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Create the user or overwrite the stored one with the same id.

        Follow lists of an existing user are left as stored; they change
        only through ``add_follow`` and ``remove_follow``.

        Returns:
            The user as stored

        Raises:
            ConflictError: Username or email taken by another user
        """
        pass

    @abstractmethod
    async def update_fields(
        self, user_id: UserId, fields: Dict[str, Any]
    ) -> Optional[User]:
        """Overwrite only the given columns of one user.

        Returns:
            The updated user, or None if it does not exist
        """
        pass

    @abstractmethod
    async def add_follow(self, actor_id: UserId, target_id: UserId) -> bool:
        """Add the ``actor_id`` -> ``target_id`` edge on both users at once.

        Returns:
            False if the edge already existed
        """
        pass

    @abstractmethod
    async def remove_follow(self, actor_id: UserId, target_id: UserId) -> bool:
        """Remove the ``actor_id`` -> ``target_id`` edge from both users.

        Returns:
            False if there was no edge
        """
        pass
