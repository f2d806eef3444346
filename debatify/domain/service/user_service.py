"""User domain service.

Owns the follow graph: every follow edge is written on both users.
"""

from datetime import datetime, timezone

import logfire

from debatify.domain.error import (
    AlreadyFollowingError,
    NotFollowingError,
    NotFoundError,
    SelfReferenceError,
)
from debatify.domain.model import User
from debatify.domain.repository import UserRepository
from debatify.domain.value import NotificationType, UserId, Username

from .notification_service import NotificationDispatcher

_UPDATABLE_FIELDS = frozenset(
    {"bio", "profile_picture", "password_hash", "is_verified"}
)


class UserService:
    """Domain service for user operations."""

    def __init__(
        self,
        user_repository: UserRepository,
        notification_dispatcher: NotificationDispatcher,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            notification_dispatcher: Sends follow/unfollow notifications
        """
        self.user_repository = user_repository
        self.notification_dispatcher = notification_dispatcher

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_by_username(self, username: Username) -> User:
        """Get user by username.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_username", username=username.root):
            user = await self.user_repository.find_by_username(username)
            if not user:
                logfire.warn("User not found", username=username.root)
                raise NotFoundError("User", username.root)
            return user

    async def get_user_by_email(self, email: str) -> User | None:
        """Get user by email.

        Args:
            email: User email

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_user_by_email"):
            return await self.user_repository.find_by_email(email.strip().lower())

    async def find_by_identifier(self, identifier: str) -> User | None:
        """Find a user by email or username.

        Identifiers containing ``@`` are treated as emails.
        """
        identifier = identifier.strip()
        if "@" in identifier:
            return await self.get_user_by_email(identifier)
        try:
            username = Username(identifier)
        except ValueError:
            return None
        return await self.user_repository.find_by_username(username)

    async def get_many(self, user_ids: list[UserId]) -> list[User]:
        """Load several users, preserving order and skipping unknown ids."""
        if not user_ids:
            return []
        return await self.user_repository.find_by_ids(user_ids)

    async def search(self, query: str, limit: int = 20) -> list[User]:
        """Case-insensitive username substring search."""
        query = query.strip()
        if not query:
            return []
        with logfire.span("user_service.search", query=query):
            users = await self.user_repository.search(query, limit=limit)
            logfire.info("User search", query=query, count=len(users))
            return users

    async def save(self, user: User) -> User:
        """Save user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user
        """
        with logfire.span("user_service.save", user_id=str(user.id)):
            saved = await self.user_repository.save(user)
            logfire.info("User saved", user_id=str(saved.id))
            return saved

    async def update_fields(self, user_id: UserId, **fields) -> User:
        """Overwrite some profile or account columns of one user.

        Only the named columns are written, so concurrent follows and other
        profile edits are kept.

        Raises:
            NotFoundError: User does not exist
        """
        unknown = set(fields) - _UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Not updatable: {sorted(unknown)}")
        fields["updated_at"] = datetime.now(timezone.utc)
        with logfire.span(
            "user_service.update_fields",
            user_id=str(user_id),
            fields=sorted(fields),
        ):
            updated = await self.user_repository.update_fields(user_id, fields)
            if updated is None:
                raise NotFoundError("User", str(user_id))
            return updated

    async def follow(self, actor_id: UserId, target_id: UserId) -> User:
        """Make ``actor_id`` follow ``target_id``.

        Both ends of the edge are written by one repository call and the
        target is notified.

        Returns:
            The updated target user

        Raises:
            SelfReferenceError: actor and target are the same user
            NotFoundError: Either user does not exist
            AlreadyFollowingError: The edge already exists
        """
        with logfire.span(
            "user_service.follow", actor_id=str(actor_id), target_id=str(target_id)
        ):
            if actor_id == target_id:
                raise SelfReferenceError("follow")

            await self.get_by_id(actor_id)
            await self.get_by_id(target_id)

            if not await self.user_repository.add_follow(actor_id, target_id):
                raise AlreadyFollowingError()
            logfire.info("User followed", actor_id=str(actor_id), target_id=str(target_id))

            await self.notification_dispatcher.dispatch(
                recipient_id=target_id,
                actor_id=actor_id,
                type=NotificationType.FOLLOW,
                related_id=actor_id,
                message_template="$actor followed you",
            )
            return await self.get_by_id(target_id)

    async def unfollow(self, actor_id: UserId, target_id: UserId) -> User:
        """Remove the ``actor_id`` -> ``target_id`` edge.

        Returns:
            The updated target user

        Raises:
            SelfReferenceError: actor and target are the same user
            NotFoundError: Either user does not exist
            NotFollowingError: The edge does not exist
        """
        with logfire.span(
            "user_service.unfollow", actor_id=str(actor_id), target_id=str(target_id)
        ):
            if actor_id == target_id:
                raise SelfReferenceError("unfollow")

            await self.get_by_id(actor_id)
            await self.get_by_id(target_id)

            if not await self.user_repository.remove_follow(actor_id, target_id):
                raise NotFollowingError()
            logfire.info(
                "User unfollowed", actor_id=str(actor_id), target_id=str(target_id)
            )

            await self.notification_dispatcher.dispatch(
                recipient_id=target_id,
                actor_id=actor_id,
                type=NotificationType.UNFOLLOW,
                related_id=actor_id,
                message_template="$actor unfollowed you",
            )
            return await self.get_by_id(target_id)
