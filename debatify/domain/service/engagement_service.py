"""Engagement domain service.

Runs every engagement as load -> transition -> conditional save -> fanout.
The save is a compare-and-set on the item's version; a lost race is
retried from a fresh read.
"""

from typing import Callable, Optional, TypeVar

import logfire

from debatify.config import EngagementSettings
from debatify.domain.error import NotFoundError, StaleContentError
from debatify.domain.model import Comment, ContentItem
from debatify.domain.model import engagement
from debatify.domain.repository import ContentRepository, UserRepository
from debatify.domain.value import (
    CommentId,
    ContentId,
    ContentKind,
    NotificationType,
    Stance,
    UserId,
    VoteDirection,
    VoteRepeatPolicy,
)

from .base import Service
from .notification_service import NotificationDispatcher, template_literal

T = TypeVar("T")

# A step maps the freshly read item to (item to write or None, step result)
Step = Callable[[ContentItem], tuple[Optional[ContentItem], T]]


class EngagementService(Service):
    """Domain service for votes, bookmarks, comments, comment likes and views."""

    def __init__(
        self,
        content_repository: ContentRepository,
        user_repository: UserRepository,
        notification_dispatcher: NotificationDispatcher,
        engagement_settings: EngagementSettings,
    ) -> None:
        """Initialize engagement service.

        Args:
            content_repository: Content repository
            user_repository: User repository (comment author names)
            notification_dispatcher: Fanout for successful engagements
            engagement_settings: Vote policy and retry limits
        """
        self.content_repository = content_repository
        self.user_repository = user_repository
        self.notification_dispatcher = notification_dispatcher
        self.settings = engagement_settings

    def vote_policy(self, kind: ContentKind) -> VoteRepeatPolicy:
        """Repeat-vote policy for a content kind."""
        if kind is ContentKind.BLOG:
            return VoteRepeatPolicy(self.settings.blog_vote_policy)
        return VoteRepeatPolicy.TOGGLE

    async def _load(self, kind: ContentKind, content_id: ContentId) -> ContentItem:
        item = await self.content_repository.find_by_id(content_id, kind=kind)
        if item is None:
            logfire.warn(
                "Engagement on non-existent content",
                kind=kind.value,
                content_id=str(content_id),
            )
            raise NotFoundError(kind.label.capitalize(), str(content_id))
        return item

    async def _mutate(
        self, kind: ContentKind, content_id: ContentId, step: Step[T]
    ) -> tuple[ContentItem, T]:
        """Apply ``step`` to the current item and save it conditionally.

        Returns:
            The stored item (or the unchanged read when the step wrote
            nothing) and the step's result

        Raises:
            StaleContentError: Every attempt lost the compare-and-set
        """
        for attempt in range(1, self.settings.max_attempts + 1):
            item = await self._load(kind, content_id)
            updated, result = step(item)
            if updated is None:
                return item, result

            saved = await self.content_repository.update(updated)
            if saved is not None:
                return saved, result

            logfire.warn(
                "Stale content write",
                content_id=str(content_id),
                attempt=attempt,
                version=item.version,
            )

        logfire.error(
            "Giving up on contended content",
            content_id=str(content_id),
            attempts=self.settings.max_attempts,
        )
        raise StaleContentError(str(content_id))

    async def vote(
        self,
        kind: ContentKind,
        content_id: ContentId,
        actor_id: UserId,
        direction: VoteDirection,
    ) -> ContentItem:
        """Upvote or downvote a content item.

        A new vote notifies the author (unless the actor is the author).

        Returns:
            The stored item

        Raises:
            NotFoundError: Item does not exist
            AlreadyVotedError: Repeated vote where the kind rejects repeats
            StaleContentError: Contended beyond the retry limit
        """
        policy = self.vote_policy(kind)

        def step(item: ContentItem) -> tuple[ContentItem, bool]:
            transition = engagement.cast_vote(item, actor_id, direction, policy)
            return transition.item, transition.engaged

        with logfire.span(
            "engagement_service.vote",
            kind=kind.value,
            content_id=str(content_id),
            actor_id=str(actor_id),
            direction=direction.value,
        ):
            item, engaged = await self._mutate(kind, content_id, step)
            logfire.info(
                "Vote applied",
                content_id=str(content_id),
                direction=direction.value,
                engaged=engaged,
                upvotes=item.upvotes,
                downvotes=item.downvotes,
            )

            if engaged:
                await self.notification_dispatcher.dispatch(
                    recipient_id=item.author_id,
                    actor_id=actor_id,
                    type=(
                        NotificationType.UPVOTE
                        if direction is VoteDirection.UP
                        else NotificationType.DOWNVOTE
                    ),
                    related_id=item.id,
                    message_template=(
                        f"$actor {direction.value}voted your {kind.label} "
                        f'"{template_literal(item.title)}"'
                    ),
                )
            return item

    async def upvote(
        self, kind: ContentKind, content_id: ContentId, actor_id: UserId
    ) -> ContentItem:
        return await self.vote(kind, content_id, actor_id, VoteDirection.UP)

    async def downvote(
        self, kind: ContentKind, content_id: ContentId, actor_id: UserId
    ) -> ContentItem:
        return await self.vote(kind, content_id, actor_id, VoteDirection.DOWN)

    async def bookmark(
        self, kind: ContentKind, content_id: ContentId, actor_id: UserId
    ) -> tuple[ContentItem, bool]:
        """Toggle the actor's bookmark. No notification is sent.

        Returns:
            The stored item and whether the actor now has it bookmarked
        """

        def step(item: ContentItem) -> tuple[ContentItem, bool]:
            transition = engagement.toggle_bookmark(item, actor_id)
            return transition.item, transition.engaged

        with logfire.span(
            "engagement_service.bookmark",
            kind=kind.value,
            content_id=str(content_id),
            actor_id=str(actor_id),
        ):
            item, bookmarked = await self._mutate(kind, content_id, step)
            logfire.info(
                "Bookmark toggled",
                content_id=str(content_id),
                bookmarked=bookmarked,
                bookmark_count=item.bookmark_count,
            )
            return item, bookmarked

    async def add_comment(
        self,
        kind: ContentKind,
        content_id: ContentId,
        actor_id: UserId,
        text: str,
        stance: Optional[Stance] = None,
    ) -> ContentItem:
        """Append a comment and notify the item's author.

        Raises:
            NotFoundError: Item or actor does not exist
            ValidationError: Stance rules or text rules violated
        """
        with logfire.span(
            "engagement_service.add_comment",
            kind=kind.value,
            content_id=str(content_id),
            actor_id=str(actor_id),
        ):
            actor = await self.user_repository.find_by_id(actor_id)
            if actor is None:
                raise NotFoundError("User", str(actor_id))

            def step(item: ContentItem) -> tuple[ContentItem, Comment]:
                return engagement.append_comment(
                    item, actor_id, actor.username, text, stance
                )

            item, comment = await self._mutate(kind, content_id, step)
            logfire.info(
                "Comment added",
                content_id=str(content_id),
                comment_id=str(comment.id),
                comment_count=len(item.comments),
            )

            await self.notification_dispatcher.dispatch(
                recipient_id=item.author_id,
                actor_id=actor_id,
                type=NotificationType.COMMENT,
                related_id=item.id,
                message_template=(
                    f'$actor commented on your {kind.label} "{template_literal(item.title)}"'
                ),
            )
            return item

    async def like_comment(
        self,
        kind: ContentKind,
        content_id: ContentId,
        comment_id: CommentId,
        actor_id: UserId,
    ) -> Comment:
        """Toggle the actor's like on a comment.

        A new like notifies the comment's author.

        Returns:
            The comment as stored

        Raises:
            NotFoundError: Item or comment does not exist
        """

        def step(item: ContentItem) -> tuple[ContentItem, tuple[bool, Comment]]:
            transition, comment = engagement.toggle_comment_like(
                item, comment_id, actor_id
            )
            return transition.item, (transition.engaged, comment)

        with logfire.span(
            "engagement_service.like_comment",
            kind=kind.value,
            content_id=str(content_id),
            comment_id=str(comment_id),
            actor_id=str(actor_id),
        ):
            item, (liked, comment) = await self._mutate(kind, content_id, step)
            logfire.info(
                "Comment like toggled",
                comment_id=str(comment_id),
                liked=liked,
                likes=comment.likes,
            )

            if liked:
                await self.notification_dispatcher.dispatch(
                    recipient_id=comment.author_id,
                    actor_id=actor_id,
                    type=NotificationType.COMMENT_LIKE,
                    related_id=item.id,
                    comment_id=comment.id,
                    message_template=(
                        f"$actor liked your comment on {kind.label} "
                        f'"{template_literal(item.title)}"'
                    ),
                )
            return comment

    async def record_view(
        self, kind: ContentKind, content_id: ContentId, is_poll: bool = False
    ) -> ContentItem:
        """Count a view, unless the read is a poll.

        Views are added in place and do not bump ``version``.

        Returns:
            The item after the view was counted (unchanged for polls)

        Raises:
            NotFoundError: No item of this kind with this id
        """
        with logfire.span(
            "engagement_service.record_view",
            kind=kind.value,
            content_id=str(content_id),
            is_poll=is_poll,
        ):
            if is_poll:
                return await self._load(kind, content_id)

            item = await self.content_repository.increment_views(content_id, kind=kind)
            if item is None:
                raise NotFoundError(kind.label.capitalize(), str(content_id))
            return item
