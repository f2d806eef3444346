"""Unit tests for NotificationService and NotificationDispatcher."""

from datetime import datetime, timedelta, timezone
from unittest.mock import patch
from uuid import uuid4

import pytest

from debatify.domain.model import Notification
from debatify.domain.repository import NotificationRepository, UserRepository
from debatify.domain.service import NotificationDispatcher, NotificationService
from debatify.domain.service.notification_service import template_literal
from debatify.domain.value import NotificationId, NotificationType
from tests.conftest import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class ExplodingNotificationService(NotificationService):
    """Fails every notify call."""

    def __init__(self) -> None:
        pass

    async def notify(self, *args, **kwargs):
        raise RuntimeError("database is on fire")


class TestNotify:
    """Tests for notify."""

    @pytest.mark.asyncio
    async def test_actor_name_substituted(self, unit_env):
        # Arrange
        service = await unit_env.get(NotificationService)
        user_repo = await unit_env.get(UserRepository)
        actor = await user_repo.save(make_user("carol"))
        recipient = await user_repo.save(make_user("dave"))

        # Act
        notification = await service.notify(
            recipient.id,
            actor.id,
            NotificationType.FOLLOW,
            actor.id,
            "$actor followed you",
        )

        # Assert
        assert notification is not None
        assert notification.message == "carol followed you"
        assert notification.read is False

    @pytest.mark.asyncio
    async def test_self_notification_skipped(self, unit_env):
        service = await unit_env.get(NotificationService)
        notification_repo = await unit_env.get(NotificationRepository)
        user = make_user()

        result = await service.notify(
            user.id, user.id, NotificationType.UPVOTE, uuid4(), "$actor upvoted"
        )

        assert result is None
        assert await notification_repo.find_by_recipient(user.id) == []

    @pytest.mark.asyncio
    async def test_dollar_in_title_is_kept_literally(self, unit_env):
        """User text with ``$`` survives substitution unchanged."""
        # Arrange
        service = await unit_env.get(NotificationService)
        user_repo = await unit_env.get(UserRepository)
        actor = await user_repo.save(make_user("erin"))
        recipient = make_user("frank")
        title = template_literal("Is $5 coffee worth it? $actor")

        # Act
        notification = await service.notify(
            recipient.id,
            actor.id,
            NotificationType.COMMENT,
            uuid4(),
            f'$actor commented on your blog "{title}"',
        )

        # Assert
        assert (
            notification.message
            == 'erin commented on your blog "Is $5 coffee worth it? $actor"'
        )


class TestListAndMarkRead:
    """Tests for list_recent and mark_all_read."""

    @pytest.mark.asyncio
    async def test_list_recent_newest_first_and_limited(self, unit_env):
        # Arrange
        service = await unit_env.get(NotificationService)
        notification_repo = await unit_env.get(NotificationRepository)
        recipient = make_user("grace")
        actor = make_user("heidi")
        base = datetime.now(timezone.utc)
        for i in range(5):
            await notification_repo.save(
                Notification(
                    id=NotificationId(uuid4()),
                    recipient_id=recipient.id,
                    actor_id=actor.id,
                    type=NotificationType.FOLLOW,
                    message=f"n{i}",
                    related_id=actor.id,
                    created_at=base + timedelta(minutes=i),
                )
            )

        # Act
        recent = await service.list_recent(recipient.id, limit=3)

        # Assert
        assert [n.message for n in recent] == ["n4", "n3", "n2"]

    @pytest.mark.asyncio
    async def test_mark_all_read_only_touches_recipient(self, unit_env):
        # Arrange
        service = await unit_env.get(NotificationService)
        user_repo = await unit_env.get(UserRepository)
        actor = await user_repo.save(make_user("ivan"))
        mine = await user_repo.save(make_user("judy"))
        theirs = await user_repo.save(make_user("mallory"))
        for recipient in (mine, mine, theirs):
            await service.notify(
                recipient.id,
                actor.id,
                NotificationType.FOLLOW,
                actor.id,
                "$actor followed you",
            )

        # Act
        updated = await service.mark_all_read(mine.id)

        # Assert
        assert updated == 2
        assert all(n.read for n in await service.list_recent(mine.id))
        assert not any(n.read for n in await service.list_recent(theirs.id))
        # Second call has nothing left to change
        assert await service.mark_all_read(mine.id) == 0


class TestDispatcher:
    """Tests for NotificationDispatcher."""

    @pytest.mark.asyncio
    async def test_failure_is_swallowed(self):
        """A failing notification returns None instead of raising."""
        # Arrange
        dispatcher = NotificationDispatcher(ExplodingNotificationService())

        # Act
        with patch(
            "debatify.domain.service.notification_service.logfire"
        ) as mock_logfire:
            result = await dispatcher.dispatch(
                recipient_id=make_user().id,
                actor_id=make_user().id,
                type=NotificationType.UPVOTE,
                related_id=uuid4(),
                message_template="$actor upvoted your discussion",
            )

        # Assert
        assert result is None
        # Logged with its traceback
        mock_logfire.exception.assert_called_once()
        assert mock_logfire.exception.call_args.kwargs["type"] == "upvote"
