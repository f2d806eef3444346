"""Unit tests for UserService (follow graph)."""

import asyncio

import pytest

from debatify.domain.error import (
    AlreadyFollowingError,
    NotFollowingError,
    NotFoundError,
    SelfReferenceError,
)
from debatify.domain.repository import NotificationRepository, UserRepository
from debatify.domain.service import UserService
from debatify.domain.value import NotificationType, Username
from tests.conftest import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _pair(unit_env):
    user_repo = await unit_env.get(UserRepository)
    alice = await user_repo.save(make_user("alice"))
    bob = await user_repo.save(make_user("bob"))
    return alice, bob


class TestFollow:
    """Tests for follow/unfollow."""

    @pytest.mark.asyncio
    async def test_follow_writes_both_ends(self, unit_env):
        """Following adds the edge on both users and notifies the target."""
        # Arrange
        service = await unit_env.get(UserService)
        notification_repo = await unit_env.get(NotificationRepository)
        alice, bob = await _pair(unit_env)

        # Act
        target = await service.follow(alice.id, bob.id)

        # Assert
        alice_after = await service.get_by_id(alice.id)
        assert target.followers == [alice.id]
        assert alice_after.followings == [bob.id]
        assert alice_after.is_following(bob.id)

        notifications = await notification_repo.find_by_recipient(bob.id)
        assert len(notifications) == 1
        assert notifications[0].type == NotificationType.FOLLOW
        assert notifications[0].related_id == alice.id
        assert notifications[0].message == "alice followed you"

    @pytest.mark.asyncio
    async def test_follow_twice_rejected(self, unit_env):
        service = await unit_env.get(UserService)
        alice, bob = await _pair(unit_env)
        await service.follow(alice.id, bob.id)

        with pytest.raises(AlreadyFollowingError, match="Already following"):
            await service.follow(alice.id, bob.id)

    @pytest.mark.asyncio
    async def test_cannot_follow_self(self, unit_env):
        service = await unit_env.get(UserService)
        alice, _ = await _pair(unit_env)

        with pytest.raises(SelfReferenceError, match="Cannot follow yourself"):
            await service.follow(alice.id, alice.id)

    @pytest.mark.asyncio
    async def test_unfollow_removes_both_ends(self, unit_env):
        """Unfollowing removes the edge on both users and notifies the target."""
        # Arrange
        service = await unit_env.get(UserService)
        notification_repo = await unit_env.get(NotificationRepository)
        alice, bob = await _pair(unit_env)
        await service.follow(alice.id, bob.id)

        # Act
        target = await service.unfollow(alice.id, bob.id)

        # Assert
        alice_after = await service.get_by_id(alice.id)
        assert target.followers == []
        assert alice_after.followings == []
        types = [n.type for n in await notification_repo.find_by_recipient(bob.id)]
        assert NotificationType.UNFOLLOW in types

    @pytest.mark.asyncio
    async def test_unfollow_without_edge_rejected(self, unit_env):
        service = await unit_env.get(UserService)
        alice, bob = await _pair(unit_env)

        with pytest.raises(NotFollowingError):
            await service.unfollow(alice.id, bob.id)

    @pytest.mark.asyncio
    async def test_follow_unknown_user(self, unit_env):
        service = await unit_env.get(UserService)
        alice, _ = await _pair(unit_env)

        with pytest.raises(NotFoundError, match="User not found"):
            await service.follow(alice.id, make_user("ghost").id)

    @pytest.mark.asyncio
    async def test_concurrent_followers_all_kept(self, unit_env):
        """Two actors following the same user at once both land."""
        # Arrange
        service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        alice, bob = await _pair(unit_env)
        carol = await user_repo.save(make_user("carol"))

        # Act
        await asyncio.gather(
            service.follow(alice.id, bob.id),
            service.follow(carol.id, bob.id),
        )

        # Assert
        bob_after = await service.get_by_id(bob.id)
        assert sorted(bob_after.followers) == sorted([alice.id, carol.id])

    @pytest.mark.asyncio
    async def test_stale_save_keeps_follow_lists(self, unit_env):
        """Saving an old copy of a user does not drop edges added since."""
        # Arrange
        service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        alice, bob = await _pair(unit_env)
        await service.follow(alice.id, bob.id)

        # Act
        saved = await user_repo.save(bob.model_copy(update={"bio": "hi"}))

        # Assert
        assert saved.bio == "hi"
        assert saved.followers == [alice.id]
        assert (await service.get_by_id(bob.id)).followers == [alice.id]


class TestUpdateFields:
    """Tests for update_fields."""

    @pytest.mark.asyncio
    async def test_only_named_columns_change(self, unit_env):
        # Arrange
        service = await unit_env.get(UserService)
        alice, bob = await _pair(unit_env)
        await service.follow(alice.id, bob.id)

        # Act
        updated = await service.update_fields(bob.id, is_verified=True)

        # Assert
        assert updated.is_verified is True
        assert updated.followers == [alice.id]
        assert updated.bio == bob.bio

    @pytest.mark.asyncio
    async def test_follow_lists_are_not_updatable(self, unit_env):
        service = await unit_env.get(UserService)
        alice, bob = await _pair(unit_env)

        with pytest.raises(ValueError):
            await service.update_fields(bob.id, followers=[alice.id])

    @pytest.mark.asyncio
    async def test_missing_user(self, unit_env):
        service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await service.update_fields(make_user("ghost").id, bio="boo")


class TestLookup:
    """Tests for lookups."""

    @pytest.mark.asyncio
    async def test_find_by_identifier_email_or_username(self, unit_env):
        # Arrange
        service = await unit_env.get(UserService)
        alice, _ = await _pair(unit_env)

        # Act
        by_email = await service.find_by_identifier("ALICE@example.com")
        by_username = await service.find_by_identifier("alice")

        # Assert
        assert by_email.id == alice.id
        assert by_username.id == alice.id

    @pytest.mark.asyncio
    async def test_get_by_username_missing(self, unit_env):
        service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await service.get_by_username(Username("nobody"))

    @pytest.mark.asyncio
    async def test_search_is_case_insensitive(self, unit_env):
        # Arrange
        service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        await user_repo.save(make_user("DebateKing"))
        await user_repo.save(make_user("kingfisher"))
        await user_repo.save(make_user("queen"))

        # Act
        results = await service.search("KING")

        # Assert
        assert sorted(u.username.root for u in results) == ["DebateKing", "kingfisher"]
        assert await service.search("   ") == []
