"""Unit tests for ContentService."""

from uuid import uuid4

import pytest

from debatify.adapter.storage import MockBlobStorage
from debatify.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from debatify.domain.repository import (
    ContentRepository,
    NotificationRepository,
    UserRepository,
)
from debatify.domain.service import ContentService, EngagementService, Upload
from debatify.domain.value import ContentId, ContentKind
from tests.conftest import make_item, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreate:
    """Tests for create."""

    @pytest.mark.asyncio
    async def test_create_discussion(self, unit_env):
        # Arrange
        service = await unit_env.get(ContentService)
        author = make_user()

        # Act
        item = await service.create(
            ContentKind.DISCUSSION, author, title="Hello", body="World"
        )

        # Assert
        assert item.author_id == author.id
        assert item.author_username == author.username
        assert item.upvotes == item.downvotes == item.views == 0
        assert item.comments == []

    @pytest.mark.asyncio
    async def test_debate_requires_category(self, unit_env):
        service = await unit_env.get(ContentService)

        with pytest.raises(ValidationError, match="Category"):
            await service.create(ContentKind.DEBATE, make_user(), title="T", body="B")

    @pytest.mark.asyncio
    async def test_private_requires_passcode(self, unit_env):
        service = await unit_env.get(ContentService)

        with pytest.raises(ValidationError, match="Passcode"):
            await service.create(
                ContentKind.DISCUSSION,
                make_user(),
                title="Secret",
                body="B",
                is_private=True,
            )


class TestAttachments:
    """Tests for blog attachments on create."""

    @pytest.mark.asyncio
    async def test_blog_attachments_uploaded(self, unit_env):
        # Arrange
        service = await unit_env.get(ContentService)
        storage = await unit_env.get(MockBlobStorage)
        uploads = [
            Upload(b"\x89PNG fake", "cover.png", "image/png"),
            Upload(b"ID3 fake", "intro.mp3", "audio/mpeg"),
        ]

        # Act
        item = await service.create(
            ContentKind.BLOG, make_user(), title="Pod", body="Listen", attachments=uploads
        )

        # Assert
        assert len(item.file_urls) == 2
        assert [storage.uploads[url] for url in item.file_urls] == [
            b"\x89PNG fake",
            b"ID3 fake",
        ]

    @pytest.mark.asyncio
    async def test_only_blogs_take_attachments(self, unit_env):
        service = await unit_env.get(ContentService)
        storage = await unit_env.get(MockBlobStorage)

        with pytest.raises(ValidationError, match="cannot have attachments"):
            await service.create(
                ContentKind.DISCUSSION,
                make_user(),
                title="T",
                body="B",
                attachments=[Upload(b"x", "a.png", "image/png")],
            )
        assert storage.uploads == {}

    @pytest.mark.asyncio
    async def test_oversized_file_rejected_before_upload(self, unit_env):
        # Arrange
        service = await unit_env.get(ContentService)
        storage = await unit_env.get(MockBlobStorage)
        huge = Upload(b"0" * (5 * 1024 * 1024 + 1), "big.pdf", "application/pdf")

        # Act & Assert
        with pytest.raises(ValidationError, match="too large"):
            await service.create(
                ContentKind.BLOG,
                make_user(),
                title="T",
                body="B",
                attachments=[Upload(b"ok", "a.png", "image/png"), huge],
            )
        assert storage.uploads == {}

    @pytest.mark.asyncio
    async def test_invalid_fields_upload_nothing(self, unit_env):
        """A rejected private blog leaves no orphaned files behind."""
        service = await unit_env.get(ContentService)
        storage = await unit_env.get(MockBlobStorage)

        with pytest.raises(ValidationError, match="Passcode"):
            await service.create(
                ContentKind.BLOG,
                make_user(),
                title="T",
                body="B",
                is_private=True,
                attachments=[Upload(b"ok", "a.png", "image/png")],
            )
        assert storage.uploads == {}


class TestDelete:
    """Tests for delete."""

    @pytest.mark.asyncio
    async def test_delete_cascades_notifications(self, unit_env):
        """Deleting an item removes every notification that points at it."""
        # Arrange
        service = await unit_env.get(ContentService)
        engagement_service = await unit_env.get(EngagementService)
        user_repo = await unit_env.get(UserRepository)
        content_repo = await unit_env.get(ContentRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        author = await user_repo.save(make_user("author"))
        fan = await user_repo.save(make_user("fan"))
        item = await content_repo.create(make_item(author))
        await engagement_service.upvote(ContentKind.DISCUSSION, item.id, fan.id)
        await engagement_service.add_comment(
            ContentKind.DISCUSSION, item.id, fan.id, "Great"
        )
        assert len(await notification_repo.find_by_recipient(author.id)) == 2

        # Act
        await service.delete(ContentKind.DISCUSSION, item.id, author.id)

        # Assert
        assert await content_repo.find_by_id(item.id) is None
        assert await notification_repo.find_by_recipient(author.id) == []

    @pytest.mark.asyncio
    async def test_only_author_may_delete(self, unit_env):
        # Arrange
        service = await unit_env.get(ContentService)
        content_repo = await unit_env.get(ContentRepository)
        author = make_user("author")
        item = await content_repo.create(make_item(author))

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await service.delete(ContentKind.DISCUSSION, item.id, make_user("other").id)
        assert await content_repo.find_by_id(item.id) is not None

    @pytest.mark.asyncio
    async def test_delete_missing(self, unit_env):
        service = await unit_env.get(ContentService)

        with pytest.raises(NotFoundError):
            await service.delete(
                ContentKind.BLOG, ContentId(uuid4()), make_user().id
            )


class TestFollowingFeed:
    """Tests for list_following_feed."""

    @pytest.mark.asyncio
    async def test_feed_has_followed_public_items_only(self, unit_env):
        # Arrange
        service = await unit_env.get(ContentService)
        content_repo = await unit_env.get(ContentRepository)
        followed = make_user("followed")
        stranger = make_user("stranger")
        reader = make_user("reader").model_copy(update={"followings": [followed.id]})

        public = await content_repo.create(make_item(followed, title="Public"))
        await content_repo.create(
            make_item(followed, title="Private", is_private=True, passcode="pw")
        )
        await content_repo.create(make_item(stranger, title="Stranger"))

        # Act
        feed = await service.list_following_feed(ContentKind.DISCUSSION, reader)

        # Assert
        assert [i.id for i in feed] == [public.id]
