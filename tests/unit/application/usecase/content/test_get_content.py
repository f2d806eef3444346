"""Unit tests for GetContentUseCase."""

import pytest

from debatify.application.usecase.content import GetContentRequest, GetContentUseCase
from debatify.domain.error import AccessDeniedError
from debatify.domain.repository import ContentRepository
from debatify.domain.value import ContentKind
from tests.conftest import make_item, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetContent:
    """Tests for reading one item."""

    @pytest.mark.asyncio
    async def test_read_counts_view_and_formats(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetContentUseCase)
        content_repo = await unit_env.get(ContentRepository)
        item = await content_repo.create(make_item(make_user(), views=1499))

        # Act
        view = await use_case.execute(
            GetContentRequest(kind=ContentKind.DISCUSSION, content_id=str(item.id))
        )

        # Assert
        assert view.views == 1500
        assert view.views_formatted == "1.50K"
        assert view.is_bookmarked is False

    @pytest.mark.asyncio
    async def test_poll_does_not_count(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetContentUseCase)
        content_repo = await unit_env.get(ContentRepository)
        item = await content_repo.create(make_item(make_user()))

        # Act
        view = await use_case.execute(
            GetContentRequest(
                kind=ContentKind.DISCUSSION, content_id=str(item.id), is_poll=True
            )
        )

        # Assert
        assert view.views == 0

    @pytest.mark.asyncio
    async def test_wrong_passcode_counts_nothing(self, unit_env):
        """A rejected read of a private item leaves the view count alone."""
        # Arrange
        use_case = await unit_env.get(GetContentUseCase)
        content_repo = await unit_env.get(ContentRepository)
        item = await content_repo.create(
            make_item(
                make_user(), kind=ContentKind.BLOG, is_private=True, passcode="pw"
            )
        )

        # Act & Assert
        with pytest.raises(AccessDeniedError):
            await use_case.execute(
                GetContentRequest(
                    kind=ContentKind.BLOG, content_id=str(item.id), passcode="nope"
                )
            )
        stored = await content_repo.find_by_id(item.id)
        assert stored.views == 0

        view = await use_case.execute(
            GetContentRequest(
                kind=ContentKind.BLOG, content_id=str(item.id), passcode="pw"
            )
        )
        assert view.views == 1
        assert "passcode" not in view.model_dump()
